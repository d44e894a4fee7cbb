"""Line plots of named data series."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = ["PlotApp", "main"]


@dataclass(frozen=True)
class _Series:
    name: str
    points: tuple[tuple[float, float], ...]


class PlotApp:
    """A window showing one line per named series, with a legend."""

    def __init__(self) -> None:
        self._series: list[_Series] = []

    def add_series(self, name: str, points: Iterable[Sequence[float]]) -> PlotApp:
        """Add a series of ``(x, y)`` points and return the app for chaining."""
        pairs = []
        for point in points:
            if len(point) != 2:
                raise ValueError(f"a point needs exactly two coordinates, got {point!r}")
            x, y = point
            pairs.append((float(x), float(y)))
        self._series.append(_Series(str(name), tuple(pairs)))
        return self

    def run(self, name: str) -> Any:
        """Show the plot in a window titled ``name`` and return its figure."""
        import matplotlib.pyplot as plt

        figure = plt.figure(num=name)
        manager = figure.canvas.manager
        if manager is not None:
            manager.set_window_title(name)
        axes = figure.add_subplot()
        for series in self._series:
            xs = [x for x, _ in series.points]
            ys = [y for _, y in series.points]
            axes.plot(xs, ys, label=series.name)
        if self._series:
            axes.legend()
        plt.show()
        return figure


def main(argv: Sequence[str] | None = None) -> int:
    """Show an example plot of two series."""
    parser = argparse.ArgumentParser(description="Show an example line plot.")
    parser.parse_args(argv)

    app = (
        PlotApp()
        .add_series(
            "first series",
            [(0.0, 1.0), (1.0, 3.0), (2.0, 1.0), (3.0, 2.0), (4.0, 2.5), (5.0, 0.5)],
        )
        .add_series(
            "second series",
            [(0.0, 2.0), (1.0, 0.5), (2.0, 0.25), (3.0, 0.5), (4.0, 1.0), (5.0, 2.0)],
        )
    )
    app.run("Example Plot")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())