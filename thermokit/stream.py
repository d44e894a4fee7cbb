"""Steady flow of fluid at a thermodynamic state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from thermokit.errors import require_strictly_positive
from thermokit.state import State

__all__ = ["Stream"]

F = TypeVar("F")


@dataclass(frozen=True)
class Stream(Generic[F]):
    """A strictly positive mass flow rate (kg/s) of fluid at a state.

    Transports mass and energy without storing either. Construction raises
    :class:`thermokit.errors.ConstraintError` if the rate is not strictly
    positive; use ``None`` for an inactive stream.
    """

    rate: float
    state: State[F]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", require_strictly_positive(self.rate))

    def enthalpy_flow(self, model: Any) -> float:
        """Return the enthalpy flow rate ``ṁ·h`` in W."""
        return self.rate * model.enthalpy(self.state)