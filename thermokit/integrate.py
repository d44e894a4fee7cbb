"""Forward time integration of values and dataclasses of values."""

from __future__ import annotations

import dataclasses
import re
from typing import Any

__all__ = [
    "step",
    "time_integrable",
    "upper_camel_case",
    "with_prefix",
    "with_suffix",
]

_UNSUPPORTED = (
    "Unsupported struct type. This macro requires a struct with named fields."
)

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+[0-9]*|[0-9]+")


def step(value: Any, derivative: Any, dt: float) -> Any:
    """Advance ``value`` by ``derivative`` over the time ``dt`` (seconds).

    A derivative of ``None`` leaves the value unchanged. Values with their own
    ``step`` method are delegated to it; anything else takes an explicit
    Euler step ``value + derivative * dt``.
    """
    if derivative is None:
        return value
    own_step = getattr(value, "step", None)
    if callable(own_step):
        return own_step(derivative, dt)
    return value + derivative * dt


def time_integrable(cls: type) -> type:
    """Make a dataclass time integrable, field by field.

    Adds a ``Derivative`` attribute holding a generated frozen dataclass named
    ``<ClassName>TimeDerivative`` with the same fields, and a ``step`` method
    that steps each field with its matching derivative.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(_UNSUPPORTED)

    names = tuple(f.name for f in dataclasses.fields(cls) if f.init)
    derivative_cls = dataclasses.make_dataclass(
        with_suffix(cls.__name__, "TimeDerivative"),
        [(name, Any) for name in names],
        frozen=True,
    )
    derivative_cls.__module__ = cls.__module__
    derivative_cls.__doc__ = f"Time derivative of {cls.__name__}."

    def _step(self: Any, derivative: Any, dt: float) -> Any:
        changes = {
            name: step(getattr(self, name), getattr(derivative, name), dt)
            for name in names
        }
        return dataclasses.replace(self, **changes)

    _step.__doc__ = "Return a copy advanced by ``derivative`` over ``dt``."
    _step.__qualname__ = f"{cls.__qualname__}.step"
    cls.step = _step
    cls.Derivative = derivative_cls
    return cls


def upper_camel_case(name: str) -> str:
    """Return ``name`` in UpperCamelCase."""
    return "".join(word[0].upper() + word[1:].lower() for word in _WORD.findall(name))


def with_prefix(name: str, prefix: str) -> str:
    """Return ``name`` with ``prefix`` prepended."""
    return f"{prefix}{name}"


def with_suffix(name: str, suffix: str) -> str:
    """Return ``name`` with ``suffix`` appended."""
    return f"{name}{suffix}"