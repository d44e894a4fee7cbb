"""Errors raised by property models and value constraints."""

from __future__ import annotations

import math

__all__ = [
    "PropertyError",
    "PropertyNotImplementedError",
    "PropertyUndefinedError",
    "InvalidInputError",
    "CalculationError",
    "ConstraintError",
    "NotANumberError",
    "require_strictly_positive",
]


class PropertyError(Exception):
    """Base class for errors that occur when evaluating thermodynamic properties."""


class PropertyNotImplementedError(PropertyError):
    """The property is not supported by the model, regardless of the state."""

    def __init__(self, property_name: str, context: str | None = None) -> None:
        super().__init__(f"property `{property_name}` is not implemented by this model")
        self.property_name = property_name
        self.context = context


class PropertyUndefinedError(PropertyError):
    """The property is undefined at the given state."""

    def __init__(self, property_name: str, context: str | None = None) -> None:
        super().__init__(f"property `{property_name}` is undefined at the given state")
        self.property_name = property_name
        self.context = context


class InvalidInputError(PropertyError):
    """The inputs are physically invalid or outside the model's valid domain."""

    def __init__(self, message: str) -> None:
        super().__init__(f"invalid input: {message}")
        self.detail = message


class CalculationError(PropertyError):
    """The calculation failed due to a numerical or internal error."""

    def __init__(self, message: str) -> None:
        super().__init__(f"calculation error: {message}")
        self.detail = message


class ConstraintError(ValueError):
    """A value does not satisfy a required constraint."""


class NotANumberError(ConstraintError):
    """A value is NaN and cannot be classified."""


def require_strictly_positive(value: float) -> float:
    """Return ``value`` as a float if it is strictly positive, else raise."""
    number = float(value)
    if math.isnan(number):
        raise NotANumberError("value is not a number")
    if number <= 0.0:
        raise ConstraintError(f"value must be strictly positive, got {number}")
    return number