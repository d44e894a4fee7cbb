"""Heat, work and mass flows across a system boundary.

Every flow uses the same sign convention: positive means into the system.
Work is therefore positive when done on the system, the same way as heat
and mass.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from thermokit.errors import ConstraintError, NotANumberError, require_strictly_positive
from thermokit.state import State
from thermokit.stream import Stream

__all__ = ["FlowDirection", "HeatFlow", "WorkFlow", "MassFlow"]

F = TypeVar("F")


class FlowDirection(Enum):
    """Direction of a flow relative to the system."""

    IN = "in"
    OUT = "out"
    NONE = "none"


def _signed_rate(direction: FlowDirection, rate: float) -> float:
    if direction is FlowDirection.IN:
        return rate
    if direction is FlowDirection.OUT:
        return -rate
    return 0.0


@dataclass(frozen=True)
class _PowerFlow:
    """A rate of energy transfer (W) with a direction."""

    direction: FlowDirection
    rate: float = 0.0

    def __post_init__(self) -> None:
        if self.direction is FlowDirection.NONE:
            if self.rate != 0.0:
                raise ConstraintError("a flow with no direction must have a zero rate")
            object.__setattr__(self, "rate", 0.0)
        else:
            object.__setattr__(self, "rate", require_strictly_positive(self.rate))

    @classmethod
    def _classify(cls, value: float) -> Any:
        number = float(value)
        if math.isnan(number):
            raise NotANumberError("flow rate is not a number")
        if number > 0.0:
            return cls(FlowDirection.IN, number)
        if number < 0.0:
            return cls(FlowDirection.OUT, -number)
        return cls(FlowDirection.NONE)


class HeatFlow(_PowerFlow):
    """Heat transfer across a system boundary."""

    @classmethod
    def incoming(cls, heat_rate: float) -> HeatFlow:
        """Return heat flowing into the system; the rate must be strictly positive."""
        return cls(FlowDirection.IN, heat_rate)

    @classmethod
    def outgoing(cls, heat_rate: float) -> HeatFlow:
        """Return heat flowing out of the system; the rate must be strictly positive."""
        return cls(FlowDirection.OUT, heat_rate)

    @classmethod
    def none(cls) -> HeatFlow:
        """Return a flow representing no heat transfer."""
        return cls(FlowDirection.NONE)

    @classmethod
    def from_signed(cls, heat_rate: float) -> HeatFlow:
        """Classify a signed heat rate: positive in, negative out, zero none.

        Raises :class:`NotANumberError` for NaN.
        """
        return cls._classify(heat_rate)

    def signed(self) -> float:
        """Return the heat rate, positive into the system and negative out of it."""
        return _signed_rate(self.direction, self.rate)


class WorkFlow(_PowerFlow):
    """Work transfer across a system boundary, positive when done on the system."""

    @classmethod
    def incoming(cls, work_rate: float) -> WorkFlow:
        """Return work flowing into the system; the rate must be strictly positive."""
        return cls(FlowDirection.IN, work_rate)

    @classmethod
    def outgoing(cls, work_rate: float) -> WorkFlow:
        """Return work flowing out of the system; the rate must be strictly positive."""
        return cls(FlowDirection.OUT, work_rate)

    @classmethod
    def none(cls) -> WorkFlow:
        """Return a flow representing no work transfer."""
        return cls(FlowDirection.NONE)

    @classmethod
    def from_signed(cls, work_rate: float) -> WorkFlow:
        """Classify a signed work rate: positive in, negative out, zero none.

        Raises :class:`NotANumberError` for NaN.
        """
        return cls._classify(work_rate)

    def signed(self) -> float:
        """Return the work rate, positive into the system and negative out of it."""
        return _signed_rate(self.direction, self.rate)


@dataclass(frozen=True)
class MassFlow(Generic[F]):
    """Mass transfer (kg/s) across a system boundary.

    An incoming flow carries a :class:`Stream` with its own state. An
    outgoing flow leaves at the system's current state and has only a rate.
    """

    direction: FlowDirection
    rate: float = 0.0
    stream: Stream[F] | None = None

    def __post_init__(self) -> None:
        if self.direction is FlowDirection.IN:
            if self.stream is None:
                raise ConstraintError("an incoming mass flow needs a stream")
            object.__setattr__(self, "rate", self.stream.rate)
            return
        if self.stream is not None:
            raise ConstraintError("only an incoming mass flow carries a stream")
        if self.direction is FlowDirection.OUT:
            object.__setattr__(self, "rate", require_strictly_positive(self.rate))
        else:
            if self.rate != 0.0:
                raise ConstraintError("a flow with no direction must have a zero rate")
            object.__setattr__(self, "rate", 0.0)

    @classmethod
    def incoming(cls, mass_rate: float, state: State[F]) -> MassFlow[F]:
        """Return mass flowing in at ``state``; the rate must be strictly positive."""
        return cls(FlowDirection.IN, stream=Stream(mass_rate, state))

    @classmethod
    def outgoing(cls, mass_rate: float) -> MassFlow[Any]:
        """Return mass flowing out; the rate must be strictly positive."""
        return cls(FlowDirection.OUT, mass_rate)

    @classmethod
    def none(cls) -> MassFlow[Any]:
        """Return a flow representing no mass transfer."""
        return cls(FlowDirection.NONE)

    @classmethod
    def balanced_pair(cls, stream: Stream[F]) -> tuple[MassFlow[F], MassFlow[F]]:
        """Return an inflow of ``stream`` and an equal outflow at the system state."""
        return cls(FlowDirection.IN, stream=stream), cls(FlowDirection.OUT, stream.rate)

    def signed_mass_rate(self) -> float:
        """Return the rate, positive into the system and negative out of it."""
        return _signed_rate(self.direction, self.rate)