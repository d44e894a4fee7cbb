"""Thermodynamic state of a fluid and its time derivative."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from thermokit.integrate import step as _step

__all__ = ["State", "StateDerivative"]

F = TypeVar("F")


@dataclass(frozen=True)
class StateDerivative:
    """Rate of change of a state: K/s, kg/(m³·s), and the fluid's own derivative.

    A fluid derivative of ``None`` means the fluid does not change over time.
    """

    temperature: float
    density: float
    fluid: Any = None


@dataclass(frozen=True)
class State(Generic[F]):
    """Temperature (K), density (kg/m³) and fluid-specific data."""

    temperature: float
    density: float
    fluid: F

    def with_temperature(self, temperature: float) -> State[F]:
        """Return a copy with a new temperature."""
        return dataclasses.replace(self, temperature=temperature)

    def with_density(self, density: float) -> State[F]:
        """Return a copy with a new density."""
        return dataclasses.replace(self, density=density)

    def with_fluid(self, fluid: F) -> State[F]:
        """Return a copy with a new fluid."""
        return dataclasses.replace(self, fluid=fluid)

    def step(self, derivative: StateDerivative, dt: float) -> State[F]:
        """Return the state advanced by ``derivative`` over ``dt`` seconds."""
        return State(
            temperature=_step(self.temperature, derivative.temperature, dt),
            density=_step(self.density, derivative.density, dt),
            fluid=_step(self.fluid, derivative.fluid, dt),
        )