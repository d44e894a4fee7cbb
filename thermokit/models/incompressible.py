"""Incompressible liquid property model with constant specific heat."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from thermokit.errors import PropertyNotImplementedError
from thermokit.models.properties import ThermodynamicProperties
from thermokit.state import State
from thermokit.units import temperature_difference

__all__ = ["IncompressibleFluid", "Incompressible"]


class IncompressibleFluid(ABC):
    """Constants that define a fluid modelled as an incompressible liquid."""

    @abstractmethod
    def specific_heat(self) -> float:
        """Return the constant specific heat in J/(kg·K)."""

    @abstractmethod
    def reference_temperature(self) -> float:
        """Return the reference temperature for enthalpy and entropy, in K."""

    @abstractmethod
    def reference_density(self) -> float:
        """Return the reference density in kg/m³.

        Used as the density of states created from temperature alone.
        """

    def reference_enthalpy(self) -> float:
        """Return the enthalpy at the reference temperature; zero by default."""
        return 0.0

    def reference_entropy(self) -> float:
        """Return the entropy at the reference temperature; zero by default."""
        return 0.0


def _instance(fluid: Any) -> Any:
    return fluid() if isinstance(fluid, type) else fluid


class Incompressible(ThermodynamicProperties):
    """Incompressible behaviour with constant specific heat."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Incompressible)

    def __hash__(self) -> int:
        return hash(Incompressible)

    def __repr__(self) -> str:
        return "Incompressible()"

    def reference_state(self, fluid: Any) -> State[Any]:
        """Return a state at the fluid's reference temperature and density."""
        fluid = _instance(fluid)
        return State(
            temperature=fluid.reference_temperature(),
            density=fluid.reference_density(),
            fluid=fluid,
        )

    def pressure(self, state: State[Any]) -> float:
        """Always raise: pressure is not a property of an incompressible liquid."""
        raise PropertyNotImplementedError(
            "pressure",
            "pressure is not a thermodynamic property of an incompressible liquid.",
        )

    def internal_energy(self, state: State[Any]) -> float:
        """Return the internal energy, equal to the enthalpy."""
        return self.enthalpy(state)

    def enthalpy(self, state: State[Any]) -> float:
        """Return ``h = h₀ + c·(T − T₀)``."""
        fluid = state.fluid
        return fluid.reference_enthalpy() + fluid.specific_heat() * temperature_difference(
            state.temperature, fluid.reference_temperature()
        )

    def entropy(self, state: State[Any]) -> float:
        """Return ``s = s₀ + c·ln(T/T₀)``."""
        fluid = state.fluid
        return fluid.reference_entropy() + fluid.specific_heat() * math.log(
            state.temperature / fluid.reference_temperature()
        )

    def cp(self, state: State[Any]) -> float:
        """Return the fluid's constant specific heat."""
        return state.fluid.specific_heat()

    def cv(self, state: State[Any]) -> float:
        """Return the fluid's constant specific heat."""
        return state.fluid.specific_heat()

    def state_from(
        self,
        fluid: Any,
        *,
        temperature: float | None = None,
        density: float | None = None,
        pressure: float | None = None,
    ) -> State[Any]:
        """Create a state from temperature alone, at the reference density,
        or from temperature with density."""
        if temperature is not None and density is None and pressure is None:
            fluid = _instance(fluid)
            return super().state_from(
                fluid, temperature=temperature, density=fluid.reference_density()
            )
        return super().state_from(
            fluid, temperature=temperature, density=density, pressure=pressure
        )