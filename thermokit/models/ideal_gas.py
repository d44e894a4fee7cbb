"""Ideal gas property model with constant specific heat."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from thermokit.models.properties import ThermodynamicProperties
from thermokit.state import State
from thermokit.units import temperature_difference

__all__ = [
    "IdealGasFluid",
    "IdealGas",
    "ideal_gas_pressure",
    "ideal_gas_density",
    "ideal_gas_temperature",
]


def ideal_gas_pressure(temperature: float, density: float, gas_constant: float) -> float:
    """Return pressure (Pa) from ``P = ρ·R·T``."""
    return density * gas_constant * temperature


def ideal_gas_density(temperature: float, pressure: float, gas_constant: float) -> float:
    """Return density (kg/m³) from ``ρ = P / (R·T)``."""
    return pressure / (gas_constant * temperature)


def ideal_gas_temperature(pressure: float, density: float, gas_constant: float) -> float:
    """Return absolute temperature (K) from ``T = P / (ρ·R)``."""
    return pressure / (density * gas_constant)


class IdealGasFluid(ABC):
    """Constants that define a fluid modelled as an ideal gas."""

    @abstractmethod
    def gas_constant(self) -> float:
        """Return the specific gas constant R in J/(kg·K)."""

    @abstractmethod
    def cp(self) -> float:
        """Return the specific heat at constant pressure in J/(kg·K)."""

    @abstractmethod
    def reference_temperature(self) -> float:
        """Return the reference temperature for enthalpy and entropy, in K."""

    @abstractmethod
    def reference_pressure(self) -> float:
        """Return the reference pressure for entropy, in Pa."""

    def reference_enthalpy(self) -> float:
        """Return the enthalpy at the reference temperature; zero by default."""
        return 0.0

    def reference_entropy(self) -> float:
        """Return the entropy at the reference state; zero by default."""
        return 0.0


def _instance(fluid: Any) -> Any:
    return fluid() if isinstance(fluid, type) else fluid


class IdealGas(ThermodynamicProperties):
    """Ideal gas behaviour with constant specific heat."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IdealGas)

    def __hash__(self) -> int:
        return hash(IdealGas)

    def __repr__(self) -> str:
        return "IdealGas()"

    def reference_state(self, fluid: Any) -> State[Any]:
        """Return a state at the fluid's reference temperature and pressure."""
        fluid = _instance(fluid)
        temperature = fluid.reference_temperature()
        density = ideal_gas_density(
            temperature, fluid.reference_pressure(), fluid.gas_constant()
        )
        return State(temperature=temperature, density=density, fluid=fluid)

    def pressure(self, state: State[Any]) -> float:
        """Return ``P = ρ·R·T``."""
        return ideal_gas_pressure(
            state.temperature, state.density, state.fluid.gas_constant()
        )

    def internal_energy(self, state: State[Any]) -> float:
        """Return ``u = h − R·T``."""
        return self.enthalpy(state) - state.fluid.gas_constant() * state.temperature

    def enthalpy(self, state: State[Any]) -> float:
        """Return ``h = h₀ + cp·(T − T₀)``."""
        fluid = state.fluid
        return fluid.reference_enthalpy() + fluid.cp() * temperature_difference(
            state.temperature, fluid.reference_temperature()
        )

    def entropy(self, state: State[Any]) -> float:
        """Return ``s = s₀ + cp·ln(T/T₀) − R·ln(P/P₀)``."""
        fluid = state.fluid
        p = self.pressure(state)
        return (
            fluid.reference_entropy()
            + fluid.cp() * math.log(state.temperature / fluid.reference_temperature())
            - fluid.gas_constant() * math.log(p / fluid.reference_pressure())
        )

    def cp(self, state: State[Any]) -> float:
        """Return the fluid's constant ``cp``."""
        return state.fluid.cp()

    def cv(self, state: State[Any]) -> float:
        """Return ``cv = cp − R``."""
        return state.fluid.cp() - state.fluid.gas_constant()

    def state_from(
        self,
        fluid: Any,
        *,
        temperature: float | None = None,
        density: float | None = None,
        pressure: float | None = None,
    ) -> State[Any]:
        """Create a state from temperature with density or pressure, or from
        pressure with density."""
        if pressure is not None and temperature is not None and density is None:
            fluid = _instance(fluid)
            density = ideal_gas_density(temperature, pressure, fluid.gas_constant())
            return super().state_from(fluid, temperature=temperature, density=density)
        if pressure is not None and density is not None and temperature is None:
            fluid = _instance(fluid)
            temperature = ideal_gas_temperature(pressure, density, fluid.gas_constant())
            return super().state_from(fluid, temperature=temperature, density=density)
        return super().state_from(
            fluid, temperature=temperature, density=density, pressure=pressure
        )