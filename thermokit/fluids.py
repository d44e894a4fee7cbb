"""Built-in fluids and user-defined fluid types."""

from __future__ import annotations

from dataclasses import dataclass

from thermokit.models.ideal_gas import IdealGasFluid
from thermokit.models.incompressible import IncompressibleFluid
from thermokit.units import STANDARD_ATMOSPHERE, celsius_to_kelvin

__all__ = ["Air", "CarbonDioxide", "Water", "IdealGasCustom", "IncompressibleCustom"]


@dataclass(frozen=True)
class Air(IdealGasFluid):
    """Dry air modelled as an ideal gas."""

    def gas_constant(self) -> float:
        """Return R in J/(kg·K)."""
        return 287.053

    def cp(self) -> float:
        """Return cp in J/(kg·K)."""
        return 1005.0

    def reference_temperature(self) -> float:
        """Return 0 °C in K."""
        return celsius_to_kelvin(0.0)

    def reference_pressure(self) -> float:
        """Return one standard atmosphere in Pa."""
        return STANDARD_ATMOSPHERE


@dataclass(frozen=True)
class CarbonDioxide(IdealGasFluid):
    """Carbon dioxide modelled as an ideal gas."""

    def gas_constant(self) -> float:
        """Return R in J/(kg·K)."""
        return 188.92

    def cp(self) -> float:
        """Return cp in J/(kg·K)."""
        return 844.0

    def reference_temperature(self) -> float:
        """Return 0 °C in K."""
        return celsius_to_kelvin(0.0)

    def reference_pressure(self) -> float:
        """Return one standard atmosphere in Pa."""
        return STANDARD_ATMOSPHERE


@dataclass(frozen=True)
class Water(IncompressibleFluid):
    """Liquid water modelled as incompressible."""

    def specific_heat(self) -> float:
        """Return the specific heat in J/(kg·K)."""
        return 4184.0

    def reference_temperature(self) -> float:
        """Return 25 °C in K."""
        return celsius_to_kelvin(25.0)

    def reference_density(self) -> float:
        """Return the reference density in kg/m³."""
        return 997.047


@dataclass(frozen=True, kw_only=True)
class IdealGasCustom(IdealGasFluid):
    """User-defined ideal gas, all values in SI units."""

    specific_gas_constant: float
    heat_capacity: float
    ref_temperature: float
    ref_pressure: float
    name: str | None = None

    def gas_constant(self) -> float:
        """Return R in J/(kg·K)."""
        return self.specific_gas_constant

    def cp(self) -> float:
        """Return cp in J/(kg·K)."""
        return self.heat_capacity

    def reference_temperature(self) -> float:
        """Return the reference temperature in K."""
        return self.ref_temperature

    def reference_pressure(self) -> float:
        """Return the reference pressure in Pa."""
        return self.ref_pressure


@dataclass(frozen=True, kw_only=True)
class IncompressibleCustom(IncompressibleFluid):
    """User-defined incompressible fluid, all values in SI units."""

    heat_capacity: float
    ref_temperature: float
    ref_density: float
    name: str | None = None

    def specific_heat(self) -> float:
        """Return the specific heat in J/(kg·K)."""
        return self.heat_capacity

    def reference_temperature(self) -> float:
        """Return the reference temperature in K."""
        return self.ref_temperature

    def reference_density(self) -> float:
        """Return the reference density in kg/m³."""
        return self.ref_density