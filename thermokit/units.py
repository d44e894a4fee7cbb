"""Unit conventions and temperature helpers.

All quantities are plain floats in SI base units: kelvin for temperature,
kg/m³ for density, pascal for pressure, J/kg for specific energies and
J/(kg·K) for specific heats, entropies and gas constants.
"""

from __future__ import annotations

from typing import TypeAlias

__all__ = [
    "ZERO_CELSIUS",
    "STANDARD_ATMOSPHERE",
    "SpecificGasConstant",
    "SpecificEnthalpy",
    "SpecificEntropy",
    "SpecificInternalEnergy",
    "temperature_difference",
    "celsius_to_kelvin",
    "kelvin_to_celsius",
    "fahrenheit_to_kelvin",
]

ZERO_CELSIUS = 273.15
"""Absolute temperature of 0 °C, in K."""

STANDARD_ATMOSPHERE = 101_325.0
"""One standard atmosphere, in Pa."""

SpecificGasConstant: TypeAlias = float
SpecificEnthalpy: TypeAlias = float
SpecificEntropy: TypeAlias = float
SpecificInternalEnergy: TypeAlias = float


def temperature_difference(temperature: float, other: float) -> float:
    """Return the temperature interval ``temperature - other`` in K."""
    return float(temperature) - float(other)


def celsius_to_kelvin(value: float) -> float:
    """Convert a temperature in °C to K."""
    return float(value) + ZERO_CELSIUS


def kelvin_to_celsius(value: float) -> float:
    """Convert a temperature in K to °C."""
    return float(value) - ZERO_CELSIUS


def fahrenheit_to_kelvin(value: float) -> float:
    """Convert a temperature in °F to K."""
    return (float(value) - 32.0) * 5.0 / 9.0 + ZERO_CELSIUS