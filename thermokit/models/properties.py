"""Interface shared by thermodynamic property models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from thermokit.state import State

__all__ = ["ThermodynamicProperties"]


class ThermodynamicProperties(ABC):
    """Computes thermodynamic properties from a fluid's state.

    A model either works with any fluid offering a capability (for example
    every ideal-gas fluid) or targets one specific fluid. Property methods
    raise :class:`thermokit.errors.PropertyError` when a value cannot be
    computed.
    """

    @abstractmethod
    def pressure(self, state: State[Any]) -> float:
        """Return the pressure in Pa."""

    @abstractmethod
    def internal_energy(self, state: State[Any]) -> float:
        """Return the specific internal energy in J/kg."""

    @abstractmethod
    def enthalpy(self, state: State[Any]) -> float:
        """Return the specific enthalpy in J/kg."""

    @abstractmethod
    def entropy(self, state: State[Any]) -> float:
        """Return the specific entropy in J/(kg·K)."""

    @abstractmethod
    def cp(self, state: State[Any]) -> float:
        """Return the specific heat at constant pressure in J/(kg·K)."""

    @abstractmethod
    def cv(self, state: State[Any]) -> float:
        """Return the specific heat at constant volume in J/(kg·K)."""

    def state_from(
        self,
        fluid: Any,
        *,
        temperature: float | None = None,
        density: float | None = None,
        pressure: float | None = None,
    ) -> State[Any]:
        """Create a state from a combination of keyword inputs.

        Every model accepts ``temperature`` with ``density``. Subclasses add
        the other combinations they support. ``fluid`` may be a fluid
        instance or a fluid class, which is then created with no arguments.

        Raises ``TypeError`` for a combination the model does not support.
        """
        if temperature is not None and density is not None and pressure is None:
            instance = fluid() if isinstance(fluid, type) else fluid
            return State(
                temperature=float(temperature),
                density=float(density),
                fluid=instance,
            )
        given = [
            name
            for name, value in (
                ("temperature", temperature),
                ("density", density),
                ("pressure", pressure),
            )
            if value is not None
        ]
        raise TypeError(
            f"{type(self).__name__} cannot create a state from "
            f"{', '.join(given) if given else 'no inputs'}"
        )