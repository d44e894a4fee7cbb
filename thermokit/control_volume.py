"""Transient mass and energy balances on a well-mixed, fixed control volume."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from thermokit.errors import require_strictly_positive
from thermokit.flow import FlowDirection, HeatFlow, MassFlow, WorkFlow
from thermokit.state import State, StateDerivative

__all__ = ["BoundaryFlow", "ControlVolume", "net_mass_flow"]

F = TypeVar("F")

BoundaryFlow = Union[MassFlow[Any], HeatFlow, WorkFlow]
"""A mass, heat or work flow across the boundary of a control volume."""


def net_mass_flow(flows: Iterable[BoundaryFlow]) -> float:
    """Return the net mass flow rate (kg/s) into a control volume.

    Inflows count positive and outflows negative; heat and work flows are
    ignored.
    """
    return sum(
        (flow.signed_mass_rate() for flow in flows if isinstance(flow, MassFlow)),
        0.0,
    )


@dataclass(frozen=True)
class ControlVolume(Generic[F]):
    """A finite, well-mixed region of fluid with a fixed volume (m³).

    The internal state is spatially uniform, mass leaves at that state, and
    changes in kinetic and potential energy are neglected. Construction raises
    :class:`thermokit.errors.ConstraintError` if the volume is not strictly
    positive.
    """

    volume: float
    state: State[F]

    def __post_init__(self) -> None:
        object.__setattr__(self, "volume", require_strictly_positive(self.volume))

    def net_energy_flow(self, flows: Iterable[BoundaryFlow], model: Any) -> float:
        """Return the net energy flow rate (W) into the control volume.

        Inflowing mass carries its own enthalpy, outflowing mass carries the
        enthalpy of the internal state. Raises
        :class:`thermokit.errors.PropertyError` if an enthalpy cannot be
        computed and ``TypeError`` for an unknown kind of flow.
        """
        h_cv = model.enthalpy(self.state)
        total = 0.0
        for flow in flows:
            if isinstance(flow, MassFlow):
                if flow.direction is FlowDirection.IN:
                    total += flow.stream.enthalpy_flow(model)
                elif flow.direction is FlowDirection.OUT:
                    total -= flow.rate * h_cv
            elif isinstance(flow, (HeatFlow, WorkFlow)):
                total += flow.signed()
            else:
                raise TypeError(f"not a boundary flow: {flow!r}")
        return total

    def state_derivative(
        self, flows: Iterable[BoundaryFlow], model: Any
    ) -> StateDerivative:
        """Return the time derivative of the internal state.

        Solves the mass and energy balances for a fixed, well-mixed volume::

            dρ/dt = (Σṁ_in − Σṁ_out) / V
            dT/dt = (Q̇ + Ẇ + Σṁ_in·h_in − Σṁ_out·h − u·V·dρ/dt) / (ρ·V·cv)

        The fluid itself is taken not to change over time. Raises
        :class:`thermokit.errors.PropertyError` if a property cannot be
        computed.
        """
        flows = tuple(flows)
        heat_capacity = self.volume * self.state.density * model.cv(self.state)

        m_dot_net = net_mass_flow(flows)
        q_dot_net = self.net_energy_flow(flows, model)

        if m_dot_net == 0.0:
            rho_dt = 0.0
            temp_dt = q_dot_net / heat_capacity
        else:
            u = model.internal_energy(self.state)
            rho_dt = m_dot_net / self.volume
            temp_dt = (q_dot_net - m_dot_net * u) / heat_capacity

        return StateDerivative(temperature=temp_dt, density=rho_dt, fluid=None)