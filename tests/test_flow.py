import math

import pytest

from thermokit.errors import ConstraintError, NotANumberError
from thermokit.flow import FlowDirection, HeatFlow, MassFlow, WorkFlow
from thermokit.fluids import Air
from thermokit.state import State
from thermokit.stream import Stream


def default_state():
    return State(temperature=300.0, density=1.0, fluid=Air())


# Heat flow


def test_heat_incoming_is_positive():
    flow = HeatFlow.incoming(100.0)
    assert flow.direction is FlowDirection.IN
    assert flow.signed() == pytest.approx(100.0)


def test_heat_outgoing_is_negative():
    flow = HeatFlow.outgoing(200.0)
    assert flow.direction is FlowDirection.OUT
    assert flow.signed() == pytest.approx(-200.0)


def test_heat_none_is_zero():
    flow = HeatFlow.none()
    assert flow.direction is FlowDirection.NONE
    assert flow.signed() == 0.0


def test_heat_from_signed_classifies_correctly():
    assert HeatFlow.from_signed(50.0).direction is FlowDirection.IN
    assert HeatFlow.from_signed(-75.0).direction is FlowDirection.OUT
    assert HeatFlow.from_signed(0.0).direction is FlowDirection.NONE


def test_heat_from_signed_round_trips():
    for value in (50.0, -75.0, 0.0):
        assert HeatFlow.from_signed(value).signed() == pytest.approx(value)


def test_heat_rejects_nan():
    with pytest.raises(NotANumberError):
        HeatFlow.from_signed(math.nan)


@pytest.mark.parametrize("rate", [-1.0, 0.0])
def test_heat_rejects_non_positive_incoming(rate):
    with pytest.raises(ConstraintError):
        HeatFlow.incoming(rate)


def test_heat_none_with_rate_is_rejected():
    with pytest.raises(ConstraintError):
        HeatFlow(FlowDirection.NONE, 5.0)


# Work flow


def test_work_incoming_is_positive():
    flow = WorkFlow.incoming(150.0)
    assert flow.direction is FlowDirection.IN
    assert flow.signed() == pytest.approx(150.0)


def test_work_outgoing_is_negative():
    flow = WorkFlow.outgoing(250.0)
    assert flow.direction is FlowDirection.OUT
    assert flow.signed() == pytest.approx(-250.0)


def test_work_none_is_zero():
    assert WorkFlow.none().signed() == 0.0


def test_work_from_signed_classifies_correctly():
    assert WorkFlow.from_signed(75.0).direction is FlowDirection.IN
    assert WorkFlow.from_signed(-50.0).direction is FlowDirection.OUT
    assert WorkFlow.from_signed(0.0).direction is FlowDirection.NONE


def test_work_rejects_nan():
    with pytest.raises(NotANumberError):
        WorkFlow.from_signed(math.nan)


@pytest.mark.parametrize("rate", [-1.0, 0.0])
def test_work_rejects_non_positive_incoming(rate):
    with pytest.raises(ConstraintError):
        WorkFlow.incoming(rate)


def test_heat_and_work_are_distinct():
    assert HeatFlow.incoming(10.0) != WorkFlow.incoming(10.0)
    assert HeatFlow.incoming(10.0) == HeatFlow.incoming(10.0)


# Mass flow


def test_incoming_mass_is_positive():
    flow = MassFlow.incoming(1.5, default_state())
    assert flow.direction is FlowDirection.IN
    assert flow.stream.state == default_state()
    assert flow.signed_mass_rate() == pytest.approx(1.5)


def test_outgoing_mass_is_negative():
    flow = MassFlow.outgoing(0.8)
    assert flow.direction is FlowDirection.OUT
    assert flow.signed_mass_rate() == pytest.approx(-0.8)


def test_none_mass_is_zero():
    assert MassFlow.none().signed_mass_rate() == 0.0


@pytest.mark.parametrize("rate", [-1.0, 0.0])
def test_mass_rejects_non_positive_incoming(rate):
    with pytest.raises(ConstraintError):
        MassFlow.incoming(rate, default_state())


@pytest.mark.parametrize("rate", [-0.5, 0.0])
def test_mass_rejects_non_positive_outgoing(rate):
    with pytest.raises(ConstraintError):
        MassFlow.outgoing(rate)


def test_incoming_mass_requires_stream():
    with pytest.raises(ConstraintError):
        MassFlow(FlowDirection.IN, 1.0)


def test_balanced_pair_produces_equal_and_opposite_flows():
    flow_in, flow_out = MassFlow.balanced_pair(Stream(2.0, default_state()))

    assert flow_in.direction is FlowDirection.IN
    assert flow_out.direction is FlowDirection.OUT

    m_dot_in = flow_in.signed_mass_rate()
    m_dot_out = flow_out.signed_mass_rate()

    assert m_dot_in == pytest.approx(2.0)
    assert m_dot_out == pytest.approx(-2.0)
    assert m_dot_in + m_dot_out == 0.0