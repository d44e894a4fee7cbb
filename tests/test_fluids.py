import pytest

from thermokit.fluids import (
    Air,
    CarbonDioxide,
    IdealGasCustom,
    IncompressibleCustom,
    Water,
)
from thermokit.models.ideal_gas import IdealGas
from thermokit.models.incompressible import Incompressible
from thermokit.state import StateDerivative


def test_air_constants():
    air = Air()
    assert air.gas_constant() == 287.053
    assert air.cp() == 1005.0
    assert air.reference_temperature() == pytest.approx(273.15)
    assert air.reference_pressure() == 101_325.0


def test_carbon_dioxide_constants():
    co2 = CarbonDioxide()
    assert co2.gas_constant() == 188.92
    assert co2.cp() == 844.0
    assert co2.reference_temperature() == pytest.approx(273.15)
    assert co2.reference_pressure() == 101_325.0


def test_water_constants():
    water = Water()
    assert water.specific_heat() == 4184.0
    assert water.reference_temperature() == pytest.approx(298.15)
    assert water.reference_density() == 997.047


def test_stateless_fluids_are_equal_and_hashable():
    assert Air() == Air()
    assert Water() == Water()
    assert Air() != CarbonDioxide()
    assert len({Air(), Air(), Water()}) == 2


@pytest.mark.parametrize("fluid", [Air(), CarbonDioxide()])
def test_ideal_gas_reference_state_round_trips_pressure(fluid):
    model = IdealGas()
    state = model.reference_state(fluid)
    assert model.pressure(state) == pytest.approx(fluid.reference_pressure())
    assert model.enthalpy(state) == pytest.approx(0.0)
    assert model.entropy(state) == pytest.approx(0.0)


def test_water_state_from_temperature_uses_reference_density():
    state = Incompressible().state_from(Water, temperature=320.0)
    assert state.fluid == Water()
    assert state.density == 997.047
    assert state.temperature == 320.0


def test_stepping_state_keeps_stateless_fluid():
    state = Incompressible().reference_state(Water())
    stepped = state.step(StateDerivative(temperature=2.0, density=0.0), 3.0)
    assert stepped.fluid == Water()
    assert stepped.temperature == pytest.approx(state.temperature + 6.0)


def test_ideal_gas_custom_returns_its_values():
    gas = IdealGasCustom(
        name="mock",
        specific_gas_constant=400.0,
        heat_capacity=1000.0,
        ref_temperature=273.15,
        ref_pressure=101_325.0,
    )
    assert gas.gas_constant() == 400.0
    assert gas.cp() == 1000.0
    assert gas.reference_temperature() == 273.15
    assert gas.reference_pressure() == 101_325.0
    assert IdealGas().cv(IdealGas().reference_state(gas)) == pytest.approx(600.0)


def test_incompressible_custom_returns_its_values():
    liquid = IncompressibleCustom(
        heat_capacity=2000.0, ref_temperature=300.0, ref_density=800.0
    )
    assert liquid.name is None
    assert liquid.specific_heat() == 2000.0
    assert liquid.reference_temperature() == 300.0
    assert liquid.reference_density() == 800.0
    state = Incompressible().reference_state(liquid)
    assert state.density == 800.0
    assert Incompressible().cp(state) == 2000.0


def test_custom_fluid_equality_includes_name():
    a = IncompressibleCustom(
        name="a", heat_capacity=1.0, ref_temperature=1.0, ref_density=1.0
    )
    b = IncompressibleCustom(
        name="b", heat_capacity=1.0, ref_temperature=1.0, ref_density=1.0
    )
    assert a != b
    assert a == IncompressibleCustom(
        name="a", heat_capacity=1.0, ref_temperature=1.0, ref_density=1.0
    )