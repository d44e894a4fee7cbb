# thermokit

Thermodynamic and fluid property modeling for transient system models.

All quantities are plain floats in SI units. Temperatures are in K, densities
in kg/m³, pressures in Pa, rates of energy transfer in W, mass rates in kg/s,
specific energies in J/kg, and specific heats and entropies in J/(kg·K).

## What is in the package

- `thermokit.state`
  - `State(temperature, density, fluid)` is a frozen dataclass. It has the
    methods `with_temperature`, `with_density`, `with_fluid` and
    `step(derivative, dt)`.
  - `StateDerivative(temperature, density, fluid=None)` holds the rates of
    change of a state. A fluid derivative of `None` leaves the fluid unchanged.
- `thermokit.models.properties.ThermodynamicProperties` is the abstract
  interface for property models. It declares `pressure`, `internal_energy`,
  `enthalpy`, `entropy`, `cp` and `cv`. Its
  `state_from(fluid, *, temperature, density, pressure)` method accepts
  `temperature` with `density`.
- `thermokit.models.ideal_gas`
  - `IdealGas` works for any `IdealGasFluid`. Its `state_from` also accepts
    temperature with pressure, and pressure with density. It provides
    `reference_state(fluid)`.
  - The functions `ideal_gas_pressure`, `ideal_gas_density` and
    `ideal_gas_temperature` apply the ideal gas law directly.
- `thermokit.models.incompressible`
  - `Incompressible` works for any `IncompressibleFluid`. Its `state_from`
    also accepts temperature alone and then uses the fluid's reference
    density. `pressure` always raises `PropertyNotImplementedError`.
    Internal energy equals enthalpy, and `cp` and `cv` both return the
    constant specific heat.
- `thermokit.fluids`
  - `Air` and `CarbonDioxide` are ideal gases.
  - `Water` is incompressible.
  - `IdealGasCustom(specific_gas_constant=..., heat_capacity=..., ref_temperature=..., ref_pressure=..., name=None)`
    defines your own ideal gas.
  - `IncompressibleCustom(heat_capacity=..., ref_temperature=..., ref_density=..., name=None)`
    defines your own incompressible fluid.
- `thermokit.stream.Stream(rate, state)` is a strictly positive mass rate of
  fluid at a state. `enthalpy_flow(model)` returns `ṁ·h`.
- `thermokit.flow`
  - `HeatFlow` and `WorkFlow` are built with `incoming`, `outgoing`, `none`
    and `from_signed`, and report `signed()`.
  - `MassFlow` is built with `incoming(mass_rate, state)`,
    `outgoing(mass_rate)`, `none()` and `balanced_pair(stream)`, and reports
    `signed_mass_rate()`. Only an incoming mass flow carries a `Stream`. An
    outgoing flow leaves at the system's state.
  - `FlowDirection` is `IN`, `OUT` or `NONE`.
  - The sign convention is positive into the system, for work as well as for
    heat and mass.
- `thermokit.control_volume`
  - `ControlVolume(volume, state)` is a fixed, well-mixed volume. It has
    `net_energy_flow(flows, model)` and `state_derivative(flows, model)`.
    The flows can be any mix of `MassFlow`, `HeatFlow` and `WorkFlow`; the
    type alias for that mix is `BoundaryFlow`.
  - `net_mass_flow(flows)` sums the signed mass rates.
- `thermokit.integrate`
  - `step(value, derivative, dt)` takes a forward Euler step, or calls the
    value's own `step` method if it has one.
  - The `time_integrable` decorator turns a dataclass into a time-integrable
    type. It adds a `Derivative` dataclass named `<ClassName>TimeDerivative`
    and a field-by-field `step` method.
  - `upper_camel_case`, `with_prefix` and `with_suffix` are name helpers.
- `thermokit.units`
  - `temperature_difference`, `celsius_to_kelvin`, `kelvin_to_celsius` and
    `fahrenheit_to_kelvin` convert and compare temperatures.
  - The constants are `ZERO_CELSIUS` and `STANDARD_ATMOSPHERE`.
- `thermokit.errors`
  - `PropertyError` is the base class for `PropertyNotImplementedError`,
    `PropertyUndefinedError`, `InvalidInputError` and `CalculationError`.
  - `ConstraintError` is a `ValueError`. Its subclass `NotANumberError` is
    raised for NaN.
  - `require_strictly_positive(value)` returns the value as a float if it is
    strictly positive and raises `ConstraintError` otherwise.
- `thermokit.plot.PlotApp` draws named `(x, y)` series as lines with a legend
  in a matplotlib window. `add_series` chains, and `run(name)` shows the
  window and returns the figure.

## Installation

```sh
pip install .
```

With the test dependencies:

```sh
pip install ".[test]"
```

## Example

```python
from thermokit.control_volume import ControlVolume
from thermokit.flow import HeatFlow
from thermokit.fluids import Air, Water
from thermokit.models.ideal_gas import IdealGas
from thermokit.models.incompressible import Incompressible

gas = IdealGas()
state = gas.state_from(Air, temperature=300.0, pressure=101_325.0)

cv = ControlVolume(volume=2.0, state=state)
derivative = cv.state_derivative([HeatFlow.incoming(600.0)], gas)

later = state.step(derivative, 10.0)
print(later.temperature, gas.pressure(later))

liquid = Incompressible()
water = liquid.state_from(Water, temperature=330.0)
print(liquid.enthalpy(water))
```

Your own time-integrable types:

```python
from dataclasses import dataclass
from thermokit.integrate import time_integrable

@time_integrable
@dataclass(frozen=True)
class Temperatures:
    first: float
    second: float

rates = Temperatures.Derivative(first=0.1, second=-0.05)
print(Temperatures(330.0, 320.0).step(rates, 60.0))  # Temperatures(first=336.0, second=317.0)
```

Errors:

- A rate or volume that is zero or negative raises `ConstraintError`, for
  example `HeatFlow.incoming(0.0)`.
- `from_signed(float("nan"))` raises `NotANumberError`.
- A combination of inputs that a model's `state_from` does not support raises
  `TypeError`.
- A property that a model cannot provide raises a `PropertyError` subclass.

## Plotting demo

```sh
thermokit-plot-demo
```

This command opens a window that plots two example series.

## What the package does not do

thermokit provides states, property models, flows and control-volume balances.
It does not include:

- a simulation driver that advances a model through time;
- ready-made components such as tanks, thermostats or schedules;
- a way to store results.

To step a model through time, call `state_derivative` and `step` in your own
loop.

## Running the tests

```sh
pytest
```