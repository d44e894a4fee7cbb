[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thermokit"
version = "0.3.0"
description = "Thermodynamic and fluid property modeling with control volumes, boundary flows and time integration."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["thermodynamics", "fluid", "ideal gas", "incompressible", "control volume", "modeling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
thermokit-plot-demo = "thermokit.plot:main"

[tool.hatch.build.targets.wheel]
packages = ["thermokit"]

[tool.pytest.ini_options]
addopts = "-ra"
