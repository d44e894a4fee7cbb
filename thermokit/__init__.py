"""Thermodynamic states, fluid property models, boundary flows and control volumes."""

__version__ = "0.3.0"