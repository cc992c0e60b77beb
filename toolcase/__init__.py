"""Sensors, switches, hysteresis control, percentage displays and data logging for temperature setups."""

__version__ = "0.1.0"