"""Two-point controller that drives a switch from a sensor reading."""

from __future__ import annotations

from .sensors import Sensor
from .switches import Switch


class Hysteresis:
    """Turns the switch on below ``low``, off above ``high``, leaves it alone in between."""

    def __init__(self, sensor: Sensor, switch: Switch, low: float, high: float) -> None:
        self._sensor = sensor
        self._switch = switch
        self.low = low
        self.high = high

    def check(self) -> None:
        current = self._sensor.get_temperature()
        if current < self.low:
            self._switch.set_state(True)
        elif current > self.high:
            self._switch.set_state(False)

    def set_range(self, low: float, high: float) -> None:
        self.low = low
        self.high = high