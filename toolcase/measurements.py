"""Named sensor readings and the set of sensors that produce them."""

from __future__ import annotations

from typing import Iterator

from .sensors import Sensor


class DuplicateSensorError(RuntimeError):
    """Raised when a sensor name is added twice."""


class SensorValues:
    """Measurements by sensor name; iterates as (name, value) pairs sorted by name."""

    def __init__(self) -> None:
        self._data: dict[str, float] = {}

    def add_measurement(self, name: str, measurement: float) -> bool:
        """Store a measurement; return False and keep the old one if the name exists."""
        if name in self._data:
            return False
        self._data[name] = float(measurement)
        return True

    def get_measurement(self, name: str) -> float:
        """Return the measurement for ``name``; raise KeyError if there is none."""
        return self._data[name]

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(sorted(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data


class SensorConfig:
    """The sensors to be logged, by name."""

    def __init__(self) -> None:
        self._sensors: dict[str, Sensor] = {}

    def add_sensor(self, name: str, sensor: Sensor) -> bool:
        if name in self._sensors:
            raise DuplicateSensorError("Error: Sensor already added!")
        self._sensors[name] = sensor
        return True

    def get_all_measurements(self) -> SensorValues:
        values = SensorValues()
        for name, sensor in sorted(self._sensors.items()):
            values.add_measurement(name, sensor.get_temperature())
        return values