"""Temperature sensors: constant, mock, random, averaging and one-wire file based."""

from __future__ import annotations

import math
import os
import random
import re
from abc import ABC, abstractmethod


class SensorError(RuntimeError):
    """Raised when a sensor cannot deliver a measurement."""


class Sensor(ABC):
    """Something that measures a temperature in degrees Celsius."""

    @abstractmethod
    def get_temperature(self) -> float:
        """Return the current temperature."""


class ConstantSensor(Sensor):
    """Always reports the same value."""

    def __init__(self, value: float) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def get_temperature(self) -> float:
        return self._value


class MockSensor(Sensor):
    """Reports whatever temperature it was last given."""

    def __init__(self, initial_temperature: float) -> None:
        self._temperature = float(initial_temperature)

    def get_temperature(self) -> float:
        return self._temperature

    def set_temperature(self, temperature: float) -> None:
        self._temperature = float(temperature)


class RandomSensor(Sensor):
    """Reports uniformly distributed values between ``low`` and ``high``."""

    def __init__(self, low: float, high: float, rng: random.Random | None = None) -> None:
        self._low = float(low)
        self._high = float(high)
        self._rng = rng if rng is not None else random.Random()

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def get_temperature(self) -> float:
        return self._rng.uniform(self._low, self._high)


class AveragingSensor(Sensor):
    """Reports the mean of the temperatures of all sensors added to it."""

    def __init__(self) -> None:
        self._sensors: list[Sensor] = []

    def add(self, sensor: Sensor) -> None:
        self._sensors.append(sensor)

    def get_temperature(self) -> float:
        """Average of all sensors; NaN when no sensor has been added."""
        if not self._sensors:
            return math.nan
        return sum(s.get_temperature() for s in self._sensors) / len(self._sensors)


_LEADING_INTEGER = re.compile(rb"\s*([+-]?\d+)")


class W1Sensor(Sensor):
    """Reads a temperature in milli-degrees Celsius from a file."""

    _READ_SIZE = 32

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._filename = os.fspath(filename)

    @property
    def filename(self) -> str:
        return self._filename

    def get_temperature(self) -> float:
        try:
            f = open(self._filename, "rb")
        except OSError as exc:
            raise SensorError(f"Cannot open {self._filename}") from exc
        with f:
            try:
                data = f.read(self._READ_SIZE)
            except OSError as exc:
                raise SensorError(f"Cannot read {self._filename}") from exc

        match = _LEADING_INTEGER.match(data)
        if match is None:
            raise ValueError(f"No temperature value in {self._filename}")
        return int(match.group(1)) / 1000