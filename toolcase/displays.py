"""Percentage displays: the interface, a mock, a composite, an LED stripe and a PWM output."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod
from typing import Iterable

from .switches import Switch


class DisplayError(RuntimeError):
    """Raised when a display cannot show a value."""


class PercentageDisplay(ABC):
    """Something that shows a fraction between 0 and 1."""

    @abstractmethod
    def show_percentage(self, percentage: float) -> None:
        """Show ``percentage``, given as a fraction."""


class MockPercentageDisplay(PercentageDisplay):
    """Remembers the value it was last asked to show."""

    def __init__(self, initial_value: float) -> None:
        self._current = initial_value

    @property
    def percentage_shown(self) -> float:
        return self._current

    def show_percentage(self, percentage: float) -> None:
        self._current = percentage


class CompositePercentageDisplay(PercentageDisplay):
    """Shows every value on all of its displays."""

    def __init__(self, *displays: PercentageDisplay) -> None:
        self._displays = list(displays)

    def show_percentage(self, percentage: float) -> None:
        for display in self._displays:
            display.show_percentage(percentage)


class LedStripeDisplay(PercentageDisplay):
    """Shows a fraction as a bar of LEDs, lighting the first part of the stripe."""

    def __init__(self, leds: Iterable[Switch]) -> None:
        self._leds = list(leds)

    def show_percentage(self, percentage: float) -> None:
        if percentage < 0 or percentage > 1:
            raise DisplayError("Input has to be between 0 and 1!")
        lit = percentage * len(self._leds)
        for led in self._leds[: math.ceil(lit)]:
            led.on()
        for led in self._leds[int(lit):]:
            led.off()


class PwmController(PercentageDisplay):
    """Shows a fraction as the duty cycle of a sysfs PWM channel."""

    def __init__(
        self, controller_path: str | os.PathLike[str], period: int, channel: int
    ) -> None:
        self._path = os.fspath(controller_path)
        self._period = int(period)
        self._channel = str(channel)

        period_path = self._channel_path("period")
        while True:
            try:
                fd = os.open(period_path, os.O_WRONLY)
                break
            except FileNotFoundError:
                self._export()
            except OSError as exc:
                raise DisplayError("Failed to open PWM controller period file!") from exc

        try:
            os.write(fd, str(self._period).encode())
        except OSError as exc:
            raise DisplayError("Failed to write to PWM controller period file!") from exc
        finally:
            os.close(fd)

    @property
    def period(self) -> int:
        return self._period

    @property
    def channel(self) -> int:
        return int(self._channel)

    def _channel_path(self, name: str) -> str:
        return os.path.join(self._path, f"pwm{self._channel}", name)

    def _export(self) -> None:
        try:
            fd = os.open(os.path.join(self._path, "export"), os.O_WRONLY)
        except OSError as exc:
            raise DisplayError("Failed to open PWM controller directory!") from exc
        try:
            os.write(fd, self._channel.encode())
        except OSError as exc:
            raise DisplayError("Failed to write to PWM controller export file!") from exc
        finally:
            os.close(fd)

    def show_percentage(self, percentage: float) -> None:
        scaled = percentage * 100
        if scaled < 0 or scaled > 100:
            raise DisplayError("Input has to be between 0 and 100!")

        try:
            fd = os.open(self._channel_path("duty_cycle"), os.O_WRONLY)
        except OSError as exc:
            raise DisplayError("Failed to open PWM controller duty cycle file!") from exc

        duty = self._period * int(scaled) // 100
        try:
            os.write(fd, str(duty).encode())
        except OSError as exc:
            raise DisplayError("Failed to write to PWM controller duty cycle file!") from exc
        finally:
            os.close(fd)