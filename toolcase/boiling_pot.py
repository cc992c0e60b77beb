"""A pot that is kept at a set temperature by a hysteresis controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .displays import PercentageDisplay
from .hysteresis import Hysteresis
from .sensors import Sensor
from .switches import Switch


class Reporter(ABC):
    """Receives the switch state and temperature after every check."""

    @abstractmethod
    def report(self, switch_state: bool, current_temperature: float) -> None:
        """Record one status report."""


@dataclass(frozen=True)
class ReportItem:
    switch_state: bool
    current_temperature: float


class MockReporter(Reporter):
    """Keeps every report it receives."""

    def __init__(self) -> None:
        self._items: list[ReportItem] = []

    def report(self, switch_state: bool, current_temperature: float) -> None:
        self._items.append(ReportItem(switch_state, current_temperature))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> ReportItem:
        return self._items[index]


class _TrackingSwitch(Switch):
    """Passes state changes on and remembers the last one."""

    def __init__(self, switch: Switch) -> None:
        self._switch = switch
        self.state: bool | None = None

    def set_state(self, state: bool) -> None:
        self._switch.set_state(state)
        self.state = bool(state)


class BoilingPot:
    """Heats to one degree around a set temperature and shows the temperature."""

    def __init__(
        self,
        sensor: Sensor,
        switch: Switch,
        reporter: Reporter | None = None,
        percentage_display: PercentageDisplay | None = None,
    ) -> None:
        self._sensor = sensor
        self._switch = _TrackingSwitch(switch)
        self._reporter = reporter
        self._percentage_display = percentage_display
        self._hysteresis = Hysteresis(sensor, self._switch, 0, 0)
        self.set_temperature: float | None = None

    def heat(self, set_temperature: float) -> None:
        self.set_temperature = set_temperature
        self._hysteresis.set_range(set_temperature - 1, set_temperature + 1)

    def check(self) -> None:
        self._hysteresis.check()
        if self._reporter is None and self._percentage_display is None:
            return
        temperature = self._sensor.get_temperature()
        if self._reporter is not None:
            self._reporter.report(bool(self._switch.state), temperature)
        if self._percentage_display is not None:
            self._percentage_display.show_percentage(temperature / 100)