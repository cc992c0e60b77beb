"""Switches: the abstract interface, a mock, a composite and a sysfs GPIO switch."""

from __future__ import annotations

import enum
import os
import sys
import time
from abc import ABC, abstractmethod


class Switch(ABC):
    """Something that can be turned on and off."""

    @abstractmethod
    def set_state(self, state: bool) -> None:
        """Turn the switch on (True) or off (False)."""

    def on(self) -> None:
        self.set_state(True)

    def off(self) -> None:
        self.set_state(False)


class SwitchState(enum.Enum):
    ON = "on"
    OFF = "off"


class MockSwitch(Switch):
    """Remembers the state it was last set to."""

    def __init__(self, initial_state: SwitchState) -> None:
        self._state = initial_state

    @property
    def state(self) -> SwitchState:
        return self._state

    def set_state(self, state: bool) -> None:
        self._state = SwitchState.ON if state else SwitchState.OFF


class CompositeSwitch(Switch):
    """Forwards every state change to all of its switches."""

    def __init__(self, *switches: Switch) -> None:
        self._switches = list(switches)

    def set_state(self, state: bool) -> None:
        for switch in self._switches:
            switch.set_state(state)


def _report(message: str, exc: OSError) -> None:
    print(f"{message}: {exc.strerror or exc}", file=sys.stderr)


class SysfsGpioSwitch(Switch):
    """A GPIO output pin driven through the sysfs GPIO interface.

    Failures to access the sysfs files are reported on stderr and otherwise
    ignored. The pin is unexported by :meth:`close` or on leaving a ``with`` block.
    """

    def __init__(
        self,
        pin: int,
        root: str | os.PathLike[str] = "/sys/class/gpio",
        settle_delay: float = 0.1,
    ) -> None:
        self._pin = pin
        self._root = os.fspath(root)
        self._closed = False
        self._export()
        if settle_delay > 0:
            time.sleep(settle_delay)
        self._configure_output()

    @property
    def pin(self) -> int:
        return self._pin

    def _pin_path(self, name: str) -> str:
        return os.path.join(self._root, f"gpio{self._pin}", name)

    @staticmethod
    def _write(path: str, text: str) -> None:
        fd = os.open(path, os.O_WRONLY)
        try:
            os.write(fd, text.encode())
        finally:
            os.close(fd)

    def _write_or_report(self, path: str, text: str, message: str) -> None:
        try:
            self._write(path, text)
        except OSError as exc:
            _report(message, exc)

    def _export(self) -> None:
        self._write_or_report(
            os.path.join(self._root, "export"), str(self._pin), "Failed to open GPIO export file"
        )

    def _configure_output(self) -> None:
        self._write_or_report(
            self._pin_path("direction"), "out", "Failed to open GPIO direction file"
        )

    def _unexport(self) -> None:
        self._write_or_report(
            os.path.join(self._root, "unexport"), str(self._pin), "Failed to open GPIO unexport file"
        )

    def set_state(self, state: bool) -> None:
        self._write_or_report(
            self._pin_path("value"), "1" if state else "0", "Failed to open GPIO value file"
        )

    def get_state(self) -> bool:
        """Return True if the pin reads '1'; False if it reads otherwise or cannot be read."""
        try:
            with open(self._pin_path("value"), "rb") as f:
                first = f.read(1)
        except OSError as exc:
            _report("Failed to open GPIO value file", exc)
            return False
        return first == b"1"

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._unexport()

    def __enter__(self) -> SysfsGpioSwitch:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()