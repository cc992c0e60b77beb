"""Command that keeps a pot at a fixed temperature, driving a GPIO pin or stdout."""

from __future__ import annotations

import sys
import time
from typing import Sequence

from .boiling_pot import BoilingPot
from .sensors import W1Sensor
from .switches import Switch, SysfsGpioSwitch

TARGET_TEMPERATURE = 37.5
CHECK_INTERVAL = 1.0

_USAGE = (
    "Usage: {prog} TEMPERATURE-FILE [GPIO-NUMBER]\n"
    "    TEMPERATURE-FILE   contains temperature in milli-celsius\n"
    "    GPIO-NUMBER        gpio number (as per raspi pinout)\n"
    "                       default stdout messages"
)


class StdOutSwitch(Switch):
    """Prints ON or OFF instead of switching anything."""

    def set_state(self, state: bool) -> None:
        print("ON" if state else "OFF", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print(_USAGE.format(prog="heater"), file=sys.stderr)
        return 1

    temperature_file = args[0]
    gpio = -1
    if len(args) == 2:
        try:
            gpio = int(args[1])
        except ValueError:
            print(f"Invalid GPIO number: {args[1]}", file=sys.stderr)
            return 1

    sensor = W1Sensor(temperature_file)
    switch: Switch = SysfsGpioSwitch(gpio) if gpio >= 0 else StdOutSwitch()

    pot = BoilingPot(sensor, switch)
    pot.heat(TARGET_TEMPERATURE)

    try:
        while True:
            time.sleep(CHECK_INTERVAL)
            try:
                pot.check()
            except Exception as exc:
                print(exc, file=sys.stderr, flush=True)
    except KeyboardInterrupt:
        return 0
    finally:
        if isinstance(switch, SysfsGpioSwitch):
            switch.close()


if __name__ == "__main__":
    sys.exit(main())