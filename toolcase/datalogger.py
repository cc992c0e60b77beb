"""Periodic logging of all configured sensors into a sink, and a demo command."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from .measurements import SensorConfig, SensorValues
from .sensors import ConstantSensor, RandomSensor
from .sinks import Sink, SinkTerminal


class DataLogger:
    """Reads all sensors every ``interval`` milliseconds and hands the values to a sink."""

    def __init__(self, sensors: SensorConfig, sink: Sink, interval: int) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self._sensors = sensors
        self._sink = sink
        self._interval = interval
        self._measurements = SensorValues()

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def last_measurements(self) -> SensorValues:
        return self._measurements

    def start_logging(self, count: int = 0) -> None:
        """Log ``count`` rounds; 0 means log forever."""
        if count < 0:
            raise ValueError("count must not be negative")
        endless = count == 0
        while endless or count > 0:
            self._measurements = self._sensors.get_all_measurements()
            self._sink.output(self._measurements)
            if count > 0:
                count -= 1
            time.sleep(self._interval / 1000)


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="datalogger", description="Log four demo sensors to the terminal."
    )
    parser.add_argument("--count", type=_non_negative, default=5,
                        help="number of rounds, 0 for endless (default 5)")
    parser.add_argument("--interval", type=_non_negative, default=1000,
                        help="milliseconds between rounds (default 1000)")
    args = parser.parse_args(argv)

    config = SensorConfig()
    config.add_sensor("bl", ConstantSensor(37.5))
    config.add_sensor("br", ConstantSensor(-273.15))
    config.add_sensor("tl", RandomSensor(0, 666))
    config.add_sensor("tr", RandomSensor(-273.15, 0))

    logger = DataLogger(config, SinkTerminal(), args.interval)
    try:
        logger.start_logging(args.count)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())