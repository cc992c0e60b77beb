"""Destinations for logged measurements: memory, terminal, CSV file and MQTT."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Iterable, TextIO

from .measurements import SensorValues
from .mqtt import MqttClient


class SinkError(RuntimeError):
    """Raised when a sink cannot be set up."""


class Sink(ABC):
    """Receives one set of measurements per logging round."""

    @abstractmethod
    def output(self, data: SensorValues) -> None:
        """Emit one set of measurements."""


class SinkMock(Sink):
    """Keeps every set of measurements it receives."""

    def __init__(self) -> None:
        self._measurements: list[SensorValues] = []

    def output(self, data: SensorValues) -> None:
        self._measurements.append(data)

    def __len__(self) -> int:
        return len(self._measurements)

    def __getitem__(self, index: int) -> SensorValues:
        return self._measurements[index]


class SinkTerminal(Sink):
    """Prints one ``name value`` line per measurement to stdout."""

    def output(self, data: SensorValues) -> None:
        for name, value in data:
            print(f"{name} {value:g}", flush=True)


class SinkFile(Sink):
    """Writes measurements as semicolon separated lines to a file.

    ``column_mapping`` is a sequence of (column name, sensor name) pairs. The
    first line holds the column names; an existing file is overwritten.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        column_mapping: Iterable[tuple[str, str]],
    ) -> None:
        self._columns = list(column_mapping)
        try:
            self._file: TextIO = open(filename, "w", encoding="utf-8")
        except OSError as exc:
            raise SinkError(f"Unable to open file: {os.fspath(filename)}") from exc
        self._write_line(f"{column};" for column, _ in self._columns)

    def _write_line(self, cells: Iterable[str]) -> None:
        self._file.write("".join(cells) + "\n")
        self._file.flush()

    def output(self, data: SensorValues) -> None:
        self._write_line(
            f"{data.get_measurement(sensor):g};" if sensor in data else "N/A;"
            for _, sensor in self._columns
        )

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> SinkFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class SinkMqtt(Sink):
    """Publishes each set of measurements as a JSON-like object."""

    def __init__(self, client: MqttClient) -> None:
        self._client = client

    def output(self, data: SensorValues) -> None:
        body = "{" + "".join(f' "{name}" : {value:f},' for name, value in data)
        self._client.publish(body[:-1] + " }")