"""Publishing text messages to an MQTT broker, plus an in-memory stand-in."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any

import paho.mqtt.client as mqtt

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 1883
DEFAULT_TOPIC = "fh-ece21"
CLIENT_ID = "logger_client"
KEEPALIVE = 10


class MqttError(RuntimeError):
    """Raised when the broker cannot be reached or a message cannot be published."""


class MqttClient(ABC):
    """Something that publishes text messages."""

    @abstractmethod
    def publish(self, msg: str) -> None:
        """Publish one message."""


class MqttMock(MqttClient):
    """Keeps published messages in order until they are popped."""

    def __init__(self) -> None:
        self._buffer: deque[str] = deque()

    def publish(self, msg: str) -> None:
        self._buffer.append(msg)

    def pop_message(self) -> str:
        """Remove and return the oldest published message."""
        if not self._buffer:
            raise IndexError("no message published")
        return self._buffer.popleft()

    def __len__(self) -> int:
        return len(self._buffer)


def _make_client(client_id: str) -> Any:
    api_version = getattr(mqtt, "CallbackAPIVersion", None)
    if api_version is not None:
        return mqtt.Client(api_version.VERSION2, client_id=client_id, clean_session=False)
    return mqtt.Client(client_id=client_id, clean_session=False)


class MqttPublisher(MqttClient):
    """Publishes every message to one topic of a broker it connects to on creation.

    ``client`` may be given to use an already constructed paho-style client.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        topic: str = DEFAULT_TOPIC,
        client: Any = None,
    ) -> None:
        self._host = host
        self._port = port
        self._topic = topic
        self._closed = False
        try:
            self._client = client if client is not None else _make_client(CLIENT_ID)
        except Exception as exc:
            raise MqttError("Error: Cannot inititalize MQTT!") from exc

        try:
            rc = self._client.connect(host, port, keepalive=KEEPALIVE)
        except (OSError, ValueError) as exc:
            raise MqttError("Error: Cannot connect to MQTT!") from exc
        if rc not in (None, mqtt.MQTT_ERR_SUCCESS):
            raise MqttError("Error: Cannot connect to MQTT!")

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def topic(self) -> str:
        return self._topic

    def publish(self, msg: str) -> None:
        info = self._client.publish(self._topic, msg, qos=0, retain=False)
        rc = getattr(info, "rc", info)
        if rc != mqtt.MQTT_ERR_SUCCESS:
            raise MqttError(
                f"Error: Cannot publish message to MQTT! ({mqtt.error_string(rc)})"
            )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._client.disconnect()
        except (OSError, ValueError):
            pass

    def __enter__(self) -> MqttPublisher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()