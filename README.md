# toolcase

Building blocks for small temperature-control and logging setups on Linux boards.

- **Sensors** (`toolcase.sensors`): `ConstantSensor`, `MockSensor`, `RandomSensor`,
  `AveragingSensor` and `W1Sensor`. `W1Sensor` reads a file that holds milli-degrees
  Celsius, such as a 1-wire or hwmon file, and raises `SensorError` if it cannot open or
  read that file. `AveragingSensor` returns NaN when no sensor has been added to it.
- **Switches** (`toolcase.switches`): `MockSwitch` holds a `SwitchState` (`ON`/`OFF`).
  `CompositeSwitch` forwards every change to several switches. `SysfsGpioSwitch` drives a
  GPIO output pin through `/sys/class/gpio` (the root can be changed with `root=`). It
  reports failures on stderr and unexports the pin on `close()` or when its `with` block
  ends.
- **Control** (`toolcase.hysteresis`, `toolcase.boiling_pot`): `Hysteresis` turns a switch on
  below `low`, turns it off above `high`, and leaves it alone in between. `BoilingPot` keeps a
  set temperature within ±1 °C. After each `check()` it can pass the switch state and
  temperature to a `Reporter` (for example `MockReporter`, which stores `ReportItem`s). It can
  also show the temperature divided by 100 on a percentage display.
- **Displays** (`toolcase.displays`): `MockPercentageDisplay`, `CompositePercentageDisplay`,
  `LedStripeDisplay` (a row of switches lit from the start) and `PwmController` (the duty
  cycle of a sysfs PWM channel). Values outside 0..1 raise `DisplayError`.
- **Data logging** (`toolcase.measurements`, `toolcase.sinks`, `toolcase.datalogger`):
  `SensorConfig` collects named sensors; adding a name twice raises `DuplicateSensorError`.
  `SensorValues` holds one round of readings and iterates over them sorted by name.
  `DataLogger` sends the readings to a sink every `interval` milliseconds. The sinks are:
  `SinkTerminal` (`name value` lines), `SinkFile` (lines separated by `;`, with `N/A` for
  missing sensors), `SinkMqtt` (a JSON-like object per round) and `SinkMock`.
- **MQTT** (`toolcase.mqtt`): `MqttPublisher` connects to a broker with paho-mqtt. It
  publishes to one topic and raises `MqttError` on failure. The defaults are `localhost`,
  port 1883, topic `fh-ece21`. `MqttMock` queues messages, and `pop_message()` returns
  them oldest first.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Example

```python
from toolcase.sensors import MockSensor
from toolcase.switches import MockSwitch, SwitchState
from toolcase.hysteresis import Hysteresis

sensor = MockSensor(30.2)
switch = MockSwitch(SwitchState.OFF)
control = Hysteresis(sensor, switch, 20.1, 30.4)

sensor.set_temperature(20.0)
control.check()
assert switch.state is SwitchState.ON
```

Logging named sensors to a CSV file:

```python
from toolcase.sensors import ConstantSensor
from toolcase.measurements import SensorConfig
from toolcase.sinks import SinkFile
from toolcase.datalogger import DataLogger

config = SensorConfig()
config.add_sensor("inside", ConstantSensor(21.5))
config.add_sensor("outside", ConstantSensor(4.0))

with SinkFile("log.csv", [("Inside", "inside"), ("Outside", "outside")]) as sink:
    DataLogger(config, sink, 1000).start_logging(3)   # three rounds, 1000 ms apart
```

A `count` of 0 passed to `start_logging` means the logger runs until it is interrupted.

## Commands

```
toolcase-heater TEMPERATURE-FILE [GPIO-NUMBER]
```

This holds a pot at 37.5 °C and reads the temperature file (milli-degrees Celsius) once a
second. If a GPIO number is given, it drives that pin. If not, it prints `ON`/`OFF` to
standard output. Errors during a check are printed to stderr and the loop carries on.
Ctrl-C stops it, and a GPIO pin is then unexported.

```
toolcase-datalogger [--count N] [--interval MS]
```

This logs four demo sensors (`bl`, `br`, `tl`, `tr`, constant and random) to the terminal.
By default it runs 5 rounds, 1000 ms apart. A count of 0 runs until interrupted.

## What it does not do

No command logs to an MQTT broker or to a file. `SinkMqtt` and `SinkFile` are available
only from Python code. Neither command takes a set temperature or its sensors from a
configuration.

## Tests

```
pytest
```