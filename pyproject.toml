[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolcase"
version = "0.1.0"
description = "Temperature sensors, switches, hysteresis control, percentage displays and a data logger with file, terminal and MQTT sinks"
requires-python = ">=3.10"
dependencies = [
    "paho-mqtt",
]
keywords = ["temperature", "sensor", "hysteresis", "gpio", "sysfs", "mqtt", "data-logger", "1-wire", "pwm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
toolcase-heater = "toolcase.heater:main"
toolcase-datalogger = "toolcase.datalogger:main"

[tool.hatch.build.targets.wheel]
packages = ["toolcase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
