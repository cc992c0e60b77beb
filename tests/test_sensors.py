import pytest

from toolcase.sensors import (
    AveragingSensor,
    ConstantSensor,
    MockSensor,
    RandomSensor,
    Sensor,
    SensorError,
    W1Sensor,
)


def test_sensor_is_abstract():
    with pytest.raises(TypeError):
        Sensor()


def test_const_basic():
    cs = ConstantSensor(36.4)
    assert cs.get_temperature() == pytest.approx(36.4)
    assert cs.value == pytest.approx(36.4)


def test_const_is_a_sensor():
    s = ConstantSensor(36.4)
    assert isinstance(s, Sensor)
    assert s.get_temperature() == pytest.approx(36.4)


def test_mock_basic():
    ms = MockSensor(36.4)
    assert ms.get_temperature() == pytest.approx(36.4)
    ms.set_temperature(42.8)
    assert ms.get_temperature() == pytest.approx(42.8)


def test_mock_is_a_sensor():
    s = MockSensor(36.4)
    assert isinstance(s, Sensor)
    assert s.get_temperature() == pytest.approx(36.4)


def test_random_basic():
    rs = RandomSensor(36.4, 42.3)
    t = rs.get_temperature()
    assert 36.4 <= t <= 42.3
    assert rs.low == pytest.approx(36.4)
    assert rs.high == pytest.approx(42.3)


def test_random_is_a_sensor_and_stays_in_range():
    s = RandomSensor(36.4, 42.3)
    assert isinstance(s, Sensor)
    assert all(36.4 <= s.get_temperature() <= 42.3 for _ in range(100))


def test_avg_basic():
    avg = AveragingSensor()
    avg.add(MockSensor(3))
    avg.add(MockSensor(4))
    assert avg.get_temperature() == pytest.approx(3.5)


def test_avg_is_a_sensor():
    avg = AveragingSensor()
    avg.add(MockSensor(3))
    avg.add(ConstantSensor(4))
    s = avg
    assert isinstance(s, Sensor)
    assert s.get_temperature() == pytest.approx(3.5)


def test_avg_change_temperatures():
    s1 = MockSensor(3)
    s2 = MockSensor(4)
    avg = AveragingSensor()
    avg.add(s1)
    avg.add(s2)
    assert avg.get_temperature() == pytest.approx(3.5)
    s1.set_temperature(10)
    s2.set_temperature(20)
    assert avg.get_temperature() == pytest.approx(15)


def test_avg_empty_is_nan():
    result = AveragingSensor().get_temperature()
    assert str(result) == "nan"


@pytest.fixture
def w1_file(tmp_path):
    path = tmp_path / "w1_sensor"
    path.write_text("0")
    return path


def _change_temperature(path, temperature):
    path.write_text(str(int(temperature * 1000)))


def test_w1_read_sensor(w1_file):
    sensor = W1Sensor(w1_file)
    _change_temperature(w1_file, 42)
    assert sensor.get_temperature() == pytest.approx(42)
    _change_temperature(w1_file, 36)
    assert sensor.get_temperature() == pytest.approx(36)


def test_w1_no_decimal_places_lost(w1_file):
    sensor = W1Sensor(w1_file)
    w1_file.write_text("42666")
    assert sensor.get_temperature() == pytest.approx(42.666)


def test_w1_trailing_newline_and_sign(w1_file):
    w1_file.write_text("-1250\n")
    assert W1Sensor(w1_file).get_temperature() == pytest.approx(-1.25)


def test_w1_missing_file(tmp_path):
    sensor = W1Sensor(tmp_path / "nope")
    with pytest.raises(SensorError, match="Cannot open"):
        sensor.get_temperature()


def test_w1_garbage(w1_file):
    w1_file.write_text("blah")
    with pytest.raises(ValueError):
        W1Sensor(w1_file).get_temperature()