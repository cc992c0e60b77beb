import pytest

from toolcase.displays import (
    CompositePercentageDisplay,
    DisplayError,
    LedStripeDisplay,
    MockPercentageDisplay,
    PwmController,
)
from toolcase.switches import MockSwitch, SwitchState

ON = SwitchState.ON
OFF = SwitchState.OFF


def test_mock_display_initial_and_update():
    d = MockPercentageDisplay(0.3)
    assert d.percentage_shown == pytest.approx(0.3)
    d.show_percentage(0.8)
    assert d.percentage_shown == pytest.approx(0.8)


def test_composite_basic():
    d1 = MockPercentageDisplay(0.1)
    d2 = MockPercentageDisplay(0.2)
    c = CompositePercentageDisplay(d1, d2)

    c.show_percentage(0.7)

    assert d1.percentage_shown == pytest.approx(0.7)
    assert d2.percentage_shown == pytest.approx(0.7)


def _states(switches):
    return [sw.state for sw in switches]


def test_led_stripe_movement():
    switches = [MockSwitch(OFF) for _ in range(8)]
    display = LedStripeDisplay(switches)

    display.show_percentage(0.5)
    assert _states(switches) == [ON, ON, ON, ON, OFF, OFF, OFF, OFF]

    display.show_percentage(0.9)
    assert _states(switches) == [ON, ON, ON, ON, ON, ON, ON, OFF]

    display.show_percentage(0.15)
    assert _states(switches) == [ON, OFF, OFF, OFF, OFF, OFF, OFF, OFF]

    display.show_percentage(0)
    assert _states(switches) == [OFF] * 8


def test_led_stripe_full():
    switches = [MockSwitch(OFF) for _ in range(8)]
    LedStripeDisplay(switches).show_percentage(1)
    assert _states(switches) == [ON] * 8


@pytest.mark.parametrize("value", [-0.1, 1.1])
def test_led_stripe_out_of_range(value):
    switches = [MockSwitch(OFF) for _ in range(4)]
    with pytest.raises(DisplayError):
        LedStripeDisplay(switches).show_percentage(value)
    assert _states(switches) == [OFF] * 4


@pytest.fixture
def pwm_chip(tmp_path):
    channel_dir = tmp_path / "pwm1"
    channel_dir.mkdir()
    (channel_dir / "period").write_text("")
    (channel_dir / "duty_cycle").write_text("")
    return tmp_path


def test_pwm_writes_period(pwm_chip):
    PwmController(pwm_chip, 1000000, 1)
    assert (pwm_chip / "pwm1" / "period").read_text() == "1000000"


def test_pwm_full_duty_equals_period(pwm_chip):
    pwm = PwmController(pwm_chip, 1000000, 1)
    pwm.show_percentage(1.0)
    assert (pwm_chip / "pwm1" / "duty_cycle").read_text() == "1000000"


def test_pwm_zero_duty(pwm_chip):
    pwm = PwmController(pwm_chip, 1000000, 1)
    pwm.show_percentage(0)
    assert (pwm_chip / "pwm1" / "duty_cycle").read_text() == "0"


@pytest.mark.parametrize("value", [-0.5, 1.5])
def test_pwm_out_of_range(pwm_chip, value):
    pwm = PwmController(pwm_chip, 1000000, 1)
    with pytest.raises(DisplayError):
        pwm.show_percentage(value)
    assert (pwm_chip / "pwm1" / "duty_cycle").read_text() == ""


def test_pwm_missing_duty_file(pwm_chip):
    pwm = PwmController(pwm_chip, 1000000, 1)
    (pwm_chip / "pwm1" / "duty_cycle").unlink()
    with pytest.raises(DisplayError):
        pwm.show_percentage(0.5)


def test_pwm_without_export_file(tmp_path):
    with pytest.raises(DisplayError):
        PwmController(tmp_path, 1000000, 3)