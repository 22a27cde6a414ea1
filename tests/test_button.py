import pytest

from sf2synth.button import ButtonEvent, MuxButton

DOWN = 0
UP = 1


@pytest.fixture
def recorded():
    events = []

    def callback(button_id, event):
        events.append((button_id, event))

    return events, callback


def _feed(button, readings):
    for level, t in readings:
        button.process(level, t)


def test_short_press_gives_touch_press_click_release(recorded):
    events, cb = recorded
    button = MuxButton(3, cb)
    _feed(button, [(UP, 0), (DOWN, 100), (DOWN, 110), (DOWN, 130), (UP, 140), (UP, 160)])
    assert events == [
        (3, ButtonEvent.TOUCH),
        (3, ButtonEvent.PRESS),
        (3, ButtonEvent.CLICK),
        (3, ButtonEvent.RELEASE),
    ]
    assert button.pressed is False


def test_press_not_reported_before_rise_time(recorded):
    events, cb = recorded
    button = MuxButton(0, cb)
    _feed(button, [(DOWN, 100), (DOWN, 110)])
    assert events == [(0, ButtonEvent.TOUCH)]
    assert button.pressed is True


def test_release_waits_for_fall_time(recorded):
    events, cb = recorded
    button = MuxButton(0, cb)
    _feed(button, [(DOWN, 100), (DOWN, 130), (UP, 200), (UP, 205)])
    assert ButtonEvent.RELEASE not in [e for _, e in events]
    assert button.pressed is True
    button.process(UP, 215)
    assert events[-1] == (0, ButtonEvent.RELEASE)
    assert button.pressed is False


def test_long_press_suppresses_click(recorded):
    events, cb = recorded
    button = MuxButton(1, cb)
    _feed(button, [(DOWN, 100), (DOWN, 130), (DOWN, 1000)])
    assert button.pressed is True
    _feed(button, [(UP, 1100), (UP, 1200)])
    kinds = [e for _, e in events]
    assert kinds == [
        ButtonEvent.TOUCH,
        ButtonEvent.PRESS,
        ButtonEvent.LONG_PRESS,
        ButtonEvent.RELEASE,
    ]
    assert button.pressed is False


def test_late_click_after_long_press(recorded):
    events, cb = recorded
    button = MuxButton(1, cb)
    button.late_click = True
    _feed(button, [(DOWN, 100), (DOWN, 130), (DOWN, 1000)])
    assert button.pressed is True
    _feed(button, [(UP, 1100), (UP, 1200)])
    kinds = [e for _, e in events]
    assert kinds[-2:] == [ButtonEvent.CLICK, ButtonEvent.RELEASE]
    assert button.pressed is False


def test_auto_click_repeats_while_held(recorded):
    events, cb = recorded
    button = MuxButton(2, cb)
    button.auto_click = True
    _feed(button, [(DOWN, 100), (DOWN, 130), (DOWN, 1000), (DOWN, 1100), (DOWN, 1600)])
    kinds = [e for _, e in events]
    assert kinds.count(ButtonEvent.LONG_PRESS) == 1
    assert kinds.count(ButtonEvent.AUTO_CLICK) == 2
    assert button.pressed is True


def test_no_auto_click_when_disabled(recorded):
    events, cb = recorded
    button = MuxButton(2, cb)
    _feed(button, [(DOWN, 100), (DOWN, 130), (DOWN, 1000), (DOWN, 3000)])
    assert ButtonEvent.AUTO_CLICK not in [e for _, e in events]
    assert button.pressed is True


def test_custom_long_press_delay(recorded):
    events, cb = recorded
    button = MuxButton(0, cb)
    button.set_long_press_delay_ms(100)
    assert button.long_press_threshold == 100
    _feed(button, [(DOWN, 100), (DOWN, 130), (DOWN, 240)])
    assert events[-1] == (0, ButtonEvent.LONG_PRESS)
    assert button.pressed is True


@pytest.mark.parametrize(
    "setter, attr, high",
    [
        ("set_rise_time_ms", "rise_threshold", 100),
        ("set_fall_time_ms", "fall_threshold", 100),
        ("set_long_press_delay_ms", "long_press_threshold", 4000),
        ("set_auto_fire_period_ms", "auto_fire_delay", 4000),
    ],
)
def test_setters_clamp(recorded, setter, attr, high):
    _, cb = recorded
    button = MuxButton(0, cb)
    getattr(button, setter)(high * 10)
    assert getattr(button, attr) == high
    getattr(button, setter)(-5)
    assert getattr(button, attr) == 0
    getattr(button, setter)(7)
    assert getattr(button, attr) == 7


def test_idle_button_emits_nothing(recorded):
    events, cb = recorded
    button = MuxButton(0, cb)
    _feed(button, [(UP, t) for t in range(0, 1000, 50)])
    assert events == []
    assert button.pressed is False