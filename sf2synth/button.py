"""Debounced push-button with touch, press, long-press, auto-repeat and click events."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

ACTIVE_LEVEL = 0  # the switch pulls the input to ground when pressed


class ButtonEvent(IntEnum):
    """Events reported to the button callback."""

    TOUCH = 0
    PRESS = 1
    LONG_PRESS = 2
    AUTO_CLICK = 3
    RELEASE = 4
    CLICK = 5


ButtonCallback = Callable[[int, ButtonEvent], None]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class MuxButton:
    """State machine for one button, driven by periodic readings.

    Call :meth:`process` with the raw input level and the current time in
    milliseconds; the callback receives ``(button_id, event)``.
    """

    active_level = ACTIVE_LEVEL

    def __init__(self, button_id: int, callback: ButtonCallback) -> None:
        self.button_id = button_id
        self._callback = callback

        self.long_press_threshold = 800
        self.auto_fire_delay = 500
        self.rise_threshold = 20
        self.fall_threshold = 10
        self.auto_click = False
        self.late_click = False

        self._state = False
        self._old_state = False
        self._rise_timer = 0
        self._fall_timer = 0
        self._long_press_timer = 0
        self._auto_fire_timer = 0
        self._button_active = False
        self._press_active = False
        self._long_press_active = False

    @property
    def pressed(self) -> bool:
        """True from the first touch until the release is confirmed."""
        return self._button_active

    def _emit(self, event: ButtonEvent) -> None:
        self._callback(self.button_id, event)

    def process(self, level: int, now_ms: int) -> None:
        """Feed one reading of the input taken at ``now_ms``."""
        state = level == self.active_level

        if state != self._old_state:
            if state:
                if self._button_active:
                    if not self._press_active and now_ms - self._rise_timer > self.rise_threshold:
                        self._press_active = True
                else:
                    self._button_active = True
                    self._rise_timer = now_ms
                    self._long_press_timer = now_ms
                    self._auto_fire_timer = now_ms
                    self._emit(ButtonEvent.TOUCH)
            else:
                self._fall_timer = now_ms
        elif state:
            if not self._press_active and now_ms - self._rise_timer > self.rise_threshold:
                self._press_active = True
                self._long_press_timer = now_ms
                self._emit(ButtonEvent.PRESS)
            if (
                self._press_active
                and not self._long_press_active
                and now_ms - self._long_press_timer > self.long_press_threshold
            ):
                self._long_press_active = True
                self._emit(ButtonEvent.LONG_PRESS)
            if self.auto_click and self._long_press_active:
                if now_ms - self._auto_fire_timer > self.auto_fire_delay:
                    self._auto_fire_timer = now_ms
                    self._emit(ButtonEvent.AUTO_CLICK)
        elif self._button_active and now_ms - self._fall_timer > self.fall_threshold:
            self._button_active = False
            self._press_active = False
            if not self._long_press_active or self.late_click:
                self._emit(ButtonEvent.CLICK)
            self._long_press_active = False
            self._emit(ButtonEvent.RELEASE)

        self._old_state = state

    def set_rise_time_ms(self, ms: int) -> None:
        """Debounce time before a touch counts as a press (0..100 ms)."""
        self.rise_threshold = _clamp(ms, 0, 100)

    def set_fall_time_ms(self, ms: int) -> None:
        """Debounce time before a release is confirmed (0..100 ms)."""
        self.fall_threshold = _clamp(ms, 0, 100)

    def set_long_press_delay_ms(self, ms: int) -> None:
        """Hold time before a long press is reported (0..4000 ms)."""
        self.long_press_threshold = _clamp(ms, 0, 4000)

    def set_auto_fire_period_ms(self, ms: int) -> None:
        """Interval between auto-repeat clicks (0..4000 ms)."""
        self.auto_fire_delay = _clamp(ms, 0, 4000)