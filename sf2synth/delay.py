"""Stereo delay with tempo-synced lengths and a ping-pong mode."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable

from .config import SAMPLE_RATE

MAX_FEEDBACK = 0.95
DEFAULT_FEEDBACK = 0.1


class DelayTimeDiv(IntEnum):
    """Note value of the delay time relative to one beat."""

    WHOLE = 0
    HALF = 1
    QUARTER = 2
    EIGHTH = 3
    SIXTEENTH = 4
    TRIPLET_8TH = 5
    DOTTED_8TH = 6
    CUSTOM = 255


class DelayMode(Enum):
    """How the feedback is routed."""

    NORMAL = 0
    PING_PONG = 1


_BEATS = {
    DelayTimeDiv.WHOLE: 4.0,
    DelayTimeDiv.HALF: 2.0,
    DelayTimeDiv.QUARTER: 1.0,
    DelayTimeDiv.EIGHTH: 0.5,
    DelayTimeDiv.SIXTEENTH: 0.25,
    DelayTimeDiv.TRIPLET_8TH: 1.0 / 3.0,
    DelayTimeDiv.DOTTED_8TH: 0.75,
}


class FxDelay:
    """Delay line of ``max_delay`` samples per channel."""

    def __init__(self, max_delay: int = SAMPLE_RATE) -> None:
        if max_delay < 2:
            raise ValueError("max_delay must be at least 2 samples")
        self.max_delay = max_delay
        self.reset()

    def reset(self) -> None:
        """Clear the delay lines and restore default settings."""
        self._line_l = [0.0] * self.max_delay
        self._line_r = [0.0] * self.max_delay
        self._write = 0
        self._feedback = DEFAULT_FEEDBACK
        self._length = self.max_delay // 4
        self.mode = DelayMode.NORMAL

    @property
    def feedback(self) -> float:
        return self._feedback

    @property
    def delay_length(self) -> int:
        """Current delay in samples."""
        return self._length

    def set_feedback(self, value: float) -> None:
        """Set the feedback amount, clamped to 0..0.95."""
        self._feedback = min(max(value, 0.0), MAX_FEEDBACK)

    def _set_seconds(self, seconds: float) -> None:
        samples = int(seconds * SAMPLE_RATE)
        self._length = min(max(samples, 1), self.max_delay - 1)

    def set_delay_time(self, div: DelayTimeDiv, bpm: float) -> None:
        """Set the delay to a note value at ``bpm``; ``CUSTOM`` leaves it unchanged."""
        div = DelayTimeDiv(div)
        if div is DelayTimeDiv.CUSTOM:
            return
        if bpm <= 0:
            raise ValueError("bpm must be positive")
        self._set_seconds(60.0 / bpm * _BEATS[div])

    def set_custom_length(self, seconds: float) -> None:
        """Set the delay time in seconds."""
        self._set_seconds(seconds)

    def process_block(
        self, left: Iterable[float], right: Iterable[float]
    ) -> tuple[list[float], list[float]]:
        """Run a stereo block through the delay and return the wet signal."""
        left = list(left)
        right = list(right)
        if len(left) != len(right):
            raise ValueError("left and right blocks differ in length")

        ping_pong = self.mode is DelayMode.PING_PONG
        fb = self._feedback
        out_l: list[float] = []
        out_r: list[float] = []
        for in_l, in_r in zip(left, right):
            read = (self._write + self.max_delay - self._length) % self.max_delay
            delayed_l = self._line_l[read]
            delayed_r = self._line_r[read]

            if ping_pong:
                self._line_l[self._write] = in_l + delayed_r * fb
                self._line_r[self._write] = in_r + delayed_l * fb
            else:
                self._line_l[self._write] = in_l + delayed_l * fb
                self._line_r[self._write] = in_r + delayed_r * fb

            out_l.append(delayed_l)
            out_r.append(delayed_r)
            self._write = (self._write + 1) % self.max_delay
        return out_l, out_r