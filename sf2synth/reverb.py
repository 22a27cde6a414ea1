"""Freeverb-style stereo reverb of a mono-summed input, with pre-delay."""

from __future__ import annotations

from typing import Iterable

from .config import SAMPLE_RATE

MAX_PREDELAY_MS = 100

COMB_LENGTHS = (3604.0, 3112.0, 4044.0, 4492.0)
COMB_GAINS = (0.805, 0.827, 0.783, 0.764)
COMB_DAMPING_COEF = (0.83, 0.9, 1.0, 0.8)

ALLPASS_LENGTHS = (500.0, 168.0, 48.0)
ALLPASS_GAINS = (0.707, 0.707, 0.707)

# Length offsets that decorrelate the right channel from the left.
_COMB_STEREO_SPREAD = 17
_ALLPASS_STEREO_SPREAD = 11


class _Comb:
    def __init__(self, size: int, gain: float) -> None:
        self.buffer = [0.0] * size
        self.gain = gain
        self.limit = size
        self.damping = 0.0
        self._pos = 0
        self._store = 0.0

    def set_time(self, rev_time: float) -> None:
        self.limit = min(int(rev_time * len(self.buffer)), len(self.buffer))

    def process(self, sample: float) -> float:
        out = self.buffer[self._pos]
        self._store = self._store * (1.0 - self.damping) + out * self.damping
        self.buffer[self._pos] = sample + self._store * self.gain
        self._pos = 0 if self._pos + 1 >= self.limit else self._pos + 1
        return out


class _Allpass:
    def __init__(self, size: int, gain: float) -> None:
        self.buffer = [0.0] * size
        self.gain = gain
        self.limit = size
        self._pos = 0

    def set_time(self, rev_time: float) -> None:
        self.limit = min(int(rev_time * len(self.buffer)), len(self.buffer))

    def process(self, sample: float) -> float:
        out = self.buffer[self._pos]
        self.buffer[self._pos] = out * self.gain + sample
        out -= self.gain * sample
        self._pos = 0 if self._pos + 1 >= self.limit else self._pos + 1
        return out


class _Channel:
    def __init__(self, spread_index: int, size_multiplier: float) -> None:
        self.combs = [
            _Comb(int((length + spread_index * _COMB_STEREO_SPREAD) * size_multiplier), gain)
            for length, gain in zip(COMB_LENGTHS, COMB_GAINS)
        ]
        self.allpasses = [
            _Allpass(int((length + spread_index * _ALLPASS_STEREO_SPREAD) * size_multiplier), gain)
            for length, gain in zip(ALLPASS_LENGTHS, ALLPASS_GAINS)
        ]
        if any(not f.buffer for f in (*self.combs, *self.allpasses)):
            raise ValueError("size_multiplier too small: a filter would have no samples")

    def process(self, sample: float) -> float:
        out = sum(comb.process(sample) for comb in self.combs) / len(self.combs)
        for allpass in self.allpasses:
            out = allpass.process(out)
        return out


class FxReverb:
    """Reverb with four damped combs and three allpasses per channel.

    ``size_multiplier`` scales every delay line; ``level`` scales the output.
    """

    def __init__(self, size_multiplier: float = 1.8) -> None:
        if size_multiplier <= 0:
            raise ValueError("size_multiplier must be positive")
        self._channels = (_Channel(0, size_multiplier), _Channel(1, size_multiplier))

        self._predelay_size = int((MAX_PREDELAY_MS / 1000.0) * SAMPLE_RATE)
        self._predelay = [0.0] * self._predelay_size
        self._predelay_write = 0
        self._predelay_read = 0

        self._time = 0.5
        self._damping = 0.25
        self.level = 1.0
        self.set_time(0.8)
        self.set_pre_delay_time(10.0)
        self.set_damping(0.6)

    @property
    def time(self) -> float:
        """The internal decay factor derived from the last :meth:`set_time`."""
        return self._time

    @property
    def damping(self) -> float:
        return self._damping

    @property
    def predelay_size(self) -> int:
        """Capacity of the pre-delay line in samples."""
        return self._predelay_size

    def set_pre_delay_time(self, ms: float) -> None:
        """Set the pre-delay in milliseconds, limited to the line's capacity."""
        samples = int((ms / 1000.0) * SAMPLE_RATE)
        samples = min(max(samples, 0), self._predelay_size - 1)
        self._predelay_read = (self._predelay_write - samples) % self._predelay_size

    def set_time(self, value: float) -> None:
        """Set the decay time, nominally 0..1."""
        self._time = 0.92 * value + 0.02
        for channel in self._channels:
            for f in (*channel.combs, *channel.allpasses):
                f.set_time(self._time)

    def set_damping(self, damping: float) -> None:
        """Set high-frequency damping, clamped to 0..1."""
        self._damping = min(max(damping, 0.0), 1.0)
        for channel in self._channels:
            for comb, coef in zip(channel.combs, COMB_DAMPING_COEF):
                comb.damping = self._damping * coef

    def process(self, left: float, right: float) -> tuple[float, float]:
        """Process one stereo frame and return the wet pair."""
        self._predelay[self._predelay_write] = 0.5 * (left + right)
        delayed = self._predelay[self._predelay_read]
        self._predelay_write = (self._predelay_write + 1) % self._predelay_size
        self._predelay_read = (self._predelay_read + 1) % self._predelay_size

        wet_l = self._channels[0].process(delayed)
        wet_r = self._channels[1].process(delayed)
        return self.level * wet_l, self.level * wet_r

    def process_block(
        self, left: Iterable[float], right: Iterable[float]
    ) -> tuple[list[float], list[float]]:
        """Process a stereo block and return the wet signal."""
        left = list(left)
        right = list(right)
        if len(left) != len(right):
            raise ValueError("left and right blocks differ in length")
        out_l: list[float] = []
        out_r: list[float] = []
        for in_l, in_r in zip(left, right):
            wet_l, wet_r = self.process(in_l, in_r)
            out_l.append(wet_l)
            out_r.append(wet_r)
        return out_l, out_r