"""Stereo chorus driven by a slow sine LFO."""

from __future__ import annotations

import math
from typing import Iterable

from .config import SAMPLE_RATE

MAX_DELAY = 4096
LFO_UPDATE_INTERVAL = 16


def _interpolated(buffer: list[float], index: float) -> float:
    index %= MAX_DELAY
    whole = int(index) % MAX_DELAY
    frac = index - int(index)
    following = (whole + 1) % MAX_DELAY
    return (1.0 - frac) * buffer[whole] + frac * buffer[following]


class FxChorus:
    """Chorus with opposite LFO modulation on the left and right delay lines.

    ``lfo_freq`` is in Hz, ``depth`` and ``base_delay`` are in seconds. They
    may be changed at any time between blocks.
    """

    def __init__(
        self,
        lfo_freq: float = 0.5,
        depth: float = 0.002,
        base_delay: float = 0.03,
    ) -> None:
        self.lfo_freq = lfo_freq
        self.depth = depth
        self.base_delay = base_delay
        self.sample_rate = float(SAMPLE_RATE)

        self._buf_l = [0.0] * MAX_DELAY
        self._buf_r = [0.0] * MAX_DELAY
        self._write = 0
        self._lfo_phase = 0.0
        self._lfo_value = 0.0
        self._update_counter = 0

    def _advance_lfo(self) -> None:
        self._update_counter += 1
        if self._update_counter > LFO_UPDATE_INTERVAL:
            self._update_counter = 0
            self._lfo_value = math.sin(2.0 * math.pi * self._lfo_phase)
            self._lfo_phase += self.lfo_freq * LFO_UPDATE_INTERVAL / self.sample_rate
            if self._lfo_phase >= 1.0:
                self._lfo_phase -= 1.0

    def process_block(
        self, left: Iterable[float], right: Iterable[float]
    ) -> tuple[list[float], list[float]]:
        """Run a stereo block through the chorus and return the wet signal."""
        left = list(left)
        right = list(right)
        if len(left) != len(right):
            raise ValueError("left and right blocks differ in length")

        out_l: list[float] = []
        out_r: list[float] = []
        for in_l, in_r in zip(left, right):
            self._advance_lfo()

            offset_l = (self.base_delay + self.depth * self._lfo_value) * self.sample_rate
            offset_r = (self.base_delay - self.depth * self._lfo_value) * self.sample_rate

            delayed_l = _interpolated(self._buf_l, self._write - offset_l)
            delayed_r = _interpolated(self._buf_r, self._write - offset_r)

            self._buf_l[self._write] = in_l
            self._buf_r[self._write] = in_r

            out_l.append(delayed_l)
            out_r.append(delayed_r)

            self._write = (self._write + 1) % MAX_DELAY
        return out_l, out_r