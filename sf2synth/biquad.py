"""Biquad filters with coefficients taken from a precomputed lookup table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import Callable, Union

from .config import FILTER_MAX_Q, SAMPLE_RATE

_FREQ_STEPS = 64
_Q_STEPS = 16
_FS = float(SAMPLE_RATE)
_FREQ_MIN = 20.0
_FREQ_MAX = 20000.0
_Q_MIN = 0.5
_Q_MAX = FILTER_MAX_Q
_LOG_FREQ_MIN = 2.9957323  # ln(20)
_LOG_FREQ_MAX = 9.9034876  # ln(20000)
_INV_LOG_FREQ_RANGE = 1.0 / (_LOG_FREQ_MAX - _LOG_FREQ_MIN)


class FilterMode(IntEnum):
    """Filter response type."""

    LOW_PASS = 0
    HIGH_PASS = 1
    BAND_PASS = 2
    NOTCH = 3


@dataclass(frozen=True)
class Coeffs:
    """Normalised biquad coefficients (a0 == 1)."""

    b0: float
    b1: float
    b2: float
    a1: float
    a2: float

    def _lerp(self, other: Coeffs, t: float) -> Coeffs:
        def mix(a: float, b: float) -> float:
            return a + t * (b - a)

        return Coeffs(
            mix(self.b0, other.b0),
            mix(self.b1, other.b1),
            mix(self.b2, other.b2),
            mix(self.a1, other.a1),
            mix(self.a2, other.a2),
        )


# Sign applied to b1 and b2 for each mode.
_SIGNS = {
    FilterMode.LOW_PASS: (1.0, 1.0),
    FilterMode.HIGH_PASS: (1.0, 1.0),
    FilterMode.BAND_PASS: (-1.0, -1.0),
    FilterMode.NOTCH: (-1.0, 1.0),
}


def _q_at_index(i: int) -> float:
    t = i / (_Q_STEPS - 1)
    return _Q_MIN + t * (_Q_MAX - _Q_MIN)


def _freq_at_index(i: int) -> float:
    t = i / (_FREQ_STEPS - 1)
    return math.exp(_LOG_FREQ_MIN + t * (_LOG_FREQ_MAX - _LOG_FREQ_MIN))


def _base_coeffs(f0: float, q: float) -> Coeffs:
    w0 = 2.0 * math.pi * f0 / _FS
    cos_w0 = math.cos(w0)
    alpha = math.sin(w0) / (2.0 * q)
    a0 = 1.0 + alpha
    common = (1.0 - cos_w0) * 0.5
    return Coeffs(
        common / a0,
        2.0 * common / a0,
        common / a0,
        -2.0 * cos_w0 / a0,
        (1.0 - alpha) / a0,
    )


@lru_cache(maxsize=1)
def _lut() -> tuple[tuple[Coeffs, ...], ...]:
    return tuple(
        tuple(_base_coeffs(_freq_at_index(f), _q_at_index(q)) for f in range(_FREQ_STEPS))
        for q in range(_Q_STEPS)
    )


def _interpolate(freq: float, q: float) -> Coeffs:
    freq = min(max(freq, _FREQ_MIN), _FREQ_MAX)
    q = min(max(q, _Q_MIN), _Q_MAX)

    freq_pos = (math.log(freq) - _LOG_FREQ_MIN) * _INV_LOG_FREQ_RANGE * (_FREQ_STEPS - 1)
    freq_pos = max(freq_pos, 0.0)
    q_pos = (q - _Q_MIN) / (_Q_MAX - _Q_MIN) * (_Q_STEPS - 1)

    fi0 = min(int(freq_pos), _FREQ_STEPS - 1)
    fi1 = min(fi0 + 1, _FREQ_STEPS - 1)
    qi0 = min(int(q_pos), _Q_STEPS - 1)
    qi1 = min(qi0 + 1, _Q_STEPS - 1)
    tf = freq_pos - fi0
    tq = q_pos - qi0

    table = _lut()
    row0, row1 = table[qi0], table[qi1]
    cf0 = row0[fi0]._lerp(row0[fi1], tf)
    cf1 = row1[fi0]._lerp(row1[fi1], tf)
    return cf0._lerp(cf1, tq)


def calc_coeffs(freq: float, q: float, mode: FilterMode = FilterMode.LOW_PASS) -> Coeffs:
    """Return coefficients for ``freq`` and ``q``, clamped to the table range."""
    base = _interpolate(freq, q)
    sign_b1, sign_b2 = _SIGNS.get(mode, (1.0, 1.0))
    return Coeffs(base.b0, base.b1 * sign_b1, base.b2 * sign_b2, base.a1, base.a2)


CoeffsSource = Union[Coeffs, Callable[[], Coeffs]]


@dataclass
class _History:
    """Direct-form I delay line for one channel."""

    x1: float = 0.0
    x2: float = 0.0
    y1: float = 0.0
    y2: float = 0.0

    def step(self, c: Coeffs, sample: float) -> float:
        out = c.b0 * sample + c.b1 * self.x1 + c.b2 * self.x2 - (c.a1 * self.y1 + c.a2 * self.y2)
        self.x2, self.x1 = self.x1, sample
        self.y2, self.y1 = self.y1, out
        return out


class SharedCoeffsBiquad:
    """Biquad whose coefficients are owned elsewhere.

    ``coeffs`` is either a fixed :class:`Coeffs` or a callable returning the
    current coefficients, looked up on every sample.
    """

    def __init__(self, coeffs: CoeffsSource) -> None:
        self.coeffs = coeffs
        self._left = _History()
        self._right = _History()

    def _current(self) -> Coeffs:
        source = self.coeffs
        return source() if callable(source) else source

    def reset_state(self) -> None:
        """Clear the filter history of both channels."""
        self._left = _History()
        self._right = _History()

    def process(self, sample: float) -> float:
        """Filter one mono sample (uses the left-channel history)."""
        return self._left.step(self._current(), sample)

    def process_lr(self, left: float, right: float) -> tuple[float, float]:
        """Filter one stereo frame and return the filtered pair."""
        c = self._current()
        return self._left.step(c, left), self._right.step(c, right)


class BiquadFilter:
    """Biquad that keeps and recomputes its own coefficients."""

    def __init__(
        self,
        mode: FilterMode = FilterMode.LOW_PASS,
        freq: float = 20000.0,
        q: float = 0.707,
    ) -> None:
        self._left = _History()
        self._right = _History()
        self._mode = FilterMode(mode)
        self._freq = freq
        self._q = q
        self._update()

    def _update(self) -> None:
        self._coeffs = calc_coeffs(self._freq, self._q, self._mode)

    @property
    def coeffs(self) -> Coeffs:
        return self._coeffs

    @property
    def mode(self) -> FilterMode:
        return self._mode

    @mode.setter
    def mode(self, value: FilterMode) -> None:
        self._mode = FilterMode(value)
        self._update()

    @property
    def freq(self) -> float:
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        if value != self._freq:
            self._freq = value
            self._update()

    @property
    def q(self) -> float:
        return self._q

    @q.setter
    def q(self, value: float) -> None:
        if value != self._q:
            self._q = value
            self._update()

    def set_freq_and_q(self, freq: float, q: float) -> None:
        """Change cutoff and resonance together, recomputing once."""
        if freq != self._freq or q != self._q:
            self._freq = freq
            self._q = q
            self._update()

    def reset_state(self) -> None:
        """Clear the filter history of both channels."""
        self._left = _History()
        self._right = _History()

    def process(self, sample: float) -> float:
        """Filter one mono sample (uses the left-channel history)."""
        return self._left.step(self._coeffs, sample)

    def process_lr(self, left: float, right: float) -> tuple[float, float]:
        """Filter one stereo frame and return the filtered pair."""
        c = self._coeffs
        return self._left.step(c, left), self._right.step(c, right)