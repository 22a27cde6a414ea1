"""Per-channel MIDI controller state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .biquad import Coeffs, FilterMode, calc_coeffs

NOTE_STACK_SIZE = 8
DEFAULT_FILTER_CUTOFF = 20000.0
DEFAULT_FILTER_RESONANCE = 0.707


class MonoMode(IntEnum):
    """Voice allocation mode of a channel."""

    POLY = 0
    MONO_LEGATO = 1
    MONO_RETRIG = 2


@dataclass
class ParamPair:
    """An RPN or NRPN parameter number; 0x7F/0x7F means "none selected"."""

    msb: int = 0x7F
    lsb: int = 0x7F


def _default_filter_coeffs() -> Coeffs:
    return calc_coeffs(DEFAULT_FILTER_CUTOFF, DEFAULT_FILTER_RESONANCE, FilterMode.LOW_PASS)


@dataclass
class ChannelState:
    """Controller values, bank/program selection and held notes of one channel."""

    is_drum: bool = False

    porta_time: float = 0.2  # CC#5
    volume: float = 1.0  # CC#7
    expression: float = 1.0  # CC#11
    pan: float = 0.5  # CC#10, 0 = left, 1 = right
    mod_wheel: float = 0.0  # CC#1

    porta_current_note: int = 60

    reverb_send: float = 0.0  # CC#91
    chorus_send: float = 0.0  # CC#93
    delay_send: float = 0.0  # CC#95

    attack_modifier: float = 0.0  # CC#73, -1..1
    release_modifier: float = 0.0  # CC#72, -1..1

    pitch_bend: float = 0.0  # -1..1
    pitch_bend_range: float = 2.0  # semitones
    pitch_bend_factor: float = 1.0

    sustain_pedal: bool = False  # CC#64
    portamento: bool = False  # CC#65

    bank_msb: int = 0
    bank_lsb: int = 0
    program: int = 0

    want_bank_msb: int = 0
    want_bank_lsb: int = 0
    want_program: int = 0

    rpn: ParamPair = field(default_factory=ParamPair)
    nrpn: ParamPair = field(default_factory=ParamPair)

    mono_mode: MonoMode = MonoMode.POLY
    note_stack: list[int] = field(default_factory=list)

    filter_cutoff: float = DEFAULT_FILTER_CUTOFF
    filter_resonance: float = DEFAULT_FILTER_RESONANCE
    filter_coeffs: Coeffs = field(default_factory=_default_filter_coeffs)

    # Held notes (used by the mono modes)

    def push_note(self, note: int) -> None:
        """Push a held note; ignored once the stack is full."""
        if len(self.note_stack) < NOTE_STACK_SIZE:
            self.note_stack.append(note)

    def remove_note(self, note: int) -> None:
        """Remove the oldest occurrence of ``note`` from the stack, if held."""
        try:
            self.note_stack.remove(note)
        except ValueError:
            pass

    def top_note(self) -> Optional[int]:
        """The most recently pushed note, or ``None`` if no note is held."""
        return self.note_stack[-1] if self.note_stack else None

    def has_notes(self) -> bool:
        """Whether any note is held."""
        return bool(self.note_stack)

    def clear_note_stack(self) -> None:
        """Forget all held notes."""
        self.note_stack.clear()

    # Bank selection

    @property
    def bank(self) -> int:
        """The active 14-bit bank number."""
        return (self.bank_msb << 7) | self.bank_lsb

    @property
    def want_bank(self) -> int:
        """The requested 14-bit bank number."""
        return (self.want_bank_msb << 7) | self.want_bank_lsb

    def set_bank(self, bank: int) -> None:
        """Split ``bank`` into its 7-bit MSB and LSB."""
        self.bank_msb = (bank >> 7) & 0x7F
        self.bank_lsb = bank & 0x7F

    @property
    def effective_volume(self) -> float:
        """Channel volume scaled by expression."""
        return self.volume * self.expression

    # Low-pass channel filter

    def update_filter(self, cutoff: float, resonance: float) -> None:
        """Set cutoff and resonance and recompute the filter coefficients."""
        self.filter_cutoff = cutoff
        self.filter_resonance = resonance
        self.recalc_filter()

    def recalc_filter(self) -> None:
        """Recompute the coefficients from the stored cutoff and resonance."""
        self.filter_coeffs = calc_coeffs(
            self.filter_cutoff, self.filter_resonance, FilterMode.LOW_PASS
        )

    def reset_filter(self) -> None:
        """Open the filter fully."""
        self.update_filter(DEFAULT_FILTER_CUTOFF, DEFAULT_FILTER_RESONANCE)

    def reset(self) -> None:
        """Return the controllers to their reset values."""
        self.is_drum = False
        self.volume = 1.0
        self.pan = 0.0
        self.expression = 1.0
        self.pitch_bend = 0.0
        self.pitch_bend_range = 2.0
        self.pitch_bend_factor = 1.0
        self.mod_wheel = 0.0
        self.reverb_send = 0.05
        self.chorus_send = 0.0
        self.delay_send = 0.0
        self.sustain_pedal = False
        self.porta_time = 0.2
        self.portamento = False
        self.mono_mode = MonoMode.POLY
        self.clear_note_stack()
        self.reset_filter()