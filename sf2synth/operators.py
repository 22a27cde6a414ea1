"""SoundFont 2 generator operators."""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class GeneratorOperator(IntEnum):
    """Generator operator numbers as defined by the SF2 format."""

    START_ADDR_OFFSET = 0
    END_ADDR_OFFSET = 1
    START_LOOP_ADDR_OFFSET = 2
    END_LOOP_ADDR_OFFSET = 3
    START_ADDR_COARSE_OFFSET = 4
    MOD_LFO_TO_PITCH = 5
    VIB_LFO_TO_PITCH = 6
    MOD_ENV_TO_PITCH = 7
    INITIAL_FILTER_FC = 8
    INITIAL_FILTER_Q = 9
    MOD_LFO_TO_FILTER_FC = 10
    MOD_ENV_TO_FILTER_FC = 11
    END_ADDR_COARSE_OFFSET = 12
    MOD_LFO_TO_VOLUME = 13
    CHORUS_EFFECTS_SEND = 15
    REVERB_EFFECTS_SEND = 16
    PAN = 17
    MOD_LFO_DELAY = 21
    MOD_LFO_FREQ = 22
    VIB_LFO_DELAY = 23
    VIB_LFO_FREQ = 24
    DELAY_MOD_ENV = 25
    ATTACK_MOD_ENV = 26
    HOLD_MOD_ENV = 27
    DECAY_MOD_ENV = 28
    SUSTAIN_MOD_ENV = 29
    RELEASE_MOD_ENV = 30
    KEYNUM_TO_MOD_ENV_HOLD = 31
    KEYNUM_TO_MOD_ENV_DECAY = 32
    DELAY_VOL_ENV = 33
    ATTACK_VOL_ENV = 34
    HOLD_VOL_ENV = 35
    DECAY_VOL_ENV = 36
    SUSTAIN_VOL_ENV = 37
    RELEASE_VOL_ENV = 38
    KEYNUM_TO_VOL_ENV_HOLD = 39
    KEYNUM_TO_VOL_ENV_DECAY = 40
    INSTRUMENT = 41
    KEY_RANGE = 43
    VEL_RANGE = 44
    START_LOOP_ADDR_COARSE_OFFSET = 45
    KEYNUM = 46
    VELOCITY = 47
    INITIAL_ATTENUATION = 48
    END_LOOP_ADDR_COARSE_OFFSET = 50
    COARSE_TUNE = 51
    FINE_TUNE = 52
    SAMPLE_ID = 53
    SAMPLE_MODES = 54
    SCALE_TUNING = 56
    EXCLUSIVE_CLASS = 57
    OVERRIDING_ROOT_KEY = 58

    @property
    def label(self) -> str:
        """The operator's display name, e.g. ``"ModLfoToPitch"``."""
        if self is GeneratorOperator.SAMPLE_ID:
            return "SampleID"
        return "".join(part.capitalize() for part in self.name.split("_"))


UNKNOWN_OPERATOR = "UnknownOperator"


def operator_name(op: Union[GeneratorOperator, int]) -> str:
    """Return the display name of ``op``, or ``"UnknownOperator"``."""
    try:
        return GeneratorOperator(op).label
    except ValueError:
        return UNKNOWN_OPERATOR


def to_generator_operator(raw: int) -> Union[GeneratorOperator, int]:
    """Convert a raw 16-bit generator number.

    Numbers above the last operator map to ``START_ADDR_OFFSET``. Numbers in
    range that name no operator (reserved or unused slots) come back as the
    plain integer.
    """
    if not 0 <= raw <= 0xFFFF:
        raise ValueError(f"generator number out of 16-bit range: {raw}")
    if raw > GeneratorOperator.OVERRIDING_ROOT_KEY:
        return GeneratorOperator.START_ADDR_OFFSET
    try:
        return GeneratorOperator(raw)
    except ValueError:
        return raw