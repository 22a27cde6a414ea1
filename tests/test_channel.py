import pytest

from sf2synth.biquad import FilterMode, calc_coeffs
from sf2synth.channel import (
    NOTE_STACK_SIZE,
    ChannelState,
    MonoMode,
    ParamPair,
)


def test_note_stack_push_and_top():
    ch = ChannelState()
    assert ch.top_note() is None
    assert not ch.has_notes()
    ch.push_note(60)
    ch.push_note(64)
    assert ch.top_note() == 64
    assert ch.has_notes()


def test_note_stack_remove_middle_keeps_order():
    ch = ChannelState()
    for n in (60, 62, 64):
        ch.push_note(n)
    ch.remove_note(62)
    assert ch.note_stack == [60, 64]
    ch.remove_note(64)
    assert ch.top_note() == 60


def test_remove_missing_note_is_harmless():
    ch = ChannelState()
    ch.push_note(60)
    ch.remove_note(70)
    assert ch.note_stack == [60]


def test_note_stack_is_bounded():
    ch = ChannelState()
    for n in range(NOTE_STACK_SIZE + 4):
        ch.push_note(n)
    assert len(ch.note_stack) == NOTE_STACK_SIZE
    assert ch.top_note() == NOTE_STACK_SIZE - 1


def test_clear_note_stack():
    ch = ChannelState()
    ch.push_note(1)
    ch.push_note(2)
    ch.clear_note_stack()
    assert not ch.has_notes()
    assert ch.top_note() is None


@pytest.mark.parametrize("bank", [0, 1, 127, 128, 300, 16383])
def test_set_bank_round_trip(bank):
    ch = ChannelState()
    ch.set_bank(bank)
    assert ch.bank == bank
    assert 0 <= ch.bank_msb <= 0x7F
    assert 0 <= ch.bank_lsb <= 0x7F


def test_set_bank_128_is_msb_one():
    ch = ChannelState()
    ch.set_bank(128)
    assert (ch.bank_msb, ch.bank_lsb) == (1, 0)


def test_want_bank_combines_msb_and_lsb():
    ch = ChannelState(want_bank_msb=1, want_bank_lsb=5)
    other = ChannelState()
    other.set_bank(ch.want_bank)
    assert (other.bank_msb, other.bank_lsb) == (1, 5)


def test_effective_volume_is_product():
    ch = ChannelState(volume=0.5, expression=0.25)
    assert ch.effective_volume == pytest.approx(0.5 * 0.25)


def test_param_pair_defaults_to_none_selected():
    pair = ParamPair()
    assert (pair.msb, pair.lsb) == (0x7F, 0x7F)


def test_update_filter_stores_and_recomputes():
    ch = ChannelState()
    ch.update_filter(1000.0, 2.0)
    assert ch.filter_cutoff == 1000.0
    assert ch.filter_resonance == 2.0
    assert ch.filter_coeffs == calc_coeffs(1000.0, 2.0, FilterMode.LOW_PASS)


def test_recalc_filter_uses_stored_values():
    ch = ChannelState()
    ch.filter_cutoff = 500.0
    ch.filter_resonance = 3.0
    ch.recalc_filter()
    assert ch.filter_coeffs == calc_coeffs(500.0, 3.0, FilterMode.LOW_PASS)


def test_reset_filter_restores_open_filter():
    ch = ChannelState()
    ch.update_filter(300.0, 5.0)
    ch.reset_filter()
    assert ch.filter_cutoff == 20000.0
    assert ch.filter_resonance == 0.707
    assert ch.filter_coeffs == ChannelState().filter_coeffs


def test_reset_restores_controllers():
    ch = ChannelState(
        is_drum=True,
        volume=0.1,
        expression=0.2,
        mod_wheel=0.9,
        sustain_pedal=True,
        portamento=True,
        mono_mode=MonoMode.MONO_RETRIG,
        pitch_bend_range=12.0,
    )
    ch.push_note(60)
    ch.update_filter(100.0, 4.0)
    ch.reset()
    assert ch.is_drum is False
    assert ch.volume == 1.0
    assert ch.expression == 1.0
    assert ch.mod_wheel == 0.0
    assert ch.pan == 0.0
    assert ch.reverb_send == 0.05
    assert ch.pitch_bend_range == 2.0
    assert ch.sustain_pedal is False
    assert ch.portamento is False
    assert ch.mono_mode is MonoMode.POLY
    assert not ch.has_notes()
    assert ch.filter_cutoff == 20000.0


def test_reset_keeps_bank_and_program():
    ch = ChannelState(program=5)
    ch.set_bank(128)
    ch.reset()
    assert ch.program == 5
    assert ch.bank == 128