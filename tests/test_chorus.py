import pytest

from sf2synth.chorus import FxChorus
from sf2synth.config import SAMPLE_RATE


def _impulse(n, at=0):
    block = [0.0] * n
    block[at] = 1.0
    return block


def test_silence_stays_silent():
    chorus = FxChorus()
    out_l, out_r = chorus.process_block([0.0] * 256, [0.0] * 256)
    assert out_l == [0.0] * 256
    assert out_r == [0.0] * 256


def test_output_has_input_length():
    chorus = FxChorus()
    out_l, out_r = chorus.process_block([0.1] * 37, [0.2] * 37)
    assert len(out_l) == 37
    assert len(out_r) == 37


def test_mismatched_lengths_raise():
    chorus = FxChorus()
    with pytest.raises(ValueError):
        chorus.process_block([0.0] * 4, [0.0] * 5)


def test_fixed_delay_moves_impulse():
    chorus = FxChorus(depth=0.0, base_delay=10 / SAMPLE_RATE)
    out_l, out_r = chorus.process_block(_impulse(64), _impulse(64))
    assert out_l[10] == pytest.approx(1.0, abs=1e-9)
    assert out_r[10] == pytest.approx(1.0, abs=1e-9)
    assert sum(out_l) == pytest.approx(1.0)
    assert all(v == 0.0 for v in out_l[:9])


def test_nothing_comes_out_before_base_delay():
    chorus = FxChorus()
    out_l, _ = chorus.process_block([1.0] * 512, [1.0] * 512)
    assert all(v == 0.0 for v in out_l)


def test_zero_depth_keeps_channels_identical():
    chorus = FxChorus(depth=0.0)
    signal = [((i * 7) % 13) / 13.0 for i in range(3000)]
    out_l, out_r = chorus.process_block(signal, signal)
    assert out_l == out_r


def test_modulation_makes_channels_differ():
    chorus = FxChorus(lfo_freq=5.0, depth=0.005)
    signal = [((i * 7) % 13) / 13.0 for i in range(4000)]
    out_l, out_r = chorus.process_block(signal, signal)
    assert max(abs(a - b) for a, b in zip(out_l, out_r)) > 1e-3


def test_state_carries_across_blocks():
    whole = FxChorus(depth=0.0, base_delay=100 / SAMPLE_RATE)
    split = FxChorus(depth=0.0, base_delay=100 / SAMPLE_RATE)
    signal = [float(i % 5) for i in range(256)]
    expected, _ = whole.process_block(signal, signal)
    first, _ = split.process_block(signal[:64], signal[:64])
    rest, _ = split.process_block(signal[64:], signal[64:])
    assert first + rest == pytest.approx(expected)