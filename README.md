# sf2synth

Building blocks for a SoundFont (SF2) wavetable synthesizer, in plain Python
with no dependencies beyond the standard library.

## Modules

- `sf2synth.biquad`: filter coefficients from a log-frequency × Q lookup
  table with bilinear interpolation. `calc_coeffs(freq, q, mode)` returns a
  frozen `Coeffs` (b0, b1, b2, a1, a2) for a `FilterMode` (`LOW_PASS`,
  `HIGH_PASS`, `BAND_PASS`, `NOTCH`); frequency is clamped to 20–20000 Hz and
  Q to 0.5–7.0. Two filters use them:
  - `BiquadFilter(mode, freq, q)` keeps its own coefficients and recomputes
    them when `mode`, `freq`, `q` or `set_freq_and_q()` change them.
  - `SharedCoeffsBiquad(coeffs)` takes a `Coeffs` or a callable returning
    one, looked up on every sample, so several filters can follow one source.

  Both have `process(sample)` for mono, `process_lr(left, right)` returning
  the filtered pair, and `reset_state()`.
- `sf2synth.operators`: the SF2 generator operators as `GeneratorOperator`,
  `operator_name(op)` (e.g. `"ModLfoToPitch"`, or `"UnknownOperator"`), and
  `to_generator_operator(raw)`, which maps numbers above 58 to
  `START_ADDR_OFFSET`, returns unassigned numbers as plain integers and raises
  `ValueError` outside the 16-bit range.
- `sf2synth.channel`: `ChannelState`, a dataclass of one MIDI channel's
  controllers (volume, expression, pan, mod wheel, sends, pitch bend,
  sustain, portamento), bank/program selection (`bank`, `want_bank`,
  `set_bank()`), RPN/NRPN numbers (`ParamPair`), `MonoMode`, an eight-note
  stack (`push_note`, `remove_note`, `top_note`, `has_notes`,
  `clear_note_stack`), a low-pass channel filter (`update_filter`,
  `recalc_filter`, `reset_filter`, `filter_coeffs`) and `reset()`.
- `sf2synth.button`: `MuxButton(button_id, callback)`, a debounced button
  state machine. Call `process(level, now_ms)` with the raw input level
  (0 means pressed) and the time in milliseconds; the callback receives
  `(button_id, ButtonEvent)` for `TOUCH`, `PRESS`, `LONG_PRESS`,
  `AUTO_CLICK`, `CLICK` and `RELEASE`. Auto-repeat and clicks after a long
  press are switched by the `auto_click` and `late_click` attributes; the
  timings by the `set_*_ms()` methods.
- `sf2synth.chorus`: `FxChorus(lfo_freq, depth, base_delay)`, a stereo
  chorus with opposite LFO modulation on each side.
- `sf2synth.delay`: `FxDelay(max_delay)`, a stereo delay with
  `set_feedback()` (0–0.95), tempo-synced `set_delay_time(DelayTimeDiv, bpm)`,
  `set_custom_length(seconds)` and a `mode` of `DelayMode.NORMAL` or
  `DelayMode.PING_PONG`.
- `sf2synth.reverb`: `FxReverb(size_multiplier)`, a reverb of four damped
  combs and three allpasses per channel fed by a mono sum, with
  `set_pre_delay_time(ms)` (up to 100 ms), `set_time()`, `set_damping()`
  and a `level` attribute.
- `sf2synth.config`: the shared settings (sample rate 44100 Hz, block length
  64, filter limits).

## Installing

```
pip install .
```

## Example

```python
from sf2synth.biquad import BiquadFilter, FilterMode
from sf2synth.reverb import FxReverb

lowpass = BiquadFilter(FilterMode.LOW_PASS, 1000.0, 0.707)
filtered = [lowpass.process(x) for x in (1.0, 0.0, 0.0, 0.0)]

reverb = FxReverb()
wet_left, wet_right = reverb.process(0.5, 0.5)
```

The effects' `process_block(left, right)` takes two sequences of floats of
equal length (a `ValueError` otherwise) and returns a new pair of lists
holding the wet signal; the inputs are left unchanged.

## What it does not do

This package holds components only. It does not read SoundFont files, has no
voice engine that plays samples or allocates voices, does not take MIDI
input, does not write audio to a device or file, and has no command to run.

## Tests

```
pip install .[test]
pytest
```