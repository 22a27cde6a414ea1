"""Synthesizer-wide audio and engine settings."""

# Audio
DMA_BUFFER_NUM = 2
DMA_BUFFER_LEN = 64
CHANNEL_SAMPLE_BYTES = 2
SAMPLE_RATE = 44100

# Synthesizer
MAX_VOICES = 20
MAX_VOICES_PER_NOTE = 2
PITCH_BEND_CENTER = 0

ENABLE_IN_VOICE_FILTERS = False
ENABLE_REVERB = True
ENABLE_CHORUS = True
ENABLE_DELAY = False
ENABLE_CH_FILTER = False
ENABLE_CH_FILTER_M = True

CH_FILTER_MAX_FREQ = 12000.0
CH_FILTER_MIN_FREQ = 50.0
FILTER_MAX_Q = 7.0

SF2_PATH = "/"