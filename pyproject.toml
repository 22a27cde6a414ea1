[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sf2synth"
version = "0.1.0"
description = "Building blocks for a SoundFont synthesizer: biquad filters, chorus, delay and reverb effects, MIDI channel state, SF2 generator operators and a debounced button handler"
requires-python = ">=3.10"
dependencies = []
keywords = ["soundfont", "sf2", "synthesizer", "audio", "dsp", "reverb", "chorus", "delay", "biquad", "midi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sf2synth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
