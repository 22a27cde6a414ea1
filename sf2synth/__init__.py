"""Filters, effects, channel state, SF2 generator operators and a button handler for a SoundFont synthesizer."""

__version__ = "0.1.0"