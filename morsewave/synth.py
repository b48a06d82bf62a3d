# synth.py — waveform generation for one tone or a mix of tones
# -------------------------------------------------------------------------
# Public functions
#   audio_wave(tone, duration, volume, fs=44100) -> np.ndarray[int16]
#   combine(tones, duration, volume, fs=44100)   -> np.ndarray[int16]
#   silence(duration, fs=44100)                  -> np.ndarray[int16]
# -------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from morsewave.amplitude import Amplitude
from morsewave.oscillator import MAX_AMPLITUDE, SAMPLE_RATE, quantise, unit_wave
from morsewave.tone import Tone
from morsewave.utils import sample_count

__all__ = ["audio_wave", "combine", "silence"]

_LOG = logging.getLogger("morsewave.synth")


def silence(duration: float, fs: int = SAMPLE_RATE) -> np.ndarray:
    """All-zero int16 buffer of floor(duration * fs) samples."""
    return np.zeros(sample_count(duration, fs), dtype=np.int16)


def audio_wave(
    tone: Tone,
    duration: float,
    volume: Amplitude,
    fs: int = SAMPLE_RATE,
) -> np.ndarray:
    """
    Parameters
    ----------
    tone     : pitch to render
    duration : seconds (>= 0)
    volume   : loudness; SILENT short-circuits to zeros
    fs       : sample rate

    Returns
    -------
    np.ndarray
        int16 samples, ``floor(duration * fs)`` long.
    """
    n = sample_count(duration, fs)
    if volume.is_silent:
        return np.zeros(n, dtype=np.int16)

    peak = MAX_AMPLITUDE * volume.scale()
    return quantise(peak * unit_wave(tone.frequency, n, fs))


def combine(
    tones: Sequence[Tone],
    duration: float,
    volume: Amplitude,
    fs: int = SAMPLE_RATE,
) -> np.ndarray:
    """Mix *tones* into one buffer.

    Every tone is evaluated at unit amplitude, the values are averaged per
    sample and only then scaled by the volume. Mixing a single tone gives
    exactly :func:`audio_wave` for that tone.
    """
    if len(tones) == 0:
        raise ValueError("combine() needs at least one tone")

    n = sample_count(duration, fs)
    if volume.is_silent:
        return np.zeros(n, dtype=np.int16)

    _LOG.debug("mixing %d tones over %d samples", len(tones), n)
    layers = np.stack([unit_wave(t.frequency, n, fs) for t in tones])
    mix = layers.mean(axis=0)

    peak = MAX_AMPLITUDE * volume.scale()
    return quantise(peak * mix)
