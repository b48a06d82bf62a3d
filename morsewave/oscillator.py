# oscillator.py — sine oscillator (scalar + vectorised)
# -----------------------------------------------------
#   angular = 2π · f · t / fs
#   sample  = floor(peak · sin(angular))  → int16 (saturating)
# Both forms evaluate the angle in the same operation order.
# -----------------------------------------------------
from __future__ import annotations

import math
from typing import Final

import numpy as np

__all__ = [
    "SAMPLE_RATE",
    "MAX_AMPLITUDE",
    "angular",
    "sample",
    "unit_wave",
    "quantise",
]

SAMPLE_RATE: Final = 44_100
MAX_AMPLITUDE: Final = 32_767.0  # int16 max

_I16_MIN: Final = -32_768
_I16_MAX: Final = 32_767


def angular(frequency: float, time_index: float, sample_rate: int) -> float:
    return 2.0 * math.pi * frequency * time_index / sample_rate


def sample(frequency: float, time_index: int, sample_rate: int, peak_amplitude: float) -> int:
    """One signed 16-bit sample of a sine at *frequency*, step *time_index*."""
    raw = math.sin(angular(frequency, time_index, sample_rate))
    value = math.floor(peak_amplitude * raw)
    return min(max(value, _I16_MIN), _I16_MAX)


def unit_wave(frequency: float, nsamples: int, sample_rate: int) -> np.ndarray:
    """sin(2π·f·t/fs) for t = 0 … nsamples-1 (float64, peak 1.0)."""
    t = np.arange(nsamples, dtype=np.float64)
    return np.sin(2.0 * np.pi * frequency * t / sample_rate)


def quantise(x: np.ndarray) -> np.ndarray:
    """floor + saturate to int16."""
    return np.clip(np.floor(x), _I16_MIN, _I16_MAX).astype(np.int16)
