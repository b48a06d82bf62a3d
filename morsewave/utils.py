# utils.py — common helper functions
# -----------------------------------
# • MIDI → frequency conversion
# • value clamping
# • sample count for a duration
# -----------------------------------
from __future__ import annotations

import math
from typing import Final

__all__ = [
    "midi2freq",
    "clamp",
    "sample_count",
]

_A4_MIDI: Final = 69
_A4_FREQ: Final = 440.0

# ------------------------------------------------------------------
# MIDI → Hz
# ------------------------------------------------------------------

def midi2freq(note: int) -> float:
    """Convert MIDI note (int) to frequency in Hz."""
    return _A4_FREQ * 2 ** ((note - _A4_MIDI) / 12)


# ------------------------------------------------------------------
# Misc util
# ------------------------------------------------------------------

def clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def sample_count(duration: float, fs: int) -> int:
    """Number of samples covering *duration* seconds: floor(duration * fs)."""
    if duration < 0:
        raise ValueError(f"duration must be >= 0, got {duration}")
    if fs <= 0:
        raise ValueError(f"sample rate must be > 0, got {fs}")
    return int(math.floor(duration * fs))
