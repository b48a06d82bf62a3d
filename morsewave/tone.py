# tone.py — single pitch value type + notable reference notes
# ------------------------------------------------------------
# A Tone carries only its frequency. Identity is the frequency:
# two tones at 440 Hz are the same tone.
# ------------------------------------------------------------
from __future__ import annotations

import math
from dataclasses import dataclass

from morsewave.utils import midi2freq

__all__ = ["Tone", "A4", "C4_SHARP", "C0", "E0", "G0"]


@dataclass(frozen=True, slots=True)
class Tone:
    """Immutable pitch.

    Parameters
    ----------
    frequency : float
        Pitch in Hz, strictly positive.
    """

    frequency: float

    def __post_init__(self):
        if not math.isfinite(self.frequency) or self.frequency <= 0:
            raise ValueError(f"tone frequency must be a positive number, got {self.frequency!r}")

    @classmethod
    def from_midi(cls, note: int) -> "Tone":
        return cls(midi2freq(note))


# ------------------------------------------------------------------
# Notable notes
# ------------------------------------------------------------------
A4 = Tone(440.0)
C4_SHARP = Tone(277.18)
C0 = Tone(16.35)
E0 = Tone(20.60)
G0 = Tone(24.50)  # spacer tone for silent gaps
