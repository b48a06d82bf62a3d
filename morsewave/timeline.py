# timeline.py — morse symbol stream → timed tone segments → samples
# -------------------------------------------------------------------
#   '.'  dot    0.1 s  audible
#   '-'  dash   0.2 s  audible
#   '/'  word   0.4 s  silent
#   ' '  letter boundary, zero length
# Every symbol is followed by a 0.1 s silent gap on the G0 spacer tone.
# -------------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Iterator, List, Optional

import numpy as np

from morsewave.amplitude import MEDIUM, SILENT, Amplitude
from morsewave.envelope import Envelope
from morsewave.errors import UnsupportedSymbolError
from morsewave.oscillator import SAMPLE_RATE
from morsewave.synth import audio_wave
from morsewave.tone import A4, G0, Tone

__all__ = [
    "DOT_DURATION",
    "DASH_DURATION",
    "SLASH_DURATION",
    "GAP_DURATION",
    "Segment",
    "SymbolTimeline",
    "render_symbols",
]

_LOG = logging.getLogger("morsewave.timeline")

DOT_DURATION: Final = 0.1
DASH_DURATION: Final = DOT_DURATION * 2.0
SLASH_DURATION: Final = DOT_DURATION * 4.0
GAP_DURATION: Final = DOT_DURATION


@dataclass(frozen=True, slots=True)
class Segment:
    symbol: str
    tone: Tone
    duration: float  # seconds
    amplitude: Amplitude

    @property
    def audible(self) -> bool:
        return self.duration > 0 and not self.amplitude.is_silent


# ------------------------------------------------------------------
@dataclass(slots=True)
class SymbolTimeline:
    """Turns a flat morse symbol stream into segments and samples.

    Parameters
    ----------
    tone : Tone
        Pitch of dots and dashes.
    volume : Amplitude
        Loudness of dots and dashes.
    fs : int
        Sample rate used by :meth:`render`.
    keying : bool
        Shape every audible segment with :meth:`Envelope.keyed`.
    """

    tone: Tone = A4
    volume: Amplitude = MEDIUM
    fs: int = SAMPLE_RATE
    keying: bool = False
    spacer: Tone = G0

    def _segment(self, symbol: str, position: int) -> Segment:
        if symbol == ".":
            return Segment(symbol, self.tone, DOT_DURATION, self.volume)
        if symbol == "-":
            return Segment(symbol, self.tone, DASH_DURATION, self.volume)
        if symbol == "/":
            return Segment(symbol, self.tone, SLASH_DURATION, SILENT)
        if symbol.isspace():
            return Segment(symbol, self.tone, 0.0, SILENT)
        raise UnsupportedSymbolError(symbol, position)

    def segments(self, symbols: Iterable[str]) -> Iterator[Segment]:
        """Yield each symbol's segment followed by its silent gap."""
        for position, symbol in enumerate(symbols):
            yield self._segment(symbol, position)
            yield Segment(" ", self.spacer, GAP_DURATION, SILENT)

    def render_segment(self, segment: Segment) -> np.ndarray:
        wave = audio_wave(segment.tone, segment.duration, segment.amplitude, self.fs)
        if self.keying and segment.audible:
            wave = Envelope.keyed(segment.duration).shape(wave, self.fs)
        return wave

    def render(self, symbols: Iterable[str]) -> np.ndarray:
        """All segments rendered and concatenated in input order (int16).

        The whole stream is resolved before any sample is produced, so an
        unsupported symbol anywhere aborts without partial output.
        """
        segments: List[Segment] = list(self.segments(symbols))
        chunks = [self.render_segment(s) for s in segments]
        _LOG.debug("rendered %d segments", len(segments))
        if not chunks:
            return np.zeros(0, dtype=np.int16)
        return np.concatenate(chunks)

    def duration(self, symbols: Iterable[str]) -> float:
        return sum(s.duration for s in self.segments(symbols))


def render_symbols(symbols: Iterable[str], timeline: Optional[SymbolTimeline] = None) -> np.ndarray:
    """Shortcut for ``SymbolTimeline().render(symbols)``."""
    return (timeline or SymbolTimeline()).render(symbols)
