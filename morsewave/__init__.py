# morsewave/__init__.py
from .amplitude import Amplitude, SILENT, LOW, MEDIUM, HIGH
from .tone import Tone, A4, C4_SHARP, C0, E0, G0
from .oscillator import SAMPLE_RATE, MAX_AMPLITUDE
from .synth import audio_wave, combine, silence
from .envelope import Envelope, EnvelopeInterval, Interpolation, Stage
from .timeline import Segment, SymbolTimeline, render_symbols
from .wavfile import write_wav, encode_wav, save_wav
from .alphabet import Letter, encode_line, decode_line, to_symbol_stream
from .config import RenderConfig
from .translator import Command, OutputType, MorseTranslator
from .errors import (
    MorseWaveError, UnsupportedSymbolError, UnsupportedCharacterError,
    EnvelopeStageNotFound, ConfigError,
)

__all__ = [
    "Amplitude", "SILENT", "LOW", "MEDIUM", "HIGH",
    "Tone", "A4", "C4_SHARP", "C0", "E0", "G0",
    "SAMPLE_RATE", "MAX_AMPLITUDE",
    "audio_wave", "combine", "silence",
    "Envelope", "EnvelopeInterval", "Interpolation", "Stage",
    "Segment", "SymbolTimeline", "render_symbols",
    "write_wav", "encode_wav", "save_wav",
    "Letter", "encode_line", "decode_line", "to_symbol_stream",
    "RenderConfig",
    "Command", "OutputType", "MorseTranslator",
    "MorseWaveError", "UnsupportedSymbolError", "UnsupportedCharacterError",
    "EnvelopeStageNotFound", "ConfigError",
]
