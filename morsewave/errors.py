# errors.py — exception types raised by morsewave
# -----------------------------------------------
# Every error derives from MorseWaveError and mixes in the builtin
# type callers already expect (ValueError / LookupError).
# -----------------------------------------------
from __future__ import annotations

__all__ = [
    "MorseWaveError",
    "UnsupportedSymbolError",
    "UnsupportedCharacterError",
    "EnvelopeStageNotFound",
    "ConfigError",
]


class MorseWaveError(Exception):
    """Base class for every error the package raises on purpose."""


class UnsupportedSymbolError(MorseWaveError, ValueError):
    """A symbol stream contained something other than '.', '-', '/' or whitespace."""

    def __init__(self, symbol: str, position: int):
        super().__init__(f"unsupported morse symbol {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class UnsupportedCharacterError(MorseWaveError, ValueError):
    """Text or morse token with no entry in the alphabet."""

    def __init__(self, token: str):
        super().__init__(f"no representation found for: {token!r}")
        self.token = token


class EnvelopeStageNotFound(MorseWaveError, LookupError):
    def __init__(self, step: float):
        super().__init__(f"interval not found for step {step}")
        self.step = step


class ConfigError(MorseWaveError, ValueError):
    pass
