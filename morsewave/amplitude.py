# amplitude.py — named / custom loudness levels
# ----------------------------------------------
# Closed set: SILENT, LOW, MEDIUM, HIGH and Amplitude.custom(v).
# Every level resolves to a unit-interval scale factor; custom
# values are clamped into [0.01, 1.0] rather than rejected.
# ----------------------------------------------
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Final, Optional

from morsewave.utils import clamp

__all__ = ["Amplitude", "SILENT", "LOW", "MEDIUM", "HIGH"]

_CUSTOM_MIN: Final = 0.01
_CUSTOM_MAX: Final = 1.0

_NAMED_SCALES: Final = {
    "silent": 0.0,
    "low": 0.3,
    "medium": 0.5,
    "high": 0.8,
}


@dataclass(frozen=True, slots=True)
class Amplitude:
    """Loudness level.

    Use the module constants for the named levels and
    :meth:`Amplitude.custom` for anything else.
    """

    name: str
    value: Optional[float] = None  # only set for "custom"

    CUSTOM: ClassVar[str] = "custom"

    def __post_init__(self):
        if self.name == self.CUSTOM:
            if self.value is None or math.isnan(self.value):
                raise ValueError("custom amplitude needs a numeric value")
        elif self.name not in _NAMED_SCALES:
            raise ValueError(f"unknown amplitude level: {self.name!r}")

    @classmethod
    def custom(cls, value: float) -> "Amplitude":
        return cls(cls.CUSTOM, float(value))

    @classmethod
    def parse(cls, text: str) -> "Amplitude":
        """Build from a level name (case-insensitive) or a number."""
        key = text.strip().lower()
        if key in _NAMED_SCALES:
            return cls(key)
        try:
            return cls.custom(float(key))
        except ValueError:
            raise ValueError(f"not an amplitude level or number: {text!r}") from None

    @property
    def is_silent(self) -> bool:
        return self.name == "silent"

    def scale(self) -> float:
        if self.name == self.CUSTOM:
            return clamp(self.value, _CUSTOM_MIN, _CUSTOM_MAX)
        return _NAMED_SCALES[self.name]

    def __str__(self) -> str:
        if self.name == self.CUSTOM:
            return f"custom({self.value:g})"
        return self.name


SILENT = Amplitude("silent")
LOW = Amplitude("low")
MEDIUM = Amplitude("medium")
HIGH = Amplitude("high")
