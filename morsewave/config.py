# config.py — render settings
# ---------------------------
# Defaults overridable from the environment or a .env file:
#   MORSEWAVE_SAMPLE_RATE, MORSEWAVE_FREQUENCY,
#   MORSEWAVE_VOLUME, MORSEWAVE_KEYING
# ---------------------------
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from morsewave.amplitude import MEDIUM, Amplitude
from morsewave.errors import ConfigError
from morsewave.oscillator import SAMPLE_RATE
from morsewave.timeline import SymbolTimeline
from morsewave.tone import A4, Tone

__all__ = ["RenderConfig"]

_LOG = logging.getLogger("morsewave.config")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(slots=True)
class RenderConfig:
    sample_rate: int = SAMPLE_RATE
    frequency: float = A4.frequency
    volume: Amplitude = MEDIUM
    keying: bool = False

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ConfigError(f"sample rate must be > 0, got {self.sample_rate}")
        try:
            Tone(self.frequency)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    @property
    def tone(self) -> Tone:
        return Tone(self.frequency)

    def timeline(self) -> SymbolTimeline:
        return SymbolTimeline(tone=self.tone, volume=self.volume, fs=self.sample_rate, keying=self.keying)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RenderConfig":
        """Read ``MORSEWAVE_*`` variables (loading ``.env`` first when *environ* is None)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        kwargs = {}
        raw_rate = environ.get("MORSEWAVE_SAMPLE_RATE")
        if raw_rate:
            try:
                kwargs["sample_rate"] = int(raw_rate)
            except ValueError:
                raise ConfigError(f"MORSEWAVE_SAMPLE_RATE is not an integer: {raw_rate!r}") from None

        raw_freq = environ.get("MORSEWAVE_FREQUENCY")
        if raw_freq:
            try:
                kwargs["frequency"] = float(raw_freq)
            except ValueError:
                raise ConfigError(f"MORSEWAVE_FREQUENCY is not a number: {raw_freq!r}") from None

        raw_volume = environ.get("MORSEWAVE_VOLUME")
        if raw_volume:
            try:
                kwargs["volume"] = Amplitude.parse(raw_volume)
            except ValueError as exc:
                raise ConfigError(f"MORSEWAVE_VOLUME: {exc}") from None

        raw_keying = environ.get("MORSEWAVE_KEYING", "").strip().lower()
        if raw_keying in _TRUE:
            kwargs["keying"] = True
        elif raw_keying not in _FALSE:
            raise ConfigError(f"MORSEWAVE_KEYING is not a boolean: {raw_keying!r}")

        config = cls(**kwargs)
        _LOG.debug("loaded %s", config)
        return config
