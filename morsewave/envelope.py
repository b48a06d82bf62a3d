# envelope.py — multi-stage amplitude envelope (attack / decay / sustain / release)
# -------------------------------------------------------------------------------
# Purpose
#   • Map elapsed time (seconds) to an amplitude multiplier.
#   • Stages run in fixed order: Attack → Decay1 → [Decay2] → [Sustain] → Release.
#   • A note-off (``note_off(at)``) makes Release take over from that moment,
#     measured relative to the note-off time, whatever stage was running.
# Usage
#   env = Envelope.keyed(0.1)
#   y_shaped = env.shape(y, fs)
# -------------------------------------------------------------------------------
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Optional, Tuple

import numpy as np

from morsewave.amplitude import SILENT, Amplitude
from morsewave.errors import EnvelopeStageNotFound
from morsewave.oscillator import SAMPLE_RATE, quantise

__all__ = ["Interpolation", "Stage", "EnvelopeInterval", "Envelope", "FULL"]

_LOG = logging.getLogger("morsewave.envelope")

_EXP_K: Final = 3.0
_KEY_ATTACK: Final = 0.005   # 5 ms
_KEY_RELEASE: Final = 0.005  # 5 ms

FULL = Amplitude.custom(1.0)


# ------------------------------------------------------------------
# Interpolation curves (normalised 0 → duration)
# ------------------------------------------------------------------

def _exp_curve(x, k: float):
    # (e^{kx} - 1) / (e^k - 1/x); 1/x is inf at x = 0, which makes the curve 0 there
    with np.errstate(divide="ignore"):
        inv = np.divide(1.0, x)
    return (np.exp(k * x) - 1.0) / (np.exp(k) - inv)


class Interpolation(Enum):
    LINEAR = "linear"
    EXPONENTIAL = "exponential"

    def __call__(self, start: float, end: float, duration: float, step):
        """Evaluate the curve at *step* (scalar or array) within ``[0, duration]``."""
        x = np.divide(step, duration)
        if self is Interpolation.LINEAR:
            return start + (end - start) * x
        return start + (end - start) * _exp_curve(x, _EXP_K)


class Stage(Enum):
    ATTACK = "attack"
    DECAY1 = "decay1"
    DECAY2 = "decay2"
    SUSTAIN = "sustain"
    RELEASE = "release"


# ------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class EnvelopeInterval:
    """One envelope stage.

    Parameters
    ----------
    duration : float
        Stage length in seconds (>= 0).
    start, end : Amplitude
        Levels at the beginning and end of the stage.
    interpolation : Interpolation
        Curve between the two levels.
    """

    duration: float
    start: Amplitude
    end: Amplitude
    interpolation: Interpolation = Interpolation.LINEAR

    def __post_init__(self):
        if not self.duration >= 0:
            raise ValueError(f"interval duration must be >= 0, got {self.duration}")

    def interpolate(self, step: float) -> float:
        """Level at *step* seconds into the stage (clamped to the stage)."""
        if self.duration == 0:
            return self.end.scale()
        step = min(max(step, 0.0), self.duration)
        return float(
            self.interpolation(self.start.scale(), self.end.scale(), self.duration, np.float64(step))
        )

    def interpolate_many(self, steps: np.ndarray) -> np.ndarray:
        if self.duration == 0:
            return np.full(steps.shape, self.end.scale(), dtype=np.float64)
        steps = np.clip(steps, 0.0, self.duration)
        return np.asarray(
            self.interpolation(self.start.scale(), self.end.scale(), self.duration, steps),
            dtype=np.float64,
        )


# ------------------------------------------------------------------
@dataclass(slots=True, kw_only=True)
class Envelope:
    """Ordered-stage envelope for a single voice.

    Stage boundaries are precomputed once; ``release_time`` is the only
    state that changes after construction. Do not share one instance
    between voices.
    """

    attack: EnvelopeInterval
    decay1: EnvelopeInterval
    decay2: Optional[EnvelopeInterval] = None
    sustain: Optional[EnvelopeInterval] = None
    release: EnvelopeInterval
    release_time: Optional[float] = None

    _timeline: Tuple[Tuple[Stage, float, EnvelopeInterval], ...] = field(init=False, repr=False)
    _total: float = field(init=False, repr=False)

    def __post_init__(self):
        ordered = (
            (Stage.ATTACK, self.attack),
            (Stage.DECAY1, self.decay1),
            (Stage.DECAY2, self.decay2),
            (Stage.SUSTAIN, self.sustain),
            (Stage.RELEASE, self.release),
        )
        timeline = []
        offset = 0.0
        for stage, interval in ordered:
            if interval is None:
                continue
            timeline.append((stage, offset, interval))
            offset = offset + interval.duration
        self._timeline = tuple(timeline)
        self._total = offset

    # --------------------------------------------------------------
    @classmethod
    def keyed(
        cls,
        duration: float,
        attack: float = _KEY_ATTACK,
        release: float = _KEY_RELEASE,
        interpolation: Interpolation = Interpolation.LINEAR,
    ) -> "Envelope":
        """Click-free on/off keying for a tone of *duration* seconds.

        Ramp up over *attack*, hold at full level, ramp down over *release*.
        Both ramps shrink to fit very short tones. Release is armed at
        ``duration - release``.
        """
        attack = min(attack, duration / 2)
        release = min(release, duration - attack)
        hold = duration - attack - release
        env = cls(
            attack=EnvelopeInterval(attack, SILENT, FULL, interpolation),
            decay1=EnvelopeInterval(hold, FULL, FULL, interpolation),
            release=EnvelopeInterval(release, FULL, SILENT, interpolation),
        )
        env.note_off(attack + hold)
        return env

    # --------------------------------------------------------------
    @property
    def total_duration(self) -> float:
        """Sum of all configured stage durations."""
        return self._total

    @property
    def stages(self) -> Tuple[Tuple[Stage, float], ...]:
        """Present stages with their start offsets."""
        return tuple((stage, start) for stage, start, _ in self._timeline)

    @property
    def released(self) -> bool:
        return self.release_time is not None

    def note_off(self, at: float) -> None:
        if not at >= 0 or math.isinf(at):
            raise ValueError(f"release time must be a finite value >= 0, got {at}")
        self.release_time = at

    def rearm(self) -> None:
        self.release_time = None

    # --------------------------------------------------------------
    def get_amplitude_scaling(self, step: float) -> float:
        """Multiplier at *step* seconds since the note started.

        Raises
        ------
        EnvelopeStageNotFound
            *step* lies outside every stage and release is not armed
            (or was armed later than *step*).
        """
        if self.release_time is not None and step >= self.release_time:
            return self.release.interpolate(step - self.release_time)

        for _stage, start, interval in self._timeline:
            if start <= step < start + interval.duration:
                return interval.interpolate(step - start)

        raise EnvelopeStageNotFound(step)

    def curve(self, steps: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Vectorised :meth:`get_amplitude_scaling`.

        Returns ``(gains, found)``; ``found`` is False where no stage matched
        and the gain there is 0.
        """
        steps = np.asarray(steps, dtype=np.float64)
        gains = np.zeros(steps.shape, dtype=np.float64)
        found = np.zeros(steps.shape, dtype=bool)

        if self.release_time is not None:
            released = steps >= self.release_time
            gains[released] = self.release.interpolate_many(steps[released] - self.release_time)
            found |= released

        for _stage, start, interval in self._timeline:
            mask = ~found & (steps >= start) & (steps < start + interval.duration)
            gains[mask] = interval.interpolate_many(steps[mask] - start)
            found |= mask

        return gains, found

    def shape(
        self,
        samples: np.ndarray,
        sample_rate: int = SAMPLE_RATE,
        on_missing: str = "raise",
    ) -> np.ndarray:
        """Apply the envelope to an int16 buffer starting at step 0.

        Parameters
        ----------
        samples : np.ndarray
            int16 input.
        sample_rate : int
            Steps are ``i / sample_rate`` seconds.
        on_missing : {"raise", "silence"}
            What to do with samples no stage covers: raise
            :class:`EnvelopeStageNotFound`, or zero them.
        """
        if on_missing not in ("raise", "silence"):
            raise ValueError(f"on_missing must be 'raise' or 'silence', got {on_missing!r}")

        steps = np.arange(len(samples), dtype=np.float64) / sample_rate
        gains, found = self.curve(steps)
        if not found.all():
            first = float(steps[~found][0])
            if on_missing == "raise":
                raise EnvelopeStageNotFound(first)
            _LOG.debug("envelope silenced %d samples from step %.4f", int((~found).sum()), first)

        return quantise(np.asarray(samples, dtype=np.float64) * gains)
