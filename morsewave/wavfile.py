# wavfile.py — RIFF/WAVE (16-bit PCM, mono) writer
# --------------------------------------------------
# Layout produced by soundfile for PCM_16 mono (little-endian):
#   "RIFF" <36 + data bytes> "WAVE"
#   "fmt " 16 <1 PCM> <1 ch> <fs> <fs * 2> <2> <16>
#   "data" <data bytes> samples...
# Encoding goes through an in-memory buffer, so the sink is only
# borrowed: it is flushed, never closed, and never needs to be
# seekable (stdout works).
# --------------------------------------------------
from __future__ import annotations

import io
import logging
import pathlib
from typing import BinaryIO, Final, Sequence, Union

import numpy as np
import soundfile as sf

from morsewave.oscillator import SAMPLE_RATE

__all__ = ["write_wav", "encode_wav", "save_wav", "HEADER_SIZE"]

_LOG = logging.getLogger("morsewave.wavfile")

_BLOCK_ALIGN: Final = 2  # mono, 16-bit
HEADER_SIZE: Final = 44
_U32_MAX: Final = 0xFFFF_FFFF

Samples = Union[np.ndarray, Sequence[int]]


def _as_pcm16(data: Samples) -> np.ndarray:
    """Little-endian int16 view of *data*.

    Float input is treated as [-1, 1] audio and hard-clamped; integer input
    must already fit in int16.
    """
    arr = np.asarray(data)
    if arr.ndim != 1:
        raise ValueError(f"expected mono (1-D) samples, got shape {arr.shape}")
    if arr.size == 0:
        return np.zeros(0, dtype="<i2")
    if np.issubdtype(arr.dtype, np.floating):
        return np.clip(arr * 32767, -32768, 32767).astype("<i2")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"samples must be numeric, got dtype {arr.dtype}")
    if arr.min() < -32768 or arr.max() > 32767:
        raise ValueError("integer samples out of int16 range")
    return arr.astype("<i2")

# ------------------------------------------------------------------
# Encoding
# ------------------------------------------------------------------

def encode_wav(data: Samples, sample_rate: int = SAMPLE_RATE) -> bytes:
    """Complete WAV file contents for *data* as bytes."""
    if not isinstance(sample_rate, (int, np.integer)) or sample_rate <= 0:
        raise ValueError(f"sample rate must be a positive integer, got {sample_rate!r}")
    if sample_rate * _BLOCK_ALIGN > _U32_MAX:
        raise ValueError(f"sample rate too large for a WAV header: {sample_rate}")

    pcm = _as_pcm16(data)
    if HEADER_SIZE - 8 + pcm.size * _BLOCK_ALIGN > _U32_MAX:
        raise ValueError(f"{pcm.size} samples do not fit in a WAV file")

    buf = io.BytesIO()
    sf.write(buf, pcm, int(sample_rate), format="WAV", subtype="PCM_16")
    return buf.getvalue()


def write_wav(data: Samples, sample_rate: int, sink: BinaryIO) -> int:
    """Write a WAV file for *data* to *sink*; returns the number of bytes written.

    Parameters
    ----------
    data : array-like
        int16 samples (or float audio in [-1, 1]).
    sample_rate : int
        Samples per second stored in the header.
    sink : binary file-like
        Anything with ``write(bytes)``. Errors it raises propagate.
    """
    payload = encode_wav(data, sample_rate)
    sink.write(payload)
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()
    _LOG.debug("wrote %d bytes (%d samples @ %d Hz)", len(payload),
               (len(payload) - HEADER_SIZE) // _BLOCK_ALIGN, sample_rate)
    return len(payload)


# ------------------------------------------------------------------
# WAV save helper
# ------------------------------------------------------------------

def save_wav(data: Samples, path: str | pathlib.Path, fs: int = SAMPLE_RATE) -> None:
    """Save *data* to 16‑bit PCM WAV at *path*, creating parent folders."""
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fh:
        write_wav(data, fs, fh)
