# translator.py — line-oriented encode / decode to text or audio
# ----------------------------------------------------------------
# encode : plain text  → morse
# decode : morse tokens → plain text
# output : "text" writes one translated line per input line,
#          "audio" renders every line into a single WAV stream.
# All input is resolved before anything is written, so a bad
# character aborts the translation with no partial output.
# ----------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Iterable, List

from morsewave.alphabet import Letter, decode_line, encode_line, to_symbol_stream
from morsewave.config import RenderConfig
from morsewave.wavfile import encode_wav

__all__ = ["Command", "OutputType", "MorseTranslator"]

_LOG = logging.getLogger("morsewave.translator")

_LINE_BREAK = " / "  # lines are joined by a word gap in audio output


class Command(Enum):
    ENCODE = "encode"
    DECODE = "decode"

    @classmethod
    def from_string(cls, name: str) -> "Command":
        key = name.strip().lower()
        if key == "e":
            return cls.ENCODE
        if key == "d":
            return cls.DECODE
        return cls(key)


class OutputType(Enum):
    TEXT = "text"
    AUDIO = "audio"

    @classmethod
    def from_string(cls, name: str) -> "OutputType":
        return cls(name.strip().lower())


@dataclass(slots=True)
class MorseTranslator:
    command: Command = Command.ENCODE
    output: OutputType = OutputType.TEXT
    config: RenderConfig = field(default_factory=RenderConfig)

    def read(self, lines: Iterable[str]) -> List[List[Letter]]:
        """Resolve every input line into letters."""
        parse = encode_line if self.command is Command.ENCODE else decode_line
        return [parse(line.rstrip("\r\n")) for line in lines]

    def render(self, lines: Iterable[str]) -> bytes:
        """Complete output for *lines*: UTF-8 text or a WAV file."""
        letters = self.read(lines)
        if self.output is OutputType.AUDIO:
            return self._render_audio(letters)
        return self._render_text(letters)

    def translate(self, lines: Iterable[str], sink: BinaryIO) -> int:
        """Translate *lines* and write the result to *sink*; returns bytes written."""
        payload = self.render(lines)
        sink.write(payload)
        sink.flush()
        return len(payload)

    # --------------------------------------------------------------
    def _render_text(self, letters: List[List[Letter]]) -> bytes:
        if self.command is Command.ENCODE:
            rendered = [" ".join(letter.morse for letter in line) for line in letters]
        else:
            rendered = ["".join(letter.text for letter in line) for line in letters]
        _LOG.info("translated %d lines to text", len(letters))
        return "".join(line + "\n" for line in rendered).encode("utf-8")

    def _render_audio(self, letters: List[List[Letter]]) -> bytes:
        stream = _LINE_BREAK.join(to_symbol_stream(line) for line in letters if line)
        samples = self.config.timeline().render(stream)
        _LOG.info(
            "rendered %d symbols into %.2f s of audio",
            len(stream), len(samples) / self.config.sample_rate,
        )
        return encode_wav(samples, self.config.sample_rate)
