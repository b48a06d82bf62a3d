#!/usr/bin/env python3
# cli.py — command-line entry point
# ---------------------------------
#   morsewave encode text  -i message.txt              # morse to stdout
#   morsewave decode text  -i - < message.morse        # text from stdin
#   morsewave encode audio -i message.txt -o out.wav   # WAV file
# The output is only opened once the whole input has translated.
# ---------------------------------
from __future__ import annotations

import argparse
import contextlib
import dataclasses
import logging
import os
import sys
from typing import IO, Iterator, List, Optional

from dotenv import load_dotenv

from morsewave.amplitude import Amplitude
from morsewave.config import RenderConfig
from morsewave.errors import MorseWaveError
from morsewave.translator import Command, MorseTranslator, OutputType

_LOG = logging.getLogger("morsewave")


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
        stream=sys.stderr,
    )


def _choice(parse):
    def convert(raw: str):
        try:
            return parse(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid value: {raw!r}") from None
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morsewave",
        description="Translate text to morse code (and back), as text or as a WAV file.",
    )
    parser.add_argument(
        "command",
        type=_choice(Command.from_string),
        help="encode (e) text to morse, or decode (d) morse to text",
    )
    parser.add_argument(
        "output_type",
        type=_choice(OutputType.from_string),
        help="text or audio",
    )
    parser.add_argument(
        "-i", "--in-file",
        required=True,
        help='File to read, "-" for stdin',
    )
    parser.add_argument(
        "-o", "--out-file",
        default="-",
        help='File to write, "-" for stdout (default)',
    )
    parser.add_argument(
        "--volume",
        type=_choice(Amplitude.parse),
        default=None,
        help="silent, low, medium, high or a number in [0.01, 1]",
    )
    parser.add_argument("--frequency", type=float, default=None, help="Tone pitch in Hz")
    parser.add_argument("--sample-rate", type=int, default=None, help="Samples per second")
    parser.add_argument(
        "--keying",
        action="store_true",
        default=None,
        help="Soften tone edges with a short attack/release envelope",
    )
    return parser


@contextlib.contextmanager
def open_input(name: str) -> Iterator[IO[str]]:
    if name in ("", "-"):
        yield sys.stdin
        return
    with open(name, "r", encoding="utf-8") as fh:
        yield fh


@contextlib.contextmanager
def open_output(name: str) -> Iterator[IO[bytes]]:
    if name in ("", "-"):
        yield sys.stdout.buffer
        return
    with open(name, "wb") as fh:
        yield fh


def _config_from(args: argparse.Namespace) -> RenderConfig:
    config = RenderConfig.from_env(os.environ)
    overrides = {
        key: value
        for key, value in (
            ("volume", args.volume),
            ("frequency", args.frequency),
            ("sample_rate", args.sample_rate),
            ("keying", args.keying),
        )
        if value is not None
    }
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        translator = MorseTranslator(args.command, args.output_type, _config_from(args))
        with open_input(args.in_file) as src:
            lines = src.readlines()
        payload = translator.render(lines)
        with open_output(args.out_file) as sink:
            sink.write(payload)
            sink.flush()
    except (MorseWaveError, OSError) as exc:
        _LOG.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
