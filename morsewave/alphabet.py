# alphabet.py — text ↔ morse dictionary
# --------------------------------------
# Closed alphabet: a-z, 0-9 and the word separator (' ' ↔ '/').
# Lookups are case-insensitive on the text side.
# --------------------------------------
from __future__ import annotations

from typing import Dict, Final, Iterable, List, NamedTuple

from morsewave.errors import UnsupportedCharacterError

__all__ = [
    "Letter",
    "MORSE",
    "lookup",
    "encode_line",
    "decode_line",
    "to_symbol_stream",
]


class Letter(NamedTuple):
    text: str
    morse: str


MORSE: Final[Dict[str, str]] = {
    'a': '.-',    'b': '-...',  'c': '-.-.',  'd': '-..',   'e': '.',
    'f': '..-.',  'g': '--.',   'h': '....',  'i': '..',    'j': '.---',
    'k': '-.-',   'l': '.-..',  'm': '--',    'n': '-.',    'o': '---',
    'p': '.--.',  'q': '--.-',  'r': '.-.',   's': '...',   't': '-',
    'u': '..-',   'v': '...-',  'w': '.--',   'x': '-..-',  'y': '-.--',
    'z': '--..',
    '1': '.----', '2': '..---', '3': '...--', '4': '....-', '5': '.....',
    '6': '-....', '7': '--...', '8': '---..', '9': '----.', '0': '-----',
    ' ': '/',
}

_LETTERS: Final[Dict[str, Letter]] = {}
for _text, _morse in MORSE.items():
    _LETTERS[_text] = Letter(_text, _morse)
    _LETTERS[_morse] = Letter(_text, _morse)


def lookup(token: str) -> Letter:
    """Letter for a single character or a morse token."""
    try:
        return _LETTERS[token.lower()]
    except KeyError:
        raise UnsupportedCharacterError(token) from None


def encode_line(line: str) -> List[Letter]:
    """One Letter per character of plain text."""
    return [lookup(ch) for ch in line]


def decode_line(line: str) -> List[Letter]:
    """One Letter per whitespace-separated morse token."""
    return [lookup(tok) for tok in line.split()]


def to_symbol_stream(letters: Iterable[Letter]) -> str:
    """Flat symbol stream with a single space between letters."""
    return " ".join(letter.morse for letter in letters)
