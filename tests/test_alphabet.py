import unittest

from morsewave.alphabet import MORSE, Letter, decode_line, encode_line, lookup, to_symbol_stream
from morsewave.errors import UnsupportedCharacterError


class TestAlphabet(unittest.TestCase):
    def test_closed_alphabet(self) -> None:
        self.assertEqual(len(MORSE), 37)
        self.assertEqual(len(set(MORSE.values())), 37)
        for code in MORSE.values():
            self.assertTrue(set(code) <= {".", "-", "/"})

    def test_lookup_both_ways(self) -> None:
        self.assertEqual(lookup("S"), Letter("s", "..."))
        self.assertEqual(lookup("..."), Letter("s", "..."))
        self.assertEqual(lookup("/"), Letter(" ", "/"))

    def test_encode_line(self) -> None:
        morse = [letter.morse for letter in encode_line("Hello World")]
        self.assertEqual(
            morse,
            ["....", ".", ".-..", ".-..", "---", "/", ".--", "---", ".-.", ".-..", "-.."],
        )

    def test_decode_line(self) -> None:
        text = "".join(letter.text for letter in decode_line(".... ..  / -.... ----- "))
        self.assertEqual(text, "hi 60")

    def test_unsupported_character(self) -> None:
        with self.assertRaises(UnsupportedCharacterError) as ctx:
            encode_line("what?")
        self.assertEqual(ctx.exception.token, "?")
        self.assertIsInstance(ctx.exception, ValueError)

    def test_unsupported_token(self) -> None:
        with self.assertRaises(UnsupportedCharacterError):
            decode_line("... .......")

    def test_symbol_stream_separates_letters(self) -> None:
        self.assertEqual(to_symbol_stream(encode_line("ab c")), ".- -... / -.-.")
        self.assertEqual(to_symbol_stream([]), "")


if __name__ == "__main__":
    unittest.main()
