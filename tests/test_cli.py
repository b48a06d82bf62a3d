import os
import pathlib
import struct
import tempfile
import unittest
from unittest import mock

from morsewave.cli import build_parser, main
from morsewave.translator import Command, OutputType
from morsewave.wavfile import HEADER_SIZE

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = pathlib.Path(self._tmp.name)
        env = mock.patch.dict(os.environ, {}, clear=False)
        env.start()
        for key in list(os.environ):
            if key.startswith("MORSEWAVE_"):
                del os.environ[key]
        self.addCleanup(env.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> str:
        path = self.tmp / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_parser(self) -> None:
        args = build_parser().parse_args(["e", "audio", "-i", "-", "--volume", "high", "--keying"])
        self.assertIs(args.command, Command.ENCODE)
        self.assertIs(args.output_type, OutputType.AUDIO)
        self.assertEqual(args.out_file, "-")
        self.assertTrue(args.keying)
        self.assertIsNone(args.frequency)

    def test_encode_text_to_file(self) -> None:
        src = self._write("in.txt", "sos\n")
        out = self.tmp / "out.txt"
        self.assertEqual(main(["encode", "text", "-i", src, "-o", str(out)]), 0)
        self.assertEqual(out.read_bytes(), b"... --- ...\n")

    def test_audio_with_overrides(self) -> None:
        src = self._write("in.txt", "e\n")
        out = self.tmp / "out.wav"
        code = main(["encode", "audio", "-i", src, "-o", str(out), "--sample-rate", "8000"])
        self.assertEqual(code, 0)
        fields = _HEADER.unpack(out.read_bytes()[:HEADER_SIZE])
        self.assertEqual(fields[7], 8000)
        self.assertEqual(fields[12], 2 * 1600)

    def test_unsupported_character_fails(self) -> None:
        src = self._write("in.txt", "hello?\n")
        with self.assertLogs("morsewave", level="ERROR"):
            code = main(["encode", "text", "-i", src, "-o", str(self.tmp / "out.txt")])
        self.assertEqual(code, 1)

    def test_invalid_input_keeps_existing_output(self) -> None:
        src = self._write("in.txt", "sos?\n")
        out = self.tmp / "out.wav"
        out.write_bytes(b"previous good contents")
        with self.assertLogs("morsewave", level="ERROR"):
            code = main(["encode", "audio", "-i", src, "-o", str(out)])
        self.assertEqual(code, 1)
        self.assertEqual(out.read_bytes(), b"previous good contents")

    def test_missing_input_file_fails(self) -> None:
        with self.assertLogs("morsewave", level="ERROR"):
            code = main(["decode", "text", "-i", str(self.tmp / "missing.txt")])
        self.assertEqual(code, 1)

    def test_bad_config_fails(self) -> None:
        src = self._write("in.txt", "e\n")
        with self.assertLogs("morsewave", level="ERROR"):
            code = main(["encode", "audio", "-i", src, "-o", str(self.tmp / "o.wav"), "--frequency", "-1"])
        self.assertEqual(code, 1)

    def test_unknown_command_is_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with mock.patch("sys.stderr"):
                main(["transmit", "text", "-i", "-"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
