import unittest

from morsewave.amplitude import HIGH, MEDIUM, Amplitude
from morsewave.config import RenderConfig
from morsewave.errors import ConfigError
from morsewave.tone import Tone


class TestRenderConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = RenderConfig()
        self.assertEqual(config.sample_rate, 44100)
        self.assertEqual(config.frequency, 440.0)
        self.assertEqual(config.volume, MEDIUM)
        self.assertFalse(config.keying)

    def test_from_empty_env_is_default(self) -> None:
        self.assertEqual(RenderConfig.from_env({}), RenderConfig())

    def test_from_env(self) -> None:
        config = RenderConfig.from_env({
            "MORSEWAVE_SAMPLE_RATE": "22050",
            "MORSEWAVE_FREQUENCY": "600",
            "MORSEWAVE_VOLUME": "high",
            "MORSEWAVE_KEYING": "yes",
        })
        self.assertEqual(config, RenderConfig(22050, 600.0, HIGH, True))

    def test_numeric_volume(self) -> None:
        config = RenderConfig.from_env({"MORSEWAVE_VOLUME": "0.9"})
        self.assertEqual(config.volume, Amplitude.custom(0.9))

    def test_invalid_values(self) -> None:
        for env in (
            {"MORSEWAVE_SAMPLE_RATE": "fast"},
            {"MORSEWAVE_SAMPLE_RATE": "0"},
            {"MORSEWAVE_FREQUENCY": "-5"},
            {"MORSEWAVE_FREQUENCY": "a4"},
            {"MORSEWAVE_VOLUME": "loud"},
            {"MORSEWAVE_KEYING": "maybe"},
        ):
            with self.subTest(env=env):
                with self.assertRaises(ConfigError):
                    RenderConfig.from_env(env)

    def test_timeline_uses_settings(self) -> None:
        timeline = RenderConfig(8000, 700.0, HIGH, True).timeline()
        self.assertEqual(timeline.tone, Tone(700.0))
        self.assertEqual(timeline.volume, HIGH)
        self.assertEqual(timeline.fs, 8000)
        self.assertTrue(timeline.keying)


if __name__ == "__main__":
    unittest.main()
