import unittest

from morsewave.amplitude import HIGH, LOW, MEDIUM, SILENT, Amplitude


class TestAmplitudeScale(unittest.TestCase):
    def test_named_levels(self) -> None:
        self.assertEqual(SILENT.scale(), 0.0)
        self.assertEqual(LOW.scale(), 0.3)
        self.assertEqual(MEDIUM.scale(), 0.5)
        self.assertEqual(HIGH.scale(), 0.8)

    def test_audible_levels_are_in_unit_interval(self) -> None:
        for level in (LOW, MEDIUM, HIGH):
            self.assertGreater(level.scale(), 0.0)
            self.assertLessEqual(level.scale(), 1.0)

    def test_custom_is_clamped(self) -> None:
        self.assertEqual(Amplitude.custom(0.42).scale(), 0.42)
        self.assertEqual(Amplitude.custom(5.0).scale(), 1.0)
        self.assertEqual(Amplitude.custom(-3.0).scale(), 0.01)
        self.assertEqual(Amplitude.custom(0.0).scale(), 0.01)
        self.assertEqual(Amplitude.custom(float("inf")).scale(), 1.0)

    def test_custom_rejects_nan(self) -> None:
        with self.assertRaises(ValueError):
            Amplitude.custom(float("nan"))

    def test_unknown_level_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Amplitude("loud")

    def test_only_silent_is_silent(self) -> None:
        self.assertTrue(SILENT.is_silent)
        self.assertFalse(LOW.is_silent)
        self.assertFalse(Amplitude.custom(0.0).is_silent)


class TestAmplitudeParse(unittest.TestCase):
    def test_parse_names_case_insensitive(self) -> None:
        self.assertEqual(Amplitude.parse("High"), HIGH)
        self.assertEqual(Amplitude.parse(" silent "), SILENT)

    def test_parse_number_gives_custom(self) -> None:
        amp = Amplitude.parse("0.7")
        self.assertEqual(amp.name, "custom")
        self.assertEqual(amp.scale(), 0.7)

    def test_parse_garbage(self) -> None:
        with self.assertRaises(ValueError):
            Amplitude.parse("loud")

    def test_str(self) -> None:
        self.assertEqual(str(MEDIUM), "medium")
        self.assertEqual(str(Amplitude.custom(0.25)), "custom(0.25)")


if __name__ == "__main__":
    unittest.main()
