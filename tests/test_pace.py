"""Tests for the pace codec."""

import unittest

from fitness_converter.pace import (
    PaceDecimal,
    PaceSeconds,
    PaceText,
    as_pace_value,
    format_pace,
    pace_to_seconds,
    parse_pace,
)


class TestParsePace(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(parse_pace("7:30"), 450)
        self.assertEqual(parse_pace("4:39"), 279)
        self.assertEqual(parse_pace("0:59"), 59)
        self.assertEqual(parse_pace("12:05"), 725)

    def test_seconds_must_be_below_sixty(self):
        self.assertIsNone(parse_pace("7:75"))
        self.assertIsNone(parse_pace("7:60"))

    def test_malformed(self):
        for text in ("abc", "7", "7:", ":30", "7:30:00", "-1:30", "7:-5", "7.5", "", "7: 30"):
            self.assertIsNone(parse_pace(text), f"Failed for {text!r}")

    def test_zero_pace_rejected(self):
        self.assertIsNone(parse_pace("0:00"))


class TestFormatPace(unittest.TestCase):
    def test_zero_padded(self):
        self.assertEqual(format_pace(279), "4:39")
        self.assertEqual(format_pace(450), "7:30")
        self.assertEqual(format_pace(605), "10:05")
        self.assertEqual(format_pace(59), "0:59")

    def test_non_positive(self):
        self.assertIsNone(format_pace(0))
        self.assertIsNone(format_pace(-30))


class TestVariants(unittest.TestCase):
    def test_text(self):
        self.assertEqual(PaceText("7:30").to_seconds(), 450)
        self.assertEqual(PaceText.from_seconds(279), PaceText("4:39"))
        self.assertIsNone(PaceText.from_seconds(0))

    def test_decimal_truncates(self):
        self.assertEqual(PaceDecimal(7.5).to_seconds(), 450)
        self.assertEqual(PaceDecimal(7.999).to_seconds(), 479)
        self.assertAlmostEqual(PaceDecimal.from_seconds(279).value, 4.65)

    def test_decimal_invalid(self):
        for minutes in (0.0, -5.0, 0.001, float("nan"), float("inf"), 1e308):
            self.assertIsNone(PaceDecimal(minutes).to_seconds(), f"Failed for {minutes}")
        self.assertIsNone(PaceDecimal.from_seconds(0))

    def test_seconds(self):
        self.assertEqual(PaceSeconds(450).to_seconds(), 450)
        self.assertIsNone(PaceSeconds(0).to_seconds())
        self.assertIsNone(PaceSeconds(-1).to_seconds())
        self.assertEqual(PaceSeconds.from_seconds(279), PaceSeconds(279))

    def test_same_quantity_in_every_shape(self):
        shapes = [PaceText("7:30"), PaceDecimal(7.5), PaceSeconds(450)]
        self.assertEqual({p.to_seconds() for p in shapes}, {450})


class TestAsPaceValue(unittest.TestCase):
    def test_builtins_map_by_type(self):
        self.assertEqual(as_pace_value("7:30"), PaceText("7:30"))
        self.assertEqual(as_pace_value(7.5), PaceDecimal(7.5))
        self.assertEqual(as_pace_value(450), PaceSeconds(450))

    def test_type_not_content_decides(self):
        # "450" is text, so it fails as a pace string rather than becoming seconds
        self.assertIsNone(pace_to_seconds("450"))
        # 7.0 is decimal minutes, 7 is seconds
        self.assertEqual(pace_to_seconds(7.0), 420)
        self.assertEqual(pace_to_seconds(7), 7)

    def test_variants_pass_through(self):
        pace = PaceSeconds(300)
        self.assertIs(as_pace_value(pace), pace)

    def test_unsupported_types(self):
        for value in (True, None, [7, 30], b"7:30"):
            with self.assertRaises(TypeError):
                as_pace_value(value)


if __name__ == "__main__":
    unittest.main()
