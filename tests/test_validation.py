"""Tests for the advisory range checks."""

import unittest

from fitness_converter.errors import ValueOutOfRange
from fitness_converter.models import FitnessProfile
from fitness_converter.units import DistanceUnit, HeightUnit, PaceUnit, WeightUnit
from fitness_converter.validation import (
    validate_age,
    validate_distance,
    validate_height,
    validate_measurement,
    validate_pace,
    validate_profile,
    validate_weight,
)


class TestWeight(unittest.TestCase):
    def test_in_range(self):
        self.assertIsNone(validate_weight(150.0, WeightUnit.POUNDS))
        self.assertIsNone(validate_weight(70.0, WeightUnit.KILOGRAMS))
        self.assertIsNone(validate_weight(11.0, WeightUnit.STONES))

    def test_bounds_are_inclusive(self):
        self.assertIsNone(validate_weight(50.0, WeightUnit.POUNDS))
        self.assertIsNone(validate_weight(500.0, WeightUnit.POUNDS))

    def test_out_of_range(self):
        error = validate_weight(600.0, WeightUnit.POUNDS)
        self.assertEqual(error, ValueOutOfRange("600.0", "50.0-500.0 lbs"))
        self.assertEqual(error.description, "Value '600.0' out of valid range: 50.0-500.0 lbs")
        self.assertEqual(error.user_friendly_description, "Please enter a value in the range: 50.0-500.0 lbs")
        self.assertIsNotNone(validate_weight(10.0, WeightUnit.KILOGRAMS))


class TestHeight(unittest.TestCase):
    def test_ranges(self):
        self.assertIsNone(validate_height(68.0, HeightUnit.INCHES))
        self.assertIsNone(validate_height(5.5, HeightUnit.FEET))
        self.assertIsNone(validate_height(172.7, HeightUnit.CENTIMETERS))
        self.assertIsNone(validate_height(1.73, HeightUnit.METERS))
        self.assertEqual(validate_height(3.0, HeightUnit.METERS), ValueOutOfRange("3.0", "0.6-2.5 m"))


class TestDistance(unittest.TestCase):
    def test_ranges(self):
        self.assertIsNone(validate_distance(26.2, DistanceUnit.MILES))
        self.assertIsNone(validate_distance(5000.0, DistanceUnit.METERS))
        self.assertEqual(
            validate_distance(0.001, DistanceUnit.KILOMETERS),
            ValueOutOfRange("0.001", "0.01-1600.0 km"),
        )
        self.assertIsNotNone(validate_distance(6000000.0, DistanceUnit.FEET))


class TestPaceAndAge(unittest.TestCase):
    def test_pace(self):
        self.assertIsNone(validate_pace(450))
        self.assertIsNone(validate_pace(180))
        self.assertIsNone(validate_pace(1200))
        self.assertEqual(validate_pace(179), ValueOutOfRange("179", "3:00-20:00 per mile"))
        self.assertIsNotNone(validate_pace(1201))

    def test_age(self):
        self.assertIsNone(validate_age(30))
        self.assertEqual(validate_age(0), ValueOutOfRange("0", "1-120 years"))
        self.assertIsNotNone(validate_age(121))


class TestValidateMeasurement(unittest.TestCase):
    def test_dispatches_on_unit_type(self):
        self.assertIsNone(validate_measurement(150.0, WeightUnit.POUNDS))
        self.assertIsNotNone(validate_measurement(2000.0, DistanceUnit.MILES))
        # "feet" means different ranges for height and distance
        self.assertIsNotNone(validate_measurement(10.0, HeightUnit.FEET))
        self.assertIsNone(validate_measurement(10.0, DistanceUnit.FEET))

    def test_pace_units_have_no_value_range(self):
        with self.assertRaises(TypeError):
            validate_measurement(7.5, PaceUnit.MINUTES_PER_MILE)


class TestValidateProfile(unittest.TestCase):
    def test_profile(self):
        self.assertEqual(validate_profile(FitnessProfile(age=30)), [])
        self.assertEqual(validate_profile(FitnessProfile()), [])
        self.assertEqual(validate_profile(FitnessProfile(age=150)), [ValueOutOfRange("150", "1-120 years")])


if __name__ == "__main__":
    unittest.main()
