"""Unit tables for distance, weight, height and pace.

Every unit carries a fixed factor to its category's base unit
(meters for distance and height, kilograms for weight):

    value_in_base = value * unit.to_base
    converted     = value * from_unit.to_base / to_unit.to_base

Pace units carry the length of their reference distance in meters instead,
since pace scales with distance rather than by a linear factor.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FitnessUnit:
    """Category-tagged description of a unit, used to label results."""
    name: str
    abbreviation: str
    unit_type: str  # "distance", "weight", "height" or "pace"


class FitnessUnitEnum(Enum):
    """Shared behaviour for the unit enums. Values are the abbreviations."""

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def full_name(self) -> str:
        return _FULL_NAMES[self]

    @property
    def category(self) -> str:
        return _CATEGORIES[type(self)]

    @property
    def descriptor(self) -> FitnessUnit:
        return FitnessUnit(self.full_name, self.abbreviation, self.category)

    @property
    def to_base(self) -> float:
        return _TO_BASE[self]


class DistanceUnit(FitnessUnitEnum):
    MILES = "miles"
    KILOMETERS = "km"
    METERS = "m"
    YARDS = "yards"
    FEET = "feet"

    @property
    def to_meters(self) -> float:
        return self.to_base


class WeightUnit(FitnessUnitEnum):
    POUNDS = "lbs"
    KILOGRAMS = "kg"
    STONES = "stones"

    @property
    def to_kilograms(self) -> float:
        return self.to_base


class HeightUnit(FitnessUnitEnum):
    INCHES = "inches"
    FEET = "feet"
    CENTIMETERS = "cm"
    METERS = "m"

    @property
    def to_meters(self) -> float:
        return self.to_base


class PaceUnit(FitnessUnitEnum):
    MINUTES_PER_MILE = "min/mile"
    MINUTES_PER_KILOMETER = "min/km"

    @property
    def distance_in_meters(self) -> float:
        return self.to_base


_TO_BASE = {
    DistanceUnit.MILES: 1609.344,
    DistanceUnit.KILOMETERS: 1000.0,
    DistanceUnit.METERS: 1.0,
    DistanceUnit.YARDS: 0.9144,
    DistanceUnit.FEET: 0.3048,
    WeightUnit.POUNDS: 0.453592,
    WeightUnit.KILOGRAMS: 1.0,
    WeightUnit.STONES: 6.35029,
    HeightUnit.INCHES: 0.0254,
    HeightUnit.FEET: 0.3048,
    HeightUnit.CENTIMETERS: 0.01,
    HeightUnit.METERS: 1.0,
    PaceUnit.MINUTES_PER_MILE: 1609.344,
    PaceUnit.MINUTES_PER_KILOMETER: 1000.0,
}

_FULL_NAMES = {
    DistanceUnit.MILES: "Miles",
    DistanceUnit.KILOMETERS: "Kilometers",
    DistanceUnit.METERS: "Meters",
    DistanceUnit.YARDS: "Yards",
    DistanceUnit.FEET: "Feet",
    WeightUnit.POUNDS: "Pounds",
    WeightUnit.KILOGRAMS: "Kilograms",
    WeightUnit.STONES: "Stones",
    HeightUnit.INCHES: "Inches",
    HeightUnit.FEET: "Feet",
    HeightUnit.CENTIMETERS: "Centimeters",
    HeightUnit.METERS: "Meters",
    PaceUnit.MINUTES_PER_MILE: "Minutes per Mile",
    PaceUnit.MINUTES_PER_KILOMETER: "Minutes per Kilometer",
}

_CATEGORIES = {
    DistanceUnit: "distance",
    WeightUnit: "weight",
    HeightUnit: "height",
    PaceUnit: "pace",
}

LINEAR_UNIT_TYPES = (DistanceUnit, WeightUnit, HeightUnit)


def convert_units(value: float, from_unit: FitnessUnitEnum, to_unit: FitnessUnitEnum) -> float:
    """Convert a value between two units of the same linear category.

    Same-unit conversions return the input unchanged.
    """
    if type(from_unit) is not type(to_unit) or type(from_unit) not in LINEAR_UNIT_TYPES:
        raise TypeError(f"Cannot linearly convert {from_unit!r} to {to_unit!r}")
    if from_unit is to_unit:
        return value
    return value * from_unit.to_base / to_unit.to_base


def conversion_pair_count(units) -> int:
    """Number of directed conversions between distinct units: n * (n - 1)."""
    n = len(units)
    return n * (n - 1)
