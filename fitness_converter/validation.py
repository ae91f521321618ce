"""Advisory range checks for measurements.

Nothing in the conversion engine calls these. They exist for callers who
want to warn about implausible input (a 900 lb runner, a 1:30 mile) before
or after converting it. Each check returns None when the value is within
its closed range, otherwise a ValueOutOfRange describing the range.
"""

from typing import Optional

from fitness_converter.config import (
    AGE_RANGE_YEARS,
    DISTANCE_RANGES,
    HEIGHT_RANGES,
    PACE_RANGE_LABEL,
    PACE_RANGE_SECONDS,
    WEIGHT_RANGES,
)
from fitness_converter.errors import ValueOutOfRange
from fitness_converter.models import FitnessProfile
from fitness_converter.units import DistanceUnit, HeightUnit, WeightUnit


def _check_unit_range(value: float, ranges: dict, abbreviation: str) -> Optional[ValueOutOfRange]:
    low, high = ranges[abbreviation]
    if value < low or value > high:
        return ValueOutOfRange(str(value), f"{low}-{high} {abbreviation}")
    return None


def validate_weight(value: float, unit: WeightUnit) -> Optional[ValueOutOfRange]:
    return _check_unit_range(value, WEIGHT_RANGES, unit.abbreviation)


def validate_height(value: float, unit: HeightUnit) -> Optional[ValueOutOfRange]:
    return _check_unit_range(value, HEIGHT_RANGES, unit.abbreviation)


def validate_distance(value: float, unit: DistanceUnit) -> Optional[ValueOutOfRange]:
    return _check_unit_range(value, DISTANCE_RANGES, unit.abbreviation)


def validate_pace(seconds: int) -> Optional[ValueOutOfRange]:
    """Check a per-mile pace, in seconds, against 3:00-20:00."""
    low, high = PACE_RANGE_SECONDS
    if seconds < low or seconds > high:
        return ValueOutOfRange(str(seconds), PACE_RANGE_LABEL)
    return None


def validate_age(years: int) -> Optional[ValueOutOfRange]:
    low, high = AGE_RANGE_YEARS
    if years < low or years > high:
        return ValueOutOfRange(str(years), f"{low}-{high} years")
    return None


_UNIT_VALIDATORS = {
    WeightUnit: validate_weight,
    HeightUnit: validate_height,
    DistanceUnit: validate_distance,
}


def validate_measurement(value: float, unit) -> Optional[ValueOutOfRange]:
    """Range-check a value in any weight, height or distance unit."""
    validator = _UNIT_VALIDATORS.get(type(unit))
    if validator is None:
        raise TypeError(f"No range defined for unit {unit!r}")
    return validator(value, unit)


def validate_profile(profile: FitnessProfile) -> list:
    """Collect range warnings for the numeric fields of a profile."""
    warnings = []
    if profile.age is not None:
        error = validate_age(profile.age)
        if error is not None:
            warnings.append(error)
    return warnings
