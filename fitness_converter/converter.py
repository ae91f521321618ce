"""Conversion engine for pace, distance, weight, height and BMI.

Every operation is a pure function. Operations that can fail come in two
forms which always agree: a simple one returning the value or None, and a
*_with_details one returning a ConversionResult that carries the value or
the error, a confidence score and a diagnostic note.

Pace converts by the ratio of the two reference distances rather than a
linear factor: a pace is time per distance, so a longer reference distance
means more seconds.
"""

import logging
import math
from typing import Optional

from fitness_converter.config import BMI_CONFIDENCE, EXACT_CONFIDENCE
from fitness_converter.errors import (
    CalculationFailed,
    ConversionFailed,
    InvalidMeasurement,
    InvalidPaceFormat,
    UnsupportedConversion,
)
from fitness_converter.metrics import bmi_category, format_speed_note, round_half_away_from_zero
from fitness_converter.models import CalculationType, ConversionInfo, ConversionResult
from fitness_converter.pace import PACE_VARIANTS, as_pace_value
from fitness_converter.units import (
    DistanceUnit,
    HeightUnit,
    PaceUnit,
    WeightUnit,
    convert_units,
)

logger = logging.getLogger(__name__)

_LINEAR_CALCULATIONS = {
    DistanceUnit: CalculationType.DISTANCE,
    WeightUnit: CalculationType.WEIGHT,
    HeightUnit: CalculationType.HEIGHT,
}


# --- Pace ---

def convert_pace_seconds(pace_seconds: int, from_unit: PaceUnit, to_unit: PaceUnit) -> int:
    """Scale a pace in seconds by the ratio of the units' distances, truncating."""
    if from_unit is to_unit:
        return pace_seconds
    ratio = to_unit.distance_in_meters / from_unit.distance_in_meters
    return int(pace_seconds * ratio)


def convert_pace_with_details(pace, from_unit: PaceUnit, to_unit: PaceUnit) -> ConversionResult:
    """Convert a pace between per-mile and per-kilometer.

    The pace may be a PaceText, PaceDecimal or PaceSeconds, or a plain str,
    float or int standing for one of them. The converted pace comes back in
    the same shape it was given in.
    """
    value = as_pace_value(pace)
    unwrap = not isinstance(pace, PACE_VARIANTS)

    pace_seconds = value.to_seconds()
    if pace_seconds is None:
        error = InvalidPaceFormat(str(value.value))
        logger.debug("Pace conversion rejected: %s", error)
        return ConversionResult.failure(
            pace, from_unit.descriptor, to_unit.descriptor,
            CalculationType.PACE_CONVERSION, error,
        )

    if from_unit is to_unit:
        return ConversionResult(
            original_value=pace,
            converted_pace=pace,
            from_unit=from_unit.descriptor,
            to_unit=to_unit.descriptor,
            calculation_type=CalculationType.PACE_CONVERSION,
            confidence=EXACT_CONFIDENCE,
            notes="Same pace unit - no conversion needed",
        )

    try:
        converted_seconds = convert_pace_seconds(pace_seconds, from_unit, to_unit)
        notes = format_speed_note(pace_seconds)
    except OverflowError:
        error = ConversionFailed("Pace is too large to convert")
        logger.debug("Pace conversion of %r failed: %s", pace, error)
        return ConversionResult.failure(
            pace, from_unit.descriptor, to_unit.descriptor,
            CalculationType.PACE_CONVERSION, error,
        )

    converted = type(value).from_seconds(converted_seconds)
    if converted is None:
        error = ConversionFailed("Could not format converted pace")
        logger.debug("Pace conversion of %r failed: %s", pace, error)
        return ConversionResult.failure(
            pace, from_unit.descriptor, to_unit.descriptor,
            CalculationType.PACE_CONVERSION, error,
        )

    return ConversionResult(
        original_value=pace,
        converted_pace=converted.value if unwrap else converted,
        from_unit=from_unit.descriptor,
        to_unit=to_unit.descriptor,
        calculation_type=CalculationType.PACE_CONVERSION,
        confidence=EXACT_CONFIDENCE,
        notes=notes,
    )


def convert_pace(pace, from_unit: PaceUnit, to_unit: PaceUnit):
    """Convert a pace, returning it in the shape it was given or None."""
    return convert_pace_with_details(pace, from_unit, to_unit).converted_pace


# --- BMI ---

def calculate_bmi_with_details(
    weight: float,
    height: float,
    weight_unit: WeightUnit,
    height_unit: HeightUnit,
) -> ConversionResult:
    """Calculate Body Mass Index.

    BMI = weight(kg) / height(m)², rounded to one decimal place with halves
    rounded away from zero. The note carries the BMI category.
    """
    if not (weight > 0 and height > 0):
        error = InvalidMeasurement("Weight and height must be positive")
        logger.debug("BMI rejected for weight=%r height=%r", weight, height)
        return ConversionResult.failure(
            weight, weight_unit.descriptor, height_unit.descriptor,
            CalculationType.BMI, error,
        )

    try:
        weight_kg = convert_weight(weight, weight_unit, WeightUnit.KILOGRAMS)
        height_m = convert_height(height, height_unit, HeightUnit.METERS)
        bmi = weight_kg / (height_m * height_m)
    except (ZeroDivisionError, OverflowError):
        # Extreme inputs: the squared height underflows or a huge int overflows
        bmi = math.nan
    if not math.isfinite(bmi):
        error = CalculationFailed(f"BMI is not a usable number for weight={weight} height={height}")
        logger.debug("BMI calculation failed: %s", error)
        return ConversionResult.failure(
            weight, weight_unit.descriptor, height_unit.descriptor,
            CalculationType.BMI, error,
        )

    rounded_bmi = round_half_away_from_zero(bmi, 1)
    return ConversionResult(
        original_value=weight,
        calculated_value=rounded_bmi,
        from_unit=weight_unit.descriptor,
        to_unit=height_unit.descriptor,
        calculation_type=CalculationType.BMI,
        confidence=BMI_CONFIDENCE,
        notes=f"BMI Category: {bmi_category(rounded_bmi)}",
    )


def calculate_bmi(
    weight: float,
    height: float,
    weight_unit: WeightUnit,
    height_unit: HeightUnit,
) -> Optional[float]:
    return calculate_bmi_with_details(weight, height, weight_unit, height_unit).calculated_value


# --- Linear units ---

def convert_distance(value: float, from_unit: DistanceUnit, to_unit: DistanceUnit) -> Optional[float]:
    """Convert a distance. Negative and NaN distances return None."""
    if not value >= 0:
        return None
    return convert_units(value, from_unit, to_unit)


def convert_weight(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    # Negative weights are converted as-is; see validation.validate_weight
    return convert_units(value, from_unit, to_unit)


def convert_height(value: float, from_unit: HeightUnit, to_unit: HeightUnit) -> float:
    return convert_units(value, from_unit, to_unit)


def convert_with_details(value: float, from_unit, to_unit) -> ConversionResult:
    """Convert between any two distance, weight or height units.

    Units from different categories, or pace units, produce an
    UnsupportedConversion error.
    """
    calculation_type = _LINEAR_CALCULATIONS.get(type(from_unit))
    if calculation_type is None or type(from_unit) is not type(to_unit):
        error = UnsupportedConversion(from_unit.full_name, to_unit.full_name)
        logger.debug("Unsupported conversion requested: %s", error)
        return ConversionResult.failure(
            value, from_unit.descriptor, to_unit.descriptor,
            calculation_type or CalculationType.PACE_CONVERSION, error,
        )

    if calculation_type is CalculationType.DISTANCE and not value >= 0:
        error = InvalidMeasurement("Distance cannot be negative")
        return ConversionResult.failure(
            value, from_unit.descriptor, to_unit.descriptor, calculation_type, error,
        )

    notes = "Same unit - no conversion needed" if from_unit is to_unit else None
    return ConversionResult(
        original_value=value,
        calculated_value=convert_units(value, from_unit, to_unit),
        from_unit=from_unit.descriptor,
        to_unit=to_unit.descriptor,
        calculation_type=calculation_type,
        confidence=EXACT_CONFIDENCE,
        notes=notes,
    )


def conversion_info() -> ConversionInfo:
    """Describe every supported unit and calculation."""
    return ConversionInfo.default()


# --- Shortcuts ---

def mile_pace_to_km_pace(mile_pace: str) -> Optional[str]:
    return convert_pace(mile_pace, PaceUnit.MINUTES_PER_MILE, PaceUnit.MINUTES_PER_KILOMETER)


def km_pace_to_mile_pace(km_pace: str) -> Optional[str]:
    return convert_pace(km_pace, PaceUnit.MINUTES_PER_KILOMETER, PaceUnit.MINUTES_PER_MILE)


def miles_to_kilometers(miles: float) -> Optional[float]:
    return convert_distance(miles, DistanceUnit.MILES, DistanceUnit.KILOMETERS)


def kilometers_to_miles(kilometers: float) -> Optional[float]:
    return convert_distance(kilometers, DistanceUnit.KILOMETERS, DistanceUnit.MILES)


def pounds_to_kilograms(pounds: float) -> float:
    return convert_weight(pounds, WeightUnit.POUNDS, WeightUnit.KILOGRAMS)


def kilograms_to_pounds(kilograms: float) -> float:
    return convert_weight(kilograms, WeightUnit.KILOGRAMS, WeightUnit.POUNDS)


def inches_to_centimeters(inches: float) -> float:
    return convert_height(inches, HeightUnit.INCHES, HeightUnit.CENTIMETERS)


def centimeters_to_inches(centimeters: float) -> float:
    return convert_height(centimeters, HeightUnit.CENTIMETERS, HeightUnit.INCHES)


def calculate_bmi_us(weight_lbs: float, height_inches: float) -> Optional[float]:
    return calculate_bmi(weight_lbs, height_inches, WeightUnit.POUNDS, HeightUnit.INCHES)


def calculate_bmi_metric(weight_kg: float, height_cm: float) -> Optional[float]:
    return calculate_bmi(weight_kg, height_cm, WeightUnit.KILOGRAMS, HeightUnit.CENTIMETERS)
