"""Derived fitness metrics layered on the unit tables.

Uses:
- BMI categories from the WHO adult classification
- Karvonen (heart rate reserve) method for training zones
- MET values by running pace for calorie estimates
- Mifflin-St Jeor equation for Basal Metabolic Rate (BMR)
"""

import math
from typing import Optional

from fitness_converter.config import (
    BASELINE_CADENCE,
    BMI_CATEGORIES,
    BMI_UNDERWEIGHT,
    BMR_SEX_OFFSETS,
    CADENCE_PER_INCH,
    CADENCE_REFERENCE_HEIGHT_INCHES,
    HEART_RATE_ZONES,
    MAX_HEART_RATE_BASE,
    RUNNING_MET_TABLE,
    WALKING_MET,
)
from fitness_converter.models import ActivityLevel, FitnessProfile, Gender, HeartRateZone
from fitness_converter.pace import pace_to_seconds
from fitness_converter.units import WeightUnit, convert_units


def round_half_away_from_zero(value: float, digits: int = 0) -> float:
    """Round halves away from zero: 2.5 -> 3.0, -0.5 -> -1.0."""
    scale = 10 ** digits
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def bmi_category(bmi: float) -> str:
    """Classify a BMI. Each category includes its lower bound."""
    for lower_bound, category in BMI_CATEGORIES:
        if bmi >= lower_bound:
            return category
    return BMI_UNDERWEIGHT


def calculate_heart_rate_zones(age: int, resting_heart_rate: int) -> Optional[list]:
    """Calculate the seven training zones from age and resting heart rate.

    max HR  = 220 - age
    reserve = max HR - resting HR
    zone    = resting + low% * reserve .. resting + high% * reserve

    The top zone runs up to max HR. Returns None when there is no reserve
    to split, i.e. the resting rate is at or above the max rate.
    """
    max_heart_rate = MAX_HEART_RATE_BASE - age
    reserve = max_heart_rate - resting_heart_rate
    if reserve <= 0:
        return None

    zones = []
    for name, low, high in HEART_RATE_ZONES:
        min_bpm = resting_heart_rate + int(low * reserve)
        max_bpm = resting_heart_rate + int(high * reserve) if high is not None else max_heart_rate
        zones.append(HeartRateZone(name=name, min_bpm=min_bpm, max_bpm=max_bpm))
    return zones


def heart_rate_zones_for_profile(profile: FitnessProfile) -> Optional[list]:
    if profile.age is None or profile.resting_heart_rate is None:
        return None
    return calculate_heart_rate_zones(profile.age, profile.resting_heart_rate)


def running_met(pace_minutes_per_mile: float) -> float:
    """MET value for running at the given pace. Faster pace burns more."""
    for pace_bound, met in RUNNING_MET_TABLE:
        if pace_minutes_per_mile < pace_bound:
            return met
    return WALKING_MET


def estimate_running_calories(
    pace_seconds: int,
    distance_miles: float,
    weight: float,
    weight_unit: WeightUnit = WeightUnit.POUNDS,
) -> float:
    """Estimate calories burned on a run.

    Calories = MET × weight(kg) × time(h), where
    time(h) = pace(min/mile) × distance(miles) / 60
    """
    pace_minutes = pace_seconds / 60.0
    weight_kg = convert_units(weight, weight_unit, WeightUnit.KILOGRAMS)
    time_hours = (pace_minutes * distance_miles) / 60.0
    return running_met(pace_minutes) * weight_kg * time_hours


def calculate_ideal_cadence(height_inches: float) -> int:
    """Suggested steps per minute: 180, lowered by half a step per inch above 5'8"."""
    adjustment = (height_inches - CADENCE_REFERENCE_HEIGHT_INCHES) * CADENCE_PER_INCH
    return int(round_half_away_from_zero(BASELINE_CADENCE + adjustment))


def speed_to_pace(speed_mph: float) -> Optional[str]:
    """Convert miles per hour to a "M:SS" per-mile pace.

    Returns None for speeds that are not positive, or so far out of range
    that no pace can be written for them.
    """
    if not speed_mph > 0:
        return None
    try:
        minutes_per_mile = 60.0 / speed_mph
    except OverflowError:
        return None
    if not 0 < minutes_per_mile < math.inf:
        return None
    minutes = int(minutes_per_mile)
    seconds = int((minutes_per_mile - minutes) * 60)
    return f"{minutes}:{seconds:02d}"


def pace_to_speed(pace) -> Optional[float]:
    """Convert a per-mile pace (any accepted shape) to miles per hour."""
    seconds = pace_to_seconds(pace)
    if seconds is None:
        return None
    try:
        return 60.0 / (seconds / 60.0)
    except OverflowError:
        return None


def format_speed_note(pace_seconds: int) -> str:
    return f"Equivalent to {60.0 / (pace_seconds / 60.0):.1f} mph"


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> Optional[float]:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161

    The equation has no validated constant for other genders; returns None.
    """
    offset = BMR_SEX_OFFSETS.get(gender.value)
    if offset is None:
        return None
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Calculate Total Daily Energy Expenditure.

    TDEE = BMR × activity multiplier
    """
    return bmr * activity_level.multiplier
