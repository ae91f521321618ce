"""Data models for fitness conversions and calculations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from fitness_converter.config import ACTIVITY_MULTIPLIERS, FAILURE_CONFIDENCE
from fitness_converter.errors import FitnessConversionError
from fitness_converter.units import (
    DistanceUnit,
    FitnessUnit,
    HeightUnit,
    PaceUnit,
    WeightUnit,
    conversion_pair_count,
)


class CalculationType(Enum):
    PACE_CONVERSION = "pace"
    BMI = "bmi"
    DISTANCE = "distance"
    WEIGHT = "weight"
    HEIGHT = "height"
    CALORIES = "calories"
    HEART_RATE = "heartRate"

    @property
    def description(self) -> str:
        return _CALCULATION_DESCRIPTIONS[self]


_CALCULATION_DESCRIPTIONS = {
    CalculationType.PACE_CONVERSION: "Pace Conversion (minutes per mile ↔ km)",
    CalculationType.BMI: "Body Mass Index Calculation",
    CalculationType.DISTANCE: "Distance Conversion (miles, km, meters)",
    CalculationType.WEIGHT: "Weight Conversion (lbs, kg, stones)",
    CalculationType.HEIGHT: "Height Conversion (ft/in, cm, m)",
    CalculationType.CALORIES: "Calorie Burn Estimation",
    CalculationType.HEART_RATE: "Target Heart Rate Zones",
}


class ActivityLevel(Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    @property
    def description(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS[self.value]


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @property
    def description(self) -> str:
        return self.value.capitalize()


@dataclass
class FitnessProfile:
    """Optional personal attributes used by the derived metrics."""
    age: Optional[int] = None
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    resting_heart_rate: Optional[int] = None


@dataclass(frozen=True)
class HeartRateZone:
    """A named training zone in beats per minute, bounds inclusive."""
    name: str
    min_bpm: int
    max_bpm: int

    def contains(self, bpm: int) -> bool:
        return self.min_bpm <= bpm <= self.max_bpm


@dataclass
class ConversionResult:
    """Outcome of a conversion or calculation.

    Exactly one of an output (converted_pace or calculated_value) and an
    error is present. Failures carry zero confidence.
    """
    original_value: Any
    from_unit: FitnessUnit
    to_unit: FitnessUnit
    calculation_type: CalculationType
    converted_pace: Any = None
    calculated_value: Optional[float] = None
    confidence: float = 1.0
    error: Optional[FitnessConversionError] = None
    notes: Optional[str] = None

    def __post_init__(self):
        has_output = self.converted_pace is not None or self.calculated_value is not None
        if has_output == (self.error is not None):
            raise ValueError("A result needs either an output or an error, not both")
        if self.converted_pace is not None and self.calculated_value is not None:
            raise ValueError("A result holds a converted pace or a calculated value, not both")

    @classmethod
    def failure(
        cls,
        original_value: Any,
        from_unit: FitnessUnit,
        to_unit: FitnessUnit,
        calculation_type: CalculationType,
        error: FitnessConversionError,
        notes: Optional[str] = None,
    ) -> "ConversionResult":
        return cls(
            original_value=original_value,
            from_unit=from_unit,
            to_unit=to_unit,
            calculation_type=calculation_type,
            confidence=FAILURE_CONFIDENCE,
            error=error,
            notes=notes,
        )

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def result_value(self) -> Any:
        if self.converted_pace is not None:
            return self.converted_pace
        return self.calculated_value


@dataclass
class ConversionInfo:
    """Static manifest of the supported units and calculations."""
    supported_calculations: list = field(default_factory=list)  # List[CalculationType]
    distance_units: list = field(default_factory=list)
    weight_units: list = field(default_factory=list)
    height_units: list = field(default_factory=list)
    pace_units: list = field(default_factory=list)
    description: str = ""

    @property
    def total_unit_conversions(self) -> int:
        return sum(
            conversion_pair_count(units)
            for units in (self.distance_units, self.weight_units, self.height_units, self.pace_units)
        )

    @property
    def units_by_context(self) -> dict:
        return {
            "Distance": [u.full_name for u in self.distance_units],
            "Weight": [u.full_name for u in self.weight_units],
            "Height": [u.full_name for u in self.height_units],
            "Pace": [u.full_name for u in self.pace_units],
        }

    @property
    def available_calculations(self) -> list:
        return [c.description for c in self.supported_calculations]

    @staticmethod
    def default() -> "ConversionInfo":
        return ConversionInfo(
            supported_calculations=list(CalculationType),
            distance_units=list(DistanceUnit),
            weight_units=list(WeightUnit),
            height_units=list(HeightUnit),
            pace_units=list(PaceUnit),
            description="Professional fitness measurement converter with international unit support",
        )
