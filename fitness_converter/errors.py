"""Error kinds for fitness conversions and calculations.

Errors are returned to the caller inside a ConversionResult, never raised by
the engine. They derive from Exception so callers can raise them if that
suits their own control flow.
"""

from typing import Any, Optional


class FitnessConversionError(Exception):
    """Base class for all conversion and calculation errors."""

    error_code = "FITNESS_CONVERSION_ERROR"

    def __init__(self, description: str, details: Optional[dict] = None):
        super().__init__(description)
        self.description = description
        self.details = details or {}

    @property
    def user_friendly_description(self) -> str:
        return self.description

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.error_code,
            "message": self.description,
            "user_message": self.user_friendly_description,
            "details": self.details,
        }

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.details == other.details

    def __hash__(self):
        return hash((type(self), tuple(sorted(self.details.items()))))

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{type(self).__name__}({fields})"


class InvalidPaceFormat(FitnessConversionError):
    """A pace that cannot be decoded to a positive number of seconds."""

    error_code = "INVALID_PACE_FORMAT"

    def __init__(self, raw: str):
        super().__init__(
            f"Invalid pace format: '{raw}'. Expected format like '7:30' or decimal minutes.",
            details={"raw": raw},
        )
        self.raw = raw

    @property
    def user_friendly_description(self) -> str:
        return "Please enter pace as '7:30' or decimal minutes like '7.5'"


class InvalidMeasurement(FitnessConversionError):
    error_code = "INVALID_MEASUREMENT"

    def __init__(self, message: str):
        super().__init__(f"Invalid measurement: {message}", details={"message": message})
        self.message = message

    @property
    def user_friendly_description(self) -> str:
        return self.message


class CalculationFailed(FitnessConversionError):
    error_code = "CALCULATION_FAILED"

    def __init__(self, reason: str):
        super().__init__(f"Calculation failed: {reason}", details={"reason": reason})
        self.reason = reason

    @property
    def user_friendly_description(self) -> str:
        return "Could not complete the calculation with provided values"


class UnsupportedConversion(FitnessConversionError):
    error_code = "UNSUPPORTED_CONVERSION"

    def __init__(self, from_unit: str, to_unit: str):
        super().__init__(
            f"Cannot convert from {from_unit} to {to_unit}",
            details={"from": from_unit, "to": to_unit},
        )
        self.from_unit = from_unit
        self.to_unit = to_unit

    @property
    def user_friendly_description(self) -> str:
        return "This conversion is not supported"


class ConversionFailed(FitnessConversionError):
    error_code = "CONVERSION_FAILED"

    def __init__(self, reason: str):
        super().__init__(f"Conversion failed: {reason}", details={"reason": reason})
        self.reason = reason

    @property
    def user_friendly_description(self) -> str:
        return "Conversion could not be completed"


class ValueOutOfRange(FitnessConversionError):
    """Advisory: a value outside the reasonable range for its unit."""

    error_code = "VALUE_OUT_OF_RANGE"

    def __init__(self, value: str, valid_range: str):
        super().__init__(
            f"Value '{value}' out of valid range: {valid_range}",
            details={"value": value, "valid_range": valid_range},
        )
        self.value = value
        self.valid_range = valid_range

    @property
    def user_friendly_description(self) -> str:
        return f"Please enter a value in the range: {self.valid_range}"
