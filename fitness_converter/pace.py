"""Pace codec.

A pace is the whole number of seconds needed to cover one unit of distance.
Callers hand it over in one of three shapes, each a variant of a closed
sum type that knows how to decode itself to seconds and encode seconds back:

    PaceText("7:30")   minutes and zero-padded seconds
    PaceDecimal(7.5)   decimal minutes
    PaceSeconds(450)   whole seconds

A pace of zero seconds or less is invalid in every shape.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

_PACE_PATTERN = re.compile(r"(\d+):(\d+)", re.ASCII)


def format_pace(seconds: int) -> Optional[str]:
    """Format total seconds as "M:SS". Returns None for non-positive seconds."""
    if seconds <= 0:
        return None
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}:{remaining:02d}"


def parse_pace(text: str) -> Optional[int]:
    """Parse "M:SS" into total seconds.

    Both parts must be non-negative integers and the seconds part must be
    below 60. Returns None for anything else, including "0:00".
    """
    match = _PACE_PATTERN.fullmatch(text)
    if match is None:
        return None
    minutes, seconds = int(match.group(1)), int(match.group(2))
    if seconds >= 60:
        return None
    total = minutes * 60 + seconds
    return total if total > 0 else None


@dataclass(frozen=True)
class PaceText:
    """Pace written as "M:SS"."""
    value: str

    def to_seconds(self) -> Optional[int]:
        return parse_pace(self.value)

    @classmethod
    def from_seconds(cls, seconds: int) -> Optional["PaceText"]:
        text = format_pace(seconds)
        return cls(text) if text is not None else None


@dataclass(frozen=True)
class PaceDecimal:
    """Pace written as decimal minutes, e.g. 7.5 for 7:30."""
    value: float

    def to_seconds(self) -> Optional[int]:
        if not (self.value > 0 and math.isfinite(self.value * 60)):
            return None
        # Truncates toward zero: 7.999 minutes is 479 seconds
        seconds = int(self.value * 60)
        return seconds if seconds > 0 else None

    @classmethod
    def from_seconds(cls, seconds: int) -> Optional["PaceDecimal"]:
        if seconds <= 0:
            return None
        return cls(seconds / 60.0)


@dataclass(frozen=True)
class PaceSeconds:
    """Pace written as whole seconds."""
    value: int

    def to_seconds(self) -> Optional[int]:
        if self.value <= 0:
            return None
        return self.value

    @classmethod
    def from_seconds(cls, seconds: int) -> Optional["PaceSeconds"]:
        if seconds <= 0:
            return None
        return cls(seconds)


PaceValue = Union[PaceText, PaceDecimal, PaceSeconds]
PACE_VARIANTS = (PaceText, PaceDecimal, PaceSeconds)

# Plain Python values map onto a variant by their type alone
_BUILTIN_VARIANTS = {
    str: PaceText,
    float: PaceDecimal,
    int: PaceSeconds,
}


def as_pace_value(pace) -> PaceValue:
    """Wrap a plain str, float or int in its pace variant.

    Variants pass through untouched. Raises TypeError for anything else;
    bool is refused even though it is an int.
    """
    if isinstance(pace, PACE_VARIANTS):
        return pace
    variant = _BUILTIN_VARIANTS.get(type(pace))
    if variant is None:
        raise TypeError(f"Unsupported pace type: {type(pace).__name__}")
    return variant(pace)


def pace_to_seconds(pace) -> Optional[int]:
    """Decode any accepted pace shape to seconds, or None if it is invalid."""
    return as_pace_value(pace).to_seconds()
