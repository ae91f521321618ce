"""Height form helpers for feet + inches input.

Forms collect height as feet and inches for user-friendly entry.
The converter works on a single height unit, so these combine and split
the two fields around convert_height.
"""

from fitness_converter.converter import convert_height
from fitness_converter.units import HeightUnit

INCHES_PER_FOOT = 12


def ft_in_to_height(feet: int, inches: float, unit: HeightUnit = HeightUnit.INCHES) -> float:
    """Convert feet and inches to a single height in the given unit."""
    total_inches = feet * INCHES_PER_FOOT + inches
    return convert_height(total_inches, HeightUnit.INCHES, unit)


def height_to_ft_in(height: float, unit: HeightUnit = HeightUnit.INCHES) -> tuple:
    """Convert a height to (feet, inches), inches rounded to whole numbers."""
    total_inches = convert_height(height, unit, HeightUnit.INCHES)
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = int(round(total_inches % INCHES_PER_FOOT))
    if inches == 12:
        feet += 1
        inches = 0
    return feet, inches
