"""Library configuration and constants."""

# Logging
LOG_LEVEL = "INFO"

# Confidence scores attached to results
EXACT_CONFIDENCE = 1.0
BMI_CONFIDENCE = 0.95  # BMI is a derived estimate, never exact
FAILURE_CONFIDENCE = 0.0

# BMI category lower bounds (left-inclusive), checked from the top down
BMI_CATEGORIES = [
    (30.0, "Obesity"),
    (25.0, "Overweight"),
    (18.5, "Normal weight"),
]
BMI_UNDERWEIGHT = "Underweight"

# Reasonable ranges for advisory sanity checks, keyed by unit abbreviation
WEIGHT_RANGES = {
    "lbs": (50.0, 500.0),
    "kg": (20.0, 250.0),
    "stones": (3.0, 35.0),
}

HEIGHT_RANGES = {
    "inches": (24.0, 96.0),
    "feet": (2.0, 8.0),
    "cm": (60.0, 250.0),
    "m": (0.6, 2.5),
}

DISTANCE_RANGES = {
    "miles": (0.01, 1000.0),
    "km": (0.01, 1600.0),
    "m": (1.0, 1600000.0),
    "yards": (1.0, 1750000.0),
    "feet": (1.0, 5280000.0),
}

PACE_RANGE_SECONDS = (180, 1200)  # per mile
PACE_RANGE_LABEL = "3:00-20:00 per mile"

AGE_RANGE_YEARS = (1, 120)

# Heart rate zones as fractions of heart rate reserve (Karvonen method).
# An upper bound of None means the zone runs up to max heart rate.
MAX_HEART_RATE_BASE = 220
HEART_RATE_ZONES = [
    ("Recovery", 0.2, 0.3),
    ("Aerobic Base", 0.3, 0.4),
    ("Aerobic", 0.4, 0.5),
    ("Lactate Threshold", 0.5, 0.6),
    ("VO2 Max", 0.6, 0.7),
    ("Anaerobic", 0.7, 0.8),
    ("Neuromuscular", 0.8, None),
]

# Running MET values by pace (minutes per mile), faster pace -> higher MET.
# Each entry applies below its pace bound; slower paces fall to WALKING_MET.
RUNNING_MET_TABLE = [
    (6.0, 16.0),
    (7.0, 14.0),
    (8.0, 12.0),
    (9.0, 10.0),
    (10.0, 8.5),
    (12.0, 7.0),
]
WALKING_MET = 5.0

# Cadence estimate (steps per minute), adjusted around a 5'8" runner
BASELINE_CADENCE = 180.0
CADENCE_REFERENCE_HEIGHT_INCHES = 68.0
CADENCE_PER_INCH = -0.5

# Activity level multipliers for TDEE calculation
ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extra_active": 1.9,
}

# Mifflin-St Jeor sex constant
BMR_SEX_OFFSETS = {
    "male": 5,
    "female": -161,
}
