"""
Tunable constants for the strength and calorie calculations.

Every number the engine uses to classify lifts, estimate calories or set
cardio targets lives here, so a change to a MET table or a multiplier is a
one-line edit rather than a hunt through the calculation code.

References:
- Compendium of Physical Activities (Ainsworth et al.) for MET values
- CDC guidance of 150 min/week moderate cardio for the health baseline
"""

from typing import Dict, Tuple


# =============================================================================
# Unit conversions
# =============================================================================

LBS_TO_KG = 0.453592
MILES_PER_KM = 0.621371
MILES_PER_FOOT = 1 / 5280
MILES_PER_METER = 0.000621371
CM_PER_INCH = 2.54


# =============================================================================
# Strength classification
# =============================================================================

# Above this age the lift ratio is credited +1% per year
AGE_ADJUSTMENT_START = 40
AGE_ADJUSTMENT_PER_YEAR = 0.01

# Absolute tolerance when comparing a ratio to a tier boundary
RATIO_EPSILON = 1e-9

# Relative tolerance applied before rounding thresholds up, so float noise
# on a whole number does not push it to the next unit
THRESHOLD_ROUNDING_TOLERANCE = 1e-12


# =============================================================================
# Cardio calorie estimation
# =============================================================================

# Running speed (mph) -> MET
RUNNING_METS: Dict[float, float] = {
    4.0: 6.0,    # 15 min/mile
    5.0: 8.3,    # 12 min/mile
    5.2: 9.0,    # 11.5 min/mile
    6.0: 9.8,    # 10 min/mile
    6.7: 10.5,   # 9 min/mile
    7.0: 11.0,   # 8.5 min/mile
    7.5: 11.5,   # 8 min/mile
    8.0: 11.8,   # 7.5 min/mile
    8.6: 12.3,   # 7 min/mile
    9.0: 12.8,   # 6.5 min/mile
    10.0: 14.5,  # 6 min/mile
}

# Walking speed (mph) -> MET
WALKING_METS: Dict[float, float] = {
    2.0: 2.8,
    2.5: 3.0,
    3.0: 3.5,
    3.5: 4.3,
    4.0: 5.0,
    4.5: 7.0,
}

DEFAULT_RUNNING_PACE_MIN_PER_MILE = 10.0
DEFAULT_WALKING_PACE_MIN_PER_MILE = 20.0

# Treadmill/elliptical sessions faster than this use the running table
CARDIO_RUN_THRESHOLD_MPH = 4.0

ROWING_MET = 7.0
CYCLING_MET = 7.5
SWIMMING_MET = 6.0
CLIMBMILL_MET = 9.0

# Default speeds used to turn a distance into a duration
ROWING_DEFAULT_SPEED_MPH = 8.0
CYCLING_DEFAULT_SPEED_MPH = 12.0
SWIMMING_DEFAULT_SPEED_MPH = 2.0


# =============================================================================
# Resistance calorie estimation
# =============================================================================

# (max reps, seconds per rep, rest seconds between sets)
REP_SCHEME_TIMINGS: Tuple[Tuple[int, float, float], ...] = (
    (5, 4.0, 180.0),
    (8, 3.5, 120.0),
    (12, 3.0, 90.0),
    (15, 2.5, 60.0),
)
HIGH_REP_TIMING: Tuple[float, float] = (2.0, 45.0)

# Keyword -> relative calorie factor (0..1); first match wins, so compound
# movements are listed before the equipment words that also match them
RESISTANCE_CALORIE_FACTORS: Tuple[Tuple[str, float], ...] = (
    ("deadlift", 1.0),
    ("squat", 1.0),
    ("clean", 1.0),
    ("snatch", 1.0),
    ("thruster", 0.95),
    ("leg press", 0.85),
    ("lunge", 0.8),
    ("hip thrust", 0.75),
    ("bench", 0.7),
    ("row", 0.65),
    ("overhead press", 0.6),
    ("shoulder press", 0.6),
    ("chest press", 0.55),
    ("pulldown", 0.55),
    ("push-up", 0.5),
    ("pushup", 0.5),
    ("push up", 0.5),
    ("leg curl", 0.4),
    ("leg extension", 0.4),
    ("crunch", 0.35),
    ("tricep", 0.3),
    ("curl", 0.3),
    ("fly", 0.3),
    ("raise", 0.25),
    ("cable", 0.3),
    ("machine", 0.35),
)
DEFAULT_RESISTANCE_CALORIE_FACTOR = 0.5

# Calorie factor 0..1 maps linearly onto this MET range
RESISTANCE_MET_RANGE: Tuple[float, float] = (3.0, 7.0)

# Moving the whole body through pulls and dips
BODYWEIGHT_PULL_DIP_MET = 8.5
BODYWEIGHT_PULL_DIP_KEYWORDS: Tuple[str, ...] = (
    "pull-up", "pull up", "pullup",
    "chin-up", "chin up", "chinup",
    "dip",
)
BODYWEIGHT_EXERCISE_KEYWORDS: Tuple[str, ...] = BODYWEIGHT_PULL_DIP_KEYWORDS + (
    "push-up", "push up", "pushup",
)

REST_MET = 1.5
FEMALE_CALORIE_MULTIPLIER = 0.92


# =============================================================================
# Weekly cardio targets
# =============================================================================

# ~150 min/week of moderate cardio at the reference bodyweight
CARDIO_HEALTH_BASELINE = 600
CARDIO_REFERENCE_WEIGHT_KG = 70.0

WEIGHT_GOAL_MULTIPLIERS: Dict[str, float] = {
    "lose": 1.4,
    "maintain": 1.0,
    "gain": 0.8,
}

CARDIO_ACTIVITY_LEVEL_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 0.6,
    "lightly_active": 0.8,
    "moderately_active": 1.0,
    "very_active": 1.2,
    "extremely_active": 1.4,
}

CARDIO_EXPERIENCE_MULTIPLIERS: Dict[str, float] = {
    "beginner": 0.9,
    "intermediate": 1.0,
    "advanced": 1.05,
}

CARDIO_STRETCH_MULTIPLIERS: Dict[str, float] = {
    "beginner": 1.3,
    "intermediate": 1.25,
    "advanced": 1.25,
}

CARDIO_TARGET_BOUNDS: Dict[str, int] = {
    "min_base": 400,
    "max_base": 2500,
    "min_stretch": 500,
    "max_stretch": 3000,
}

# Completed weeks averaged for the recent weekly cardio figure
RECENT_CARDIO_WEEKS = 4
