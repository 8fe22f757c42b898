"""
Calorie Estimation

Estimates calories for a single logged exercise from MET values.

Key concepts:
- MET: metabolic equivalent of task. kcal = MET x bodyweight kg x hours.
- Cardio: the activity family is picked by keyword. Pace-based families
  (running, walking, treadmill, elliptical) look up MET from speed in a
  sparse table; fixed-MET families (rowing, cycling, swimming, climbmill)
  use one constant and turn a distance into a duration at a default speed.
- Resistance: work time comes from a rep-count tempo table, rest time is
  counted between sets only, and the lift's calorie factor maps onto a
  3-7 MET range.

Missing data is never an error here: the estimate is 0 and the caller
treats it as unknown.

Example:
    >>> run = LoggedExercise(name="Running", category="Cardio",
    ...                      distance=1, distance_unit="mi",
    ...                      duration=10, duration_unit="min")
    >>> estimate_calories(run, UserProfile(weight_value=70, weight_unit="kg"))
    114
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from ..constants import (
    BODYWEIGHT_EXERCISE_KEYWORDS,
    BODYWEIGHT_PULL_DIP_KEYWORDS,
    BODYWEIGHT_PULL_DIP_MET,
    CARDIO_RUN_THRESHOLD_MPH,
    CLIMBMILL_MET,
    CYCLING_DEFAULT_SPEED_MPH,
    CYCLING_MET,
    DEFAULT_RESISTANCE_CALORIE_FACTOR,
    DEFAULT_RUNNING_PACE_MIN_PER_MILE,
    DEFAULT_WALKING_PACE_MIN_PER_MILE,
    FEMALE_CALORIE_MULTIPLIER,
    HIGH_REP_TIMING,
    REP_SCHEME_TIMINGS,
    RESISTANCE_CALORIE_FACTORS,
    RESISTANCE_MET_RANGE,
    REST_MET,
    ROWING_DEFAULT_SPEED_MPH,
    ROWING_MET,
    RUNNING_METS,
    SWIMMING_DEFAULT_SPEED_MPH,
    SWIMMING_MET,
    WALKING_METS,
)
from ..models.common import DistanceUnit, DurationUnit
from ..models.profile import UserProfile
from ..models.workouts import LoggedExercise, WorkoutLog
from .units import distance_to_miles, duration_to_minutes, pace_to_speed_mph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityFamily:
    """A group of cardio exercise names that share a calorie model."""

    name: str
    keywords: Tuple[str, ...]
    fixed_met: Optional[float] = None
    default_speed_mph: Optional[float] = None
    met_table: Optional[Dict[float, float]] = None
    default_pace: Optional[float] = None
    requires_duration: bool = False

    @property
    def is_pace_based(self) -> bool:
        return self.fixed_met is None

    def matches(self, name: str) -> bool:
        lowered = name.lower()
        return any(keyword in lowered for keyword in self.keywords)


# Checked in order; the first match wins
ACTIVITY_FAMILIES: Tuple[ActivityFamily, ...] = (
    ActivityFamily(
        "climbmill",
        ("climbmill", "stairmaster", "stair"),
        fixed_met=CLIMBMILL_MET,
        requires_duration=True,
    ),
    ActivityFamily(
        "rowing",
        ("rowing", "rower", "row"),
        fixed_met=ROWING_MET,
        default_speed_mph=ROWING_DEFAULT_SPEED_MPH,
    ),
    ActivityFamily(
        "cycling",
        ("cycle", "cycling", "bike", "biking"),
        fixed_met=CYCLING_MET,
        default_speed_mph=CYCLING_DEFAULT_SPEED_MPH,
    ),
    ActivityFamily(
        "swimming",
        ("swim",),
        fixed_met=SWIMMING_MET,
        default_speed_mph=SWIMMING_DEFAULT_SPEED_MPH,
    ),
    ActivityFamily(
        "walking",
        ("walk",),
        met_table=WALKING_METS,
        default_pace=DEFAULT_WALKING_PACE_MIN_PER_MILE,
    ),
    ActivityFamily(
        "running",
        ("run", "jog", "sprint"),
        met_table=RUNNING_METS,
        default_pace=DEFAULT_RUNNING_PACE_MIN_PER_MILE,
    ),
    # Table chosen from the session speed
    ActivityFamily(
        "machine",
        ("treadmill", "elliptical", "ascent trainer"),
        default_pace=DEFAULT_WALKING_PACE_MIN_PER_MILE,
    ),
)


def classify_activity(name: str) -> Optional[ActivityFamily]:
    """Cardio activity family for an exercise name, or None if unrecognized."""
    for family in ACTIVITY_FAMILIES:
        if family.matches(name):
            return family
    return None


def lookup_met(speed_mph: float, table: Dict[float, float]) -> float:
    """
    MET for the tabulated speed closest to ``speed_mph``.

    Ties go to the lower speed.

    Example:
        >>> lookup_met(6.0, RUNNING_METS)
        9.8
    """
    closest = min(sorted(table), key=lambda speed: abs(speed - speed_mph))
    return table[closest]


def historical_pace(family: ActivityFamily, recent_logs: Iterable[WorkoutLog]) -> Optional[float]:
    """
    Average minutes per mile over the user's past sessions of the same family.

    Only cardio entries logged in miles and minutes with positive distance
    and duration count. Returns None when there are none.
    """
    total_miles = 0.0
    total_minutes = 0.0
    for log in recent_logs:
        for entry in log.exercises:
            if not entry.is_cardio or classify_activity(entry.name) is not family:
                continue
            if entry.distance_unit != DistanceUnit.MILES or entry.duration_unit != DurationUnit.MINUTES:
                continue
            if not _positive(entry.distance) or not _positive(entry.duration):
                continue
            total_miles += entry.distance
            total_minutes += entry.duration

    if total_miles <= 0:
        return None
    return total_minutes / total_miles


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def _estimate_cardio(
    exercise: LoggedExercise,
    weight_kg: float,
    recent_logs: Iterable[WorkoutLog],
) -> float:
    has_distance = _positive(exercise.distance)
    has_duration = _positive(exercise.duration)
    if not has_distance and not has_duration:
        return 0

    family = classify_activity(exercise.name)
    if family is None:
        logger.debug("No calorie model for cardio exercise %r", exercise.name)
        return 0

    minutes = duration_to_minutes(exercise.duration, exercise.duration_unit) if has_duration else None

    if not family.is_pace_based:
        if minutes is None:
            if family.requires_duration or not has_distance:
                return 0
            miles = distance_to_miles(exercise.distance, exercise.distance_unit)
            minutes = miles / family.default_speed_mph * 60
        return family.fixed_met * weight_kg * minutes / 60

    if not has_distance:
        return 0
    miles = distance_to_miles(exercise.distance, exercise.distance_unit)
    if miles <= 0:
        return 0

    if minutes is not None:
        pace = minutes / miles
    else:
        pace = historical_pace(family, recent_logs) or family.default_pace
        minutes = pace * miles

    speed = pace_to_speed_mph(pace)
    table = family.met_table
    if table is None:
        table = RUNNING_METS if speed > CARDIO_RUN_THRESHOLD_MPH else WALKING_METS
    met = lookup_met(speed, table)
    return met * weight_kg * minutes / 60


def rep_scheme_timing(reps: int) -> Tuple[float, float]:
    """(seconds per rep, rest seconds between sets) for a rep count."""
    for max_reps, seconds_per_rep, rest_seconds in REP_SCHEME_TIMINGS:
        if reps <= max_reps:
            return seconds_per_rep, rest_seconds
    return HIGH_REP_TIMING


def resistance_met(name: str) -> float:
    """Working MET for a resistance exercise name."""
    lowered = name.lower()
    if any(keyword in lowered for keyword in BODYWEIGHT_PULL_DIP_KEYWORDS):
        return BODYWEIGHT_PULL_DIP_MET

    factor = DEFAULT_RESISTANCE_CALORIE_FACTOR
    for keyword, keyword_factor in RESISTANCE_CALORIE_FACTORS:
        if keyword in lowered:
            factor = keyword_factor
            break
    low, high = RESISTANCE_MET_RANGE
    return low + factor * (high - low)


def _estimate_resistance(exercise: LoggedExercise, profile: UserProfile, weight_kg: float) -> float:
    if exercise.sets <= 0 or exercise.reps <= 0 or not profile.gender:
        return 0

    lowered = exercise.name.lower()
    is_bodyweight = any(keyword in lowered for keyword in BODYWEIGHT_EXERCISE_KEYWORDS)
    if not is_bodyweight and exercise.weight <= 0:
        return 0

    seconds_per_rep, rest_seconds = rep_scheme_timing(exercise.reps)
    work_hours = seconds_per_rep * exercise.reps * exercise.sets / 3600
    rest_hours = rest_seconds * (exercise.sets - 1) / 3600

    gender_multiplier = FEMALE_CALORIE_MULTIPLIER if profile.gender == "Female" else 1.0
    work = resistance_met(exercise.name) * weight_kg * work_hours * gender_multiplier
    rest = REST_MET * weight_kg * rest_hours * gender_multiplier
    return work + rest


def estimate_calories(
    exercise: LoggedExercise,
    profile: UserProfile,
    recent_logs: Iterable[WorkoutLog] = (),
) -> int:
    """
    Estimate calories burned for one logged exercise.

    Args:
        exercise: The logged exercise
        profile: User profile (bodyweight, gender)
        recent_logs: Past workouts used to infer pace when duration is missing

    Returns:
        Whole kcal, never negative. A known positive ``exercise.calories``
        is returned rounded to whole kcal; missing or non-finite inputs
        give 0.
    """
    if _positive(exercise.calories):
        return round(exercise.calories)

    weight_kg = profile.bodyweight_kg
    if weight_kg is None:
        return 0

    if exercise.is_cardio:
        kcal = _estimate_cardio(exercise, weight_kg, recent_logs)
    else:
        kcal = _estimate_resistance(exercise, profile, weight_kg)
    if not math.isfinite(kcal):
        logger.debug("Calorie estimate for %r overflowed", exercise.name)
        return 0
    return max(0, round(kcal))
