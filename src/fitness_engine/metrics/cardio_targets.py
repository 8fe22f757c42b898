"""
Weekly Cardio Targets

Derives a base and a stretch weekly cardio calorie goal from a profile, and
summarizes how much cardio the user actually logged over recent weeks.

Key concepts:
- Base goal: a health baseline (~150 min/week of moderate cardio at 70 kg)
  scaled by bodyweight, weight goal, activity level and experience, then
  clamped to a safety band. A higher recent weekly average raises it.
- Stretch goal: base x an experience multiplier, clamped to its own band.
- Weeks start on Sunday. Only completed weeks count toward the average.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from ..constants import (
    CARDIO_ACTIVITY_LEVEL_MULTIPLIERS,
    CARDIO_EXPERIENCE_MULTIPLIERS,
    CARDIO_HEALTH_BASELINE,
    CARDIO_REFERENCE_WEIGHT_KG,
    CARDIO_STRETCH_MULTIPLIERS,
    CARDIO_TARGET_BOUNDS,
    RECENT_CARDIO_WEEKS,
    WEIGHT_GOAL_MULTIPLIERS,
)
from ..models.profile import CardioCalculationMethod, ExperienceLevel, UserProfile
from ..models.workouts import WorkoutLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardioTargets:
    """Weekly cardio calorie goals."""

    base_goal: int
    stretch_goal: int

    def to_dict(self) -> dict:
        return {"base_goal": self.base_goal, "stretch_goal": self.stretch_goal}


@dataclass
class WeeklyCardioTotal:
    """Cardio calories logged in one Sunday-start week."""

    week_start: date
    calories: float

    def to_dict(self) -> dict:
        return {"week_start": self.week_start.isoformat(), "calories": round(self.calories)}


@dataclass
class WeeklyCardioSummary:
    """Recent completed weeks next to the goal the user is measured against."""

    weeks: List[WeeklyCardioTotal] = field(default_factory=list)
    recent_weekly_average: Optional[float] = None
    weekly_goal: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "weeks": [w.to_dict() for w in self.weeks],
            "recent_weekly_average": (
                round(self.recent_weekly_average)
                if self.recent_weekly_average is not None else None
            ),
            "weekly_goal": self.weekly_goal,
        }


def _clamp(value: float, low: int, high: int) -> int:
    """Round and clamp; an overflowed value lands on the upper bound."""
    if math.isinf(value):
        return high
    return max(low, min(high, round(value)))


def calculate_weekly_cardio_targets(
    profile: UserProfile,
    recent_weekly_average: Optional[float] = None,
) -> CardioTargets:
    """
    Compute the weekly base and stretch cardio calorie goals.

    Args:
        profile: User profile; every field used here is optional
        recent_weekly_average: Mean weekly cardio kcal actually logged. When
            it exceeds the computed base, the base is raised to it.

    Returns:
        CardioTargets with base in [400, 2500] and stretch in [500, 3000],
        stretch never below base
    """
    base = float(CARDIO_HEALTH_BASELINE)

    weight_kg = profile.bodyweight_kg
    if weight_kg is not None:
        base *= weight_kg / CARDIO_REFERENCE_WEIGHT_KG
    if profile.weight_goal is not None:
        base *= WEIGHT_GOAL_MULTIPLIERS[profile.weight_goal.value]
    if profile.activity_level is not None:
        base *= CARDIO_ACTIVITY_LEVEL_MULTIPLIERS[profile.activity_level.value]
    if profile.experience_level is not None:
        base *= CARDIO_EXPERIENCE_MULTIPLIERS[profile.experience_level.value]

    base_goal = _clamp(base, CARDIO_TARGET_BOUNDS["min_base"], CARDIO_TARGET_BOUNDS["max_base"])

    if recent_weekly_average is not None and recent_weekly_average > 0:
        base_goal = _clamp(
            max(base_goal, recent_weekly_average),
            CARDIO_TARGET_BOUNDS["min_base"],
            CARDIO_TARGET_BOUNDS["max_base"],
        )

    experience = profile.experience_level or ExperienceLevel.INTERMEDIATE
    stretch_goal = _clamp(
        base_goal * CARDIO_STRETCH_MULTIPLIERS[experience.value],
        CARDIO_TARGET_BOUNDS["min_stretch"],
        CARDIO_TARGET_BOUNDS["max_stretch"],
    )
    return CardioTargets(base_goal=base_goal, stretch_goal=stretch_goal)


def start_of_week(day: date) -> date:
    """The Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def _cardio_calories(log: WorkoutLog) -> float:
    return sum(
        ex.calories for ex in log.exercises
        if ex.is_cardio and ex.calories is not None and ex.calories > 0
    )


def weekly_cardio_totals(
    logs: Iterable[WorkoutLog],
    today: Union[date, datetime],
    weeks: int = RECENT_CARDIO_WEEKS,
) -> List[WeeklyCardioTotal]:
    """
    Cardio calories for each of the last ``weeks`` completed weeks.

    The current (incomplete) week is excluded. Newest week first.
    """
    this_week = start_of_week(_as_date(today))
    totals = [
        WeeklyCardioTotal(week_start=this_week - timedelta(weeks=i + 1), calories=0.0)
        for i in range(weeks)
    ]

    for log in logs:
        day = _as_date(log.date)
        if day >= this_week:
            continue
        index = (this_week - start_of_week(day)).days // 7 - 1
        if index < weeks:
            totals[index].calories += _cardio_calories(log)
    return totals


def calculate_recent_weekly_cardio_average(
    logs: Iterable[WorkoutLog],
    today: Union[date, datetime],
) -> Optional[float]:
    """
    Mean weekly cardio calories over the last four completed weeks.

    Returns None when those weeks hold no cardio calorie data at all.
    """
    totals = weekly_cardio_totals(logs, today)
    total = sum(w.calories for w in totals)
    if total <= 0:
        return None
    return total / len(totals)


def resolve_weekly_cardio_goal(
    profile: UserProfile,
    recent_weekly_average: Optional[float] = None,
) -> Optional[int]:
    """
    The weekly goal the user is measured against.

    'auto' computes the base goal (None until activity level and weight goal
    are set); 'manual' returns the stored goal, or None if there is none.
    """
    if profile.cardio_calculation_method == CardioCalculationMethod.AUTO:
        if profile.activity_level is None or profile.weight_goal is None:
            return None
        return calculate_weekly_cardio_targets(profile, recent_weekly_average).base_goal
    return profile.weekly_cardio_calorie_goal


def summarize_weekly_cardio(
    logs: Iterable[WorkoutLog],
    profile: UserProfile,
    today: Union[date, datetime],
) -> WeeklyCardioSummary:
    """Per-week totals for the recent completed weeks plus the resolved goal."""
    logs = list(logs)
    weeks = weekly_cardio_totals(logs, today)
    total = sum(w.calories for w in weeks)
    average = total / len(weeks) if total > 0 else None
    goal = resolve_weekly_cardio_goal(profile, average)
    logger.debug("Weekly cardio summary: average=%s goal=%s", average, goal)
    return WeeklyCardioSummary(weeks=weeks, recent_weekly_average=average, weekly_goal=goal)
