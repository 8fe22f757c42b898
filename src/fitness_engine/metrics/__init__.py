"""Strength, calorie and cardio target calculations."""

from .calories import (
    ACTIVITY_FAMILIES,
    ActivityFamily,
    classify_activity,
    estimate_calories,
    historical_pace,
    lookup_met,
    rep_scheme_timing,
    resistance_met,
)
from .cardio_targets import (
    CardioTargets,
    WeeklyCardioSummary,
    WeeklyCardioTotal,
    calculate_recent_weekly_cardio_average,
    calculate_weekly_cardio_targets,
    resolve_weekly_cardio_goal,
    start_of_week,
    summarize_weekly_cardio,
    weekly_cardio_totals,
)
from .strength import (
    StrengthRatioStandards,
    StrengthThresholds,
    calculate_age_factor,
    calculate_strength_thresholds,
    classify_strength_level,
    get_exercise_category,
    get_strength_ratio_standards,
    get_strength_standard,
)

__all__ = [
    # Strength
    "StrengthRatioStandards",
    "StrengthThresholds",
    "calculate_age_factor",
    "calculate_strength_thresholds",
    "classify_strength_level",
    "get_exercise_category",
    "get_strength_ratio_standards",
    "get_strength_standard",
    # Calories
    "ACTIVITY_FAMILIES",
    "ActivityFamily",
    "classify_activity",
    "estimate_calories",
    "historical_pace",
    "lookup_met",
    "rep_scheme_timing",
    "resistance_met",
    # Cardio targets
    "CardioTargets",
    "WeeklyCardioSummary",
    "WeeklyCardioTotal",
    "calculate_recent_weekly_cardio_average",
    "calculate_weekly_cardio_targets",
    "resolve_weekly_cardio_goal",
    "start_of_week",
    "summarize_weekly_cardio",
    "weekly_cardio_totals",
]
