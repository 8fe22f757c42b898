"""Data models for exercises, profiles, workouts and personal records."""

from .common import DistanceUnit, DurationUnit, WeightUnit, to_camel
from .exercises import (
    AliasRecord,
    Equipment,
    ExerciseCategory,
    ExerciseRecord,
    ExerciseType,
    StandardBaseType,
    StrengthStandardRatios,
    StrengthStandards,
)
from .profile import (
    ActivityLevel,
    CardioCalculationMethod,
    ExperienceLevel,
    UserProfile,
    WeightGoal,
)
from .workouts import (
    LoggedExercise,
    PersonalRecord,
    StrengthLevel,
    WorkoutLog,
)

__all__ = [
    # Units
    "DistanceUnit",
    "DurationUnit",
    "WeightUnit",
    "to_camel",
    # Registry
    "AliasRecord",
    "Equipment",
    "ExerciseCategory",
    "ExerciseRecord",
    "ExerciseType",
    "StandardBaseType",
    "StrengthStandardRatios",
    "StrengthStandards",
    # Profile
    "ActivityLevel",
    "CardioCalculationMethod",
    "ExperienceLevel",
    "UserProfile",
    "WeightGoal",
    # Workouts
    "LoggedExercise",
    "PersonalRecord",
    "StrengthLevel",
    "WorkoutLog",
]
