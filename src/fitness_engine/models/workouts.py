"""Logged exercise, workout log and personal record models."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import DistanceUnit, DurationUnit, WeightUnit, to_camel
from .exercises import ExerciseCategory


class StrengthLevel(str, Enum):
    """Proficiency tier of a lift relative to population benchmarks."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ELITE = "Elite"
    NOT_AVAILABLE = "N/A"

    @property
    def rank(self) -> int:
        """Ordering used to compare tiers (N/A lowest)."""
        return _LEVEL_RANKS[self]


_LEVEL_RANKS = {
    StrengthLevel.NOT_AVAILABLE: -1,
    StrengthLevel.BEGINNER: 0,
    StrengthLevel.INTERMEDIATE: 1,
    StrengthLevel.ADVANCED: 2,
    StrengthLevel.ELITE: 3,
}


class LoggedExercise(BaseModel):
    """A single exercise entry inside a workout log."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    name: str = Field(..., description="Exercise name as logged")
    category: ExerciseCategory = Field(default=ExerciseCategory.OTHER)
    sets: int = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0, ge=0)
    weight_unit: Optional[WeightUnit] = None
    distance: Optional[float] = None
    distance_unit: Optional[DistanceUnit] = None
    duration: Optional[float] = None
    duration_unit: Optional[DurationUnit] = None
    calories: Optional[float] = Field(None, description="Known calories; skips estimation")

    @property
    def is_cardio(self) -> bool:
        return self.category == ExerciseCategory.CARDIO


class WorkoutLog(BaseModel):
    """One logged workout session."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., description="Workout log identifier")
    date: datetime = Field(..., description="When the workout happened")
    exercises: List[LoggedExercise] = Field(default_factory=list)
    notes: Optional[str] = None


class PersonalRecord(BaseModel):
    """A user's best lift for an exercise, with its derived tier."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    id: Optional[str] = Field(None, description="Record identifier")
    exercise_name: str = Field(..., description="Exercise name as entered")
    weight: float = Field(..., ge=0)
    weight_unit: WeightUnit = Field(default=WeightUnit.KG)
    date: Optional[datetime] = None
    category: Optional[ExerciseCategory] = None
    strength_level: StrengthLevel = Field(
        default=StrengthLevel.NOT_AVAILABLE,
        description="Derived; recomputed when the record or profile changes",
    )
