"""Shared fixtures for fitness engine tests."""

from datetime import datetime
from typing import List, Optional

import pytest

from fitness_engine.config import get_settings
from fitness_engine.models import (
    ExerciseCategory,
    LoggedExercise,
    UserProfile,
    WorkoutLog,
)
from fitness_engine.registry import ExerciseRegistry, build_fallback_registry


@pytest.fixture
def registry() -> ExerciseRegistry:
    """Registry built from the built-in exercise tables."""
    return build_fallback_registry()


@pytest.fixture
def male_profile() -> UserProfile:
    """100 kg, 25-year-old male."""
    return UserProfile(gender="Male", weight_value=100, weight_unit="kg", age=25)


@pytest.fixture
def female_profile() -> UserProfile:
    """60 kg, 30-year-old female with a known skeletal muscle mass."""
    return UserProfile(
        gender="Female",
        weight_value=60,
        weight_unit="kg",
        skeletal_muscle_mass_value=25,
        skeletal_muscle_mass_unit="kg",
        age=30,
    )


@pytest.fixture
def runner_profile() -> UserProfile:
    """70 kg profile used for cardio calorie checks."""
    return UserProfile(gender="Male", weight_value=70, weight_unit="kg")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are lru_cached; reset between tests so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def cardio(
    name: str,
    distance: Optional[float] = None,
    distance_unit: Optional[str] = "mi",
    duration: Optional[float] = None,
    duration_unit: Optional[str] = "min",
    calories: Optional[float] = None,
) -> LoggedExercise:
    """Build a cardio entry."""
    return LoggedExercise(
        name=name,
        category=ExerciseCategory.CARDIO,
        distance=distance,
        distance_unit=distance_unit if distance is not None else None,
        duration=duration,
        duration_unit=duration_unit if duration is not None else None,
        calories=calories,
    )


def workout(day: datetime, exercises: List[LoggedExercise], log_id: str = "w") -> WorkoutLog:
    """Build a workout log."""
    return WorkoutLog(id=log_id, date=day, exercises=exercises)


@pytest.fixture
def make_cardio():
    return cardio


@pytest.fixture
def make_workout():
    return workout
