"""User profile model (the fields the engine reads)."""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import WeightUnit, to_camel
from ..constants import LBS_TO_KG


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class WeightGoal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class CardioCalculationMethod(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


class UserProfile(BaseModel):
    """
    Profile fields used by classification, calorie and cardio target logic.

    Everything is optional: new users routinely have half-filled profiles,
    and the calculations answer N/A / 0 / None rather than failing.
    Gender is kept as free text; only 'Male' and 'Female' are classified.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    gender: Optional[str] = None
    weight_value: Optional[float] = None
    weight_unit: Optional[WeightUnit] = None
    skeletal_muscle_mass_value: Optional[float] = None
    skeletal_muscle_mass_unit: Optional[WeightUnit] = None
    age: Optional[int] = Field(None, ge=0)
    experience_level: Optional[ExperienceLevel] = None
    activity_level: Optional[ActivityLevel] = None
    weight_goal: Optional[WeightGoal] = None
    cardio_calculation_method: Optional[CardioCalculationMethod] = None
    weekly_cardio_calorie_goal: Optional[int] = None
    weekly_cardio_stretch_calorie_goal: Optional[int] = None

    @property
    def bodyweight_kg(self) -> Optional[float]:
        """Bodyweight in kg (unitless values are kg), or None when missing, non-finite or not positive."""
        return _positive_kg(self.weight_value, self.weight_unit)

    @property
    def skeletal_muscle_mass_kg(self) -> Optional[float]:
        """Skeletal muscle mass in kg, or None when missing or not positive."""
        return _positive_kg(self.skeletal_muscle_mass_value, self.skeletal_muscle_mass_unit)


def _positive_kg(value: Optional[float], unit: Optional[WeightUnit]) -> Optional[float]:
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    if unit == WeightUnit.LBS:
        return value * LBS_TO_KG
    return value
