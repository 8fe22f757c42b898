"""
Strength Level Classification

Classifies a personal record into Beginner / Intermediate / Advanced /
Elite by comparing the lift to population-derived ratio standards, and
computes the inverse: the weight needed to reach each tier.

Key concepts:
- Ratio: lifted kg divided by a base quantity in kg. The base is bodyweight
  ('bw') for most lifts and skeletal muscle mass ('smm') for a few machine
  movements where body composition matters more than mass.
- Age credit: past 40 the ratio is multiplied by 1 + 1% per year, so an
  older lifter reaches a tier with proportionally less weight.

Missing inputs (unknown exercise, no gender, no bodyweight) give 'N/A' for
classification and None for thresholds. Nothing here raises on absent data.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import (
    AGE_ADJUSTMENT_PER_YEAR,
    AGE_ADJUSTMENT_START,
    RATIO_EPSILON,
    THRESHOLD_ROUNDING_TOLERANCE,
)
from ..models.exercises import (
    ExerciseCategory,
    StandardBaseType,
    StrengthStandardRatios,
    StrengthStandards,
)
from ..models.profile import UserProfile
from ..models.workouts import PersonalRecord, StrengthLevel
from ..registry.data import STRENGTH_RATIOS
from ..registry.normalization import resolve
from ..registry.registry import ExerciseRegistry
from .units import from_kg, to_kg

logger = logging.getLogger(__name__)

CLASSIFIABLE_GENDERS = ("Male", "Female")


@dataclass(frozen=True)
class StrengthThresholds:
    """Weights (in the requested unit) needed to reach each tier."""

    intermediate: int
    advanced: int
    elite: int
    unit: str = "kg"

    def to_dict(self) -> dict:
        return {
            "intermediate": self.intermediate,
            "advanced": self.advanced,
            "elite": self.elite,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class StrengthRatioStandards:
    """Balanced ratio band between two opposing lifts."""

    target_ratio: float
    lower_bound: float
    upper_bound: float

    def contains(self, ratio: float) -> bool:
        return self.lower_bound <= ratio <= self.upper_bound


def get_strength_standard(name: str, registry: ExerciseRegistry) -> Optional[StrengthStandards]:
    """Strength standards for an exercise name, or None if it has none."""
    record = resolve(name, registry)
    if record is None:
        return None
    return record.strength_standards


def get_exercise_category(name: str, registry: ExerciseRegistry) -> Optional[ExerciseCategory]:
    """Category of a registry exercise, or None when the name is unknown."""
    record = resolve(name, registry)
    return record.category if record is not None else None


def calculate_age_factor(age: Optional[int]) -> float:
    """
    Ratio multiplier for a lifter's age.

    Linear and uncapped: 1.0 up to 40, then +0.01 per year.

    Example:
        >>> calculate_age_factor(50)
        1.1
    """
    if age is None or age <= AGE_ADJUSTMENT_START:
        return 1.0
    return 1 + (age - AGE_ADJUSTMENT_START) * AGE_ADJUSTMENT_PER_YEAR


def _base_quantity_kg(standards: StrengthStandards, profile: UserProfile) -> Optional[float]:
    if standards.base_type == StandardBaseType.SKELETAL_MUSCLE_MASS:
        return profile.skeletal_muscle_mass_kg
    return profile.bodyweight_kg


def _gender_ratios(
    exercise_name: str,
    profile: UserProfile,
    registry: ExerciseRegistry,
) -> Optional[Tuple[StrengthStandardRatios, float]]:
    """Shared preconditions: (ratios for the profile's gender, base kg) or None."""
    standards = get_strength_standard(exercise_name, registry)
    if standards is None:
        return None
    if profile.gender not in CLASSIFIABLE_GENDERS:
        return None

    base_kg = _base_quantity_kg(standards, profile)
    if base_kg is None or base_kg <= 0:
        return None

    ratios = standards.for_gender(profile.gender)
    if ratios is None:
        return None
    return ratios, base_kg


def classify_strength_level(
    record: PersonalRecord,
    profile: UserProfile,
    registry: ExerciseRegistry,
) -> StrengthLevel:
    """
    Classify a personal record against the exercise's strength standards.

    Args:
        record: Personal record (exercise name, weight, unit)
        profile: Lifter profile (gender, bodyweight or SMM, age)
        registry: Exercise registry used to resolve the exercise name

    Returns:
        StrengthLevel tier, or StrengthLevel.NOT_AVAILABLE when the exercise
        has no standards or the profile lacks what the standard needs

    Example:
        A 100 kg, 25-year-old male benching 150 kg has ratio 1.5, which meets
        the advanced bench standard (1.5) but not elite (2.0): Advanced.
    """
    prepared = _gender_ratios(record.exercise_name, profile, registry)
    if prepared is None:
        return StrengthLevel.NOT_AVAILABLE
    ratios, base_kg = prepared

    lifted_kg = to_kg(record.weight, record.weight_unit)
    ratio = lifted_kg / base_kg * calculate_age_factor(profile.age)
    if not math.isfinite(ratio):
        return StrengthLevel.NOT_AVAILABLE

    # Highest tier first; tolerance keeps displayed thresholds classifiable
    if ratio + RATIO_EPSILON >= ratios.elite:
        return StrengthLevel.ELITE
    if ratio + RATIO_EPSILON >= ratios.advanced:
        return StrengthLevel.ADVANCED
    if ratio + RATIO_EPSILON >= ratios.intermediate:
        return StrengthLevel.INTERMEDIATE
    return StrengthLevel.BEGINNER


def calculate_strength_thresholds(
    exercise_name: str,
    profile: UserProfile,
    registry: ExerciseRegistry,
    output_unit: str = "kg",
) -> Optional[StrengthThresholds]:
    """
    Weight needed to reach each tier, rounded up to a whole unit.

    Rounding up means a lift of exactly the displayed number always
    classifies at or above that tier.

    Args:
        exercise_name: Exercise to compute thresholds for
        profile: Lifter profile
        registry: Exercise registry
        output_unit: 'kg' or 'lbs'

    Returns:
        StrengthThresholds, or None when the same preconditions as
        ``classify_strength_level`` are not met or a weight overflows
    """
    prepared = _gender_ratios(exercise_name, profile, registry)
    if prepared is None:
        return None
    ratios, base_kg = prepared
    age_factor = calculate_age_factor(profile.age)

    weights = [
        from_kg(ratio * base_kg / age_factor, output_unit)
        for ratio in (ratios.intermediate, ratios.advanced, ratios.elite)
    ]
    if not all(math.isfinite(w) for w in weights):
        return None
    intermediate, advanced, elite = (
        math.ceil(w * (1 - THRESHOLD_ROUNDING_TOLERANCE)) for w in weights
    )
    return StrengthThresholds(
        intermediate=intermediate,
        advanced=advanced,
        elite=elite,
        unit=output_unit,
    )


def get_strength_ratio_standards(
    imbalance_type: str,
    gender: Optional[str],
    level: StrengthLevel,
) -> Optional[StrengthRatioStandards]:
    """
    Balanced ratio band for an opposing-lift pair.

    Args:
        imbalance_type: e.g. 'Vertical Push vs. Pull', 'Hamstring vs. Quad'
        gender: 'Male' or 'Female'
        level: The lifter's guiding strength level for the pair

    Returns:
        The band, or None for N/A levels and unknown types or genders
    """
    if level == StrengthLevel.NOT_AVAILABLE or not gender:
        return None
    band = STRENGTH_RATIOS.get(imbalance_type, {}).get(gender, {}).get(level.value)
    if band is None:
        return None
    return StrengthRatioStandards(**band)
