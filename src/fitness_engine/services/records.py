"""Personal record and workout log services.

This service handles:
- Re-classifying every personal record after a profile edit
- Deciding whether a profile edit affects strength levels at all
- Filling in estimated calories on a workout log before it is stored
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..metrics.calories import estimate_calories
from ..metrics.strength import classify_strength_level
from ..models.profile import UserProfile
from ..models.workouts import PersonalRecord, WorkoutLog
from ..registry.registry import ExerciseRegistry

logger = logging.getLogger(__name__)

# Profile fields that feed strength classification
STRENGTH_PROFILE_FIELDS = (
    "gender",
    "weight_value",
    "weight_unit",
    "skeletal_muscle_mass_value",
    "skeletal_muscle_mass_unit",
    "age",
)


@dataclass
class RecalculationResult:
    """Outcome of re-classifying a batch of personal records."""

    records: List[PersonalRecord] = field(default_factory=list)
    changed: int = 0

    def to_dict(self) -> dict:
        return {
            "changed": self.changed,
            "records": [r.model_dump(mode="json", by_alias=True) for r in self.records],
        }


def profile_change_requires_recalculation(
    old: Optional[UserProfile],
    new: UserProfile,
) -> bool:
    """True when gender, bodyweight, skeletal muscle mass or age changed."""
    if old is None:
        return True
    return any(getattr(old, name) != getattr(new, name) for name in STRENGTH_PROFILE_FIELDS)


def recalculate_strength_levels(
    records: Iterable[PersonalRecord],
    profile: UserProfile,
    registry: ExerciseRegistry,
) -> RecalculationResult:
    """
    Re-classify personal records against the current profile.

    Records are independent; one that cannot be classified becomes 'N/A'
    and the rest continue. Inputs are not mutated.

    Args:
        records: Personal records to re-classify
        profile: The user's current profile
        registry: Exercise registry for name resolution

    Returns:
        RecalculationResult with updated copies and the number that changed
    """
    result = RecalculationResult()
    for record in records:
        level = classify_strength_level(record, profile, registry)
        if level != record.strength_level:
            result.changed += 1
            record = record.model_copy(update={"strength_level": level})
        result.records.append(record)

    logger.info(
        "Recalculated strength levels for %d records (%d changed)",
        len(result.records),
        result.changed,
    )
    return result


def attach_calories(
    log: WorkoutLog,
    profile: UserProfile,
    history: Iterable[WorkoutLog] = (),
) -> WorkoutLog:
    """
    Return a copy of the log with estimated calories filled in.

    Exercises that already carry positive calories keep them. Exercises
    whose estimate is 0 are left without calories (unknown).
    """
    history = list(history)
    exercises = []
    for exercise in log.exercises:
        if exercise.calories is None or exercise.calories <= 0:
            kcal = estimate_calories(exercise, profile, history)
            if kcal > 0:
                exercise = exercise.model_copy(update={"calories": kcal})
        exercises.append(exercise)
    return log.model_copy(update={"exercises": exercises})
