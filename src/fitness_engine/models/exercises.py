"""Exercise registry data models."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .common import to_camel


class Equipment(str, Enum):
    """Equipment an exercise is performed with."""
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    MACHINE = "machine"
    SMITH = "smith"
    OTHER = "other"


class ExerciseCategory(str, Enum):
    """Body region / modality used to group exercises."""
    UPPER_BODY = "Upper Body"
    LOWER_BODY = "Lower Body"
    CORE = "Core"
    FULL_BODY = "Full Body"
    CARDIO = "Cardio"
    OTHER = "Other"


class ExerciseType(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"


class StandardBaseType(str, Enum):
    """What a strength ratio is measured against."""
    BODYWEIGHT = "bw"             # lifted kg / bodyweight kg
    SKELETAL_MUSCLE_MASS = "smm"  # lifted kg / skeletal muscle mass kg


class StrengthStandardRatios(BaseModel):
    """Lift-to-base ratios needed to reach each tier."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    intermediate: float = Field(..., gt=0)
    advanced: float = Field(..., gt=0)
    elite: float = Field(..., gt=0)


class StrengthStandards(BaseModel):
    """Gender-specific strength standards for one exercise."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    base_type: StandardBaseType = Field(..., description="Ratio base quantity")
    standards: Dict[str, StrengthStandardRatios] = Field(
        default_factory=dict,
        description="Ratios keyed by 'Male' / 'Female'",
    )

    def for_gender(self, gender: Optional[str]) -> Optional[StrengthStandardRatios]:
        """Get the ratios for a gender, or None when none are defined."""
        if not gender:
            return None
        return self.standards.get(gender)


class ExerciseRecord(BaseModel):
    """A canonical exercise in the registry."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(..., description="Stable id derived from equipment + slug")
    name: str = Field(..., description="Display name")
    normalized_name: str = Field(..., description="Canonical lookup key")
    equipment: Equipment = Field(default=Equipment.OTHER)
    category: ExerciseCategory = Field(default=ExerciseCategory.OTHER)
    type: ExerciseType = Field(default=ExerciseType.STRENGTH)
    strength_standards: Optional[StrengthStandards] = Field(
        None, description="Present only for strength exercises"
    )
    legacy_names: List[str] = Field(
        default_factory=list,
        description="Prior normalized names that still resolve here",
    )
    is_active: bool = Field(default=True)

    @model_validator(mode="after")
    def _check_standards_match_type(self) -> "ExerciseRecord":
        if self.type == ExerciseType.CARDIO and self.strength_standards is not None:
            raise ValueError("cardio exercises cannot carry strength standards")
        return self

    @property
    def claimed_names(self) -> List[str]:
        """Normalized and legacy names this record answers to, deduplicated."""
        names = [self.normalized_name]
        for legacy in self.legacy_names:
            if legacy not in names:
                names.append(legacy)
        return names


class AliasRecord(BaseModel):
    """Maps an alternative activity name onto a registry record id."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    alias: str = Field(..., description="Normalized alias")
    canonical_id: str = Field(..., description="Id of the target exercise")
