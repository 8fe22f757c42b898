"""Services that apply the engine to stored records."""

from .records import (
    RecalculationResult,
    attach_calories,
    profile_change_requires_recalculation,
    recalculate_strength_levels,
)

__all__ = [
    "RecalculationResult",
    "attach_calories",
    "profile_change_requires_recalculation",
    "recalculate_strength_levels",
]
