"""Exercise registry: normalization, resolution, caching and data hygiene."""

from .cache import RegistryCache
from .cleanup import (
    PrefixFix,
    apply_fix,
    find_duplicate_prefixes,
    find_prefix_issue,
    fix_display_name,
    fix_id,
    fix_normalized_name,
)
from .export import load_registry_export, write_registry_export
from .normalization import (
    normalize,
    resolve,
    resolve_canonical_name,
    suggest_exercises,
)
from .registry import (
    ExerciseRegistry,
    RegistryConflict,
    build_fallback_aliases,
    build_fallback_records,
    build_fallback_registry,
    make_exercise_id,
    to_slug,
    to_title_case,
)

__all__ = [
    # Normalization
    "normalize",
    "resolve",
    "resolve_canonical_name",
    "suggest_exercises",
    # Registry
    "ExerciseRegistry",
    "RegistryConflict",
    "build_fallback_aliases",
    "build_fallback_records",
    "build_fallback_registry",
    "make_exercise_id",
    "to_slug",
    "to_title_case",
    # Export
    "load_registry_export",
    "write_registry_export",
    # Cache
    "RegistryCache",
    # Cleanup
    "PrefixFix",
    "apply_fix",
    "find_duplicate_prefixes",
    "find_prefix_issue",
    "fix_display_name",
    "fix_id",
    "fix_normalized_name",
]
