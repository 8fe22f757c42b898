"""
Exercise name normalization and resolution.

Names arrive from users, screenshot parsers and AI output, so they carry
stray case, whitespace, "EGYM" machine prefixes and parenthetical
qualifiers. ``normalize`` reduces them to a lookup key; ``resolve`` walks
the registry from the most to the least authoritative match:

1. a record whose normalized name is the key
2. a record listing the key among its legacy names
3. an alias record pointing at a record id
4. the static fallback map of names predating the registry

Resolution is best-effort. When nothing matches, callers keep using the
normalized input as the exercise name.
"""

import re
from typing import TYPE_CHECKING, List, Optional, Tuple

from .data import LEGACY_CANONICAL_FALLBACKS, LIFT_NAME_ALIASES

if TYPE_CHECKING:
    from ..models.exercises import ExerciseRecord
    from .registry import ExerciseRegistry


_EGYM_PREFIX = re.compile(r"^egym\s+")
_PARENTHESES = re.compile(r"[()]")
_WHITESPACE = re.compile(r"\s+")


def normalize(name: Optional[str]) -> str:
    """
    Reduce an exercise name to its lookup key.

    Lowercases, trims, strips a leading "egym " token, removes parentheses
    and collapses internal whitespace. Qualifiers such as "(Per Arm)" are
    kept as plain words, so "Curl (Per Arm)" becomes "curl per arm".

    Example:
        >>> normalize("  EGYM Leg   Press (Machine) ")
        'leg press machine'
    """
    if not name:
        return ""
    key = name.strip().lower()
    key = _EGYM_PREFIX.sub("", key)
    key = _PARENTHESES.sub("", key)
    key = _WHITESPACE.sub(" ", key)
    # Removing parentheses can expose new edge whitespace or a new prefix
    key = key.strip()
    while _EGYM_PREFIX.match(key):
        key = _EGYM_PREFIX.sub("", key).strip()
    return key


def resolve(name: Optional[str], registry: "ExerciseRegistry") -> Optional["ExerciseRecord"]:
    """
    Resolve a free-text exercise name to its canonical registry record.

    Args:
        name: Exercise name as entered
        registry: Registry to search (only active records are considered)

    Returns:
        The matching record, or None when the name is unknown
    """
    key = normalize(name)
    if not key:
        return None

    record = _lookup(key, registry)
    if record is not None:
        return record

    alias_id = registry.get_alias(key)
    if alias_id:
        record = registry.get_by_id(alias_id)
        if record is not None:
            return record

    fallback = LEGACY_CANONICAL_FALLBACKS.get(key) or LIFT_NAME_ALIASES.get(key)
    if fallback and fallback != key:
        return _lookup(normalize(fallback), registry)

    return None


def resolve_canonical_name(name: Optional[str], registry: "ExerciseRegistry") -> str:
    """Canonical normalized name for ``name``, or the normalized input if unresolved."""
    record = resolve(name, registry)
    if record is not None:
        return record.normalized_name
    return normalize(name)


def _lookup(key: str, registry: "ExerciseRegistry") -> Optional["ExerciseRecord"]:
    return registry.find_by_normalized_name(key) or registry.find_by_legacy_name(key)


def suggest_exercises(query: str, names: List[str]) -> List[Tuple[str, int]]:
    """
    Rank exercise names against a search query.

    Scores: exact match 3, prefix 2, substring 1; non-matches are dropped.
    Ties sort alphabetically. An empty query returns every name with score 0
    in the given order.
    """
    needle = query.strip().lower()
    if not needle:
        return [(name, 0) for name in names]

    scored = []
    for name in names:
        candidate = name.lower()
        if candidate == needle:
            scored.append((name, 3))
        elif candidate.startswith(needle):
            scored.append((name, 2))
        elif needle in candidate:
            scored.append((name, 1))

    scored.sort(key=lambda item: (-item[1], item[0]))
    return scored
