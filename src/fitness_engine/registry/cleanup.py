"""
Detection and repair of doubled equipment prefixes in registry records.

Earlier imports produced ids like ``barbell-barbell-back-squat`` and names
like "Dumbbell Incline Dumbbell Bench Press". New records are built with
``make_exercise_id`` and never get this shape; these helpers find and fix
records already in the store.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ..models.exercises import Equipment, ExerciseRecord

EQUIPMENT_PREFIXES: Tuple[str, ...] = tuple(f"{e.value}-" for e in Equipment)

_DISPLAY_EQUIPMENT = ("Barbell", "Dumbbell", "Cable", "Machine", "Smith")


@dataclass
class PrefixFix:
    """Proposed corrections for one record."""

    record_id: str
    changes: Dict[str, Tuple[str, str]] = field(default_factory=dict)

    @property
    def has_issue(self) -> bool:
        return bool(self.changes)

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "changes": {
                name: {"from": before, "to": after}
                for name, (before, after) in self.changes.items()
            },
        }


def fix_id(record_id: str) -> str:
    """
    Remove a doubled equipment prefix from a record id.

    Examples:
        >>> fix_id("barbell-barbell-back-squat")
        'barbell-back-squat'
        >>> fix_id("dumbbell-incline-dumbbell-bench-press")
        'dumbbell-incline-bench-press'
    """
    for prefix in EQUIPMENT_PREFIXES:
        if record_id.startswith(prefix + prefix):
            return prefix + record_id[2 * len(prefix):]

        first = record_id.find(prefix)
        if first >= 0:
            second = record_id.find(prefix, first + len(prefix))
            if second >= 0:
                return record_id[:second] + record_id[second + len(prefix):]
    return record_id


def fix_normalized_name(normalized_name: str, equipment: str) -> str:
    """Keep only the first standalone occurrence of the equipment word."""
    word = equipment.lower()
    words = normalized_name.split(" ")
    if words.count(word) <= 1:
        return normalized_name

    kept: List[str] = []
    seen = False
    for w in words:
        if w == word:
            if seen:
                continue
            seen = True
        kept.append(w)
    return " ".join(kept)


def fix_display_name(name: str) -> str:
    """
    Collapse repeated equipment words in a display name.

    "Barbell Barbell Back Squat" -> "Barbell Back Squat"
    "Dumbbell Incline Dumbbell Bench Press" -> "Dumbbell Incline Bench Press"
    """
    fixed = name
    for equipment in _DISPLAY_EQUIPMENT:
        fixed = re.sub(rf"^({equipment}) \1 ", r"\1 ", fixed, flags=re.IGNORECASE)
        if re.match(rf"^{equipment} ", fixed, flags=re.IGNORECASE):
            head, rest = fixed[: len(equipment) + 1], fixed[len(equipment) + 1:]
            rest = re.sub(rf"\b{equipment} (?=\S)", "", rest, flags=re.IGNORECASE)
            fixed = head + rest
    return fixed


def find_prefix_issue(record: ExerciseRecord) -> PrefixFix:
    """Compute the fixes a record needs (empty when it is clean)."""
    fix = PrefixFix(record_id=record.id)

    fixed_id = fix_id(record.id)
    if fixed_id != record.id:
        fix.changes["id"] = (record.id, fixed_id)

    fixed_normalized = fix_normalized_name(record.normalized_name, record.equipment.value)
    if fixed_normalized != record.normalized_name:
        fix.changes["normalized_name"] = (record.normalized_name, fixed_normalized)

    fixed_name = fix_display_name(record.name)
    if fixed_name != record.name:
        fix.changes["name"] = (record.name, fixed_name)

    return fix


def find_duplicate_prefixes(records: Iterable[ExerciseRecord]) -> List[PrefixFix]:
    """All active records with doubled equipment prefixes."""
    fixes = []
    for record in records:
        if not record.is_active:
            continue
        fix = find_prefix_issue(record)
        if fix.has_issue:
            fixes.append(fix)
    return fixes


def apply_fix(record: ExerciseRecord, fix: PrefixFix) -> ExerciseRecord:
    """
    Return a corrected copy of the record.

    The old normalized name is kept as a legacy name so existing personal
    records and logs still resolve.
    """
    if not fix.has_issue:
        return record

    update = {name: after for name, (_, after) in fix.changes.items()}
    legacy = list(record.legacy_names)
    if "normalized_name" in fix.changes:
        before = fix.changes["normalized_name"][0]
        if before not in legacy:
            legacy.append(before)
        legacy = [n for n in legacy if n != fix.changes["normalized_name"][1]]
    update["legacy_names"] = legacy
    return record.model_copy(update=update)
