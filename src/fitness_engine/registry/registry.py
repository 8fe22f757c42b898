"""
In-memory exercise registry.

Holds the active exercise records and alias mappings handed over by the
exercise store, indexed for name, legacy-name and id lookups. The registry
enforces the one-claim-per-name rule when records are added: among active
records, a normalized or legacy name belongs to exactly one record id.
Inactive records are kept for historical display but never answer lookups.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..exceptions import RegistryConflictError
from ..models.exercises import (
    AliasRecord,
    Equipment,
    ExerciseCategory,
    ExerciseRecord,
    ExerciseType,
    StrengthStandards,
)
from .data import CARDIO_ALIAS_MAP, CARDIO_EXERCISES, STRENGTH_STANDARDS
from .normalization import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryConflict:
    """A record rejected because another record already claims one of its names."""

    name: str
    existing_id: str
    rejected_id: str


class ExerciseRegistry:
    """Indexed, validated collection of exercise and alias records."""

    def __init__(self) -> None:
        self._records: Dict[str, ExerciseRecord] = {}
        self._by_name: Dict[str, str] = {}
        self._by_legacy: Dict[str, str] = {}
        self._aliases: Dict[str, str] = {}
        self.conflicts: List[RegistryConflict] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_records(
        cls,
        records: Iterable[ExerciseRecord],
        aliases: Iterable[AliasRecord] = (),
        strict: bool = True,
    ) -> "ExerciseRegistry":
        """
        Build a registry from store records.

        Args:
            records: Exercise records (inactive ones are stored but not indexed)
            aliases: Alias records
            strict: Raise on the first name conflict. When False, conflicting
                records are skipped, logged and listed in ``conflicts``.

        Raises:
            RegistryConflictError: In strict mode, if two active records
                claim the same name
        """
        registry = cls()
        for record in records:
            if strict:
                registry.add(record)
                continue
            try:
                registry.add(record)
            except RegistryConflictError as exc:
                logger.warning(
                    "Skipping exercise %s: name '%s' already claimed by %s",
                    exc.incoming_id, exc.name, exc.existing_id,
                )
                registry.conflicts.append(
                    RegistryConflict(
                        name=exc.name,
                        existing_id=exc.existing_id,
                        rejected_id=exc.incoming_id,
                    )
                )
        for alias in aliases:
            registry.add_alias(alias)
        return registry

    def add(self, record: ExerciseRecord) -> None:
        """
        Add or replace a record, enforcing unique name claims.

        Re-adding a record with an existing id replaces it (a rename or
        deactivation); its previous name claims are released first.

        Raises:
            RegistryConflictError: If an active record with another id
                already claims one of this record's names
        """
        if record.is_active:
            for name in record.claimed_names:
                key = normalize(name)
                owner = self._by_name.get(key) or self._by_legacy.get(key)
                if owner is not None and owner != record.id:
                    raise RegistryConflictError(
                        name=key, existing_id=owner, incoming_id=record.id
                    )

        self._release(record.id)
        self._records[record.id] = record
        if not record.is_active:
            return

        self._by_name[normalize(record.normalized_name)] = record.id
        for legacy in record.legacy_names:
            key = normalize(legacy)
            if key != normalize(record.normalized_name):
                self._by_legacy[key] = record.id

    def add_alias(self, alias: AliasRecord) -> None:
        """Register an alias. Later aliases for the same name win."""
        key = normalize(alias.alias)
        previous = self._aliases.get(key)
        if previous is not None and previous != alias.canonical_id:
            logger.warning(
                "Alias '%s' remapped from %s to %s", key, previous, alias.canonical_id
            )
        self._aliases[key] = alias.canonical_id

    def _release(self, record_id: str) -> None:
        existing = self._records.get(record_id)
        if existing is None:
            return
        for index in (self._by_name, self._by_legacy):
            for key in [k for k, owner in index.items() if owner == record_id]:
                del index[key]

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.active_records())

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and self.get_by_id(record_id) is not None

    def active_records(self) -> List[ExerciseRecord]:
        return [r for r in self._records.values() if r.is_active]

    def all_records(self) -> List[ExerciseRecord]:
        """Every record, including inactive ones."""
        return list(self._records.values())

    def aliases(self) -> Dict[str, str]:
        return dict(self._aliases)

    def get_by_id(self, record_id: str) -> Optional[ExerciseRecord]:
        """Active record with this id, or None."""
        record = self._records.get(record_id)
        if record is None or not record.is_active:
            return None
        return record

    def find_by_normalized_name(self, name: str) -> Optional[ExerciseRecord]:
        record_id = self._by_name.get(normalize(name))
        return self._records.get(record_id) if record_id else None

    def find_by_legacy_name(self, name: str) -> Optional[ExerciseRecord]:
        record_id = self._by_legacy.get(normalize(name))
        return self._records.get(record_id) if record_id else None

    def get_alias(self, alias: str) -> Optional[str]:
        """Canonical record id for an alias, or None."""
        return self._aliases.get(normalize(alias))

    def strength_exercise_names(self) -> List[str]:
        """Sorted normalized names of active exercises carrying strength standards."""
        return sorted(
            r.normalized_name
            for r in self.active_records()
            if r.type == ExerciseType.STRENGTH and r.strength_standards is not None
        )

    def cardio_exercise_names(self) -> List[str]:
        return sorted(
            r.normalized_name for r in self.active_records() if r.type == ExerciseType.CARDIO
        )


# ----------------------------------------------------------------------
# Built-in fallback content
# ----------------------------------------------------------------------

def to_slug(name: str) -> str:
    """Slug used in record ids: 'Leg Press' -> 'leg-press'."""
    return normalize(name).replace(" ", "-")


def to_title_case(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in normalize(name).split(" "))


def make_exercise_id(equipment: str, name: str) -> str:
    """Record id built from equipment and name, without doubling the equipment prefix."""
    slug = to_slug(name)
    prefix = f"{equipment}-"
    if slug.startswith(prefix):
        return slug
    return prefix + slug


def build_fallback_records() -> List[ExerciseRecord]:
    """Registry records for the built-in exercise tables."""
    records: List[ExerciseRecord] = []

    for name, data in STRENGTH_STANDARDS.items():
        normalized = normalize(name)
        machine_name = f"machine {normalized}"
        records.append(
            ExerciseRecord(
                id=make_exercise_id(Equipment.MACHINE.value, name),
                name=f"Machine {to_title_case(name)}",
                normalized_name=machine_name,
                equipment=Equipment.MACHINE,
                category=ExerciseCategory(data["category"]),
                type=ExerciseType.STRENGTH,
                strength_standards=StrengthStandards(
                    base_type=data["base_type"],
                    standards=data["standards"],
                ),
                legacy_names=[normalized, machine_name],
                is_active=True,
            )
        )

    for name in CARDIO_EXERCISES:
        normalized = normalize(name)
        records.append(
            ExerciseRecord(
                id=make_exercise_id(Equipment.OTHER.value, name),
                name=to_title_case(name),
                normalized_name=normalized,
                equipment=Equipment.OTHER,
                category=ExerciseCategory.CARDIO,
                type=ExerciseType.CARDIO,
                legacy_names=[normalized],
                is_active=True,
            )
        )

    return records


def build_fallback_aliases() -> List[AliasRecord]:
    return [
        AliasRecord(
            alias=normalize(alias),
            canonical_id=make_exercise_id(Equipment.OTHER.value, canonical),
        )
        for alias, canonical in CARDIO_ALIAS_MAP.items()
    ]


def build_fallback_registry() -> ExerciseRegistry:
    """Registry built from the static tables; used when the store is unavailable."""
    return ExerciseRegistry.from_records(
        build_fallback_records(), build_fallback_aliases(), strict=True
    )
