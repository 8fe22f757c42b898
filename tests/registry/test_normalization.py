"""Tests for exercise name normalization and resolution."""

import pytest

from fitness_engine.models import Equipment, ExerciseCategory, ExerciseRecord
from fitness_engine.registry import (
    ExerciseRegistry,
    normalize,
    resolve,
    resolve_canonical_name,
    suggest_exercises,
)


class TestNormalize:
    """Tests for normalize."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Bench Press", "bench press"),
            ("  Leg   Press  ", "leg press"),
            ("EGYM Leg Press", "leg press"),
            ("egym   chest press", "chest press"),
            ("Bicep Curl (Per Arm)", "bicep curl per arm"),
            ("Row\t(Machine)\n", "row machine"),
            ("Legs egym", "legs egym"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize(raw) == expected

    def test_prefix_exposed_by_parentheses(self):
        assert normalize("(EGYM) Leg Press") == "leg press"

    @pytest.mark.parametrize(
        "raw",
        [
            "Bench Press",
            " EGYM  EGYM Squat ",
            "(egym) (egym) x",
            "((  ))",
            "egym",
            "EGYM ",
            "Curl ( Per  Arm )",
            " Bench Press",
            "a\n\nb\t c",
        ],
    )
    def test_idempotent(self, raw):
        once = normalize(raw)
        assert normalize(once) == once


class TestResolve:
    """Tests for resolve against the built-in registry."""

    def test_by_normalized_name(self, registry):
        assert resolve("Machine Bench Press", registry).id == "machine-bench-press"

    def test_by_legacy_name(self, registry):
        record = resolve("Bench Press", registry)
        assert record.id == "machine-bench-press"
        assert record.normalized_name == "machine bench press"

    def test_by_alias(self, registry):
        assert resolve("Jogging", registry).id == "other-run"
        assert resolve("Stationary Bike", registry).id == "other-bike"

    def test_by_static_fallback(self, registry):
        assert resolve("Bench Presses", registry).id == "machine-bench-press"
        assert resolve("lat pull", registry).id == "machine-lat-pulldown"

    def test_legacy_canonical_fallback(self):
        # Only the machine variant is registered, under its own name
        record = ExerciseRecord(
            id="machine-chest-press",
            name="Machine Chest Press",
            normalized_name="machine chest press",
            equipment=Equipment.MACHINE,
            category=ExerciseCategory.UPPER_BODY,
        )
        registry = ExerciseRegistry.from_records([record])

        assert resolve("Chest Press", registry).id == "machine-chest-press"

    def test_unknown(self, registry):
        assert resolve("mystery lift", registry) is None
        assert resolve("", registry) is None
        assert resolve(None, registry) is None

    def test_inactive_records_do_not_resolve(self):
        record = ExerciseRecord(
            id="barbell-squat",
            name="Barbell Squat",
            normalized_name="barbell squat",
            is_active=False,
        )
        registry = ExerciseRegistry.from_records([record])
        assert resolve("barbell squat", registry) is None

    def test_canonical_name(self, registry):
        assert resolve_canonical_name("EGYM Bench Press", registry) == "machine bench press"
        assert resolve_canonical_name("  Mystery   Lift ", registry) == "mystery lift"


class TestSuggestExercises:
    """Tests for suggest_exercises."""

    NAMES = ["bench press", "incline bench press", "leg press", "bench dip"]

    def test_ranking(self):
        result = suggest_exercises("bench", self.NAMES)

        assert result == [
            ("bench dip", 2),
            ("bench press", 2),
            ("incline bench press", 1),
        ]

    def test_exact_match_first(self):
        assert suggest_exercises("Bench Press", self.NAMES)[0] == ("bench press", 3)

    def test_empty_query(self):
        assert suggest_exercises("  ", self.NAMES) == [(n, 0) for n in self.NAMES]

    def test_no_matches(self):
        assert suggest_exercises("deadlift", self.NAMES) == []
