"""Tests for the fitness-engine CLI."""

import json

import pytest

from rich.console import Console

from fitness_engine import cli
from fitness_engine.cli import main


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Wide enough that ids in audit tables are never folded."""
    monkeypatch.setattr(cli, "console", Console(width=200))


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({
        "gender": "Male",
        "weightValue": 100,
        "weightUnit": "kg",
        "age": 25,
        "activityLevel": "moderately_active",
        "weightGoal": "maintain",
        "cardioCalculationMethod": "auto",
    }))
    return str(path)


@pytest.fixture
def doubled_export(tmp_path):
    path = tmp_path / "export.json"
    path.write_text(json.dumps({
        "exercises": [
            {
                "id": "barbell-barbell-back-squat",
                "name": "Barbell Barbell Back Squat",
                "normalizedName": "barbell barbell back squat",
                "equipment": "barbell",
            },
            {"id": "barbell-bench", "name": "Bench", "normalizedName": "bench press"},
            {"id": "machine-bench", "name": "Bench", "normalizedName": "bench press"},
        ],
        "aliases": [{"alias": "back squat", "canonicalId": "barbell-barbell-back-squat"}],
    }))
    return str(path)


class TestClassifyCommand:
    """Tests for `classify` and `thresholds`."""

    def test_classify(self, profile_file, capsys):
        assert main(["classify", profile_file, "bench press", "150"]) == 0
        assert "Advanced" in capsys.readouterr().out

    def test_classify_lbs(self, profile_file, capsys):
        assert main(["classify", profile_file, "bench press", "315", "--unit", "lbs"]) == 0
        assert "Intermediate" in capsys.readouterr().out

    def test_unknown_exercise_suggests(self, profile_file, capsys):
        assert main(["classify", profile_file, "bench", "100"]) == 1

        out = capsys.readouterr().out
        assert "Exercise not found" in out
        assert "machine bench press" in out

    def test_thresholds(self, profile_file, capsys):
        assert main(["thresholds", profile_file, "squat"]) == 0

        out = capsys.readouterr().out
        assert "125" in out
        assert "175" in out
        assert "225" in out

    def test_invalid_profile(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"age": -3}))

        assert main(["thresholds", str(path), "squat"]) == 1
        assert "Invalid UserProfile" in capsys.readouterr().out

    def test_missing_profile_file(self, tmp_path, capsys):
        assert main(["classify", str(tmp_path / "nope.json"), "squat", "100"]) == 1
        assert "Cannot read" in capsys.readouterr().out


class TestCaloriesCommand:
    """Tests for `calories`."""

    def test_calories(self, profile_file, tmp_path, capsys):
        workout = tmp_path / "workout.json"
        workout.write_text(json.dumps({
            "id": "w1",
            "date": "2024-06-12T07:00:00",
            "exercises": [
                {"name": "Running", "category": "Cardio", "distance": 1, "distanceUnit": "mi",
                 "duration": 10, "durationUnit": "min"},
                {"name": "Swim", "category": "Cardio", "calories": 250},
            ],
        }))

        assert main(["calories", profile_file, str(workout)]) == 0

        out = capsys.readouterr().out
        # 9.8 MET * 100 kg * 1/6 h
        assert "163" in out
        assert "250" in out


class TestCardioTargetsCommand:
    """Tests for `cardio-targets`."""

    def test_targets(self, profile_file, capsys):
        assert main(["cardio-targets", profile_file, "--today", "2024-06-12"]) == 0

        out = capsys.readouterr().out
        # 600 * 100/70
        assert "857" in out
        assert "1071" in out

    def test_with_history(self, profile_file, tmp_path, capsys):
        history = tmp_path / "logs.json"
        history.write_text(json.dumps([
            {"id": "a", "date": "2024-06-04T18:00:00",
             "exercises": [{"name": "Running", "category": "Cardio", "calories": 4800}]},
        ]))

        assert main(["cardio-targets", profile_file, "--history", str(history), "--today", "2024-06-12"]) == 0

        out = capsys.readouterr().out
        assert "1200" in out
        assert "2024-06-02" in out


class TestRegistryAuditCommand:
    """Tests for `registry-audit`."""

    def test_reports_conflicts_and_prefixes(self, doubled_export, capsys):
        assert main(["registry-audit", doubled_export]) == 1

        out = capsys.readouterr().out
        assert "machine-bench" in out
        assert "barbell-back-squat" in out

    def test_apply_writes_repaired_export(self, doubled_export, tmp_path):
        output = tmp_path / "fixed.json"

        main(["registry-audit", doubled_export, "--apply", str(output)])

        data = json.loads(output.read_text())
        ids = [e["id"] for e in data["exercises"]]
        assert "barbell-back-squat" in ids
        assert "barbell-barbell-back-squat" not in ids
        assert data["aliases"][0]["canonicalId"] == "barbell-back-squat"

    def test_unreadable_export(self, tmp_path, capsys):
        assert main(["registry-audit", str(tmp_path / "missing.json")]) == 1
        assert "Cannot read registry export" in capsys.readouterr().out


class TestRegistryOption:
    """Tests for --registry."""

    def test_registry_from_export(self, profile_file, doubled_export, capsys):
        assert main(["--registry", doubled_export, "classify", profile_file, "back squat", "100"]) == 0
        # The export carries no standards for this squat
        assert "N/A" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
