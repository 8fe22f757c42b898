"""Tests for reading and writing exercise store exports."""

import json

import pytest

from fitness_engine.exceptions import ErrorCode, RegistryDataError
from fitness_engine.models import AliasRecord, ExerciseRecord
from fitness_engine.registry import load_registry_export, write_registry_export


EXPORT = {
    "exercises": [
        {
            "id": "barbell-squat",
            "name": "Barbell Squat",
            "normalizedName": "barbell squat",
            "equipment": "barbell",
            "category": "Lower Body",
            "type": "strength",
            "strengthStandards": {
                "baseType": "bw",
                "standards": {
                    "Male": {"intermediate": 1.25, "advanced": 1.75, "elite": 2.25},
                },
            },
            "legacyNames": ["squat"],
            "isActive": True,
        }
    ],
    "aliases": [{"alias": "back squat", "canonicalId": "barbell-squat"}],
}


class TestLoadRegistryExport:
    """Tests for load_registry_export."""

    def test_load(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps(EXPORT))

        exercises, aliases = load_registry_export(path)

        assert exercises[0].id == "barbell-squat"
        assert exercises[0].strength_standards.for_gender("Male").advanced == 1.75
        assert aliases == [AliasRecord(alias="back squat", canonical_id="barbell-squat")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(RegistryDataError) as exc_info:
            load_registry_export(tmp_path / "missing.json")

        assert exc_info.value.code == ErrorCode.REGISTRY_DATA_INVALID
        assert exc_info.value.details["source"].endswith("missing.json")

    def test_not_json(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text("{not json")

        with pytest.raises(RegistryDataError):
            load_registry_export(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text("[]")

        with pytest.raises(RegistryDataError):
            load_registry_export(path)

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"exercises": [{"id": "x"}]}))

        with pytest.raises(RegistryDataError) as exc_info:
            load_registry_export(path)

        assert exc_info.value.details["errors"]


class TestWriteRegistryExport:
    """Tests for write_registry_export."""

    def test_written_in_store_format(self, tmp_path):
        path = tmp_path / "out.json"
        record = ExerciseRecord(id="other-run", name="Run", normalized_name="run", type="cardio")

        write_registry_export(path, [record], [AliasRecord(alias="jog", canonical_id="other-run")])

        data = json.loads(path.read_text())
        assert data["exercises"][0]["normalizedName"] == "run"
        assert data["exercises"][0]["isActive"] is True
        assert data["aliases"] == [{"alias": "jog", "canonicalId": "other-run"}]

    def test_written_file_loads_back(self, tmp_path):
        source = tmp_path / "export.json"
        source.write_text(json.dumps(EXPORT))
        exercises, aliases = load_registry_export(source)

        target = tmp_path / "copy.json"
        write_registry_export(target, exercises, aliases)

        assert load_registry_export(target) == (exercises, aliases)
