"""
Reading and writing JSON exports of the exercise store.

Export format (keys in camelCase, as the store emits them):

    {
      "exercises": [{"id": ..., "name": ..., "normalizedName": ..., ...}],
      "aliases": [{"alias": ..., "canonicalId": ...}]
    }
"""

import json
import logging
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import RegistryDataError
from ..models.exercises import AliasRecord, ExerciseRecord

logger = logging.getLogger(__name__)


def _read(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RegistryDataError(f"Cannot read registry export: {e}", source=str(path))

    if not isinstance(data, dict):
        raise RegistryDataError("Registry export must be a JSON object", source=str(path))
    return data


def load_registry_export(
    path: Union[str, Path],
) -> Tuple[List[ExerciseRecord], List[AliasRecord]]:
    """
    Load exercise and alias records from an export file.

    Raises:
        RegistryDataError: If the file is unreadable or a record is malformed
    """
    path = Path(path)
    data = _read(path)
    try:
        exercises = [ExerciseRecord.model_validate(e) for e in data.get("exercises", [])]
        aliases = [AliasRecord.model_validate(a) for a in data.get("aliases", [])]
    except PydanticValidationError as e:
        raise RegistryDataError(
            "Invalid record in registry export",
            source=str(path),
            details={"errors": e.errors(include_url=False)},
        )

    logger.debug("Read %d exercises and %d aliases from %s", len(exercises), len(aliases), path)
    return exercises, aliases


def write_registry_export(
    path: Union[str, Path],
    exercises: List[ExerciseRecord],
    aliases: List[AliasRecord],
) -> None:
    """Write records in the export format."""
    payload = {
        "exercises": [e.model_dump(mode="json", by_alias=True) for e in exercises],
        "aliases": [a.model_dump(mode="json", by_alias=True) for a in aliases],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")
