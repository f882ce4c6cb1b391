"""
dataset.py
----------
Loads the launch snapshot once into an immutable tuple of MissionRecord.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError

from spacex_missions import config
from spacex_missions.errors import DatasetError
from spacex_missions.models import MissionRecord
from spacex_missions.repository import MissionRepository
from spacex_missions.utils import latest_snapshot_entry, read_json

log = logging.getLogger(__name__)


def resolve_dataset_path(index_path: Path = config.SNAPSHOT_INDEX) -> Path:
    override = config.dataset_path_override()
    if override:
        return Path(override)
    snap = latest_snapshot_entry(index_path)
    if snap and snap.get("file"):
        return Path(snap["file"])
    return config.DEFAULT_DATASET


def load_dataset(path: Path) -> Tuple[MissionRecord, ...]:
    try:
        raw = read_json(path)
    except (OSError, ValueError) as e:
        raise DatasetError(f"cannot read dataset {path}: {e}") from e
    if not isinstance(raw, list):
        raise DatasetError(f"dataset {path} must be a JSON array, got {type(raw).__name__}")

    records = []
    for i, item in enumerate(raw):
        try:
            records.append(MissionRecord.model_validate(item))
        except ValidationError as e:
            raise DatasetError(f"dataset {path}: entry {i} is malformed: {e}") from e

    log.info("Loaded %d missions from %s", len(records), path)
    return tuple(records)


def load_repository(path: Optional[Path] = None) -> MissionRepository:
    return MissionRepository(load_dataset(path or resolve_dataset_path()))
