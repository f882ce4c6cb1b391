"""
utils.py
--------
Small shared helpers: JSON + snapshot index access, hashing, logging setup.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from spacex_missions import config


def sha256sum(path: Path) -> str:
    """Compute SHA256 hash of a file."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_snapshot_index(index_path: Path = config.SNAPSHOT_INDEX) -> List[Dict[str, Any]]:
    if not index_path.exists():
        return []
    return read_json(index_path)


def latest_snapshot_entry(index_path: Path = config.SNAPSHOT_INDEX) -> Optional[Dict[str, Any]]:
    """Last entry appended by fetch_raw, or None if nothing was fetched yet."""
    index = read_snapshot_index(index_path)
    return index[-1] if index else None


def setup_logging(log_file: Optional[Path] = None, level: Optional[str] = None) -> None:
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file) if log_file is not None else None,
        level=getattr(logging, level or config.log_level(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
