"""
validate_raw.py
---------------
Validates a launches snapshot before the query service loads it, using
pandas + pandera: lookup keys (mission_name, flight_number) unique,
launch dates after the epoch, launch_success only true/false/null.
Writes a log to logs/validate_raw.log and exits nonzero on failure.
"""
from __future__ import annotations

import logging
import math
import sys
import warnings
from pathlib import Path
from typing import Any, List, Optional

import numpy as np
import pandas as pd
import pandera as pa
from pandera import Check, Column
from rich.console import Console

from spacex_missions import config
from spacex_missions.dataset import resolve_dataset_path
from spacex_missions.utils import read_json, setup_logging

warnings.filterwarnings("ignore", category=FutureWarning, module="pandera")

console = Console()
LOG_FILE = config.LOG_DIR / "validate_raw.log"


def load_raw_dataframe(path: Path) -> pd.DataFrame:
    # JSON file is a list of dicts; nested rocket/launch_site stay as dicts
    return pd.DataFrame.from_records(read_json(path))


def build_schema() -> pa.DataFrameSchema:
    return pa.DataFrameSchema(
        columns={
            "mission_name": Column(pa.String, nullable=False, unique=True,
                                   checks=Check.str_length(min_value=1)),
            "flight_number": Column(pa.Int, nullable=False, unique=True, checks=Check.ge(1)),
            "launch_date_unix": Column(pa.Int, nullable=False, checks=Check.gt(0)),
            "rocket": Column(pa.Object, nullable=False),
            "launch_site": Column(pa.Object, nullable=False),
        },
        coerce=True,
        strict=False,
    )


def _as_outcome(x: Any) -> Any:
    if x is None or (isinstance(x, float) and math.isnan(x)):
        return None
    if isinstance(x, (bool, np.bool_)):
        return bool(x)
    return x


def validate_frame(df: pd.DataFrame) -> List[str]:
    """Return a list of problems; empty means the snapshot is usable."""
    missing = [c for c in config.REQUIRED_FIELDS if c not in df.columns]
    if missing:
        return [f"Missing required fields: {missing}"]

    problems: List[str] = []
    try:
        build_schema().validate(df[config.REQUIRED_FIELDS], lazy=True)
    except pa.errors.SchemaErrors as err:
        cases = err.failure_cases
        logging.error("Pandera validation failed:\n%s", cases)
        for _, row in cases.iterrows():
            problems.append(f"{row['column']}: {row['check']} failed for {row['failure_case']!r}")

    outcome = df["launch_success"].map(_as_outcome)
    bad = ~outcome.map(lambda x: x is None or isinstance(x, (bool, np.bool_)))
    if bad.any():
        problems.append(f"Invalid values in 'launch_success' at rows: {df.index[bad].tolist()[:10]}")

    # nested keys the repository filters on
    no_site = ~df["launch_site"].map(lambda s: isinstance(s, dict) and bool(s.get("site_id")))
    no_rocket = ~df["rocket"].map(lambda r: isinstance(r, dict) and bool(r.get("rocket_id")))
    if no_site.any() or no_rocket.any():
        problems.append(
            f"Missing nested ids: site_id_missing={int(no_site.sum())}, "
            f"rocket_id_missing={int(no_rocket.sum())}"
        )
    return problems


def run_validation(path: Optional[Path] = None) -> None:
    setup_logging(LOG_FILE)
    raw_path = path or resolve_dataset_path()
    console.print(f"Validating snapshot: [cyan]{raw_path}[/cyan]")

    if not raw_path.exists():
        msg = f"Snapshot file missing: {raw_path}"
        logging.error(msg)
        console.print(f"[red]{msg}[/red]")
        raise SystemExit(1)

    df = load_raw_dataframe(raw_path)
    logging.info(f"Loaded {len(df)} rows from {raw_path}")

    problems = validate_frame(df)
    if problems:
        for p in problems:
            logging.error(p)
            console.print(f"[red]{p}[/red]")
        raise SystemExit(1)

    logging.info("RAW_VALIDATION_OK")
    console.print("[green]RAW_VALIDATION_OK[/green]")


if __name__ == "__main__":
    try:
        run_validation(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
    except SystemExit:
        raise
    except Exception as e:
        setup_logging(LOG_FILE)
        logging.exception("Unexpected failure: %s", e)
        console.print(f"[red]Unexpected error[/red]: {e}")
        raise SystemExit(1)
