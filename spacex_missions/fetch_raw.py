"""
fetch_raw.py
-------------
Downloads SpaceX launch data (v3 layout, the one the query service reads)
and stores a dated snapshot with SHA256 integrity tracking.
"""

import datetime
import json
from pathlib import Path

import requests
from rich.console import Console

from spacex_missions import config
from spacex_missions.utils import read_snapshot_index, sha256sum

console = Console()


def save_snapshot(
    api_url: str = config.API_URL,
    raw_dir: Path = config.DATA_RAW,
    index_path: Path = config.SNAPSHOT_INDEX,
) -> Path:
    raw_dir.mkdir(parents=True, exist_ok=True)
    index_path.parent.mkdir(parents=True, exist_ok=True)

    # Timestamped filename
    now = datetime.datetime.now(datetime.timezone.utc)
    fname = f"launches_{now:%Y%m%d_%H%M%S}.json"
    fpath = raw_dir / fname

    console.print(f"Fetching [cyan]{api_url}[/cyan] ...")
    resp = requests.get(api_url, timeout=60)
    resp.raise_for_status()

    data = resp.json()
    with open(fpath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    sha = sha256sum(fpath)
    count = len(data)
    entry = {
        "file": fpath.as_posix(),
        "rows": count,
        "sha256": sha,
        "timestamp_utc": now.replace(tzinfo=None).isoformat(timespec="seconds"),
    }

    # Append to index.json
    index = read_snapshot_index(index_path)
    index.append(entry)
    with open(index_path, "w", encoding="utf-8") as f:
        json.dump(index, f, indent=2)

    console.print(
        f"[green]Snapshot saved:[/green] {fpath.name} "
        f"({count} records, sha256={sha[:12]}...)"
    )
    return fpath


if __name__ == "__main__":
    try:
        save_snapshot()
    except Exception as e:
        console.print(f"[red]Fetch failed:[/red] {e}")
        raise SystemExit(1)
