# Data source + runtime paths for the mission query service.
# RAW_SOURCE_URL: https://api.spacexdata.com/v3/launches
# RAW_EXPECTED_FIELDS:
#   ['mission_name','flight_number','launch_date_unix','launch_success',
#    'rocket','launch_site']
#
# Dataset path resolution (first hit wins):
#   1. $SPACEX_DATASET_PATH
#   2. latest entry in data/_snapshots/index.json
#   3. data/spacex_launches.json
import os
from pathlib import Path

API_URL = "https://api.spacexdata.com/v3/launches"

DATA_RAW = Path("data/raw")
SNAPSHOT_INDEX = Path("data/_snapshots/index.json")
DEFAULT_DATASET = Path("data/spacex_launches.json")

LOG_DIR = Path("logs")

REQUIRED_FIELDS = [
    "mission_name",
    "flight_number",
    "launch_date_unix",
    "launch_success",
    "rocket",
    "launch_site",
]


def dataset_path_override() -> str:
    return os.getenv("SPACEX_DATASET_PATH", "").strip()


def log_level() -> str:
    return os.getenv("SPACEX_LOG_LEVEL", "INFO").strip().upper() or "INFO"
