"""
Shared fixtures: the small launch snapshot under tests/fixtures/ and the
repository / dispatcher built over it.

Dataset order (flight number, site, outcome):
    FalconSat            1   kwajalein_atoll  false
    DemoSat              2   kwajalein_atoll  false
    Falcon 9 Test Flight 6   ccafs_slc_40     true
    COTS 1               7   ccafs_slc_40     true   (payloads under second_stage)
    AMOS-6               29  ccafs_slc_40     false  (no payloads)
    CRS-10               36  ksc_lc_39a       true
    Future Mission       200 ksc_lc_39a       null   (no norad_id key)
"""

from pathlib import Path

import pytest

from spacex_missions.dataset import load_dataset
from spacex_missions.dispatcher import MissionQueryDispatcher
from spacex_missions.models import MissionRecord
from spacex_missions.repository import MissionRepository

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def dataset_path() -> Path:
    return FIXTURES / "spacex_launches.json"


@pytest.fixture
def records(dataset_path):
    return load_dataset(dataset_path)


@pytest.fixture
def repository(records) -> MissionRepository:
    return MissionRepository(records)


@pytest.fixture
def dispatcher(repository) -> MissionQueryDispatcher:
    return MissionQueryDispatcher(repository)


@pytest.fixture
def make_record():
    """Build a single MissionRecord, overriding any top-level field."""

    def _make(**overrides) -> MissionRecord:
        raw = {
            "mission_name": "Test Mission",
            "flight_number": 999,
            "launch_date_unix": 1609459200,
            "launch_success": True,
            "rocket": {"rocket_id": "falcon9", "payloads": [{"norad_id": [11111, 22222]}]},
            "launch_site": {
                "site_id": "ccafs_slc_40",
                "site_name": "CCAFS SLC 40",
                "site_name_long": "Cape Canaveral Air Force Station Space Launch Complex 40",
            },
        }
        raw.update(overrides)
        return MissionRecord.model_validate(raw)

    return _make
