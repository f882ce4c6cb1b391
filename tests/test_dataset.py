import json

import pytest
from pydantic import ValidationError

from spacex_missions import dataset
from spacex_missions.dataset import load_dataset, load_repository, resolve_dataset_path
from spacex_missions.errors import DatasetError


def test_load_dataset_keeps_file_order(records):
    assert [r.flight_number for r in records] == [1, 2, 6, 7, 29, 36, 200]
    assert isinstance(records, tuple)


def test_null_launch_success_reads_as_false(records):
    assert records[-1].launch_success is False


def test_second_stage_payloads_are_lifted(records):
    cots = records[3]
    assert [p.norad_ids for p in cots.rocket.payloads] == [(37244,), (37245,)]


def test_records_are_frozen(records):
    with pytest.raises(ValidationError):
        records[0].mission_name = "changed"


def test_malformed_entry_names_its_index(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"mission_name": "x"}]), encoding="utf-8")
    with pytest.raises(DatasetError, match="entry 0"):
        load_dataset(path)


def test_non_array_dataset_is_rejected(tmp_path):
    path = tmp_path / "obj.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(DatasetError):
        load_dataset(path)


def test_missing_file_is_dataset_error(tmp_path):
    with pytest.raises(DatasetError):
        load_dataset(tmp_path / "nope.json")


def test_resolve_prefers_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("SPACEX_DATASET_PATH", str(tmp_path / "x.json"))
    assert resolve_dataset_path(tmp_path / "index.json") == tmp_path / "x.json"


def test_resolve_uses_latest_snapshot(monkeypatch, tmp_path):
    monkeypatch.delenv("SPACEX_DATASET_PATH", raising=False)
    index = tmp_path / "index.json"
    index.write_text(json.dumps([{"file": "a.json"}, {"file": "b.json"}]), encoding="utf-8")
    assert str(resolve_dataset_path(index)) == "b.json"


def test_resolve_falls_back_to_default(monkeypatch, tmp_path):
    monkeypatch.delenv("SPACEX_DATASET_PATH", raising=False)
    assert resolve_dataset_path(tmp_path / "index.json") == dataset.config.DEFAULT_DATASET


def test_load_repository_from_path(dataset_path):
    assert len(load_repository(dataset_path)) == 7
