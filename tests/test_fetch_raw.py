import json
from unittest.mock import MagicMock, patch

from spacex_missions.fetch_raw import save_snapshot
from spacex_missions.utils import latest_snapshot_entry, sha256sum


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


def test_save_snapshot_writes_file_and_index(tmp_path, dataset_path):
    payload = json.loads(dataset_path.read_text(encoding="utf-8"))
    raw_dir = tmp_path / "raw"
    index = tmp_path / "_snapshots" / "index.json"

    with patch("spacex_missions.fetch_raw.requests.get", return_value=_response(payload)) as get:
        fpath = save_snapshot("https://example.test/v3/launches", raw_dir, index)

    get.assert_called_once_with("https://example.test/v3/launches", timeout=60)
    assert fpath.parent == raw_dir
    assert json.loads(fpath.read_text(encoding="utf-8")) == payload

    entry = latest_snapshot_entry(index)
    assert entry["file"] == fpath.as_posix()
    assert entry["rows"] == 7
    assert entry["sha256"] == sha256sum(fpath)


def test_save_snapshot_appends_to_existing_index(tmp_path):
    index = tmp_path / "index.json"
    index.write_text(json.dumps([{"file": "old.json"}]), encoding="utf-8")

    with patch("spacex_missions.fetch_raw.requests.get", return_value=_response([])):
        save_snapshot("https://example.test", tmp_path / "raw", index)

    entries = json.loads(index.read_text(encoding="utf-8"))
    assert len(entries) == 2
    assert entries[0] == {"file": "old.json"}
