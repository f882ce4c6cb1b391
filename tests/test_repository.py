from spacex_missions.repository import MissionRepository


def test_find_by_name_returns_each_record(repository, records):
    for r in records:
        assert repository.find_by_name(r.mission_name) is r


def test_find_by_name_is_exact_match(repository):
    assert repository.find_by_name("falconsat") is None
    assert repository.find_by_name("FalconSat ") is None
    assert repository.find_by_name("Nonexistent") is None


def test_find_by_name_keeps_first_match(make_record):
    first = make_record(flight_number=1)
    second = make_record(flight_number=2)
    repo = MissionRepository([first, second])
    assert repo.find_by_name("Test Mission") is first


def test_find_by_flight_number(repository):
    assert repository.find_by_flight_number(6).mission_name == "Falcon 9 Test Flight"
    assert repository.find_by_flight_number(3) is None


def test_filter_by_site_preserves_order(repository):
    names = [r.mission_name for r in repository.filter_by_site("ccafs_slc_40")]
    assert names == ["Falcon 9 Test Flight", "COTS 1", "AMOS-6"]


def test_filter_by_site_without_matches_is_empty_tuple(repository):
    assert repository.filter_by_site("foo") == ()


def test_filter_by_rocket(repository):
    flights = [r.flight_number for r in repository.filter_by_rocket("falcon9")]
    assert flights == [6, 7, 29, 36, 200]
    assert repository.filter_by_rocket("starship") == ()


def test_filter_by_outcome(repository):
    assert [r.flight_number for r in repository.filter_by_outcome(True)] == [6, 7, 36]
    # null launch_success is loaded as False
    assert [r.flight_number for r in repository.filter_by_outcome(False)] == [1, 2, 29, 200]


def test_repository_is_a_read_only_snapshot(records):
    source = list(records)
    repo = MissionRepository(source)
    source.clear()
    assert len(repo) == len(records)
    assert isinstance(repo.records, tuple)
