"""
repository.py
-------------
Read-only lookups over the immutable, ordered mission dataset.
Absence is never an error here: single lookups return None, filters return
a (possibly empty) tuple in dataset order.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, Tuple

from spacex_missions.models import MissionRecord


class MissionRepository:
    def __init__(self, records: Iterable[MissionRecord] = ()):
        self._records: Tuple[MissionRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MissionRecord]:
        return iter(self._records)

    @property
    def records(self) -> Tuple[MissionRecord, ...]:
        return self._records

    # --- single-record lookups (first match wins) ---

    def _first(self, pred: Callable[[MissionRecord], bool]) -> Optional[MissionRecord]:
        return next((r for r in self._records if pred(r)), None)

    def find_by_name(self, name: str) -> Optional[MissionRecord]:
        return self._first(lambda r: r.mission_name == name)

    def find_by_flight_number(self, flight_number: int) -> Optional[MissionRecord]:
        return self._first(lambda r: r.flight_number == flight_number)

    # --- filters ---

    def _filter(self, pred: Callable[[MissionRecord], bool]) -> Tuple[MissionRecord, ...]:
        return tuple(r for r in self._records if pred(r))

    def filter_by_site(self, site_code: str) -> Tuple[MissionRecord, ...]:
        return self._filter(lambda r: r.launch_site.site_id == site_code)

    def filter_by_rocket(self, rocket_code: str) -> Tuple[MissionRecord, ...]:
        return self._filter(lambda r: r.rocket.rocket_id == rocket_code)

    def filter_by_outcome(self, success: bool) -> Tuple[MissionRecord, ...]:
        return self._filter(lambda r: r.launch_success == bool(success))
