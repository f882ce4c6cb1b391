"""
dispatcher.py
-------------
Maps each named query to repository lookup -> result union -> shaping.

    missionByName(name)          -> MissionResult
    missionByFlight(flight_num)  -> MissionResult
    missionsBySite(siteId)       -> MissionsResult
    rocketMissions(rocketId)     -> MissionsResult
    failedMissions()             -> [Mission]   (plain list, no union)
    successfulMissions()         -> [Mission]   (plain list, no union)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from spacex_missions.errors import InvalidArguments, UnknownOperation
from spacex_missions.models import Mission, MissionNotFoundError, Missions, RocketEnum, SiteEnum
from spacex_missions.repository import MissionRepository
from spacex_missions.results import QueryKind, QueryResult, discriminate_many, discriminate_one, fold
from spacex_missions.shaper import shape_mission


class MissionQueryDispatcher:
    def __init__(self, repository: MissionRepository):
        self.repository = repository
        self._handlers: Dict[str, Callable[..., Any]] = {
            QueryKind.MISSION_BY_NAME.value: self._dispatch_by_name,
            QueryKind.MISSION_BY_FLIGHT.value: self._dispatch_by_flight,
            QueryKind.MISSIONS_BY_SITE.value: self._dispatch_by_site,
            QueryKind.ROCKET_MISSIONS.value: self._dispatch_by_rocket,
            QueryKind.FAILED_MISSIONS.value: lambda args: self.failed_missions(),
            QueryKind.SUCCESSFUL_MISSIONS.value: lambda args: self.successful_missions(),
        }

    @property
    def operations(self) -> List[str]:
        return list(self._handlers)

    # --- operations ----------------------------------------------------------

    def mission_by_name(self, name: str) -> QueryResult[Mission]:
        record = self.repository.find_by_name(name)
        return discriminate_one(record, QueryKind.MISSION_BY_NAME, name, shape_mission)

    def mission_by_flight(self, flight_number: int) -> QueryResult[Mission]:
        record = self.repository.find_by_flight_number(flight_number)
        return discriminate_one(record, QueryKind.MISSION_BY_FLIGHT, flight_number, shape_mission)

    def missions_by_site(self, site: SiteEnum) -> QueryResult[List[Mission]]:
        site = SiteEnum.parse(site)
        records = self.repository.filter_by_site(site.code)
        return discriminate_many(records, QueryKind.MISSIONS_BY_SITE, site.code, shape_mission)

    def rocket_missions(self, rocket: RocketEnum) -> QueryResult[List[Mission]]:
        rocket = RocketEnum.parse(rocket)
        records = self.repository.filter_by_rocket(rocket.code)
        return discriminate_many(records, QueryKind.ROCKET_MISSIONS, rocket.code, shape_mission)

    def failed_missions(self) -> List[Mission]:
        return [shape_mission(r) for r in self.repository.filter_by_outcome(False)]

    def successful_missions(self) -> List[Mission]:
        return [shape_mission(r) for r in self.repository.filter_by_outcome(True)]

    # --- by-name dispatch ----------------------------------------------------

    def dispatch(self, operation: str, arguments: Optional[Mapping[str, Any]] = None):
        try:
            handler = self._handlers[operation]
        except KeyError:
            raise UnknownOperation(operation) from None
        return handler(dict(arguments or {}))

    def _dispatch_by_name(self, args: Dict[str, Any]):
        name = _require(args, "name")
        if not isinstance(name, str):
            raise InvalidArguments(f"'name' must be a string, got {type(name).__name__}")
        return self.mission_by_name(name)

    def _dispatch_by_flight(self, args: Dict[str, Any]):
        flight_num = _require(args, "flight_num")
        if isinstance(flight_num, bool) or not isinstance(flight_num, int):
            raise InvalidArguments(f"'flight_num' must be an integer, got {flight_num!r}")
        return self.mission_by_flight(flight_num)

    def _dispatch_by_site(self, args: Dict[str, Any]):
        return self.missions_by_site(_require(args, "siteId"))

    def _dispatch_by_rocket(self, args: Dict[str, Any]):
        return self.rocket_missions(_require(args, "rocketId"))


def _require(args: Dict[str, Any], key: str) -> Any:
    if key not in args:
        raise InvalidArguments(f"missing required argument '{key}'")
    return args[key]


# --- wire form -------------------------------------------------------------

def to_wire(outcome: Any) -> Union[Mission, Missions, MissionNotFoundError, List[Mission]]:
    """Result union -> __typename-tagged response model; plain lists pass through."""
    if isinstance(outcome, list):
        return outcome
    return fold(outcome, _found_to_wire, lambda message: MissionNotFoundError(error_message=message))


def _found_to_wire(value: Any) -> Union[Mission, Missions]:
    return Missions(missions=value) if isinstance(value, list) else value


def to_jsonable(wire: Any) -> Any:
    if isinstance(wire, list):
        return [m.model_dump(by_alias=True) for m in wire]
    return wire.model_dump(by_alias=True)
