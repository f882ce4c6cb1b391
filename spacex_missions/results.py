"""
results.py
----------
Found / NotFound result union for query outcomes.

Single-record queries map None -> NotFound with a message naming the query
and the rejected input. Collection queries always come back Found, even when
empty: the repository never hands back None for a filter, so their NotFound
branch exists only for symmetry of the wire union.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar, Union

log = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")


class QueryKind(str, Enum):
    MISSION_BY_NAME = "missionByName"
    MISSION_BY_FLIGHT = "missionByFlight"
    MISSIONS_BY_SITE = "missionsBySite"
    ROCKET_MISSIONS = "rocketMissions"
    FAILED_MISSIONS = "failedMissions"
    SUCCESSFUL_MISSIONS = "successfulMissions"


NOT_FOUND_MESSAGES = {
    QueryKind.MISSION_BY_NAME: "The mission with the provided name '{value}' does not exist",
    QueryKind.MISSION_BY_FLIGHT: "The mission with the provided flight number '{value}' does not exist",
    QueryKind.MISSIONS_BY_SITE: "Missions at site not found with the provided site id '{value}'",
    QueryKind.ROCKET_MISSIONS: "Missions not found with the provided rocket id '{value}'",
}


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    message: str


QueryResult = Union[Found[T], NotFound]


def not_found(kind: QueryKind, value: Any) -> NotFound:
    try:
        template = NOT_FOUND_MESSAGES[kind]
    except KeyError:
        raise ValueError(f"{kind.value} has no not-found variant") from None
    message = template.format(value=value)
    log.debug("%s: %s", kind.value, message)
    return NotFound(message)


def discriminate_one(
    record: Optional[R], kind: QueryKind, value: Any, shape: Callable[[R], T]
) -> QueryResult[T]:
    if record is None:
        return not_found(kind, value)
    return Found(shape(record))


def discriminate_many(
    records: Optional[Sequence[R]], kind: QueryKind, value: Any, shape: Callable[[R], T]
) -> QueryResult[List[T]]:
    # an empty tuple is still a result; only a missing sequence is NotFound
    if records is None:
        return not_found(kind, value)
    return Found([shape(r) for r in records])


def fold(
    result: QueryResult[T],
    on_found: Callable[[T], U],
    on_not_found: Callable[[str], U],
) -> U:
    """Handle both variants; anything else is a programming error."""
    if isinstance(result, Found):
        return on_found(result.value)
    if isinstance(result, NotFound):
        return on_not_found(result.message)
    raise TypeError(f"not a QueryResult: {result!r}")
