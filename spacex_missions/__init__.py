from spacex_missions.dispatcher import MissionQueryDispatcher
from spacex_missions.models import RocketEnum, SiteEnum
from spacex_missions.repository import MissionRepository
from spacex_missions.results import Found, NotFound, QueryKind

__all__ = [
    "Found",
    "MissionQueryDispatcher",
    "MissionRepository",
    "NotFound",
    "QueryKind",
    "RocketEnum",
    "SiteEnum",
]
