from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
import logging
from typing import Any, Dict, List, Optional
from pathlib import Path

from spacex_missions.dataset import load_dataset, resolve_dataset_path
from spacex_missions.dispatcher import MissionQueryDispatcher, to_wire
from spacex_missions.errors import (
    DatasetError,
    InvalidArguments,
    ScalarCodecError,
    UnknownEnumValue,
    UnknownOperation,
)
from spacex_missions.models import (
    Mission,
    MissionResult,
    MissionsResult,
    RocketEnum,
    SiteEnum,
)
from spacex_missions.repository import MissionRepository
from spacex_missions.utils import setup_logging

log = logging.getLogger(__name__)


# ---- Request schema for the generic query endpoint ----
class QueryRequest(BaseModel):
    operation: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


# ---- Dataset loading helpers ----
def _try_load_repository():
    path = resolve_dataset_path()
    if not path.exists():
        log.warning("Dataset not found at %s; serving an empty repository", path)
        return MissionRepository(), str(path), False
    try:
        return MissionRepository(load_dataset(path)), str(path), True
    except DatasetError as e:
        log.error("Dataset at %s rejected: %s", path, e)
        return MissionRepository(), str(path), False


def create_app(
    repository: Optional[MissionRepository] = None,
    dataset_path: Optional[Path] = None,
) -> FastAPI:
    if repository is None:
        repository, path, loaded = _try_load_repository()
    else:
        path, loaded = str(dataset_path or ""), True

    dispatcher = MissionQueryDispatcher(repository)
    app = FastAPI(title="SpaceX Missions Query API", version="1.0.0")

    def _enum(enum_cls, token: str):
        try:
            return enum_cls.parse(token)
        except UnknownEnumValue as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "dataset_loaded": loaded,
            "missions": len(repository),
            "dataset_path": path,
        }

    @app.get("/missions/by-name/{name:path}", response_model=MissionResult)
    def mission_by_name(name: str):
        return to_wire(dispatcher.mission_by_name(name))

    @app.get("/missions/by-flight/{flight_number}", response_model=MissionResult)
    def mission_by_flight(flight_number: int):
        return to_wire(dispatcher.mission_by_flight(flight_number))

    @app.get("/missions/by-site/{site_id}", response_model=MissionsResult)
    def missions_by_site(site_id: str):
        return to_wire(dispatcher.missions_by_site(_enum(SiteEnum, site_id)))

    @app.get("/missions/by-rocket/{rocket_id}", response_model=MissionsResult)
    def rocket_missions(rocket_id: str):
        return to_wire(dispatcher.rocket_missions(_enum(RocketEnum, rocket_id)))

    @app.get("/missions/failed", response_model=List[Mission])
    def failed_missions():
        return dispatcher.failed_missions()

    @app.get("/missions/successful", response_model=List[Mission])
    def successful_missions():
        return dispatcher.successful_missions()

    @app.post("/query", response_model=None)
    def query(req: QueryRequest):
        try:
            outcome = dispatcher.dispatch(req.operation, req.arguments)
        except UnknownOperation as e:
            raise HTTPException(status_code=400, detail=str(e))
        except (InvalidArguments, UnknownEnumValue, ScalarCodecError) as e:
            raise HTTPException(status_code=422, detail=str(e))
        return to_wire(outcome)

    return app


setup_logging()
app = create_app()
