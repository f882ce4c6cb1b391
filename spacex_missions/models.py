"""
models.py
---------
Pydantic models for the mission dataset and for query responses.

Raw side (frozen, loaded once): MissionRecord and its nested parts, in the
spacexdata v3 field layout.
Response side: Mission / Missions / MissionNotFoundError, tagged with
`__typename` so the wire unions below discriminate on it.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from spacex_missions.errors import UnknownEnumValue


# ---- Enumerations: symbolic name -> dataset code ----

class _CodedEnum(str, Enum):
    @classmethod
    def parse(cls, token: Any):
        """Resolve a symbolic name (e.g. CAPE_CANAVERAL) to its member."""
        if isinstance(token, cls):
            return token
        try:
            return cls[str(token)]
        except KeyError:
            raise UnknownEnumValue(cls.__name__, token, cls.__members__) from None

    @property
    def code(self) -> str:
        return self.value


@unique
class SiteEnum(_CodedEnum):
    CAPE_CANAVERAL = "ccafs_slc_40"
    FOO = "foo"
    KENNEDY_SPACE_STATION = "ksc_lc_39a"


@unique
class RocketEnum(_CodedEnum):
    FALCON_9 = "falcon9"


# ---- Raw dataset records ----

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Payload(_Frozen):
    norad_ids: Tuple[int, ...] = Field(default=(), alias="norad_id")

    @field_validator("norad_ids", mode="before")
    @classmethod
    def _null_is_empty(cls, v):
        return v or ()


class RocketRecord(_Frozen):
    rocket_id: str
    payloads: Tuple[Payload, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _lift_second_stage(cls, data):
        # raw v3 launches keep payloads under rocket.second_stage
        if isinstance(data, dict) and "payloads" not in data:
            stage = data.get("second_stage") or {}
            if stage.get("payloads") is not None:
                data = {**data, "payloads": stage["payloads"]}
        return data


class LaunchSite(_Frozen):
    site_id: str
    site_name: str
    site_name_long: str


class MissionRecord(_Frozen):
    mission_name: str = Field(..., min_length=1)
    flight_number: int
    rocket: RocketRecord
    launch_date_unix: int
    launch_success: bool
    launch_site: LaunchSite

    @field_validator("launch_success", mode="before")
    @classmethod
    def _upcoming_is_not_success(cls, v):
        return False if v is None else v


# ---- Response shapes ----

class Rocket(BaseModel):
    rocket_id: Optional[str] = None


class Site(BaseModel):
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    site_name_long: Optional[str] = None


class DateTime(BaseModel):
    epoch_datetime: Optional[int] = None
    iso_datetime: Optional[str] = None


class Launch(BaseModel):
    launch_success: bool
    launch_date: DateTime
    launch_site: Site


class Mission(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["Mission"] = Field("Mission", alias="__typename")
    mission_name: str
    flight_number: int
    rocket: Rocket
    launch_info: Launch
    found_norads: List[int] = Field(default_factory=list)


class Missions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["Missions"] = Field("Missions", alias="__typename")
    missions: List[Mission] = Field(default_factory=list)


class MissionNotFoundError(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["MissionNotFoundError"] = Field("MissionNotFoundError", alias="__typename")
    error_message: str


MissionResult = Annotated[Union[Mission, MissionNotFoundError], Field(discriminator="typename")]
MissionsResult = Annotated[Union[Missions, MissionNotFoundError], Field(discriminator="typename")]
