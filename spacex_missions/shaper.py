"""
shaper.py
---------
Turns a flat MissionRecord into the response Mission:
- launch_info groups outcome, date and site
- launch_date is exposed as both epoch and ISO views via the scalar codecs
- found_norads comes from the first payload's NORAD ids
"""

from __future__ import annotations

import logging
from typing import List

from spacex_missions.errors import MalformedRecord, ScalarCodecError
from spacex_missions.models import DateTime, Launch, Mission, MissionRecord, Payload, Rocket, Site
from spacex_missions.scalars import EPOCH_TIME, ISO_DATETIME, TemporalScalar

log = logging.getLogger(__name__)


def first_payload(record: MissionRecord) -> Payload:
    if not record.rocket.payloads:
        raise MalformedRecord(record.mission_name, "rocket has no payloads")
    return record.rocket.payloads[0]


def found_norads(record: MissionRecord) -> List[int]:
    try:
        payload = first_payload(record)
    except MalformedRecord as e:
        log.warning("%s; reporting no NORAD ids", e)
        return []
    return list(payload.norad_ids)


def _serialize_field(codec: TemporalScalar, value: int, record: MissionRecord):
    # a bad date nulls this view only; the rest of the mission still renders
    try:
        return codec.serialize(value)
    except ScalarCodecError as e:
        log.warning("mission '%s': %s", record.mission_name, e)
        return None


def launch_date(record: MissionRecord) -> DateTime:
    value = record.launch_date_unix
    return DateTime(
        epoch_datetime=_serialize_field(EPOCH_TIME, value, record),
        iso_datetime=_serialize_field(ISO_DATETIME, value, record),
    )


def launch_info(record: MissionRecord) -> Launch:
    return Launch(
        launch_success=record.launch_success,
        launch_date=launch_date(record),
        launch_site=Site(**record.launch_site.model_dump()),
    )


def shape_mission(record: MissionRecord) -> Mission:
    return Mission(
        mission_name=record.mission_name,
        flight_number=record.flight_number,
        rocket=Rocket(rocket_id=record.rocket.rocket_id),
        launch_info=launch_info(record),
        found_norads=found_norads(record),
    )
