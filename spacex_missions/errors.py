"""
errors.py
---------
Exceptions raised by the mission query core.

Not-found lookups are NOT exceptions: they come back as a `NotFound`
result (see results.py). Everything here is a real rejection.
"""

from __future__ import annotations

from typing import Any


class MissionQueryError(Exception):
    """Base class for every error raised by spacex_missions."""


# --- scalar codec ------------------------------------------------------------

class ScalarCodecError(MissionQueryError):
    """A temporal value was rejected while parsing or serializing."""


class InvalidTemporalValue(ScalarCodecError):
    def __init__(self, raw: Any, scalar: str = "EpochTime"):
        self.raw = raw
        self.scalar = scalar
        super().__init__(f"Invalid {scalar} value provided: {raw!r}")


class InvalidTemporalLiteralKind(ScalarCodecError):
    def __init__(self, kind: Any, scalar: str = "EpochTime"):
        self.kind = kind
        self.scalar = scalar
        super().__init__(
            f"Invalid {scalar} literal: expected an integer literal, got {kind}"
        )


# --- records / dataset ---------------------------------------------------------

class MalformedRecord(MissionQueryError):
    def __init__(self, mission_name: str, reason: str):
        self.mission_name = mission_name
        self.reason = reason
        super().__init__(f"Malformed record '{mission_name}': {reason}")


class DatasetError(MissionQueryError):
    """The dataset snapshot could not be read or parsed."""


# --- query boundary ----------------------------------------------------------

class UnknownEnumValue(MissionQueryError):
    def __init__(self, enum_name: str, token: Any, allowed):
        self.enum_name = enum_name
        self.token = token
        self.allowed = list(allowed)
        super().__init__(
            f"'{token}' is not a valid {enum_name}; expected one of {self.allowed}"
        )


class UnknownOperation(MissionQueryError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unknown query operation '{operation}'")


class InvalidArguments(MissionQueryError):
    """Arguments missing or of the wrong type for a query operation."""
