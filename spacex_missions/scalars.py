"""
scalars.py
----------
Temporal scalar codecs for the query boundary.

Two views of the same instant (canonically a Unix epoch in seconds):
- EpochTime:    numbers pass through unchanged once validated
- ISODateTime:  always normalized to YYYY-MM-DDTHH:MM:SS.mmmZ

Each codec offers parse_literal (value written inline in a query),
parse_value (bound variable) and serialize (outgoing response value).
All three reject anything that does not land strictly after 1970-01-01T00:00:00Z.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import pandas as pd

from spacex_missions.errors import InvalidTemporalLiteralKind, InvalidTemporalValue

_INT_TEXT = re.compile(r"^[+-]?\d+$")
# a calendar date must lead; rules out relative words like "now" or "today"
_ISO_DATE = re.compile(r"^[+-]?\d{4,}-\d{2}-\d{2}")
_EPOCH = pd.Timestamp(0, tz="UTC")
_ISO_MAX = pd.Timestamp("9999-12-31T23:59:59.999", tz="UTC")

Number = Union[int, float]


class LiteralKind(str, Enum):
    INT = "IntValue"
    FLOAT = "FloatValue"
    STRING = "StringValue"
    BOOLEAN = "BooleanValue"
    NULL = "NullValue"
    ENUM = "EnumValue"


@dataclass(frozen=True)
class LiteralNode:
    """A literal as it appears in query text: its syntactic kind + source text."""

    kind: LiteralKind
    value: Any = None


# --- shared date construction ------------------------------------------------

def to_timestamp(raw: Any, scalar: str = "EpochTime") -> pd.Timestamp:
    """Build a UTC timestamp from `raw`, or raise InvalidTemporalValue.

    Numbers (and integer literal text) are epoch seconds; other strings are
    parsed as ISO-8601.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidTemporalValue(raw, scalar)
    try:
        if isinstance(raw, (int, float)):
            ts = pd.Timestamp(raw, unit="s", tz="UTC")
        elif isinstance(raw, str) and _INT_TEXT.match(raw.strip()):
            ts = pd.Timestamp(int(raw.strip()), unit="s", tz="UTC")
        elif isinstance(raw, str) and _ISO_DATE.match(raw.strip()):
            ts = pd.to_datetime(raw.strip(), utc=True, format="ISO8601", errors="coerce")
        else:
            raise InvalidTemporalValue(raw, scalar)
        if pd.isna(ts) or not ts > _EPOCH:
            raise InvalidTemporalValue(raw, scalar)
    except (pd.errors.OutOfBoundsDatetime, ValueError, OverflowError, TypeError):
        raise InvalidTemporalValue(raw, scalar) from None
    return ts


def format_iso(ts: pd.Timestamp) -> str:
    return ts.strftime("%Y-%m-%dT%H:%M:%S") + ".%03dZ" % (ts.microsecond // 1000)


# --- codecs ------------------------------------------------------------------

class TemporalScalar:
    name = ""
    description = ""

    def parse_literal(self, node: LiteralNode) -> Any:
        raise NotImplementedError

    def parse_value(self, value: Any) -> Any:
        raise NotImplementedError

    def serialize(self, value: Any) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class EpochTime(TemporalScalar):
    name = "EpochTime"
    description = "Epoch representation of a date"

    def _validated(self, value: Any) -> Number:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidTemporalValue(value, self.name)
        # no calendar range here; only the sign and finiteness matter
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidTemporalValue(value, self.name)
        if value <= 0:
            raise InvalidTemporalValue(value, self.name)
        return value

    def parse_literal(self, node: LiteralNode) -> int:
        if node.kind is not LiteralKind.INT:
            raise InvalidTemporalLiteralKind(node.kind.value, self.name)
        try:
            value = int(node.value)
        except (TypeError, ValueError):
            raise InvalidTemporalValue(node.value, self.name) from None
        return self._validated(value)

    def parse_value(self, value: Any) -> Number:
        return self._validated(value)

    def serialize(self, value: Any) -> Number:
        return self._validated(value)


class ISODateTime(TemporalScalar):
    name = "ISODateTime"
    description = "ISO-8601 string"

    def _normalized(self, value: Any) -> str:
        ts = to_timestamp(value, self.name)
        # a four-digit year is the most YYYY-MM-DD can carry
        if ts > _ISO_MAX:
            raise InvalidTemporalValue(value, self.name)
        return format_iso(ts)

    def parse_literal(self, node: LiteralNode) -> str:
        return self._normalized(node.value)

    def parse_value(self, value: Any) -> str:
        return self._normalized(value)

    def serialize(self, value: Any) -> str:
        return self._normalized(value)


EPOCH_TIME = EpochTime()
ISO_DATETIME = ISODateTime()
