"""Date and timestamp expressions of generated SQL."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum
from typing import Optional, Protocol, Union


class Expression(Protocol):
    """Anything that renders to an SQL expression."""

    def build(self) -> str:
        ...


class TruncType(str, Enum):
    """Truncation unit of DATE_TRUNC() and TIMESTAMP_TRUNC()."""

    HOUR = "HOUR"
    DAY = "DAY"
    MONTH = "MONTH"
    YEAR = "YEAR"

    def __str__(self) -> str:
        return self.value


Timezone = Union[str, tzinfo, None]


def _double_quote(value: str) -> str:
    return f'"{value}"'


def _timezone_name(tz: Timezone) -> str:
    if tz is None:
        return "UTC"
    if isinstance(tz, str):
        return tz
    key = getattr(tz, "key", None)
    if key:
        return key
    return tz.tzname(None) or str(tz)


@dataclass(frozen=True)
class TimestampValue:
    """A timestamp literal."""

    value: str

    def build(self) -> str:
        return _double_quote(self.value)


@dataclass(frozen=True)
class FieldIdentifier:
    """A reference to a column."""

    field_id: str

    def build(self) -> str:
        return self.field_id


@dataclass(frozen=True)
class Date:
    """DATE() function, either of a timestamp expression or of year, month and day."""

    year: int = 0
    month: int = 0
    day: int = 0
    timestamp_expr: Optional[Expression] = None
    timezone: Timezone = None

    def build(self) -> str:
        if self.timestamp_expr is not None:
            tz = _double_quote(_timezone_name(self.timezone))
            return f"DATE({self.timestamp_expr.build()},{tz})"
        return f"DATE({self.year},{self.month},{self.day})"


@dataclass(frozen=True)
class DateTrunc:
    """DATE_TRUNC() function."""

    target: Expression
    truncate_type: Union[TruncType, str]

    def build(self) -> str:
        return f"DATE_TRUNC({self.target.build()},{str(self.truncate_type)})"


@dataclass(frozen=True)
class TimestampTrunc:
    """TIMESTAMP_TRUNC() function."""

    timestamp_expr: Expression
    truncate_type: Union[TruncType, str]
    timezone: Timezone = None

    def build(self) -> str:
        target = self.timestamp_expr.build()
        tz = _double_quote(_timezone_name(self.timezone))
        return f"TIMESTAMP_TRUNC({target},{str(self.truncate_type)},{tz})"