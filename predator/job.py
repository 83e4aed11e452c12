"""Job entities: profile and audit tasks, their states and related helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional, Union


class StrategyType(str, Enum):
    """How the partitions to profile are chosen."""

    PARTITION = "partition"
    LAST_MODIFIED = "last_modified"
    FULL_SCAN = "full_scan"

    def __str__(self) -> str:
        return self.value


# A partition strategy carries a list of partitions, a last-modified strategy
# carries a timestamp string and a full scan carries nothing.
StrategyValue = Union[list, str, None]


@dataclass
class Strategy:
    """Profiling strategy and its configuration value."""

    type: StrategyType
    value: StrategyValue = None


def _as_string(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def _as_string_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{name} must be a list of strings")
    return list(value)


def _as_mapping(value: Any, name: str) -> Mapping:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{name} must be an object")
    return value


@dataclass
class Detail:
    """Configuration of a profile."""

    urn: str = ""
    strategy: Optional[Strategy] = None
    affected_partition: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray, Mapping]) -> "Detail":
        """Build a Detail from JSON text or an already decoded mapping."""
        if isinstance(data, (str, bytes, bytearray)):
            try:
                obj = json.loads(data)
            except json.JSONDecodeError as exc:
                raise ValueError(f"invalid detail json: {exc}") from exc
        else:
            obj = data
        obj = _as_mapping(obj, "detail")
        strategy = _as_mapping(obj.get("strategy"), "strategy")
        strategy_type = _as_string(strategy.get("type"), "strategy type")

        if strategy_type == StrategyType.PARTITION.value:
            parsed = Strategy(
                StrategyType.PARTITION,
                _as_string_list(strategy.get("value"), "strategy value"),
            )
        elif strategy_type == StrategyType.FULL_SCAN.value:
            parsed = Strategy(StrategyType.FULL_SCAN)
        elif strategy_type == StrategyType.LAST_MODIFIED.value:
            parsed = Strategy(
                StrategyType.LAST_MODIFIED,
                _as_string(strategy.get("value"), "strategy value"),
            )
        else:
            raise ValueError("unsupported StrategyValue")

        return cls(
            urn=_as_string(obj.get("urn"), "urn"),
            strategy=parsed,
            affected_partition=_as_string_list(obj.get("partition"), "partition"),
        )


class Mode(str):
    """Metrics mode of a profile; any string may be held, only some are valid."""

    INCREMENTAL: ClassVar[Mode]
    COMPLETE: ClassVar[Mode]

    def validate(self) -> None:
        """Raise ValueError unless this is a supported mode."""
        if self not in (Mode.INCREMENTAL, Mode.COMPLETE):
            raise ValueError(f"wrong Mode {str(self)}")


Mode.INCREMENTAL = Mode("incremental")
Mode.COMPLETE = Mode("complete")


class State(str, Enum):
    """State of a job."""

    CREATED = "created"
    IN_PROGRESS = "inprogress"
    COMPLETED = "completed"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class JobType(str, Enum):
    """Type of a job."""

    PROFILE = "profile"
    AUDIT = "audit"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class QueryType(str, Enum):
    """Type of a generated query."""

    STATISTICAL = "statistical"
    FIELD_LEVEL = "field_level"
    TABLE_LEVEL = "table_level"

    def __str__(self) -> str:
        return self.value


@dataclass
class Profile:
    """A profile task."""

    id: str = ""
    detail: Optional[Detail] = None
    status: Optional[State] = None
    message: str = ""
    event_timestamp: Optional[datetime] = None
    updated_timestamp: Optional[datetime] = None
    group_name: str = ""
    filter: str = ""
    mode: Mode = Mode("")
    urn: str = ""
    total_records: int = 0
    audit_timestamp: Optional[datetime] = None


@dataclass
class Audit:
    """A single audit task."""

    id: str = ""
    profile_id: str = ""
    state: Optional[State] = None
    message: str = ""
    detail: Optional[Detail] = None
    urn: str = ""
    total_records: int = 0
    event_timestamp: Optional[datetime] = None


@dataclass
class Diff:
    """Difference in content between two storages."""

    add: list[str] = field(default_factory=list)
    remove: list[str] = field(default_factory=list)
    update: list[str] = field(default_factory=list)

    def added_count(self) -> int:
        return len(self.add)

    def removed_count(self) -> int:
        return len(self.remove)

    def updated_count(self) -> int:
        return len(self.update)


def diff_between(source: list[str], destination: list[str]) -> Diff:
    """Entries to add, remove and update to go from destination to source."""
    source_set = set(source)
    destination_set = set(destination)
    return Diff(
        add=[item for item in source if item not in destination_set],
        remove=[item for item in destination if item not in source_set],
        update=[item for item in source if item in destination_set],
    )


@dataclass
class Query:
    """A generated SQL query for a table."""

    urn: str
    content: str
    type: QueryType