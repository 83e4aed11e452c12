"""Persistence of profile metrics in an SQL database."""

from __future__ import annotations

import json
import sqlite3
from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any, Optional, TypeVar, Union

from predator.contracts import NoProfileMetricFoundError
from predator.job import Profile
from predator.metric import Category, Metric, MetricType, Owner

_COLUMNS = (
    "id",
    "profile_id",
    "group_value",
    "field_id",
    "owner_type",
    "metric_name",
    "metric_value",
    "condition",
    "category",
    "metadata",
    "created_at",
)

_E = TypeVar("_E", bound=Enum)


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _encode_time(value: Optional[datetime]) -> str:
    return "" if value is None else value.isoformat()


def _decode_time(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _enum_or_none(enum_type: type[_E], value: Optional[str]) -> Optional[Union[_E, str]]:
    if not value:
        return None
    try:
        return enum_type(value)
    except ValueError:
        return value


def _to_row(profile: Profile, metric: Metric) -> tuple:
    metadata = None
    if metric.metadata is not None:
        metadata = json.dumps(metric.metadata, separators=(",", ":"))
    return (
        metric.id,
        profile.id,
        metric.group_value,
        metric.field_id,
        _text(metric.owner),
        _text(metric.type),
        float(metric.value),
        metric.condition,
        _text(metric.category),
        metadata,
        _encode_time(metric.timestamp),
    )


def _from_row(row: tuple) -> Metric:
    record = dict(zip(_COLUMNS, row))
    metadata = json.loads(record["metadata"]) if record["metadata"] is not None else None
    return Metric(
        id=record["id"] or "",
        field_id=record["field_id"] or "",
        type=_enum_or_none(MetricType, record["metric_name"]),
        category=_enum_or_none(Category, record["category"]),
        owner=_enum_or_none(Owner, record["owner_type"]),
        group_value=record["group_value"] or "",
        value=record["metric_value"] if record["metric_value"] is not None else 0.0,
        condition=record["condition"] or "",
        metadata=metadata,
        timestamp=_decode_time(record["created_at"]),
    )


class SqlMetricStore:
    """Store metrics of profile jobs in one table of an SQLite database."""

    def __init__(self, connection: sqlite3.Connection, table_name: str) -> None:
        self._connection = connection
        self._table = _quote(table_name)

    def create_table(self) -> None:
        """Create the metric table when it does not exist."""
        with self._connection:
            self._connection.execute(
                f"CREATE TABLE IF NOT EXISTS {self._table} ("
                '"id" TEXT, "profile_id" TEXT, "group_value" TEXT, "field_id" TEXT, '
                '"owner_type" TEXT, "metric_name" TEXT, "metric_value" REAL, '
                '"condition" TEXT, "category" TEXT, "metadata" TEXT, "created_at" TEXT)'
            )

    def store(self, profile: Profile, metrics: Iterable[Metric]) -> None:
        """Insert the metrics of a profile."""
        rows = [_to_row(profile, metric) for metric in metrics]
        if not rows:
            return
        columns = ", ".join(_quote(c) for c in _COLUMNS)
        placeholders = ", ".join("?" for _ in _COLUMNS)
        with self._connection:
            self._connection.executemany(
                f"INSERT INTO {self._table} ({columns}) VALUES ({placeholders})", rows
            )

    def get_metrics_by_profile_id(self, profile_id: str) -> list[Metric]:
        """Metrics of a profile in insertion order."""
        columns = ", ".join(_quote(c) for c in _COLUMNS)
        rows = self._connection.execute(
            f'SELECT {columns} FROM {self._table} WHERE "profile_id" = ? ORDER BY rowid',
            (profile_id,),
        ).fetchall()
        if not rows:
            raise NoProfileMetricFoundError()
        return [_from_row(row) for row in rows]