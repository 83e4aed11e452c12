"""Persistence of profile jobs in an SQL database."""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime
from typing import Optional

from predator.contracts import (
    ProfileInvalidError,
    ProfileNotFoundError,
    Status,
    StatusNotFoundError,
    StatusStore,
)
from predator.job import JobType, Mode, Profile, State

_COLUMNS = (
    "id",
    "urn",
    "group_name",
    "filter",
    "mode",
    "total_records",
    "audit_time",
    "event_timestamp",
)


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _encode_time(value: Optional[datetime]) -> str:
    return "" if value is None else value.isoformat()


def _decode_time(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _state_text(state: Optional[State]) -> str:
    return "" if state is None else str(state)


def _parse_state(value: str) -> Optional[State]:
    if not value:
        return None
    try:
        return State(value)
    except ValueError:
        return None


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def _to_row(profile: Profile) -> tuple:
    return (
        profile.id,
        profile.urn,
        profile.group_name,
        profile.filter,
        str(profile.mode),
        profile.total_records,
        _encode_time(profile.audit_timestamp),
        _encode_time(profile.event_timestamp),
    )


def _to_profile(row: tuple, status: Status) -> Profile:
    record = dict(zip(_COLUMNS, row))
    return Profile(
        id=record["id"],
        event_timestamp=_decode_time(record["event_timestamp"]),
        status=_parse_state(status.status),
        message=status.message,
        urn=record["urn"] or "",
        group_name=record["group_name"] or "",
        filter=record["filter"] or "",
        mode=Mode(record["mode"] or ""),
        total_records=record["total_records"] or 0,
        audit_timestamp=_decode_time(record["audit_time"]),
        updated_timestamp=status.event_timestamp,
    )


class SqlProfileStore:
    """Store profile jobs in an SQLite table and their status in a status store."""

    def __init__(
        self, connection: sqlite3.Connection, table_name: str, status_store: StatusStore
    ) -> None:
        self._connection = connection
        self._table = _quote(table_name)
        self._status_store = status_store

    def create_table(self) -> None:
        """Create the profile table when it does not exist."""
        with self._connection:
            self._connection.execute(
                f"CREATE TABLE IF NOT EXISTS {self._table} ("
                '"id" TEXT PRIMARY KEY, "urn" TEXT NOT NULL, "group_name" TEXT, '
                '"filter" TEXT, "mode" TEXT, "total_records" INTEGER, '
                '"audit_time" TEXT, "event_timestamp" TEXT NOT NULL)'
            )

    def create(self, profile: Profile) -> Profile:
        """Insert a profile and record its created status."""
        row = _to_row(profile)
        columns = ", ".join(_quote(c) for c in _COLUMNS)
        placeholders = ", ".join("?" for _ in _COLUMNS)
        with self._connection:
            self._connection.execute(
                f"INSERT INTO {self._table} ({columns}) VALUES ({placeholders})", row
            )

        status = Status(
            job_id=profile.id,
            job_type=JobType.PROFILE,
            message=profile.message,
            status=str(State.CREATED),
        )
        self._status_store.store(status)
        return _to_profile(row, status)

    def update(self, profile: Profile) -> None:
        """Update the record count and append the profile's current status."""
        status = Status(
            job_id=profile.id,
            job_type=JobType.PROFILE,
            message=profile.message,
            status=_state_text(profile.status),
        )
        with self._connection:
            self._connection.execute(
                f'UPDATE {self._table} SET "total_records" = ? WHERE "id" = ?',
                (profile.total_records, profile.id),
            )
        self._status_store.store(status)
        profile.updated_timestamp = status.event_timestamp

    def get(self, profile_id: str) -> Profile:
        """Profile with its latest status."""
        if not _is_uuid(profile_id):
            raise ValueError("invalid ID")

        columns = ", ".join(_quote(c) for c in _COLUMNS)
        row = self._connection.execute(
            f'SELECT {columns} FROM {self._table} WHERE "id" = ? LIMIT 1', (profile_id,)
        ).fetchone()
        if row is None:
            raise ProfileNotFoundError()

        try:
            status = self._status_store.get_latest_status_by_id_and_type(
                profile_id, JobType.PROFILE
            )
        except StatusNotFoundError as err:
            raise ProfileInvalidError() from err
        return _to_profile(row, status)