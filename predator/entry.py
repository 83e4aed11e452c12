"""Immutable context attached to log entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from predator.job import JobType

_JOB_ID = "job_id"
_PARTITION = "partition"
_TABLE_URN = "table_urn"
_JOB_TYPE = "job_type"
_STATUS = "status"
_GROUP = "group"


@dataclass(frozen=True)
class Entry:
    """Key/value information for logging; each with_* call returns a new entry."""

    _values: dict[str, Any] = field(default_factory=dict)

    def _with(self, key: str, value: Any) -> "Entry":
        return Entry({**self._values, key: value})

    def _text(self, key: str) -> str:
        value = self._values.get(key)
        return value if isinstance(value, str) else ""

    def with_job_id(self, job_id: str) -> "Entry":
        return self._with(_JOB_ID, job_id)

    def with_partition(self, partition: str) -> "Entry":
        return self._with(_PARTITION, partition)

    def with_table_urn(self, table_urn: str) -> "Entry":
        return self._with(_TABLE_URN, table_urn)

    def with_job_type(self, job_type: JobType) -> "Entry":
        return self._with(_JOB_TYPE, job_type)

    def with_status(self, status: str) -> "Entry":
        return self._with(_STATUS, status)

    def with_group(self, group: str) -> "Entry":
        return self._with(_GROUP, group)

    @property
    def job_id(self) -> str:
        return self._text(_JOB_ID)

    @property
    def partition(self) -> str:
        return self._text(_PARTITION)

    @property
    def table_urn(self) -> str:
        return self._text(_TABLE_URN)

    @property
    def status(self) -> str:
        return self._text(_STATUS)

    @property
    def group(self) -> str:
        return self._text(_GROUP)

    @property
    def job_type(self) -> Union[JobType, str]:
        """The job type, "" when unset and UNKNOWN when set to something else."""
        if _JOB_TYPE not in self._values or self._values[_JOB_TYPE] is None:
            return ""
        value = self._values[_JOB_TYPE]
        return value if isinstance(value, JobType) else JobType.UNKNOWN