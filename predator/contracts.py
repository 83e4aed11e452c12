"""Shared errors, records and store interfaces of profile and audit jobs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Protocol, Union

from predator.job import JobType, Profile
from predator.meta import TableSpec
from predator.metric import MetricType, Spec


class PredatorError(Exception):
    """Base of the errors raised by stores and services."""

    default_message = "predator error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class UniqueConstraintNotFoundError(PredatorError, LookupError):
    default_message = "unique constraint not found"


class TableMetadataNotFoundError(PredatorError, LookupError):
    default_message = "table metadata not found"


class StatusNotFoundError(PredatorError, LookupError):
    default_message = "status not found"


class ProfileNotFoundError(PredatorError, LookupError):
    default_message = "profile not found"


class ProfileInvalidError(PredatorError):
    """A profile has no status in its status log."""

    default_message = "profile invalid"


class AuditNotFoundError(PredatorError, LookupError):
    default_message = "audit not found"


class AuditResultNotFoundError(PredatorError, LookupError):
    default_message = "audit result not found"


class AuditIDInvalidError(PredatorError):
    """An audit was accessed through a profile it does not belong to."""

    default_message = "error audit not belong to profile"


class NoProfileMetricFoundError(PredatorError, LookupError):
    default_message = "no profile metric found"


class PartitionExpressionNotSupportedError(PredatorError):
    default_message = "partition expression is not supported for this table"


@dataclass
class Status:
    """Status of any task."""

    id: str = ""
    job_id: str = ""
    job_type: Optional[Union[JobType, str]] = None
    status: str = ""
    message: str = ""
    event_timestamp: Optional[datetime] = None


@dataclass
class ProfileConfig:
    """What a profiling run works on."""

    profile_id: str = ""
    table_spec: Optional[TableSpec] = None
    metric_specs: list[Spec] = field(default_factory=list)
    partition: str = ""


@dataclass
class MetricResultIdentifier:
    """Identifies metric results besides their ID."""

    table_urn: str = ""
    start_date: str = ""
    end_date: str = ""


@dataclass
class MetricQuery:
    """Field selector to query metrics."""

    profile_id: str = ""
    partition: str = ""
    metric_types: list[MetricType] = field(default_factory=list)
    urn: str = ""


class PublisherType(str, Enum):
    """Supported publishers."""

    KAFKA = "kafka"
    CONSOLE = "console"
    DUMMY = "none"

    def __str__(self) -> str:
        return self.value


@dataclass
class Message:
    """A key and value pair to be published."""

    key: Any = None
    value: Any = None


@dataclass
class SinkConfig:
    """Configuration of a sink."""

    type: Union[PublisherType, str]
    broker: list[str] = field(default_factory=list)
    topic: str = ""


_GIT_SSH_URL = re.compile(r"git@.+\.git")


def is_git_ssh_url(url: str) -> bool:
    """Whether url has the supported git@host:group/repo.git form."""
    return _GIT_SSH_URL.fullmatch(url) is not None


@dataclass
class GitInfo:
    """A git repository holding specs.

    An empty commit_id means the latest revision; path_prefix is the directory
    inside the repository where the spec layout starts.
    """

    url: str
    commit_id: str = ""
    path_prefix: str = ""


@dataclass
class BigqueryJob:
    """A bigquery job started by a profile task."""

    id: str = ""
    profile_id: str = ""
    bq_id: str = ""
    created_at: Optional[datetime] = None


class StatusStore(Protocol):
    """Stores the status log of profile and audit jobs."""

    def store(self, status: Status) -> None:
        ...

    def get_latest_status_by_id_and_type(self, job_id: str, job_type: JobType) -> Status:
        ...

    def get_status_log_by_id_and_type(self, job_id: str, job_type: JobType) -> list[Status]:
        ...


class ProfileStore(Protocol):
    """Stores profile jobs."""

    def create(self, profile: Profile) -> Profile:
        ...

    def update(self, profile: Profile) -> None:
        ...

    def get(self, profile_id: str) -> Profile:
        ...


class MetadataStore(Protocol):
    """Provides table metadata needed for profiling."""

    def get_metadata(self, table_id: str) -> TableSpec:
        ...

    def get_unique_constraints(self, table_id: str) -> list[str]:
        ...


class MessageProvider(Protocol):
    """Produces a message to be published."""

    def get(self) -> Message:
        ...


class Sink(Protocol):
    """Destination of published messages."""

    def sink(self, message: Message) -> None:
        ...

    def close(self) -> None:
        ...