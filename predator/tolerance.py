"""Tolerances of quality metrics and spec validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from predator.metric import MetricType


class Comparator(str, Enum):
    """Comparator of a tolerance rule."""

    LESS_THAN = "less_than"
    LESS_THAN_EQ = "less_than_eq"
    MORE_THAN = "more_than"
    MORE_THAN_EQ = "more_than_eq"

    def __str__(self) -> str:
        return self.value


@dataclass
class ToleranceRule:
    """A comparator and the value the metric is compared with."""

    comparator: Union[Comparator, str]
    value: float


@dataclass
class Tolerance:
    """Tolerance of a quality metric."""

    id: str = ""
    table_urn: str = ""
    field_id: str = ""
    metric_name: Optional[Union[MetricType, str]] = None
    condition: str = ""
    metadata: Optional[dict[str, Any]] = None
    tolerance_rules: list[ToleranceRule] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ToleranceSpec:
    """All tolerances of one table."""

    urn: str
    tolerances: list[Tolerance] = field(default_factory=list)


class ToleranceNotFoundError(LookupError):
    """No tolerance exists for a table."""

    def __init__(self, message: str = "tolerance for tableID not found") -> None:
        super().__init__(message)


class SpecInvalidError(Exception):
    """A spec content is invalid; holds every reason found."""

    def __init__(self, urn: str, errors: list[BaseException]) -> None:
        self.urn = urn
        self.errors = list(errors)
        reasons = ",\n".join(str(err) for err in self.errors)
        super().__init__(f"{urn} spec is invalid, reason: {reasons}")


class UploadSpecValidationError(Exception):
    """Upload failed because of invalid specs; holds every spec error."""

    def __init__(self, errors: list[BaseException]) -> None:
        self.errors = list(errors)
        super().__init__(",\n".join(str(err) for err in self.errors))


def _chain(err: Optional[BaseException]):
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__


def is_spec_invalid_error(err: Optional[BaseException]) -> bool:
    """Whether err, or an error it was raised from, is a SpecInvalidError."""
    return any(isinstance(e, SpecInvalidError) for e in _chain(err))


def is_upload_spec_validation_error(err: Optional[BaseException]) -> bool:
    """Whether err, or an error it was raised from, is an UploadSpecValidationError."""
    return any(isinstance(e, UploadSpecValidationError) for e in _chain(err))