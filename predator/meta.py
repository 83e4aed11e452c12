"""Table and field metadata used for profiling."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FieldMode(str, Enum):
    """Mode of a field."""

    NULLABLE = "NULLABLE"
    REQUIRED = "REQUIRED"
    REPEATED = "REPEATED"

    def __str__(self) -> str:
        return self.value


class FieldType(str, Enum):
    """Type of a field."""

    STRING = "STRING"
    BYTES = "BYTES"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    TIMESTAMP = "TIMESTAMP"
    RECORD = "RECORD"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    NUMERIC = "NUMERIC"
    GEOGRAPHY = "GEOGRAPHY"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value

    def is_numeric(self) -> bool:
        """Whether the field type holds numbers."""
        return self in (FieldType.INTEGER, FieldType.NUMERIC, FieldType.FLOAT)


class TimePartitioning(str, Enum):
    """Interval of time partitioning."""

    DAY = "DAY"
    HOUR = "HOUR"
    MONTH = "MONTH"
    YEAR = "YEAR"

    def __str__(self) -> str:
        return self.value


DEFAULT_PARTITION = "_PARTITIONTIME"

ROOT_LEVEL = 1


class TableSpecNotFoundError(LookupError):
    """Metadata of a table was not found."""

    def __init__(self, message: str = "metadata not found") -> None:
        super().__init__(message)


class FieldSpecNotFoundError(LookupError):
    """A field spec was not found."""

    def __init__(self, message: str = "fieldspec not found") -> None:
        super().__init__(message)


@dataclass
class FieldSpec:
    """A field of a table, possibly nested inside a record field."""

    name: str = ""
    field_type: Optional[FieldType] = None
    mode: Optional[FieldMode] = None
    level: int = 0
    parent: Optional["FieldSpec"] = field(default=None, repr=False, compare=False)
    fields: list["FieldSpec"] = field(default_factory=list)

    def _lineage(self) -> list["FieldSpec"]:
        lineage: list[FieldSpec] = []
        current: Optional[FieldSpec] = self
        while current is not None:
            lineage.append(current)
            current = current.parent
        lineage.reverse()
        return lineage

    def id(self) -> str:
        """Fully qualified, dot separated name of the field."""
        return ".".join(spec.name for spec in self._lineage())

    def from_root_path(self) -> list["FieldSpec"]:
        """Ancestors of this field ordered from the root, excluding the field itself."""
        return self._lineage()[:-1]


INGESTION_TIME_FIELD = FieldSpec(
    name=DEFAULT_PARTITION,
    field_type=FieldType.TIMESTAMP,
    mode=FieldMode.NULLABLE,
    level=0,
)


def field_name_key(field: Optional[FieldSpec]) -> str:  # noqa: F811
    """Sort key ordering field specs by name; a missing spec sorts first."""
    return field.name if field is not None else ""


@dataclass
class TableSpec:
    """A table and its fields."""

    project_name: str = ""
    dataset_name: str = ""
    table_name: str = ""
    partition_field: str = ""
    require_partition_filter: bool = False
    time_partitioning_type: Optional[TimePartitioning] = None
    labels: dict[str, str] = field(default_factory=dict)
    fields: list[FieldSpec] = field(default_factory=list)
    _fields_map: Optional[dict[str, FieldSpec]] = field(
        default=None, init=False, repr=False, compare=False
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def is_partitioned(self) -> bool:
        return self.partition_field != ""

    def table_id(self) -> str:
        """Fully qualified table name."""
        return f"{self.project_name}.{self.dataset_name}.{self.table_name}"

    def fields_flatten(self) -> list[FieldSpec]:
        """All fields, each followed by its nested fields, depth first."""
        result: list[FieldSpec] = []

        def visit(spec: FieldSpec) -> None:
            result.append(spec)
            for child in spec.fields:
                visit(child)

        for spec in self.fields:
            visit(spec)
        return result

    def get_field_spec_by_id(self, field_id: str) -> FieldSpec:
        """Field spec with the given fully qualified id."""
        if not self.fields:
            raise FieldSpecNotFoundError()
        with self._lock:
            if self._fields_map is None:
                self._fields_map = {spec.id(): spec for spec in self.fields_flatten()}
        try:
            return self._fields_map[field_id]
        except KeyError:
            raise FieldSpecNotFoundError() from None


def get_field_type_by_field_name(fields: Iterable[FieldSpec], field_name: str) -> FieldType:
    """Type of the first field with the given name."""
    for spec in fields:
        if spec.name == field_name:
            return spec.field_type
    raise FieldSpecNotFoundError()