"""WHERE clause filters of generated SQL."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class DataType(str, Enum):
    """Data type of a partition column."""

    TIMESTAMP = "TIMESTAMP"
    DATE = "DATE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PartitionFilter:
    """Select data of one partition."""

    data_type: Union[DataType, str]
    partition_date: str
    partition_column: str

    def build(self) -> str:
        column = self.partition_column
        if self.data_type == DataType.TIMESTAMP:
            column = f"DATE({self.partition_column})"
        return f"{column} = '{self.partition_date}'"


@dataclass(frozen=True)
class NoFilter:
    """Filter nothing."""

    def build(self) -> str:
        return "TRUE"


@dataclass(frozen=True)
class AllPartitionFilter:
    """Select the data of every partition."""

    partition_column: str

    def build(self) -> str:
        return f"{self.partition_column} is not null"


@dataclass(frozen=True)
class CustomFilterExpression:
    """Filter by a custom SQL expression."""

    expression: str

    def build(self) -> str:
        return self.expression