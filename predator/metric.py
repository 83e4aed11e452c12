"""Metrics produced by profiling, their specs and lookup helpers."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union


class MetricType(str, Enum):
    """Type of a metric."""

    NULLNESS_PCT = "nullness_pct"
    DUPLICATION_PCT = "duplication_pct"
    TREND_INCONSISTENCY_PCT = "trend_inconsistency_pct"
    ROW_COUNT = "row_count"
    INVALID_PCT = "invalid_pct"

    NULL_COUNT = "nullcount"
    COUNT = "count"
    UNIQUE_COUNT = "uniquecount"
    SUM = "sum"
    INVALID_COUNT = "invalidcount"

    def __str__(self) -> str:
        return self.value


class Category(str, Enum):
    """Business perspective of a metric."""

    BASIC = "basic"
    QUALITY = "quality"

    def __str__(self) -> str:
        return self.value


class Owner(str, Enum):
    """What a metric is measured on."""

    TABLE = "table"
    FIELD = "field"

    def __str__(self) -> str:
        return self.value


TYPES_BASIC_METRIC = (
    MetricType.NULL_COUNT,
    MetricType.COUNT,
    MetricType.UNIQUE_COUNT,
    MetricType.SUM,
    MetricType.INVALID_COUNT,
)

TYPES_DATA_QUALITY = (
    MetricType.NULLNESS_PCT,
    MetricType.DUPLICATION_PCT,
    MetricType.TREND_INCONSISTENCY_PCT,
    MetricType.ROW_COUNT,
    MetricType.INVALID_PCT,
)

TYPE_ALL = TYPES_DATA_QUALITY + TYPES_BASIC_METRIC

_TYPE_CATEGORY = {
    MetricType.NULL_COUNT: Category.BASIC,
    MetricType.UNIQUE_COUNT: Category.BASIC,
    MetricType.COUNT: Category.BASIC,
    MetricType.INVALID_COUNT: Category.BASIC,
    MetricType.SUM: Category.QUALITY,
    MetricType.NULLNESS_PCT: Category.QUALITY,
    MetricType.DUPLICATION_PCT: Category.QUALITY,
    MetricType.TREND_INCONSISTENCY_PCT: Category.QUALITY,
    MetricType.ROW_COUNT: Category.QUALITY,
    MetricType.INVALID_PCT: Category.QUALITY,
}

UNIQUE_FIELDS = "uniquefields"


def get_category(metric_type: MetricType) -> Optional[Category]:
    """Category of a metric type, or None when the type is unknown."""
    return _TYPE_CATEGORY.get(metric_type)


@dataclass
class Metric:
    """Statistical measurement of a table resource."""

    id: str = ""
    field_id: str = ""
    type: Optional[MetricType] = None
    category: Optional[Category] = None
    owner: Optional[Owner] = None
    partition: str = ""
    metadata: Optional[dict[str, Any]] = None
    group_value: str = ""
    value: float = 0.0
    condition: str = ""
    timestamp: Optional[datetime] = None


def new_metric(
    field_id: str,
    metric_type: MetricType,
    category: Category,
    value: float,
    timestamp: datetime,
) -> Metric:
    """Create a metric; it is owned by the table when field_id is empty."""
    return Metric(
        field_id=field_id,
        type=metric_type,
        category=category,
        owner=Owner.FIELD if field_id else Owner.TABLE,
        value=value,
        timestamp=timestamp,
    )


class Finder:
    """Find metrics matching every criterion added with the with_* methods."""

    def __init__(self, metrics: Iterable[Metric]) -> None:
        self._metrics = list(metrics)
        self._matchers: list[Callable[[Metric], bool]] = []

    def _add(self, matcher: Callable[[Metric], bool]) -> "Finder":
        self._matchers.append(matcher)
        return self

    def with_id(self, metric_id: str) -> "Finder":
        return self._add(lambda m: m.id == metric_id)

    def with_field_id(self, field_id: str) -> "Finder":
        return self._add(lambda m: m.field_id == field_id)

    def with_type(self, metric_type: MetricType) -> "Finder":
        return self._add(lambda m: m.type == metric_type)

    def with_owner(self, owner: Owner) -> "Finder":
        return self._add(lambda m: m.owner == owner)

    def with_category(self, category: Category) -> "Finder":
        return self._add(lambda m: m.category == category)

    def with_partition(self, partition: str) -> "Finder":
        return self._add(lambda m: m.partition == partition)

    def with_condition(self, condition: str) -> "Finder":
        return self._add(lambda m: m.condition == condition)

    def _matches(self, metric: Metric) -> bool:
        return all(matcher(metric) for matcher in self._matchers)

    def find(self) -> list[Metric]:
        """All matching metrics, in their original order."""
        return [m for m in self._metrics if self._matches(m)]

    def find_one(self) -> Optional[Metric]:
        """First matching metric, or None."""
        return next((m for m in self._metrics if self._matches(m)), None)


def group_by_partition_as_map(metrics: Iterable[Metric]) -> dict[str, list[Metric]]:
    """Metrics keyed by partition."""
    groups: dict[str, list[Metric]] = defaultdict(list)
    for metric in metrics:
        groups[metric.partition].append(metric)
    return dict(groups)


def group_by_partition(metrics: Iterable[Metric]) -> list[list[Metric]]:
    """Metrics grouped by partition, groups ordered by partition."""
    groups = group_by_partition_as_map(metrics)
    return [groups[key] for key in sorted(groups)]


def group_by_group_value(metrics: Iterable[Metric]) -> list[list[Metric]]:
    """Metrics grouped by group value, groups ordered by group value."""
    groups: dict[str, list[Metric]] = defaultdict(list)
    for metric in metrics:
        groups[metric.group_value].append(metric)
    return [groups[key] for key in sorted(groups)]


@dataclass
class Spec:
    """Specification of a metric to be generated by the profiler or auditor."""

    name: Union[MetricType, str]
    field_id: str = ""
    table_id: str = ""
    condition: str = ""
    owner: Optional[Owner] = None
    metadata: Optional[dict[str, Any]] = None
    optional: bool = False


def find_specs_by_field_id(specs: Iterable[Spec], field_id: str) -> list[Spec]:
    """Specs for a field; raises LookupError when there are none."""
    found = [spec for spec in specs if spec.field_id == field_id]
    if not found:
        raise LookupError(f"metric spec with field id {field_id} not found")
    return found