"""Metric expressions of generated SQL."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from predator.meta import FieldMode

_EXPRESSION_SEPARATOR = " , "


class SqlMetricType(str, Enum):
    """Kind of aggregate computed by a metric expression."""

    COUNT = "COUNT"
    NULL_COUNT = "NULLCOUNT"
    SUM = "SUM"
    COUNT_FOR_REPEATED = "COUNTFORREPEATED"
    NULL_COUNT_FOR_REPEATED = "NULLCOUNTFORREPEATED"
    UNIQUE_COUNT = "UNIQUECOUNT"
    INVALID_COUNT = "INVALIDCOUNT"

    def __str__(self) -> str:
        return self.value


class MetricTypeNotFoundError(LookupError):
    """The metric type has no SQL template."""

    def __init__(self, message: str = "error : Metric type is not found") -> None:
        super().__init__(message)


_TEMPLATES = {
    SqlMetricType.COUNT: "count({arg}) as {alias}",
    SqlMetricType.NULL_COUNT: "countif({arg} is null) as {alias}",
    SqlMetricType.SUM: "sum(cast({arg} as float64)) as {alias}",
    SqlMetricType.COUNT_FOR_REPEATED: "countif(array_length({arg})>0) as {alias}",
    SqlMetricType.NULL_COUNT_FOR_REPEATED: "countif(array_length({arg})=0) as {alias}",
    SqlMetricType.UNIQUE_COUNT: "count(distinct {arg}) as {alias}",
    SqlMetricType.INVALID_COUNT: "countif({arg}) as {alias}",
}

_SINGLE_MODES = (FieldMode.NULLABLE, FieldMode.REQUIRED)


def parse_metric_type(metric_type: str, mode: Optional[FieldMode]) -> Optional[SqlMetricType]:
    """SQL metric type for a metric type and field mode, or None when there is none."""
    if metric_type == "count":
        if mode == FieldMode.REPEATED:
            return SqlMetricType.COUNT_FOR_REPEATED
        if mode in _SINGLE_MODES:
            return SqlMetricType.COUNT
        return None
    if metric_type == "nullcount":
        if mode == FieldMode.REPEATED:
            return SqlMetricType.NULL_COUNT_FOR_REPEATED
        if mode in _SINGLE_MODES:
            return SqlMetricType.NULL_COUNT
        return None
    if metric_type == "sum":
        return SqlMetricType.SUM
    if metric_type == "uniquecount":
        return SqlMetricType.UNIQUE_COUNT
    if metric_type == "invalidcount":
        return SqlMetricType.INVALID_COUNT
    return None


@dataclass
class MetricExpression:
    """An aggregate over an argument, with the alias of its result column."""

    arg: str
    alias: str
    metric_type: Union[SqlMetricType, str]

    def build(self) -> str:
        """SQL text of the expression."""
        template = _TEMPLATES.get(self.metric_type)
        if template is None:
            raise MetricTypeNotFoundError()
        return template.format(arg=self.arg, alias=self.alias)


def build_metric_expressions(expressions: Iterable[MetricExpression]) -> str:
    """SQL text of several metric expressions, joined."""
    return _EXPRESSION_SEPARATOR.join(expression.build() for expression in expressions)