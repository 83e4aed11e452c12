"""Audit reports and their summaries."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

from predator.job import Audit
from predator.metric import Metric, MetricType
from predator.tolerance import ToleranceRule


@dataclass
class AuditReport:
    """Result of auditing one metric."""

    audit_id: str = ""
    partition: str = ""
    group_value: str = ""
    table_urn: str = ""
    field_id: str = ""
    metric_name: Optional[Union[MetricType, str]] = None
    metric_value: float = 0.0
    condition: str = ""
    metadata: Optional[dict[str, Any]] = None
    tolerance_rules: list[ToleranceRule] = field(default_factory=list)
    pass_flag: bool = False
    event_timestamp: Optional[datetime] = None


class AuditGroup(list):
    """A list of audit reports that can be grouped by several keys."""

    def _group(self, key: Callable[[AuditReport], str]) -> dict[str, list[AuditReport]]:
        groups: dict[str, list[AuditReport]] = defaultdict(list)
        for report in self:
            groups[key(report)].append(report)
        return dict(groups)

    def by_partition_date(self) -> dict[str, list[AuditReport]]:
        return self._group(lambda r: r.partition)

    def by_group_value(self) -> dict[str, list[AuditReport]]:
        return self._group(lambda r: r.group_value)

    def by_field_id(self) -> dict[str, list[AuditReport]]:
        return self._group(lambda r: r.field_id)


def _round_metric_value(value: float) -> str:
    return f"{value:.3f}"


def _issue_message(report: AuditReport) -> str:
    name = str(report.metric_name or "").upper()
    field_info = f"OF {report.field_id.upper()} " if report.field_id else ""
    partition_info = f"IN PARTITION {report.partition}" if report.partition else ""
    condition_info = (
        f"\nCONDITION: {report.condition.upper()}"
        if report.metric_name == MetricType.INVALID_PCT
        else ""
    )
    tolerance_info = ", ".join(
        f"{str(rule.comparator).upper()} {rule.value:.2f}" for rule in report.tolerance_rules
    )
    return (
        f"{name} {field_info}IS NOT PASSED THE TOLERANCE {partition_info}{condition_info}"
        f"\nTolerance: {tolerance_info}"
        f"\nACTUAL VALUE: {_round_metric_value(report.metric_value)}"
    )


def form_issue_summary(audit_reports: Iterable[AuditReport]) -> str:
    """Describe every failed report, separated by blank lines."""
    return "\n\n".join(_issue_message(r) for r in audit_reports if not r.pass_flag)


@dataclass
class ValidatedMetric:
    """A metric checked against its tolerance rules."""

    metric: Metric
    tolerance_rules: list[ToleranceRule] = field(default_factory=list)
    pass_flag: bool = False


@dataclass
class AuditResult:
    """An audit job and its reports."""

    audit: Audit
    audit_reports: list[AuditReport] = field(default_factory=list)


@dataclass
class AuditSummary:
    """Summary of an audit."""

    is_pass: bool
    message: str = ""