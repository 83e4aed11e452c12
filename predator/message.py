"""Messages describing profile and audit results, and their builders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from predator.audit import AuditGroup, AuditReport
from predator.contracts import Message, MetadataStore, ProfileStore
from predator.job import Audit, Profile
from predator.meta import FieldSpecNotFoundError, TableSpec
from predator.metric import Finder, Metric, Owner, group_by_group_value


@dataclass
class Group:
    """Grouping column and the value of the group."""

    column: str = ""
    value: str = ""


@dataclass
class LogToleranceRule:
    """A tolerance rule in an audit result."""

    name: str = ""
    value: float = 0.0


@dataclass
class Result:
    """Audit result of one metric."""

    name: str = ""
    field_id: str = ""
    value: float = 0.0
    rules: list[LogToleranceRule] = field(default_factory=list)
    pass_flag: bool = False
    condition: str = ""


@dataclass
class ResultLogKey:
    """Key of an audit result message."""

    id: str = ""
    group: Optional[Group] = None
    event_timestamp: Optional[datetime] = None


@dataclass
class ResultLogMessage:
    """Value of an audit result message."""

    id: str = ""
    profile_id: str = ""
    urn: str = ""
    group: Optional[Group] = None
    event_timestamp: Optional[datetime] = None
    results: list[Result] = field(default_factory=list)


@dataclass
class LogMetric:
    """A metric in a profile message."""

    name: str = ""
    value: float = 0.0
    condition: str = ""


@dataclass
class ColumnMetric:
    """Metrics of one column."""

    id: str = ""
    type: str = ""
    metrics: list[LogMetric] = field(default_factory=list)


@dataclass
class MetricsLogKey:
    """Key of a profile metrics message."""

    id: str = ""
    group: Optional[Group] = None
    event_timestamp: Optional[datetime] = None


@dataclass
class MetricsLogMessage:
    """Value of a profile metrics message."""

    id: str = ""
    urn: str = ""
    event_timestamp: Optional[datetime] = None
    group: Optional[Group] = None
    filter: str = ""
    mode: str = ""
    table_metrics: list[LogMetric] = field(default_factory=list)
    column_metrics: list[ColumnMetric] = field(default_factory=list)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _audit_group(
    profile_store: ProfileStore, audit: Audit, reports: list[AuditReport]
) -> Group:
    profile = profile_store.get(audit.profile_id)
    group = Group(column=profile.group_name)
    if reports:
        group.value = reports[0].group_value
    return group


@dataclass
class AuditKeyBuilder:
    """Build the key of an audit result message."""

    audit_result: list[AuditReport] = field(default_factory=list)
    audit: Optional[Audit] = None
    profile_store: Optional[ProfileStore] = None

    def build(self) -> ResultLogKey:
        group = _audit_group(self.profile_store, self.audit, self.audit_result)
        return ResultLogKey(
            id=self.audit.id, group=group, event_timestamp=self.audit.event_timestamp
        )


def _audit_results(reports: Iterable[AuditReport]) -> list[Result]:
    return [
        Result(
            name=_text(report.metric_name),
            field_id=report.field_id,
            value=report.metric_value,
            rules=[
                LogToleranceRule(name=_text(rule.comparator), value=rule.value)
                for rule in report.tolerance_rules
            ],
            pass_flag=report.pass_flag,
            condition=report.condition,
        )
        for report in reports
    ]


@dataclass
class AuditValueBuilder:
    """Build the value of an audit result message."""

    audit_result: list[AuditReport] = field(default_factory=list)
    audit: Optional[Audit] = None
    profile_store: Optional[ProfileStore] = None

    def build(self) -> ResultLogMessage:
        group = _audit_group(self.profile_store, self.audit, self.audit_result)
        return ResultLogMessage(
            id=self.audit.id,
            profile_id=self.audit.profile_id,
            urn=self.audit.urn,
            group=group,
            event_timestamp=self.audit.event_timestamp,
            results=_audit_results(self.audit_result),
        )


def _profile_group(profile: Profile, metrics: list[Metric]) -> Group:
    group = Group(column=profile.group_name)
    if metrics:
        group.value = metrics[0].group_value
    return group


@dataclass
class ProfileKeyBuilder:
    """Build the key of a profile metrics message."""

    metrics: list[Metric] = field(default_factory=list)
    profile: Optional[Profile] = None

    def build(self) -> MetricsLogKey:
        return MetricsLogKey(
            id=self.profile.id,
            group=_profile_group(self.profile, self.metrics),
            event_timestamp=self.profile.event_timestamp,
        )


def _log_metric(metric: Metric) -> LogMetric:
    return LogMetric(name=_text(metric.type), value=metric.value, condition=metric.condition)


def _column_metric(field_id: str, table_spec: TableSpec) -> ColumnMetric:
    try:
        field_spec = table_spec.get_field_spec_by_id(field_id)
    except FieldSpecNotFoundError as err:
        raise FieldSpecNotFoundError(
            f"field ID: {field_id} is not found on table : {table_spec.table_id()} ,{err}"
        ) from err
    return ColumnMetric(id=field_id, type=_text(field_spec.field_type))


def _column_metrics(metrics: list[Metric], table_spec: TableSpec) -> list[ColumnMetric]:
    field_metrics = Finder(metrics).with_owner(Owner.FIELD).find()
    columns: dict[str, ColumnMetric] = {}
    for metric in field_metrics:
        if metric.field_id not in columns:
            columns[metric.field_id] = _column_metric(metric.field_id, table_spec)
    for metric in field_metrics:
        columns[metric.field_id].metrics.append(_log_metric(metric))
    return [columns[column_id] for column_id in sorted(columns)]


@dataclass
class ProfileValueBuilder:
    """Build the value of a profile metrics message."""

    metrics: list[Metric] = field(default_factory=list)
    profile: Optional[Profile] = None
    metadata_store: Optional[MetadataStore] = None

    def build(self) -> MetricsLogMessage:
        table_spec = self.metadata_store.get_metadata(self.profile.urn)
        message = MetricsLogMessage(
            id=self.profile.id,
            urn=self.profile.urn,
            event_timestamp=self.profile.event_timestamp,
            group=_profile_group(self.profile, self.metrics),
            filter=self.profile.filter,
            mode=str(self.profile.mode),
        )
        if not self.metrics:
            return message
        message.table_metrics = [
            _log_metric(m) for m in Finder(self.metrics).with_owner(Owner.TABLE).find()
        ]
        message.column_metrics = _column_metrics(self.metrics, table_spec)
        return message


@dataclass
class Provider:
    """Produce a message from a key builder and a value builder."""

    key_builder: Any = None
    value_builder: Any = None

    def get(self) -> Message:
        key = self.key_builder.build()
        value = self.value_builder.build()
        return Message(key=key, value=value)


@dataclass
class ProviderFactory:
    """Create message providers for profile and audit results, one per group."""

    profile_store: Optional[ProfileStore] = None
    metadata_store: Optional[MetadataStore] = None

    def create_profile_message(
        self, profile: Profile, metrics: Iterable[Metric]
    ) -> list[Provider]:
        return [
            Provider(
                key_builder=ProfileKeyBuilder(metrics=group, profile=profile),
                value_builder=ProfileValueBuilder(
                    metrics=group, profile=profile, metadata_store=self.metadata_store
                ),
            )
            for group in group_by_group_value(metrics)
        ]

    def create_audit_message(
        self, audit: Audit, audit_reports: Iterable[AuditReport]
    ) -> list[Provider]:
        per_group = AuditGroup(audit_reports).by_group_value()
        return [
            Provider(
                key_builder=AuditKeyBuilder(
                    audit_result=per_group[name], audit=audit, profile_store=self.profile_store
                ),
                value_builder=AuditValueBuilder(
                    audit_result=per_group[name], audit=audit, profile_store=self.profile_store
                ),
            )
            for name in sorted(per_group)
        ]