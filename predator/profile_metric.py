"""Single metrics produced by a profile job."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from predator.metric import Category, MetricType, Owner


@dataclass
class ProfileMetric:
    """A metric produced by a profile job."""

    id: str = ""
    profile_id: str = ""
    table_urn: str = ""
    partition: str = ""
    field_id: str = ""
    owner_type: Optional[Owner] = None
    category: Optional[Category] = None
    condition: str = ""
    metric_name: Optional[Union[MetricType, str]] = None
    metric_value: float = 0.0
    event_timestamp: Optional[datetime] = None


def group_profile_metrics_by_partition(
    profile_metrics: Iterable[ProfileMetric],
) -> dict[str, list[ProfileMetric]]:
    """Profile metrics keyed by partition."""
    groups: dict[str, list[ProfileMetric]] = defaultdict(list)
    for profile_metric in profile_metrics:
        groups[profile_metric.partition].append(profile_metric)
    return dict(groups)