from datetime import datetime, timezone

from predator.metric import MetricType
from predator.profile_metric import ProfileMetric, group_profile_metrics_by_partition


def _metric(partition, ts):
    return ProfileMetric(
        profile_id="profile-abcd",
        table_urn="project.dataset.table",
        partition=partition,
        field_id="field1",
        metric_name=MetricType.COUNT,
        metric_value=3000.0,
        event_timestamp=ts,
    )


def test_group_by_partition_date():
    ts = datetime.now(timezone.utc)
    pm1 = _metric("2019-01-01", ts)
    pm2 = _metric("2019-01-02", ts)
    result = group_profile_metrics_by_partition([pm1, pm2])
    assert result == {"2019-01-01": [pm1], "2019-01-02": [pm2]}


def test_group_keeps_order_within_partition():
    ts = datetime.now(timezone.utc)
    pm1 = _metric("2019-01-01", ts)
    pm2 = _metric("2019-01-01", ts)
    pm2.field_id = "field2"
    result = group_profile_metrics_by_partition([pm1, pm2])
    assert [m.field_id for m in result["2019-01-01"]] == ["field1", "field2"]


def test_group_empty():
    assert group_profile_metrics_by_partition([]) == {}