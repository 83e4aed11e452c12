import json

import pytest

from predator.job import (
    Detail,
    Diff,
    JobType,
    Mode,
    Profile,
    State,
    StrategyType,
    diff_between,
)


def test_diff_between_calculates_diff():
    source_urns = [
        "sample-project1.dataset_a.table_x",
        "sample-project2.dataset_b.table_x",
    ]
    dest_urns = [
        "sample-project1.dataset_a.table_x",
        "sample-project1.dataset_c.table_x",
        "sample-project1.dataset_d.table_x",
    ]
    expected = Diff(
        add=["sample-project2.dataset_b.table_x"],
        remove=["sample-project1.dataset_c.table_x", "sample-project1.dataset_d.table_x"],
        update=["sample-project1.dataset_a.table_x"],
    )

    diff = diff_between(source_urns, dest_urns)

    assert diff.added_count() == 1
    assert diff.removed_count() == 2
    assert diff.updated_count() == 1
    assert diff == expected


def test_diff_between_empty_inputs():
    diff = diff_between([], [])
    assert diff == Diff()


def test_detail_from_json_partition_strategy():
    data = json.dumps(
        {
            "urn": "p.d.t",
            "strategy": {"type": "partition", "value": ["2019-01-01", "2019-01-02"]},
            "partition": ["2019-01-01"],
        }
    )
    detail = Detail.from_json(data)
    assert detail.urn == "p.d.t"
    assert detail.strategy.type is StrategyType.PARTITION
    assert detail.strategy.value == ["2019-01-01", "2019-01-02"]
    assert detail.affected_partition == ["2019-01-01"]


def test_detail_from_json_full_scan_strategy():
    detail = Detail.from_json({"urn": "p.d.t", "strategy": {"type": "full_scan"}})
    assert detail.strategy.type is StrategyType.FULL_SCAN
    assert detail.strategy.value is None
    assert detail.affected_partition == []


def test_detail_from_json_last_modified_strategy():
    detail = Detail.from_json(
        b'{"urn": "p.d.t", "strategy": {"type": "last_modified", "value": "2020-01-01T00:00:00Z"}}'
    )
    assert detail.strategy.type is StrategyType.LAST_MODIFIED
    assert detail.strategy.value == "2020-01-01T00:00:00Z"


def test_detail_from_json_unsupported_strategy():
    with pytest.raises(ValueError, match="unsupported StrategyValue"):
        Detail.from_json('{"urn": "p.d.t", "strategy": {"type": "other"}}')


def test_detail_from_json_invalid_json():
    with pytest.raises(ValueError):
        Detail.from_json("{not json")


def test_detail_from_json_wrong_value_type():
    with pytest.raises(ValueError):
        Detail.from_json({"strategy": {"type": "partition", "value": "2019-01-01"}})


@pytest.mark.parametrize("mode", [Mode.INCREMENTAL, Mode.COMPLETE, Mode("complete")])
def test_mode_validate_accepts_supported(mode):
    mode.validate()
    assert mode in ("incremental", "complete")


def test_mode_validate_rejects_unknown():
    with pytest.raises(ValueError, match="wrong Mode weekly"):
        Mode("weekly").validate()


def test_enum_string_values():
    assert str(State.IN_PROGRESS) == "inprogress"
    assert State("completed") is State.COMPLETED
    assert str(JobType.PROFILE) == "profile"


def test_profile_defaults():
    profile = Profile()
    assert profile.mode == ""
    assert profile.total_records == 0
    assert profile.status is None