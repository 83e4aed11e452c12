from predator.sql_filter import (
    AllPartitionFilter,
    CustomFilterExpression,
    DataType,
    NoFilter,
    PartitionFilter,
)


def test_partition_filter_timestamp():
    f = PartitionFilter(DataType.TIMESTAMP, "2019-01-01", "created_time")
    assert f.build() == "DATE(created_time) = '2019-01-01'"


def test_partition_filter_date():
    f = PartitionFilter(DataType.DATE, "2019-01-01", "_PARTITIONDATE")
    assert f.build() == "_PARTITIONDATE = '2019-01-01'"


def test_partition_filter_equal():
    a = PartitionFilter(DataType.TIMESTAMP, "2019-01-01", "created_time")
    b = PartitionFilter(DataType.TIMESTAMP, "2019-01-01", "created_time")
    assert a == b


def test_partition_filter_not_equal():
    a = PartitionFilter(DataType.TIMESTAMP, "2019-01-01", "created_time")
    b = PartitionFilter(DataType.TIMESTAMP, "2019-01-02", "created_time")
    assert not (a == b)


def test_no_filter():
    assert NoFilter().build() == "TRUE"
    assert NoFilter() == NoFilter()


def test_filters_of_different_kind_are_not_equal():
    assert not (NoFilter() == AllPartitionFilter("c"))
    assert not (CustomFilterExpression("TRUE") == NoFilter())


def test_all_partition_filter():
    assert AllPartitionFilter("created_date").build() == "created_date is not null"
    assert AllPartitionFilter("a") == AllPartitionFilter("a")
    assert not (AllPartitionFilter("a") == AllPartitionFilter("b"))


def test_custom_filter_expression():
    f = CustomFilterExpression("active = true")
    assert f.build() == "active = true"
    assert f == CustomFilterExpression("active = true")
    assert not (f == CustomFilterExpression("active = false"))