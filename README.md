# predator

Building blocks for data quality work on warehouse tables: models of profile
and audit jobs and the metrics they produce, table schemas, builders for
BigQuery-style SQL that computes metrics, audit issue summaries, result
messages, and SQLite-backed stores for profiles and metrics.

The package is a library. It has no command-line entry point and no server.
It depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `predator.job`: `Profile`, `Audit`, `State`, `JobType`, `QueryType`,
  `Mode` (with `Mode.INCREMENTAL`, `Mode.COMPLETE` and `Mode.validate()`,
  which raises `ValueError` for any other mode), `Strategy`, `StrategyType`,
  `Detail.from_json()` (accepts JSON text or a mapping; raises `ValueError`
  for an unsupported strategy type), `Query`, and `diff_between(source,
  destination)`, which returns a `Diff` of entries to add, remove and update.
- `predator.metric`: `Metric`, `MetricType`, `Category`, `Owner`,
  `new_metric()` (owner is `Owner.TABLE` when the field ID is empty),
  `get_category()`, a chainable `Finder` (`with_id`, `with_field_id`,
  `with_type`, `with_owner`, `with_category`, `with_partition`,
  `with_condition`, then `find()` or `find_one()`), `group_by_partition()`,
  `group_by_partition_as_map()`, `group_by_group_value()`, `Spec` and
  `find_specs_by_field_id()` (raises `LookupError` when nothing matches).
- `predator.meta`: `TableSpec` and `FieldSpec`. `FieldSpec.id()` gives the
  dotted path of a nested field, `TableSpec.fields_flatten()` lists fields
  depth first, and `TableSpec.get_field_spec_by_id()` raises
  `FieldSpecNotFoundError` for an unknown ID. Also `FieldType`, `FieldMode`,
  `TimePartitioning`, `field_name_key()` and `get_field_type_by_field_name()`.
- SQL builders:
  - `predator.sql_metric`: `MetricExpression`, `SqlMetricType`,
    `parse_metric_type()` and `build_metric_expressions()`; an unknown metric
    type raises `MetricTypeNotFoundError`.
  - `predator.sql_filter`: `PartitionFilter`, `NoFilter`,
    `AllPartitionFilter`, `CustomFilterExpression`, `DataType`.
  - `predator.sql_from`: `FromClause` and `Unnest`.
  - `predator.sql_groupby`: `GroupByExpression` and `NoGroupBy`.
  - `predator.sql_datetime`: `Date`, `DateTrunc`, `TimestampTrunc`,
    `TimestampValue`, `FieldIdentifier`, `TruncType`.
  - `predator.sql_query`: `SelectExpression`, `build_select_expressions()` and
    `Query`, whose `merge()` combines the metrics of two queries and raises
    `ValueError` when their filters or FROM clauses differ.
- `predator.audit`: `AuditReport`, `AuditGroup` (`by_partition_date`,
  `by_group_value`, `by_field_id`), `form_issue_summary()` describing every
  failed report, `ValidatedMetric`, `AuditResult`, `AuditSummary`.
- `predator.profile_metric`: `ProfileMetric` and
  `group_profile_metrics_by_partition()`.
- `predator.tolerance`: `Comparator`, `ToleranceRule`, `Tolerance`,
  `ToleranceSpec`, `SpecInvalidError`, `UploadSpecValidationError`, and
  `is_spec_invalid_error()` / `is_upload_spec_validation_error()`, which also
  look through the chain of causes.
- `predator.entry`: `Entry`, an immutable set of logging context values; each
  `with_*` call returns a new entry.
- `predator.label`: `parse_label()` turns `project.dataset.table` into a
  `Label` (raises `ValueError` on a wrong format); also `File`, `PathType`.
- `predator.entity`: `Entity` and `find_entity_by_project_id()`.
- `predator.xlog`: `Value`, `serialise()`, `format_message()` and `info()`,
  which prints a key=value log line to standard output.
- `predator.contracts`: shared errors (all derived from `PredatorError`),
  records such as `Status`, `Message`, `SinkConfig`, `GitInfo`, the
  `is_git_ssh_url()` check, and the `StatusStore`, `ProfileStore`,
  `MetadataStore`, `MessageProvider` and `Sink` protocols.
- `predator.message`: result messages (`MetricsLogKey`, `MetricsLogMessage`,
  `ResultLogKey`, `ResultLogMessage` and their parts), their builders
  (`ProfileKeyBuilder`, `ProfileValueBuilder`, `AuditKeyBuilder`,
  `AuditValueBuilder`), `Provider`, and `ProviderFactory`, which makes one
  provider per group value, ordered by group value.
- `predator.publisher`: `Publisher` hands the message of a provider to a sink;
  `ConsoleSink` prints messages, `DummySink` drops them, and `SinkFactory`
  creates a sink from a `SinkConfig`.
- `predator.metric_store`: `SqlMetricStore` keeps metrics in a table of an
  `sqlite3` connection; `get_metrics_by_profile_id()` raises
  `NoProfileMetricFoundError` when there are none.
- `predator.profile_store`: `SqlProfileStore` keeps profiles in an `sqlite3`
  table and writes their status through a `StatusStore` you supply. `get()`
  raises `ValueError` for an ID that is not a UUID, `ProfileNotFoundError`
  when there is no such profile, and `ProfileInvalidError` when the profile
  has no status.

## Examples

Build a metric query:

```python
from predator.sql_filter import DataType, PartitionFilter
from predator.sql_from import FromClause
from predator.sql_metric import MetricExpression, SqlMetricType
from predator.sql_query import Query

query = Query(
    metrics=[MetricExpression("field1", "count_field1", SqlMetricType.COUNT)],
    from_clause=FromClause("project.dataset.table"),
    where=PartitionFilter(DataType.DATE, "2019-01-01", "_PARTITIONDATE"),
)
print(query.build())
# SELECT count(field1) as count_field1 FROM `project.dataset.table` WHERE _PARTITIONDATE = '2019-01-01'
```

Parse a table URN:

```python
from predator.label import parse_label

label = parse_label("my-project.dataset_a.table_x")
print(label.project, label.dataset, label.table)
```

Store and read back metrics:

```python
import sqlite3

from predator.job import Profile
from predator.metric import Category, Metric, MetricType, Owner
from predator.metric_store import SqlMetricStore

store = SqlMetricStore(sqlite3.connect(":memory:"), "metric_records")
store.create_table()
store.store(
    Profile(id="profile-1"),
    [Metric(id="1", type=MetricType.ROW_COUNT, category=Category.QUALITY,
            owner=Owner.TABLE, value=42.0)],
)
print(store.get_metrics_by_profile_id("profile-1"))
```

## What it does not do

- It does not run queries against a warehouse, read table metadata from one,
  or generate metrics itself; `MetadataStore` and `StatusStore` are protocols
  for which you provide the implementation.
- It has no profiling or audit service that drives jobs from start to end.
- It cannot publish to Kafka: `SinkFactory.create()` raises `ValueError` for
  the `kafka` publisher type. Messages are plain dataclasses, not protocol
  buffers.
- It has no command-line tool, HTTP API or database migrations; the SQLite
  stores create their tables with `create_table()`.