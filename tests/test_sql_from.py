from predator.sql_from import FromClause, Unnest


def test_unnest_build():
    assert Unnest(column_name="status", alias="unnest1").build() == "UNNEST(status) as unnest1"


def test_from_clause_with_unnest():
    clause = FromClause(
        table_id="project.dataset.table",
        unnest_clauses=[Unnest(column_name="abc", alias="unnest1")],
    )
    assert clause.build() == "`project.dataset.table` , UNNEST(abc) as unnest1"


def test_from_clause_without_unnest():
    clause = FromClause(table_id="project.dataset.table")
    assert clause.build() == "`project.dataset.table`"


def test_from_clause_equality():
    a = FromClause("p.d.t", [Unnest("c", "u1")])
    b = FromClause("p.d.t", [Unnest("c", "u1")])
    assert a == b
    assert not (a == FromClause("p.d.t", [Unnest("c", "u2")]))
    assert not (a == FromClause("p.d.x", [Unnest("c", "u1")]))
    assert not (a == FromClause("p.d.t"))