"""Generated SQL queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from predator.sql_from import EXPRESSION_SEPARATOR, FromClause


class _Buildable(Protocol):
    def build(self) -> str:
        ...


@dataclass(frozen=True)
class SelectExpression:
    """An expression in the select list, optionally aliased."""

    expression: str
    alias: str = ""

    def build(self) -> str:
        if self.alias:
            return f"{self.expression} AS {self.alias}"
        return self.expression


def build_select_expressions(expressions: Iterable[SelectExpression]) -> str:
    """Render select expressions separated by commas."""
    return EXPRESSION_SEPARATOR.join(exp.build() for exp in expressions)


@dataclass
class Query:
    """An SQL query calculating metrics."""

    from_clause: FromClause
    where: Any
    expressions: list[SelectExpression] = field(default_factory=list)
    metrics: list[Any] = field(default_factory=list)
    group_by: Optional[_Buildable] = None

    def build(self) -> str:
        """Render the query as SQL."""
        parts: list[str] = []
        if self.expressions:
            parts.append(build_select_expressions(self.expressions))
        if self.metrics:
            parts.append(EXPRESSION_SEPARATOR.join(m.build() for m in self.metrics))
        selected = EXPRESSION_SEPARATOR.join(parts)
        sql = f"SELECT {selected} FROM {self.from_clause.build()} WHERE {self.where.build()}"
        if self.group_by is not None:
            sql = f"{sql} {self.group_by.build()}"
        return sql

    def __str__(self) -> str:
        return self.build()

    def merge(self, other: "Query") -> "Query":
        """Combine the metrics of two queries with the same filter and source."""
        if self.where != other.where:
            raise ValueError("unable to join query with different FilterClause")
        if self.from_clause != other.from_clause:
            raise ValueError("unable to join query with different FromClause")
        return Query(
            from_clause=self.from_clause,
            where=self.where,
            metrics=[*self.metrics, *other.metrics],
        )