"""GROUP BY clauses of generated SQL."""

from __future__ import annotations

from dataclasses import dataclass

_GROUP_BY_TEMPLATE = "GROUP BY {}"


@dataclass(frozen=True)
class GroupByExpression:
    """Group by a column or any select expression."""

    expression: str

    def build(self) -> str:
        return _GROUP_BY_TEMPLATE.format(self.expression)


@dataclass(frozen=True)
class NoGroupBy:
    """No grouping."""

    def build(self) -> str:
        return ""