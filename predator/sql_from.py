"""FROM clause of generated SQL."""

from __future__ import annotations

from dataclasses import dataclass, field

EXPRESSION_SEPARATOR = " , "


@dataclass(frozen=True)
class Unnest:
    """Unnesting of an array column into plain columns."""

    column_name: str
    alias: str

    def build(self) -> str:
        return f"UNNEST({self.column_name}) as {self.alias}"


@dataclass
class FromClause:
    """A table followed by optional unnest clauses."""

    table_id: str
    unnest_clauses: list[Unnest] = field(default_factory=list)

    def build(self) -> str:
        parts = [f"`{self.table_id}`"]
        parts.extend(clause.build() for clause in self.unnest_clauses)
        return EXPRESSION_SEPARATOR.join(parts)