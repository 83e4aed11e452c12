"""Entities owning a set of cloud projects."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Entity:
    """Information about an entity."""

    id: str = ""
    name: str = ""
    environment: str = ""
    git_url: str = ""
    gcp_project_ids: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EntityNotFoundError(LookupError):
    """No entity matched."""

    def __init__(self, message: str = "entity not found") -> None:
        super().__init__(message)


def find_entity_by_project_id(entities: Iterable[Entity], project_id: str) -> Entity:
    """First entity that owns the given project."""
    for entity in entities:
        if project_id in entity.gcp_project_ids:
            return entity
    raise EntityNotFoundError()