import pytest

from predator.entity import Entity, EntityNotFoundError, find_entity_by_project_id


def _entities():
    return [
        Entity(id="1", name="first", gcp_project_ids=["proj-a", "proj-b"]),
        Entity(id="2", name="second", gcp_project_ids=["proj-c"]),
        Entity(id="3", name="third", gcp_project_ids=["proj-c"]),
    ]


def test_find_by_project_id():
    entities = _entities()
    assert find_entity_by_project_id(entities, "proj-b") is entities[0]


def test_find_returns_first_owner():
    entities = _entities()
    assert find_entity_by_project_id(entities, "proj-c") is entities[1]


def test_find_missing_raises():
    with pytest.raises(EntityNotFoundError, match="entity not found"):
        find_entity_by_project_id(_entities(), "proj-z")


def test_find_in_empty_raises():
    with pytest.raises(LookupError):
        find_entity_by_project_id([], "proj-a")