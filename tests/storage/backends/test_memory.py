"""
Tests for the in-memory catalog store.

Run with: pytest tests/storage/backends/test_memory.py -v
"""

import pytest

from survey_catalog.base import EntityKind, EntityReference
from survey_catalog.entity import CatalogDataset
from survey_catalog.storage.backends.memory import InMemoryCatalogStore, find_dangling_references
from survey_catalog.storage.interfaces import CatalogStoreInterface


def test_store_implements_interface(store):
    assert isinstance(store, CatalogStoreInterface)


def test_get_all_returns_records_in_insertion_order(store, dataset):
    for kind in EntityKind:
        assert store.get_all(kind) == dataset.records(kind)

    assert [q.id for q in store.get_all(EntityKind.QUESTION)] == list(range(10))


@pytest.mark.parametrize("kind", list(EntityKind))
def test_get_by_id_finds_every_record(store, kind):
    for entity in store.get_all(kind):
        found = store.get_by_id(kind, entity.id)
        assert found is entity
        assert found.id == entity.id


@pytest.mark.parametrize("kind", list(EntityKind))
def test_get_by_id_missing_returns_none(store, kind):
    assert store.get_by_id(kind, 99) is None
    assert store.get_by_id(kind, -1) is None


def test_placeholder_records_resolve(store):
    unit_type = store.get_unit_type(0)

    assert unit_type is not None
    assert unit_type.id == 0
    assert unit_type.name == "UNIT TYPE"
    assert unit_type.description == "UNIT TYPE TBD"


def test_ids_are_scoped_by_kind(store):
    assert store.get_concept(2).name == "Household"
    assert store.get_unit_type(3).name == "Business"
    assert store.get_concept(3) is None


def test_typed_accessors(store):
    assert store.get_variable(1).name == "Victimisation of Person"
    assert store.get_represented_variable(9).name == "RV Sexual assault"
    assert store.get_question(9).name == "Sexual assault"
    assert store.get_question_block(1).name == "Victimisation"


def test_entity_count(store):
    assert store.entity_count == 32


def test_empty_dataset():
    store = InMemoryCatalogStore(CatalogDataset())

    for kind in EntityKind:
        assert store.get_all(kind) == ()
        assert store.get_by_id(kind, 0) is None
    assert store.entity_count == 0


def test_duplicate_ids_first_record_wins(make_store, caplog):
    store = make_store(
        {
            "concept": [
                {"id": 1, "name": "Person", "description": "first"},
                {"id": 1, "name": "Person", "description": "second"},
            ]
        }
    )

    assert store.get_concept(1).description == "first"
    assert len(store.get_all(EntityKind.CONCEPT)) == 2
    assert "Duplicate concept id 1" in caplog.text


def test_dangling_references_in_sample_data(store):
    dangling = find_dangling_references(store)

    assert dangling == [
        EntityReference(source_kind=EntityKind.UNIT_TYPE, source_id=3, field="is_based_on", target_kind=EntityKind.CONCEPT, target_id=3),
        EntityReference(source_kind=EntityKind.UNIT_TYPE, source_id=4, field="is_based_on", target_kind=EntityKind.CONCEPT, target_id=3),
    ]
    assert str(dangling[0]) == "unit_type[3].is_based_on -> concept[3]"


def test_dangling_references_cover_every_field(make_store):
    store = make_store(
        {
            "variable": [{"id": 1, "name": "v", "description": "d", "unitTypeId": 5, "measures": 6, "isComparableTo": [7]}],
            "question_block": [{"id": 1, "name": "b", "description": "d", "questions": [8]}],
        }
    )

    fields = {(ref.source_kind, ref.field, ref.target_id) for ref in find_dangling_references(store)}

    assert fields == {
        (EntityKind.VARIABLE, "unit_type_id", 5),
        (EntityKind.VARIABLE, "measures", 6),
        (EntityKind.VARIABLE, "is_comparable_to", 7),
        (EntityKind.QUESTION_BLOCK, "questions", 8),
    }
