"""
In-memory implementation of the catalog store.

Collections are held as the dataset's tuples, with a per-kind id index
built once at construction. Nothing is mutated afterwards, so one instance
can serve any number of concurrent readers.
"""

import logging
from typing import Optional

from survey_catalog.base import EntityKind, EntityReference
from survey_catalog.entity import CatalogDataset, CatalogEntity
from survey_catalog.storage.interfaces import CatalogStoreInterface

logger = logging.getLogger(__name__)


class InMemoryCatalogStore(CatalogStoreInterface):
    """Immutable catalog store over a validated `CatalogDataset`."""

    def __init__(self, dataset: CatalogDataset):
        self.dataset = dataset
        self._index: dict[EntityKind, dict[int, CatalogEntity]] = {}
        for kind in EntityKind:
            index: dict[int, CatalogEntity] = {}
            for entity in dataset.records(kind):
                if entity.id in index:
                    logger.warning(f"Duplicate {kind.value} id {entity.id}; lookups return the first record")
                    continue
                index[entity.id] = entity
            self._index[kind] = index
        logger.info(f"Catalog store ready with {self.entity_count} records")

    def get_all(self, kind: EntityKind) -> tuple[CatalogEntity, ...]:
        return self.dataset.records(kind)

    def get_by_id(self, kind: EntityKind, entity_id: int) -> Optional[CatalogEntity]:
        return self._index[kind].get(entity_id)

    @property
    def entity_count(self) -> int:
        return self.dataset.entity_count


def find_dangling_references(store: CatalogStoreInterface) -> list[EntityReference]:
    """
    List every reference in the store whose target id does not exist.

    Dangling references are not errors: the resolver yields null or omits
    them. This check only reports them so a bad dataset is visible in logs.
    """
    dangling = []
    for kind in EntityKind:
        for entity in store.get_all(kind):
            for field, target_kind, target_id in _outgoing_references(entity):
                if store.get_by_id(target_kind, target_id) is None:
                    dangling.append(EntityReference(source_kind=kind, source_id=entity.id, field=field, target_kind=target_kind, target_id=target_id))
    return dangling


# field name -> target kind, per source kind
_REFERENCE_FIELDS: dict[EntityKind, dict[str, EntityKind]] = {
    EntityKind.CONCEPT: {"is_comparable_to": EntityKind.CONCEPT, "is_qualification_of": EntityKind.CONCEPT},
    EntityKind.UNIT_TYPE: {"references": EntityKind.UNIT_TYPE, "is_based_on": EntityKind.CONCEPT},
    EntityKind.VARIABLE: {"is_comparable_to": EntityKind.VARIABLE, "unit_type_id": EntityKind.UNIT_TYPE, "measures": EntityKind.CONCEPT},
    EntityKind.REPRESENTED_VARIABLE: {"takes_meaning_from": EntityKind.VARIABLE},
    EntityKind.QUESTION: {"references": EntityKind.QUESTION, "represented_variable_id": EntityKind.REPRESENTED_VARIABLE},
    EntityKind.QUESTION_BLOCK: {"questions": EntityKind.QUESTION},
}


def _outgoing_references(entity: CatalogEntity):
    for field, target_kind in _REFERENCE_FIELDS[entity.kind].items():
        value = getattr(entity, field)
        for target_id in value if isinstance(value, tuple) else (value,):
            yield field, target_kind, target_id
