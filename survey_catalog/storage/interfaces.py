"""
Storage interface for the survey catalog.

The store is read-only: it is built once from a dataset and only answers
lookups afterwards. Lookups are parameterized over an explicit `EntityKind`;
the typed accessors below are thin wrappers that fix the kind.
"""

from abc import ABC, abstractmethod
from typing import Optional, cast

from survey_catalog.base import EntityKind
from survey_catalog.entity import (
    CatalogEntity,
    Concept,
    Question,
    QuestionBlock,
    RepresentedVariable,
    UnitType,
    Variable,
)


class CatalogStoreInterface(ABC):
    """Abstract interface for catalog record retrieval."""

    @abstractmethod
    def get_all(self, kind: EntityKind) -> tuple[CatalogEntity, ...]:
        """All records of a kind, in store order."""
        pass

    @abstractmethod
    def get_by_id(self, kind: EntityKind, entity_id: int) -> Optional[CatalogEntity]:
        """The record of a kind with exactly this id, or None."""
        pass

    @property
    @abstractmethod
    def entity_count(self) -> int:
        """Total number of records in storage."""
        pass

    def get_concept(self, entity_id: int) -> Optional[Concept]:
        return cast(Optional[Concept], self.get_by_id(EntityKind.CONCEPT, entity_id))

    def get_unit_type(self, entity_id: int) -> Optional[UnitType]:
        return cast(Optional[UnitType], self.get_by_id(EntityKind.UNIT_TYPE, entity_id))

    def get_variable(self, entity_id: int) -> Optional[Variable]:
        return cast(Optional[Variable], self.get_by_id(EntityKind.VARIABLE, entity_id))

    def get_represented_variable(self, entity_id: int) -> Optional[RepresentedVariable]:
        return cast(Optional[RepresentedVariable], self.get_by_id(EntityKind.REPRESENTED_VARIABLE, entity_id))

    def get_question(self, entity_id: int) -> Optional[Question]:
        return cast(Optional[Question], self.get_by_id(EntityKind.QUESTION, entity_id))

    def get_question_block(self, entity_id: int) -> Optional[QuestionBlock]:
        return cast(Optional[QuestionBlock], self.get_by_id(EntityKind.QUESTION_BLOCK, entity_id))
