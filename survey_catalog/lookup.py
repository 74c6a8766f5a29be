"""Fetch-by-id and fetch-all access to the six catalog collections."""

from typing import Optional, cast

from .base import EntityKind
from .entity import (
    Concept,
    Question,
    QuestionBlock,
    RepresentedVariable,
    UnitType,
    Variable,
)
from .storage.interfaces import CatalogStoreInterface


class CatalogLookup:
    """Typed entry points the query layer dispatches root fields to."""

    def __init__(self, store: CatalogStoreInterface):
        self.store = store

    def all_concepts(self) -> list[Concept]:
        return cast(list[Concept], list(self.store.get_all(EntityKind.CONCEPT)))

    def all_unit_types(self) -> list[UnitType]:
        return cast(list[UnitType], list(self.store.get_all(EntityKind.UNIT_TYPE)))

    def all_variables(self) -> list[Variable]:
        return cast(list[Variable], list(self.store.get_all(EntityKind.VARIABLE)))

    def all_represented_variables(self) -> list[RepresentedVariable]:
        return cast(list[RepresentedVariable], list(self.store.get_all(EntityKind.REPRESENTED_VARIABLE)))

    def all_questions(self) -> list[Question]:
        return cast(list[Question], list(self.store.get_all(EntityKind.QUESTION)))

    def all_question_blocks(self) -> list[QuestionBlock]:
        return cast(list[QuestionBlock], list(self.store.get_all(EntityKind.QUESTION_BLOCK)))

    def concept(self, entity_id: int) -> Optional[Concept]:
        return self.store.get_concept(entity_id)

    def unit_type(self, entity_id: int) -> Optional[UnitType]:
        return self.store.get_unit_type(entity_id)

    def variable(self, entity_id: int) -> Optional[Variable]:
        return self.store.get_variable(entity_id)

    def represented_variable(self, entity_id: int) -> Optional[RepresentedVariable]:
        return self.store.get_represented_variable(entity_id)

    def question(self, entity_id: int) -> Optional[Question]:
        return self.store.get_question(entity_id)

    def question_block(self, entity_id: int) -> Optional[QuestionBlock]:
        return self.store.get_question_block(entity_id)
