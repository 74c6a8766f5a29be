"""
Relationship resolution over a catalog store.

Records hold their references as ids. `RelationshipResolver` follows those
ids back into the store, one method per relationship. Absence is never an
error: a singular relationship with a dangling id resolves to None, and
dangling ids in a plural relationship are left out of the result.
"""

import logging
from typing import Iterable, Optional

from .base import EntityKind
from .entity import (
    CatalogEntity,
    Concept,
    Question,
    QuestionBlock,
    RepresentedVariable,
    UnitType,
    Variable,
)
from .storage.interfaces import CatalogStoreInterface

logger = logging.getLogger(__name__)


class RelationshipResolver:
    """
    Derives related records from a source record.

    Example:
        >>> resolver = RelationshipResolver(store)
        >>> question = store.get_question(9)
        >>> rv = resolver.represented_variable_for_question(question)
        >>> resolver.variable_for_represented_variable(rv).name
        'Victimisation of Person'
    """

    def __init__(self, store: CatalogStoreInterface):
        self.store = store

    def _lookup_many(self, kind: EntityKind, ids: Iterable[int], source: CatalogEntity) -> list:
        found = []
        for entity_id in ids:
            entity = self.store.get_by_id(kind, entity_id)
            if entity is None:
                logger.debug(f"{source.kind.value}[{source.id}] references missing {kind.value} {entity_id}; omitted")
                continue
            found.append(entity)
        return found

    # Variable <-> RepresentedVariable

    def represented_variables_for_variable(self, variable: Variable) -> list[RepresentedVariable]:
        """Every represented variable that takes its meaning from `variable`, in store order."""
        return [rv for rv in self.store.get_all(EntityKind.REPRESENTED_VARIABLE) if rv.takes_meaning_from == variable.id]

    def variable_for_represented_variable(self, represented_variable: RepresentedVariable) -> Optional[Variable]:
        return self.store.get_variable(represented_variable.takes_meaning_from)

    # Question / QuestionBlock

    def represented_variable_for_question(self, question: Question) -> Optional[RepresentedVariable]:
        return self.store.get_represented_variable(question.represented_variable_id)

    def questions_for_block(self, block: QuestionBlock) -> list[Question]:
        """The block's questions in block order; ids with no question are omitted."""
        return self._lookup_many(EntityKind.QUESTION, block.questions, block)

    def referenced_questions(self, question: Question) -> list[Question]:
        return self._lookup_many(EntityKind.QUESTION, question.references, question)

    # Concept

    def comparable_concepts(self, concept: Concept) -> list[Concept]:
        return self._lookup_many(EntityKind.CONCEPT, concept.is_comparable_to, concept)

    def qualified_concepts(self, concept: Concept) -> list[Concept]:
        return self._lookup_many(EntityKind.CONCEPT, concept.is_qualification_of, concept)

    # UnitType

    def referenced_unit_types(self, unit_type: UnitType) -> list[UnitType]:
        return self._lookup_many(EntityKind.UNIT_TYPE, unit_type.references, unit_type)

    def concepts_for_unit_type(self, unit_type: UnitType) -> list[Concept]:
        return self._lookup_many(EntityKind.CONCEPT, unit_type.is_based_on, unit_type)

    # Variable

    def comparable_variables(self, variable: Variable) -> list[Variable]:
        return self._lookup_many(EntityKind.VARIABLE, variable.is_comparable_to, variable)

    def unit_type_for_variable(self, variable: Variable) -> Optional[UnitType]:
        return self.store.get_unit_type(variable.unit_type_id)

    def concept_for_variable(self, variable: Variable) -> Optional[Concept]:
        """The concept the variable measures."""
        return self.store.get_concept(variable.measures)
