"""
Tests for RelationshipResolver.

Run with: pytest tests/test_resolver.py -v
"""

import logging

from survey_catalog.base import EntityKind
from survey_catalog.resolver import RelationshipResolver


class TestVariableRepresentations:
    """Variable <-> RepresentedVariable."""

    def test_every_represented_variable_resolves_its_variable(self, store, resolver):
        for rv in store.get_all(EntityKind.REPRESENTED_VARIABLE):
            variable = resolver.variable_for_represented_variable(rv)
            assert variable is not None
            assert variable.id == rv.takes_meaning_from

    def test_variable_lists_its_represented_variables(self, store, resolver):
        victimisation = store.get_variable(1)

        represented = resolver.represented_variables_for_variable(victimisation)

        assert [rv.id for rv in represented] == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_placeholder_variable_has_placeholder_representation(self, store, resolver):
        represented = resolver.represented_variables_for_variable(store.get_variable(0))

        assert [rv.id for rv in represented] == [0]

    def test_reverse_lookup_matches_forward_references(self, store, resolver):
        for variable in store.get_all(EntityKind.VARIABLE):
            expected = {rv.id for rv in store.get_all(EntityKind.REPRESENTED_VARIABLE) if rv.takes_meaning_from == variable.id}
            assert {rv.id for rv in resolver.represented_variables_for_variable(variable)} == expected

    def test_variable_without_representations(self, make_store):
        store = make_store({"variable": [{"id": 5, "name": "v", "description": "d", "unitTypeId": 0, "measures": 0}]})

        assert RelationshipResolver(store).represented_variables_for_variable(store.get_variable(5)) == []

    def test_dangling_variable_reference_resolves_to_none(self, make_store):
        store = make_store({"represented_variable": [{"id": 1, "name": "rv", "description": "d", "takesMeaningFrom": 7}]})

        assert RelationshipResolver(store).variable_for_represented_variable(store.get_represented_variable(1)) is None


class TestQuestions:
    """Question and QuestionBlock relationships."""

    def test_sexual_assault_question_chain(self, store, resolver):
        question = store.get_question(9)

        rv = resolver.represented_variable_for_question(question)
        assert rv.id == 9
        assert rv.name == "RV Sexual assault"

        variable = resolver.variable_for_represented_variable(rv)
        assert variable.id == 1
        assert variable.name == "Victimisation of Person"

    def test_victimisation_block_questions_in_order(self, store, resolver):
        block = store.get_question_block(1)

        questions = resolver.questions_for_block(block)

        assert block.name == "Victimisation"
        assert [q.id for q in questions] == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_block_order_follows_block_not_store(self, make_store):
        store = make_store(
            {
                "question": [
                    {"id": 1, "name": "q1", "description": "d", "representedVariableId": 0},
                    {"id": 2, "name": "q2", "description": "d", "representedVariableId": 0},
                    {"id": 3, "name": "q3", "description": "d", "representedVariableId": 0},
                ],
                "question_block": [{"id": 1, "name": "b", "description": "d", "questions": [3, 1, 2]}],
            }
        )

        questions = RelationshipResolver(store).questions_for_block(store.get_question_block(1))

        assert [q.id for q in questions] == [3, 1, 2]

    def test_missing_block_questions_are_omitted(self, make_store, caplog):
        caplog.set_level(logging.DEBUG, logger="survey_catalog.resolver")
        store = make_store(
            {
                "question": [
                    {"id": 1, "name": "q1", "description": "d", "representedVariableId": 0},
                    {"id": 2, "name": "q2", "description": "d", "representedVariableId": 0},
                ],
                "question_block": [{"id": 1, "name": "b", "description": "d", "questions": [2, 42, 1]}],
            }
        )

        questions = RelationshipResolver(store).questions_for_block(store.get_question_block(1))

        assert [q.id for q in questions] == [2, 1]
        assert "references missing question 42" in caplog.text

    def test_dangling_represented_variable_resolves_to_none(self, make_store):
        store = make_store({"question": [{"id": 1, "name": "q", "description": "d", "representedVariableId": 3}]})

        assert RelationshipResolver(store).represented_variable_for_question(store.get_question(1)) is None

    def test_question_references(self, make_store):
        store = make_store(
            {
                "question": [
                    {"id": 1, "name": "q1", "description": "d", "representedVariableId": 0, "references": [2, 9]},
                    {"id": 2, "name": "q2", "description": "d", "representedVariableId": 0},
                ]
            }
        )

        assert [q.id for q in RelationshipResolver(store).referenced_questions(store.get_question(1))] == [2]


class TestConceptsAndUnitTypes:
    """Concept, UnitType and the Variable references to them."""

    def test_unit_type_based_on_concept(self, store, resolver):
        assert [c.name for c in resolver.concepts_for_unit_type(store.get_unit_type(1))] == ["Person"]

    def test_unit_type_based_on_missing_concept_is_empty(self, store, resolver):
        assert resolver.concepts_for_unit_type(store.get_unit_type(3)) == []
        assert resolver.concepts_for_unit_type(store.get_unit_type(4)) == []

    def test_variable_unit_type_and_measures(self, store, resolver):
        variable = store.get_variable(1)

        assert resolver.unit_type_for_variable(variable).name == "Person"
        assert resolver.concept_for_variable(variable).id == 0

    def test_dangling_variable_references(self, make_store):
        store = make_store({"variable": [{"id": 1, "name": "v", "description": "d", "unitTypeId": 8, "measures": 8, "isComparableTo": [1, 8]}]})
        resolver = RelationshipResolver(store)
        variable = store.get_variable(1)

        assert resolver.unit_type_for_variable(variable) is None
        assert resolver.concept_for_variable(variable) is None
        assert [v.id for v in resolver.comparable_variables(variable)] == [1]

    def test_concept_relationships(self, make_store):
        store = make_store(
            {
                "concept": [
                    {"id": 1, "name": "Person", "description": "d", "isComparableTo": [2]},
                    {"id": 2, "name": "Individual", "description": "d", "isQualificationOf": [1, 5]},
                ]
            }
        )
        resolver = RelationshipResolver(store)

        assert [c.name for c in resolver.comparable_concepts(store.get_concept(1))] == ["Individual"]
        assert [c.name for c in resolver.qualified_concepts(store.get_concept(2))] == ["Person"]
        assert resolver.qualified_concepts(store.get_concept(1)) == []

    def test_unit_type_references(self, make_store):
        store = make_store(
            {
                "unit_type": [
                    {"id": 1, "name": "Person", "description": "d", "isBasedOn": [], "references": [2]},
                    {"id": 2, "name": "Household", "description": "d", "isBasedOn": []},
                ]
            }
        )

        assert [u.id for u in RelationshipResolver(store).referenced_unit_types(store.get_unit_type(1))] == [2]


def test_resolution_is_idempotent(store, resolver):
    block = store.get_question_block(1)

    first = resolver.questions_for_block(block)
    second = resolver.questions_for_block(block)

    assert first == second
    assert all(a is b for a, b in zip(first, second))
    assert block.questions == (1, 2, 3, 4, 5, 6, 7, 8, 9)
