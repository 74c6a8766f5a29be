"""
GraphQL schema for the Survey Catalog API.

Object types carry their record's scalar attributes directly. Relationship
fields are resolvers that go through the `RelationshipResolver` in the
request context, so only the relationships a query selects are followed.
"""

import strawberry
from typing import Any, Dict, List, Optional
from strawberry.types import Info

from survey_catalog import entity as domain
from survey_catalog.lookup import CatalogLookup
from survey_catalog.resolver import RelationshipResolver
from survey_catalog.storage.interfaces import CatalogStoreInterface


def build_context(store: CatalogStoreInterface) -> Dict[str, Any]:
    """Request context shared by all resolvers of one query."""
    return {
        "store": store,
        "lookup": CatalogLookup(store),
        "resolver": RelationshipResolver(store),
    }


@strawberry.type(description="An abstract statistical notion that grounds a unit type or variable")
class Concept:
    id: int
    name: str
    description: str
    concept_label: Optional[List[str]]
    is_characteristic: Optional[bool]
    record: strawberry.Private[domain.Concept]

    @classmethod
    def from_record(cls, record: domain.Concept) -> "Concept":
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            concept_label=list(record.concept_label),
            is_characteristic=record.is_characteristic,
            record=record,
        )

    @strawberry.field
    def is_comparable_to(self, info: Info) -> List["Concept"]:
        resolver = info.context["resolver"]
        return [Concept.from_record(c) for c in resolver.comparable_concepts(self.record)]

    @strawberry.field
    def is_qualification_of(self, info: Info) -> List["Concept"]:
        resolver = info.context["resolver"]
        return [Concept.from_record(c) for c in resolver.qualified_concepts(self.record)]


@strawberry.type(description="The kind of unit (person, household, business) data is collected about")
class UnitType:
    id: int
    name: str
    description: str
    record: strawberry.Private[domain.UnitType]

    @classmethod
    def from_record(cls, record: domain.UnitType) -> "UnitType":
        return cls(id=record.id, name=record.name, description=record.description, record=record)

    @strawberry.field
    def references(self, info: Info) -> List["UnitType"]:
        resolver = info.context["resolver"]
        return [UnitType.from_record(u) for u in resolver.referenced_unit_types(self.record)]

    @strawberry.field
    def is_based_on(self, info: Info) -> List[Concept]:
        resolver = info.context["resolver"]
        return [Concept.from_record(c) for c in resolver.concepts_for_unit_type(self.record)]


@strawberry.type(description="A measurable characteristic tied to a unit type and a concept")
class Variable:
    id: int
    name: str
    description: str
    record: strawberry.Private[domain.Variable]

    @classmethod
    def from_record(cls, record: domain.Variable) -> "Variable":
        return cls(id=record.id, name=record.name, description=record.description, record=record)

    @strawberry.field
    def is_comparable_to(self, info: Info) -> List["Variable"]:
        resolver = info.context["resolver"]
        return [Variable.from_record(v) for v in resolver.comparable_variables(self.record)]

    @strawberry.field
    def unit_type_id(self, info: Info) -> Optional[UnitType]:
        unit_type = info.context["resolver"].unit_type_for_variable(self.record)
        return UnitType.from_record(unit_type) if unit_type else None

    @strawberry.field
    def measures(self, info: Info) -> Optional[Concept]:
        concept = info.context["resolver"].concept_for_variable(self.record)
        return Concept.from_record(concept) if concept else None

    @strawberry.field
    def represented_variable(self, info: Info) -> List["RepresentedVariable"]:
        resolver = info.context["resolver"]
        return [RepresentedVariable.from_record(rv) for rv in resolver.represented_variables_for_variable(self.record)]


@strawberry.type(description="A variable that has an associated definition of the value")
class RepresentedVariable:
    id: int
    short_name: Optional[str]
    is_typically_sensitive: bool
    name: str
    description: str
    record: strawberry.Private[domain.RepresentedVariable]

    @classmethod
    def from_record(cls, record: domain.RepresentedVariable) -> "RepresentedVariable":
        return cls(
            id=record.id,
            short_name=record.short_name,
            is_typically_sensitive=record.is_typically_sensitive,
            name=record.name,
            description=record.description,
            record=record,
        )

    @strawberry.field(description="The variable this represented variable takes its meaning from")
    def variable(self, info: Info) -> Optional[Variable]:
        variable = info.context["resolver"].variable_for_represented_variable(self.record)
        return Variable.from_record(variable) if variable else None


@strawberry.type(description="A question within an instrument")
class Question:
    id: int
    name: str = strawberry.field(description="The name of the question")
    description: Optional[str] = strawberry.field(description="The description for the question")
    question_purpose: Optional[str] = strawberry.field(description="The purpose of the question")
    question_text: Optional[str] = strawberry.field(description="The display text for the question")
    record: strawberry.Private[domain.Question]

    @classmethod
    def from_record(cls, record: domain.Question) -> "Question":
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            question_purpose=record.question_purpose,
            question_text=record.question_text,
            record=record,
        )

    @strawberry.field(description="References to associated questions")
    def references(self, info: Info) -> List["Question"]:
        resolver = info.context["resolver"]
        return [Question.from_record(q) for q in resolver.referenced_questions(self.record)]

    @strawberry.field(description="The Represented Variable and associated value details")
    def represented_variable(self, info: Info) -> Optional[RepresentedVariable]:
        rv = info.context["resolver"].represented_variable_for_question(self.record)
        return RepresentedVariable.from_record(rv) if rv else None


@strawberry.type(description="An ordered collection of Questions forming a module")
class QuestionBlock:
    id: int
    name: str = strawberry.field(description="The name of the question block")
    description: str = strawberry.field(description="The description for the question block")
    record: strawberry.Private[domain.QuestionBlock]

    @classmethod
    def from_record(cls, record: domain.QuestionBlock) -> "QuestionBlock":
        return cls(id=record.id, name=record.name, description=record.description, record=record)

    @strawberry.field(description="The questions within the block, in block order")
    def questions(self, info: Info) -> List[Question]:
        resolver = info.context["resolver"]
        return [Question.from_record(q) for q in resolver.questions_for_block(self.record)]


@strawberry.type
class Query:
    @strawberry.field(description="List all Question Blocks")
    def all_question_blocks(self, info: Info) -> List[QuestionBlock]:
        return [QuestionBlock.from_record(r) for r in info.context["lookup"].all_question_blocks()]

    @strawberry.field(description="List all Questions")
    def all_questions(self, info: Info) -> List[Question]:
        return [Question.from_record(r) for r in info.context["lookup"].all_questions()]

    @strawberry.field(description="List all Represented Variables")
    def all_represented_variables(self, info: Info) -> List[RepresentedVariable]:
        return [RepresentedVariable.from_record(r) for r in info.context["lookup"].all_represented_variables()]

    @strawberry.field(description="List all Variables")
    def all_variables(self, info: Info) -> List[Variable]:
        return [Variable.from_record(r) for r in info.context["lookup"].all_variables()]

    @strawberry.field(description="List all Unit Types")
    def all_unit_types(self, info: Info) -> List[UnitType]:
        return [UnitType.from_record(r) for r in info.context["lookup"].all_unit_types()]

    @strawberry.field(description="List all Concepts")
    def all_concepts(self, info: Info) -> List[Concept]:
        return [Concept.from_record(r) for r in info.context["lookup"].all_concepts()]

    @strawberry.field(name="QuestionBlock", description="Get a specific Question Block based on the ID")
    def question_block(self, info: Info, id: int) -> Optional[QuestionBlock]:
        record = info.context["lookup"].question_block(id)
        return QuestionBlock.from_record(record) if record else None

    @strawberry.field(name="Question", description="Get a specific Question based on the ID")
    def question(self, info: Info, id: int) -> Optional[Question]:
        record = info.context["lookup"].question(id)
        return Question.from_record(record) if record else None

    @strawberry.field(name="RepresentedVariable", description="Get a specific Represented Variable based on the ID")
    def represented_variable(self, info: Info, id: int) -> Optional[RepresentedVariable]:
        record = info.context["lookup"].represented_variable(id)
        return RepresentedVariable.from_record(record) if record else None

    @strawberry.field(name="Variable", description="Get a specific Variable based on the ID")
    def variable(self, info: Info, id: int) -> Optional[Variable]:
        record = info.context["lookup"].variable(id)
        return Variable.from_record(record) if record else None

    @strawberry.field(name="UnitType", description="Get a specific Unit Type based on the ID")
    def unit_type(self, info: Info, id: int) -> Optional[UnitType]:
        record = info.context["lookup"].unit_type(id)
        return UnitType.from_record(record) if record else None

    @strawberry.field(name="Concept", description="Get a specific Concept based on the ID")
    def concept(self, info: Info, id: int) -> Optional[Concept]:
        record = info.context["lookup"].concept(id)
        return Concept.from_record(record) if record else None


schema = strawberry.Schema(query=Query)
