"""
## Overview

Domain models for the survey instrument catalog.

These are the Pydantic classes the store, the resolver and the GraphQL layer
share. Records are frozen once validated: reference fields hold plain integer
ids (tuples for multi-valued references) and are followed by the
`RelationshipResolver`, never embedded.

Datasets are authored with camelCase keys (`takesMeaningFrom`,
`representedVariableId`, ...). Models accept those keys as aliases and also
their snake_case field names.

## Reference normalization

Loose reference typing is tolerated at load time and normalized:

- a reference stored as a numeric string (`'1'`) becomes the int `1`, with a warning
- a multi-valued reference stored as a single scalar (`isBasedOn: 0`) becomes `(0,)`
"""

import json
import logging
from typing import Any, ClassVar, Iterable, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .base import EntityKind

logger = logging.getLogger(__name__)


def coerce_reference(value: Any, info: ValidationInfo) -> Any:
    """Turn a numeric string reference into an int, logging the mismatch."""
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        record_id = info.data.get("id")
        logger.warning(f"Reference {info.field_name}={value!r} on record {record_id} stored as a string; normalized to int")
        return int(value.strip())
    return value


def coerce_reference_list(value: Any, info: ValidationInfo) -> Any:
    """Normalize a multi-valued reference to a list of ints."""
    if value is None:
        return []
    if isinstance(value, (int, str)):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return value
    return [coerce_reference(item, info) for item in value]


class CatalogEntity(BaseModel):
    """
    Base class for every record in the catalog.

    Attributes:
        id: Identifier, unique within the record's kind. Id 0 is the
            placeholder ("TBD") record of each kind and is ordinary data.
        name: Display name
        description: Free-text description
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    kind: ClassVar[EntityKind]

    id: int
    name: str
    description: str


class Concept(CatalogEntity):
    """
    An abstract statistical notion, e.g. "Person", that grounds unit types and variables.

    Attributes:
        concept_label: Alternative labels for the concept
        is_characteristic: Whether the concept describes a characteristic
        is_comparable_to: Ids of comparable concepts
        is_qualification_of: Ids of concepts this one qualifies
    """

    kind: ClassVar[EntityKind] = EntityKind.CONCEPT

    concept_label: tuple[str, ...] = ()
    is_characteristic: Optional[bool] = None
    is_comparable_to: tuple[int, ...] = ()
    is_qualification_of: tuple[int, ...] = ()

    @field_validator("is_comparable_to", "is_qualification_of", mode="before")
    @classmethod
    def normalize_references(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference_list(value, info)


class UnitType(CatalogEntity):
    """
    The kind of real-world unit (person, household, business) data is collected about.

    Attributes:
        references: Ids of related unit types
        is_based_on: Ids of the concepts the unit type is based on
    """

    kind: ClassVar[EntityKind] = EntityKind.UNIT_TYPE

    references: tuple[int, ...] = ()
    is_based_on: tuple[int, ...]

    @field_validator("references", "is_based_on", mode="before")
    @classmethod
    def normalize_references(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference_list(value, info)


class Variable(CatalogEntity):
    """
    A measurable characteristic tied to a unit type and a concept.

    Attributes:
        is_comparable_to: Ids of comparable variables
        unit_type_id: Id of the unit type the variable is about
        measures: Id of the concept the variable measures
    """

    kind: ClassVar[EntityKind] = EntityKind.VARIABLE

    is_comparable_to: tuple[int, ...] = ()
    unit_type_id: int
    measures: int

    @field_validator("is_comparable_to", mode="before")
    @classmethod
    def normalize_reference_list(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference_list(value, info)

    @field_validator("unit_type_id", "measures", mode="before")
    @classmethod
    def normalize_reference(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference(value, info)


class RepresentedVariable(CatalogEntity):
    """
    A variable paired with a value-domain definition.

    The variable it derives from is stored as `takes_meaning_from` and
    exposed to clients as the `variable` relationship.
    """

    kind: ClassVar[EntityKind] = EntityKind.REPRESENTED_VARIABLE

    short_name: Optional[str] = None
    is_typically_sensitive: bool = False
    takes_meaning_from: int

    @field_validator("takes_meaning_from", mode="before")
    @classmethod
    def normalize_reference(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference(value, info)


class Question(CatalogEntity):
    """
    A single instrument question tied to one represented variable.

    Attributes:
        question_purpose: Why the question is asked
        question_text: Text displayed to the respondent
        references: Ids of associated questions
        represented_variable_id: Id of the represented variable the answer populates
    """

    kind: ClassVar[EntityKind] = EntityKind.QUESTION

    question_purpose: Optional[str] = None
    question_text: Optional[str] = None
    references: tuple[int, ...] = ()
    represented_variable_id: int

    @field_validator("references", mode="before")
    @classmethod
    def normalize_reference_list(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference_list(value, info)

    @field_validator("represented_variable_id", mode="before")
    @classmethod
    def normalize_reference(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference(value, info)


class QuestionBlock(CatalogEntity):
    """An ordered grouping of questions forming a module."""

    kind: ClassVar[EntityKind] = EntityKind.QUESTION_BLOCK

    questions: tuple[int, ...] = ()

    @field_validator("questions", mode="before")
    @classmethod
    def normalize_references(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_reference_list(value, info)


ENTITY_MODELS: dict[EntityKind, type[CatalogEntity]] = {
    EntityKind.CONCEPT: Concept,
    EntityKind.UNIT_TYPE: UnitType,
    EntityKind.VARIABLE: Variable,
    EntityKind.REPRESENTED_VARIABLE: RepresentedVariable,
    EntityKind.QUESTION: Question,
    EntityKind.QUESTION_BLOCK: QuestionBlock,
}


# ========== Dataset ==========


class CatalogDataset(BaseModel):
    """
    The six record collections of a catalog, in insertion order.

    This is the unit a store is built from. It can be validated from a dict
    of raw records (the embedded dataset) or loaded from a JSONL file in
    which every line is `{"type": <kind>, "data": <record>}`.
    """

    model_config = ConfigDict(frozen=True)

    concepts: tuple[Concept, ...] = ()
    unit_types: tuple[UnitType, ...] = ()
    variables: tuple[Variable, ...] = ()
    represented_variables: tuple[RepresentedVariable, ...] = ()
    questions: tuple[Question, ...] = ()
    question_blocks: tuple[QuestionBlock, ...] = ()

    def records(self, kind: EntityKind) -> tuple[CatalogEntity, ...]:
        """Records of one kind, in insertion order."""
        return getattr(self, _COLLECTION_FIELDS[kind])

    @property
    def entity_count(self) -> int:
        """Total number of records across all kinds"""
        return sum(len(self.records(kind)) for kind in EntityKind)

    def save(self, path: str):
        """Save to JSONL with type information"""
        with open(path, "w") as f:
            for kind in EntityKind:
                for entity in self.records(kind):
                    record = {"type": kind.value, "data": entity.model_dump(mode="json", by_alias=True)}
                    f.write(json.dumps(record) + "\n")

    @classmethod
    def load(cls, path: str) -> "CatalogDataset":
        """Load from JSONL with type information"""
        with open(path) as f:
            return cls.from_records(_read_jsonl(f, path))

    @classmethod
    def from_records(cls, records: Iterable[tuple[EntityKind, dict]]) -> "CatalogDataset":
        """Build a dataset from `(kind, raw record)` pairs, keeping their order."""
        collected: dict[EntityKind, list[CatalogEntity]] = {kind: [] for kind in EntityKind}
        for kind, data in records:
            collected[kind].append(ENTITY_MODELS[kind].model_validate(data))
        return cls(**{_COLLECTION_FIELDS[kind]: tuple(items) for kind, items in collected.items()})


_COLLECTION_FIELDS: dict[EntityKind, str] = {
    EntityKind.CONCEPT: "concepts",
    EntityKind.UNIT_TYPE: "unit_types",
    EntityKind.VARIABLE: "variables",
    EntityKind.REPRESENTED_VARIABLE: "represented_variables",
    EntityKind.QUESTION: "questions",
    EntityKind.QUESTION_BLOCK: "question_blocks",
}


def _read_jsonl(lines: Iterable[str], source: str) -> Iterable[tuple[EntityKind, dict]]:
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        record = json.loads(line)
        try:
            type_tag, data = record["type"], record["data"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed record on line {line_number} of {source}") from exc
        try:
            kind = EntityKind(type_tag)
        except ValueError as exc:
            raise ValueError(f"Unknown record type {type_tag!r} on line {line_number} of {source}") from exc
        yield kind, data
