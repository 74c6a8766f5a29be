"""
Shared vocabulary for the survey instrument catalog.

Every record in the catalog belongs to exactly one of six kinds. The
`EntityKind` tag is what store lookups are parameterized over, so a caller
always states which collection an id belongs to.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntityKind(str, Enum):
    """
    The six record kinds held by the catalog.

    Values double as the `type` tag of records in a JSONL dataset file.
    """

    CONCEPT = "concept"
    UNIT_TYPE = "unit_type"
    VARIABLE = "variable"
    REPRESENTED_VARIABLE = "represented_variable"
    QUESTION = "question"
    QUESTION_BLOCK = "question_block"


class EntityReference(BaseModel):
    """
    Reference from one catalog record to another.

    Used to report dangling references found while loading a dataset.
    """

    model_config = ConfigDict(frozen=True)

    source_kind: EntityKind = Field(..., description="Kind of the record holding the reference")
    source_id: int = Field(..., description="Id of the record holding the reference")
    field: str = Field(..., description="Name of the reference field")
    target_kind: EntityKind = Field(..., description="Kind the reference points at")
    target_id: int = Field(..., description="Referenced id")

    def __str__(self) -> str:
        return f"{self.source_kind.value}[{self.source_id}].{self.field} -> {self.target_kind.value}[{self.target_id}]"
