"""
Survey Catalog: a read-only GraphQL API over survey instrument design metadata.
"""

from .base import EntityKind
from .entity import (
    CatalogDataset,
    CatalogEntity,
    Concept,
    Question,
    QuestionBlock,
    RepresentedVariable,
    UnitType,
    Variable,
)

__all__ = [
    "EntityKind",
    "CatalogDataset",
    "CatalogEntity",
    "Concept",
    "UnitType",
    "Variable",
    "RepresentedVariable",
    "Question",
    "QuestionBlock",
]
