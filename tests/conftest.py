"""
Global fixtures for the test suite.

Fixtures:
- `dataset`: the embedded catalog dataset
- `store`, `resolver`, `lookup`: the engine built over that dataset
- `make_store`: builds a store from raw records, for datasets with
  dangling references or duplicate ids

Run all tests with:
    pytest -v
"""

import pytest

from survey_catalog.base import EntityKind
from survey_catalog.entity import CatalogDataset
from survey_catalog.lookup import CatalogLookup
from survey_catalog.resolver import RelationshipResolver
from survey_catalog.sample_data import load_sample_dataset
from survey_catalog.storage.backends.memory import InMemoryCatalogStore


@pytest.fixture
def dataset():
    return load_sample_dataset()


@pytest.fixture
def store(dataset):
    return InMemoryCatalogStore(dataset)


@pytest.fixture
def resolver(store):
    return RelationshipResolver(store)


@pytest.fixture
def lookup(store):
    return CatalogLookup(store)


@pytest.fixture
def make_store():
    """Build a store from `{kind: [raw record, ...]}`."""

    def _make(records):
        return InMemoryCatalogStore(CatalogDataset.from_records((EntityKind(kind), data) for kind, items in records.items() for data in items))

    return _make
