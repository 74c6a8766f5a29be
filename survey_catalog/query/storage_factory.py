"""
Storage factory for building the catalog store and handing it to requests.

The store is built once in the application lifespan and kept on
`app.state`; request handlers receive it through the `get_store` dependency.
"""

import logging
import os

from fastapi import Request

from survey_catalog.entity import CatalogDataset
from survey_catalog.sample_data import load_sample_dataset
from survey_catalog.storage.backends.memory import InMemoryCatalogStore, find_dangling_references
from survey_catalog.storage.interfaces import CatalogStoreInterface

logger = logging.getLogger(__name__)


def load_dataset() -> CatalogDataset:
    """
    Load the catalog dataset.

    Reads the JSONL file named by `SURVEY_CATALOG_DATA` if set, otherwise
    the embedded dataset.
    """
    path = os.getenv("SURVEY_CATALOG_DATA")
    if path:
        logger.info(f"Loading catalog dataset from {path}")
        return CatalogDataset.load(path)
    logger.info("Loading embedded catalog dataset")
    return load_sample_dataset()


def create_store() -> InMemoryCatalogStore:
    """
    Build the store and report any dangling references in it.
    """
    store = InMemoryCatalogStore(load_dataset())
    for reference in find_dangling_references(store):
        logger.warning(f"Dangling reference: {reference}")
    return store


def get_store(request: Request) -> CatalogStoreInterface:
    """
    FastAPI dependency that provides the store built at startup.
    """
    return request.app.state.store
