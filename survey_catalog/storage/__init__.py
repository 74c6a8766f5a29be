"""
Storage layer for the survey catalog.

Key Components:

- **interfaces**: Abstract base class defining the read-only store contract
- **backends**: Concrete implementations (in-memory)

Example:

    >>> from survey_catalog.storage.backends.memory import InMemoryCatalogStore
    >>> from survey_catalog.sample_data import load_sample_dataset
    >>>
    >>> store = InMemoryCatalogStore(load_sample_dataset())
    >>> store.get_question(9).name
    'Sexual assault'
"""

__all__ = [
    "interfaces",
    "backends",
]
