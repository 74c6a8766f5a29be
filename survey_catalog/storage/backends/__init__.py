"""
Storage backend implementations.

Available Backends:

- **memory**: Immutable in-memory store built once from a `CatalogDataset`
"""

__all__ = [
    "memory",
]
