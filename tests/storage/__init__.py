"""
Tests for the storage layer.

Run with:
    pytest tests/storage/ -v
"""
