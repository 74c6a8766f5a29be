"""
Tests for the survey_catalog package.

This directory contains unit tests for:
- Domain models and dataset loading (entity.py, sample_data.py)
- The in-memory store and dangling-reference checks (storage/)
- Lookup and relationship resolution (lookup.py, resolver.py)
- The GraphQL schema and HTTP application (query/)
"""
