"""
Pytest configuration and shared fixtures.
"""

import json

import pytest
from unittest.mock import MagicMock


class FakeDatabase:
    """Dict-backed stand-in for a pymongo Database: db[name] returns one mock per collection."""

    def __init__(self, existing=None):
        self.collections = {}
        for name, indexes in (existing or {}).items():
            self[name].list_search_indexes.return_value = indexes

    def __getitem__(self, name):
        if name not in self.collections:
            coll = MagicMock(name=f"collection[{name}]")
            coll.list_search_indexes.return_value = []
            self.collections[name] = coll
        return self.collections[name]


@pytest.fixture
def make_db():
    """Build a fake database; `existing` maps collection name -> list of index documents."""
    return FakeDatabase


@pytest.fixture
def vector_definition():
    return {
        "name": "vector",
        "type": "vectorSearch",
        "definition": {
            "fields": [
                {"type": "vector", "path": "embedding", "numDimensions": 1536, "similarity": "cosine"}
            ]
        },
    }


@pytest.fixture
def config_dir(tmp_path, vector_definition):
    """A base directory with config/indexes/ holding definitions for the default specs."""
    index_dir = tmp_path / "config" / "indexes"
    index_dir.mkdir(parents=True)
    for file_name in ("products.vector.json", "docs.vector.json"):
        (index_dir / file_name).write_text(json.dumps(vector_definition), encoding="utf-8")
    for file_name in ("products.hybrid.json", "tickets.hybrid.json"):
        doc = {"name": "hybrid", "type": "search", "definition": {"mappings": {"dynamic": True}}}
        (index_dir / file_name).write_text(json.dumps(doc), encoding="utf-8")
    return tmp_path
