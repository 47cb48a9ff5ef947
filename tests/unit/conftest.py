"""Shared fixtures for unit tests."""

from typing import Dict
from unittest.mock import MagicMock, Mock

import pytest

from pipeline_fixtures.config import get_settings
from pipeline_fixtures.generators.string_pool import default_pool


def _insert_result(docs, ordered=True):
    return Mock(inserted_ids=[doc["_id"] for doc in docs])


@pytest.fixture
def mock_db():
    """Database double handing out one collection double per name"""
    collections: Dict[str, MagicMock] = {}
    db = MagicMock(name="db")

    def get_collection(name):
        if name not in collections:
            collection = MagicMock(name=f"collection.{name}")
            collection.name = name
            collection.database = db
            collection.insert_many.side_effect = _insert_result
            collections[name] = collection
        return collections[name]

    db.__getitem__.side_effect = get_collection
    db.collections = collections
    return db


@pytest.fixture
def collection(mock_db):
    """Benchmark collection double"""
    return mock_db["bench"]


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings and pool so env overrides take effect"""
    get_settings.cache_clear()
    default_pool.cache_clear()
    yield
    get_settings.cache_clear()
    default_pool.cache_clear()


@pytest.fixture
def inserted_docs():
    """Return the documents passed to a collection's single insert_many call"""
    def _inserted(collection):
        collection.insert_many.assert_called_once()
        return collection.insert_many.call_args.args[0]
    return _inserted
