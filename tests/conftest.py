"""
Global test fixtures for outreach_store.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock)
- Document factories built from the collection validators
- Mock pymongo / motor database handles for registrar tests
"""

from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import mongomock
import pytest

from outreach_store.config import get_settings
from outreach_store.database.databases import automation_db


# =============================================================================
# Document Factories
# =============================================================================

SAMPLE_VALUES = {
    "string": "sample",
    "date": datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc),
    "int": 1,
    "long": 1,
    "double": 1.0,
    "number": 1,
    "bool": True,
    "object": {},
    "array": [],
}


def _build_document(schema: dict, **overrides: Any) -> dict:
    """
    Build the smallest document a validator accepts.

    Only required fields are filled. Enum fields take their first allowed value.

    Args:
        schema: A $jsonSchema descriptor from automation_db.VALIDATORS
        **overrides: Field values to set (or replace) on the document

    Returns:
        Document accepted by the validator, plus overrides
    """
    document = {}
    for field in schema["required"]:
        rules = schema["properties"][field]
        if "enum" in rules:
            document[field] = rules["enum"][0]
            continue
        bson_type = rules["bsonType"]
        if isinstance(bson_type, list):
            bson_type = bson_type[0]
        document[field] = SAMPLE_VALUES[bson_type]
    document.update(overrides)
    return document


@pytest.fixture
def build_document():
    """Factory building minimal valid documents from a validator."""
    return _build_document


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def profile_document(now) -> dict:
    """A complete minimal profile document."""
    return {
        "linkedin_id": "abc123",
        "name": "Jane Doe",
        "url": "https://www.linkedin.com/in/janedoe",
        "discovered_at": now,
    }


@pytest.fixture
def connection_request_document(now) -> dict:
    """A connection request document in the 'sent' state."""
    return {
        "profile_id": "abc123",
        "status": "sent",
        "sent_at": now,
    }


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """In-memory MongoDB client."""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mock_automation_db(mock_mongo_client):
    """In-memory linkedin_automation database."""
    return mock_mongo_client[automation_db.DB_NAME]


# =============================================================================
# Mock Database Handles
# =============================================================================

@pytest.fixture
def mock_database():
    """
    A pymongo Database stand-in.

    Starts empty; set list_collection_names.return_value to simulate an
    initialized database.
    """
    database = MagicMock()
    database.name = automation_db.DB_NAME
    database.list_collection_names.return_value = []
    return database


@pytest.fixture
def mock_async_database():
    """A motor AsyncIOMotorDatabase stand-in."""
    database = MagicMock()
    database.name = automation_db.DB_NAME
    database.list_collection_names = AsyncMock(return_value=[])
    database.create_collection = AsyncMock()
    database.command = AsyncMock()
    return database


# =============================================================================
# Settings
# =============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; make every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
