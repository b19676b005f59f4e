"""
Database module - MongoDB connections, collection definitions and the schema registrar.
"""
from outreach_store.database.connections import (
    connect,
    connect_async,
    get_async_database,
    get_database,
)
from outreach_store.database.databases import automation_db
from outreach_store.database.documents import check_document, insert_validated
from outreach_store.database.registry import (
    SchemaStatus,
    describe_schema,
    ensure_indexes,
    ensure_indexes_async,
    ensure_schema,
    ensure_schema_async,
)

__all__ = [
    "connect",
    "connect_async",
    "get_database",
    "get_async_database",
    "automation_db",
    "check_document",
    "insert_validated",
    "SchemaStatus",
    "describe_schema",
    "ensure_indexes",
    "ensure_indexes_async",
    "ensure_schema",
    "ensure_schema_async",
]
