"""
Schema registrar for the linkedin_automation database.
Ensures every collection exists, with validators and indexes, before first use.

Re-running against an initialized database is deterministic:
- exist_ok=True: existing collections are kept and their validators are
  re-applied with collMod, so the stored validator always matches VALIDATORS.
- exist_ok=False: the first existing collection raises AlreadyExistsError and
  the remaining collections are not touched.

Nothing here is transactional. A failure part-way leaves the collections that
were already created in place.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel, Field
from pymongo.database import Database
from pymongo.errors import CollectionInvalid, ConnectionFailure, OperationFailure

from outreach_store.core.exceptions import AlreadyExistsError, SchemaConnectionError
from outreach_store.core.validation import check_schema
from outreach_store.database.databases import automation_db
from outreach_store.database.databases.automation_db import Collections

logger = logging.getLogger(__name__)

# Server error code for "collection already exists"
NAMESPACE_EXISTS = 48


class SchemaStatus(BaseModel):
    """Snapshot of which expected collections and validators are present."""
    db_name: str
    present: list[str] = Field(default=[], description="Expected collections that exist")
    missing: list[str] = Field(default=[], description="Expected collections that do not exist")
    validated: list[str] = Field(default=[], description="Collections carrying a $jsonSchema validator")

    @property
    def is_complete(self) -> bool:
        """All collections exist and every validated collection has its validator."""
        expected = automation_db.DB_MANIFEST["validated_collections"]
        return not self.missing and set(expected) <= set(self.validated)


@contextmanager
def _driver_errors() -> Iterator[None]:
    """Translate driver connection failures into SchemaConnectionError."""
    try:
        yield
    except ConnectionFailure as e:
        raise SchemaConnectionError(f"MongoDB unreachable: {e}") from e


def _is_already_exists(error: Exception) -> bool:
    if isinstance(error, CollectionInvalid):
        return True
    return isinstance(error, OperationFailure) and error.code == NAMESPACE_EXISTS


def check_validators() -> None:
    """Fail fast on a malformed validator before any request is sent."""
    for schema in automation_db.VALIDATORS.values():
        check_schema(schema)


def ensure_schema(database: Database, *, exist_ok: bool = True) -> None:
    """
    Ensure all linkedin_automation collections exist with their validators.

    Args:
        database: Open pymongo database handle owned by the caller
        exist_ok: Keep existing collections (True) or fail on them (False)

    Raises:
        ValidationSpecError: If a validator descriptor is malformed
        AlreadyExistsError: If a collection exists and exist_ok is False
        SchemaConnectionError: If the server cannot be reached
    """
    check_validators()

    with _driver_errors():
        existing = set(database.list_collection_names())

        for name in Collections.ALL:
            options = automation_db.collection_options(name)

            if name not in existing:
                try:
                    database.create_collection(name, **options)
                    logger.info(f"Created collection '{name}'" + (" with validator" if options else ""))
                    continue
                except (CollectionInvalid, OperationFailure) as e:
                    if not _is_already_exists(e):
                        raise
                    # Created by someone else since list_collection_names()

            if not exist_ok:
                raise AlreadyExistsError(name)

            if options:
                database.command("collMod", name, **options)
                logger.info(f"Collection '{name}' exists, validator refreshed")
            else:
                logger.info(f"Collection '{name}' exists, skipped")


async def ensure_schema_async(database: AsyncIOMotorDatabase, *, exist_ok: bool = True) -> None:
    """Async counterpart of ensure_schema() for a motor database."""
    check_validators()

    with _driver_errors():
        existing = set(await database.list_collection_names())

        for name in Collections.ALL:
            options = automation_db.collection_options(name)

            if name not in existing:
                try:
                    await database.create_collection(name, **options)
                    logger.info(f"Created collection '{name}'" + (" with validator" if options else ""))
                    continue
                except (CollectionInvalid, OperationFailure) as e:
                    if not _is_already_exists(e):
                        raise

            if not exist_ok:
                raise AlreadyExistsError(name)

            if options:
                await database.command("collMod", name, **options)
                logger.info(f"Collection '{name}' exists, validator refreshed")
            else:
                logger.info(f"Collection '{name}' exists, skipped")


def _index_args(index_def: dict) -> tuple[list, dict]:
    keys = index_def["keys"]
    kwargs = {k: v for k, v in index_def.items() if k != "keys"}
    return keys, kwargs


def ensure_indexes(database: Database) -> None:
    """Create the indexes for all linkedin_automation collections."""
    with _driver_errors():
        for collection_name, indexes in automation_db.INDEXES.items():
            collection = database[collection_name]
            for index_def in indexes:
                keys, kwargs = _index_args(index_def)
                index_name = collection.create_index(keys, **kwargs)
                logger.debug(f"Index '{index_name}' ready on '{collection_name}'")
            logger.info(f"Indexes ready on '{collection_name}' ({len(indexes)})")


async def ensure_indexes_async(database: AsyncIOMotorDatabase) -> None:
    """Async counterpart of ensure_indexes() for a motor database."""
    with _driver_errors():
        for collection_name, indexes in automation_db.INDEXES.items():
            collection = database[collection_name]
            for index_def in indexes:
                keys, kwargs = _index_args(index_def)
                index_name = await collection.create_index(keys, **kwargs)
                logger.debug(f"Index '{index_name}' ready on '{collection_name}'")
            logger.info(f"Indexes ready on '{collection_name}' ({len(indexes)})")


def describe_schema(database: Database) -> SchemaStatus:
    """
    Inspect which expected collections and validators exist.

    The expected collections are the ones listed in the database manifest.

    Args:
        database: Open pymongo database handle

    Returns:
        SchemaStatus for the expected collections
    """
    with _driver_errors():
        infos = {info["name"]: info for info in database.list_collections()}

    expected = automation_db.DB_MANIFEST["collections"]
    validated = [
        name for name in expected
        if name in infos and "$jsonSchema" in infos[name].get("options", {}).get("validator", {})
    ]
    return SchemaStatus(
        db_name=database.name,
        present=[name for name in expected if name in infos],
        missing=[name for name in expected if name not in infos],
        validated=validated,
    )
