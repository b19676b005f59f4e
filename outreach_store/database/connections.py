"""
MongoDB connection management.

Handles are created here and passed explicitly to the registrar; nothing in
this package keeps a client at module level.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure

from outreach_store.config import Settings, get_settings
from outreach_store.core.exceptions import SchemaConnectionError

logger = logging.getLogger(__name__)


def client_options(settings: Settings) -> dict[str, Any]:
    """Pool and timeout options shared by the sync and async clients."""
    timeout_ms = settings.mongodb_timeout_seconds * 1000
    return {
        "maxPoolSize": settings.mongodb_max_pool_size,
        "minPoolSize": settings.mongodb_min_pool_size,
        "maxIdleTimeMS": settings.mongodb_max_idle_seconds * 1000,
        "serverSelectionTimeoutMS": timeout_ms,
        "connectTimeoutMS": timeout_ms,
    }


def connect(settings: Optional[Settings] = None) -> MongoClient:
    """
    Create a MongoDB client and verify the server answers.

    Args:
        settings: Connection settings (defaults to environment settings)

    Returns:
        Connected MongoClient. The caller owns it and must close it.

    Raises:
        SchemaConnectionError: If the server cannot be reached
    """
    settings = settings or get_settings()
    client = MongoClient(settings.mongodb_uri, **client_options(settings))
    try:
        client.admin.command("ping")
    except ConnectionFailure as e:
        client.close()
        raise SchemaConnectionError(f"Failed to connect to MongoDB: {e}") from e
    except Exception:
        client.close()
        raise

    logger.info(f"Connected to MongoDB at {settings.mongodb_uri}")
    return client


async def connect_async(settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """Async counterpart of connect() returning a motor client."""
    settings = settings or get_settings()
    client = AsyncIOMotorClient(settings.mongodb_uri, **client_options(settings))
    try:
        await client.admin.command("ping")
    except ConnectionFailure as e:
        client.close()
        raise SchemaConnectionError(f"Failed to connect to MongoDB: {e}") from e
    except Exception:
        client.close()
        raise

    logger.info(f"Connected to MongoDB at {settings.mongodb_uri}")
    return client


def get_database(client: MongoClient, db_name: Optional[str] = None) -> Database:
    """Get the automation database (or another one by name)."""
    return client[db_name or get_settings().mongodb_database]


def get_async_database(
    client: AsyncIOMotorClient,
    db_name: Optional[str] = None,
) -> AsyncIOMotorDatabase:
    """Get the automation database from a motor client."""
    return client[db_name or get_settings().mongodb_database]
