#!/usr/bin/env python3
"""
LinkedIn automation database bootstrap.

Creates the collections, validators and indexes of the linkedin_automation
database. Safe to run repeatedly unless SCHEMA_EXIST_OK is false.

Usage:
    outreach-store-init
    python -m outreach_store.bootstrap

Environment Variables:
    MONGODB_URI: MongoDB connection string
    MONGODB_DATABASE: Target database (default: linkedin_automation)
    MONGODB_TIMEOUT_SECONDS: Server selection timeout (default: 10)
    SCHEMA_EXIST_OK: Treat existing collections as success (default: true)
    LOG_LEVEL: Logging level (default: INFO)
"""
import logging
import sys

from outreach_store.config import get_settings
from outreach_store.core.exceptions import SchemaConnectionError, SchemaRegistrarError
from outreach_store.database.connections import connect, get_database
from outreach_store.database.registry import describe_schema, ensure_indexes, ensure_schema

logger = logging.getLogger("outreach_store.bootstrap")

EXIT_OK = 0
EXIT_SCHEMA_ERROR = 1
EXIT_CONNECTION_ERROR = 2


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run() -> None:
    """Connect and bring the database schema up to date."""
    settings = get_settings()
    client = connect(settings)
    try:
        database = get_database(client, settings.mongodb_database)
        ensure_schema(database, exist_ok=settings.schema_exist_ok)
        ensure_indexes(database)

        status = describe_schema(database)
        logger.info(
            f"Database '{status.db_name}': {len(status.present)} collections, "
            f"{len(status.validated)} validated"
        )
    finally:
        client.close()


def main() -> int:
    """Entry point. Returns the process exit code."""
    configure_logging(get_settings().log_level)

    try:
        run()
    except SchemaConnectionError as e:
        logger.error(f"Bootstrap failed: {e}")
        return EXIT_CONNECTION_ERROR
    except SchemaRegistrarError as e:
        logger.error(f"Bootstrap failed: {e}")
        return EXIT_SCHEMA_ERROR

    print("Collections created successfully")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
