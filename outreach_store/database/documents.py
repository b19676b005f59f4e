"""
Validated writes to the linkedin_automation collections.
"""
import logging
from collections.abc import Mapping
from typing import Any

from pymongo.collection import Collection
from pymongo.errors import WriteError

from outreach_store.core.exceptions import DocumentValidationError
from outreach_store.core.validation import validate_document
from outreach_store.database.databases import automation_db
from outreach_store.models.base import StoreDocument

logger = logging.getLogger(__name__)

# Server error code for "Document failed validation"
DOCUMENT_VALIDATION_FAILURE = 121


def check_document(collection_name: str, document: Mapping[str, Any]) -> None:
    """
    Check a document against its collection's validator.

    Collections without a validator accept anything.

    Raises:
        DocumentValidationError: If the document would be rejected
    """
    schema = automation_db.VALIDATORS.get(collection_name)
    if schema is None:
        return
    errors = validate_document(schema, document)
    if errors:
        raise DocumentValidationError(collection_name, errors)


def insert_validated(collection: Collection, document: Mapping[str, Any] | StoreDocument) -> Any:
    """
    Insert a document after checking it against the collection's validator.

    Args:
        collection: Target collection
        document: Raw document or store model

    Returns:
        The inserted document id

    Raises:
        DocumentValidationError: If the document is rejected locally or by the server
    """
    if isinstance(document, StoreDocument):
        document = document.to_document()
    else:
        document = dict(document)

    check_document(collection.name, document)

    try:
        result = collection.insert_one(document)
    except WriteError as e:
        if e.code != DOCUMENT_VALIDATION_FAILURE:
            raise
        logger.warning(f"Server rejected document for '{collection.name}': {e.details}")
        raise DocumentValidationError(collection.name, []) from e

    return result.inserted_id
