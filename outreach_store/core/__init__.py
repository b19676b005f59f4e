"""
Core module - Error types and document validation.
"""
from outreach_store.core.exceptions import (
    AlreadyExistsError,
    DocumentValidationError,
    SchemaConnectionError,
    SchemaRegistrarError,
    ValidationSpecError,
)
from outreach_store.core.validation import (
    check_schema,
    validate_document,
)

__all__ = [
    "AlreadyExistsError",
    "DocumentValidationError",
    "SchemaConnectionError",
    "SchemaRegistrarError",
    "ValidationSpecError",
    "check_schema",
    "validate_document",
]
