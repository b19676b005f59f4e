"""
Error types raised while preparing and writing to the outreach store.
"""
from typing import Optional


class SchemaRegistrarError(Exception):
    """Base class for every error raised by this package."""


class SchemaConnectionError(SchemaRegistrarError, ConnectionError):
    """The datastore could not be reached through the supplied handle."""


class AlreadyExistsError(SchemaRegistrarError):
    """A collection was found where the registrar expected to create one."""

    def __init__(self, collection: str, message: Optional[str] = None):
        self.collection = collection
        super().__init__(message or f"Collection '{collection}' already exists")


class ValidationSpecError(SchemaRegistrarError, ValueError):
    """A validator descriptor is malformed. Always a programming error."""


class DocumentValidationError(SchemaRegistrarError, ValueError):
    """A document does not satisfy its collection's validator."""

    def __init__(self, collection: str, errors: list[str]):
        self.collection = collection
        self.errors = list(errors)
        details = "; ".join(self.errors) or "rejected by server-side validator"
        super().__init__(f"Document rejected by '{collection}': {details}")
