"""
Shared base for store document models.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class StoreDocument(BaseModel):
    """Base for every document written to the linkedin_automation database."""
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")

    class Config:
        populate_by_name = True
        use_enum_values = True

    def to_document(self) -> dict[str, Any]:
        """Dump to a MongoDB document, leaving unset optional fields out."""
        return self.model_dump(by_alias=True, exclude_none=True)
