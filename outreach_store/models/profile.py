"""
Profile model for the linkedin_automation.profiles collection.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field

from outreach_store.models.base import StoreDocument


class Profile(StoreDocument):
    """
    A discovered LinkedIn profile.

    linkedin_id, name, url and discovered_at are enforced by the collection
    validator; everything else is free-form enrichment.
    """
    linkedin_id: str = Field(..., min_length=1, description="Stable LinkedIn profile identifier")
    name: str = Field(..., min_length=1, description="Display name")
    url: str = Field(..., min_length=1, description="Canonical profile URL")
    title: Optional[str] = Field(None, description="Job title")
    company: Optional[str] = Field(None, description="Company name")
    discovered_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the profile was first discovered"
    )
    updated_at: Optional[datetime] = Field(None, description="Last modification timestamp")

    # Enrichment (not validated by the store)
    location: Optional[str] = Field(None, description="Location as shown on the profile")
    photo_url: Optional[str] = Field(None, description="Profile photo URL")
    headline: Optional[str] = Field(None, description="Profile headline")
    about: Optional[str] = Field(None, description="About section text")
    tags: list[str] = Field(default=[], description="Free-form labels used for targeting")
    metadata: dict[str, Any] = Field(default={}, description="Source-specific extra data")
