"""
Activity log model for the linkedin_automation.activity_log collection.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field

from outreach_store.models.base import StoreDocument


class ActivityLogEntry(StoreDocument):
    """
    One automation action (search, connect, message, login, ...).
    """
    action: str = Field(..., description="Action name")
    profile_id: Optional[str] = Field(None, description="linkedin_id of the profile involved, if any")
    details: Optional[dict[str, Any]] = Field(None, description="Action-specific details")
    success: bool = Field(..., description="Whether the action succeeded")
    duration_ms: Optional[int] = Field(None, ge=0, description="Duration in milliseconds")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the action happened"
    )
