"""
Session state model for the linkedin_automation.session_state collection.
"""
from datetime import datetime, timezone
from typing import Any

from pydantic import Field

from outreach_store.models.base import StoreDocument


class SessionState(StoreDocument):
    """
    A keyed piece of browser session state ("cookies", "last_login", ...).
    """
    key: str = Field(..., min_length=1, description="Unique state key")
    value: Any = Field(None, description="Stored value")
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last write timestamp"
    )
