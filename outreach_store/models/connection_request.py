"""
Connection request model for the linkedin_automation.connection_requests collection.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field

from outreach_store.models.base import StoreDocument


class ConnectionStatus(str, Enum):
    """Outreach status of a connection request."""
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"
    PENDING = "pending"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({
    ConnectionStatus.ACCEPTED,
    ConnectionStatus.REJECTED,
    ConnectionStatus.WITHDRAWN,
    ConnectionStatus.FAILED,
})


class ConnectionRequest(StoreDocument):
    """
    An outreach action targeting a profile.

    profile_id holds the target's linkedin_id. The reference is not enforced
    by the store.
    """
    profile_id: str = Field(..., min_length=1, description="linkedin_id of the target profile")
    status: ConnectionStatus = Field(..., description="Request status")
    sent_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the request was sent"
    )

    profile_name: Optional[str] = Field(None, description="Target name at send time")
    note: Optional[str] = Field(None, description="Personal note attached to the request")
    updated_at: Optional[datetime] = Field(None, description="Last status change")
    accepted_at: Optional[datetime] = Field(None, description="When the request was accepted")
    error_message: Optional[str] = Field(None, description="Failure reason for failed requests")
    retry_count: int = Field(default=0, ge=0, description="Number of send retries")

    @property
    def is_terminal(self) -> bool:
        """Whether the request has reached a final status."""
        return ConnectionStatus(self.status).is_terminal
