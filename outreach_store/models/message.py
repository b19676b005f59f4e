"""
Message model for the linkedin_automation.messages collection.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field

from outreach_store.models.base import StoreDocument


class MessageStatus(str, Enum):
    """Delivery status of a message."""
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"
    READ = "read"


class Message(StoreDocument):
    """
    A direct message sent to a connected profile.
    """
    profile_id: str = Field(..., description="linkedin_id of the recipient")
    profile_name: Optional[str] = Field(None, description="Recipient name at send time")
    content: str = Field(..., description="Rendered message body")
    template_name: Optional[str] = Field(None, description="Template the body was rendered from")
    sent_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the message was sent"
    )
    status: MessageStatus = Field(default=MessageStatus.SENT, description="Delivery status")
    error_message: Optional[str] = Field(None, description="Failure reason")
    response_received: bool = Field(default=False, description="Whether the recipient replied")
