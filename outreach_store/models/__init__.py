"""
Pydantic models for documents stored in the linkedin_automation database.
"""
from outreach_store.models.base import StoreDocument
from outreach_store.models.profile import Profile
from outreach_store.models.connection_request import (
    ConnectionRequest,
    ConnectionStatus,
    TERMINAL_STATUSES,
)
from outreach_store.models.message import Message, MessageStatus
from outreach_store.models.activity_log import ActivityLogEntry
from outreach_store.models.session_state import SessionState
from outreach_store.models.rate_limit import RateLimitRecord, iso_week

__all__ = [
    "StoreDocument",
    "Profile",
    "ConnectionRequest",
    "ConnectionStatus",
    "TERMINAL_STATUSES",
    "Message",
    "MessageStatus",
    "ActivityLogEntry",
    "SessionState",
    "RateLimitRecord",
    "iso_week",
]
