"""
LinkedIn automation database configuration.
Stores discovered profiles and everything the outreach bot does with them.

Structure:
- profiles: Discovered profiles (validated)
- connection_requests: Outreach actions per profile (validated)
- messages: Messages sent to connected profiles
- activity_log: Audit trail of bot actions
- session_state: Keyed browser session data
- rate_limits: Daily and hourly action counters
"""
from outreach_store.models.connection_request import ConnectionStatus

DB_NAME = "linkedin_automation"


class Collections:
    """Collection names in linkedin_automation."""
    PROFILES = "profiles"
    CONNECTION_REQUESTS = "connection_requests"
    MESSAGES = "messages"
    ACTIVITY_LOG = "activity_log"
    SESSION_STATE = "session_state"
    RATE_LIMITS = "rate_limits"

    # Creation order
    ALL = [
        PROFILES,
        CONNECTION_REQUESTS,
        MESSAGES,
        ACTIVITY_LOG,
        SESSION_STATE,
        RATE_LIMITS,
    ]


# $jsonSchema validators, keyed by collection name.
# Collections missing from this mapping accept any document.
VALIDATORS = {
    Collections.PROFILES: {
        "bsonType": "object",
        "required": ["linkedin_id", "name", "url", "discovered_at"],
        "properties": {
            "linkedin_id": {
                "bsonType": "string",
                "minLength": 1,
                "description": "LinkedIn profile ID - required",
            },
            "name": {
                "bsonType": "string",
                "minLength": 1,
                "description": "Profile name - required",
            },
            "url": {
                "bsonType": "string",
                "minLength": 1,
                "description": "LinkedIn profile URL - required",
            },
            "title": {
                "bsonType": "string",
                "description": "Job title",
            },
            "company": {
                "bsonType": "string",
                "description": "Company name",
            },
            "discovered_at": {
                "bsonType": "date",
                "description": "Discovery timestamp - required",
            },
            "updated_at": {
                "bsonType": "date",
                "description": "Last update timestamp",
            },
        },
    },
    Collections.CONNECTION_REQUESTS: {
        "bsonType": "object",
        "required": ["profile_id", "status", "sent_at"],
        "properties": {
            "profile_id": {
                "bsonType": "string",
                "minLength": 1,
                "description": "Reference to profile - required",
            },
            "status": {
                "bsonType": "string",
                "enum": [status.value for status in ConnectionStatus],
                "description": "Request status - required",
            },
            "sent_at": {
                "bsonType": "date",
                "description": "Send timestamp - required",
            },
        },
    },
}

# Index definitions for each collection
INDEXES = {
    Collections.PROFILES: [
        {"keys": [("linkedin_id", 1)], "unique": True},
        {"keys": [("url", 1)], "unique": True},
        {"keys": [("discovered_at", -1)]},
        {"keys": [("name", "text"), ("company", "text"), ("title", "text")]},
        {"keys": [("tags", 1)]},
    ],
    Collections.CONNECTION_REQUESTS: [
        {"keys": [("profile_id", 1)], "unique": True},
        {"keys": [("status", 1)]},
        {"keys": [("sent_at", -1)]},
        {"keys": [("status", 1), ("sent_at", -1)]},
    ],
    Collections.MESSAGES: [
        {"keys": [("profile_id", 1)]},
        {"keys": [("sent_at", -1)]},
        {"keys": [("status", 1)]},
    ],
    Collections.ACTIVITY_LOG: [
        {"keys": [("created_at", -1)]},
        {"keys": [("action", 1), ("created_at", -1)]},
        {"keys": [("profile_id", 1)]},
    ],
    Collections.SESSION_STATE: [
        {"keys": [("key", 1)], "unique": True},
    ],
    Collections.RATE_LIMITS: [
        {"keys": [("action_type", 1), ("date", 1)]},
        # Daily counters have no hour, so each (action_type, date) holds one
        # daily counter plus up to 24 hourly ones.
        {"keys": [("action_type", 1), ("date", 1), ("hour", 1)], "unique": True},
        {"keys": [("action_type", 1), ("week", 1)]},
    ],
}


def collection_options(name: str) -> dict:
    """Keyword arguments for create_collection / collMod for a collection."""
    schema = VALIDATORS.get(name)
    if schema is None:
        return {}
    return {
        "validator": {"$jsonSchema": schema},
        "validationLevel": "strict",
        "validationAction": "error",
    }


# Manifest describing this database
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "LinkedIn outreach automation: profiles, requests, messages and bot state",
    "collections": list(Collections.ALL),
    "validated_collections": sorted(VALIDATORS),
}
