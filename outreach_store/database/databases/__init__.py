"""
Database definitions and collection constants.
"""
from outreach_store.database.databases import automation_db

__all__ = ["automation_db"]
