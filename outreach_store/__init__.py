"""
outreach_store - MongoDB schema bootstrap for the LinkedIn outreach automation store.
"""

__version__ = "0.1.0"
