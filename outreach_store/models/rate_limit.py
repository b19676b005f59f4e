"""
Rate limit counter model for the linkedin_automation.rate_limits collection.

Daily counters are keyed by (action_type, date) and carry no hour; hourly
counters are keyed by (action_type, date, hour).
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from outreach_store.models.base import StoreDocument


def iso_week(moment: datetime) -> str:
    """Format the ISO week of a timestamp as YYYY-Www."""
    year, week, _ = moment.isocalendar()
    return f"{year}-W{week:02d}"


class RateLimitRecord(StoreDocument):
    """
    Action counter for one day or one hour.
    """
    action_type: str = Field(..., description="Counted action (connect, message, search)")
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Day as YYYY-MM-DD")
    hour: Optional[int] = Field(None, ge=0, le=23, description="Hour of day for hourly counters")
    week: str = Field(..., pattern=r"^\d{4}-W\d{2}$", description="ISO week as YYYY-Www")
    count: int = Field(default=0, ge=0, description="Number of actions counted")
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last increment timestamp"
    )

    @classmethod
    def for_moment(
        cls,
        action_type: str,
        moment: Optional[datetime] = None,
        hourly: bool = False,
        count: int = 0,
    ) -> "RateLimitRecord":
        """
        Build the counter covering a timestamp.

        Args:
            action_type: Counted action
            moment: Timestamp to derive date/hour/week from (defaults to now, UTC)
            hourly: Build the hourly counter instead of the daily one
            count: Initial count

        Returns:
            RateLimitRecord for that day (or hour)
        """
        moment = moment or datetime.now(timezone.utc)
        return cls(
            action_type=action_type,
            date=moment.strftime("%Y-%m-%d"),
            hour=moment.hour if hourly else None,
            week=iso_week(moment),
            count=count,
            last_updated=moment,
        )
