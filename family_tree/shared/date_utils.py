"""
Date parsing and formatting for person life events
"""

from datetime import date, datetime


class LifeDateParser:
    """Converts request date values to ``datetime.date`` and back"""

    @classmethod
    def parse(cls, value) -> date | None:
        """
        Parse an ISO date (``1950-03-14``) or ISO/RFC 3339 timestamp
        (``1950-03-14T00:00:00Z``) into a date.

        Empty values yield None. Anything else raises ValueError.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected an ISO date string, got {type(value).__name__}")

        value = value.strip()
        if not value:
            return None

        if len(value) == 10:
            return date.fromisoformat(value)

        # RFC 3339 'Z' suffix is accepted by fromisoformat from 3.11 on
        return datetime.fromisoformat(value).date()

    @staticmethod
    def format(value: date | None) -> str | None:
        return value.isoformat() if value else None
