from datetime import date, datetime

from app.core.exceptions import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date or raise InvalidDateError."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidDateError(f"invalid date format: {value}")
