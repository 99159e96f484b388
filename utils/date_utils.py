# utils/date_utils.py
from datetime import datetime, date, timedelta
from typing import Optional, Union

DateLike = Union[date, datetime]


def to_local_date(value: DateLike) -> date:
    """Drop any time-of-day component and return the plain calendar date"""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_local_date(date_str: Optional[str] = None) -> date:
    """
    Parse a local calendar date.

    Args:
        date_str: "YYYY-MM-DD". None or "" returns today's date.

    Raises:
        ValueError: if the string is not a valid YYYY-MM-DD date
    """
    if not date_str:
        return date.today()

    parts = date_str.strip().split('-')
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid date format. Expected YYYY-MM-DD.")

    year, month, day = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError:
        raise ValueError(f"Invalid date: {date_str}. Expected YYYY-MM-DD.")


def add_days(value: DateLike, days: int) -> date:
    return to_local_date(value) + timedelta(days=days)


def format_date(value: DateLike) -> str:
    """Format as MM/DD/YYYY (zero padded)"""
    value = to_local_date(value)
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def format_iso_date(value: DateLike) -> str:
    return to_local_date(value).isoformat()
