"""Date manipulation utilities"""

from datetime import date


def parse_iso_date(value: str) -> date:
    """Parse a YYYY-MM-DD string, ignoring any time component"""
    return date.fromisoformat(value.strip()[:10])


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (end - start).days


def format_us_date(value: date) -> str:
    """Format a date as M/D/YYYY without zero padding"""
    return f"{value.month}/{value.day}/{value.year}"


def format_date_range(start: date, end: date) -> str:
    """Human-readable range label, e.g. '1/1/2024 to 2/1/2024'"""
    return f"{format_us_date(start)} to {format_us_date(end)}"
