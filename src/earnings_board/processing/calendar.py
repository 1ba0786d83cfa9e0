"""Business-day and fetch-window date helpers.

All dates are taken in UTC: naive datetimes are assumed to already be UTC.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from earnings_board.core.constants import FETCH_WINDOW_DAYS

# date.weekday(): Monday=0 ... Saturday=5, Sunday=6
_WEEKEND = frozenset({5, 6})


def is_weekend(day: date) -> bool:
    """True for Saturday and Sunday."""
    return day.weekday() in _WEEKEND


def reference_date(reference: datetime) -> date:
    """Calendar date of an instant, in UTC."""
    if reference.tzinfo is None:
        return reference.date()
    return reference.astimezone(UTC).date()


def compute_fetch_window(reference: datetime) -> tuple[str, str]:
    """Return the (from, to) ISO dates covering today through today + 14 days."""
    start = reference_date(reference)
    end = start + timedelta(days=FETCH_WINDOW_DAYS)
    return start.isoformat(), end.isoformat()


def format_period_start(reference: datetime) -> str:
    """Long-form date used in the header, e.g. 'October 19, 2026'."""
    day = reference_date(reference)
    return f"{day:%B} {day.day}, {day.year}"


def parse_report_date(value: str) -> date:
    """Parse the date portion of an API date, dropping any time-of-day suffix.

    Accepts "2024-01-15", "2024-01-15 16:00" and "2024-01-15T16:00:00".

    Raises:
        ValueError: If the date portion isn't a valid ISO date.
    """
    head = value.strip().split(" ", 1)[0].split("T", 1)[0]
    return date.fromisoformat(head)
