"""Flatten grouped earnings into the ordered card sequence the dashboard renders."""

from __future__ import annotations

from datetime import date, datetime

from earnings_board.core.constants import (
    DAY_LABELS,
    EPS_SUBTITLE_PREFIX,
    HEADER_SUBTITLE_PREFIX,
    HEADER_TITLE,
    MAX_BUSINESS_DAYS,
    NOTE_TEXT,
    SECTION_SEPARATOR,
)
from earnings_board.core.exceptions import TransformError
from earnings_board.core.logging import get_logger
from earnings_board.processing.calendar import format_period_start, is_weekend
from earnings_board.processing.models import DateGroupMap, DisplayCard, GroupedEntry

logger = get_logger(__name__)


def header_cards(reference: datetime) -> list[DisplayCard]:
    """Title and advisory note that open every board."""
    return [
        DisplayCard(
            value=HEADER_TITLE,
            subtitle=f"{HEADER_SUBTITLE_PREFIX} {format_period_start(reference)}",
        ),
        DisplayCard(value=NOTE_TEXT),
    ]


def separator_card() -> DisplayCard:
    return DisplayCard(value=SECTION_SEPARATOR)


def day_label(slot: int, day: date) -> str:
    """Label for the Nth emitted business day.

    The weekday name is positional (slot 0 is always "Monday"), not the
    date's real weekday, so a skipped business day shifts every later label.
    """
    return f"{DAY_LABELS[slot % len(DAY_LABELS)]} - {day.day}"


def format_eps(value: float) -> str:
    """Render an EPS estimate without a trailing ".0".

    Integral values drop the decimal point; anything else uses Python's
    shortest round-trip repr. 2.0 -> "2", 1.5 -> "1.5", 1e-05 -> "1e-05".
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def company_card(entry: GroupedEntry) -> DisplayCard:
    subtitle = ""
    if entry.eps_estimated is not None:
        subtitle = f"{EPS_SUBTITLE_PREFIX}{format_eps(entry.eps_estimated)}"
    return DisplayCard(value=entry.symbol, title=entry.name, subtitle=subtitle)


def transform(
    groups: DateGroupMap,
    reference: datetime,
    max_days: int = MAX_BUSINESS_DAYS,
) -> list[DisplayCard]:
    """Build the card sequence for up to ``max_days`` business days.

    Layout:
        header, note,
        day label, company..., "---",
        ...
        day label, company...            (no separator after the last day)

    Args:
        groups: Entries keyed by ISO date
        reference: Instant the board is generated for (header subtitle)
        max_days: Cap on emitted day groups

    Returns:
        Ordered display cards

    Raises:
        TransformError: If a key isn't an ISO date.
    """
    sections: list[list[DisplayCard]] = []

    # ISO keys sort chronologically
    for key in sorted(groups):
        if len(sections) >= max_days:
            break

        try:
            day = date.fromisoformat(key)
        except ValueError as e:
            raise TransformError(f"Invalid date key {key!r}") from e

        # Grouping already drops weekends
        if is_weekend(day):
            continue

        entries = sorted(groups[key], key=lambda entry: entry.symbol)
        section = [DisplayCard(value=day_label(len(sections), day))]
        section.extend(company_card(entry) for entry in entries)
        sections.append(section)

    cards = header_cards(reference)
    for i, section in enumerate(sections):
        if i:
            cards.append(separator_card())
        cards.extend(section)

    logger.debug("Transformed earnings", days=len(sections), cards=len(cards))
    return cards
