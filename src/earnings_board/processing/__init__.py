"""Earnings processing: grouping by business day and flattening into cards.

The refresh driver lives in `earnings_board.processing.pipeline`.
"""

from earnings_board.processing.calendar import compute_fetch_window, is_weekend
from earnings_board.processing.fallback import fallback_cards
from earnings_board.processing.grouping import group_by_date
from earnings_board.processing.models import DisplayCard, GroupedEntry
from earnings_board.processing.transformer import transform

__all__ = [
    "DisplayCard",
    "GroupedEntry",
    "compute_fetch_window",
    "fallback_cards",
    "group_by_date",
    "is_weekend",
    "transform",
]
