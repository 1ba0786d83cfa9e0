"""Group raw earnings records by business day."""

from __future__ import annotations

from collections.abc import Iterable

from earnings_board.core.exceptions import TransformError
from earnings_board.core.logging import get_logger
from earnings_board.processing.calendar import is_weekend, parse_report_date
from earnings_board.processing.models import DateGroupMap, GroupedEntry
from earnings_board.providers.fmp.models import RawEarningsRecord

logger = get_logger(__name__)


def group_by_date(records: Iterable[RawEarningsRecord]) -> DateGroupMap:
    """Group records under their ISO report date, dropping weekend dates.

    Entries keep the order they were encountered in, including repeated
    symbols on the same date.

    Raises:
        TransformError: If a record's date can't be parsed.
    """
    groups: DateGroupMap = {}
    dropped = 0

    for record in records:
        try:
            day = parse_report_date(record.date)
        except ValueError as e:
            raise TransformError(
                f"Unparseable report date {record.date!r} for {record.symbol}"
            ) from e

        if is_weekend(day):
            dropped += 1
            continue

        groups.setdefault(day.isoformat(), []).append(
            GroupedEntry(
                symbol=record.symbol,
                name=record.name or record.symbol,
                eps_estimated=record.eps_estimated,
            )
        )

    logger.debug("Grouped earnings", days=len(groups), weekend_dropped=dropped)
    return groups
