"""Refresh pipeline: fetch -> group -> transform -> persist -> publish.

One pipeline instance owns the published card board. Reads are lock-free
(the board is an immutable tuple swapped by reference); refresh cycles are
serialized so the snapshot file and the published board have one writer.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from earnings_board.core.exceptions import (
    CacheLoadError,
    CacheWriteError,
    FetchError,
    TransformError,
)
from earnings_board.core.logging import get_logger
from earnings_board.processing.calendar import compute_fetch_window
from earnings_board.processing.fallback import fallback_cards
from earnings_board.processing.grouping import group_by_date
from earnings_board.processing.models import DisplayCard
from earnings_board.processing.transformer import transform
from earnings_board.providers.fmp.models import RawEarningsRecord
from earnings_board.storage.cache import CardCache

logger = get_logger(__name__)


class EarningsFetcher(Protocol):
    async def get_earnings_calendar(
        self, from_date: str, to_date: str
    ) -> list[RawEarningsRecord]: ...


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one refresh cycle."""

    success: bool
    message: str
    count: int
    degraded: bool = False


class RefreshPipeline:
    """Drives refresh cycles and holds the currently published board."""

    def __init__(
        self,
        fetcher: EarningsFetcher,
        cache: CardCache,
        initial: list[DisplayCard] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._cards: tuple[DisplayCard, ...] = tuple(initial or ())
        self._lock = asyncio.Lock()
        self._last_result: RefreshResult | None = None

    @property
    def cards(self) -> tuple[DisplayCard, ...]:
        """Currently published board."""
        return self._cards

    @property
    def last_result(self) -> RefreshResult | None:
        return self._last_result

    def _publish(self, cards: list[DisplayCard]) -> None:
        self._cards = tuple(cards)

    async def initialize(self, reference: datetime | None = None) -> None:
        """Publish the persisted snapshot, or build a fresh board if there is none."""
        reference = reference or datetime.now(UTC)

        if not self._cache.exists():
            logger.info(
                "No cached snapshot found, fetching fresh data", path=str(self._cache.path)
            )
            await self.refresh(reference)
            return

        try:
            cards = await asyncio.to_thread(self._cache.load)
        except CacheLoadError as e:
            logger.error(
                "Cached snapshot unusable, serving fallback data",
                path=str(e.path),
                error=e.message,
            )
            self._publish(fallback_cards(reference))
            return

        self._publish(cards)
        logger.info("Loaded cached snapshot", path=str(self._cache.path), count=len(cards))

    async def refresh(self, reference: datetime | None = None) -> RefreshResult:
        """Run one refresh cycle.

        A call made while another cycle is in flight waits for it and
        returns that cycle's result instead of fetching again.
        """
        if self._lock.locked():
            logger.info("Refresh already in progress, waiting for it")
            async with self._lock:
                if self._last_result is not None:
                    return self._last_result

        async with self._lock:
            self._last_result = None
            result = await self._run(reference or datetime.now(UTC))
            self._last_result = result
            return result

    async def _run(self, reference: datetime) -> RefreshResult:
        from_date, to_date = compute_fetch_window(reference)
        log = logger.bind(from_date=from_date, to_date=to_date)
        log.info("Fetching earnings data")

        try:
            records = await self._fetcher.get_earnings_calendar(from_date, to_date)
        except FetchError as e:
            log.error("Earnings fetch failed, serving fallback data", error=e.message)
            return self._degrade(reference, "Earnings API unavailable; serving sample data")
        except Exception as e:
            log.exception("Unexpected error fetching earnings, serving fallback data")
            return self._degrade(
                reference, f"Unexpected error ({type(e).__name__}); serving sample data"
            )

        try:
            cards = transform(group_by_date(records), reference)
        except TransformError as e:
            log.error("Earnings transform failed, serving fallback data", error=e.message)
            return self._degrade(reference, "Earnings data malformed; serving sample data")
        except Exception as e:
            log.exception("Unexpected error transforming earnings, serving fallback data")
            return self._degrade(
                reference, f"Unexpected error ({type(e).__name__}); serving sample data"
            )

        try:
            await asyncio.to_thread(self._cache.save, cards)
        except CacheWriteError as e:
            log.error("Failed to persist snapshot", path=str(e.path), error=e.message)

        self._publish(cards)
        log.info("Earnings data refreshed", records=len(records), count=len(cards))
        return RefreshResult(success=True, message="Data refreshed successfully", count=len(cards))

    def _degrade(self, reference: datetime, message: str) -> RefreshResult:
        # Fallback is published but never persisted over the last good snapshot
        cards = fallback_cards(reference)
        self._publish(cards)
        return RefreshResult(success=False, message=message, count=len(cards), degraded=True)
