"""Start and stop the refresh pipeline alongside the HTTP server."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from earnings_board.agent.scheduler import create_scheduler, schedule_refresh
from earnings_board.config import Settings
from earnings_board.core.logging import get_logger
from earnings_board.processing.pipeline import RefreshPipeline
from earnings_board.providers.fmp import FMPClient
from earnings_board.storage.cache import CardCache

logger = get_logger(__name__)


@dataclass
class BoardState:
    """Holds references to the running board resources."""

    pipeline: RefreshPipeline
    settings: Settings
    scheduler: AsyncIOScheduler | None = None


@asynccontextmanager
async def board_lifespan(settings: Settings) -> AsyncIterator[BoardState]:
    """Async context manager that starts/stops the refresh pipeline.

    Yields a BoardState once the initial board is published.
    On exit, stops the scheduler and closes the HTTP client.
    """
    client = FMPClient(
        api_key=settings.fmp_api_key,
        base_url=settings.fmp_base_url,
        timeout=settings.fmp_timeout,
    )
    scheduler: AsyncIOScheduler | None = None

    try:
        if settings.fmp_api_key is None:
            logger.warning("FMP_API_KEY not set, the board will serve sample data")

        pipeline = RefreshPipeline(client, CardCache(settings.data_file))
        await pipeline.initialize()

        scheduler = create_scheduler()
        schedule_refresh(scheduler, pipeline, settings.refresh_cron)
        scheduler.start()

        logger.info(
            "Board ready",
            cards=len(pipeline.cards),
            refresh_cron=settings.refresh_cron,
            data_file=str(settings.data_file),
        )

        yield BoardState(pipeline=pipeline, settings=settings, scheduler=scheduler)

    finally:
        logger.info("Shutting down board...")

        if scheduler and scheduler.running:
            scheduler.shutdown(wait=False)
            logger.debug("Scheduler stopped")

        try:
            await client.close()
        except Exception as e:
            logger.error("Failed to close FMP client", error=str(e))
