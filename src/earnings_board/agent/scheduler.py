"""Job scheduler for the periodic earnings refresh."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from earnings_board.core.logging import get_logger

if TYPE_CHECKING:
    from earnings_board.processing.pipeline import RefreshPipeline

logger = get_logger(__name__)

REFRESH_JOB_ID = "earnings_refresh"


def create_scheduler() -> AsyncIOScheduler:
    """Create a new scheduler instance."""
    return AsyncIOScheduler(timezone="UTC")


def create_refresh_trigger(crontab: str) -> CronTrigger:
    """Build a UTC cron trigger from a five-field crontab expression."""
    return CronTrigger.from_crontab(crontab, timezone="UTC")


async def refresh_job(pipeline: RefreshPipeline) -> None:
    """Run one scheduled refresh cycle."""
    try:
        result = await pipeline.refresh()
        logger.info(
            "Data refreshed via scheduled job",
            success=result.success,
            degraded=result.degraded,
            count=result.count,
        )
    except Exception:
        logger.exception("Scheduled earnings refresh failed")


def schedule_refresh(
    scheduler: AsyncIOScheduler,
    pipeline: RefreshPipeline,
    crontab: str,
) -> None:
    """Register the recurring refresh job."""
    scheduler.add_job(
        refresh_job,
        create_refresh_trigger(crontab),
        args=[pipeline],
        id=REFRESH_JOB_ID,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=None,
        replace_existing=True,
    )
    logger.debug("Refresh job scheduled", crontab=crontab)
