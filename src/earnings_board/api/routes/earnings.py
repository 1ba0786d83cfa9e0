"""Earnings board endpoints consumed by the dashboard."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from earnings_board.core.dependencies import PipelineDep
from earnings_board.core.logging import get_logger
from earnings_board.processing.models import DisplayCard

logger = get_logger(__name__)

router = APIRouter()


class RefreshResponse(BaseModel):
    success: bool
    message: str
    count: int


@router.get("/earnings", response_model=list[DisplayCard])
async def get_earnings(pipeline: PipelineDep) -> list[DisplayCard]:
    """Currently published card board."""
    return list(pipeline.cards)


@router.get("/refresh", response_model=RefreshResponse)
async def refresh_earnings(pipeline: PipelineDep) -> RefreshResponse:
    """Run a refresh cycle now and report how many cards were published."""
    result = await pipeline.refresh()
    logger.info(
        "Data refreshed via API",
        success=result.success,
        degraded=result.degraded,
        count=result.count,
    )
    return RefreshResponse(success=result.success, message=result.message, count=result.count)
