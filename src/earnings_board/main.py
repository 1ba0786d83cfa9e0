"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from earnings_board.agent import board_lifespan
from earnings_board.api import api_router
from earnings_board.config import get_settings
from earnings_board.core.constants import LIVENESS_TEXT
from earnings_board.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: publishes the board and arms the refresh job."""
    settings = get_settings()
    setup_logging(settings)

    async with board_lifespan(settings) as state:
        app.state.board = state
        logger.info("Earnings Board ready", env=settings.env, port=settings.port)
        yield


app = FastAPI(
    title="Earnings Board",
    description="Upcoming earnings releases formatted for dashboard list widgets",
    version="0.1.0",
    lifespan=lifespan,
)

# Infrastructure (no prefix)


@app.get("/", response_class=PlainTextResponse)
async def index() -> str:
    """Liveness text for humans and dashboard probes."""
    return LIVENESS_TEXT


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check, always ok if process is running."""
    return {"status": "ok"}


# Dashboard API
app.include_router(api_router, prefix="/api")
