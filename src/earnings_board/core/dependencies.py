"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from earnings_board.agent import BoardState
from earnings_board.processing.pipeline import RefreshPipeline


async def get_board_state(request: Request) -> BoardState:
    """Get BoardState from app.state (set during lifespan)."""
    return request.app.state.board  # type: ignore[no-any-return]


async def get_pipeline(state: Annotated[BoardState, Depends(get_board_state)]) -> RefreshPipeline:
    return state.pipeline


# Annotated dependency for use in route handlers
PipelineDep = Annotated[RefreshPipeline, Depends(get_pipeline)]
