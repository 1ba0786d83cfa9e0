"""HTTP API."""

from earnings_board.api.router import api_router

__all__ = ["api_router"]
