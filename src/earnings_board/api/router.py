"""Top-level API router; mounts all domain routers under /api."""

from fastapi import APIRouter

from earnings_board.api.routes import earnings

api_router = APIRouter()
api_router.include_router(earnings.router, tags=["earnings"])
