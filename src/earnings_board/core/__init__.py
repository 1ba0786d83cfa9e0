"""Core utilities: constants, logging, exceptions."""

from earnings_board.core.exceptions import EarningsBoardError
from earnings_board.core.logging import get_logger, setup_logging

__all__ = [
    "EarningsBoardError",
    "get_logger",
    "setup_logging",
]
