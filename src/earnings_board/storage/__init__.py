"""Storage layer: on-disk card snapshot."""

from earnings_board.storage.cache import CardCache

__all__ = ["CardCache"]
