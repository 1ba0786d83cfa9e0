"""Upstream data providers."""

from earnings_board.providers.fmp import FMPClient, RawEarningsRecord

__all__ = [
    "FMPClient",
    "RawEarningsRecord",
]
