"""Financial Modeling Prep provider for earnings calendar data.

Requires an API key (FMP_API_KEY).
"""

from earnings_board.providers.fmp.client import FMPClient
from earnings_board.providers.fmp.models import RawEarningsRecord

__all__ = [
    "FMPClient",
    "RawEarningsRecord",
]
