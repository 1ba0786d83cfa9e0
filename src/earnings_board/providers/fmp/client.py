"""Financial Modeling Prep API client for the earnings calendar.

- Earnings calendar: https://financialmodelingprep.com/api/v3/earning-calendar?from=&to=&apikey=
"""

from __future__ import annotations

from typing import Any

import httpx
import orjson
from pydantic import SecretStr, TypeAdapter, ValidationError

from earnings_board.core.constants import DEFAULT_FMP_API_URL
from earnings_board.core.exceptions import FetchError
from earnings_board.core.logging import get_logger
from earnings_board.providers.fmp.models import RawEarningsRecord

logger = get_logger(__name__)

_RECORDS = TypeAdapter(list[RawEarningsRecord])


class FMPClient:
    """Client for the FMP earnings calendar API.

    Usage:
        client = FMPClient(api_key=settings.fmp_api_key)
        records = await client.get_earnings_calendar("2026-10-19", "2026-11-02")
        await client.close()
    """

    def __init__(
        self,
        api_key: SecretStr | None,
        base_url: str = DEFAULT_FMP_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client: httpx.AsyncClient | None = None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={
                    "User-Agent": "Mozilla/5.0 (compatible; EarningsBoard/1.0)",
                    "Accept": "application/json",
                },
            )
        return self._http_client

    async def get_earnings_calendar(self, from_date: str, to_date: str) -> list[RawEarningsRecord]:
        """Get earnings announcements scheduled between two dates (inclusive).

        Args:
            from_date: First date of the window (YYYY-MM-DD)
            to_date: Last date of the window (YYYY-MM-DD)

        Returns:
            Raw records in the order the API returned them

        Raises:
            FetchError: On transport failure, timeout, non-2xx status, a body
                that is not JSON, an error object instead of an array, or
                rows that don't validate as records.
        """
        if self._api_key is None or not self._api_key.get_secret_value():
            raise FetchError("FMP_API_KEY is not configured", from_date, to_date)

        url = f"{self._base_url}/earning-calendar"
        logger.debug("Fetching FMP earnings calendar", url=url, from_date=from_date, to_date=to_date)

        client = self._get_http_client()
        try:
            resp = await client.get(
                url,
                params={
                    "from": from_date,
                    "to": to_date,
                    "apikey": self._api_key.get_secret_value(),
                },
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"FMP returned HTTP {e.response.status_code}", from_date, to_date
            ) from e
        except httpx.HTTPError as e:
            # str() of httpx errors can embed the request URL, and with it the key
            raise FetchError(
                f"FMP request failed: {type(e).__name__}", from_date, to_date
            ) from e

        try:
            data: Any = orjson.loads(resp.content)
        except orjson.JSONDecodeError as e:
            raise FetchError("FMP response is not valid JSON", from_date, to_date) from e

        if not isinstance(data, list):
            raise FetchError(
                f"FMP did not return an array: {_error_preview(data)}", from_date, to_date
            )

        try:
            records = _RECORDS.validate_python(data)
        except ValidationError as e:
            raise FetchError(
                f"FMP returned {e.error_count()} malformed earnings rows", from_date, to_date
            ) from e

        logger.debug(
            "Fetched FMP earnings calendar",
            from_date=from_date,
            to_date=to_date,
            count=len(records),
        )
        return records

    async def close(self) -> None:
        """Clean up resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("FMPClient closed")


def _error_preview(data: Any, limit: int = 200) -> str:
    """Short description of an unexpected payload, preferring FMP's error message."""
    if isinstance(data, dict):
        for key in ("Error Message", "error", "message"):
            if key in data:
                return str(data[key])[:limit]
    return orjson.dumps(data).decode()[:limit]
