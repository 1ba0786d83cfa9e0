#!/usr/bin/env python3
"""Fetch the live FMP earnings calendar and print the board the server would publish."""

import argparse
import asyncio
import os
import sys
from datetime import UTC, datetime

from pydantic import SecretStr

from earnings_board.core.exceptions import EarningsBoardError
from earnings_board.processing.calendar import compute_fetch_window
from earnings_board.processing.grouping import group_by_date
from earnings_board.processing.transformer import transform
from earnings_board.providers.fmp import FMPClient


async def preview(api_key: str, limit: int) -> bool:
    now = datetime.now(UTC)
    from_date, to_date = compute_fetch_window(now)
    print(f"\n[FMP] Earnings calendar {from_date} -> {to_date}...")

    client = FMPClient(api_key=SecretStr(api_key))
    try:
        records = await client.get_earnings_calendar(from_date, to_date)
        cards = transform(group_by_date(records), now)
    except EarningsBoardError as e:
        print(f"  ✗ {type(e).__name__}: {e.message}")
        return False
    finally:
        await client.close()

    print(f"  ✓ {len(records)} records -> {len(cards)} cards\n")
    for card in cards[:limit]:
        line = card.value
        if card.title:
            line += f"  |  {card.title}"
        if card.subtitle:
            line += f"  |  {card.subtitle}"
        print(f"  {line}")
    if len(cards) > limit:
        print(f"  ... {len(cards) - limit} more")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Preview the earnings board")
    parser.add_argument("--limit", type=int, default=60, help="Cards to print")
    args = parser.parse_args()

    api_key = os.environ.get("FMP_API_KEY")
    if not api_key:
        print("FMP_API_KEY not set")
        sys.exit(1)

    ok = asyncio.run(preview(api_key, args.limit))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
