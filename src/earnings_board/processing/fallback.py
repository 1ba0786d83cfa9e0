"""Static sample board served when live earnings data is unavailable."""

from __future__ import annotations

from datetime import datetime

from earnings_board.processing.models import DisplayCard
from earnings_board.processing.transformer import header_cards, separator_card

# (day label, [(symbol, company, subtitle), ...])
SAMPLE_DAYS: tuple[tuple[str, tuple[tuple[str, str, str], ...]], ...] = (
    (
        "Monday - 14",
        (
            ("AMEX", "American Express", "Est. EPS: $2.45"),
            ("MTB", "M&T Bank", "Est. EPS: $3.12"),
            ("FBK", "First Bank", "Est. EPS: $0.78"),
            ("PNFP", "Pinnacle Financial", "Est. EPS: $1.65"),
            ("KSTR", "Kestra Financial", "Est. EPS: $0.92"),
        ),
    ),
    (
        "Tuesday - 15",
        (
            ("BAC", "Bank of America", "Est. EPS: $0.82"),
            ("UAL", "United Airlines", "Est. EPS: $2.34"),
            ("C", "Citigroup", "Est. EPS: $1.42"),
            ("JNJ", "Johnson & Johnson", "Est. EPS: $2.75"),
        ),
    ),
    (
        "Wednesday - 16",
        (
            ("ASML", "ASML Holding", "Est. EPS: $3.54"),
            ("AA", "Alcoa", "Est. EPS: $0.22"),
            ("PGR", "Progressive", "Est. EPS: $2.40"),
            ("ABT", "Abbott Laboratories", "Est. EPS: $1.12"),
        ),
    ),
    (
        "Thursday - 17",
        (
            ("NFLX", "Netflix", "Est. EPS: $4.72"),
            ("TSM", "Taiwan Semiconductor", "Est. EPS: $1.32"),
            ("UNH", "UnitedHealth Group", "Est. EPS: $6.68"),
        ),
    ),
    (
        "Friday - 18",
        (
            ("ALLY", "Ally Financial", "Est. EPS: $0.54"),
            ("DHI", "D.R. Horton", "Est. EPS: $3.24"),
        ),
    ),
    (
        "Monday - 21",
        (
            ("AZZ", "AZZ Inc", "Est. EPS: $0.92"),
            ("AGNC", "AGNC Investment", "Est. EPS: $0.54"),
        ),
    ),
    (
        "Tuesday - 22",
        (
            ("TSLA", "Tesla", "Est. EPS: $0.67"),
            ("VZ", "Verizon", "Est. EPS: $1.18"),
        ),
    ),
    (
        "Wednesday - 23",
        (
            ("IBM", "IBM", "Est. EPS: $1.58"),
            ("T", "AT&T", "Est. EPS: $0.57"),
        ),
    ),
    (
        "Thursday - 24",
        (
            ("INTC", "Intel", "Est. EPS: $0.13"),
            ("MS", "Morgan Stanley", "Est. EPS: $1.72"),
        ),
    ),
    (
        "Friday - 25",
        (
            ("CVX", "Chevron", "Est. EPS: $3.05"),
            ("XOM", "Exxon Mobil", "Est. EPS: $2.12"),
        ),
    ),
)


def fallback_cards(reference: datetime) -> list[DisplayCard]:
    """Sample board with a live header subtitle."""
    cards = header_cards(reference)
    for i, (label, companies) in enumerate(SAMPLE_DAYS):
        if i:
            cards.append(separator_card())
        cards.append(DisplayCard(value=label))
        cards.extend(
            DisplayCard(value=symbol, title=name, subtitle=subtitle)
            for symbol, name, subtitle in companies
        )
    return cards
