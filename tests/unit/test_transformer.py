"""Tests for flattening grouped earnings into dashboard cards."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from earnings_board.core.constants import HEADER_TITLE, NOTE_TEXT, SECTION_SEPARATOR
from earnings_board.core.exceptions import TransformError
from earnings_board.processing.grouping import group_by_date
from earnings_board.processing.models import DateGroupMap, DisplayCard, GroupedEntry
from earnings_board.processing.transformer import day_label, format_eps, transform
from earnings_board.providers.fmp.models import RawEarningsRecord

DAY_PREFIXES = ("Monday - ", "Tuesday - ", "Wednesday - ", "Thursday - ", "Friday - ")


def _entry(symbol: str, eps: float | None = 1.0) -> GroupedEntry:
    return GroupedEntry(symbol=symbol, name=f"{symbol} Corp", eps_estimated=eps)


def _business_days(start: date, count: int) -> list[date]:
    days: list[date] = []
    day = start
    while len(days) < count:
        if day.weekday() < 5:
            days.append(day)
        day += timedelta(days=1)
    return days


def _day_labels(cards: list[DisplayCard]) -> list[str]:
    return [c.value for c in cards if c.value.startswith(DAY_PREFIXES)]


class TestHeader:
    def test_empty_map_gives_header_and_note(self, reference: datetime) -> None:
        assert transform({}, reference) == [
            DisplayCard(
                value=HEADER_TITLE,
                subtitle="for the period beginning January 15, 2024",
            ),
            DisplayCard(value=NOTE_TEXT),
        ]


class TestScenarios:
    def test_single_monday_record(self, reference: datetime) -> None:
        records = [
            RawEarningsRecord.model_validate(
                {"symbol": "AAPL", "date": "2024-01-15 16:00", "epsEstimated": 1.5}
            )
        ]

        cards = transform(group_by_date(records), reference)

        assert cards[2:] == [
            DisplayCard(value="Monday - 15"),
            DisplayCard(value="AAPL", title="AAPL", subtitle="Est. EPS: $1.5"),
        ]
        assert DisplayCard(value=SECTION_SEPARATOR) not in cards

    def test_saturday_only_record(self, reference: datetime) -> None:
        records = [RawEarningsRecord.model_validate({"symbol": "SAT", "date": "2024-01-20"})]

        cards = transform(group_by_date(records), reference)

        assert [c.value for c in cards] == [HEADER_TITLE, NOTE_TEXT]

    def test_symbols_sorted_within_day(self, reference: datetime) -> None:
        cards = transform({"2024-01-15": [_entry("ZZZ"), _entry("AAA")]}, reference)

        assert [c.value for c in cards[3:]] == ["AAA", "ZZZ"]


class TestDayGroups:
    def test_dates_emitted_in_ascending_order(self, reference: datetime) -> None:
        groups: DateGroupMap = {
            "2024-01-17": [_entry("C")],
            "2024-01-15": [_entry("A")],
            "2024-01-16": [_entry("B")],
        }

        cards = transform(groups, reference)

        assert [c.value for c in cards[2:]] == [
            "Monday - 15",
            "A",
            "---",
            "Tuesday - 16",
            "B",
            "---",
            "Wednesday - 17",
            "C",
        ]

    def test_at_most_ten_day_groups(self, reference: datetime) -> None:
        days = _business_days(date(2024, 1, 15), 12)
        groups = {d.isoformat(): [_entry(f"T{i}")] for i, d in enumerate(days)}

        cards = transform(groups, reference)

        labels = _day_labels(cards)
        assert len(labels) == 10
        assert labels[-1] == "Friday - 26"
        assert "T10" not in [c.value for c in cards]

    @pytest.mark.parametrize("count", [1, 3, 9, 10, 11])
    def test_no_trailing_separator(self, reference: datetime, count: int) -> None:
        days = _business_days(date(2024, 1, 15), count)
        groups = {d.isoformat(): [_entry("X"), _entry("Y")] for d in days}

        cards = transform(groups, reference)

        assert cards[-1].value != SECTION_SEPARATOR
        separators = sum(1 for c in cards if c.value == SECTION_SEPARATOR)
        assert separators == min(count, 10) - 1

    def test_weekend_key_skipped_without_using_a_slot(self, reference: datetime) -> None:
        groups: DateGroupMap = {
            "2024-01-19": [_entry("FRI")],
            "2024-01-20": [_entry("SAT")],
            "2024-01-22": [_entry("MON")],
        }

        cards = transform(groups, reference)

        assert _day_labels(cards) == ["Monday - 19", "Tuesday - 22"]
        assert "SAT" not in [c.value for c in cards]

    def test_labels_follow_slot_not_weekday(self, reference: datetime) -> None:
        # Tuesday is missing; Wednesday still takes the second slot
        groups: DateGroupMap = {"2024-01-15": [_entry("A")], "2024-01-17": [_entry("B")]}

        cards = transform(groups, reference)

        assert _day_labels(cards) == ["Monday - 15", "Tuesday - 17"]

    def test_duplicate_symbols_kept(self, reference: datetime) -> None:
        cards = transform({"2024-01-15": [_entry("AAPL", 1.0), _entry("AAPL", 2.0)]}, reference)

        assert [(c.value, c.subtitle) for c in cards[3:]] == [
            ("AAPL", "Est. EPS: $1"),
            ("AAPL", "Est. EPS: $2"),
        ]

    def test_invalid_key_raises(self, reference: datetime) -> None:
        with pytest.raises(TransformError):
            transform({"2024-13-45": [_entry("BAD")]}, reference)


class TestCompanyCard:
    def test_missing_eps_gives_empty_subtitle(self, reference: datetime) -> None:
        cards = transform({"2024-01-15": [_entry("NOEPS", None)]}, reference)
        assert cards[-1] == DisplayCard(value="NOEPS", title="NOEPS Corp", subtitle="")

    def test_zero_eps_is_present(self, reference: datetime) -> None:
        cards = transform({"2024-01-15": [_entry("ZERO", 0.0)]}, reference)
        assert cards[-1].subtitle == "Est. EPS: $0"


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.0, "2"),
            (1.5, "1.5"),
            (-0.07, "-0.07"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e-05, "1e-05"),
            (1e16, "10000000000000000"),
        ],
    )
    def test_format_eps(self, value: float, expected: str) -> None:
        assert format_eps(value) == expected

    def test_day_label_cycles(self) -> None:
        assert day_label(0, date(2024, 1, 15)) == "Monday - 15"
        assert day_label(5, date(2024, 1, 22)) == "Monday - 22"
        assert day_label(9, date(2024, 1, 26)) == "Friday - 26"
