"""Pydantic models for the card board."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GroupedEntry(BaseModel):
    """One company reporting on a given business day."""

    symbol: str
    name: str
    eps_estimated: float | None = None


class DisplayCard(BaseModel):
    """A single dashboard row.

    Variants are distinguished by convention only:
    header, note, day label ("Monday - 14"), company (value=ticker),
    and section separator (value="---").
    """

    model_config = ConfigDict(frozen=True)

    value: str
    title: str = ""
    subtitle: str = ""


# Grouped earnings keyed by ISO date (YYYY-MM-DD); never holds a weekend key
DateGroupMap = dict[str, list[GroupedEntry]]
