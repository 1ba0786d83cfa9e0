"""Pydantic models for Financial Modeling Prep earnings data."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RawEarningsRecord(BaseModel):
    """A single row of the FMP earnings calendar."""

    model_config = ConfigDict(extra="ignore")

    symbol: str
    name: str | None = None
    # "2024-01-15" or "2024-01-15 16:00"; only the date portion is meaningful
    date: str = Field(validation_alias=AliasChoices("date", "reportDate"))
    eps_estimated: float | None = Field(
        default=None,
        validation_alias=AliasChoices("epsEstimated", "estimatedEps", "eps_estimated"),
    )
