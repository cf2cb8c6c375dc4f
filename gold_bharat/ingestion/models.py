"""Data models shared across the rate acquisition modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(slots=True, frozen=True)
class ExtractedValue:
    """Raw rate token located in a remote document."""

    raw_token: str
    source_url: str


@dataclass(slots=True, frozen=True)
class CachedRate:
    """Last validated rate together with the moment it was fetched."""

    value: float
    fetched_at: datetime


@dataclass(slots=True, frozen=True)
class RateSnapshot:
    """Read-only view of the provider state used by dashboards."""

    value: float | None
    is_manual: bool
    fetched_at: datetime | None
    is_stale: bool


@dataclass(slots=True)
class Holding:
    """A purchase of physical gold recorded by a user."""

    grams: float
    buy_price: float
    purchased_on: date | None = None
    label: str | None = None
