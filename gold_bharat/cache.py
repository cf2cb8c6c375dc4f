"""In-memory holders for the cached rate and the manual override."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from gold_bharat.ingestion.models import CachedRate


class RateCache:
    """Last validated rate; replaced whole so readers never see half an update."""

    __slots__ = ("_entry",)

    def __init__(self) -> None:
        self._entry: CachedRate | None = None

    def get(self) -> CachedRate | None:
        return self._entry

    def set(self, value: float, now: datetime) -> CachedRate:
        entry = CachedRate(value=value, fetched_at=now)
        self._entry = entry
        return entry

    def invalidate(self) -> None:
        self._entry = None

    def is_fresh(self, ttl: timedelta, now: datetime) -> bool:
        entry = self._entry
        if entry is None:
            return False
        return now - entry.fetched_at < ttl


class OverrideControl:
    """Administrator supplied rate that bypasses fetching while active."""

    __slots__ = ("_value", "_active")

    def __init__(self) -> None:
        self._value: float | None = None
        self._active = False

    def is_active(self) -> bool:
        return self._active

    def value(self) -> float | None:
        return self._value if self._active else None

    def set(self, value: float) -> None:
        if not (math.isfinite(value) and value > 0):
            raise ValueError("override rate must be a positive, finite number")
        self._value = float(value)
        self._active = True

    def clear(self) -> None:
        self._value = None
        self._active = False


__all__ = ["RateCache", "OverrideControl"]
