"""Tunable settings for the rate provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

DEFAULT_TTL = timedelta(hours=1)
DEFAULT_FETCH_TIMEOUT = 30
PLAUSIBLE_LOWER_BOUND = 5000.0
PLAUSIBLE_UPPER_BOUND = 50000.0


@dataclass(slots=True)
class RateSettings:
    """Cache lifetime, plausibility band and fetch timeout."""

    ttl: timedelta = field(default=DEFAULT_TTL)
    lower_bound: float = PLAUSIBLE_LOWER_BOUND
    upper_bound: float = PLAUSIBLE_UPPER_BOUND
    fetch_timeout: int = DEFAULT_FETCH_TIMEOUT

    def __post_init__(self) -> None:
        if self.ttl <= timedelta(0):
            raise ValueError("ttl must be a positive duration")
        if self.lower_bound >= self.upper_bound:
            raise ValueError("lower_bound must be below upper_bound")
        if self.fetch_timeout <= 0:
            raise ValueError("fetch_timeout must be positive seconds")


__all__ = [
    "RateSettings",
    "DEFAULT_TTL",
    "DEFAULT_FETCH_TIMEOUT",
    "PLAUSIBLE_LOWER_BOUND",
    "PLAUSIBLE_UPPER_BOUND",
]
