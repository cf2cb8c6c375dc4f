"""Normalisation and plausibility checks for scraped rate tokens."""

from __future__ import annotations

import math

from gold_bharat.config import PLAUSIBLE_LOWER_BOUND, PLAUSIBLE_UPPER_BOUND
from gold_bharat.errors import InvalidRateError


def parse_rate_token(value: object | None) -> float | None:
    """Strip grouping commas and whitespace, returning ``None`` when unparsable."""

    if value is None:
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        cleaned = str(value).replace(",", "").strip()
        try:
            parsed = float(cleaned)
        except (TypeError, ValueError):
            return None
    if math.isnan(parsed) or math.isinf(parsed):
        return None
    return parsed


def validate_rate(
    raw_token: str,
    *,
    lower: float = PLAUSIBLE_LOWER_BOUND,
    upper: float = PLAUSIBLE_UPPER_BOUND,
) -> float:
    """Return the rate encoded by ``raw_token`` if it lies strictly inside the band.

    Values outside ``(lower, upper)`` are treated as a different price on the
    page being picked up, and rejected like unparsable input.
    """

    value = parse_rate_token(raw_token)
    if value is None:
        raise InvalidRateError(f"Unparsable rate token: {raw_token!r}", raw_token=raw_token)
    if not lower < value < upper:
        raise InvalidRateError(
            f"Rate {value} outside plausible band ({lower}, {upper})",
            raw_token=raw_token,
            value=value,
        )
    return value


__all__ = ["parse_rate_token", "validate_rate"]
