"""Abstractions for pluggable rate extraction strategies."""

from __future__ import annotations

from typing import Protocol

from gold_bharat.ingestion.models import ExtractedValue


class DocumentExtractor(Protocol):
    """Contract for pulling a raw rate token out of a remote document.

    Implementations raise :class:`~gold_bharat.errors.ExtractorTimeoutError`,
    :class:`~gold_bharat.errors.ExtractorLaunchError` or
    :class:`~gold_bharat.errors.RateNotFoundError` on failure and must release
    any browser or session they acquired before returning or raising.
    """

    def fetch(self) -> ExtractedValue:
        ...  # pragma: no cover - protocol definition


__all__ = ["DocumentExtractor"]
