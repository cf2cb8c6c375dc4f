"""Public interface for the gold_bharat package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Any, Iterable, Mapping

from gold_bharat.config import RateSettings
from gold_bharat.errors import (
    ExtractionError,
    ExtractorLaunchError,
    ExtractorTimeoutError,
    GoldRateError,
    InvalidRateError,
    RateNotFoundError,
)
from gold_bharat.ingestion.models import CachedRate, ExtractedValue, Holding, RateSnapshot
from gold_bharat.ingestion.strategy import DocumentExtractor
from gold_bharat.provider import Clock, RateProvider
from gold_bharat.validation import validate_rate
from gold_bharat.valuation import ValuationSummary, value_holdings

__all__ = [
    "__version__",
    "GoldBharat",
    "RateProvider",
    "RateSettings",
    "RateSnapshot",
    "CachedRate",
    "ExtractedValue",
    "Holding",
    "ValuationSummary",
    "DocumentExtractor",
    "GoldRateError",
    "ExtractionError",
    "ExtractorLaunchError",
    "ExtractorTimeoutError",
    "RateNotFoundError",
    "InvalidRateError",
    "validate_rate",
    "value_holdings",
    "SeleniumGoldRateExtractor",
    "RequestsGoldRateExtractor",
]

try:
    __version__ = importlib_metadata.version("gold-bharat")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class GoldBharat:
    """Package facade wiring an extractor into a cached rate provider."""

    __slots__ = ("provider",)

    __version__ = __version__

    def __init__(
        self,
        extractor: DocumentExtractor | None = None,
        *,
        settings: RateSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a facade around a :class:`RateProvider`.

        Without an explicit ``extractor`` the headless Chrome extractor is
        used, so Selenium only has to be installed when no other strategy is
        supplied.
        """

        settings = settings or RateSettings()
        if extractor is None:
            from gold_bharat.ingestion.goodreturns_selenium import SeleniumGoldRateExtractor

            extractor = SeleniumGoldRateExtractor(timeout=settings.fetch_timeout)
        self.provider = RateProvider(extractor, settings=settings, clock=clock)

    def rate(self) -> float | None:
        """Return the current gold rate (INR per gram) or ``None`` if unknown."""

        return self.provider.get_rate()

    def set_manual_rate(self, value: float) -> None:
        self.provider.set_override(value)

    def use_live_rate(self) -> None:
        """Drop the manual rate and force the next :meth:`rate` to re-fetch."""

        self.provider.clear_override()

    @property
    def is_manual(self) -> bool:
        return self.provider.is_manual

    def snapshot(self) -> RateSnapshot:
        return self.provider.snapshot()

    def valuation(self, holdings: Iterable[Holding | Mapping[str, Any]]) -> ValuationSummary:
        """Value ``holdings`` at the current rate."""

        return value_holdings(holdings, self.rate())


def __getattr__(name: str) -> Any:
    """Lazily import extractors so Selenium is not a hard import-time dependency."""

    if name == "SeleniumGoldRateExtractor":
        from gold_bharat.ingestion.goodreturns_selenium import SeleniumGoldRateExtractor

        return SeleniumGoldRateExtractor
    if name == "RequestsGoldRateExtractor":
        from gold_bharat.ingestion.goodreturns_requests import RequestsGoldRateExtractor

        return RequestsGoldRateExtractor
    raise AttributeError(f"module 'gold_bharat' has no attribute {name}")
