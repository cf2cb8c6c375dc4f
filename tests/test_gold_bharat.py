"""Tests for the public package facade."""

from __future__ import annotations

import pytest

import gold_bharat
from gold_bharat import GoldBharat, RateSettings, __version__
from gold_bharat.ingestion.models import ExtractedValue


class _CountingExtractor:
    def __init__(self, token: str = "7,123") -> None:
        self.token = token
        self.calls = 0

    def fetch(self) -> ExtractedValue:
        self.calls += 1
        return ExtractedValue(raw_token=self.token, source_url="memory://gold")


def test_gold_bharat_class_is_exposed() -> None:
    assert GoldBharat.__version__ == __version__


def test_gold_bharat_defaults_to_selenium_extractor() -> None:
    facade = GoldBharat(settings=RateSettings(fetch_timeout=12))

    assert type(facade.provider.extractor).__name__ == "SeleniumGoldRateExtractor"
    assert facade.provider.extractor.timeout == 12


def test_gold_bharat_rate_and_manual_override() -> None:
    extractor = _CountingExtractor()
    facade = GoldBharat(extractor)

    assert facade.rate() == 7123.0
    facade.set_manual_rate(8000)
    assert facade.is_manual is True
    assert facade.rate() == 8000.0
    assert facade.snapshot().is_manual is True

    facade.use_live_rate()

    assert facade.is_manual is False
    assert facade.rate() == 7123.0
    assert extractor.calls == 2


def test_gold_bharat_valuation_uses_current_rate() -> None:
    facade = GoldBharat(_CountingExtractor("7,000"))

    summary = facade.valuation([{"grams": 2, "buy_price": 6500}])

    assert summary.rate == 7000.0
    assert summary.total_profit_loss == pytest.approx(1000.0)


def test_lazy_extractor_exports() -> None:
    assert gold_bharat.SeleniumGoldRateExtractor.__name__ == "SeleniumGoldRateExtractor"
    assert gold_bharat.RequestsGoldRateExtractor.__name__ == "RequestsGoldRateExtractor"
    with pytest.raises(AttributeError):
        gold_bharat.DoesNotExist  # noqa: B018


def test_rate_settings_validation() -> None:
    with pytest.raises(ValueError):
        RateSettings(lower_bound=10, upper_bound=5)
    with pytest.raises(ValueError):
        RateSettings(fetch_timeout=0)
