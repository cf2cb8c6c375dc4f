"""CLI + helpers for fetching the current 24K gold rate (INR per gram)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from gold_bharat.config import DEFAULT_FETCH_TIMEOUT, RateSettings
from gold_bharat.ingestion.strategy import DocumentExtractor
from gold_bharat.provider import RateProvider
from gold_bharat.utils.logger import get_logger
from gold_bharat.valuation import ValuationSummary, value_holdings

LOGGER = get_logger(__name__)

__all__ = ["build_extractor", "load_holdings", "format_summary", "parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--extractor",
        choices=("selenium", "requests"),
        default="selenium",
        help="How to retrieve the rate page (default: headless Chrome)",
    )
    parser.add_argument(
        "--no-headless",
        dest="headless",
        action="store_false",
        default=True,
        help="Disable headless Chrome mode",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=DEFAULT_FETCH_TIMEOUT,
        help="Overall fetch timeout in seconds",
    )
    parser.add_argument(
        "--holdings",
        type=Path,
        help="JSON file with a list of {grams, buy_price} holdings to value",
    )
    return parser.parse_args(argv)


def build_extractor(
    kind: str, *, headless: bool = True, timeout: int = DEFAULT_FETCH_TIMEOUT
) -> DocumentExtractor:
    if kind == "selenium":
        from gold_bharat.ingestion.goodreturns_selenium import SeleniumGoldRateExtractor

        return SeleniumGoldRateExtractor(headless=headless, timeout=timeout)
    if kind == "requests":
        from gold_bharat.ingestion.goodreturns_requests import RequestsGoldRateExtractor

        return RequestsGoldRateExtractor(timeout=timeout)
    raise ValueError(f"Unknown extractor kind '{kind}'")


def load_holdings(path: Path) -> list[dict]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON list of holdings")
    return payload


def format_summary(summary: ValuationSummary) -> str:
    return "\n".join(
        [
            f"Holdings: {len(summary.rows)}",
            f"Invested: ₹{summary.total_invested:,.2f}",
            f"Current value: ₹{summary.total_current_value:,.2f}",
            f"Profit/loss: ₹{summary.total_profit_loss:,.2f}",
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    extractor = build_extractor(args.extractor, headless=args.headless, timeout=args.timeout)
    provider = RateProvider(extractor, settings=RateSettings(fetch_timeout=args.timeout))
    rate = provider.get_rate()
    if rate is None:
        LOGGER.error("No gold rate available")
        return 1
    print(f"24K gold: ₹{rate:,.2f} per gram")
    if args.holdings:
        print(format_summary(value_holdings(load_holdings(args.holdings), rate)))
    return 0
