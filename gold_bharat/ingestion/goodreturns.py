"""Page description and text scan for the GoodReturns Chennai gold page."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gold_bharat.errors import RateNotFoundError
from gold_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

GOODRETURNS_URL = "https://www.goodreturns.in/gold-rates/chennai.html"
DEBUG_EXCERPT_CHARS = 2000
DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)


@dataclass(slots=True)
class GoodReturnsPage:
    """Where the rate lives and how it is labelled on the page.

    ``max_span`` bounds how many characters may separate the label from the
    currency-prefixed amount, so an unrelated price further down the page is
    never paired with the label.
    """

    url: str = GOODRETURNS_URL
    label_pattern: str = r"24K\s+Gold"
    currency_symbol: str = "₹"
    max_span: int = 300
    scroll_pixels: int = 500
    poll_seconds: float = 0.5

    def rate_pattern(self) -> re.Pattern[str]:
        return re.compile(
            rf"(?:{self.label_pattern})[\s\S]{{0,{self.max_span}}}?"
            rf"{re.escape(self.currency_symbol)}\s*(\d[\d,]*)",
            re.IGNORECASE,
        )


def find_rate_token(text: str, page: GoodReturnsPage | None = None) -> str:
    """Return the digits/commas token that follows the rate label in ``text``."""

    page = page or GoodReturnsPage()
    match = page.rate_pattern().search(text or "")
    if match is None:
        LOGGER.debug(
            "Rate pattern missing; page text excerpt follows:\n%s",
            (text or "")[:DEBUG_EXCERPT_CHARS],
        )
        raise RateNotFoundError(f"No '{page.label_pattern}' price found on {page.url}")
    LOGGER.debug("Matched rate span: %r", match.group(0))
    return match.group(1)


__all__ = ["DESKTOP_USER_AGENT", "GOODRETURNS_URL", "GoodReturnsPage", "find_rate_token"]
