"""Plain HTTP extractor for the GoodReturns gold rate page (no browser)."""

from __future__ import annotations

import requests
from bs4 import BeautifulSoup

from gold_bharat.config import DEFAULT_FETCH_TIMEOUT
from gold_bharat.errors import ExtractorLaunchError, ExtractorTimeoutError
from gold_bharat.ingestion.goodreturns import DESKTOP_USER_AGENT, GoodReturnsPage, find_rate_token
from gold_bharat.ingestion.models import ExtractedValue
from gold_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)


def html_to_text(html: str) -> str:
    """Flatten an HTML document into the text a reader would see."""

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text("\n", strip=True)


class RequestsGoldRateExtractor:
    """Fetch the server-rendered HTML and scan its text for the rate.

    Cheaper than driving Chrome, but sections the page fills in with
    JavaScript after load are invisible to it.
    """

    def __init__(
        self,
        *,
        page: GoodReturnsPage | None = None,
        timeout: int = DEFAULT_FETCH_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.page = page or GoodReturnsPage()
        self.timeout = timeout
        self._session = session

    def fetch(self) -> ExtractedValue:
        """Return the raw rate token found in the page HTML."""

        owns_session = self._session is None
        session = self._session or requests.Session()
        session.headers.update({"User-Agent": DESKTOP_USER_AGENT})
        try:
            response = session.get(self.page.url, timeout=self.timeout)
            self._raise_with_context(response)
        except requests.Timeout as exc:
            raise ExtractorTimeoutError(
                f"Loading {self.page.url} exceeded {self.timeout}s"
            ) from exc
        except requests.RequestException as exc:
            raise ExtractorLaunchError(f"Unable to reach {self.page.url}: {exc}") from exc
        finally:
            if owns_session:
                session.close()
        LOGGER.info("Fetched %s (%s bytes)", self.page.url, len(response.content))
        text = html_to_text(response.text)
        return ExtractedValue(raw_token=find_rate_token(text, self.page), source_url=self.page.url)

    def _raise_with_context(self, response: requests.Response) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            hint = ""
            if status in {403, 429}:
                hint = " The site is throttling automated requests; try the Selenium extractor."
            raise ExtractorLaunchError(
                f"{self.page.url} responded with HTTP {status}.{hint}"
            ) from exc


__all__ = ["RequestsGoldRateExtractor", "html_to_text"]
