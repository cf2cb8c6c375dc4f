"""Headless Chrome extractor for the GoodReturns gold rate page."""

from __future__ import annotations

import time
from typing import Callable

from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.support.ui import WebDriverWait

from gold_bharat.config import DEFAULT_FETCH_TIMEOUT
from gold_bharat.errors import ExtractionError, ExtractorLaunchError, ExtractorTimeoutError
from gold_bharat.ingestion.goodreturns import DESKTOP_USER_AGENT, GoodReturnsPage, find_rate_token
from gold_bharat.ingestion.models import ExtractedValue
from gold_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

BODY_TEXT_SCRIPT = "return document.body ? document.body.innerText : '';"

DriverFactory = Callable[[], webdriver.Chrome]


class SeleniumGoldRateExtractor:
    """Render the page in Chrome, trigger lazy sections and scan the body text.

    A fresh browser is started for every :meth:`fetch` and always quit before
    the call returns, whether or not a rate was found.
    """

    def __init__(
        self,
        *,
        page: GoodReturnsPage | None = None,
        headless: bool = True,
        timeout: int = DEFAULT_FETCH_TIMEOUT,
        driver_factory: DriverFactory | None = None,
    ) -> None:
        self.page = page or GoodReturnsPage()
        self.headless = headless
        self.timeout = timeout
        self._driver_factory = driver_factory or self._build_chrome

    def _build_chrome(self) -> webdriver.Chrome:
        options = Options()
        if self.headless:
            options.add_argument("--headless=new")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-setuid-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--window-size=1920,1080")
        options.add_argument(f"--user-agent={DESKTOP_USER_AGENT}")
        return webdriver.Chrome(options=options)

    def fetch(self) -> ExtractedValue:
        """Return the raw rate token rendered on the page."""

        LOGGER.info("Launching Chrome to read gold rate from %s", self.page.url)
        try:
            driver = self._driver_factory()
        except WebDriverException as exc:
            raise ExtractorLaunchError(f"Unable to start Chrome: {exc.msg or exc}") from exc
        try:
            text = self._render_text(driver)
        except TimeoutException as exc:
            raise ExtractorTimeoutError(
                f"Loading {self.page.url} exceeded {self.timeout}s"
            ) from exc
        except WebDriverException as exc:
            raise ExtractionError(
                f"Chrome failed while reading {self.page.url}: {exc.msg or exc}"
            ) from exc
        finally:
            self._quit(driver)
        return ExtractedValue(raw_token=find_rate_token(text, self.page), source_url=self.page.url)

    def _render_text(self, driver: webdriver.Chrome) -> str:
        deadline = time.monotonic() + self.timeout
        driver.set_page_load_timeout(self.timeout)
        driver.get(self.page.url)
        WebDriverWait(driver, self._remaining(deadline)).until(
            lambda d: d.execute_script("return document.readyState") in {"interactive", "complete"}
        )
        # Price widgets below the fold only render once scrolled into view.
        driver.execute_script("window.scrollBy(0, arguments[0]);", self.page.scroll_pixels)
        pattern = self.page.rate_pattern()
        content_wait = WebDriverWait(
            driver, self._remaining(deadline), poll_frequency=self.page.poll_seconds
        )
        try:
            content_wait.until(lambda d: pattern.search(d.execute_script(BODY_TEXT_SCRIPT) or ""))
        except TimeoutException:
            LOGGER.debug("Rate pattern did not appear before the deadline")
        return driver.execute_script(BODY_TEXT_SCRIPT) or ""

    @staticmethod
    def _remaining(deadline: float) -> float:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise TimeoutException("fetch deadline exhausted")
        return remaining

    @staticmethod
    def _quit(driver: webdriver.Chrome) -> None:
        try:
            driver.quit()
        except WebDriverException as exc:  # pragma: no cover - browser already gone
            LOGGER.debug("Ignoring error while quitting Chrome: %s", exc)


__all__ = ["SeleniumGoldRateExtractor"]
