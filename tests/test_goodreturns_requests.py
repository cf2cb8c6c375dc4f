from __future__ import annotations

import pytest
import requests

from gold_bharat.errors import ExtractorLaunchError, ExtractorTimeoutError, RateNotFoundError
from gold_bharat.ingestion.goodreturns import DESKTOP_USER_AGENT, GOODRETURNS_URL
from gold_bharat.ingestion.goodreturns_requests import RequestsGoldRateExtractor

GOLD_HTML = """
<html><body>
  <section class="gold-rate">
    <h2>24K Gold /g</h2><p>₹7,123</p>
    <h2>22K Gold /g</h2><p>₹6,530</p>
  </section>
</body></html>
"""


def _response(status: int, body: str) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Forbidden"
    response.url = GOODRETURNS_URL
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


class _DummySession:
    def __init__(self, outcome: requests.Response | Exception) -> None:
        self.outcome = outcome
        self.headers: dict[str, str] = {}
        self.requested: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, *, timeout: float) -> requests.Response:
        self.requested.append((url, timeout))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome

    def close(self) -> None:
        self.closed = True


def test_fetch_extracts_token_from_html() -> None:
    session = _DummySession(_response(200, GOLD_HTML))
    extractor = RequestsGoldRateExtractor(session=session)

    result = extractor.fetch()

    assert result.raw_token == "7,123"
    assert session.requested == [(GOODRETURNS_URL, 30)]
    assert "User-Agent" in session.headers
    assert session.closed is False


def test_fetch_raises_not_found_for_unrelated_page() -> None:
    session = _DummySession(_response(200, "<html><body>Silver ₹95</body></html>"))

    with pytest.raises(RateNotFoundError):
        RequestsGoldRateExtractor(session=session).fetch()


def test_fetch_maps_request_timeouts() -> None:
    session = _DummySession(requests.ReadTimeout("read timed out"))

    with pytest.raises(ExtractorTimeoutError):
        RequestsGoldRateExtractor(session=session, timeout=3).fetch()


def test_fetch_maps_connection_errors() -> None:
    session = _DummySession(requests.ConnectionError("dns failure"))

    with pytest.raises(ExtractorLaunchError, match="Unable to reach"):
        RequestsGoldRateExtractor(session=session).fetch()


def test_fetch_maps_http_errors_with_hint() -> None:
    session = _DummySession(_response(403, "blocked"))

    with pytest.raises(ExtractorLaunchError, match="HTTP 403") as excinfo:
        RequestsGoldRateExtractor(session=session).fetch()

    assert "Selenium" in str(excinfo.value)


def test_fetch_closes_session_it_creates(monkeypatch) -> None:
    created: list[_DummySession] = []

    def _session_factory() -> _DummySession:
        session = _DummySession(_response(200, GOLD_HTML))
        created.append(session)
        return session

    monkeypatch.setattr(requests, "Session", _session_factory)

    assert RequestsGoldRateExtractor().fetch().raw_token == "7,123"
    assert created and created[0].closed is True


def test_fetch_replaces_default_requests_user_agent() -> None:
    class _RecordingSession(requests.Session):
        def __init__(self) -> None:
            super().__init__()
            self.sent_user_agent: str | None = None

        def get(self, url, **kwargs):
            self.sent_user_agent = self.headers["User-Agent"]
            return _response(200, GOLD_HTML)

    session = _RecordingSession()
    assert session.headers["User-Agent"].startswith("python-requests/")

    RequestsGoldRateExtractor(session=session).fetch()

    assert session.sent_user_agent == DESKTOP_USER_AGENT
