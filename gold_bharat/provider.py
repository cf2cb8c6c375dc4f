"""Cached, override-aware access to the live gold reference rate."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Callable

from gold_bharat.cache import OverrideControl, RateCache
from gold_bharat.config import RateSettings
from gold_bharat.errors import ExtractionError, InvalidRateError
from gold_bharat.ingestion.models import RateSnapshot
from gold_bharat.ingestion.strategy import DocumentExtractor
from gold_bharat.utils.logger import get_logger
from gold_bharat.validation import validate_rate

LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _InFlightFetch:
    """Result slot shared by every caller that observed the same cache miss."""

    __slots__ = ("done", "value", "waiters")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.value: float | None = None
        # Followers joined so far; only changed under the provider lock.
        self.waiters = 0

    def resolve(self, value: float | None) -> None:
        self.value = value
        self.done.set()

    def wait(self) -> float | None:
        self.done.wait()
        return self.value


class RateProvider:
    """Serve the gold rate from an override, the cache, or a fresh fetch.

    ``get_rate`` never raises: a failed or implausible fetch degrades to the
    last cached value, or ``None`` when nothing has been fetched yet.
    Concurrent cache misses share a single in-flight fetch.
    """

    def __init__(
        self,
        extractor: DocumentExtractor,
        *,
        settings: RateSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.extractor = extractor
        self.settings = settings or RateSettings()
        self._clock = clock or utc_now
        self._cache = RateCache()
        self._override = OverrideControl()
        self._lock = threading.Lock()
        self._pending: _InFlightFetch | None = None
        # Bumped by clear_override so fetches started earlier cannot repopulate the cache.
        self._generation = 0

    @property
    def is_manual(self) -> bool:
        with self._lock:
            return self._override.is_active()

    def get_rate(self) -> float | None:
        with self._lock:
            if self._override.is_active():
                return self._override.value()
            if self._cache.is_fresh(self.settings.ttl, self._clock()):
                return self._cached_value()
            pending = self._pending
            leader = pending is None
            generation = self._generation
            if leader:
                pending = self._pending = _InFlightFetch()
            else:
                pending.waiters += 1
        if not leader:
            LOGGER.debug("Joining in-flight gold rate fetch")
            return pending.wait()
        return self._run_fetch(pending, generation)

    def set_override(self, value: float) -> None:
        with self._lock:
            self._override.set(value)
        LOGGER.info("Manual gold rate override set to %s", value)

    def clear_override(self) -> None:
        with self._lock:
            self._override.clear()
            self._cache.invalidate()
            self._pending = None
            self._generation += 1
        LOGGER.info("Manual gold rate override cleared; cache invalidated")

    def snapshot(self) -> RateSnapshot:
        with self._lock:
            entry = self._cache.get()
            if self._override.is_active():
                return RateSnapshot(
                    value=self._override.value(),
                    is_manual=True,
                    fetched_at=entry.fetched_at if entry else None,
                    is_stale=False,
                )
            return RateSnapshot(
                value=entry.value if entry else None,
                is_manual=False,
                fetched_at=entry.fetched_at if entry else None,
                is_stale=not self._cache.is_fresh(self.settings.ttl, self._clock()),
            )

    def _cached_value(self) -> float | None:
        entry = self._cache.get()
        return entry.value if entry is not None else None

    def _run_fetch(self, pending: _InFlightFetch, generation: int) -> float | None:
        value: float | None = None
        try:
            value = self._fetch_validated()
        finally:
            with self._lock:
                if value is not None and generation == self._generation:
                    self._cache.set(value, self._clock())
                if self._pending is pending:
                    self._pending = None
                result = value if value is not None else self._cached_value()
            pending.resolve(result)
        return result

    def _fetch_validated(self) -> float | None:
        try:
            extracted = self.extractor.fetch()
            value = validate_rate(
                extracted.raw_token,
                lower=self.settings.lower_bound,
                upper=self.settings.upper_bound,
            )
        except InvalidRateError as exc:
            LOGGER.warning("Rejected scraped gold rate %r: %s", exc.raw_token, exc)
            return None
        except ExtractionError as exc:
            LOGGER.warning("Gold rate fetch failed (%s): %s", type(exc).__name__, exc)
            return None
        except Exception:
            LOGGER.exception("Unexpected error while fetching gold rate")
            return None
        LOGGER.info("Fetched gold rate %.2f from %s", value, extracted.source_url)
        return value


__all__ = ["RateProvider", "Clock", "utc_now"]
