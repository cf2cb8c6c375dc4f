"""Exception hierarchy raised while acquiring the gold reference rate."""

from __future__ import annotations

__all__ = [
    "GoldRateError",
    "ExtractionError",
    "ExtractorLaunchError",
    "ExtractorTimeoutError",
    "RateNotFoundError",
    "InvalidRateError",
]


class GoldRateError(Exception):
    """Base class for every failure produced by the rate subsystem."""


class ExtractionError(GoldRateError):
    """The remote document could not be turned into a raw rate token."""


class ExtractorLaunchError(ExtractionError):
    """The browser or HTTP session backing an extractor failed to start."""


class ExtractorTimeoutError(ExtractionError):
    """Retrieving the remote document exceeded the configured timeout."""


class RateNotFoundError(ExtractionError):
    """The page text did not contain the label followed by a priced token."""


class InvalidRateError(GoldRateError, ValueError):
    """A token matched but is unparsable or outside the plausibility band."""

    def __init__(self, message: str, *, raw_token: str, value: float | None = None) -> None:
        super().__init__(message)
        self.raw_token = raw_token
        self.value = value
