from __future__ import annotations

import pytest

from gold_bharat.errors import InvalidRateError
from gold_bharat.validation import parse_rate_token, validate_rate


def test_validate_rate_strips_grouping_and_whitespace() -> None:
    assert validate_rate(" 7,123 ") == 7123.0


def test_validate_rate_rejects_values_outside_band() -> None:
    with pytest.raises(InvalidRateError) as excinfo:
        validate_rate("112,000")

    assert excinfo.value.value == 112000.0
    assert excinfo.value.raw_token == "112,000"


@pytest.mark.parametrize("token", ["5000", "50,000", "450"])
def test_validate_rate_band_is_exclusive(token: str) -> None:
    with pytest.raises(InvalidRateError):
        validate_rate(token)


def test_validate_rate_rejects_unparsable_tokens() -> None:
    with pytest.raises(InvalidRateError) as excinfo:
        validate_rate(",")

    assert excinfo.value.value is None
    assert isinstance(excinfo.value, ValueError)


def test_validate_rate_honours_custom_band() -> None:
    assert validate_rate("120", lower=100, upper=200) == 120.0


def test_parse_rate_token_helpers_handle_invalid_values() -> None:
    assert parse_rate_token(None) is None
    assert parse_rate_token("N/A") is None
    assert parse_rate_token("nan") is None
    assert parse_rate_token(7500) == 7500.0
    assert parse_rate_token("1,23,456") == 123456.0
