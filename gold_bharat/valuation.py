"""Portfolio valuation of gold holdings against the current rate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import pandas as pd

from gold_bharat.ingestion.models import Holding

_COLUMNS = ["grams", "buy_price"]


@dataclass(slots=True)
class ValuationSummary:
    rate: float | None
    total_invested: float
    total_current_value: float
    total_profit_loss: float
    rows: list[dict[str, Any]] = field(default_factory=list)


def _as_row(holding: Holding | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(holding, Holding):
        return {
            "grams": holding.grams,
            "buy_price": holding.buy_price,
            "purchased_on": holding.purchased_on,
            "label": holding.label,
        }
    return dict(holding)


def _holdings_frame(holdings: Iterable[Holding | Mapping[str, Any]]) -> pd.DataFrame:
    rows = [_as_row(item) for item in holdings]
    if not rows:
        return pd.DataFrame(columns=_COLUMNS)
    frame = pd.DataFrame(rows)
    missing = [column for column in _COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(f"Holdings are missing required fields: {', '.join(missing)}")
    frame[_COLUMNS] = frame[_COLUMNS].apply(pd.to_numeric, errors="coerce")
    if frame[_COLUMNS].isna().any().any():
        raise ValueError("Holdings must carry numeric grams and buy_price values")
    if (frame[_COLUMNS] < 0).any().any():
        raise ValueError("Holdings cannot have negative grams or buy_price")
    return frame


def value_holdings(
    holdings: Iterable[Holding | Mapping[str, Any]], rate: float | None
) -> ValuationSummary:
    """Compute cost, current value and profit/loss for each holding.

    When ``rate`` is ``None`` (no price available yet) current values and
    profit/loss are reported as zero, while the invested total is still
    computed.
    """

    frame = _holdings_frame(holdings)
    frame["total_cost"] = frame["grams"] * frame["buy_price"]
    if rate is None:
        frame["current_value"] = 0.0
        frame["profit_loss"] = 0.0
    else:
        frame["current_value"] = frame["grams"] * rate
        frame["profit_loss"] = frame["current_value"] - frame["total_cost"]

    total_invested = float(frame["total_cost"].sum())
    total_current = float(frame["current_value"].sum())
    return ValuationSummary(
        rate=rate,
        total_invested=total_invested,
        total_current_value=total_current,
        total_profit_loss=total_current - total_invested if rate is not None else 0.0,
        rows=frame.to_dict(orient="records"),
    )


__all__ = ["ValuationSummary", "value_holdings"]
