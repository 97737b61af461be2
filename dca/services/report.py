"""Tabular views over replay results."""
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import pandas as pd
from dateutil.relativedelta import relativedelta

from ..models import MonthlyResult

MONTHLY_COLUMNS = [
    "Month",
    "Date",
    "BTC Price",
    "Invested",
    "BTC Bought",
    "Total BTC",
    "Total Invested",
    "Portfolio Value",
]


def build_monthly_frame(
    results: Sequence[MonthlyResult],
    start: Optional[date] = None,
) -> pd.DataFrame:
    """Month-by-month breakdown; month ``n`` is dated ``n`` months after ``start``."""
    start = start or date.today()
    rows = [
        {
            "Month": result.month,
            "Date": start + relativedelta(months=result.month),
            "BTC Price": result.price,
            "Invested": result.amount_invested,
            "BTC Bought": result.units_purchased,
            "Total BTC": result.cumulative_units,
            "Total Invested": result.cumulative_invested,
            "Portfolio Value": result.current_value,
        }
        for result in results
    ]
    return pd.DataFrame(rows, columns=MONTHLY_COLUMNS)


def to_csv_bytes(frame: pd.DataFrame) -> bytes:
    return frame.to_csv(index=False).encode("utf-8")
