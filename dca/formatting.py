"""Display helpers shared by the front end."""
from __future__ import annotations

from typing import Optional

from dateutil.relativedelta import relativedelta


def format_price(value: float) -> str:
    sign = "-" if round(value) < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_price_change(change: Optional[float]) -> Optional[str]:
    if change is None:
        return None
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.2f}%"


def format_btc(value: float) -> str:
    return f"{value:.8f}"


def format_horizon(months: int) -> str:
    """Formats a month count as years and months, e.g. ``1 year and 6 months``."""
    rd = relativedelta(months=months).normalized()
    parts: list[str] = []
    if rd.years:
        parts.append(f"{rd.years} year" + ("s" if rd.years > 1 else ""))
    if rd.months:
        parts.append(f"{rd.months} month" + ("s" if rd.months > 1 else ""))

    if not parts:
        return "0 months"
    return " and ".join(parts)
