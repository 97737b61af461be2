"""Spot price retrieval for the simulated asset."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
import yfinance as yf

from ..config import DEFAULT_STARTING_PRICE, SPOT_PRICE_SYMBOL
from ..messages import ServiceMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpotPriceResult:
    price: float
    change_pct: Optional[float]
    source: str
    messages: List[ServiceMessage] = field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.source == "default"


class SpotPriceService:
    """Fetches the latest close in USD, falling back to a fixed default."""

    def __init__(
        self,
        symbol: str = SPOT_PRICE_SYMBOL,
        default_price: float = DEFAULT_STARTING_PRICE,
    ) -> None:
        self._symbol = symbol
        self._default_price = default_price

    def load_spot_price(self) -> SpotPriceResult:
        try:
            closes = self._fetch_closes()
        except Exception as exc:  # noqa: BLE001 - reported as a message
            logger.warning("Spot price lookup for %s failed: %s", self._symbol, exc)
            return SpotPriceResult(
                price=self._default_price,
                change_pct=None,
                source="default",
                messages=[
                    ServiceMessage.warning(
                        f"Failed to fetch current {self._symbol} price ({exc}); "
                        f"using ${self._default_price:,.0f}."
                    )
                ],
            )

        price = float(closes.iloc[-1])
        change_pct = None
        if len(closes) > 1:
            previous = float(closes.iloc[-2])
            change_pct = (price - previous) / previous * 100

        logger.debug("Spot price for %s: %.2f", self._symbol, price)
        return SpotPriceResult(price=price, change_pct=change_pct, source="yfinance")

    def _fetch_closes(self) -> pd.Series:
        hist = yf.Ticker(self._symbol).history(period="5d")
        if hist.empty or "Close" not in hist:
            raise ValueError("no closing prices")

        closes = hist["Close"].astype(float).replace(0.0, float("nan")).dropna()
        if closes.empty:
            raise ValueError("no usable closing prices")
        return closes.sort_index()
