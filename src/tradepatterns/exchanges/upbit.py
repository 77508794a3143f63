# src/tradepatterns/exchanges/upbit.py
from __future__ import annotations
from typing import Optional
import logging
import requests

from tradepatterns.exchanges.base import ITickerClient
from tradepatterns.models.market import Ticker

log = logging.getLogger("upbit")

BASE = "https://api.upbit.com/v1"


class UpbitClient(ITickerClient):
    """Upbit Public 시세 조회 (ticker만)"""

    name = "upbit"

    def __init__(
        self,
        base_url: str = BASE,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.s = session or requests.Session()

    def get_ticker(self, symbol: str) -> Ticker:
        # 마켓 표기는 'KRW-BTC' 그대로 사용
        params = {"markets": symbol}
        log.debug("GET %s/ticker markets=%s", self.base, symbol)
        r = self.s.get(f"{self.base}/ticker", params=params, timeout=self.timeout)
        r.raise_for_status()
        rows = r.json()
        if not rows:
            raise LookupError(f"No ticker returned for {symbol}")
        return Ticker(symbol=symbol, price=float(rows[0]["trade_price"]))
