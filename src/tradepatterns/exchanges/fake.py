import random
from typing import Dict
from tradepatterns.exchanges.base import ITickerClient
from tradepatterns.models.market import Ticker


class FakeTickerClient(ITickerClient):
    name = "fake"

    def __init__(self, seed: int = 42, base_price: float = 30000.0):
        self._rng = random.Random(seed)
        self._base = base_price
        self._prices: Dict[str, float] = {}
        self.calls = 0

    def _step(self, symbol: str) -> float:
        # 심볼별 랜덤워크, 호출할 때마다 가격이 움직인다
        p = self._prices.get(symbol, self._base)
        p *= (1.0 + self._rng.uniform(-0.001, 0.001))
        self._prices[symbol] = p
        return p

    def get_ticker(self, symbol: str) -> Ticker:
        self.calls += 1
        return Ticker(symbol, self._step(symbol))
