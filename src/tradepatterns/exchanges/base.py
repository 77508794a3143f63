from typing import Protocol
from tradepatterns.models.market import Ticker


class ITickerClient(Protocol):
    name: str

    def get_ticker(self, symbol: str) -> Ticker: ...
