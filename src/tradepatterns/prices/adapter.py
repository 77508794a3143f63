from __future__ import annotations
import asyncio
import logging

from tradepatterns.exchanges.base import ITickerClient
from tradepatterns.prices.base import IPriceSource

log = logging.getLogger("price")


class TickerAdapter(IPriceSource):
    """동기 ticker 클라이언트(get_ticker)를 비동기 lookup 인터페이스로 감싼다.

    HTTP 호출은 asyncio.to_thread로 이벤트 루프 밖에서 실행된다.
    """

    def __init__(self, client: ITickerClient):
        self.client = client

    async def lookup(self, symbol: str) -> float:
        ticker = await asyncio.to_thread(self.client.get_ticker, symbol)
        log.debug("%s ticker %s = %s", self.client.name, symbol, ticker.price)
        return ticker.price
