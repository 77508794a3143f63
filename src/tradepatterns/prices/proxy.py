# src/tradepatterns/prices/proxy.py
# ------------------------------------------------------------
# 가격 조회 캐싱 프록시
# - 심볼별로 첫 조회 결과를 캐시, 이후엔 원본 소스를 호출하지 않음
# - 만료/삭제 없음: 캐시는 프록시 수명 동안 계속 커진다
# - 조회 실패는 그대로 전파, 캐시에 남기지 않음(재시도 없음)
# ------------------------------------------------------------
from __future__ import annotations
import asyncio
import logging
from typing import Dict

from tradepatterns.prices.base import IPriceSource

log = logging.getLogger("price")


class CachingPriceProxy:
    """
    Read-through cache in front of an async price source.

    Concurrency contract:
      - single_flight=False (default): two concurrent misses on the same
        symbol can both reach the source. Nothing serializes them.
      - single_flight=True: concurrent misses share one in-flight lookup;
        every waiter gets its result or its exception. Cancelling one
        waiter only stops that waiter; the shared lookup keeps running.
    """

    def __init__(self, source: IPriceSource, single_flight: bool = False):
        self.source = source
        self.single_flight = single_flight
        self.cache: Dict[str, float] = {}
        self.hits = 0
        self.misses = 0
        self._inflight: Dict[str, asyncio.Task] = {}

    async def get_price(self, symbol: str) -> float:
        if symbol in self.cache:
            self.hits += 1
            log.debug("cache hit %s", symbol)
            return self.cache[symbol]

        if not self.single_flight:
            return await self._fetch(symbol)

        task = self._inflight.get(symbol)
        if task is None:
            task = asyncio.ensure_future(self._fetch_shared(symbol))
            self._inflight[symbol] = task
        else:
            log.debug("joining in-flight lookup %s", symbol)
        # 한 호출자가 취소돼도 공유 조회는 계속 진행
        return await asyncio.shield(task)

    async def _fetch(self, symbol: str) -> float:
        self.misses += 1
        log.info("Fetching real price for %s", symbol)
        price = await self.source.lookup(symbol)
        self.cache[symbol] = price
        return price

    async def _fetch_shared(self, symbol: str) -> float:
        try:
            return await self._fetch(symbol)
        finally:
            self._inflight.pop(symbol, None)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.cache

    def __len__(self) -> int:
        return len(self.cache)
