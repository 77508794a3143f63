from typing import Protocol


class IPriceSource(Protocol):
    async def lookup(self, symbol: str) -> float: ...
