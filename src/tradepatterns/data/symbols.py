from __future__ import annotations
from typing import Dict, Iterable, List
from tradepatterns.models.market import Symbol

KNOWN_QUOTES = ("USDT", "USDC", "KRW", "USD", "BTC", "ETH")


def parse_symbol(code: str) -> Symbol:
    """
    'KRW-BTC' (Upbit: quote-base), 'BTC/USDT' (base/quote), 'BTCUSDT' (접미사 quote) 표기 지원.
    quote를 알 수 없으면 빈 문자열.
    """
    code = code.strip().upper()
    if not code:
        raise ValueError("symbol must be a non-empty string")
    if "-" in code:
        quote, base = code.split("-", 1)
        return Symbol(code=code, base=base, quote=quote)
    if "/" in code:
        base, quote = code.split("/", 1)
        return Symbol(code=code, base=base, quote=quote)
    for q in KNOWN_QUOTES:
        if code.endswith(q) and len(code) > len(q):
            return Symbol(code=code, base=code[: -len(q)], quote=q)
    return Symbol(code=code, base=code, quote="")


class SymbolRegistry:
    """Symbol 객체 풀. 같은 코드에는 항상 같은 인스턴스를 돌려준다.

    전역 상태가 아니라 호출자가 한 번 만들어 주입해서 쓴다.
    """

    def __init__(self):
        self._pool: Dict[str, Symbol] = {}

    def get(self, code: str) -> Symbol:
        key = code.strip().upper()
        sym = self._pool.get(key)
        if sym is None:
            sym = parse_symbol(key)
            self._pool[key] = sym
        return sym

    def intern_all(self, codes: Iterable[str]) -> List[Symbol]:
        return [self.get(c) for c in codes]

    def __contains__(self, code: str) -> bool:
        return code.strip().upper() in self._pool

    def __len__(self) -> int:
        return len(self._pool)
