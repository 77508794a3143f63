from dataclasses import dataclass


@dataclass(frozen=True)
class Ticker:
    symbol: str
    price: float


@dataclass(frozen=True)
class Symbol:
    code: str
    base: str
    quote: str
