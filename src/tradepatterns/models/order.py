from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

log = logging.getLogger("order")

FILLED = "filled"
NO_TRANSITION = "no_transition"


@dataclass(frozen=True)
class OrderEvent:
    kind: str  # "filled" | "no_transition"
    state: str
    message: str
    symbol: Optional[str] = None


class IEventSink(Protocol):
    def emit(self, event: OrderEvent) -> None: ...


class OrderState:
    """주문 상태 베이스. 상태별 동작은 서브클래스가 advance()에서 처리한다."""

    name = "state"
    is_terminal = False

    def advance(self, order: "Order") -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Pending(OrderState):
    name = "pending"

    def advance(self, order: "Order") -> None:
        order.state = Filled()
        order._notify(FILLED, "Order filled")


class Filled(OrderState):
    name = "filled"
    is_terminal = True

    def advance(self, order: "Order") -> None:
        # 종료 상태: 상태는 그대로 두고 알림만
        order._notify(NO_TRANSITION, "No more transitions")


class Order:
    """Pending -> Filled 단방향 라이프사이클. 동작은 현재 state 객체에 위임."""

    def __init__(self, symbol: Optional[str] = None, sink: Optional[IEventSink] = None):
        self.symbol = symbol
        self.state: OrderState = Pending()
        self.sink = sink

    @property
    def is_filled(self) -> bool:
        return isinstance(self.state, Filled)

    def advance(self) -> None:
        self.state.advance(self)

    def _notify(self, kind: str, message: str) -> None:
        if self.symbol:
            message = f"{message} ({self.symbol})"
        event = OrderEvent(kind=kind, state=self.state.name, message=message, symbol=self.symbol)
        log.info(message)
        if self.sink is not None:
            self.sink.emit(event)
