from tradepatterns.models.order import Order, Pending, Filled, OrderEvent


class ListSink:
    def __init__(self):
        self.events: list[OrderEvent] = []

    def emit(self, event: OrderEvent) -> None:
        self.events.append(event)


def test_new_order_is_pending():
    o = Order()
    assert isinstance(o.state, Pending)
    assert not o.is_filled
    assert not o.state.is_terminal


def test_advance_fills_then_reports_no_transition(caplog):
    caplog.set_level("INFO")
    sink = ListSink()
    o = Order(sink=sink)

    o.advance()
    assert isinstance(o.state, Filled)
    assert sink.events[-1].kind == "filled"
    assert sink.events[-1].state == "filled"

    o.advance()
    assert isinstance(o.state, Filled)
    assert sink.events[-1].kind == "no_transition"
    assert "No more transitions" in sink.events[-1].message

    assert any("Order filled" in r.message for r in caplog.records)


def test_filled_is_idempotent():
    sink = ListSink()
    o = Order(sink=sink)
    for _ in range(5):
        o.advance()
    assert o.is_filled
    assert [e.kind for e in sink.events] == ["filled"] + ["no_transition"] * 4


def test_state_object_dispatch():
    # state 객체에 직접 위임해도 같은 결과
    o = Order()
    o.state.advance(o)
    assert o.is_filled
    first = o.state
    o.state.advance(o)
    assert o.state is first


def test_event_carries_symbol():
    sink = ListSink()
    o = Order(symbol="KRW-BTC", sink=sink)
    o.advance()
    assert sink.events[0].symbol == "KRW-BTC"
    assert "KRW-BTC" in sink.events[0].message


def test_order_without_sink_only_logs(caplog):
    caplog.set_level("INFO")
    o = Order()
    o.advance()
    o.advance()
    assert any("No more transitions" in r.message for r in caplog.records)
