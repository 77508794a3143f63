import requests

from tradepatterns.models.order import Order, OrderEvent
from tradepatterns.notify import hooks
from tradepatterns.notify.hooks import EchoSink, FanoutSink, WebhookSink


class Resp:
    def __init__(self, status_code):
        self.status_code = status_code


def test_webhook_posts_slack_message(monkeypatch):
    posted = []

    def fake_post(url, timeout=None, **kwargs):
        posted.append((url, kwargs))
        return Resp(200)

    monkeypatch.setattr(hooks.requests, "post", fake_post)
    sink = WebhookSink(slack_webhook="https://hooks.example/x", env="test")
    Order(sink=sink).advance()
    assert posted == [("https://hooks.example/x", {"json": {"text": "[test] Order filled"}})]


def test_webhook_retries_then_gives_up(monkeypatch, caplog):
    calls = []

    def failing_post(url, timeout=None, **kwargs):
        calls.append(url)
        raise requests.ConnectionError("down")

    monkeypatch.setattr(hooks.requests, "post", failing_post)
    monkeypatch.setattr(hooks.time, "sleep", lambda s: None)
    caplog.set_level("WARNING")

    sink = WebhookSink(telegram_bot="T", telegram_chat_id="C", attempts=3)
    o = Order(sink=sink)
    o.advance()  # 예외 없이 진행
    assert o.is_filled
    assert len(calls) == 3
    assert "api.telegram.org/botT/sendMessage" in calls[0]
    assert any("after 3 attempts" in r.message for r in caplog.records)


def test_webhook_http_status_is_retried(monkeypatch):
    statuses = iter([500, 200])
    monkeypatch.setattr(hooks.requests, "post", lambda url, timeout=None, **kw: Resp(next(statuses)))
    monkeypatch.setattr(hooks.time, "sleep", lambda s: None)
    sink = WebhookSink(slack_webhook="https://hooks.example/x")
    assert sink._deliver("https://hooks.example/x", json={}) is True


def test_unconfigured_webhook_drops_event(monkeypatch):
    def boom(*a, **kw):
        raise AssertionError("should not post")

    monkeypatch.setattr(hooks.requests, "post", boom)
    WebhookSink().emit(OrderEvent(kind="filled", state="filled", message="Order filled"))


def test_fanout_and_echo():
    lines = []
    sink = FanoutSink([EchoSink(lines.append), EchoSink(lines.append)])
    o = Order(sink=sink)
    o.advance()
    o.advance()
    assert lines == [
        "filled: Order filled",
        "filled: Order filled",
        "filled: No more transitions",
        "filled: No more transitions",
    ]
