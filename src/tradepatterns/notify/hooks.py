from __future__ import annotations
import logging
import time
from typing import Callable, Iterable, Optional
import requests

from tradepatterns.models.order import IEventSink, OrderEvent

log = logging.getLogger("notify")


class WebhookSink(IEventSink):
    """주문 이벤트를 Slack/Telegram Webhook으로 전달. 실패 시 백오프 재시도, 예외는 올리지 않음."""

    def __init__(
        self,
        slack_webhook: Optional[str] = None,
        telegram_bot: Optional[str] = None,
        telegram_chat_id: Optional[str] = None,
        env: str = "dev",
        attempts: int = 4,
    ):
        self.slack_webhook = slack_webhook
        self.telegram_bot = telegram_bot
        self.telegram_chat_id = telegram_chat_id
        self.env = env
        self.attempts = attempts

    @property
    def configured(self) -> bool:
        return bool(self.slack_webhook or (self.telegram_bot and self.telegram_chat_id))

    def emit(self, event: OrderEvent) -> None:
        text = f"[{self.env}] {event.message}"
        if not self.configured:
            log.debug("No webhook configured; event dropped: %s", text)
            return
        if self.slack_webhook:
            self._deliver(str(self.slack_webhook), json={"text": text})
        if self.telegram_bot and self.telegram_chat_id:
            url = f"https://api.telegram.org/bot{self.telegram_bot}/sendMessage"
            self._deliver(url, data={"chat_id": self.telegram_chat_id, "text": text})

    def _deliver(self, url: str, **kwargs) -> bool:
        backoff = 0.5
        for attempt in range(1, self.attempts + 1):
            try:
                r = requests.post(url, timeout=5, **kwargs)
                if r.status_code >= 400:
                    raise requests.HTTPError(f"status={r.status_code}", response=r)
                return True
            except requests.RequestException as e:
                if attempt == self.attempts:
                    log.warning("webhook delivery failed after %d attempts: %s", attempt, e)
                    break
                log.warning("webhook post failed: %s (retry %.1fs)", e, backoff)
                time.sleep(backoff)
                backoff = min(backoff * 2, 6.0)
        return False


class EchoSink(IEventSink):
    def __init__(self, echo: Callable[[str], None] = print):
        self.echo = echo

    def emit(self, event: OrderEvent) -> None:
        self.echo(f"{event.state}: {event.message}")


class FanoutSink(IEventSink):
    def __init__(self, sinks: Iterable[IEventSink]):
        self.sinks = list(sinks)

    def emit(self, event: OrderEvent) -> None:
        for s in self.sinks:
            s.emit(event)
