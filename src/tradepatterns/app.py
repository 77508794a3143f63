import asyncio
import logging
from typing import Callable, Sequence

from tradepatterns.settings import Settings
from tradepatterns.logging_config import setup as setup_logging
from tradepatterns.exchanges.base import ITickerClient
from tradepatterns.exchanges.fake import FakeTickerClient
from tradepatterns.exchanges.upbit import UpbitClient
from tradepatterns.models.order import Order
from tradepatterns.notify.hooks import EchoSink, FanoutSink, WebhookSink
from tradepatterns.prices.adapter import TickerAdapter
from tradepatterns.prices.proxy import CachingPriceProxy

log = logging.getLogger("app")


def build_ticker_client(s: Settings) -> ITickerClient:
    if s.price.source == "upbit":
        return UpbitClient(base_url=s.price.base_url, timeout=s.price.timeout_s)
    return FakeTickerClient(seed=s.price.seed, base_price=s.price.base_price)


def build_price_proxy(s: Settings) -> CachingPriceProxy:
    source = TickerAdapter(build_ticker_client(s))
    return CachingPriceProxy(source, single_flight=s.price.single_flight)


def run_order(
    config_path: str,
    steps: int = 2,
    symbol: str | None = None,
    echo: Callable[[str], None] = print,
) -> Order:
    s = Settings.load(config_path)
    setup_logging(s.log)
    hook = WebhookSink(
        slack_webhook=s.notify.slack_webhook,
        telegram_bot=s.notify.telegram_bot,
        telegram_chat_id=s.notify.telegram_chat_id,
        env=s.env,
    )
    order = Order(symbol=symbol, sink=FanoutSink([EchoSink(echo), hook]))
    for i in range(steps):
        order.advance()
        log.debug("step=%d/%d state=%s", i + 1, steps, order.state.name)
    return order


async def _query(proxy: CachingPriceProxy, symbols: Sequence[str], repeat: int):
    out: list[tuple[str, float]] = []
    for _ in range(repeat):
        for sym in symbols:
            out.append((sym, await proxy.get_price(sym)))
    return out


def run_prices(
    config_path: str,
    symbols: Sequence[str],
    repeat: int = 2,
) -> tuple[CachingPriceProxy, list[tuple[str, float]]]:
    s = Settings.load(config_path)
    setup_logging(s.log)
    proxy = build_price_proxy(s)
    results = asyncio.run(_query(proxy, list(symbols) or s.symbols, repeat))
    log.info("prices hits=%d misses=%d", proxy.hits, proxy.misses)
    return proxy, results
