# examples/run_proxy_example.py
# ------------------------------------------------------------
# 간단 실행 예시: 주문 상태 전이 + 캐싱 프록시로 가격 조회
# ------------------------------------------------------------
import asyncio

from tradepatterns.exchanges.fake import FakeTickerClient
from tradepatterns.models.order import Order
from tradepatterns.notify.hooks import EchoSink
from tradepatterns.prices.adapter import TickerAdapter
from tradepatterns.prices.proxy import CachingPriceProxy


async def prices():
    client = FakeTickerClient()
    proxy = CachingPriceProxy(TickerAdapter(client), single_flight=True)
    for sym in ("KRW-BTC", "KRW-BTC", "KRW-ETH"):
        px = await proxy.get_price(sym)
        print(f"{sym}: {px:.2f}")
    print(f"hits={proxy.hits} misses={proxy.misses} upstream_calls={client.calls}")


def main():
    o = Order(symbol="KRW-BTC", sink=EchoSink())
    o.advance()
    o.advance()
    asyncio.run(prices())


if __name__ == "__main__":
    main()
