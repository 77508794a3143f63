import logging

import pytest

NAMED = ("order", "price", "notify", "upbit", "app", "urllib3", "asyncio")


@pytest.fixture(autouse=True)
def _restore_logging():
    # setup()이 붙인 핸들러/레벨을 테스트마다 원복
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    named = {n: logging.getLogger(n).level for n in NAMED}
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for n, lv in named.items():
        logging.getLogger(n).setLevel(lv)
    if hasattr(root, "_tradepatterns_logging_installed"):
        del root._tradepatterns_logging_installed
