from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from tradepatterns.settings import LogCfg

FILE_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_FMT = "%(asctime)s | %(levelname)s | %(message)s"

_INSTALLED = "_tradepatterns_logging_installed"


def setup(cfg: Optional[LogCfg] = None, max_bytes: int = 5_000_000, backup_count: int = 3) -> None:
    """콘솔 + 회전 파일 핸들러를 root에 한 번만 설치하고, 설정의 로거별 레벨을 적용."""
    cfg = cfg or LogCfg()
    root = logging.getLogger()

    # 레벨은 매번 갱신, 핸들러는 한 번만
    for name, level in cfg.levels.items():
        logging.getLogger(name).setLevel(level.upper())
    if getattr(root, _INSTALLED, False):
        return

    log_dir = Path(cfg.dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler()
    console.setLevel(cfg.console_level.upper())
    console.setFormatter(logging.Formatter(CONSOLE_FMT))
    root.addHandler(console)

    rotating = RotatingFileHandler(
        log_dir / cfg.filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    rotating.setLevel(logging.DEBUG)
    rotating.setFormatter(logging.Formatter(FILE_FMT))
    root.addHandler(rotating)

    # requests 내부 로그, to_thread 관련 asyncio 로그는 경고 이상만
    for noisy in ("urllib3", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    setattr(root, _INSTALLED, True)
