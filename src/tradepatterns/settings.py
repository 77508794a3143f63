# src/tradepatterns/settings.py
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field
import os
import yaml


class PriceCfg(BaseModel):
    source: Literal["fake", "upbit"] = "fake"
    base_url: str = "https://api.upbit.com/v1"
    timeout_s: int = 10
    single_flight: bool = False
    # fake 소스 전용
    base_price: float = 30000.0
    seed: int = 42


class NotifyCfg(BaseModel):
    slack_webhook: str | None = None
    telegram_bot: str | None = None
    telegram_chat_id: str | None = None


class LogCfg(BaseModel):
    dir: str = "logs"
    filename: str = "tradepatterns.log"
    console_level: str = "INFO"
    # 로거별 레벨. price를 DEBUG로 두면 캐시 hit도 파일에 남는다
    levels: dict[str, str] = Field(
        default_factory=lambda: {
            "order": "INFO",
            "price": "INFO",
            "notify": "INFO",
            "upbit": "INFO",
            "app": "INFO",
        }
    )


ENV_OVERLAY = {
    "SLACK_WEBHOOK": "slack_webhook",
    "TELEGRAM_BOT": "telegram_bot",
    "TELEGRAM_CHAT_ID": "telegram_chat_id",
}


class Settings(BaseSettings):
    env: str = "dev"
    price: PriceCfg = PriceCfg()
    notify: NotifyCfg = NotifyCfg()
    log: LogCfg = LogCfg()
    symbols: list[str] = Field(default_factory=lambda: ["KRW-BTC"])

    # 모르는 키(.env)는 무시, 중첩 구분자는 "__" (예: PRICE__SOURCE)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, path: str):
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

        # 환경변수 → YAML 알림 설정에 주입
        for env_key, field in ENV_OVERLAY.items():
            val = os.getenv(env_key)
            if val:
                cfg.setdefault("notify", {})
                cfg["notify"][field] = val

        return cls.model_validate(cfg)
