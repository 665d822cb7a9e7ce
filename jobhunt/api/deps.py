from __future__ import annotations
import secrets

from fastapi import Depends, Header, HTTPException

from jobhunt.core.config import Settings, settings
from jobhunt.crawlers.base import SourceAdapter
from jobhunt.crawlers.registry import build_sources
from jobhunt.services.notifier import TelegramNotifier


def get_settings() -> Settings:
    return settings


def get_notifier(cfg: Settings = Depends(get_settings)) -> TelegramNotifier:
    return TelegramNotifier(cfg.telegram_bot_token, timeout=cfg.send_timeout_seconds)


def get_sources(cfg: Settings = Depends(get_settings)) -> list[SourceAdapter]:
    return build_sources(cfg)


def _matches(given: str | None, expected: str) -> bool:
    return given is not None and secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def require_cron_secret(
    authorization: str | None = Header(default=None),
    cfg: Settings = Depends(get_settings),
) -> None:
    if cfg.cron_secret and not _matches(authorization, f"Bearer {cfg.cron_secret}"):
        raise HTTPException(status_code=401, detail="Unauthorized")


def require_webhook_secret(
    x_telegram_bot_api_secret_token: str | None = Header(default=None),
    cfg: Settings = Depends(get_settings),
) -> None:
    if cfg.telegram_webhook_secret and not _matches(x_telegram_bot_api_secret_token, cfg.telegram_webhook_secret):
        raise HTTPException(status_code=401, detail="Unauthorized")
