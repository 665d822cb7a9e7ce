from __future__ import annotations
from typing import Callable

from jobhunt.core.config import Settings
from jobhunt.crawlers.adapters.remoteok import RemoteOKAdapter
from jobhunt.crawlers.adapters.weworkremotely import WeWorkRemotelyAdapter
from jobhunt.crawlers.adapters.wuzzuf import WuzzufAdapter
from jobhunt.crawlers.base import SourceAdapter

ADAPTERS: dict[str, Callable[[Settings], SourceAdapter]] = {
    "remoteok": lambda cfg: RemoteOKAdapter(timeout=cfg.fetch_timeout_seconds),
    "weworkremotely": lambda cfg: WeWorkRemotelyAdapter(timeout=cfg.fetch_timeout_seconds),
    "wuzzuf": lambda cfg: WuzzufAdapter(keywords=cfg.query_keywords, timeout=cfg.fetch_timeout_seconds),
}

TOGGLES = {
    "remoteok": "enable_remoteok",
    "weworkremotely": "enable_wwr",
    "wuzzuf": "enable_wuzzuf",
}


def enabled_source_names(cfg: Settings) -> list[str]:
    return [name for name in ADAPTERS if getattr(cfg, TOGGLES[name], False)]


def build_sources(cfg: Settings) -> list[SourceAdapter]:
    return [ADAPTERS[name](cfg) for name in enabled_source_names(cfg)]
