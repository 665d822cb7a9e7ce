from __future__ import annotations
from jobhunt.schemas.listing import ListingOut
from jobhunt.schemas.run import RunResponse, RunStats, SourceStatsOut
from jobhunt.schemas.telegram import TelegramChat, TelegramMessage, TelegramUpdate, TelegramUser

__all__ = [
    "ListingOut",
    "RunResponse",
    "RunStats",
    "SourceStatsOut",
    "TelegramChat",
    "TelegramMessage",
    "TelegramUpdate",
    "TelegramUser",
]
