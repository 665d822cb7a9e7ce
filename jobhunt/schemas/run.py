from __future__ import annotations
from typing import Optional

from pydantic import BaseModel


class SourceStatsOut(BaseModel):
    fetched: int
    filtered: int
    errors: int


class RunStats(BaseModel):
    jobs_fetched: int
    jobs_stored: int
    duplicates: int
    notifications_sent: int
    users: int
    duration: str


class RunResponse(BaseModel):
    success: bool
    warning: Optional[str] = None
    stats: RunStats
    source_stats: dict[str, SourceStatsOut] = {}
    filters: dict = {}
