from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol


@dataclass
class RawPosting:
    title: str
    company: str
    url: str
    posted_at: datetime
    platform: str
    location: str = ""
    tags: list[str] = field(default_factory=list)
    employment_type: Optional[str] = None
    raw_payload: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Listing:
    title: str
    company: str
    location: str
    platform: str
    url: str
    posted_at: datetime
    seniority: Optional[str] = None
    tech_stack: Optional[tuple[str, ...]] = None
    employment_type: Optional[str] = None


class SourceAdapter(Protocol):
    name: str
    fallback_location: str

    def fetch(self, since: datetime) -> list[RawPosting]: ...
