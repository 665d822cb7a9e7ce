from __future__ import annotations

import calendar
from datetime import datetime, timezone

import feedparser

from jobhunt.crawlers.base import RawPosting
from jobhunt.crawlers.http_helpers import fetch_bytes

FEED_URL = "https://weworkremotely.com/categories/remote-programming-jobs.rss"


def split_title(raw_title: str) -> tuple[str, str]:
    # "Acme Corp: Senior Backend Engineer"
    text = (raw_title or "").strip()
    if ":" not in text:
        return "", text
    company, _, title = text.partition(":")
    return company.strip(), title.strip()


def _entry_posted_at(entry) -> datetime | None:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc).replace(tzinfo=None)


def parse_feed(content: bytes | str, since: datetime) -> list[RawPosting]:
    feed = feedparser.parse(content)
    postings: list[RawPosting] = []
    for entry in getattr(feed, "entries", []) or []:
        posted_at = _entry_posted_at(entry)
        if posted_at is None or posted_at < since:
            continue
        company, title = split_title(entry.get("title") or "")
        postings.append(
            RawPosting(
                title=title,
                company=company,
                location=str(entry.get("region") or ""),
                url=str(entry.get("link") or ""),
                posted_at=posted_at,
                platform="weworkremotely",
                employment_type="full-time",
                raw_payload={"site": "weworkremotely", "guid": entry.get("id")},
            )
        )
    return postings


class WeWorkRemotelyAdapter:
    name = "weworkremotely"
    fallback_location = "Remote"

    def __init__(self, timeout: float = 30):
        self.timeout = timeout

    def fetch(self, since: datetime) -> list[RawPosting]:
        return parse_feed(fetch_bytes(FEED_URL, timeout=self.timeout), since)
