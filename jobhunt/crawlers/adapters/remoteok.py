from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from jobhunt.crawlers.base import RawPosting
from jobhunt.crawlers.http_helpers import fetch_json

API_URL = "https://remoteok.com/api"


def _parse_date(item: dict[str, Any]) -> datetime | None:
    epoch = item.get("epoch")
    if isinstance(epoch, (int, float)) and epoch > 0:
        return datetime.fromtimestamp(epoch, tz=timezone.utc).replace(tzinfo=None)
    raw = str(item.get("date") or "").strip()
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo:
        return parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _build_postings(items: list[Any], since: datetime) -> list[RawPosting]:
    postings: list[RawPosting] = []
    for item in items:
        # The first element of the feed is a legal notice without an id.
        if not isinstance(item, dict) or not item.get("id"):
            continue
        posted_at = _parse_date(item)
        if posted_at is None or posted_at < since:
            continue

        tags = item.get("tags")
        postings.append(
            RawPosting(
                title=str(item.get("position") or item.get("title") or ""),
                company=str(item.get("company") or ""),
                location=str(item.get("location") or ""),
                url=str(item.get("url") or f"https://remoteok.com/remote-jobs/{item['id']}"),
                posted_at=posted_at,
                platform="remoteok",
                tags=[str(t) for t in tags] if isinstance(tags, list) else [],
                employment_type="full-time",
                raw_payload={"site": "remoteok", "id": item.get("id")},
            )
        )
    return postings


class RemoteOKAdapter:
    name = "remoteok"
    fallback_location = "Remote"

    def __init__(self, timeout: float = 30):
        self.timeout = timeout

    def fetch(self, since: datetime) -> list[RawPosting]:
        payload = fetch_json(API_URL, timeout=self.timeout)
        if not isinstance(payload, list):
            raise ValueError(f"unexpected remoteok payload type={type(payload).__name__}")
        return _build_postings(payload, since)
