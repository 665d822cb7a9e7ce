from __future__ import annotations

import re
from datetime import datetime, timedelta
from urllib.parse import urljoin

from jobhunt.crawlers.base import RawPosting
from jobhunt.crawlers.http_helpers import fetch_text, soup_of

BASE_URL = "https://wuzzuf.net"
SEARCH_URL = f"{BASE_URL}/search/jobs/"

_AGO_RE = re.compile(r"(\d+)\s+(minute|hour|day|week|month)s?\s+ago", re.IGNORECASE)
_UNIT_DELTAS = {
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
    "month": timedelta(days=30),
}


def parse_relative_time(text: str, now: datetime) -> datetime:
    match = _AGO_RE.search(text or "")
    if not match:
        return now
    count = int(match.group(1))
    return now - _UNIT_DELTAS[match.group(2).lower()] * count


def parse_search_page(html: str, since: datetime, now: datetime | None = None) -> list[RawPosting]:
    now = now or datetime.utcnow()
    soup = soup_of(html)
    postings: list[RawPosting] = []
    seen: set[str] = set()

    for card in soup.select("div.css-1gatmva, div.css-pkv5jc, article"):
        link = card.select_one("h2 a[href]")
        if link is None:
            continue
        url = urljoin(BASE_URL, link.get("href") or "")
        if url in seen or "/jobs/p/" not in url:
            continue
        seen.add(url)

        company = ""
        company_link = card.select_one("a[href*='/jobs/careers/']")
        if company_link is not None:
            company = company_link.get_text(" ", strip=True).rstrip(" -")

        location = ""
        location_el = card.select_one("span.css-5wys0k, span.css-16x61xq")
        if location_el is not None:
            location = location_el.get_text(" ", strip=True)

        posted_at = parse_relative_time(card.get_text(" ", strip=True), now)
        if posted_at < since:
            continue

        postings.append(
            RawPosting(
                title=link.get_text(" ", strip=True),
                company=company,
                location=location,
                url=url,
                posted_at=posted_at,
                platform="wuzzuf",
                raw_payload={"site": "wuzzuf"},
            )
        )
    return postings


class WuzzufAdapter:
    name = "wuzzuf"
    fallback_location = "Egypt"

    def __init__(self, keywords: list[str] | None = None, timeout: float = 30):
        self.keywords = keywords or []
        self.timeout = timeout

    def fetch(self, since: datetime) -> list[RawPosting]:
        query = " ".join(self.keywords)
        html = fetch_text(SEARCH_URL, timeout=self.timeout, params={"q": query, "a": "hpb"})
        return parse_search_page(html, since)
