from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Iterable

from jobhunt.crawlers.base import Listing, RawPosting

logger = logging.getLogger(__name__)

# Checked in order; the first term found in the title wins.
SENIORITY_TERMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("senior", ("senior",)),
    ("junior", ("junior",)),
    ("mid", ("mid", "middle")),
)


def detect_seniority(title: str) -> str | None:
    lower = (title or "").lower()
    for level, needles in SENIORITY_TERMS:
        if any(n in lower for n in needles):
            return level
    return None


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def normalize(raw: RawPosting, fallback_location: str = "Remote") -> Listing | None:
    if not isinstance(raw.title, str) or not isinstance(raw.company, str):
        return None
    if not isinstance(raw.posted_at, datetime):
        return None
    title = raw.title.strip()
    company = raw.company.strip()
    if not title or not company:
        return None

    tech_stack = tuple(t.strip() for t in raw.tags or [] if isinstance(t, str) and t.strip())
    location = raw.location.strip() if isinstance(raw.location, str) else ""
    url = raw.url.strip() if isinstance(raw.url, str) else ""
    return Listing(
        title=title,
        company=company,
        location=location or fallback_location,
        platform=raw.platform,
        url=url,
        posted_at=_to_naive_utc(raw.posted_at),
        seniority=detect_seniority(title),
        tech_stack=tech_stack or None,
        employment_type=raw.employment_type or None,
    )


def normalize_all(raws: Iterable[RawPosting], fallback_location: str = "Remote") -> list[Listing]:
    listings: list[Listing] = []
    for raw in raws:
        try:
            listing = normalize(raw, fallback_location)
        except Exception:
            logger.debug("failed to normalize posting platform=%s", getattr(raw, "platform", None), exc_info=True)
            continue
        if listing is None:
            logger.debug("dropped malformed posting platform=%s url=%s", raw.platform, raw.url)
            continue
        listings.append(listing)
    return listings
