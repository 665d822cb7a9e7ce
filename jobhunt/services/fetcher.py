from __future__ import annotations
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Sequence

from jobhunt.crawlers.base import Listing, SourceAdapter
from jobhunt.services import filtering
from jobhunt.services.filtering import FilterPolicy
from jobhunt.services.normalizer import normalize_all

logger = logging.getLogger(__name__)


@dataclass
class SourceRunStats:
    fetched: int = 0
    filtered: int = 0
    errors: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def fetch_all(
    sources: Sequence[SourceAdapter],
    since: datetime,
    policy: FilterPolicy,
    max_per_source: int,
) -> tuple[list[Listing], dict[str, SourceRunStats]]:
    listings: list[Listing] = []
    stats: dict[str, SourceRunStats] = {}

    for source in sources:
        source_stats = SourceRunStats()
        stats[source.name] = source_stats
        try:
            logger.info("fetching source=%s since=%s", source.name, since.isoformat())
            raw = source.fetch(since)
            source_stats.fetched = len(raw)

            limited = raw[:max_per_source]
            normalized = normalize_all(limited, getattr(source, "fallback_location", "Remote"))
            kept = filtering.apply(normalized, policy)
            source_stats.filtered = len(kept)
        except Exception:  # noqa: BLE001
            source_stats.errors = 1
            logger.exception("source=%s failed", source.name)
            continue

        listings.extend(kept)
        logger.info(
            "source=%s fetched=%s after_limit=%s kept=%s",
            source.name,
            source_stats.fetched,
            len(limited),
            source_stats.filtered,
        )

    return listings, stats
