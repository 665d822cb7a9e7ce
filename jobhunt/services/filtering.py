from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable

from jobhunt.core.config import Settings
from jobhunt.crawlers.base import Listing

logger = logging.getLogger(__name__)


def _lowered(values: Iterable[str]) -> frozenset[str]:
    return frozenset(v.strip().lower() for v in values if v and v.strip())


@dataclass(frozen=True)
class FilterPolicy:
    include_keywords: frozenset[str] = field(default_factory=frozenset)
    exclude_keywords: frozenset[str] = field(default_factory=frozenset)
    locations: frozenset[str] = field(default_factory=frozenset)
    seniorities: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls,
        include_keywords: Iterable[str] = (),
        exclude_keywords: Iterable[str] = (),
        locations: Iterable[str] = (),
        seniorities: Iterable[str] = (),
    ) -> "FilterPolicy":
        return cls(
            include_keywords=_lowered(include_keywords),
            exclude_keywords=_lowered(exclude_keywords),
            locations=_lowered(locations),
            seniorities=_lowered(seniorities),
        )

    @classmethod
    def from_settings(cls, cfg: Settings) -> "FilterPolicy":
        return cls.build(cfg.query_keywords, cfg.excluded_keywords, cfg.locations, cfg.seniorities)

    def describe(self) -> dict:
        return {
            "query_keywords": sorted(self.include_keywords) or "none (all jobs allowed)",
            "excluded_keywords": sorted(self.exclude_keywords) or "none",
            "locations": sorted(self.locations) or "none (all locations allowed)",
            "seniority": sorted(self.seniorities) or "none (all seniority levels allowed)",
        }


def keep(listing: Listing, policy: FilterPolicy) -> bool:
    if policy.include_keywords:
        text = f"{listing.title} {listing.company} {listing.location}".lower()
        if not any(k in text for k in policy.include_keywords):
            logger.debug("filtered out, no keyword match: %s", listing.title)
            return False

    if policy.exclude_keywords:
        text = f"{listing.title} {listing.company}".lower()
        if any(k in text for k in policy.exclude_keywords):
            logger.debug("filtered out, excluded keyword: %s", listing.title)
            return False

    if policy.locations:
        location = listing.location.lower()
        if not any(loc in location for loc in policy.locations):
            logger.debug("filtered out, location mismatch: %s", listing.location)
            return False

    # An unknown seniority is never a mismatch.
    if policy.seniorities and listing.seniority:
        if listing.seniority.lower() not in policy.seniorities:
            logger.debug("filtered out, seniority mismatch: %s", listing.seniority)
            return False

    return True


def apply(listings: Iterable[Listing], policy: FilterPolicy) -> list[Listing]:
    return [item for item in listings if keep(item, policy)]
