from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable

from sqlalchemy.orm import Session

from jobhunt.crawlers.base import Listing
from jobhunt.db.upsert import insert_ignore
from jobhunt.models.listing import ListingRecord
from jobhunt.utils.hash import listing_hash

logger = logging.getLogger(__name__)


@dataclass
class InsertResult:
    inserted: bool
    hash: str


@dataclass
class BatchResult:
    inserted_hashes: list[str] = field(default_factory=list)
    duplicate_hashes: list[str] = field(default_factory=list)


def _record_values(listing: Listing, digest: str) -> dict:
    return {
        "hash": digest,
        "title": listing.title,
        "company": listing.company,
        "location": listing.location,
        "platform": listing.platform,
        "url": listing.url,
        "posted_at": listing.posted_at,
        "seniority": listing.seniority,
        "tech_stack": list(listing.tech_stack) if listing.tech_stack else None,
        "employment_type": listing.employment_type,
    }


def insert_if_absent(db: Session, listing: Listing) -> InsertResult:
    digest = listing_hash(listing)
    inserted = insert_ignore(db, ListingRecord, _record_values(listing, digest), ["hash"])
    return InsertResult(inserted=inserted, hash=digest)


def insert_batch(db: Session, listings: Iterable[Listing]) -> BatchResult:
    result = BatchResult()
    try:
        for listing in listings:
            outcome = insert_if_absent(db, listing)
            if outcome.inserted:
                result.inserted_hashes.append(outcome.hash)
            else:
                result.duplicate_hashes.append(outcome.hash)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("listing batch insert failed, rolled back")
        raise

    logger.info(
        "dedupe complete stored=%s duplicates=%s",
        len(result.inserted_hashes),
        len(result.duplicate_hashes),
    )
    return result


def list_listings(db: Session, platform: str | None = None, limit: int = 50, offset: int = 0) -> list[ListingRecord]:
    query = db.query(ListingRecord)
    if platform:
        query = query.filter(ListingRecord.platform == platform)
    return query.order_by(ListingRecord.posted_at.desc()).offset(offset).limit(limit).all()


def get_listing(db: Session, digest: str) -> ListingRecord | None:
    return db.get(ListingRecord, digest)
