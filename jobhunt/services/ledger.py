from __future__ import annotations
from datetime import datetime, timedelta

from sqlalchemy import and_, exists
from sqlalchemy.orm import Session

from jobhunt.db.upsert import insert_ignore
from jobhunt.models.delivery import DeliveryRecord
from jobhunt.models.listing import ListingRecord


def unsent_for(
    db: Session,
    user_id: int,
    recency_window: timedelta,
    limit: int,
    now: datetime | None = None,
) -> list[ListingRecord]:
    cutoff = (now or datetime.utcnow()) - recency_window
    delivered = exists().where(
        and_(DeliveryRecord.user_id == user_id, DeliveryRecord.listing_hash == ListingRecord.hash)
    )
    return (
        db.query(ListingRecord)
        .filter(ListingRecord.posted_at >= cutoff, ~delivered)
        .order_by(ListingRecord.posted_at.desc())
        .limit(limit)
        .all()
    )


def mark_delivered(db: Session, user_id: int, listing_hash: str) -> bool:
    try:
        created = insert_ignore(
            db,
            DeliveryRecord,
            {"user_id": user_id, "listing_hash": listing_hash, "sent_at": datetime.utcnow()},
            ["user_id", "listing_hash"],
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    return created
