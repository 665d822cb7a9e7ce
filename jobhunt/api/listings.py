from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from jobhunt.db.database import get_db
from jobhunt.schemas.listing import ListingOut
from jobhunt.services.dedupe import get_listing, list_listings

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get("", response_model=list[ListingOut])
def get_listings(
    platform: str | None = None,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    return list_listings(db, platform=platform, limit=limit, offset=offset)


@router.get("/{listing_hash}", response_model=ListingOut)
def get_one(listing_hash: str, db: Session = Depends(get_db)):
    row = get_listing(db, listing_hash)
    if not row:
        raise HTTPException(status_code=404, detail="listing not found")
    return row
