from __future__ import annotations
import hashlib

from jobhunt.crawlers.base import Listing


def listing_hash(listing: Listing) -> str:
    raw = f"{listing.title.strip().lower()}|{listing.company.strip().lower()}|{listing.location.strip().lower()}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
