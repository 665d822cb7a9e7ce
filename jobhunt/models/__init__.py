from __future__ import annotations
from jobhunt.models.delivery import DeliveryRecord
from jobhunt.models.listing import ListingRecord
from jobhunt.models.user import User

__all__ = ["DeliveryRecord", "ListingRecord", "User"]
