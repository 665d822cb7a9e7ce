from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from jobhunt.db.database import Base


class DeliveryRecord(Base):
    __tablename__ = "deliveries"

    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, index=True)
    listing_hash: Mapped[str] = mapped_column(
        String(64), ForeignKey("listings.hash", ondelete="CASCADE"), primary_key=True, index=True
    )
    sent_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
