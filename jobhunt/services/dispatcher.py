from __future__ import annotations
import logging
from typing import Protocol, Sequence

from sqlalchemy.orm import Session

from jobhunt.models.listing import ListingRecord
from jobhunt.models.user import User
from jobhunt.services.ledger import mark_delivered
from jobhunt.services.notifier import TelegramNotifier

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def build_listing_message(self, listing: ListingRecord) -> str: ...

    def send_message(self, chat_id: int, text: str) -> tuple[bool, str]: ...


class NotificationDispatcher:
    """Delivers listings to one user at a time, at most once per (user, listing).

    The delivery row is written before the message goes out. A crash between
    the two loses that message for the user; it can never produce a second copy.
    """

    def __init__(self, db: Session, notifier: Notifier | TelegramNotifier, max_per_user: int):
        self.db = db
        self.notifier = notifier
        self.max_per_user = max_per_user

    def dispatch(self, user: User, listings: Sequence[ListingRecord]) -> int:
        sent = 0
        for listing in list(listings)[: self.max_per_user]:
            try:
                if not mark_delivered(self.db, user.id, listing.hash):
                    logger.debug("already delivered user=%s hash=%s", user.id, listing.hash)
                    continue
                ok, detail = self.notifier.send_message(user.id, self.notifier.build_listing_message(listing))
            except Exception:  # noqa: BLE001
                logger.exception("delivery failed user=%s hash=%s", user.id, listing.hash)
                continue
            if not ok:
                logger.warning("send failed user=%s hash=%s detail=%s", user.id, listing.hash, detail)
                continue
            sent += 1

        logger.info("sent %s notifications to user=%s", sent, user.id)
        return sent
