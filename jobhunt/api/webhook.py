from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobhunt.api.deps import get_notifier, get_settings, require_webhook_secret
from jobhunt.core.config import Settings
from jobhunt.db.database import get_db
from jobhunt.schemas.telegram import TelegramUpdate
from jobhunt.services.bot import handle_message
from jobhunt.services.notifier import TelegramNotifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhook"])


@router.post("/telegram")
def telegram_webhook(
    update: TelegramUpdate,
    _: None = Depends(require_webhook_secret),
    cfg: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
    notifier: TelegramNotifier = Depends(get_notifier),
):
    if update.message is None:
        return {"ok": True}
    if update.message.from_user is None:
        raise HTTPException(status_code=400, detail="Invalid message")

    handled = handle_message(db, cfg, notifier, update.message)
    return {"ok": True, "handled": handled}
