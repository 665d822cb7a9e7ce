from __future__ import annotations
import logging

from sqlalchemy.orm import Session

from jobhunt.core.config import Settings
from jobhunt.crawlers.registry import enabled_source_names
from jobhunt.schemas.telegram import TelegramMessage
from jobhunt.services.dispatcher import Notifier
from jobhunt.services.users import upsert_user

logger = logging.getLogger(__name__)

SOURCE_LABELS = {"remoteok": "RemoteOK", "weworkremotely": "WeWorkRemotely", "wuzzuf": "Wuzzuf"}


def welcome_text(cfg: Settings) -> str:
    return "\n".join(
        [
            "👋 Welcome to Daily Job Hunt!",
            "",
            "I'll send you daily job notifications.",
            "",
            "📋 <b>Current Settings:</b>",
            f"• Keywords: {', '.join(cfg.query_keywords) or 'None'}",
            f"• Locations: {', '.join(cfg.locations) or 'All'}",
            f"• Seniority: {', '.join(cfg.seniorities) or 'All'}",
            "",
            f"You'll receive up to {cfg.max_notifications_per_user} new jobs per day.",
            "",
            "Use /help for more information.",
        ]
    )


def help_text(cfg: Settings) -> str:
    sources = [f"• {SOURCE_LABELS.get(name, name)}" for name in enabled_source_names(cfg)]
    return "\n".join(
        [
            "📖 <b>Daily Job Hunt - Help</b>",
            "",
            "<b>Commands:</b>",
            "/start - Register and start receiving job notifications",
            "/help - Show this help message",
            "",
            "<b>How it works:</b>",
            "• Jobs are fetched once per day from multiple platforms",
            "• They are filtered by the configured keywords and locations",
            "• You only get jobs you haven't seen before",
            f"• Maximum {cfg.max_notifications_per_user} jobs per day",
            "",
            "<b>Job Sources:</b>",
            *(sources or ["• none enabled"]),
        ]
    )


def handle_message(db: Session, cfg: Settings, notifier: Notifier, message: TelegramMessage) -> str:
    sender = message.from_user
    if sender is None:
        raise ValueError("message has no sender")

    command = (message.text or "").strip().split(" ", 1)[0].split("@", 1)[0].lower()
    if command == "/start":
        upsert_user(db, sender.id, sender.username, sender.first_name, sender.last_name)
        logger.info("user registered id=%s", sender.id)
        reply = welcome_text(cfg)
        handled = "register"
    else:
        reply = help_text(cfg)
        handled = "help"

    ok, detail = notifier.send_message(message.chat.id, reply)
    if not ok:
        logger.warning("reply to chat=%s failed: %s", message.chat.id, detail)
    return handled
