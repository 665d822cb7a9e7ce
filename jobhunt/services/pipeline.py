from __future__ import annotations
import logging
import time
from datetime import datetime, timedelta
from typing import Sequence

from sqlalchemy.orm import Session

from jobhunt.core.config import Settings
from jobhunt.crawlers.base import SourceAdapter
from jobhunt.crawlers.registry import build_sources
from jobhunt.services.dedupe import insert_batch
from jobhunt.services.dispatcher import NotificationDispatcher, Notifier
from jobhunt.services.fetcher import fetch_all
from jobhunt.services.filtering import FilterPolicy
from jobhunt.services.ledger import unsent_for
from jobhunt.services.notifier import TelegramNotifier
from jobhunt.services.users import list_users

logger = logging.getLogger(__name__)


def _summary(
    started: float,
    fetched: int = 0,
    stored: int = 0,
    duplicates: int = 0,
    sent: int = 0,
    users: int = 0,
    source_stats: dict | None = None,
) -> dict:
    return {
        "jobs_fetched": fetched,
        "jobs_stored": stored,
        "duplicates": duplicates,
        "notifications_sent": sent,
        "users": users,
        "source_stats": source_stats or {},
        "duration_ms": int((time.monotonic() - started) * 1000),
    }


def deliver_to_users(db: Session, cfg: Settings, dispatcher: NotificationDispatcher, now: datetime) -> tuple[int, int]:
    users = list_users(db)
    window = timedelta(hours=cfg.recency_window_hours)
    total_sent = 0
    for user in users:
        user_id = user.id
        try:
            candidates = unsent_for(db, user_id, window, cfg.max_notifications_per_user, now=now)
            if candidates:
                total_sent += dispatcher.dispatch(user, candidates)
        except Exception:  # noqa: BLE001
            db.rollback()
            logger.exception("delivery to user=%s failed", user_id)
    return len(users), total_sent


def run_pipeline(
    db: Session,
    cfg: Settings,
    sources: Sequence[SourceAdapter] | None = None,
    notifier: Notifier | None = None,
    now: datetime | None = None,
) -> dict:
    started = time.monotonic()
    now = now or datetime.utcnow()
    since = now - timedelta(hours=cfg.job_fetch_lookback_hours)

    if sources is None:
        sources = build_sources(cfg)
    logger.info("initialized %s source(s): %s", len(sources), [s.name for s in sources])

    if not sources:
        logger.warning("no job sources enabled, check ENABLE_REMOTEOK / ENABLE_WWR / ENABLE_WUZZUF")
        summary = _summary(started)
        summary["warning"] = "No job sources enabled"
        return summary

    policy = FilterPolicy.from_settings(cfg)
    listings, stats = fetch_all(sources, since, policy, cfg.max_jobs_per_source)
    logger.info("fetched %s listings total since=%s", len(listings), since.isoformat())

    batch = insert_batch(db, listings)

    dispatcher = NotificationDispatcher(
        db,
        notifier or TelegramNotifier(cfg.telegram_bot_token, timeout=cfg.send_timeout_seconds),
        cfg.max_notifications_per_user,
    )
    user_count, sent = deliver_to_users(db, cfg, dispatcher, now)

    summary = _summary(
        started,
        fetched=len(listings),
        stored=len(batch.inserted_hashes),
        duplicates=len(batch.duplicate_hashes),
        sent=sent,
        users=user_count,
        source_stats={name: s.as_dict() for name, s in stats.items()},
    )
    logger.info(
        "run completed fetched=%s stored=%s duplicates=%s sent=%s duration_ms=%s",
        summary["jobs_fetched"],
        summary["jobs_stored"],
        summary["duplicates"],
        summary["notifications_sent"],
        summary["duration_ms"],
    )
    return summary
