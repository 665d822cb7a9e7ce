from __future__ import annotations
import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from jobhunt.api.deps import get_notifier, get_settings, get_sources, require_cron_secret
from jobhunt.core.config import Settings
from jobhunt.crawlers.base import SourceAdapter
from jobhunt.db.database import get_db
from jobhunt.schemas.run import RunResponse
from jobhunt.services.filtering import FilterPolicy
from jobhunt.services.notifier import TelegramNotifier
from jobhunt.services.pipeline import run_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cron", tags=["cron"])


@router.api_route(
    "/daily-job-fetch",
    methods=["GET", "POST"],
    response_model=RunResponse,
    response_model_exclude_none=True,
)
def daily_job_fetch(
    _: None = Depends(require_cron_secret),
    cfg: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
    sources: list[SourceAdapter] = Depends(get_sources),
    notifier: TelegramNotifier = Depends(get_notifier),
):
    started = time.monotonic()
    logger.info("daily job fetch started")
    try:
        missing = cfg.missing_required()
        if missing:
            raise ValueError(f"Missing required setting: {', '.join(missing)}")
        summary = run_pipeline(db, cfg, sources=sources, notifier=notifier)
    except Exception as exc:  # noqa: BLE001
        logger.exception("daily job fetch failed after %sms", int((time.monotonic() - started) * 1000))
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc) or type(exc).__name__})

    return {
        "success": True,
        "warning": summary.get("warning"),
        "stats": {
            "jobs_fetched": summary["jobs_fetched"],
            "jobs_stored": summary["jobs_stored"],
            "duplicates": summary["duplicates"],
            "notifications_sent": summary["notifications_sent"],
            "users": summary["users"],
            "duration": f"{summary['duration_ms']}ms",
        },
        "source_stats": summary["source_stats"],
        "filters": FilterPolicy.from_settings(cfg).describe(),
    }
