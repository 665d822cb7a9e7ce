from __future__ import annotations
from fastapi import FastAPI

from jobhunt.api import cron, health, listings, webhook
from jobhunt.core.config import settings
from jobhunt.core.log import configure_logging
from jobhunt.db.init_db import init_db

app = FastAPI(title=settings.app_name)


@app.on_event("startup")
def on_startup():
    configure_logging(settings.log_level)
    init_db()


app.include_router(health.router)
app.include_router(cron.router, prefix=settings.api_prefix)
app.include_router(webhook.router, prefix=settings.api_prefix)
app.include_router(listings.router, prefix=settings.api_prefix)
