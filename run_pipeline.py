from __future__ import annotations
from jobhunt.core.config import settings
from jobhunt.core.log import configure_logging
from jobhunt.db.database import session_scope
from jobhunt.db.init_db import init_db
from jobhunt.services.pipeline import run_pipeline


if __name__ == "__main__":
    configure_logging(settings.log_level)
    init_db()
    with session_scope() as db:
        result = run_pipeline(db, settings)
        print(result)
