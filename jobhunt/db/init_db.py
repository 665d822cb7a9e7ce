from __future__ import annotations
from sqlalchemy.engine import Engine

from jobhunt.db.database import Base, engine
from jobhunt.models import delivery, listing, user  # noqa: F401


def init_db(bind: Engine | None = None) -> None:
    Base.metadata.create_all(bind=bind or engine)
