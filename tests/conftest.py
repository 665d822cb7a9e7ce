from __future__ import annotations
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobhunt.core.config import Settings
from jobhunt.db.database import Base
from jobhunt.db.init_db import init_db


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def cfg():
    return Settings(
        _env_file=None,
        database_url="sqlite+pysqlite:///:memory:",
        telegram_bot_token="test-token",
        telegram_webhook_secret="",
        cron_secret="",
        job_query_keywords="",
        job_excluded_keywords="",
        job_locations="",
        job_seniority="",
        enable_remoteok=True,
        enable_wwr=True,
        enable_wuzzuf=True,
        max_jobs_per_source=50,
        max_notifications_per_user=10,
    )
