from __future__ import annotations
from datetime import datetime, timedelta

import pytest

from jobhunt.models.delivery import DeliveryRecord
from jobhunt.models.listing import ListingRecord
from jobhunt.services import pipeline
from jobhunt.services.pipeline import run_pipeline
from jobhunt.services.users import upsert_user
from tests.helpers import FakeNotifier, FakeSource, make_raw


def _cross_posted_sources():
    posted = datetime.utcnow() - timedelta(hours=2)
    return [
        FakeSource("remoteok", [make_raw(title="Senior Backend Engineer", platform="remoteok", posted_at=posted)]),
        FakeSource(
            "weworkremotely",
            [make_raw(title="Senior Backend Engineer", platform="weworkremotely", url="https://wwr/1", posted_at=posted)],
        ),
    ]


def test_end_to_end_single_record_single_delivery(db, cfg):
    upsert_user(db, 555, "bob")
    notifier = FakeNotifier()

    first = run_pipeline(db, cfg, sources=_cross_posted_sources(), notifier=notifier)

    assert first["jobs_fetched"] == 2
    assert first["jobs_stored"] == 1
    assert first["duplicates"] == 1
    assert first["notifications_sent"] == 1
    assert db.query(ListingRecord).count() == 1
    assert db.query(DeliveryRecord).count() == 1

    second = run_pipeline(db, cfg, sources=_cross_posted_sources(), notifier=notifier)

    assert second["jobs_stored"] == 0
    assert second["duplicates"] == 2
    assert second["notifications_sent"] == 0
    assert db.query(DeliveryRecord).count() == 1
    assert len(notifier.sent) == 1


def test_no_sources_is_zero_work(db, cfg):
    cfg.enable_remoteok = False
    cfg.enable_wwr = False
    cfg.enable_wuzzuf = False

    summary = run_pipeline(db, cfg, notifier=FakeNotifier())

    assert summary["warning"] == "No job sources enabled"
    assert summary["jobs_fetched"] == 0
    assert summary["notifications_sent"] == 0
    assert summary["source_stats"] == {}


def test_failing_source_and_failing_user_are_isolated(db, cfg, monkeypatch):
    upsert_user(db, 1, "first")
    upsert_user(db, 2, "second")
    sources = _cross_posted_sources() + [FakeSource("wuzzuf", error=RuntimeError("blocked"))]

    real_unsent = pipeline.unsent_for

    def unsent_or_fail(session, user_id, *args, **kwargs):
        if user_id == 2:
            raise RuntimeError("query timeout")
        return real_unsent(session, user_id, *args, **kwargs)

    monkeypatch.setattr(pipeline, "unsent_for", unsent_or_fail)
    notifier = FakeNotifier()

    summary = run_pipeline(db, cfg, sources=sources, notifier=notifier)

    assert summary["source_stats"]["wuzzuf"] == {"fetched": 0, "filtered": 0, "errors": 1}
    assert summary["users"] == 2
    assert summary["notifications_sent"] == 1
    assert [chat for chat, _ in notifier.sent] == [1]


def test_storage_fault_propagates(db, cfg, monkeypatch):
    def broken_batch(session, listings):
        raise RuntimeError("database unreachable")

    monkeypatch.setattr(pipeline, "insert_batch", broken_batch)

    with pytest.raises(RuntimeError, match="database unreachable"):
        run_pipeline(db, cfg, sources=_cross_posted_sources(), notifier=FakeNotifier())


def test_filters_from_settings_apply(db, cfg):
    cfg.job_excluded_keywords = "senior"
    upsert_user(db, 9, "carol")

    summary = run_pipeline(db, cfg, sources=_cross_posted_sources(), notifier=FakeNotifier())

    assert summary["jobs_fetched"] == 0
    assert summary["source_stats"]["remoteok"]["fetched"] == 1
    assert summary["source_stats"]["remoteok"]["filtered"] == 0
    assert db.query(ListingRecord).count() == 0
