from __future__ import annotations
from datetime import datetime, timedelta

import pytest

from jobhunt.models.listing import ListingRecord
from jobhunt.services import dedupe
from jobhunt.services.dedupe import get_listing, insert_batch, insert_if_absent, list_listings
from jobhunt.utils.hash import listing_hash
from tests.helpers import make_listing


def test_insert_if_absent_is_idempotent(db):
    first = insert_if_absent(db, make_listing())
    db.commit()
    second = insert_if_absent(db, make_listing(title="senior backend engineer ", platform="weworkremotely"))
    db.commit()

    assert first.inserted is True
    assert second.inserted is False
    assert first.hash == second.hash
    assert db.query(ListingRecord).count() == 1


def test_stored_record_keeps_first_platform_and_fields(db):
    listing = make_listing(tech_stack=("python", "django"), employment_type="full-time")
    result = insert_if_absent(db, listing)
    db.commit()

    row = get_listing(db, result.hash)
    assert row.platform == "remoteok"
    assert row.tech_stack == ["python", "django"]
    assert row.employment_type == "full-time"
    assert row.seniority == "senior"


def test_insert_batch_partitions_and_handles_in_batch_duplicates(db):
    insert_batch(db, [make_listing(title="Existing Role")])

    result = insert_batch(
        db,
        [
            make_listing(title="Existing Role"),
            make_listing(title="New Role"),
            make_listing(title="new role", platform="wuzzuf"),
        ],
    )

    assert result.inserted_hashes == [listing_hash(make_listing(title="New Role"))]
    assert len(result.duplicate_hashes) == 2
    assert db.query(ListingRecord).count() == 2


def test_insert_batch_is_all_or_nothing(db, monkeypatch):
    real_insert = dedupe.insert_if_absent
    calls = {"n": 0}

    def flaky_insert(session, listing):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("connection reset")
        return real_insert(session, listing)

    monkeypatch.setattr(dedupe, "insert_if_absent", flaky_insert)

    with pytest.raises(RuntimeError):
        insert_batch(db, [make_listing(title="A"), make_listing(title="B")])

    assert db.query(ListingRecord).count() == 0


def test_insert_batch_fault_keeps_earlier_batches(db, monkeypatch):
    insert_batch(db, [make_listing(title="Committed Earlier")])

    def broken_insert(session, listing):
        raise RuntimeError("storage down")

    monkeypatch.setattr(dedupe, "insert_if_absent", broken_insert)
    with pytest.raises(RuntimeError):
        insert_batch(db, [make_listing(title="Lost")])

    assert [row.title for row in db.query(ListingRecord).all()] == ["Committed Earlier"]


def test_list_listings_newest_first_and_platform_filter(db):
    now = datetime.utcnow()
    insert_batch(
        db,
        [
            make_listing(title="Old", posted_at=now - timedelta(hours=5), platform="remoteok"),
            make_listing(title="Newest", posted_at=now - timedelta(minutes=5), platform="wuzzuf"),
            make_listing(title="Middle", posted_at=now - timedelta(hours=1), platform="remoteok"),
        ],
    )

    assert [row.title for row in list_listings(db)] == ["Newest", "Middle", "Old"]
    assert [row.title for row in list_listings(db, platform="remoteok")] == ["Middle", "Old"]
    assert [row.title for row in list_listings(db, limit=1, offset=1)] == ["Middle"]
