from __future__ import annotations
from datetime import datetime, timedelta

from jobhunt.crawlers.base import Listing, RawPosting


def make_listing(**overrides) -> Listing:
    values = {
        "title": "Senior Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "platform": "remoteok",
        "url": "https://example.com/jobs/1",
        "posted_at": datetime.utcnow() - timedelta(hours=1),
        "seniority": "senior",
    }
    values.update(overrides)
    return Listing(**values)


def make_raw(**overrides) -> RawPosting:
    values = {
        "title": "Senior Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "url": "https://example.com/jobs/1",
        "posted_at": datetime.utcnow() - timedelta(hours=1),
        "platform": "remoteok",
    }
    values.update(overrides)
    return RawPosting(**values)


class FakeSource:
    def __init__(self, name: str, postings=None, error: Exception | None = None, fallback_location: str = "Remote"):
        self.name = name
        self.postings = postings or []
        self.error = error
        self.fallback_location = fallback_location
        self.calls = []

    def fetch(self, since):
        self.calls.append(since)
        if self.error is not None:
            raise self.error
        return list(self.postings)


class FakeNotifier:
    def __init__(self, fail_hashes=(), raise_hashes=()):
        self.sent: list[tuple[int, str]] = []
        self.fail_hashes = set(fail_hashes)
        self.raise_hashes = set(raise_hashes)

    def build_listing_message(self, listing):
        return listing.hash

    def send_message(self, chat_id, text):
        if text in self.raise_hashes:
            raise RuntimeError("channel exploded")
        if text in self.fail_hashes:
            return False, "telegram status=500"
        self.sent.append((chat_id, text))
        return True, "ok"
