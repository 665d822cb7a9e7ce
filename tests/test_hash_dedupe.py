from __future__ import annotations
from jobhunt.utils.hash import listing_hash
from tests.helpers import make_listing


def test_hash_is_stable_and_case_whitespace_insensitive():
    a = listing_hash(make_listing(title="Backend Dev ", company="Acme", location="Remote"))
    b = listing_hash(make_listing(title="backend dev", company="ACME", location="remote"))

    assert a == b
    assert len(a) == 64
    assert all(c in "0123456789abcdef" for c in a)


def test_hash_ignores_platform_and_url():
    a = listing_hash(make_listing(platform="remoteok", url="https://a.example/1"))
    b = listing_hash(make_listing(platform="weworkremotely", url="https://b.example/2"))

    assert a == b


def test_hash_changes_with_identity_fields():
    base = listing_hash(make_listing())

    assert listing_hash(make_listing(title="Junior Backend Engineer")) != base
    assert listing_hash(make_listing(company="Beta")) != base
    assert listing_hash(make_listing(location="Berlin")) != base
