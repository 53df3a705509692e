"""
Tests for the shared cache helpers (in-process backend).
"""

import json

from luxe_valuation.core.cache import (
    LISTINGS_PREFIX,
    VALUATION_PREFIX,
    cache,
    cache_key,
    dump_payload,
)
from luxe_valuation.core.utils import weak_etag


class TestKeys:

    def test_parts_joined_under_prefix(self):
        assert cache_key(VALUATION_PREFIX, "abc", "def") == "valuation:abc:def"
        assert cache_key(LISTINGS_PREFIX, "http://mls", 100) == "listings:http://mls:100"


class TestValuationPayloads:

    def test_miss_returns_none(self):
        assert cache.get_valuation("valuation:missing") is None

    def test_stored_body_is_compact_json(self):
        payload = {"estimated_value": 5_675_000, "value_range": {"low": 5_107_500, "high": 6_242_500}}

        body = cache.set_valuation("valuation:k", payload)

        assert body == '{"estimated_value":5675000,"value_range":{"low":5107500,"high":6242500}}'
        assert cache.get("valuation:k") == body

    def test_hit_returns_payload_and_same_body(self):
        payload = {"estimated_value": 2_400_000, "comparables": []}
        body = cache.set_valuation("valuation:k", payload)

        cached_payload, cached_body = cache.get_valuation("valuation:k")

        assert cached_payload == payload
        assert weak_etag(cached_body.encode("utf-8")) == weak_etag(body.encode("utf-8"))

    def test_dump_payload_matches_stored_body(self):
        payload = {"currency": "USD"}

        assert cache.set_valuation("valuation:k", payload) == dump_payload(payload)


class TestListingPools:

    def test_round_trip_restores_records(self, make_record):
        records = [make_record(amenities=("Pool", "Ocean View")), make_record(mls_number="MLS9")]

        cache.set_listings("listings:k", records)

        assert cache.get_listings("listings:k") == records

    def test_empty_pool_is_a_hit(self):
        cache.set_listings("listings:k", [])

        assert cache.get_listings("listings:k") == []
        assert cache.get_listings("listings:other") is None

    def test_amenities_come_back_as_tuple(self, make_record):
        cache.set_listings("listings:k", [make_record(amenities=("Lanai",))])

        (record,) = cache.get_listings("listings:k")

        assert record.amenities == ("Lanai",)
        assert json.loads(cache.get("listings:k"))[0]["amenities"] == ["Lanai"]


class TestCounters:

    def test_bump_counts_up(self):
        assert [cache.bump("rate:1.2.3.4:202610181200", ttl=60) for _ in range(3)] == [1, 2, 3]

    def test_garbled_counter_restarts(self):
        cache.set("rate:k", "not-a-number")

        assert cache.bump("rate:k", ttl=60) == 1

    def test_clear_empties_local_store(self):
        cache.set_valuation("valuation:k", {"a": 1})

        cache.clear()

        assert cache.get_valuation("valuation:k") is None
