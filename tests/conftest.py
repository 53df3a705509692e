import pytest

from luxe_valuation.core.cache import cache
from luxe_valuation.data.base import PropertyRecord
from luxe_valuation.models.base import ValuationRequest


class StaticListings:
    """Listings client serving a fixed pool."""

    def __init__(self, records=()):
        self.records = list(records)
        self.calls = 0

    async def active_listings(self, limit):
        self.calls += 1
        return self.records[:limit]


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_request():
    """Factory fixture for valuation requests; defaults describe a plain Honolulu house."""
    def _create(**overrides) -> ValuationRequest:
        fields = dict(
            address="123 Kahala Ave",
            city="Honolulu",
            zip_code="96816",
            square_feet=2000,
            bedrooms=3,
            bathrooms=2,
            property_type="house",
            condition="good",
            lot_size=None,
            amenities=(),
            upgrades=(),
        )
        fields.update(overrides)
        return ValuationRequest(**fields)
    return _create


@pytest.fixture
def make_record():
    """Factory fixture for pool listings."""
    counter = {"n": 0}

    def _create(**overrides) -> PropertyRecord:
        counter["n"] += 1
        fields = dict(
            id=str(counter["n"]),
            address=f"{counter['n']} Test Street",
            city="Honolulu",
            zip_code="96816",
            price=2_400_000.0,
            square_feet=2000.0,
            bedrooms=3,
            bathrooms=2.0,
            property_type="house",
            amenities=(),
            mls_number=None,
        )
        fields.update(overrides)
        return PropertyRecord(**fields)
    return _create


@pytest.fixture
def static_listings():
    return StaticListings
