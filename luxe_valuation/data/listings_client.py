import logging
from typing import Any, Dict, List, Optional

import httpx

from .base import ListingsClient, PropertyRecord
from ..core.cache import LISTINGS_PREFIX, cache, cache_key
from ..core.config import settings
from ..core.utils import fnv1a_32, seeded_rand

logger = logging.getLogger(__name__)

# Living area assumed for feed rows that omit it
DEFAULT_LIVING_SQFT = 2000

# Feed field -> canonical field. First alias present wins.
_ALIASES: Dict[str, tuple] = {
    "square_feet": ("square_feet", "squareFeet", "sqft", "living_sqft"),
    "zip_code": ("zip_code", "zipCode", "zip"),
    "property_type": ("property_type", "propertyType", "type"),
    "mls_number": ("mls_number", "mlsNumber"),
}

def _pick(raw: Dict[str, Any], canonical: str) -> Any:
    for key in _ALIASES[canonical]:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None

def _as_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default

def normalize_listing(raw: Dict[str, Any]) -> PropertyRecord:
    """
    Map one feed row (camelCase, snake_case or legacy `sqft`) onto PropertyRecord.
    Numeric columns may arrive as strings (decimal columns serialize that way).
    """
    sqft = _as_float(_pick(raw, "square_feet"))
    if sqft <= 0:
        sqft = float(DEFAULT_LIVING_SQFT)
    amenities = raw.get("amenities") or []
    mls_number = _pick(raw, "mls_number")
    return PropertyRecord(
        id=str(raw.get("id", "")),
        address=str(raw.get("address") or ""),
        city=str(raw.get("city") or ""),
        zip_code=str(_pick(raw, "zip_code") or ""),
        price=_as_float(raw.get("price")),
        square_feet=sqft,
        bedrooms=int(_as_float(raw.get("bedrooms"))),
        bathrooms=_as_float(raw.get("bathrooms")),
        property_type=str(_pick(raw, "property_type") or ""),
        amenities=tuple(str(a) for a in amenities),
        mls_number=str(mls_number) if mls_number is not None else None,
    )

# Oahu neighbourhoods the mock feed draws from: (city, zip, $/sqft centre)
_MOCK_AREAS = [
    ("Honolulu", "96815", 1200),
    ("Honolulu", "96813", 1100),
    ("Kailua", "96734", 1500),
    ("Waialua", "96791", 800),
    ("Kahala", "96816", 1600),
    ("Diamond Head", "96815", 2000),
    ("Hanauma Bay", "96825", 1800),
]
_MOCK_STREETS = ["Kalakaua Ave", "Kahala Ave", "Mokulua Dr", "Kamehameha Hwy", "Diamond Head Rd", "Hawaii Kai Dr"]
_MOCK_TYPES = ["house", "house", "condo", "estate", "townhouse"]
_MOCK_AMENITIES = ["Ocean View", "Pool", "Spa", "Tennis Court", "Private Beach", "Guest House", "Lanai", "Solar"]

class MockListings(ListingsClient):
    """
    Deterministic stand-in for the MLS pool. Same limit → same listings.
    """
    async def active_listings(self, limit: int) -> List[PropertyRecord]:
        out: List[PropertyRecord] = []
        for i in range(limit):
            seed = fnv1a_32(f"listing-{i}")
            city, zip_code, ppsf = _MOCK_AREAS[int(seeded_rand(seed, 1)[0] * len(_MOCK_AREAS)) % len(_MOCK_AREAS)]
            sqft = 1200 + int(seeded_rand(seed + 1, 1)[0] * 5800)
            # Price per sqft within +/-20% of the area centre
            price = round(sqft * ppsf * (0.8 + seeded_rand(seed + 2, 1)[0] * 0.4), -3)
            beds = 2 + int(seeded_rand(seed + 3, 1)[0] * 5)  # 2..6
            baths = 1 + int(seeded_rand(seed + 4, 1)[0] * 5) * 0.5 + beds // 2  # halves allowed
            ptype = _MOCK_TYPES[int(seeded_rand(seed + 5, 1)[0] * len(_MOCK_TYPES)) % len(_MOCK_TYPES)]
            n_amen = int(seeded_rand(seed + 6, 1)[0] * 4)
            amenities = tuple(
                _MOCK_AMENITIES[int(seeded_rand(seed + 10 + k, 1)[0] * len(_MOCK_AMENITIES)) % len(_MOCK_AMENITIES)]
                for k in range(n_amen)
            )
            street = _MOCK_STREETS[seed % len(_MOCK_STREETS)]
            out.append(PropertyRecord(
                id=str(i + 1),
                address=f"{100 + seed % 4900} {street}",
                city=city,
                zip_code=zip_code,
                price=float(price),
                square_feet=float(sqft),
                bedrooms=beds,
                bathrooms=float(baths),
                property_type=ptype,
                amenities=tuple(dict.fromkeys(amenities)),
                mls_number=f"MLS{202400000 + i + 1}",
            ))
        return out

class HttpListings(ListingsClient):
    """
    Client for the listings service that fronts the property database.
    Expects GET {base}/properties?limit=N returning a JSON list (or {"properties": [...]}).
    """
    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _cache_key(self, limit: int) -> str:
        return cache_key(LISTINGS_PREFIX, self.base_url, limit)

    async def active_listings(self, limit: int) -> List[PropertyRecord]:
        key = self._cache_key(limit)
        cached = cache.get_listings(key)
        if cached is not None:
            logger.debug("listings pool served from cache", extra={"cache_key": key})
            return cached

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.get(f"{self.base_url}/properties", params={"limit": limit})
            r.raise_for_status()
            body = r.json()
        items = body.get("properties", []) if isinstance(body, dict) else body
        records = [normalize_listing(item) for item in items]

        cache.set_listings(key, records)
        logger.info("listings pool fetched", extra={"pool_size": len(records)})
        return records

def listings_client() -> ListingsClient:
    """
    Factory picks mock or http based on env flags.
    """
    if settings.LISTINGS_PROVIDER == "http" and settings.LISTINGS_BASE_URL:
        return HttpListings(settings.LISTINGS_BASE_URL, timeout=settings.LISTINGS_TIMEOUT_SECONDS)
    return MockListings()
