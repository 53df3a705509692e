import logging
from dataclasses import asdict
from typing import List

from ..core.config import settings
from ..core.cache import VALUATION_PREFIX, cache, cache_key
from ..core.metrics import record_valuation
from ..core.utils import fingerprint, normalize_text, weak_etag
from ..data.base import ListingsClient, PropertyRecord
from ..data.listings_client import listings_client
from ..models.base import ValuationRequest
from ..models.predictor import MarketValuePredictor

logger = logging.getLogger(__name__)

DISCLAIMER = "This valuation is an estimate and not a financial appraisal."

class ValuationService:
    """
    Orchestrates:
      request → listings pool → MarketValuePredictor → response payload
    Caches payloads keyed by request + pool so a changed pool is never served stale.
    """
    def __init__(self, listings: ListingsClient | None = None, predictor: MarketValuePredictor | None = None):
        self.listings = listings or listings_client()
        self.predictor = predictor or MarketValuePredictor()

    async def pool(self) -> List[PropertyRecord]:
        return await self.listings.active_listings(settings.LISTINGS_POOL_LIMIT)

    def _cache_key(self, request: ValuationRequest, pool: List[PropertyRecord]) -> str:
        req = asdict(request)
        req["address"] = normalize_text(request.address)
        pool_sig = [(p.id, p.price, p.square_feet, p.city) for p in pool]
        return cache_key(VALUATION_PREFIX, fingerprint(req), fingerprint(pool_sig))

    async def value_home(self, request: ValuationRequest) -> tuple[dict, bool, str]:
        pool = await self.pool()
        key = self._cache_key(request, pool)
        hit = cache.get_valuation(key)
        if hit:
            payload, body = hit
            logger.debug("valuation served from cache", extra={"cache_key": key})
            return payload, True, weak_etag(body.encode("utf-8"))

        valuation = self.predictor.calculate_market_value(request, pool)
        used_comps = bool(valuation.comparables)
        record_valuation(request.city, used_comps, valuation.confidence_score)
        logger.info(
            "home valued",
            extra={
                "city": request.city,
                "comparables": len(valuation.comparables),
                "basis": "comparables" if used_comps else "baseline",
                "estimated_value": valuation.estimated_value,
                "confidence": round(valuation.confidence_score, 3),
            },
        )

        payload = valuation.to_dict()
        payload["address"] = request.address
        payload["currency"] = settings.DEFAULT_CURRENCY
        payload["disclaimer"] = DISCLAIMER

        body = cache.set_valuation(key, payload)
        return payload, False, weak_etag(body.encode("utf-8"))

    def market_snapshot(self, city: str) -> dict:
        """Market conditions and baseline $/sqft for one city."""
        conditions = self.predictor.market_table.lookup(city)
        return {
            "city": city,
            "baseline_price_per_sqft": self.predictor.baseline_table.price_per_sqft(city),
            **asdict(conditions),
        }
