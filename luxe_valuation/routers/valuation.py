import logging

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException, Response
from starlette.status import HTTP_304_NOT_MODIFIED, HTTP_502_BAD_GATEWAY

from ..schemas import HomeValuationRequest, HomeValuationResponse, MarketConditionsResponse
from ..services.valuation_service import ValuationService
from ..core.ratelimit import rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()

def service_dep() -> ValuationService:
    return ValuationService()

@router.post("/home-valuation", response_model=HomeValuationResponse)
async def post_home_valuation(
    body: HomeValuationRequest,
    response: Response,
    if_none_match: str | None = Header(default=None),
    _lim = Depends(rate_limit),
    svc: ValuationService = Depends(service_dep),
):
    try:
        payload, from_cache, etag = await svc.value_home(body.to_domain())
    except httpx.HTTPError as exc:
        logger.error("listings pool unavailable", exc_info=exc)
        raise HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail="Listings service unavailable") from exc

    if if_none_match and if_none_match == etag:
        return Response(status_code=HTTP_304_NOT_MODIFIED, headers={"ETag": etag})
    payload["cached"] = from_cache
    payload["etag"] = etag
    response.headers["ETag"] = etag
    return payload

@router.get("/market-conditions/{city}", response_model=MarketConditionsResponse)
def get_market_conditions(
    city: str,
    _lim = Depends(rate_limit),
    svc: ValuationService = Depends(service_dep),
):
    return svc.market_snapshot(city)
