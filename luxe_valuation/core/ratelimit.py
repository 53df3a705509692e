from fastapi import HTTPException, Request
from starlette.status import HTTP_429_TOO_MANY_REQUESTS
from datetime import datetime, timezone
from .config import settings
from .cache import RATE_PREFIX, cache, cache_key

def rate_limit(request: Request):
    """
    Basic requests-per-minute limiter keyed by client IP.
    Uses Redis if configured, else the in-process cache (best-effort).
    """
    rpm = max(1, settings.RATE_LIMIT_RPM)
    client_ip = request.client.host if request.client else "unknown"
    minute_bucket = datetime.now(timezone.utc).strftime("%Y%m%d%H%M")

    if cache.bump(cache_key(RATE_PREFIX, client_ip, minute_bucket), ttl=60) > rpm:
        raise HTTPException(status_code=HTTP_429_TOO_MANY_REQUESTS, detail="Rate limit exceeded")
