import os
from pydantic import BaseModel

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    DEFAULT_CURRENCY: str = os.getenv("CURRENCY", "USD")
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "900"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Listings pool (the candidate comparables)
    LISTINGS_PROVIDER: str = os.getenv("LISTINGS_PROVIDER", "mock")  # mock | http
    LISTINGS_BASE_URL: str | None = os.getenv("LISTINGS_BASE_URL")
    LISTINGS_POOL_LIMIT: int = int(os.getenv("LISTINGS_POOL_LIMIT", "100"))
    LISTINGS_TIMEOUT_SECONDS: float = float(os.getenv("LISTINGS_TIMEOUT_SECONDS", "10"))

    # Throttling
    RATE_LIMIT_RPM: int = int(os.getenv("RATE_LIMIT_RPM", "60"))

    # CORS
    ALLOW_ORIGINS: str = os.getenv("ALLOW_ORIGINS", "*")

    # Cache
    USE_REDIS: bool = os.getenv("USE_REDIS", "false").lower() == "true"
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

settings = Settings()
