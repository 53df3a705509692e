"""
Similarity between the home being valued and one listing from the pool.

Five normalized sub-scores, each in [0, 1], combined with fixed weights:
living area 30%, bedrooms 20%, bathrooms 20%, property type 15%, city 15%.
"""

from ..data.base import PropertyRecord
from .base import ValuationRequest

SQFT_WEIGHT = 0.30
BEDROOM_WEIGHT = 0.20
BATHROOM_WEIGHT = 0.20
TYPE_WEIGHT = 0.15
CITY_WEIGHT = 0.15

# Differences at or beyond these counts score zero
BEDROOM_SPAN = 4
BATHROOM_SPAN = 3


def _same_text(a: str, b: str) -> bool:
    return (a or "").strip().lower() == (b or "").strip().lower()


def sqft_score(target_sqft: float, candidate_sqft: float) -> float:
    if target_sqft == 0:
        return 0.0
    diff = abs(target_sqft - candidate_sqft) / target_sqft
    return 1 - min(diff, 1)


def score(target: ValuationRequest, candidate: PropertyRecord) -> float:
    """Weighted similarity in [0, 1]; identical attributes score exactly 1.0."""
    parts = (
        (sqft_score(target.square_feet, candidate.square_feet), SQFT_WEIGHT),
        (max(0.0, (BEDROOM_SPAN - abs(target.bedrooms - candidate.bedrooms)) / BEDROOM_SPAN), BEDROOM_WEIGHT),
        (max(0.0, (BATHROOM_SPAN - abs(target.bathrooms - candidate.bathrooms)) / BATHROOM_SPAN), BATHROOM_WEIGHT),
        (1.0 if _same_text(target.property_type, candidate.property_type) else 0.0, TYPE_WEIGHT),
        (1.0 if _same_text(target.city, candidate.city) else 0.0, CITY_WEIGHT),
    )

    total = 0.0
    weights = 0.0
    for sub, weight in parts:
        total += sub * weight
        weights += weight
    return min(1.0, max(0.0, total / weights))
