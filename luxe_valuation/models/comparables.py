"""
Comparable selection: score every listing in the pool against the home
being valued, drop weak matches, rank the rest and keep the best few.
"""

from typing import Iterable, List

from ..data.base import PropertyRecord
from .base import Comparable, ValuationRequest
from . import similarity

# Listings must score above this to count as comparables
SIMILARITY_FLOOR = 0.30

# Maximum comparables returned
MAX_COMPARABLES = 8

# Ranking weights: similarity vs closeness (inverse distance band)
SIMILARITY_RANK_WEIGHT = 0.7
CLOSENESS_RANK_WEIGHT = 0.3

SAME_CITY_BAND = 1
SAME_ZIP_BAND = 2
OTHER_AREA_BAND = 3


def distance_band(target: ValuationRequest, candidate: PropertyRecord) -> int:
    """Symbolic proximity: same city beats same zip beats anything else."""
    if target.city.strip().lower() == candidate.city.strip().lower():
        return SAME_CITY_BAND
    if target.zip_code.strip() and target.zip_code.strip() == candidate.zip_code.strip():
        return SAME_ZIP_BAND
    return OTHER_AREA_BAND


def rank_score(comp: Comparable) -> float:
    return (
        comp.similarity * SIMILARITY_RANK_WEIGHT
        + (10 - comp.distance_band) / 10 * CLOSENESS_RANK_WEIGHT
    )


def find_comparables(target: ValuationRequest, pool: Iterable[PropertyRecord]) -> List[Comparable]:
    """
    Return up to MAX_COMPARABLES listings ranked best first.

    An empty pool yields an empty list. Listings without a positive price
    and living area are skipped since they have no price per square foot.
    """
    found: List[Comparable] = []
    for record in pool:
        if record.square_feet <= 0 or record.price <= 0:
            continue

        sim = similarity.score(target, record)
        if sim <= SIMILARITY_FLOOR:
            continue

        found.append(Comparable(
            source_id=record.mls_number or f"MLS{record.id}",
            address=record.address,
            price=record.price,
            square_feet=record.square_feet,
            price_per_sqft=record.price / record.square_feet,
            distance_band=distance_band(target, record),
            similarity=sim,
            bedrooms=record.bedrooms,
            bathrooms=record.bathrooms,
        ))

    # sorted() is stable, so equal scores keep pool order
    found = sorted(found, key=rank_score, reverse=True)
    return found[:MAX_COMPARABLES]
