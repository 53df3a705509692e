"""
Dollar adjustments applied on top of the comparable (or baseline) value.

Each adjustment depends only on the home being valued. Lines come out in a
fixed order (ocean view, condition, amenities, lot) and lines worth $0 are
left out.
"""

from typing import Dict, List

from ..core.errors import InvalidInput
from .base import AdjustmentLine, Adjustments, Condition, ValuationRequest

OCEAN_VIEW_PER_SQFT = 200

# Condition delta is taken against a notional $1,000/sqft home
CONDITION_BASE_PER_SQFT = 1000
CONDITION_MULTIPLIERS: Dict[Condition, float] = {
    Condition.EXCELLENT: 1.15,
    Condition.GOOD: 1.00,
    Condition.FAIR: 0.90,
    Condition.POOR: 0.75,
}

PREMIUM_AMENITY_KEYWORDS = ("pool", "spa", "tennis", "private beach", "guest house")
PREMIUM_AMENITY_VALUE = 75_000

LARGE_LOT_THRESHOLD = 10_000
LARGE_LOT_PER_SQFT = 25


def parse_condition(value) -> Condition:
    if isinstance(value, Condition):
        return value
    try:
        return Condition(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(c.value for c in Condition)
        raise InvalidInput("condition", f"unknown condition {value!r}; expected one of {allowed}") from None


def has_ocean_view(amenities) -> bool:
    return any("ocean" in a.lower() for a in amenities)


def premium_amenity_count(amenities) -> int:
    return sum(
        1 for a in amenities
        if any(keyword in a.lower() for keyword in PREMIUM_AMENITY_KEYWORDS)
    )


def compute_adjustments(target: ValuationRequest) -> Adjustments:
    condition = parse_condition(target.condition)
    lines: List[AdjustmentLine] = []

    if has_ocean_view(target.amenities):
        lines.append(AdjustmentLine(
            label="Ocean View",
            dollar_delta=target.square_feet * OCEAN_VIEW_PER_SQFT,
            reason="Premium for ocean views in the Hawaii luxury market",
        ))

    baseline = target.square_feet * CONDITION_BASE_PER_SQFT
    condition_delta = baseline * (CONDITION_MULTIPLIERS[condition] - 1)
    if condition_delta != 0:
        lines.append(AdjustmentLine(
            label="Property Condition",
            dollar_delta=condition_delta,
            reason=f"{condition.value} condition adjustment",
        ))

    premium = premium_amenity_count(target.amenities) * PREMIUM_AMENITY_VALUE
    if premium > 0:
        lines.append(AdjustmentLine(
            label="Premium Amenities",
            dollar_delta=premium,
            reason="Luxury amenities premium",
        ))

    if target.lot_size is not None and target.lot_size > LARGE_LOT_THRESHOLD:
        lines.append(AdjustmentLine(
            label="Large Lot",
            dollar_delta=(target.lot_size - LARGE_LOT_THRESHOLD) * LARGE_LOT_PER_SQFT,
            reason=f"Premium for lot size over {LARGE_LOT_THRESHOLD:,} sq ft",
        ))

    return Adjustments(total=sum(line.dollar_delta for line in lines), lines=lines)
