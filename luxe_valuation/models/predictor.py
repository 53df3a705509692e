"""
Market value predictor.

Pipeline:
  validate → comparables → base value (weighted comps or city baseline)
  → adjustments → market conditions → range, confidence, projections
"""

import math
from numbers import Real
from typing import Iterable, List, Optional

from ..core.errors import InvalidInput
from ..core.utils import round_half_up
from ..data.base import PropertyRecord
from .adjustments import compute_adjustments, parse_condition
from .base import (
    Comparable,
    MarketAnalysis,
    MarketValuation,
    Predictions,
    ValuationRequest,
    ValueRange,
)
from .comparables import find_comparables
from .market import BaselineTable, MarketConditionsTable

RANGE_SPREAD = 0.10
DISPLAYED_COMPARABLES = 6

BASE_CONFIDENCE = 0.5
MIN_CONFIDENCE = 0.3
MAX_CONFIDENCE = 0.95

# Horizon label -> years
PROJECTION_YEARS = (
    ("six_months", 0.5),
    ("one_year", 1),
    ("three_years", 3),
    ("five_years", 5),
)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_request(request: ValuationRequest) -> None:
    """Raise InvalidInput for anything that would produce NaN/Infinity or a meaningless estimate."""
    for name in ("address", "city", "property_type"):
        value = getattr(request, name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidInput(name, "is required")
    if not _is_number(request.square_feet) or request.square_feet <= 0:
        raise InvalidInput("square_feet", "must be a positive number")
    for name in ("bedrooms", "bathrooms"):
        value = getattr(request, name)
        if not _is_number(value) or value < 0:
            raise InvalidInput(name, "must be a non-negative number")
    if request.lot_size is not None and (not _is_number(request.lot_size) or request.lot_size < 0):
        raise InvalidInput("lot_size", "must be a non-negative number")
    parse_condition(request.condition)


class MarketValuePredictor:
    """
    Comparable-sales valuation with market adjustments.

    Lookup tables are injected so other markets can be priced without code
    changes; the defaults cover Oahu.
    """

    def __init__(self, market_table: Optional[MarketConditionsTable] = None,
                 baseline_table: Optional[BaselineTable] = None):
        self.market_table = market_table or MarketConditionsTable()
        self.baseline_table = baseline_table or BaselineTable()

    def calculate_market_value(self, request: ValuationRequest,
                               pool: Iterable[PropertyRecord]) -> MarketValuation:
        validate_request(request)

        comparables = find_comparables(request, pool)
        base_value = self.base_value(request, comparables)
        adjustments = compute_adjustments(request)

        # Negative adjustments on a cheap base must not flip the value range
        raw_value = max(0.0, base_value + adjustments.total)
        estimated_value = round_half_up(raw_value)
        conditions = self.market_table.lookup(request.city)
        rate = conditions.annual_appreciation_pct / 100

        return MarketValuation(
            estimated_value=estimated_value,
            value_range=ValueRange(
                low=round_half_up(estimated_value * (1 - RANGE_SPREAD)),
                high=round_half_up(estimated_value * (1 + RANGE_SPREAD)),
            ),
            price_per_sqft=round_half_up(raw_value / request.square_feet),
            confidence_score=confidence_score(comparables),
            comparables=comparables[:DISPLAYED_COMPARABLES],
            adjustments=adjustments.lines,
            market_analysis=MarketAnalysis(
                market_conditions=conditions.description,
                recommended_list_price=round_half_up(estimated_value * conditions.list_price_multiplier),
                time_to_sell=conditions.average_time_to_sell,
                price_appreciation=conditions.annual_appreciation_pct,
                demand_index=conditions.demand_index,
            ),
            predictions=Predictions(**{
                label: round_half_up(estimated_value * (1 + rate) ** years)
                for label, years in PROJECTION_YEARS
            }),
        )

    def base_value(self, request: ValuationRequest, comparables: List[Comparable]) -> float:
        """
        Weighted average $/sqft of the comparables times the living area.
        Weight = similarity / (distance band + 1). No comparables → city baseline.
        """
        if not comparables:
            return request.square_feet * self.baseline_table.price_per_sqft(request.city)

        weighted = 0.0
        total_weight = 0.0
        for comp in comparables:
            weight = comp.similarity * (1 / (comp.distance_band + 1))
            weighted += comp.price_per_sqft * weight
            total_weight += weight

        avg_ppsf = weighted / total_weight if total_weight > 0 else self.baseline_table.default
        return request.square_feet * avg_ppsf


def confidence_score(comparables: List[Comparable]) -> float:
    """
    0.5 base, plus up to 0.2 for comparable count, 0.2 for average similarity
    and 0.1 for closeness; clamped to [0.3, 0.95]. Exactly 0.5 with no comps.
    """
    if not comparables:
        return BASE_CONFIDENCE

    n = len(comparables)
    avg_similarity = sum(c.similarity for c in comparables) / n
    avg_band = sum(c.distance_band for c in comparables) / n

    confidence = BASE_CONFIDENCE
    confidence += min(n / 10, 1) * 0.2
    confidence += avg_similarity * 0.2
    confidence += max(0, (5 - avg_band) / 5) * 0.1
    return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))


_default_predictor = MarketValuePredictor()


def calculate_market_value(request: ValuationRequest, pool: Iterable[PropertyRecord]) -> MarketValuation:
    return _default_predictor.calculate_market_value(request, pool)
