"""
Valuation engine: comparable selection, adjustments, market lookup and the
predictor that composes them. Pure computation over an in-memory pool.
"""

from .base import (
    AdjustmentLine,
    Adjustments,
    Comparable,
    Condition,
    MarketAnalysis,
    MarketConditions,
    MarketValuation,
    Predictions,
    ValuationRequest,
    ValueRange,
)
from .adjustments import compute_adjustments
from .comparables import find_comparables
from .market import BaselineTable, MarketConditionsTable
from .predictor import MarketValuePredictor, calculate_market_value
from .similarity import score

__all__ = [
    # Types
    "AdjustmentLine",
    "Adjustments",
    "Comparable",
    "Condition",
    "MarketAnalysis",
    "MarketConditions",
    "MarketValuation",
    "Predictions",
    "ValuationRequest",
    "ValueRange",
    # Engine
    "BaselineTable",
    "MarketConditionsTable",
    "MarketValuePredictor",
    "calculate_market_value",
    "compute_adjustments",
    "find_comparables",
    "score",
]
