from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Condition(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class ValuationRequest:
    """
    Attributes of the home being valued, as supplied by the caller.
    `condition` is kept as given and checked by the engine.
    """
    address: str
    city: str
    zip_code: str
    square_feet: float
    bedrooms: int
    bathrooms: float
    property_type: str
    condition: str = Condition.GOOD.value
    year_built: Optional[int] = None
    lot_size: Optional[float] = None
    amenities: Tuple[str, ...] = field(default_factory=tuple)
    upgrades: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class Comparable:
    source_id: str
    address: str
    price: float
    square_feet: float
    price_per_sqft: float
    distance_band: int  # 1 = same city, 2 = same zip, 3 = elsewhere
    similarity: float
    bedrooms: int
    bathrooms: float


@dataclass
class AdjustmentLine:
    label: str
    dollar_delta: float
    reason: str


@dataclass
class Adjustments:
    total: float
    lines: List[AdjustmentLine] = field(default_factory=list)


@dataclass(frozen=True)
class MarketConditions:
    annual_appreciation_pct: float
    average_time_to_sell: str
    demand_index: int  # 1-10
    list_price_multiplier: float
    description: str


@dataclass
class ValueRange:
    low: int
    high: int


@dataclass
class MarketAnalysis:
    market_conditions: str
    recommended_list_price: int
    time_to_sell: str
    price_appreciation: float
    demand_index: int


@dataclass
class Predictions:
    six_months: int
    one_year: int
    three_years: int
    five_years: int


@dataclass
class MarketValuation:
    estimated_value: int
    value_range: ValueRange
    price_per_sqft: int
    confidence_score: float
    comparables: List[Comparable]
    adjustments: List[AdjustmentLine]
    market_analysis: MarketAnalysis
    predictions: Predictions

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dict for JSON output."""
        return asdict(self)
