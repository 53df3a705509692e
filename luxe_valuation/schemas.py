from typing import Optional
from pydantic import BaseModel, Field

from .models.base import ValuationRequest

class HomeValuationRequest(BaseModel):
    address: str = Field(min_length=4)
    city: str = Field(min_length=1)
    zip_code: str = ""
    square_feet: float
    bedrooms: int = Field(ge=0)
    bathrooms: float = Field(ge=0)
    property_type: str = Field(min_length=1)
    # Checked by the engine so unknown values surface as invalid_input
    condition: str = "good"
    year_built: Optional[int] = None
    lot_size: Optional[float] = None
    amenities: list[str] = []
    upgrades: list[str] = []

    def to_domain(self) -> ValuationRequest:
        return ValuationRequest(
            address=self.address.strip(),
            city=self.city.strip(),
            zip_code=self.zip_code.strip(),
            square_feet=self.square_feet,
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            property_type=self.property_type.strip(),
            condition=self.condition,
            year_built=self.year_built,
            lot_size=self.lot_size,
            amenities=tuple(self.amenities),
            upgrades=tuple(self.upgrades),
        )

class Range(BaseModel):
    low: int
    high: int

class ComparableOut(BaseModel):
    source_id: str
    address: str
    price: float
    square_feet: float
    price_per_sqft: float
    distance_band: int
    similarity: float
    bedrooms: int
    bathrooms: float

class AdjustmentOut(BaseModel):
    label: str
    dollar_delta: float
    reason: str

class MarketAnalysisOut(BaseModel):
    market_conditions: str
    recommended_list_price: int
    time_to_sell: str
    price_appreciation: float
    demand_index: int

class PredictionsOut(BaseModel):
    six_months: int
    one_year: int
    three_years: int
    five_years: int

class HomeValuationResponse(BaseModel):
    address: str
    currency: str = "USD"
    estimated_value: int
    value_range: Range
    price_per_sqft: int
    confidence_score: float = Field(ge=0, le=1)
    comparables: list[ComparableOut]
    adjustments: list[AdjustmentOut]
    market_analysis: MarketAnalysisOut
    predictions: PredictionsOut
    disclaimer: str
    cached: bool = False
    etag: str | None = None

class MarketConditionsResponse(BaseModel):
    city: str
    baseline_price_per_sqft: float
    annual_appreciation_pct: float
    average_time_to_sell: str
    demand_index: int
    list_price_multiplier: float
    description: str
