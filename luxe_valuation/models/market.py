"""
Static market tables: conditions per city and the per-city $/sqft baseline
used when no comparables are found.
"""

from types import MappingProxyType
from typing import Mapping

from .base import MarketConditions

DEFAULT_MARKET_CITY = "Honolulu"
DEFAULT_BASELINE_PER_SQFT = 1000

MARKET_CONDITIONS: Mapping[str, MarketConditions] = MappingProxyType({
    "Honolulu": MarketConditions(
        annual_appreciation_pct=8.5,
        average_time_to_sell="60-90 days",
        demand_index=9,
        list_price_multiplier=1.05,
        description="Hot seller's market with strong demand for luxury properties",
    ),
    "Kailua": MarketConditions(
        annual_appreciation_pct=12.3,
        average_time_to_sell="30-60 days",
        demand_index=10,
        list_price_multiplier=1.08,
        description="Extremely competitive market, properties often sell above asking",
    ),
    "Waialua": MarketConditions(
        annual_appreciation_pct=15.2,
        average_time_to_sell="45-75 days",
        demand_index=8,
        list_price_multiplier=1.03,
        description="Strong growth market with increasing demand for North Shore properties",
    ),
})

CITY_BASELINE_PER_SQFT: Mapping[str, int] = MappingProxyType({
    "Honolulu": 1200,
    "Kailua": 1500,
    "Waialua": 800,
    "Hanauma Bay": 1800,
    "Diamond Head": 2000,
    "Kahala": 1600,
})


def _fold(table: Mapping) -> Mapping:
    return MappingProxyType({key.strip().lower(): value for key, value in table.items()})


class MarketConditionsTable:
    """Case-insensitive city lookup; unknown cities get the default city's entry."""

    def __init__(self, table: Mapping[str, MarketConditions] = MARKET_CONDITIONS,
                 default_city: str = DEFAULT_MARKET_CITY):
        self._table = _fold(table)
        self._default = self._table[default_city.strip().lower()]

    def lookup(self, city: str) -> MarketConditions:
        return self._table.get((city or "").strip().lower(), self._default)


class BaselineTable:
    """Per-city $/sqft used when the pool yields no comparables."""

    def __init__(self, table: Mapping[str, float] = CITY_BASELINE_PER_SQFT,
                 default: float = DEFAULT_BASELINE_PER_SQFT):
        self._table = _fold(table)
        self.default = default

    def price_per_sqft(self, city: str) -> float:
        return self._table.get((city or "").strip().lower(), self.default)


def lookup(city: str) -> MarketConditions:
    return _DEFAULT_CONDITIONS.lookup(city)


_DEFAULT_CONDITIONS = MarketConditionsTable()
