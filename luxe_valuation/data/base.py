from typing import Protocol, List, Optional, Tuple
from dataclasses import dataclass, field

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class PropertyRecord:
    """
    One active listing as read from the MLS pool. Read-only snapshot;
    field names are canonical (aliases are resolved by the adapters).
    """
    id: str
    address: str
    city: str
    zip_code: str
    price: float
    square_feet: float
    bedrooms: int
    bathrooms: float
    property_type: str
    amenities: Tuple[str, ...] = field(default_factory=tuple)
    mls_number: Optional[str] = None  # e.g., "MLS202401234" when the feed carries one

# ----- Protocols (interfaces) -----

class ListingsClient(Protocol):
    async def active_listings(self, limit: int) -> List[PropertyRecord]: ...
