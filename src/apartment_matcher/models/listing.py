"""Normalized listing and building models used by the matching engine."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _as_float(value: Any, default: float = 0.0) -> float:
    """Coerce a raw record value to float, falling back to default."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _usable_coordinates(latitude: Optional[float], longitude: Optional[float]) -> bool:
    # Zero coordinates are treated as missing, matching the source data
    return bool(latitude) and bool(longitude)


@dataclass
class Building:
    """
    A property that owns one or more listings.

    Shared attributes (address, amenities, images) live here and are
    joined onto each listing during enrichment.
    """

    id: Any
    name: str = ""
    address: str = ""

    # Location
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance: float = 0.0  # Static fallback distance in miles

    # Features
    amenities: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    description: str = ""
    features: List[str] = field(default_factory=list)
    reviews: List[Any] = field(default_factory=list)
    contact: Dict[str, Any] = field(default_factory=dict)
    lease_details: Dict[str, Any] = field(default_factory=dict)
    website: str = ""

    def has_coordinates(self) -> bool:
        """Check if both latitude and longitude are usable."""
        return _usable_coordinates(self.latitude, self.longitude)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Building":
        """Build from a raw record, defaulting absent fields."""
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            address=data.get("address") or "",
            latitude=_as_optional_float(data.get("latitude")),
            longitude=_as_optional_float(data.get("longitude")),
            distance=_as_float(data.get("distance")),
            amenities=[str(a) for a in _as_list(data.get("amenities"))],
            images=[str(i) for i in _as_list(data.get("images"))],
            description=data.get("description") or "",
            features=[str(f) for f in _as_list(data.get("features"))],
            reviews=_as_list(data.get("reviews")),
            contact=dict(data.get("contact") or {}),
            lease_details=dict(data.get("leaseDetails") or data.get("lease_details") or {}),
            website=data.get("website") or "",
        )


@dataclass
class Listing:
    """
    A single rentable unit inside a building.

    ``amenities`` and ``distance`` are normally filled in from the parent
    building by the enricher.
    """

    id: Any
    building_id: Any
    price: float = 0.0
    bedrooms: float = 0
    bathrooms: float = 0
    amenities: List[str] = field(default_factory=list)
    distance: float = 0.0  # Miles, derived

    # Descriptive
    unit_number: str = ""
    floor_plan: str = ""
    sqft: Optional[int] = None
    description: str = ""
    features: List[str] = field(default_factory=list)
    website: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Listing":
        """Build from a raw record, defaulting absent fields."""
        sqft = _as_optional_float(data.get("sqft"))
        return cls(
            id=data.get("id"),
            building_id=data.get("buildingId", data.get("building_id")),
            price=_as_float(data.get("price")),
            bedrooms=_as_float(data.get("bedrooms")),
            bathrooms=_as_float(data.get("bathrooms")),
            amenities=[str(a) for a in _as_list(data.get("amenities"))],
            distance=_as_float(data.get("distance")),
            unit_number=str(data.get("unitNumber") or data.get("unit_number") or ""),
            floor_plan=str(data.get("floorPlan") or data.get("floor_plan") or ""),
            sqft=int(sqft) if sqft is not None else None,
            description=data.get("description") or "",
            features=[str(f) for f in _as_list(data.get("features"))],
            website=data.get("website") or "",
        )

    def display_price(self) -> str:
        """Format price for display."""
        return f"${self.price:,.0f}/mo"

    def display_size(self) -> str:
        """Format size information for display."""
        parts = []
        parts.append("Studio" if self.bedrooms == 0 else f"{self.bedrooms:g}BR")
        parts.append(f"{self.bathrooms:g}BA")
        if self.sqft:
            parts.append(f"{self.sqft:,} sqft")
        return " | ".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id}, {self.display_price()}, {self.display_size()})"


@dataclass(repr=False)
class EnrichedListing(Listing):
    """A listing joined with its parent building's attributes."""

    name: str = "Unknown"
    address: str = "Unknown Address"
    images: List[str] = field(default_factory=list)
    reviews: List[Any] = field(default_factory=list)
    contact: Dict[str, Any] = field(default_factory=dict)
    lease_details: Dict[str, Any] = field(default_factory=dict)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def has_amenities(self, amenity_ids) -> bool:
        """Check if every given amenity id is present on the listing."""
        return all(amenity_id in self.amenities for amenity_id in amenity_ids)

    def has_coordinates(self) -> bool:
        """Check if both latitude and longitude are usable."""
        return _usable_coordinates(self.latitude, self.longitude)
