from .listing import Building, EnrichedListing, Listing
from .preferences import (
    AMENITY_IDS,
    AMENITY_LABELS,
    AmenitySelection,
    Location,
    Preferences,
    amenity_labels,
    amenity_selections,
    selected_amenities,
)

__all__ = [
    "AMENITY_IDS",
    "AMENITY_LABELS",
    "AmenitySelection",
    "Building",
    "EnrichedListing",
    "Listing",
    "Location",
    "Preferences",
    "amenity_labels",
    "amenity_selections",
    "selected_amenities",
]
