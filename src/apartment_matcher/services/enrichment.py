"""Join listings with their parent buildings."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..models.listing import Building, EnrichedListing, Listing
from ..models.preferences import Location, Preferences
from .geo import CAMPUS_LOCATION, compute_distance

logger = logging.getLogger(__name__)


def _has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def _has_features(features: Optional[List[str]]) -> bool:
    return bool(features) and any(_has_text(f) for f in features)


def reference_location_for(
    preferences: Preferences, default: Location = CAMPUS_LOCATION
) -> Location:
    """Return the user's chosen location, or the default reference point."""
    return preferences.location or default


def enrich_listing(
    listing: Listing,
    building: Optional[Building],
    reference_location: Optional[Location] = None,
) -> EnrichedListing:
    """
    Combine a listing with building-level data.

    Listing description, features and website win when they are non-empty
    after trimming. With a reference location and building coordinates the
    distance is recomputed; otherwise the building's static distance is used.

    Args:
        listing: The unit record
        building: Its parent building, or None if it could not be found
        reference_location: Point to measure distance from

    Returns:
        A new EnrichedListing; the inputs are not modified
    """
    building = building or Building(id=listing.building_id)

    distance = building.distance or 0.0
    if reference_location is not None and building.has_coordinates():
        distance = compute_distance(
            reference_location.lat,
            reference_location.lon,
            building.latitude,
            building.longitude,
        )

    return EnrichedListing(
        id=listing.id,
        building_id=listing.building_id,
        price=listing.price,
        bedrooms=listing.bedrooms,
        bathrooms=listing.bathrooms,
        amenities=list(building.amenities),
        distance=distance,
        unit_number=listing.unit_number,
        floor_plan=listing.floor_plan,
        sqft=listing.sqft,
        description=listing.description if _has_text(listing.description) else building.description,
        features=list(listing.features if _has_features(listing.features) else building.features),
        website=listing.website if _has_text(listing.website) else building.website,
        name=building.name or "Unknown",
        address=building.address or "Unknown Address",
        images=list(building.images),
        reviews=list(building.reviews),
        contact=dict(building.contact),
        lease_details=dict(building.lease_details),
        latitude=building.latitude,
        longitude=building.longitude,
    )


def enrich_listings(
    listings: Iterable[Listing],
    buildings: Iterable[Building],
    reference_location: Optional[Location] = None,
) -> List[EnrichedListing]:
    """Enrich a collection, joining on building_id and keeping listing order."""
    by_id: Dict[Any, Building] = {b.id: b for b in buildings}

    enriched = []
    for listing in listings:
        building = by_id.get(listing.building_id)
        if building is None:
            logger.debug(f"Listing {listing.id}: building {listing.building_id} not found")
        enriched.append(enrich_listing(listing, building, reference_location))

    logger.info(f"Enriched {len(enriched)} listings from {len(by_id)} buildings")
    return enriched
