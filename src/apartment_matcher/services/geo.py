"""Great-circle distance helpers."""

import logging
import math
from dataclasses import replace
from typing import List

from ..models.listing import EnrichedListing
from ..models.preferences import Location

logger = logging.getLogger(__name__)

EARTH_RADIUS_MILES = 3959

# Default reference point when the user has not picked a location
CAMPUS_LOCATION = Location(
    lat=30.285340698031447,
    lon=-97.73208396036748,
    name="University of Texas at Austin",
)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up; builtin round() uses banker's rounding."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Unrounded haversine distance in miles between two points in decimal degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Float error can push a slightly above 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def compute_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Distance in miles between two coordinates, rounded to 1 decimal place.

    Inputs are not range-checked. The result is symmetric and 0 for
    identical points.
    """
    return round_half_up(haversine_miles(lat1, lon1, lat2, lon2), 1)


def filter_by_distance(
    listings: List[EnrichedListing], location: Location, max_distance: float
) -> List[EnrichedListing]:
    """
    Recompute distances from a location and keep listings within max_distance.

    Returns copies sorted closest first. Listings without usable coordinates
    (missing or zero, as for buildings) are skipped.
    """
    nearby = []
    for listing in listings:
        if not listing.has_coordinates():
            logger.debug(f"Skipping {listing.id}: no coordinates")
            continue

        distance = haversine_miles(location.lat, location.lon, listing.latitude, listing.longitude)
        if distance <= max_distance:
            nearby.append(replace(listing, distance=distance))

    nearby.sort(key=lambda x: x.distance)
    return nearby
