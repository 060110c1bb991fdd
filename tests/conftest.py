"""Shared fixtures for apartment-matcher tests."""

import pytest

from apartment_matcher.models.listing import Building, EnrichedListing, Listing
from apartment_matcher.models.preferences import Location, Preferences


@pytest.fixture
def basic_preferences():
    """One bed, one bath, half a mile, no amenities selected."""
    return Preferences(min_price=0, max_price=0, beds=1, bathrooms=1, distance=0.5)


@pytest.fixture
def budget_preferences():
    """A $1,000-$2,000 budget with WiFi and parking selected."""
    return Preferences(
        min_price=1000,
        max_price=2000,
        beds=1,
        bathrooms=1,
        distance=2,
        wifi=True,
        parking=True,
    )


@pytest.fixture
def campus_building():
    """A building near campus with coordinates."""
    return Building(
        id=1,
        name="The Castilian",
        address="2323 San Antonio St",
        latitude=30.2868,
        longitude=-97.7424,
        distance=0.4,
        amenities=["wifi", "gym", "parking"],
        images=["castilian_1.jpg"],
        description="Student housing near campus",
        features=["Rooftop deck"],
        reviews=[{"rating": 4}],
        contact={"phone": "512-555-0100"},
        lease_details={"term": "12 months"},
        website="https://example.com/castilian",
    )


@pytest.fixture
def studio_listing():
    """A studio unit in the campus building."""
    return Listing(
        id=101,
        building_id=1,
        price=1450,
        bedrooms=0,
        bathrooms=1,
        unit_number="4B",
        floor_plan="S1",
        sqft=420,
    )


@pytest.fixture
def make_listing():
    """Factory for enriched listings with sensible defaults."""

    def _make(listing_id=1, price=1500, bedrooms=1, bathrooms=1, distance=0.5, amenities=None, **kwargs):
        return EnrichedListing(
            id=listing_id,
            building_id=kwargs.pop("building_id", 1),
            price=price,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            distance=distance,
            amenities=list(amenities or []),
            name=kwargs.pop("name", f"Building {listing_id}"),
            **kwargs,
        )

    return _make


@pytest.fixture
def downtown():
    return Location(lat=30.2672, lon=-97.7431, name="Downtown Austin")
