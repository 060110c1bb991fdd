"""User preference models and amenity selection helpers."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

# Capability ids in the order they are presented to the user
AMENITY_IDS = ["wifi", "gym", "pool", "parking", "furnished", "petFriendly"]

# Capability id -> Preferences attribute
_AMENITY_FIELDS = {
    "wifi": "wifi",
    "gym": "gym",
    "pool": "pool",
    "parking": "parking",
    "furnished": "furnished",
    "petFriendly": "pet_friendly",
}

AMENITY_LABELS = {
    "wifi": "WiFi",
    "gym": "Gym",
    "pool": "Pool",
    "parking": "Parking",
    "furnished": "Furnished",
    "petFriendly": "Pet Friendly",
}


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}


def _as_bool(value: Any) -> bool:
    """Read a flag, accepting the usual string spellings of true and false."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Not a boolean flag: {value!r}")
    return bool(value)


@dataclass
class Location:
    """A named reference point in decimal degrees."""

    lat: float
    lon: float
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Location"]:
        """Build from a raw record; returns None when coordinates are missing."""
        if not data:
            return None
        lat = data.get("lat", data.get("latitude"))
        lon = data.get("lon", data.get("longitude"))
        if lat is None or lon is None:
            return None
        return cls(lat=float(lat), lon=float(lon), name=data.get("name") or "")


@dataclass
class AmenitySelection:
    """Whether the user asked for a capability to be weighted in scoring."""

    id: str
    selected: bool = False


@dataclass
class Preferences:
    """
    Desired ranges and flags used to score listings.

    ``min_price <= max_price`` is not enforced; the scorer stays bounded
    for inverted ranges.
    """

    min_price: float = 0
    max_price: float = 5000
    beds: float = 1
    bathrooms: float = 1
    distance: float = 0.5  # Max radius in miles

    wifi: bool = False
    gym: bool = False
    pool: bool = False
    parking: bool = False
    furnished: bool = False
    pet_friendly: bool = False

    location: Optional[Location] = None

    def has_amenity(self, amenity_id: str) -> bool:
        """Check if the capability is switched on."""
        attr = _AMENITY_FIELDS.get(amenity_id)
        return bool(attr and getattr(self, attr))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Preferences":
        """
        Build preferences from a partial record.

        Absent numeric fields fall back to the class defaults and absent
        flags to False. Flags may be spelled as strings ("false", "yes", ...).
        Both ``pet_friendly`` and ``petFriendly`` are accepted.
        """
        defaults = cls()

        def number(key: str, default: float) -> float:
            value = data.get(key)
            if value is None or value == "":
                return default
            return float(value)

        return cls(
            min_price=number("min_price", defaults.min_price),
            max_price=number("max_price", defaults.max_price),
            beds=number("beds", defaults.beds),
            bathrooms=number("bathrooms", defaults.bathrooms),
            distance=number("distance", defaults.distance),
            wifi=_as_bool(data.get("wifi", False)),
            gym=_as_bool(data.get("gym", False)),
            pool=_as_bool(data.get("pool", False)),
            parking=_as_bool(data.get("parking", False)),
            furnished=_as_bool(data.get("furnished", False)),
            pet_friendly=_as_bool(data.get("pet_friendly", data.get("petFriendly", False))),
            location=Location.from_dict(data.get("location")),
        )


def selected_amenities(preferences: Preferences) -> List[str]:
    """Return the capability ids the user has switched on, in display order."""
    return [amenity_id for amenity_id in AMENITY_IDS if preferences.has_amenity(amenity_id)]


def amenity_selections(preferences: Preferences) -> List[AmenitySelection]:
    """Return one selection entry per known capability."""
    return [
        AmenitySelection(id=amenity_id, selected=preferences.has_amenity(amenity_id))
        for amenity_id in AMENITY_IDS
    ]


def amenity_labels(amenity_ids: Iterable[str]) -> List[str]:
    """Return display labels for capability ids; unknown ids are shown as-is."""
    return [AMENITY_LABELS.get(amenity_id, amenity_id) for amenity_id in amenity_ids]
