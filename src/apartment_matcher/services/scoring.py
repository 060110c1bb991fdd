"""Scoring service for matching listings against user preferences."""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..models.listing import Listing
from ..models.preferences import AmenitySelection, Preferences, amenity_selections
from .geo import round_half_up

logger = logging.getLogger(__name__)

# Used as the overage denominator when max_price is 0
DEFAULT_PRICE_CEILING = 5000


@dataclass
class MatchWeights:
    """
    Configurable weights for the match score.

    Weights need not sum to 100: the final score is normalized by
    their actual sum.
    """

    price: float = 25
    bedrooms: float = 20
    bathrooms: float = 15
    distance: float = 20
    amenities: float = 20

    @property
    def total(self) -> float:
        return self.price + self.bedrooms + self.bathrooms + self.distance + self.amenities

    def validate(self) -> None:
        """Validate that weights are non-negative with a positive sum."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"Match weight '{f.name}' must be non-negative, got {value}")
        if self.total <= 0:
            raise ValueError(f"Match weights must have a positive sum, got {self.total}")

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "MatchWeights":
        """
        Build weights from a partial mapping.

        Absent keys become 0 rather than the defaults, so a mapping is
        always read as the complete weight vector.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown match weight(s): {sorted(unknown)}")
        return cls(**{name: float(data.get(name, 0)) for name in known})


class MatchTier(NamedTuple):
    label: str
    color: str


# (minimum score, tier), highest first
MATCH_TIERS = [
    (90, MatchTier("Excellent Match", "#10b981")),
    (80, MatchTier("Great Match", "#34d399")),
    (70, MatchTier("Good Match", "#fbbf24")),
    (60, MatchTier("Fair Match", "#f59e0b")),
]
LOW_MATCH = MatchTier("Low Match", "#ef4444")


def match_tier(score: int) -> MatchTier:
    """Map a 0-100 score to its display band."""
    for minimum, tier in MATCH_TIERS:
        if score >= minimum:
            return tier
    return LOW_MATCH


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class MatchScorer:
    """
    Score listings against a preference vector.

    Each factor earns a credit in [0, 1] that is multiplied by its weight.
    The weighted sum is normalized to an integer 0-100 where higher is
    better. Exact matches earn full credit and mismatches follow bounded,
    asymmetric penalty curves.
    """

    def __init__(
        self,
        preferences: Preferences,
        selections: Optional[Iterable[AmenitySelection]] = None,
        weights: Optional[MatchWeights] = None,
    ):
        """
        Initialize the scorer.

        Args:
            preferences: The user's desired ranges and flags
            selections: Capabilities to weight in the amenities factor.
                        Derived from preferences if None.
            weights: Custom weights (uses defaults if None)
        """
        self.preferences = preferences
        if selections is None:
            selections = amenity_selections(preferences)
        self.selected_ids: List[str] = [s.id for s in selections if s.selected]
        self.weights = weights or MatchWeights()
        self.weights.validate()

    def score(self, listing: Listing) -> int:
        """Calculate the 0-100 match score for a listing."""
        raw = sum(self.breakdown(listing).values())
        return int(round_half_up(100 * raw / self.weights.total))

    def breakdown(self, listing: Listing) -> Dict[str, float]:
        """Return weighted points per factor; each lies in [0, factor weight]."""
        return {
            "price": self.weights.price * self._score_price(listing.price),
            "bedrooms": self.weights.bedrooms * self._score_bedrooms(listing.bedrooms),
            "bathrooms": self.weights.bathrooms * self._score_bathrooms(listing.bathrooms),
            "distance": self.weights.distance * self._score_distance(listing.distance),
            "amenities": self.weights.amenities * self._score_amenities(listing.amenities),
        }

    def _score_price(self, price: float) -> float:
        """
        Full credit inside [min_price, max_price] or when no range is set.
        Cheaper than the range is mildly penalized, pricier more so.
        """
        min_price = self.preferences.min_price
        max_price = self.preferences.max_price

        if min_price == 0 and max_price == 0:
            return 1.0
        if min_price <= price <= max_price:
            return 1.0
        if price < min_price:
            # min_price <= 0 here only for negative prices
            percent_off = min((min_price - price) / min_price, 1) if min_price > 0 else 1
            return _clamp(1 - percent_off * 0.3)

        ceiling = max_price or DEFAULT_PRICE_CEILING
        percent_over = min((price - max_price) / ceiling, 1)
        return _clamp(1 - percent_over * 0.5)

    def _score_bedrooms(self, bedrooms: float) -> float:
        wanted = self.preferences.beds
        if bedrooms == wanted:
            return 1.0
        if bedrooms > wanted:
            return _clamp(max(0.6, 1 - (bedrooms - wanted) * 0.2))
        return _clamp(max(0.3, 1 - (wanted - bedrooms) * 0.3))

    def _score_bathrooms(self, bathrooms: float) -> float:
        # Same shape as bedrooms, more lenient
        wanted = self.preferences.bathrooms
        if bathrooms == wanted:
            return 1.0
        if bathrooms > wanted:
            return _clamp(max(0.7, 1 - (bathrooms - wanted) * 0.15))
        return _clamp(max(0.4, 1 - (wanted - bathrooms) * 0.25))

    def _score_distance(self, distance: float) -> float:
        """
        Closer is rewarded even within the preferred radius. Going over the
        radius is penalized harder than going over budget.
        """
        preferred = self.preferences.distance

        # A radius of 0 requires distance 0
        if preferred <= 0:
            return 1.0 if distance <= 0 else 0.3

        if distance <= preferred:
            return _clamp(1 - (distance / preferred) * 0.3)

        penalty = min((distance - preferred) / preferred, 1)
        return _clamp(1 - penalty * 0.7)

    def _score_amenities(self, amenities: List[str]) -> float:
        """Coverage ratio of the selected capabilities present on the listing."""
        if not self.selected_ids:
            return 1.0

        matching = [amenity_id for amenity_id in self.selected_ids if amenity_id in amenities]
        return len(matching) / len(self.selected_ids)


def compute_match_score(
    listing: Listing,
    preferences: Preferences,
    selections: Iterable[AmenitySelection],
    weights: Optional[MatchWeights] = None,
) -> int:
    """Score one listing against preferences; see MatchScorer."""
    return MatchScorer(preferences, selections, weights).score(listing)
