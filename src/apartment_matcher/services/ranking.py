"""Category ranking pipeline for the home, search and swipe views."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence

from ..models.listing import EnrichedListing
from ..models.preferences import Preferences, amenity_selections, selected_amenities
from .scoring import MatchScorer, MatchWeights

logger = logging.getLogger(__name__)


@dataclass
class RankingSettings:
    """Fixed thresholds for the standard home-screen categories."""

    close_to_you_radius: float = 2.0  # Miles
    fallback_budget: float = 2000  # Used when max_price is 0
    recently_viewed_limit: int = 5
    featured_limit: int = 6


@dataclass
class Category:
    """A named filter over the listing collection."""

    key: str
    title: str
    predicate: Callable[[EnrichedListing], bool]


class RankedListing(NamedTuple):
    listing: EnrichedListing
    score: int


def _sorted_by_score(listings: Iterable[EnrichedListing], scorer: MatchScorer) -> List[RankedListing]:
    ranked = [RankedListing(listing, scorer.score(listing)) for listing in listings]
    # sort() is stable, so ties keep their input order
    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked


def rank_by_category(
    listings: Sequence[EnrichedListing],
    preferences: Preferences,
    categories: Iterable[Category],
    weights: Optional[MatchWeights] = None,
) -> Dict[str, List[RankedListing]]:
    """
    Build one score-sorted list per category.

    Every category is an independent filter -> score -> sort pass over the
    same source collection. Ties keep the input order.

    Args:
        listings: Enriched listings
        preferences: The user's preferences
        categories: Category definitions, in output order
        weights: Custom match weights (uses defaults if None)

    Returns:
        Mapping of category key to ranked listings, in category order
    """
    scorer = MatchScorer(preferences, amenity_selections(preferences), weights)

    results: Dict[str, List[RankedListing]] = {}
    for category in categories:
        members = [listing for listing in listings if category.predicate(listing)]
        results[category.key] = _sorted_by_score(members, scorer)
        logger.debug(f"Category {category.key}: {len(members)} of {len(listings)} listings")

    logger.info(f"Ranked {len(listings)} listings into {len(results)} categories")
    return results


def rank_listings(
    listings: Iterable[EnrichedListing],
    preferences: Preferences,
    weights: Optional[MatchWeights] = None,
) -> List[RankedListing]:
    """Score every listing and sort by score descending (search view)."""
    scorer = MatchScorer(preferences, amenity_selections(preferences), weights)
    return _sorted_by_score(listings, scorer)


def swipe_deck(
    listings: Iterable[EnrichedListing],
    preferences: Preferences,
    weights: Optional[MatchWeights] = None,
) -> List[RankedListing]:
    """Pair each listing with its score, keeping collection order (swipe view)."""
    scorer = MatchScorer(preferences, amenity_selections(preferences), weights)
    return [RankedListing(listing, scorer.score(listing)) for listing in listings]


# Standard categories


def recently_viewed_category(recent_ids: Sequence, limit: int = 5) -> Category:
    """Listings among the first `limit` ids of the recency list."""
    wanted = set(list(recent_ids)[:limit])
    return Category(
        key="recently_viewed",
        title="Recently Viewed",
        predicate=lambda listing: listing.id in wanted,
    )


def saved_category(saved_ids: Iterable) -> Category:
    saved = set(saved_ids)
    return Category(
        key="saved",
        title="Saved Listings",
        predicate=lambda listing: listing.id in saved,
    )


def budget_friendly_category(preferences: Preferences, fallback_budget: float = 2000) -> Category:
    budget = preferences.max_price or fallback_budget
    return Category(
        key="budget_friendly",
        title="Meets Your Budget",
        predicate=lambda listing: listing.price <= budget,
    )


def close_to_you_category(radius: float = 2.0) -> Category:
    return Category(
        key="close_to_you",
        title="Close to You",
        predicate=lambda listing: listing.distance <= radius,
    )


def has_all_amenities_category(preferences: Preferences) -> Category:
    """Listings with every selected amenity; empty when none is selected."""
    wanted = selected_amenities(preferences)
    return Category(
        key="has_all_amenities",
        title="Has All Your Amenities",
        predicate=lambda listing: bool(wanted) and listing.has_amenities(wanted),
    )


def featured_category(listings: Sequence[EnrichedListing], limit: int = 6) -> Category:
    """The first `limit` listings of the collection."""
    leading = {listing.id for listing in list(listings)[:limit]}
    return Category(
        key="featured",
        title="Loved by Longhorns",
        predicate=lambda listing: listing.id in leading,
    )


def default_categories(
    listings: Sequence[EnrichedListing],
    preferences: Preferences,
    saved_ids: Iterable = (),
    recent_ids: Sequence = (),
    settings: Optional[RankingSettings] = None,
) -> List[Category]:
    """Assemble the home-screen categories in display order."""
    settings = settings or RankingSettings()
    return [
        recently_viewed_category(recent_ids, settings.recently_viewed_limit),
        saved_category(saved_ids),
        budget_friendly_category(preferences, settings.fallback_budget),
        close_to_you_category(settings.close_to_you_radius),
        has_all_amenities_category(preferences),
        featured_category(listings, settings.featured_limit),
    ]
