from .catalog import load_catalog
from .enrichment import enrich_listing, enrich_listings, reference_location_for
from .geo import CAMPUS_LOCATION, compute_distance, filter_by_distance
from .history import add_to_recently_viewed, toggle_saved
from .ranking import (
    Category,
    RankedListing,
    RankingSettings,
    default_categories,
    rank_by_category,
    rank_listings,
    swipe_deck,
)
from .scoring import MatchScorer, MatchTier, MatchWeights, compute_match_score, match_tier

__all__ = [
    "CAMPUS_LOCATION",
    "Category",
    "MatchScorer",
    "MatchTier",
    "MatchWeights",
    "RankedListing",
    "RankingSettings",
    "add_to_recently_viewed",
    "compute_distance",
    "compute_match_score",
    "default_categories",
    "enrich_listing",
    "enrich_listings",
    "filter_by_distance",
    "load_catalog",
    "match_tier",
    "rank_by_category",
    "rank_listings",
    "reference_location_for",
    "swipe_deck",
    "toggle_saved",
]
