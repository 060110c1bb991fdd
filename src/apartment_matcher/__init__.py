"""
Apartment Matcher - preference matching and ranking for rental listings.

Scores listings against a user's preferences, joins units with their
buildings, and builds the ranked category lists behind the home, search
and swipe views.
"""

__version__ = "0.1.0"

from .models.preferences import selected_amenities
from .services.enrichment import enrich_listing
from .services.geo import compute_distance
from .services.ranking import rank_by_category
from .services.scoring import compute_match_score

__all__ = [
    "compute_distance",
    "compute_match_score",
    "enrich_listing",
    "rank_by_category",
    "selected_amenities",
]
