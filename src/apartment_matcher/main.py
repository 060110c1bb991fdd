"""Command-line entry point for ranking a listing catalog."""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from .config import (
    load_config,
    preferences_from_config,
    ranking_settings_from_config,
    reference_location_from_config,
    weights_from_config,
)
from .models.listing import EnrichedListing
from .models.preferences import Location, Preferences, amenity_labels, selected_amenities
from .services.catalog import load_catalog
from .services.enrichment import enrich_listings
from .services.ranking import RankedListing, default_categories, rank_by_category
from .services.scoring import match_tier
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


class ApartmentMatcher:
    """
    Orchestrator for the apartment matcher.

    Coordinates: catalog loading -> enrichment -> per-category ranking
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config = load_config(config_path)
        self.weights = weights_from_config(self.config)
        self.settings = ranking_settings_from_config(self.config)
        self.default_location = reference_location_from_config(self.config)
        self.preferences = preferences_from_config(self.config)

    def run(
        self,
        data_path: str,
        preferences: Optional[Preferences] = None,
        saved_ids: Sequence = (),
        recent_ids: Sequence = (),
        only_category: Optional[str] = None,
    ) -> Dict[str, List[RankedListing]]:
        """
        Rank a catalog into the home-screen categories.

        Args:
            data_path: JSON/YAML catalog with buildings and listings
            preferences: Preferences to score against (config defaults if None)
            saved_ids: Saved listing ids
            recent_ids: Recently viewed listing ids, most recent first
            only_category: If set, only rank this category key

        Returns:
            Dict mapping category keys to ranked listings
        """
        preferences = preferences or self.preferences
        reference = preferences.location or self.default_location
        logger.info(f"Ranking {data_path} from {reference.name or (reference.lat, reference.lon)}")

        buildings, listings = load_catalog(data_path)
        enriched = enrich_listings(listings, buildings, reference)

        categories = default_categories(enriched, preferences, saved_ids, recent_ids, self.settings)
        if only_category:
            categories = [c for c in categories if c.key == only_category]
            if not categories:
                raise ValueError(f"Unknown category: {only_category}")

        return rank_by_category(enriched, preferences, categories, self.weights)


def _parse_ids(value: Optional[str]) -> List:
    """Parse a comma-separated id list, keeping numeric ids as ints."""
    if not value:
        return []
    ids = []
    for part in value.split(","):
        part = part.strip()
        if part:
            ids.append(int(part) if part.isdigit() else part)
    return ids


def _with_location(preferences: Preferences, lat: float, lon: float) -> Preferences:
    """Return a copy of the preferences measuring distances from (lat, lon)."""
    return replace(preferences, location=Location(lat=lat, lon=lon, name="Custom location"))


def _format_listing(listing: EnrichedListing, score: int) -> List[str]:
    lines = [
        f"  - {listing.name[:50]} {listing.unit_number}".rstrip(),
        f"    {listing.display_price()} | {listing.display_size()} | "
        f"{listing.distance:g} mi | Score: {score} ({match_tier(score).label})",
    ]
    if listing.amenities:
        lines.append(f"    Amenities: {', '.join(amenity_labels(listing.amenities))}")
    return lines


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Apartment Matcher - rank rental listings against your preferences"
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file (default: $APARTMENT_MATCHER_CONFIG or ./config/config.yaml)",
    )
    parser.add_argument(
        "-d",
        "--data",
        required=True,
        help="Path to a JSON or YAML catalog of buildings and listings",
    )
    parser.add_argument(
        "--category",
        help="Only rank this category (e.g., budget_friendly, close_to_you)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=3,
        help="Number of listings to print per category",
    )
    parser.add_argument("--lat", type=float, help="Reference latitude for distances")
    parser.add_argument("--lon", type=float, help="Reference longitude for distances")
    parser.add_argument("--saved", help="Comma-separated saved listing ids")
    parser.add_argument("--recent", help="Comma-separated recently viewed ids, most recent first")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging("DEBUG" if args.verbose else "INFO")

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        matcher = ApartmentMatcher(args.config)

        preferences = matcher.preferences
        if args.lat is not None:
            preferences = _with_location(preferences, args.lat, args.lon)

        results = matcher.run(
            args.data,
            preferences=preferences,
            saved_ids=_parse_ids(args.saved),
            recent_ids=_parse_ids(args.recent),
            only_category=args.category,
        )

        print("\n=== Apartment Matcher Results ===")
        wanted = amenity_labels(selected_amenities(preferences))
        print(f"Wanted amenities: {', '.join(wanted) or 'none'}")
        for key, ranked in results.items():
            print(f"\n{key}: {len(ranked)} matches")
            for listing, score in ranked[: args.top]:
                print("\n".join(_format_listing(listing, score)))

    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
