"""Tests for the category ranking pipeline."""

import pytest

from apartment_matcher.models.preferences import Preferences, amenity_selections
from apartment_matcher.services.ranking import (
    Category,
    RankingSettings,
    budget_friendly_category,
    close_to_you_category,
    default_categories,
    featured_category,
    has_all_amenities_category,
    rank_by_category,
    rank_listings,
    recently_viewed_category,
    saved_category,
    swipe_deck,
)
from apartment_matcher.services.scoring import MatchWeights, compute_match_score


@pytest.fixture
def listings(make_listing):
    """A small mixed collection of enriched listings."""
    return [
        make_listing(listing_id=1, price=1200, distance=0.3, amenities=["wifi", "parking"]),
        make_listing(listing_id=2, price=2600, bedrooms=2, distance=1.8, amenities=["wifi"]),
        make_listing(listing_id=3, price=1900, distance=3.5, amenities=["wifi", "parking", "pool"]),
        make_listing(listing_id=4, price=1500, bathrooms=2, distance=0.9, amenities=[]),
        make_listing(listing_id=5, price=2000, distance=2.0, amenities=["parking", "wifi"]),
    ]


def _ids(ranked):
    return [r.listing.id for r in ranked]


class TestRankByCategory:
    """Tests for rank_by_category."""

    def test_each_category_sorted_by_score(self, listings, budget_preferences):
        categories = default_categories(listings, budget_preferences, saved_ids=[2, 4], recent_ids=[5, 1])
        results = rank_by_category(listings, budget_preferences, categories)

        for ranked in results.values():
            scores = [r.score for r in ranked]
            assert scores == sorted(scores, reverse=True)

    def test_only_predicate_members_appear(self, listings, budget_preferences):
        categories = default_categories(listings, budget_preferences, saved_ids=[2, 4], recent_ids=[5, 1])
        results = rank_by_category(listings, budget_preferences, categories)

        for category in categories:
            members = {l.id for l in listings if category.predicate(l)}
            assert set(_ids(results[category.key])) == members

    def test_scores_match_scorer(self, listings, budget_preferences):
        results = rank_by_category(listings, budget_preferences, [close_to_you_category(2.0)])
        selections = amenity_selections(budget_preferences)
        for listing, score in results["close_to_you"]:
            assert score == compute_match_score(listing, budget_preferences, selections)

    def test_output_keeps_category_order(self, listings, budget_preferences):
        categories = default_categories(listings, budget_preferences)
        results = rank_by_category(listings, budget_preferences, categories)
        assert list(results) == [
            "recently_viewed",
            "saved",
            "budget_friendly",
            "close_to_you",
            "has_all_amenities",
            "featured",
        ]

    def test_ties_keep_input_order(self, make_listing):
        prefs = Preferences(min_price=0, max_price=0)
        twins = [make_listing(listing_id=i) for i in (7, 3, 9)]
        everyone = Category("all", "All", lambda listing: True)

        results = rank_by_category(twins, prefs, [everyone])
        assert _ids(results["all"]) == [7, 3, 9]

    def test_custom_weights_change_scores(self, listings, budget_preferences):
        everyone = Category("all", "All", lambda listing: True)
        default = rank_by_category(listings, budget_preferences, [everyone])["all"]
        price_only = rank_by_category(
            listings, budget_preferences, [everyone], MatchWeights.from_dict({"price": 1})
        )["all"]

        # Listing 2 is over budget: 1 - 0.5 * (600 / 2000)
        assert dict((r.listing.id, r.score) for r in price_only)[2] == 85
        assert default != price_only

    def test_empty_collection(self, budget_preferences):
        results = rank_by_category([], budget_preferences, default_categories([], budget_preferences))
        assert all(ranked == [] for ranked in results.values())


class TestStandardCategories:
    """Tests for the home-screen category predicates."""

    def test_budget_friendly(self, listings, budget_preferences):
        results = rank_by_category(listings, budget_preferences, [budget_friendly_category(budget_preferences)])
        assert set(_ids(results["budget_friendly"])) == {1, 3, 4, 5}

    def test_budget_friendly_falls_back_when_max_is_zero(self, listings):
        prefs = Preferences(min_price=0, max_price=0)
        category = budget_friendly_category(prefs, fallback_budget=1600)
        assert {l.id for l in listings if category.predicate(l)} == {1, 4}

    def test_close_to_you_uses_fixed_radius(self, listings, budget_preferences):
        results = rank_by_category(listings, budget_preferences, [close_to_you_category(2.0)])
        assert set(_ids(results["close_to_you"])) == {1, 2, 4, 5}

    def test_has_all_amenities(self, listings, budget_preferences):
        results = rank_by_category(listings, budget_preferences, [has_all_amenities_category(budget_preferences)])
        assert set(_ids(results["has_all_amenities"])) == {1, 3, 5}

    def test_has_all_amenities_empty_without_selection(self, listings):
        prefs = Preferences()
        results = rank_by_category(listings, prefs, [has_all_amenities_category(prefs)])
        assert results["has_all_amenities"] == []

    def test_saved(self, listings, budget_preferences):
        results = rank_by_category(listings, budget_preferences, [saved_category({2, 4, 42})])
        assert set(_ids(results["saved"])) == {2, 4}

    def test_recently_viewed_truncated(self, listings, budget_preferences):
        category = recently_viewed_category([5, 1, 3, 2], limit=2)
        results = rank_by_category(listings, budget_preferences, [category])
        assert set(_ids(results["recently_viewed"])) == {5, 1}

    def test_featured_takes_leading_listings(self, listings, budget_preferences):
        category = featured_category(listings, limit=3)
        results = rank_by_category(listings, budget_preferences, [category])
        assert set(_ids(results["featured"])) == {1, 2, 3}

    def test_default_categories_use_settings(self, listings, budget_preferences):
        settings = RankingSettings(close_to_you_radius=1.0, recently_viewed_limit=1, featured_limit=2)
        categories = default_categories(listings, budget_preferences, recent_ids=[4, 2], settings=settings)
        results = rank_by_category(listings, budget_preferences, categories)

        assert set(_ids(results["close_to_you"])) == {1, 4}
        assert _ids(results["recently_viewed"]) == [4]
        assert set(_ids(results["featured"])) == {1, 2}


class TestViews:
    """Tests for the search and swipe views."""

    def test_rank_listings_sorts_everything(self, listings, budget_preferences):
        ranked = rank_listings(listings, budget_preferences)
        assert len(ranked) == len(listings)
        scores = [r.score for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_swipe_deck_keeps_order(self, listings, budget_preferences):
        deck = swipe_deck(listings, budget_preferences)
        assert _ids(deck) == [1, 2, 3, 4, 5]
        assert all(0 <= card.score <= 100 for card in deck)
