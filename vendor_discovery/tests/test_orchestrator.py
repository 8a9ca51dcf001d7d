"""
Tests for the directory pipeline: rank, recommend and browse.
"""
import pytest

from vendor_discovery.models.criteria import FilterCriteria, ViewerContext
from vendor_discovery.models.listing import VendorListing
from vendor_discovery.pipeline.orchestrator import (
    DIRECTORY_EMPTY_MESSAGE,
    FILTERED_EMPTY_MESSAGE,
    browse_vendors,
    rank_vendors,
    recommend_by_category,
    recommend_vendors,
)


def make_listing(listing_id: str, **overrides) -> VendorListing:
    data = {
        "id": listing_id,
        "business_name": f"Vendor {listing_id}",
        "category": "venue",
        "region": "beirut",
    }
    data.update(overrides)
    return VendorListing(**data)


@pytest.fixture
def directory() -> list[VendorListing]:
    """A small directory across categories and regions."""
    return [
        make_listing("venue-1", business_name="Zahle Valley Hall", region="bekaa",
                     starting_price_usd=4500, shortlist_count=3),
        make_listing("venue-2", business_name="Beirut Seaview Ballroom",
                     starting_price_usd=8000, is_featured=True),
        make_listing("venue-3", business_name="Byblos Garden Venue", region="mount_lebanon",
                     starting_price_usd=6000, shortlist_count=12,
                     portfolio_images=["https://img/garden.jpg"]),
        make_listing("photo-1", business_name="Cedars Photography Studio", category="photographer",
                     starting_price_usd=2000, subscription_plan="pro"),
        make_listing("photo-2", business_name="Tripoli Lens Studio", category="photographer",
                     region="north", starting_price_usd=1200, shortlist_count=1),
        make_listing("dj-1", business_name="Batroun Beach DJ", category="dj", region="north",
                     starting_price_usd=None, subscription_plan="featured"),
    ]


class TestRankVendors:
    """Tests for rank_vendors."""

    def test_filter_then_sort(self, directory):
        criteria = FilterCriteria(category="venue", sort_mode="price_low")

        result = rank_vendors(directory, criteria)

        # Featured ballroom first, then by price
        assert [l.id for l in result] == ["venue-2", "venue-1", "venue-3"]

    def test_featured_first_under_name_sort(self, directory):
        result = rank_vendors(directory, FilterCriteria(sort_mode="name"))

        assert [l.id for l in result[:2]] == ["dj-1", "venue-2"]
        rest = [l.business_name for l in result[2:]]
        assert rest == sorted(rest)

    def test_recommended_uses_viewer(self, directory):
        criteria = FilterCriteria(category="photographer")
        viewer = ViewerContext(region_filter="north", estimated_budget_usd=20000)

        result = rank_vendors(directory, criteria, viewer)

        # photo-1: pro 40 + budget 25 = 65; photo-2: region 35 + budget 25 + popularity 2 = 62
        assert [l.id for l in result] == ["photo-1", "photo-2"]

    def test_input_not_mutated(self, directory):
        snapshot = [l.model_copy() for l in directory]

        rank_vendors(directory, FilterCriteria(sort_mode="popularity"))

        assert directory == snapshot

    def test_none_listings(self):
        assert rank_vendors(None, FilterCriteria()) == []

    def test_tuple_listings(self, directory):
        result = rank_vendors(tuple(directory), FilterCriteria(category="dj"))

        assert [l.id for l in result] == ["dj-1"]

    @pytest.mark.parametrize("bad", ["venue", {"id": "x"}, 42])
    def test_non_sequence_rejected(self, bad):
        with pytest.raises(TypeError):
            rank_vendors(bad, FilterCriteria())

    def test_unknown_sort_keeps_input_order(self, directory):
        result = rank_vendors(directory, FilterCriteria(sort_mode="random"))

        assert [l.id for l in result] == ["venue-2", "dj-1", "venue-1", "venue-3", "photo-1", "photo-2"]


class TestRecommendVendors:
    """Tests for recommended-for-you lists."""

    def test_ordered_by_score(self, directory):
        ranked = recommend_vendors(directory, ViewerContext(), limit=3)

        assert [r.listing.id for r in ranked] == ["venue-2", "dj-1", "photo-1"]
        assert [r.rank for r in ranked] == [1, 2, 3]
        assert ranked[0].score == 100

    def test_scores_descending(self, directory):
        ranked = recommend_vendors(directory, ViewerContext(region_filter="north"), limit=10)

        scores = [r.score for r in ranked]
        assert scores == sorted(scores, reverse=True)
        assert len(ranked) == len(directory)

    def test_category_and_exclusions(self, directory):
        ranked = recommend_vendors(
            directory,
            ViewerContext(),
            category="venue",
            exclude_ids=["venue-2"],
        )

        assert [r.listing.id for r in ranked] == ["venue-3", "venue-1"]
        assert ranked[0].rank == 1

    def test_limit_defaults_to_config(self, directory, monkeypatch):
        from vendor_discovery import config

        monkeypatch.setenv("VENDOR_RECOMMENDATION_LIMIT", "2")
        config.reset_config()
        try:
            assert len(recommend_vendors(directory)) == 2
        finally:
            config.reset_config()

    def test_by_category(self, directory):
        grouped = recommend_by_category(
            directory, ["venue", "photographer", "flowers"], ViewerContext(), limit=1
        )

        assert list(grouped) == ["venue", "photographer", "flowers"]
        assert [r.listing.id for r in grouped["venue"]] == ["venue-2"]
        assert [r.listing.id for r in grouped["photographer"]] == ["photo-1"]
        assert grouped["flowers"] == []

    def test_by_category_defaults(self, directory):
        grouped = recommend_by_category(directory)

        assert list(grouped) == ["venue", "photographer", "dj", "flowers"]
        assert len(grouped["venue"]) == 3


class TestBrowseVendors:
    """Tests for the directory page model."""

    def test_default_page(self, directory):
        result = browse_vendors(directory, FilterCriteria())

        assert result.title == "Find Wedding Vendors"
        assert result.subtitle == "6 vendors in Lebanon"
        assert result.has_active_filters is False
        assert result.empty_message is None
        assert result.count == 6

    def test_category_title_and_singular(self, directory):
        result = browse_vendors(directory, FilterCriteria(category="dj"))

        assert result.title == "DJs"
        assert result.subtitle == "1 vendor in Lebanon"

    def test_unknown_category_title(self, directory):
        result = browse_vendors(directory, FilterCriteria(category="castle"))

        assert result.title == "Find Wedding Vendors"
        assert result.is_empty

    def test_empty_with_filters(self, directory):
        result = browse_vendors(directory, FilterCriteria(search_query="nothing matches"))

        assert result.subtitle == "0 vendors in Lebanon"
        assert result.empty_message == FILTERED_EMPTY_MESSAGE

    def test_empty_directory(self):
        result = browse_vendors([], FilterCriteria())

        assert result.empty_message == DIRECTORY_EMPTY_MESSAGE
