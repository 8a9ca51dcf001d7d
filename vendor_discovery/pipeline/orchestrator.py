"""
Pipeline orchestrator - filter, score and sort the vendor directory.
"""
import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from ..config import get_config
from ..constants import ALL, DIRECTORY_TITLE, get_category_label
from ..models.criteria import FilterCriteria, ViewerContext
from ..models.listing import VendorListing
from ..models.scoring import RankedVendor, VendorBrowseResult

from .filter import VendorFilter
from .scoring import RecommendationScorer
from .sorting import VendorSorter


logger = logging.getLogger(__name__)

FILTERED_EMPTY_MESSAGE = (
    "Try adjusting your filters or search query to find the perfect vendors for your wedding."
)
DIRECTORY_EMPTY_MESSAGE = "No approved vendors in the directory yet. Check back soon!"


def _as_listing_list(listings: Optional[Sequence[VendorListing]]) -> list[VendorListing]:
    """Guard the pipeline boundary: None is empty, non-sequences are rejected."""
    if listings is None:
        return []
    if isinstance(listings, (str, bytes, dict)) or not isinstance(listings, Sequence):
        raise TypeError(
            f"listings must be a list of VendorListing, got {type(listings).__name__}"
        )
    return list(listings)


def rank_vendors(
    listings: Optional[Sequence[VendorListing]],
    criteria: FilterCriteria,
    viewer: Optional[ViewerContext] = None,
) -> list[VendorListing]:
    """
    Run the directory pipeline.

    Pipeline steps:
    1. Filter by category, region, price tier and search text
    2. Score each vendor against the viewer (recommended sort)
    3. Sort with featured vendors first

    Args:
        listings: Approved vendors, already in memory
        criteria: Active filters and sort mode
        viewer: Budget and region of the person browsing

    Returns:
        New ordered list; input listings are not modified
    """
    listings = _as_listing_list(listings)
    viewer = viewer or ViewerContext()

    logger.info(f"Ranking {len(listings)} vendors (sort={criteria.sort_mode})")

    # Step 1: Filter
    filtered = VendorFilter().filter(listings, criteria)

    # Steps 2-3: Score and sort
    ranked = VendorSorter().sort(filtered, criteria.sort_mode, viewer)

    logger.info(f"Ranked {len(ranked)} vendors")
    return ranked


def recommend_vendors(
    listings: Optional[Sequence[VendorListing]],
    viewer: Optional[ViewerContext] = None,
    category: Optional[str] = None,
    limit: Optional[int] = None,
    exclude_ids: Iterable[str] = (),
) -> list[RankedVendor]:
    """
    Top vendors for a couple by recommendation score.

    Args:
        listings: Approved vendors
        viewer: Budget and region of the couple
        category: Restrict to one category ("all" or None for every category)
        limit: Maximum results (defaults to config)
        exclude_ids: Vendor ids to leave out, e.g. already shortlisted

    Returns:
        RankedVendor objects, highest score first
    """
    listings = _as_listing_list(listings)
    if limit is None:
        limit = get_config().ranking.recommendation_limit
    excluded = set(exclude_ids)
    scorer = RecommendationScorer()

    if category and category != ALL:
        listings = [l for l in listings if l.category == category]

    scored = [(listing, scorer.explain(listing, viewer)) for listing in listings]
    scored.sort(key=lambda x: x[1].total, reverse=True)

    ranked = []
    for listing, scores in scored:
        if listing.id in excluded:
            continue
        if len(ranked) >= limit:
            break
        ranked.append(RankedVendor(rank=len(ranked) + 1, listing=listing, scores=scores))

    logger.info(f"Recommended {len(ranked)} of {len(listings)} vendors")
    return ranked


def recommend_by_category(
    listings: Optional[Sequence[VendorListing]],
    categories: Optional[Sequence[str]] = None,
    viewer: Optional[ViewerContext] = None,
    limit: Optional[int] = None,
) -> dict[str, list[RankedVendor]]:
    """
    Top vendors per category for the couple dashboard.
    Every requested category gets a key, even with no vendors.
    """
    config = get_config()
    listings = _as_listing_list(listings)
    if categories is None:
        categories = config.ranking.key_categories
    if limit is None:
        limit = config.ranking.category_limit

    return {
        category: recommend_vendors(listings, viewer, category=category, limit=limit)
        for category in categories
    }


def browse_vendors(
    listings: Optional[Sequence[VendorListing]],
    criteria: FilterCriteria,
    viewer: Optional[ViewerContext] = None,
) -> VendorBrowseResult:
    """Build the vendor directory page for the given filters."""
    vendors = rank_vendors(listings, criteria, viewer)

    if criteria.category != ALL:
        title = get_category_label(criteria.category)
        if title == get_category_label(None):
            title = DIRECTORY_TITLE
    else:
        title = DIRECTORY_TITLE

    count = len(vendors)
    subtitle = f"{count} vendor{'s' if count != 1 else ''} in Lebanon"

    empty_message = None
    if not vendors:
        empty_message = (
            FILTERED_EMPTY_MESSAGE if criteria.has_active_filters else DIRECTORY_EMPTY_MESSAGE
        )

    return VendorBrowseResult(
        title=title,
        subtitle=subtitle,
        criteria=criteria,
        vendors=vendors,
        has_active_filters=criteria.has_active_filters,
        empty_message=empty_message,
    )
