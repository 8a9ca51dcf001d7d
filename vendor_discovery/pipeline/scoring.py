"""
Recommendation scoring - deterministic point budget with transparent breakdown.
"""
import logging
from typing import Optional

from ..constants import (
    VENDOR_LUXURY_MIN,
    VENDOR_MID_MIN,
    VIEWER_LUXURY_MIN,
    VIEWER_MID_MIN,
    adjacent_regions,
)
from ..models.criteria import ViewerContext
from ..models.listing import VendorListing
from ..models.scoring import ScoreBreakdown


logger = logging.getLogger(__name__)

FEATURED_POINTS = 100
PRO_POINTS = 40
REGION_EXACT_POINTS = 35
REGION_ADJACENT_POINTS = 20
BUDGET_MATCH_POINTS = 25
POPULARITY_PER_SHORTLIST = 2
POPULARITY_CAP = 20
PORTFOLIO_POINTS = 10
DESCRIPTION_POINTS = 5
DESCRIPTION_MIN_LENGTH = 50


def viewer_budget_tier(budget: Optional[float]) -> Optional[str]:
    """Tier of a couple's total wedding budget."""
    if budget is None:
        return None
    if budget < VIEWER_MID_MIN:
        return "budget"
    if budget < VIEWER_LUXURY_MIN:
        return "mid"
    return "luxury"


def vendor_budget_tier(price: Optional[float]) -> Optional[str]:
    """
    Tier of a vendor's starting price for budget matching.
    Uses different cutoffs from the directory price filter.
    """
    if price is None:
        return None
    if price < VENDOR_MID_MIN:
        return "budget"
    if price < VENDOR_LUXURY_MIN:
        return "mid"
    return "luxury"


class RecommendationScorer:
    """
    Additive recommendation score used by the "recommended" sort.
    Missing data contributes zero points; scoring never raises.
    """

    def score(self, listing: VendorListing, viewer: Optional[ViewerContext] = None) -> int:
        """Total recommendation points for a listing."""
        return self.explain(listing, viewer).total

    def explain(
        self,
        listing: VendorListing,
        viewer: Optional[ViewerContext] = None,
    ) -> ScoreBreakdown:
        """
        Calculate the full score breakdown for a listing.

        Args:
            listing: Vendor to score
            viewer: Budget and region of the person browsing

        Returns:
            ScoreBreakdown with one entry per signal
        """
        viewer = viewer or ViewerContext()
        reasons = []

        featured = FEATURED_POINTS if listing.is_promoted else 0
        if featured:
            reasons.append("Featured vendor")

        # Independent of the featured check: featured + pro earns both
        pro = PRO_POINTS if listing.plan == "pro" else 0
        if pro:
            reasons.append("Pro vendor")

        region = self._region_points(listing, viewer)
        if region == REGION_EXACT_POINTS:
            reasons.append("In your region")
        elif region:
            reasons.append("Near your region")

        viewer_tier = viewer_budget_tier(viewer.estimated_budget_usd)
        vendor_tier = vendor_budget_tier(listing.starting_price_usd)
        budget = 0
        if viewer_tier and vendor_tier and viewer_tier == vendor_tier:
            budget = BUDGET_MATCH_POINTS
            reasons.append(f"Fits a {viewer_tier} budget")

        popularity = min(listing.shortlist_count * POPULARITY_PER_SHORTLIST, POPULARITY_CAP)
        if popularity:
            reasons.append(f"Shortlisted {listing.shortlist_count} times")

        portfolio = PORTFOLIO_POINTS if listing.portfolio_images else 0
        description = 0
        if listing.description and len(listing.description) > DESCRIPTION_MIN_LENGTH:
            description = DESCRIPTION_POINTS

        total = featured + pro + region + budget + popularity + portfolio + description
        logger.debug(f"Scored vendor {listing.id}: {total}")

        return ScoreBreakdown(
            total=total,
            featured=featured,
            pro=pro,
            region=region,
            budget=budget,
            popularity=popularity,
            portfolio=portfolio,
            description=description,
            viewer_tier=viewer_tier,
            vendor_tier=vendor_tier,
            reasons=reasons,
        )

    def _region_points(self, listing: VendorListing, viewer: ViewerContext) -> int:
        """Exact match beats adjacency; no region filter means no points."""
        wanted = viewer.region_filter
        if not wanted or not listing.region:
            return 0
        if listing.region == wanted:
            return REGION_EXACT_POINTS
        if listing.region in adjacent_regions(wanted):
            return REGION_ADJACENT_POINTS
        return 0
