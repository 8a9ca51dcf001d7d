"""
Vendor filter - reduce the directory to vendors matching the active filters.
"""
import logging
from typing import Optional

from ..constants import ALL, FILTER_LUXURY_MIN, FILTER_MID_MIN
from ..models.criteria import FilterCriteria
from ..models.listing import VendorListing


logger = logging.getLogger(__name__)


def price_tier_of(price: Optional[float]) -> str:
    """
    Directory price bucket for a starting price.
    Vendors without a price are listed under budget.
    """
    if price is None or price < FILTER_MID_MIN:
        return "budget"
    if price < FILTER_LUXURY_MIN:
        return "mid"
    return "luxury"


class VendorFilter:
    """
    Filters listings by category, region, price tier and a free-text search.
    All active filters must match.
    """

    def filter(
        self,
        listings: list[VendorListing],
        criteria: FilterCriteria,
    ) -> list[VendorListing]:
        """
        Filter listings, preserving input order.

        Args:
            listings: Approved vendors to filter
            criteria: Active directory filters

        Returns:
            Listings matching every active filter
        """
        if not listings:
            return []

        filtered = [listing for listing in listings if self.matches(listing, criteria)]
        logger.info(f"Filtered {len(listings)} vendors to {len(filtered)}")
        return filtered

    def matches(self, listing: VendorListing, criteria: FilterCriteria) -> bool:
        """Check a single listing against every active filter."""
        if criteria.category != ALL and listing.category != criteria.category:
            return False

        if criteria.region != ALL and listing.region != criteria.region:
            return False

        if criteria.price_tier != ALL:
            if price_tier_of(listing.starting_price_usd) != criteria.price_tier:
                return False

        return self._matches_search(listing, criteria.search_query)

    def _matches_search(self, listing: VendorListing, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        if not query or not query.strip():
            return True

        needle = query.lower()
        if needle in (listing.business_name or "").lower():
            return True
        if listing.description and needle in listing.description.lower():
            return True
        return False
