"""
Vendor sorting - featured vendors first, then the selected sort mode.
"""
import logging
import math
import unicodedata
from typing import Any, Callable, Optional

from ..models.criteria import ViewerContext
from ..models.listing import VendorListing
from .scoring import RecommendationScorer


logger = logging.getLogger(__name__)


def collation_key(name: Optional[str]) -> tuple[str, str, str]:
    """
    Sort key approximating a locale-aware string compare.
    Letters compare first without accents or case, then accents,
    then case with lowercase ahead of uppercase.
    """
    name = name or ""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name.swapcase())


class VendorSorter:
    """
    Orders listings for the directory.
    Uses Python's stable sort, so ties keep their input order.
    """

    def __init__(self, scorer: Optional[RecommendationScorer] = None):
        self.scorer = scorer or RecommendationScorer()

    def sort(
        self,
        listings: list[VendorListing],
        sort_mode: str,
        viewer: Optional[ViewerContext] = None,
    ) -> list[VendorListing]:
        """
        Sort listings by mode, with featured vendors always on top.

        Args:
            listings: Filtered vendors
            sort_mode: One of the directory sort options
            viewer: Context for the recommended sort

        Returns:
            New sorted list; the input is left untouched
        """
        viewer = viewer or ViewerContext()
        mode_key = self._mode_key(sort_mode, viewer)
        if mode_key is None:
            logger.warning(f"Unknown sort mode '{sort_mode}', keeping input order")
            mode_key = self._no_op

        return sorted(
            listings,
            key=lambda listing: (not listing.is_promoted, mode_key(listing)),
        )

    def _mode_key(
        self,
        sort_mode: str,
        viewer: ViewerContext,
    ) -> Optional[Callable[[VendorListing], Any]]:
        if sort_mode == "recommended":
            return lambda listing: -self.scorer.score(listing, viewer)
        if sort_mode == "featured":
            return lambda listing: (not listing.is_featured, -listing.shortlist_count)
        if sort_mode == "popularity":
            return lambda listing: -listing.shortlist_count
        if sort_mode == "newest":
            # No creation date reaches the ranking input yet
            return self._no_op
        if sort_mode == "price_low":
            return lambda listing: (
                math.inf if listing.starting_price_usd is None else listing.starting_price_usd
            )
        if sort_mode == "price_high":
            return lambda listing: -(listing.starting_price_usd or 0)
        if sort_mode == "name":
            return lambda listing: collation_key(listing.business_name)
        return None

    @staticmethod
    def _no_op(listing: VendorListing) -> int:
        return 0
