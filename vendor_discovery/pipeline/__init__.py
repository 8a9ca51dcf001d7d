"""Pipeline modules for vendor discovery."""

from .filter import VendorFilter, price_tier_of
from .scoring import RecommendationScorer
from .sorting import VendorSorter
from .orchestrator import (
    browse_vendors,
    rank_vendors,
    recommend_by_category,
    recommend_vendors,
)

__all__ = [
    "VendorFilter",
    "price_tier_of",
    "RecommendationScorer",
    "VendorSorter",
    "browse_vendors",
    "rank_vendors",
    "recommend_by_category",
    "recommend_vendors",
]
