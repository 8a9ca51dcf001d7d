"""
Vendor discovery and ranking for a Lebanese wedding marketplace.
"""

from .models import FilterCriteria, VendorListing, ViewerContext
from .pipeline import browse_vendors, rank_vendors, recommend_by_category, recommend_vendors

__version__ = "1.0.0"

__all__ = [
    "FilterCriteria",
    "VendorListing",
    "ViewerContext",
    "browse_vendors",
    "rank_vendors",
    "recommend_by_category",
    "recommend_vendors",
]
