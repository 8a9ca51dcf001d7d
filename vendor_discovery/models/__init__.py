"""
Pydantic models for vendor discovery.
All data contracts are defined here for strict validation.
"""

from .listing import VendorListing
from .criteria import FilterCriteria, ViewerContext
from .scoring import ScoreBreakdown, RankedVendor, VendorBrowseResult

__all__ = [
    # Listing
    "VendorListing",
    # Criteria
    "FilterCriteria",
    "ViewerContext",
    # Scoring
    "ScoreBreakdown",
    "RankedVendor",
    "VendorBrowseResult",
]
