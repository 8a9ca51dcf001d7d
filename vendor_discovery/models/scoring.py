"""
Scoring models - recommendation score breakdowns and ranked results.
"""
from typing import Optional

from pydantic import BaseModel, Field

from .criteria import FilterCriteria
from .listing import VendorListing


class ScoreBreakdown(BaseModel):
    """Points earned by a vendor for each recommendation signal."""
    total: int = Field(ge=0, description="Sum of all components")

    # Component points
    featured: int = Field(default=0, description="Featured flag or featured plan")
    pro: int = Field(default=0, description="Pro subscription")
    region: int = Field(default=0, description="Exact or adjacent region match")
    budget: int = Field(default=0, description="Budget tier match")
    popularity: int = Field(default=0, description="Shortlist count, capped")
    portfolio: int = Field(default=0, description="Has portfolio images")
    description: int = Field(default=0, description="Has a real description")

    # Tiers compared for the budget component
    viewer_tier: Optional[str] = None
    vendor_tier: Optional[str] = None

    reasons: list[str] = Field(default_factory=list)


class RankedVendor(BaseModel):
    """A vendor with its recommendation rank and score."""
    rank: int
    listing: VendorListing
    scores: ScoreBreakdown

    @property
    def score(self) -> int:
        return self.scores.total


class VendorBrowseResult(BaseModel):
    """Everything the vendor directory page shows for one set of filters."""
    title: str
    subtitle: str
    criteria: FilterCriteria
    vendors: list[VendorListing] = Field(default_factory=list)
    has_active_filters: bool = False
    empty_message: Optional[str] = Field(
        default=None,
        description="Shown instead of the list when no vendors match"
    )

    @property
    def count(self) -> int:
        return len(self.vendors)

    @property
    def is_empty(self) -> bool:
        return not self.vendors
