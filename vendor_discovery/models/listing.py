"""
Listing models - vendor records as shown in the directory.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VendorListing(BaseModel):
    """
    An approved vendor as received from the backend.
    Read-only: the ranking pipeline never mutates listings.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    business_name: str
    category: str
    region: str
    description: Optional[str] = None
    starting_price_usd: Optional[float] = None
    portfolio_images: list[str] = Field(default_factory=list)
    shortlist_count: int = 0
    is_featured: bool = False
    subscription_plan: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("starting_price_usd", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Optional[float]:
        """Parse price from numbers or strings like "$1,200"."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, (int, float)):
            return float(v) if v >= 0 else None
        if isinstance(v, str):
            cleaned = v.replace(" ", "").replace(",", "").replace("$", "").replace("USD", "")
            try:
                price = float(cleaned)
            except ValueError:
                return None
            return price if price >= 0 else None
        return None

    @field_validator("portfolio_images", mode="before")
    @classmethod
    def parse_images(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v else []
        if not isinstance(v, (list, tuple)):
            raise ValueError("portfolio_images must be a list of URLs")
        return [str(url) for url in v if url]

    @field_validator("shortlist_count", mode="before")
    @classmethod
    def parse_shortlist_count(cls, v: Any) -> int:
        # Backend counter; null or negative values read as zero
        try:
            return max(0, int(v or 0))
        except (TypeError, ValueError):
            return 0

    @field_validator("is_featured", mode="before")
    @classmethod
    def parse_featured(cls, v: Any) -> Any:
        # Null reads as not featured; other values use pydantic bool parsing
        return False if v is None else v

    @property
    def plan(self) -> str:
        """Subscription plan, `free` when none is recorded."""
        return self.subscription_plan or "free"

    @property
    def is_promoted(self) -> bool:
        """Featured flag or featured subscription; these always list first."""
        return self.is_featured or self.plan == "featured"

