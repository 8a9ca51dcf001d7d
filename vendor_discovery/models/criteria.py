"""
Criteria models - directory filters and the viewer context used for ranking.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..constants import ALL, DEFAULT_SORT_MODE


# Query parameter name -> FilterCriteria field
QUERY_PARAM_FIELDS = {
    "category": "category",
    "region": "region",
    "price": "price_tier",
    "sort": "sort_mode",
    "search": "search_query",
}


class ViewerContext(BaseModel):
    """
    Who is browsing: their stated budget and the region they filtered on.
    Passed explicitly into ranking; never read from global state.
    """
    estimated_budget_usd: Optional[float] = Field(
        default=None,
        description="Total estimated wedding budget from the couple's profile"
    )
    region_filter: Optional[str] = Field(
        default=None,
        description="Region selected in the directory filters; 'all' means none"
    )

    @field_validator("region_filter", mode="before")
    @classmethod
    def normalize_region(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        if not v or v == ALL:
            return None
        return v

    @classmethod
    def from_profile(
        cls,
        profile: Optional[Mapping[str, Any]],
        region_filter: Optional[str] = None,
    ) -> "ViewerContext":
        """Build a context from a couple profile row and the active region filter."""
        budget = None
        if profile:
            budget = profile.get("estimated_budget_usd")
        return cls(estimated_budget_usd=budget, region_filter=region_filter)


class FilterCriteria(BaseModel):
    """
    Directory filter state, as carried in the page's query string.
    Unknown values are kept as-is and simply match nothing.
    """
    category: str = ALL
    region: str = ALL
    price_tier: str = ALL
    search_query: str = ""
    sort_mode: str = DEFAULT_SORT_MODE

    @field_validator("category", "region", "price_tier", "sort_mode", mode="before")
    @classmethod
    def default_blank(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_SORT_MODE if info.field_name == "sort_mode" else ALL
        return v

    @field_validator("search_query", mode="before")
    @classmethod
    def default_search(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "FilterCriteria":
        """Read criteria from URL query parameters (missing keys use defaults)."""
        values = {}
        for param, field in QUERY_PARAM_FIELDS.items():
            value = params.get(param)
            if isinstance(value, (list, tuple)):
                value = value[0] if value else None
            if value is not None:
                values[field] = value
        return cls(**values)

    def to_query_params(self) -> dict[str, str]:
        """Query parameters for these criteria; defaults are left out."""
        params = {}
        for param, field in QUERY_PARAM_FIELDS.items():
            value = getattr(self, field)
            if field == "sort_mode":
                if value != DEFAULT_SORT_MODE:
                    params[param] = value
            elif field == "search_query":
                if value.strip():
                    params[param] = value
            elif value != ALL:
                params[param] = value
        return params

    def with_filter(self, key: str, value: Optional[str]) -> "FilterCriteria":
        """Return a copy with one filter changed; accepts field or query param names."""
        field = QUERY_PARAM_FIELDS.get(key, key)
        if field not in type(self).model_fields:
            raise KeyError(f"Unknown filter: {key}")
        data = self.model_dump()
        data[field] = value
        return type(self)(**data)

    def cleared(self) -> "FilterCriteria":
        return type(self)()

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.search_query.strip()
            or self.category != ALL
            or self.region != ALL
            or self.price_tier != ALL
        )

    def viewer(self, estimated_budget_usd: Optional[float] = None) -> ViewerContext:
        """Viewer context for ranking under these criteria."""
        return ViewerContext(
            estimated_budget_usd=estimated_budget_usd,
            region_filter=self.region,
        )
