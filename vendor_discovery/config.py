"""
Configuration and environment handling for vendor discovery.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()

SAMPLE_CATALOG_PATH = Path(__file__).parent / "data" / "sample_vendors.json"


class RankingConfig(BaseModel):
    """Directory ranking configuration."""
    default_sort_mode: str = Field(
        default_factory=lambda: os.getenv("VENDOR_DEFAULT_SORT", "recommended")
    )
    recommendation_limit: int = Field(
        default_factory=lambda: int(os.getenv("VENDOR_RECOMMENDATION_LIMIT", "10")),
        description="Vendors returned by the recommended-for-you list",
    )
    category_limit: int = Field(
        default_factory=lambda: int(os.getenv("VENDOR_CATEGORY_LIMIT", "3")),
        description="Vendors per category on the dashboard",
    )
    key_categories: list[str] = Field(
        default=["venue", "photographer", "dj", "flowers"],
        description="Categories shown on the couple dashboard",
    )


class CatalogConfig(BaseModel):
    """Local vendor catalog configuration."""
    path: Path = Field(
        default_factory=lambda: Path(os.getenv("VENDOR_CATALOG_PATH", str(SAMPLE_CATALOG_PATH)))
    )


class Config(BaseModel):
    """Main configuration."""
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    log_level: str = Field(default_factory=lambda: os.getenv("VENDOR_LOG_LEVEL", "INFO"))


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next call re-reads the environment."""
    global _config
    _config = None
