"""
Shared enumerations for the vendor directory.
Regions, categories, price ranges and sort options are defined once here
and reused for labels, validation and filter options.
"""
from typing import Optional

ALL = "all"

# Lebanese regions
LEBANESE_REGIONS: tuple[tuple[str, str], ...] = (
    ("beirut", "Beirut"),
    ("mount_lebanon", "Mount Lebanon"),
    ("north", "North Lebanon"),
    ("south", "South Lebanon"),
    ("bekaa", "Bekaa"),
    ("nabatieh", "Nabatieh"),
)

# Vendor categories
VENDOR_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("venue", "Venues"),
    ("photographer", "Photographers"),
    ("videographer", "Videographers"),
    ("dj", "DJs"),
    ("sound_lighting", "Sound & Lighting"),
    ("zaffe", "Zaffé"),
    ("bridal_dress", "Bridal Dresses"),
    ("makeup_artist", "Makeup Artists"),
    ("flowers", "Flower Designers"),
    ("car_rental", "Car Rentals"),
    ("catering", "Catering"),
    ("wedding_planner", "Wedding Planners"),
    ("jewelry", "Jewelry"),
    ("invitations", "Invitations"),
    ("cake", "Cake & Sweets"),
    ("entertainment", "Entertainment"),
    ("other", "Other"),
)

PRICE_RANGES: tuple[tuple[str, str], ...] = (
    (ALL, "All Prices"),
    ("budget", "Budget (Under $1,000)"),
    ("mid", "Mid-range ($1,000 - $3,000)"),
    ("luxury", "Luxury ($3,000+)"),
)

SORT_OPTIONS: tuple[tuple[str, str], ...] = (
    ("recommended", "Recommended for You"),
    ("popularity", "Most Popular"),
    ("featured", "Featured First"),
    ("newest", "Newest"),
    ("price_low", "Price: Low to High"),
    ("price_high", "Price: High to Low"),
    ("name", "Name: A to Z"),
)

REGION_LABELS = dict(LEBANESE_REGIONS)
CATEGORY_LABELS = dict(VENDOR_CATEGORIES)
PRICE_LABELS = dict(PRICE_RANGES)
SORT_LABELS = dict(SORT_OPTIONS)

# Nearby regions that earn partial credit when ranking.
# Entered per source region; not symmetric.
REGION_ADJACENCY: dict[str, tuple[str, ...]] = {
    "beirut": ("mount_lebanon",),
    "mount_lebanon": ("beirut", "north", "bekaa"),
    "north": ("mount_lebanon", "bekaa"),
    "south": ("mount_lebanon", "nabatieh"),
    "bekaa": ("mount_lebanon", "north", "nabatieh"),
    "nabatieh": ("south", "bekaa"),
}

# Directory price filter buckets (USD starting price)
FILTER_MID_MIN = 1000
FILTER_LUXURY_MIN = 3000

# Vendor price tiers used for budget matching in the recommendation score
VENDOR_MID_MIN = 1000
VENDOR_LUXURY_MIN = 5000

# Couple budget tiers (total estimated wedding budget, USD)
VIEWER_MID_MIN = 15000
VIEWER_LUXURY_MIN = 50000

DEFAULT_SORT_MODE = "recommended"
DIRECTORY_TITLE = "Find Wedding Vendors"


def get_region_label(value: Optional[str]) -> str:
    return REGION_LABELS.get(value or "", "All Regions")


def get_category_label(value: Optional[str]) -> str:
    return CATEGORY_LABELS.get(value or "", "All Categories")


def get_price_label(value: Optional[str]) -> str:
    return PRICE_LABELS.get(value or "", "All Prices")


def get_sort_label(value: Optional[str]) -> str:
    return SORT_LABELS.get(value or "", "Most Popular")


def adjacent_regions(region: Optional[str]) -> tuple[str, ...]:
    """Regions listed as neighbours of `region` (empty for unknown regions)."""
    return REGION_ADJACENCY.get(region or "", ())
