"""Vendor catalog client."""

from .catalog import CatalogError, VendorCatalog, load_listings, normalize_vendor_row

__all__ = [
    "CatalogError",
    "VendorCatalog",
    "load_listings",
    "normalize_vendor_row",
]
