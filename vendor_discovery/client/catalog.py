"""
Vendor catalog client - loads vendor rows and normalizes them into listings.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..config import get_config
from ..models.listing import VendorListing


logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The catalog file is missing or is not a JSON list of vendor rows."""


class VendorCatalog:
    """
    Reads approved vendors from a JSON export of the vendors table.
    Returns VendorListing models instead of raw dicts.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else get_config().catalog.path
        logger.info(f"VendorCatalog initialized with {self.path}")

    def load(self) -> list[VendorListing]:
        """
        Load and normalize every approved vendor row.

        Returns:
            List of VendorListing objects in file order

        Raises:
            CatalogError: If the file cannot be read or parsed
        """
        rows = self._read_rows()

        listings = []
        skipped = 0
        for index, row in enumerate(rows, 1):
            if not self._is_approved(row):
                skipped += 1
                continue
            listing = normalize_vendor_row(row, index)
            if listing is None:
                skipped += 1
                continue
            listings.append(listing)

        logger.info(f"Loaded {len(listings)} vendors from {self.path} ({skipped} skipped)")
        return listings

    def _read_rows(self) -> list[Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog not found: {self.path}") from e
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CatalogError(f"Catalog {self.path} is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in {self.path}: {e}") from e

        # Accept a bare list or a backend response wrapper {"data": [...]}
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            data = data["data"]
        if not isinstance(data, list):
            raise CatalogError(f"Expected a list of vendors in {self.path}")
        return data

    def _is_approved(self, row: Any) -> bool:
        if not isinstance(row, dict):
            return True  # rejected later by normalization
        status = row.get("status")
        return status is None or status == "approved"


def normalize_vendor_row(raw: Any, index: int = 0) -> Optional[VendorListing]:
    """
    Normalize a raw vendors-table row to a VendorListing.

    Args:
        raw: Row dict (or model / object with attributes)
        index: Position in the source, used to derive a missing id

    Returns:
        VendorListing, or None if the row is unusable
    """
    try:
        if hasattr(raw, "model_dump"):
            raw = raw.model_dump()
        elif hasattr(raw, "__dict__"):
            raw = vars(raw)
        elif not isinstance(raw, dict):
            return None

        business_name = (raw.get("business_name") or raw.get("name") or "").strip()
        if not business_name:
            return None

        vendor_id = raw.get("id") or raw.get("vendor_id")
        if vendor_id is None or vendor_id == "":
            vendor_id = f"sample-{index}"

        return VendorListing(
            id=str(vendor_id),
            business_name=business_name,
            category=raw.get("category") or "other",
            region=raw.get("region") or "",
            description=raw.get("description") or None,
            starting_price_usd=raw.get("starting_price_usd"),
            portfolio_images=raw.get("portfolio_images"),
            shortlist_count=raw.get("shortlist_count"),
            is_featured=raw.get("is_featured"),
            subscription_plan=raw.get("subscription_plan") or None,
        )

    except (ValidationError, TypeError, AttributeError) as e:
        logger.warning(f"Failed to normalize vendor row {index}: {e}")
        return None


def load_listings(path: Optional[Union[str, Path]] = None) -> list[VendorListing]:
    """Load approved vendors from `path` (defaults to the configured catalog)."""
    return VendorCatalog(path).load()
