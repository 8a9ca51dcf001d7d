"""
Command-line vendor directory.

Examples:
    vendor-discovery --category venue --region beirut
    vendor-discovery --sort price_low --price mid --json
    vendor-discovery --recommend --budget 20000 --limit 5
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .client.catalog import CatalogError, load_listings
from .config import get_config
from .constants import ALL, CATEGORY_LABELS, PRICE_LABELS, REGION_LABELS, SORT_LABELS
from .models.criteria import FilterCriteria
from .models.listing import VendorListing
from .pipeline.orchestrator import browse_vendors, recommend_vendors


logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Browse and rank wedding vendors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help=f"Vendor JSON file (default: {config.catalog.path})",
    )
    parser.add_argument(
        "--category",
        default=ALL,
        choices=[ALL, *CATEGORY_LABELS],
        help="Vendor category (default: all)",
    )
    parser.add_argument(
        "--region",
        default=ALL,
        choices=[ALL, *REGION_LABELS],
        help="Region (default: all)",
    )
    parser.add_argument(
        "--price",
        default=ALL,
        choices=list(PRICE_LABELS),
        help="Price range (default: all)",
    )
    parser.add_argument("--search", default="", help="Search vendor names and descriptions")
    parser.add_argument(
        "--sort",
        default=config.ranking.default_sort_mode,
        choices=list(SORT_LABELS),
        help=f"Sort order (default: {config.ranking.default_sort_mode})",
    )
    parser.add_argument(
        "--budget",
        type=float,
        default=None,
        help="Estimated total wedding budget in USD",
    )
    parser.add_argument("--limit", type=_non_negative_int, default=None, help="Maximum vendors to show")
    parser.add_argument(
        "--recommend",
        action="store_true",
        help="Show recommended vendors instead of the directory",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    return parser.parse_args(argv)


def _format_vendor(position: int, listing: VendorListing, score: Optional[int] = None) -> str:
    price = (
        f"${listing.starting_price_usd:,.0f}"
        if listing.starting_price_usd is not None
        else "price on request"
    )
    line = f"{position:>3}. {listing.business_name} ({listing.category}, {listing.region}) - {price}"
    if listing.is_promoted:
        line += " [featured]"
    if score is not None:
        line += f" score={score}"
    return line


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=get_config().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"Arguments: {args}")

    try:
        listings = load_listings(args.catalog)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    criteria = FilterCriteria(
        category=args.category,
        region=args.region,
        price_tier=args.price,
        search_query=args.search,
        sort_mode=args.sort,
    )
    viewer = criteria.viewer(estimated_budget_usd=args.budget)

    if args.recommend:
        ranked = recommend_vendors(listings, viewer, category=args.category, limit=args.limit)
        if args.json:
            print(json.dumps(
                [
                    {"rank": r.rank, "score": r.score, **r.listing.model_dump()}
                    for r in ranked
                ],
                indent=2,
                ensure_ascii=False,
            ))
        else:
            print("Recommended for You")
            for r in ranked:
                print(_format_vendor(r.rank, r.listing, r.score))
        return 0

    result = browse_vendors(listings, criteria, viewer)
    vendors = result.vendors[: args.limit] if args.limit is not None else result.vendors

    if args.json:
        print(json.dumps([v.model_dump() for v in vendors], indent=2, ensure_ascii=False))
        return 0

    print(result.title)
    print(result.subtitle)
    if result.is_empty:
        print(result.empty_message)
    for position, listing in enumerate(vendors, 1):
        print(_format_vendor(position, listing))
    return 0


if __name__ == "__main__":
    sys.exit(main())
