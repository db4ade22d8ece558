"""Command-line interface for the facet engine."""

import argparse
import sys
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence

from facets.catalog import CatalogError, export_csv, load_catalog
from facets.categories import CATEGORY_REGISTRY
from facets.config import DEFAULT_SORT, SORT_KEYS
from facets.evaluator import split_option_id
from facets.logging_config import setup_logging
from facets.models import FilterGroup, PriceRange, Product
from facets.view import apply_view, load_category_view

__all__ = ["main", "parse_args", "parse_selections", "print_groups", "print_products"]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build category facets and filter a product catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the facet groups of the processors category
  python -m facets.cli data/catalog.json --category processors --groups

  # AMD processors up to 300, cheapest first
  python -m facets.cli data/catalog.json --category processors \\
      --select manufacturer=AMD --max-price 300

  # Two options of one facet are ORed, different facets are ANDed
  python -m facets.cli data/ram.csv --category memory \\
      --select memory_type=DDR5 --select memory_type=DDR4 --select capacity=32GB

  # Export the filtered result
  python -m facets.cli data/catalog.json --category gpu --search rtx --export-csv out/gpus.csv
        """,
    )

    parser.add_argument("catalog", help="Catalog file (.json payload or component list, or .csv)")
    parser.add_argument(
        "--category",
        default="",
        metavar="SLUG",
        help="Category slug of the page (default: the catalog's first category)",
    )
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="TYPE=VALUE",
        help="Select a facet option; repeat to select several",
    )
    parser.add_argument("--search", default="", help="Free-text search")
    parser.add_argument("--min-price", type=float, help="Lower price bound (default: catalog minimum)")
    parser.add_argument("--max-price", type=float, help="Upper price bound (default: catalog maximum)")
    parser.add_argument(
        "--sort",
        choices=list(SORT_KEYS),
        default=DEFAULT_SORT,
        help=f"Sort order (default: {DEFAULT_SORT})",
    )
    parser.add_argument(
        "--groups",
        action="store_true",
        help="Print the facet groups instead of the products",
    )
    parser.add_argument("--export-csv", metavar="PATH", help="Write the result to a CSV file")
    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="List the categories that have a dedicated facet builder and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def parse_selections(
    tokens: Sequence[str],
    groups: Sequence[FilterGroup] = (),
) -> Dict[str, List[str]]:
    """Group "type=value" tokens by facet type, keeping the full token as option id.

    A token naming an option of one of ``groups`` is filed under that group's
    type, so options of one group combine with OR even when their ids carry
    different keys. Other tokens are filed under their own key.

    Raises:
        ValueError: If a token has no "=" or an empty type
    """
    owners = {option.id: group.type for group in groups for option in group.options}
    selected: Dict[str, List[str]] = OrderedDict()
    for token in tokens:
        option_id = token.strip()
        facet_type, value = split_option_id(option_id)
        if not facet_type or not value:
            raise ValueError(f"Invalid selection {token!r}, expected TYPE=VALUE")
        selected.setdefault(owners.get(option_id, facet_type.strip()), []).append(option_id)
    return selected


def print_groups(groups: Sequence[FilterGroup]) -> None:
    for group in groups:
        print(f"{group.title} [{group.type}]")
        if not group.options:
            print("  (no options)")
        for option in group.options:
            print(f"  {option.name:<30} {option.id}")


def print_products(products: Sequence[Product]) -> None:
    for product in products:
        price = f"{product.effective_price:.2f}"
        if product.discount_price is not None:
            price += f" (was {product.price:.2f})"
        print(f"{product.id:<8} {price:>20}  {product.name}")
    print(f"\n{len(products)} products")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI. Returns the process exit code."""
    args = parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else "WARNING", log_to_file=False)

    if args.list_categories:
        print("Categories with a dedicated facet builder:")
        for key, config in CATEGORY_REGISTRY.items():
            print(f"  {key}: {config['display_name']} ({', '.join(config['slugs'])})")
        return 0

    try:
        payload = load_catalog(args.catalog)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    slug = args.category or (payload.categories[0].slug if payload.categories else "")
    view = load_category_view(payload, slug)

    try:
        selected = parse_selections(args.select, view.filter_groups)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.groups:
        print(f"Category: {view.category_name or slug or '(unknown)'} ({view.source} facets)\n")
        print_groups(view.filter_groups)
        return 0

    price = PriceRange(
        min=view.price_range.min if args.min_price is None else args.min_price,
        max=view.price_range.max if args.max_price is None else args.max_price,
    )
    products = apply_view(view, selected, search=args.search, price=price, sort_key=args.sort)
    print_products(products)

    if args.export_csv:
        path = export_csv(products, args.export_csv)
        print(f"Exported to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
