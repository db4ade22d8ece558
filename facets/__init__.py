"""Faceted filtering engine for a PC components storefront."""

import logging

__version__ = "0.1.0"

# Silent unless setup_logging() is called
logging.getLogger("facets").addHandler(logging.NullHandler())

# Re-export main components for convenient imports
from facets.brands import extract_brand_options, resolve_brands
from facets.catalog import CatalogError, export_csv, load_catalog
from facets.categories import CATEGORY_REGISTRY, classify_category, get_category_facets
from facets.evaluator import filter_products
from facets.fallback import organize
from facets.logging_config import setup_logging
from facets.models import (
    CatalogPayload,
    FilterGroup,
    FilterOption,
    PriceRange,
    Product,
    Specification,
)
from facets.sorting import sort_products
from facets.specs import extract
from facets.view import (
    CategoryView,
    apply_view,
    build_filter_groups,
    load_category_view,
    toggle_option,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Product",
    "FilterOption",
    "FilterGroup",
    "Specification",
    "PriceRange",
    "CatalogPayload",
    # Extraction
    "extract",
    "resolve_brands",
    "extract_brand_options",
    # Builders
    "CATEGORY_REGISTRY",
    "classify_category",
    "get_category_facets",
    "organize",
    # Evaluation
    "filter_products",
    "sort_products",
    # Page state
    "CategoryView",
    "build_filter_groups",
    "load_category_view",
    "apply_view",
    "toggle_option",
    # Files and logging
    "CatalogError",
    "load_catalog",
    "export_csv",
    "setup_logging",
]
