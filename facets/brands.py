"""Brand / manufacturer inference.

A product's brand can come from several places. All signals are unioned in
this order:

1. the typed detail's ``brand``
2. the product's ``brand`` and ``manufacturer`` fields
3. specification keys that name a brand (see ``BRAND_SPEC_KEYS``)
4. for CPUs with nothing above, the vendor implied by the series name
5. with still nothing, the first known vendor appearing in the product name

Product-line names such as "Ryzen" or "Core" are never accepted as brands.
"""

import logging
from typing import Dict, Iterable, List, Optional

from facets.config import (
    AMD_SERIES_MARKERS,
    BRAND_SPEC_KEYS,
    CPU_SERIES_EXCLUDED_BRANDS,
    INTEL_SERIES_MARKERS,
    KNOWN_BRANDS,
)
from facets.models import CpuDetail, Product
from facets.normalize import clean_value

__all__ = [
    "is_series_name",
    "brand_from_cpu_series",
    "brand_from_name",
    "resolve_brands",
    "extract_brand_options",
]

logger = logging.getLogger(__name__)


def is_series_name(value: str) -> bool:
    """True when a would-be brand is actually a CPU product line."""
    return value.strip().lower() in CPU_SERIES_EXCLUDED_BRANDS


def brand_from_cpu_series(series: Optional[str]) -> Optional[str]:
    if not series:
        return None
    text = series.lower()
    if any(marker in text for marker in AMD_SERIES_MARKERS):
        return "AMD"
    if any(marker in text for marker in INTEL_SERIES_MARKERS):
        return "Intel"
    return None


def brand_from_name(name: str) -> Optional[str]:
    """First allow-listed vendor whose name occurs in a product name."""
    text = (name or "").lower()
    for brand in KNOWN_BRANDS:
        if brand.lower() in text:
            return brand
    return None


def _spec_brands(product: Product) -> List[str]:
    values = []
    for key, raw in product.specifications.items():
        key_lower = str(key).lower()
        if any(name in key_lower for name in BRAND_SPEC_KEYS):
            values.append(raw)
    return values


def resolve_brands(product: Product) -> List[str]:
    """Every brand a product can be attributed to, in signal order.

    Values are trimmed and deduplicated by exact string.
    """
    brands: List[str] = []

    def add(raw) -> None:
        value = clean_value(raw)
        if not value or value in brands:
            return
        if is_series_name(value):
            logger.debug("Discarding series name %r as brand of %s", value, product.id)
            return
        brands.append(value)

    if product.detail is not None:
        add(product.detail.brand)
    add(product.brand)
    add(product.manufacturer)
    for raw in _spec_brands(product):
        add(raw)

    if not brands and isinstance(product.detail, CpuDetail):
        add(brand_from_cpu_series(product.detail.series))

    if not brands:
        add(brand_from_name(product.name))

    return brands


def extract_brand_options(products: Iterable[Product]) -> Dict[str, str]:
    """Ordered identity map of every brand resolved across products."""
    options: Dict[str, str] = {}
    for product in products:
        for brand in resolve_brands(product):
            options.setdefault(brand, brand)
    return options
