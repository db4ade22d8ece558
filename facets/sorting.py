"""Sort stage applied after filtering."""

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from facets.models import Product
from facets.normalize import fold_text

__all__ = [
    "SORTERS",
    "name_sort_key",
    "sort_products",
]

logger = logging.getLogger(__name__)


def name_sort_key(product: Product) -> Tuple[str, str]:
    """Locale-style name key: accent-stripped and case-folded, original text as tie-break."""
    return fold_text(product.name), product.name


# sort key -> (key function, descending)
SORTERS: Dict[str, Tuple[Callable[[Product], object], bool]] = {
    "price-asc": (lambda p: p.effective_price, False),
    "price-desc": (lambda p: p.effective_price, True),
    "name-asc": (name_sort_key, False),
    "name-desc": (name_sort_key, True),
    "rating-desc": (lambda p: p.rating or 0.0, True),
    "stock-desc": (lambda p: p.stock, True),
}


def sort_products(products: Sequence[Product], key: str) -> List[Product]:
    """Return a sorted copy of ``products``.

    The sort is stable, so products with equal keys keep their filtered
    order. Unknown sort keys return the products unchanged.
    """
    sorter = SORTERS.get(key)
    if sorter is None:
        logger.debug("Unknown sort key %r, keeping input order", key)
        return list(products)
    key_func, descending = sorter
    return sorted(products, key=key_func, reverse=descending)
