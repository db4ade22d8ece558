"""Filter predicate evaluation.

Applies the free-text search, the price bounds and the selected facet
options to a product list. Facet types combine with AND; the options
selected within one facet type combine with OR.
"""

import logging
from typing import AbstractSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from facets.brands import resolve_brands
from facets.config import BOOLEAN_FACETS, PERIPHERAL_DETAIL_FACETS, get_spec_aliases
from facets.logging_config import log_facet_event
from facets.models import PERIPHERAL_KINDS, PriceRange, Product
from facets.normalize import bool_token, clean_value, normalize_key
from facets.specs import lookup_detail_values

__all__ = [
    "DerivedIndex",
    "split_option_id",
    "active_selections",
    "matches_search",
    "matches_price",
    "candidate_values",
    "matches_option",
    "matches_facet",
    "filter_products",
]

logger = logging.getLogger(__name__)

# product id -> facet type -> values a builder derived for that product
DerivedIndex = Mapping[str, Mapping[str, AbstractSet[str]]]


def split_option_id(option_id: str, facet_type: str = "") -> Tuple[str, str]:
    """Decode "<key>=<value>" on the first "="; a bare id is a value of ``facet_type``."""
    if "=" in option_id:
        key, value = option_id.split("=", 1)
        return key, value
    return facet_type, option_id


def active_selections(selected: Mapping[str, Iterable[str]]) -> List[Tuple[str, List[str]]]:
    """Facet types with at least one selected option, in selection order."""
    active = []
    for facet_type, option_ids in selected.items():
        ids = [option_id for option_id in option_ids if option_id]
        if ids:
            active.append((facet_type, ids))
    return active


def matches_search(product: Product, search: str) -> bool:
    """Case-insensitive substring match on name, description, specs and components."""
    term = (search or "").strip().lower()
    if not term:
        return True
    if term in product.name.lower() or term in product.description.lower():
        return True
    if any(term in str(value).lower() for value in product.specifications.values()):
        return True
    return any(term in name.lower() for name in product.component_names)


def matches_price(product: Product, price: Optional[PriceRange]) -> bool:
    if price is None:
        return True
    return price.contains(product.effective_price)


def _peripheral_value(product: Product, facet_type: str):
    detail = product.detail
    if facet_type not in PERIPHERAL_DETAIL_FACETS or detail is None:
        return None
    if detail.kind not in PERIPHERAL_KINDS or not detail.has_field(facet_type):
        return None
    return detail.get(facet_type)


def _derived_values(product: Product, facet_type: str, derived: Optional[DerivedIndex]) -> AbstractSet[str]:
    if not derived:
        return frozenset()
    return derived.get(product.id, {}).get(facet_type, frozenset())


def _spec_keys_for(facet_type: str, option_key: str) -> List[str]:
    keys = {normalize_key(facet_type), normalize_key(option_key)}
    keys.update(normalize_key(alias) for alias in get_spec_aliases(facet_type))
    keys.discard("")
    return sorted(keys)


def candidate_values(
    product: Product,
    facet_type: str,
    option_key: str = "",
    derived: Optional[DerivedIndex] = None,
) -> List[str]:
    """Values a product offers for a facet.

    Typed detail fields win over the product's specifications whose
    normalized key contains the facet key, the option key or an alias.
    Builder-derived values are added in both cases.
    """
    values = lookup_detail_values(product, facet_type)
    if not values:
        keys = _spec_keys_for(facet_type, option_key or facet_type)
        for spec_key, raw in product.specifications.items():
            normalized = normalize_key(spec_key)
            if any(key in normalized for key in keys):
                value = clean_value(raw)
                if value:
                    values.append(value)

    values.extend(sorted(_derived_values(product, facet_type, derived)))
    return values


def matches_option(
    product: Product,
    facet_type: str,
    option_id: str,
    derived: Optional[DerivedIndex] = None,
) -> bool:
    """Whether a product satisfies one selected option of a facet."""
    option_key, value = split_option_id(option_id, facet_type)
    wanted = value.strip().lower()

    # Options a builder derived from this product always select it
    if any(text.lower() == wanted for text in _derived_values(product, facet_type, derived)):
        return True

    if facet_type == "manufacturer":
        return any(brand.lower() == wanted for brand in resolve_brands(product))

    if facet_type == "cpu_series":
        return bool(wanted) and wanted in product.name.lower()

    peripheral = _peripheral_value(product, facet_type)
    if peripheral is not None:
        if isinstance(peripheral, bool):
            return clean_value(peripheral) == wanted
        return str(peripheral).strip().lower() == wanted

    candidates = candidate_values(product, facet_type, option_key, derived)
    if not candidates:
        return False

    if facet_type in BOOLEAN_FACETS:
        token = bool_token(value)
        if token is not None:
            return any(bool_token(candidate) == token for candidate in candidates)

    # Partial matches in either direction ("16GB" vs "16") are intended
    for candidate in candidates:
        text = candidate.lower()
        if wanted in text or text in wanted:
            return True
    return False


def matches_facet(
    product: Product,
    facet_type: str,
    option_ids: Sequence[str],
    derived: Optional[DerivedIndex] = None,
) -> bool:
    """OR across the options selected for one facet type."""
    return any(matches_option(product, facet_type, option_id, derived) for option_id in option_ids)


def filter_products(
    products: Sequence[Product],
    selected: Mapping[str, Iterable[str]],
    search: str = "",
    price: Optional[PriceRange] = None,
    derived: Optional[DerivedIndex] = None,
    log: Optional[logging.Logger] = None,
) -> List[Product]:
    """Return the products passing search, price and every active facet.

    Args:
        products: Products to evaluate (never modified)
        selected: Facet type -> selected option ids
        search: Free-text search; blank disables the stage
        price: Inclusive price bounds on the effective price; None disables
        derived: Per-product values computed by the category builder
        log: Logger for evaluation events (default: module logger)

    Returns:
        New list of matching products in their original order
    """
    log = log or logger
    active = active_selections(selected)

    result = []
    for product in products:
        if not matches_search(product, search):
            continue
        if not matches_price(product, price):
            continue
        if all(matches_facet(product, facet_type, ids, derived) for facet_type, ids in active):
            result.append(product)

    log_facet_event(
        "filter_applied",
        {
            "message": f"Filtered {len(products)} products to {len(result)}",
            "active_facets": [facet_type for facet_type, _ in active],
            "search": search,
            "price": price.to_dict() if price else None,
            "matched": len(result),
        },
        logger=log,
    )
    return result
