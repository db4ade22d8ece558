"""Category page orchestration.

Chooses where a page's facet groups come from, keeps the selection state
that the filter panel edits, and runs the filter and sort stages:

    view = load_category_view(payload, "processors")
    selected = toggle_option(view.selected, "manufacturer", "manufacturer=AMD")
    products = apply_view(view, selected, sort_key="name-asc")
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence

from facets.categories import get_category_facets
from facets.config import DEFAULT_SORT
from facets.evaluator import DerivedIndex, filter_products
from facets.facet_groups import Translate, translation_key_for
from facets.fallback import organize
from facets.logging_config import log_facet_event
from facets.models import CatalogPayload, FilterGroup, PriceRange, Product
from facets.sorting import sort_products
from facets.specs import derive_specifications, facet_title

__all__ = [
    "Selection",
    "CategoryView",
    "resolve_category_name",
    "empty_manufacturer_group",
    "build_filter_groups",
    "build_derived_index",
    "initial_selection",
    "reset_selection",
    "toggle_option",
    "compute_price_range",
    "load_category_view",
    "apply_view",
]

logger = logging.getLogger(__name__)

# facet type -> selected option ids
Selection = Dict[str, FrozenSet[str]]


@dataclass(frozen=True)
class CategoryView:
    """Everything the filter panel needs for one category page."""

    slug: str
    category_name: str
    products: List[Product]
    filter_groups: List[FilterGroup]
    selected: Selection
    price_range: PriceRange
    derived: DerivedIndex = field(default_factory=dict)
    source: str = "builder"


def resolve_category_name(payload: CatalogPayload, slug: str) -> str:
    """Category name for a slug, else the first listed category, else ""."""
    for category in payload.categories:
        if category.slug == slug:
            return category.name
    if payload.categories:
        return payload.categories[0].name
    return ""


def empty_manufacturer_group(t: Optional[Translate] = None) -> FilterGroup:
    translation_key = translation_key_for("manufacturer")
    return FilterGroup(
        title=facet_title("manufacturer", t, translation_key, default="Manufacturer"),
        type="manufacturer",
        options=[],
        title_translation_key=translation_key,
    )


def _build_groups(
    payload: CatalogPayload,
    slug: str,
    category_name: str,
    t: Optional[Translate],
    log: logging.Logger,
):
    if payload.filter_groups:
        return list(payload.filter_groups), "server"

    builder = get_category_facets(slug, category_name)
    if builder is not None:
        groups = builder.build(payload.components, t, log=log)
        if groups:
            return groups, "builder"

    specs = payload.specifications
    if not specs:
        specs = derive_specifications(payload.components)
    groups = organize(specs)
    if groups:
        return groups, "fallback"

    return [empty_manufacturer_group(t)], "empty"


def build_filter_groups(
    payload: CatalogPayload,
    slug: str,
    t: Optional[Translate] = None,
    log: Optional[logging.Logger] = None,
) -> List[FilterGroup]:
    """Facet groups for a category page.

    Server-supplied ``filterGroups`` are used verbatim. Otherwise the
    category's builder runs, then the generic organizer over the supplied
    (or derived) specifications. The result is never empty: a single empty
    Manufacturer group is returned as the last resort.

    Args:
        payload: Product API response for the page
        slug: URL slug of the category
        t: Optional translation function
        log: Logger for build events (default: module logger)

    Returns:
        Ordered facet groups
    """
    log = log or logger
    groups, _ = _build_groups(payload, slug, resolve_category_name(payload, slug), t, log)
    return groups


def build_derived_index(payload: CatalogPayload, slug: str) -> DerivedIndex:
    """Per-product values from the category builder, for facets with no spec key."""
    builder = get_category_facets(slug, resolve_category_name(payload, slug))
    if builder is None:
        return {}
    return {product.id: builder.derive(product) for product in payload.components}


def initial_selection(groups: Sequence[FilterGroup]) -> Selection:
    """An empty selection with one entry per displayed facet type."""
    return {group.type: frozenset() for group in groups}


def reset_selection(selected: Mapping[str, FrozenSet[str]]) -> Selection:
    return {facet_type: frozenset() for facet_type in selected}


def toggle_option(selected: Mapping[str, FrozenSet[str]], facet_type: str, option_id: str) -> Selection:
    """Return a new selection with ``option_id`` flipped for ``facet_type``."""
    updated = dict(selected)
    current = frozenset(updated.get(facet_type, frozenset()))
    if option_id in current:
        updated[facet_type] = current - {option_id}
    else:
        updated[facet_type] = current | {option_id}
    return updated


def compute_price_range(products: Sequence[Product]) -> PriceRange:
    """Observed min/max effective price; (0, 0) for an empty list."""
    if not products:
        return PriceRange(min=0.0, max=0.0)
    prices = [product.effective_price for product in products]
    return PriceRange(min=min(prices), max=max(prices))


def load_category_view(
    payload: CatalogPayload,
    slug: str,
    t: Optional[Translate] = None,
    log: Optional[logging.Logger] = None,
) -> CategoryView:
    """Build the filter panel state for a freshly loaded category page."""
    log = log or logger
    category_name = resolve_category_name(payload, slug)
    groups, source = _build_groups(payload, slug, category_name, t, log)
    view = CategoryView(
        slug=slug,
        category_name=category_name,
        products=list(payload.components),
        filter_groups=groups,
        selected=initial_selection(groups),
        price_range=compute_price_range(payload.components),
        derived=build_derived_index(payload, slug),
        source=source,
    )
    log_facet_event(
        "facets_built",
        {
            "message": f"Built {len(groups)} facet groups for {slug or category_name!r} from {source}",
            "slug": slug,
            "category": category_name,
            "source": source,
            "groups": [group.type for group in groups],
            "products": len(view.products),
        },
        logger=log,
    )
    return view


def apply_view(
    view: CategoryView,
    selected: Optional[Mapping[str, FrozenSet[str]]] = None,
    search: str = "",
    price: Optional[PriceRange] = None,
    sort_key: str = DEFAULT_SORT,
    log: Optional[logging.Logger] = None,
) -> List[Product]:
    """Filter then sort a view's products.

    ``selected`` and ``price`` default to the view's own state.
    """
    filtered = filter_products(
        view.products,
        view.selected if selected is None else selected,
        search=search,
        price=view.price_range if price is None else price,
        derived=view.derived,
        log=log,
    )
    return sort_products(filtered, sort_key)
