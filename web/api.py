"""API endpoints for category facets and filtered product lists.

Both POST endpoints take the product API payload for one category page
(``components``, optional ``specifications``, ``filterGroups`` and
``categories``) in the request body:

1. /api/categories/<slug>/facets - facet groups, empty selection, price range
2. /api/categories/<slug>/products - the filtered and sorted products
"""

import logging
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from flask import Blueprint, Response, jsonify, request

from facets.categories import CATEGORY_REGISTRY
from facets.config import DEFAULT_SORT, SORT_KEYS
from facets.models import CatalogPayload, PriceRange
from facets.view import CategoryView, apply_view, load_category_view

from .config import MAX_COMPONENTS

__all__ = ["api"]

logger = logging.getLogger(__name__)

# Create blueprint for API
api = Blueprint("api", __name__, url_prefix="/api")


class BadRequest(ValueError):
    """Request body that cannot be turned into a category view."""


def _error(message: str, status: int = 400) -> Tuple[Response, int]:
    return jsonify({"error": message}), status


def _read_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, list):
        data = {"components": data}
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    components = data.get("components", [])
    if not isinstance(components, list):
        raise BadRequest("components must be a list")
    if len(components) > MAX_COMPONENTS:
        raise BadRequest(f"Too many components (max {MAX_COMPONENTS})")
    return data


def _translator(data: Dict[str, Any]):
    translations = data.get("translations")
    if translations is None:
        return None
    if not isinstance(translations, dict):
        raise BadRequest("translations must be an object")
    return translations.get


def _load_view(slug: str, data: Dict[str, Any]) -> CategoryView:
    payload = CatalogPayload.from_dict(data)
    return load_category_view(payload, slug, t=_translator(data), log=logger)


def _parse_selected(raw: Any) -> Optional[Dict[str, FrozenSet[str]]]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise BadRequest("selected must map facet types to lists of option ids")
    selected = {}
    for facet_type, option_ids in raw.items():
        if not isinstance(option_ids, list) or not all(isinstance(o, str) for o in option_ids):
            raise BadRequest(f"selected[{facet_type!r}] must be a list of strings")
        selected[str(facet_type)] = frozenset(option_ids)
    return selected


def _parse_price(raw: Any) -> Optional[PriceRange]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise BadRequest("priceRange must be an object with min and max")
    try:
        return PriceRange(min=float(raw["min"]), max=float(raw["max"]))
    except (KeyError, TypeError, ValueError) as e:
        raise BadRequest(f"Invalid priceRange: {raw!r}") from e


def _view_response(view: CategoryView) -> Dict[str, Any]:
    return {
        "categoryName": view.category_name,
        "filterGroups": [group.to_dict() for group in view.filter_groups],
        "priceRange": view.price_range.to_dict(),
        "source": view.source,
    }


@api.route("/categories", methods=["GET"])
def list_categories() -> Response:
    """Categories with a dedicated facet builder, in classifier order."""
    categories = [
        {
            "key": key,
            "display_name": config["display_name"],
            "slugs": list(config["slugs"]),
        }
        for key, config in CATEGORY_REGISTRY.items()
    ]
    return jsonify({"categories": categories})


@api.route("/categories/<slug>/facets", methods=["POST"])
def category_facets(slug: str) -> Union[Tuple[Response, int], Response]:
    """Build the filter panel for a category page."""
    try:
        data = _read_body()
        view = _load_view(slug, data)
    except BadRequest as e:
        return _error(str(e))

    body = _view_response(view)
    body["selected"] = {facet_type: sorted(ids) for facet_type, ids in view.selected.items()}
    return jsonify(body)


@api.route("/categories/<slug>/products", methods=["POST"])
def category_products(slug: str) -> Union[Tuple[Response, int], Response]:
    """Filter and sort a category page's products.

    Besides the payload, the body may carry ``selected`` (facet type ->
    option ids), ``search``, ``priceRange`` and ``sort``.
    """
    try:
        data = _read_body()
        selected = _parse_selected(data.get("selected"))
        price = _parse_price(data.get("priceRange"))
        search = data.get("search", "")
        if not isinstance(search, str):
            raise BadRequest("search must be a string")
        sort_key = data.get("sort", DEFAULT_SORT)
        if sort_key not in SORT_KEYS:
            raise BadRequest(f"sort must be one of: {', '.join(SORT_KEYS)}")
        view = _load_view(slug, data)
    except BadRequest as e:
        return _error(str(e))

    products = apply_view(view, selected, search=search, price=price, sort_key=sort_key, log=logger)
    logger.info(f"{slug}: {len(products)} of {len(view.products)} products after filtering")

    body = _view_response(view)
    body["components"] = [product.to_dict() for product in products]
    body["total"] = len(products)
    return jsonify(body)
