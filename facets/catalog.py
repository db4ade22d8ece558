"""Catalog files: load product payloads from JSON or CSV, export results to CSV.

A JSON catalog is either a full product API payload
(``{"components": [...], "specifications": [...], ...}``) or a bare list of
components. A CSV catalog has one product per row using the API's camelCase
column names; the ``specifications`` column and any typed-detail column
(``cpu``, ``gpu``, ``caseModel``, ...) hold JSON objects.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import pandas as pd

from facets.models import DETAIL_TYPES, CatalogPayload, Category, Product

__all__ = [
    "CatalogError",
    "category_slug",
    "load_catalog",
    "read_catalog_csv",
    "products_to_frame",
    "export_csv",
]

logger = logging.getLogger(__name__)

JSON_COLUMNS = ("specifications",) + tuple(DETAIL_TYPES)

EXPORT_COLUMNS = [
    "id",
    "name",
    "price",
    "discountPrice",
    "effectivePrice",
    "stock",
    "rating",
    "categoryName",
    "brand",
    "manufacturer",
    "sku",
    "specifications",
]


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or has an unsupported shape."""


def category_slug(name: str) -> str:
    """URL slug for a category name ("Graphics Cards" -> "graphics-cards")."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _categories_from_products(products: Iterable[Product]) -> List[Category]:
    categories: Dict[str, Category] = {}
    for product in products:
        name = product.category_name
        if name and name not in categories:
            categories[name] = Category(slug=category_slug(name), name=name)
    return list(categories.values())


def _parse_json_cell(value: Any, column: str, row_number: int) -> Any:
    if value is None or (not isinstance(value, (dict, list)) and pd.isna(value)):
        return None
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        # Spreadsheet exports double the inner quotes
        try:
            return json.loads(text.replace('""', '"'))
        except json.JSONDecodeError:
            logger.warning(f"Row {row_number}: invalid JSON in column {column!r}, ignoring")
            return None


def _row_to_dict(row: pd.Series, row_number: int) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for column, value in row.items():
        if column in JSON_COLUMNS:
            data[column] = _parse_json_cell(value, column, row_number)
        elif isinstance(value, str) or not pd.isna(value):
            data[column] = value.item() if hasattr(value, "item") else value
    return data


def read_catalog_csv(path: Union[str, Path]) -> List[Product]:
    """Read products from a CSV catalog.

    Args:
        path: CSV file with at least ``id``, ``name`` and ``price`` columns

    Returns:
        Products in file order

    Raises:
        CatalogError: If the file cannot be parsed or lacks required columns
    """
    try:
        df = pd.read_csv(path, dtype={"id": str, "sku": str, "categoryId": str})
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise CatalogError(f"Cannot read CSV catalog {path}: {e}") from e

    missing = [column for column in ("id", "name", "price") if column not in df.columns]
    if missing:
        raise CatalogError(f"CSV catalog {path} is missing columns: {', '.join(missing)}")

    products = []
    for row_number, (_, row) in enumerate(df.iterrows(), start=2):
        products.append(Product.from_dict(_row_to_dict(row, row_number)))
    return products


def _read_json(path: Path) -> CatalogPayload:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(f"Invalid JSON in catalog {path}: {e}") from e

    if isinstance(data, list):
        data = {"components": data}
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {path} must hold an object or a list of components")
    if not isinstance(data.get("components", []), list):
        raise CatalogError(f"Catalog {path}: 'components' must be a list")

    payload = CatalogPayload.from_dict(data)
    if not payload.categories:
        payload = CatalogPayload(
            components=payload.components,
            specifications=payload.specifications,
            filter_groups=payload.filter_groups,
            categories=_categories_from_products(payload.components),
        )
    return payload


def load_catalog(path: Union[str, Path]) -> CatalogPayload:
    """Load a catalog file into a product API payload.

    Args:
        path: ``.json`` or ``.csv`` catalog file

    Returns:
        The payload. When the file lists no categories they are derived from
        the products' category names.

    Raises:
        CatalogError: If the file is missing, unreadable or of an unsupported type
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        payload = _read_json(path)
    elif suffix == ".csv":
        products = read_catalog_csv(path)
        payload = CatalogPayload(
            components=products,
            categories=_categories_from_products(products),
        )
    else:
        raise CatalogError(f"Unsupported catalog format {suffix or '(none)'!r}: {path}")

    logger.info(f"Loaded {len(payload.components)} products from {path}")
    return payload


def products_to_frame(products: Iterable[Product]) -> pd.DataFrame:
    """Flatten products into a DataFrame with one row per product."""
    rows = []
    for product in products:
        data = product.to_dict()
        rows.append(
            {
                "id": product.id,
                "name": product.name,
                "price": product.price,
                "discountPrice": product.discount_price,
                "effectivePrice": product.effective_price,
                "stock": product.stock,
                "rating": product.rating,
                "categoryName": product.category_name,
                "brand": product.brand,
                "manufacturer": product.manufacturer,
                "sku": product.sku,
                "specifications": json.dumps(data["specifications"], ensure_ascii=False),
            }
        )
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_csv(products: Iterable[Product], path: Union[str, Path]) -> Path:
    """Write products to a CSV file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = products_to_frame(products)
    df.to_csv(path, index=False)
    logger.info(f"Exported {len(df)} products to {path}")
    return path
