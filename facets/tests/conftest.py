"""Shared test fixtures for the facet engine test suite."""

import json
from typing import Any, Dict

import pytest

from facets.models import CatalogPayload, Product


def make_product(**data: Any) -> Product:
    """Build a product from API-shaped keyword arguments with sane defaults."""
    data.setdefault("id", data.get("name", "p"))
    data.setdefault("name", "Product")
    data.setdefault("price", 100.0)
    return Product.from_dict(data)


@pytest.fixture
def product_factory():
    """Return the product builder so tests can create ad-hoc products."""
    return make_product


@pytest.fixture
def cpu_products():
    """A Ryzen CPU with no brand field and an Intel CPU with an explicit brand."""
    return [
        make_product(id="1", name="X570 AORUS", price=199.0, cpu={"series": "Ryzen 5 5600X"}),
        make_product(id="2", name="Z790 Hero", price=349.0, cpu={"brand": "Intel"}),
    ]


@pytest.fixture
def cpu_catalog() -> Dict[str, Any]:
    """A processors page payload as returned by the product API."""
    return {
        "components": [
            {
                "id": "cpu-1",
                "name": "AMD Ryzen 5 7600X",
                "price": 229.0,
                "stock": 12,
                "rating": 4.7,
                "categoryName": "Processors",
                "specifications": {"Socket": "AM5", "Cores": "6", "TDP": "105 W"},
                "cpu": {"brand": "AMD", "series": "Ryzen 5", "cores": 6, "integratedGpu": True},
            },
            {
                "id": "cpu-2",
                "name": "Intel Core i7-14700K",
                "price": 409.0,
                "discountPrice": 379.0,
                "stock": 3,
                "rating": 4.5,
                "categoryName": "Processors",
                "specifications": {"Socket": "LGA1700", "Cores": "20", "TDP": "125 W"},
                "cpu": {"brand": "Intel", "series": "Core i7", "cores": 20, "integratedGpu": True},
            },
            {
                "id": "cpu-3",
                "name": "AMD Ryzen 7 7800X3D",
                "price": 449.0,
                "stock": 0,
                "categoryName": "Processors",
                "specifications": {"Socket": "AM5", "Cores": "8", "TDP": "120 W"},
                "cpu": {"brand": "AMD", "series": "Ryzen 7", "cores": 8, "integratedGpu": False},
            },
        ],
        "categories": [{"slug": "processors", "name": "Processors"}],
    }


@pytest.fixture
def cpu_payload(cpu_catalog) -> CatalogPayload:
    return CatalogPayload.from_dict(cpu_catalog)


@pytest.fixture
def catalog_json_path(tmp_path, cpu_catalog):
    """Write the processors payload to a temporary JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(cpu_catalog), encoding="utf-8")
    return path


@pytest.fixture
def catalog_csv_path(tmp_path):
    """Create a temporary CSV catalog with JSON specification cells."""
    csv_content = (
        "id,name,price,discountPrice,stock,categoryName,brand,specifications\n"
        '1,Corsair Vengeance 32GB DDR5,129.99,,5,Memory,Corsair,"{""Memory Type"": ""DDR5"", ""Capacity"": ""32GB""}"\n'
        '2,Kingston Fury 16GB DDR4,59.99,49.99,8,Memory,Kingston,"{""Memory Type"": ""DDR4"", ""Capacity"": ""16GB""}"\n'
        "3,G.Skill Trident Z 64GB,249.00,,0,Memory,,\n"
    )
    path = tmp_path / "memory.csv"
    path.write_text(csv_content, encoding="utf-8")
    return path
