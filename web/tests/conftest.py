"""Shared test fixtures and utilities for the web test suite."""

import pytest


@pytest.fixture
def app():
    """Create the Flask app in testing mode."""
    from web.app import create_app

    flask_app = create_app()
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create Flask test client."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def gpu_payload():
    """A graphics card page as returned by the product API."""
    return {
        "components": [
            {
                "id": "gpu-1",
                "name": "ASUS Dual GeForce RTX 4060 8GB",
                "price": 319.0,
                "stock": 4,
                "categoryName": "Graphics Cards",
                "specifications": {"Memory Type": "GDDR6", "Memory Size": "8GB"},
            },
            {
                "id": "gpu-2",
                "name": "Sapphire Pulse Radeon RX 7800 XT 16GB",
                "price": 549.0,
                "discountPrice": 499.0,
                "stock": 2,
                "categoryName": "Graphics Cards",
                "specifications": {"Memory Type": "GDDR6", "Memory Size": "16GB"},
            },
            {
                "id": "gpu-3",
                "name": "MSI Gaming X RTX 4070 Ti 12GB",
                "price": 829.0,
                "stock": 1,
                "categoryName": "Graphics Cards",
                "specifications": {"Memory Type": "GDDR6X", "Memory Size": "12GB"},
            },
        ],
        "categories": [{"slug": "graphics-cards", "name": "Graphics Cards"}],
    }
