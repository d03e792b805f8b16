import json

import pytest
import requests


def _make_response(status_code=200, body=None, reason="OK", url="https://dummyjson.com/"):
    """Build a real requests.Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def product_data():
    """A complete product map as returned by the API."""
    return {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "A popular mascara.",
        "price": 9.99,
        "discountPercentage": 7.17,
        "rating": 4.94,
        "stock": 5,
        "brand": "Essence",
        "category": "beauty",
        "thumbnail": "https://cdn.dummyjson.com/products/1/thumbnail.png",
        "images": [
            "https://cdn.dummyjson.com/products/1/1.png",
            "https://cdn.dummyjson.com/products/1/2.png",
        ],
    }


@pytest.fixture
def make_response():
    """Factory for stub responses."""
    return _make_response
