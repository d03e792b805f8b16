"""Read operations over the remote product catalog."""

import logging
from typing import Any

from . import endpoints
from .client import Networking
from .decoders import decode_product, decode_product_page, decode_products
from .errors import DecodeError
from .model import Product, ProductPage

logger = logging.getLogger(__name__)


class ProductRepository:
    """Fetches products through a Networking client.

    Nothing is cached: each call issues a new request, and errors from the
    client or the decoders propagate unchanged.
    """

    def __init__(self, networking: Networking | None = None):
        self.networking = networking or Networking()

    def fetch_all_products(self) -> list[Product]:
        """Fetch the products returned by a single listing request.

        The server's default page size bounds the result; further pages are
        not requested.
        """
        response = self.networking.get_json(endpoints.GET_ALL_PRODUCTS)
        if "products" not in response:
            raise DecodeError("Response has no 'products' field", field="products")

        products = decode_products(response["products"])
        logger.info(f"Fetched {len(products)} products")
        return products

    def fetch_product_page(self) -> ProductPage:
        """Fetch the listing together with its total/skip/limit metadata."""
        response = self.networking.get_json(endpoints.GET_ALL_PRODUCTS)
        return decode_product_page(response)

    def fetch_product_by_id(self, id: str) -> Product:
        """Fetch one product.

        The single-product endpoint returns the product fields at the top
        level, so the whole response is decoded as the product.
        """
        response = self.networking.get_json(endpoints.get_product_by_id(id))
        return decode_product(response)


class AuthRepository:
    """Performs the login request against the auth endpoint."""

    def __init__(self, networking: Networking | None = None):
        self.networking = networking or Networking()

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Log in and return the server's response as-is."""
        logger.info(f"Logging in as {username}")
        return self.networking.post_json(
            endpoints.POST_LOGIN,
            {"username": username, "password": password},
        )
