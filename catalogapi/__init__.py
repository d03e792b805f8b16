from .errors import CatalogError, DecodeError, HttpError, NetworkError
from .model import Product, ProductPage
from .client import Networking
from .protocol import ProductSource
from .repository import AuthRepository, ProductRepository

__all__ = [
    "AuthRepository",
    "CatalogError",
    "DecodeError",
    "HttpError",
    "Networking",
    "NetworkError",
    "Product",
    "ProductPage",
    "ProductRepository",
    "ProductSource",
]
