from typing import runtime_checkable, Protocol

from .model import Product


@runtime_checkable
class ProductSource(Protocol):
    def fetch_all_products(self) -> list[Product]: ...
    def fetch_product_by_id(self, id: str) -> Product: ...
