"""Conversion between JSON maps and product records.

Each field is optional: a missing key or an explicit null decodes to None.
A field that is present with the wrong type raises DecodeError naming the
JSON key, rather than being treated as absent.
"""

from typing import Any

from .errors import DecodeError
from .model import Product, ProductPage


def _is_number(value: Any) -> bool:
    # bool is a subclass of int, but JSON true/false are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(
            f"Field '{key}' must be a string, got {type(value).__name__}", field=key
        )
    return value


def _number(data: dict[str, Any], key: str) -> int | float | None:
    value = data.get(key)
    if value is None:
        return None
    if not _is_number(value):
        raise DecodeError(
            f"Field '{key}' must be a number, got {type(value).__name__}", field=key
        )
    return value


def _integer(data: dict[str, Any], key: str) -> int | None:
    """Read an integer field, truncating floating-point values."""
    value = _number(data, key)
    if value is None:
        return None
    try:
        return int(value)
    except (OverflowError, ValueError) as e:
        raise DecodeError(
            f"Field '{key}' must be a finite integer, got {value!r}", field=key
        ) from e


def _text_list(data: dict[str, Any], key: str) -> tuple[str, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise DecodeError(
            f"Field '{key}' must be a list, got {type(value).__name__}", field=key
        )
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise DecodeError(
                f"Field '{key}[{index}]' must be a string, got {type(item).__name__}",
                field=key,
            )
    return tuple(value)


def _require_map(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise DecodeError(f"{what} must be a JSON object, got {type(data).__name__}")


def decode_product(data: dict[str, Any]) -> Product:
    """Decode a single product map."""
    _require_map(data, "Product")
    return Product(
        id=_integer(data, "id"),
        title=_text(data, "title"),
        description=_text(data, "description"),
        price=_number(data, "price"),
        discount_percentage=_number(data, "discountPercentage"),
        rating=_number(data, "rating"),
        stock=_integer(data, "stock"),
        brand=_text(data, "brand"),
        category=_text(data, "category"),
        thumbnail=_text(data, "thumbnail"),
        images=_text_list(data, "images"),
    )


def decode_products(items: Any) -> list[Product]:
    """Decode a list of product maps in order.

    The first element that fails aborts the whole decode.
    """
    if not isinstance(items, list):
        raise DecodeError(
            f"Field 'products' must be a list, got {type(items).__name__}",
            field="products",
        )
    return [decode_product(item) for item in items]


def decode_product_page(data: dict[str, Any]) -> ProductPage:
    """Decode a product listing response."""
    _require_map(data, "Product page")
    products = data.get("products")
    return ProductPage(
        products=tuple(decode_products(products)) if products is not None else None,
        total=_integer(data, "total"),
        skip=_integer(data, "skip"),
        limit=_integer(data, "limit"),
    )


def encode_product(product: Product) -> dict[str, Any]:
    """Encode a product back into its JSON map."""
    return {
        "id": product.id,
        "title": product.title,
        "description": product.description,
        "price": product.price,
        "discountPercentage": product.discount_percentage,
        "rating": product.rating,
        "stock": product.stock,
        "brand": product.brand,
        "category": product.category,
        "thumbnail": product.thumbnail,
        "images": list(product.images) if product.images is not None else None,
    }


def encode_product_page(page: ProductPage) -> dict[str, Any]:
    return {
        "products": (
            [encode_product(p) for p in page.products]
            if page.products is not None
            else None
        ),
        "total": page.total,
        "skip": page.skip,
        "limit": page.limit,
    }
