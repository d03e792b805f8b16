"""URL paths for the dummyjson product API."""

BASE_URL = "https://dummyjson.com"

POST_LOGIN = "/auth/login"
GET_ALL_PRODUCTS = "/products"


def get_product_by_id(id: str) -> str:
    return f"/products/{id}"
