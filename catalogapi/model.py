from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    title: str | None = None
    description: str | None = None
    price: int | float | None = None
    discount_percentage: int | float | None = None
    rating: int | float | None = None
    stock: int | None = None
    brand: str | None = None
    category: str | None = None
    thumbnail: str | None = None
    images: tuple[str, ...] | None = None


class ProductPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    products: tuple[Product, ...] | None = None
    total: int | None = None
    skip: int | None = None
    limit: int | None = None
