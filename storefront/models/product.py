"""Product models for the storefront catalog"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from enum import Enum

from ..services.pricing import to_amount


class ProductCategory(str, Enum):
    SAREES = "sarees"
    LEHENGAS = "lehengas"
    KURTAS = "kurtas"
    SHERWANIS = "sherwanis"
    ACCESSORIES = "accessories"


class Product(BaseModel):
    """Product reference supplied by the catalog"""
    id: str
    name: str
    brand: str
    slug: str
    description: str = ""
    category: ProductCategory
    image_url: Optional[str] = None
    sizes: list[str] = Field(default_factory=list)
    price: int = Field(ge=0)
    original_price: Optional[int] = None
    in_stock: bool = True

    class Config:
        from_attributes = True

    @field_validator("price", mode="before")
    @classmethod
    def normalize_price(cls, value):
        return to_amount(value)

    @field_validator("original_price", mode="before")
    @classmethod
    def normalize_original_price(cls, value):
        if value is None or value == "":
            return None
        return to_amount(value)

    def offers_size(self, size: str) -> bool:
        """Products without a size chart accept any size label"""
        return not self.sizes or size in self.sizes


class ProductListResponse(BaseModel):
    """Response from product listing"""
    products: list[Product]
    total: int
