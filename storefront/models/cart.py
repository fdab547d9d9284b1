"""Cart models for the storefront"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional

from .summary import OrderSummary


def line_key(product_id: str, size: str) -> str:
    """Composite key of a cart line: one line per product and size"""
    return f"{product_id}-{size}"


class CartLineItem(BaseModel):
    """One product and size in the cart"""
    product_id: str
    name: str
    brand: str
    image_url: Optional[str] = None
    slug: str
    size: str
    unit_price: int = Field(ge=0)
    original_price: Optional[int] = None
    quantity: int = Field(ge=1)
    in_stock: bool = True

    @computed_field
    @property
    def key(self) -> str:
        return line_key(self.product_id, self.size)

    @computed_field
    @property
    def total_price(self) -> int:
        return self.unit_price * self.quantity


class WishlistItem(BaseModel):
    """Product saved for later"""
    product_id: str
    name: str
    brand: str
    price: int = 0
    image_url: Optional[str] = None
    slug: str


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    slug: str
    size: str = Field(min_length=1)
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity (zero or less removes it)"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartLineItem]
    summary: OrderSummary
    message: Optional[str] = None


class CartBadgeResponse(BaseModel):
    """Cart count shown in the header"""
    count: int
    refreshed: int


class WishlistResponse(BaseModel):
    """Wishlist API response"""
    items: list[WishlistItem]
    message: Optional[str] = None
