# Storefront Models

from .product import Product, ProductCategory, ProductListResponse
from .coupon import Coupon, ApplyCouponRequest
from .trial import TrialPhase, HomeTrialItem, AddToTrialRequest, TrialResponse
from .summary import (
    OrderSummary,
    TrialFeeSummary,
    BillingSummary,
    AddressGateResponse,
    PaymentResponse,
)
from .cart import (
    line_key,
    CartLineItem,
    WishlistItem,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    CartBadgeResponse,
    WishlistResponse,
)

__all__ = [
    "Product",
    "ProductCategory",
    "ProductListResponse",
    "Coupon",
    "ApplyCouponRequest",
    "TrialPhase",
    "HomeTrialItem",
    "AddToTrialRequest",
    "TrialResponse",
    "OrderSummary",
    "TrialFeeSummary",
    "BillingSummary",
    "AddressGateResponse",
    "PaymentResponse",
    "line_key",
    "CartLineItem",
    "WishlistItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "CartBadgeResponse",
    "WishlistResponse",
]
