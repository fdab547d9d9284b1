"""Cart API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    CartBadgeResponse,
    WishlistResponse,
)
from ..models.coupon import ApplyCouponRequest
from ..models.summary import OrderSummary
from ..core.dependencies import Storefront, get_storefront
from ..core.events import CART_UPDATED
from ..services.summary import build_order_summary

router = APIRouter(prefix="/api/cart", tags=["Cart"])
wishlist_router = APIRouter(prefix="/api/wishlist", tags=["Wishlist"])


def order_summary(store: Storefront) -> OrderSummary:
    """Summary of the cart and home-trial bag under the configured policy"""
    return build_order_summary(
        store.cart.lines,
        trial_item_count=store.trial.item_count,
        coupon=store.cart.coupon,
        free_shipping_threshold=store.settings.free_shipping_threshold,
        shipping_fee=store.settings.shipping_fee,
        tax_rate=store.settings.tax_rate,
    )


def cart_response(store: Storefront, message: Optional[str] = None) -> CartResponse:
    return CartResponse(
        items=store.cart.lines,
        summary=order_summary(store),
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(store: Storefront = Depends(get_storefront)):
    """Get the cart with its order summary"""
    return cart_response(store)


@router.get("/summary", response_model=OrderSummary)
async def get_summary(store: Storefront = Depends(get_storefront)):
    """Get the order summary only"""
    return order_summary(store)


@router.get("/badge", response_model=CartBadgeResponse)
async def get_badge(store: Storefront = Depends(get_storefront)):
    """Cart count for the header badge"""
    return CartBadgeResponse(count=store.badge.count, refreshed=store.badge.refreshed)


@router.post("/reload", response_model=CartResponse)
async def reload_cart(store: Storefront = Depends(get_storefront)):
    """Re-read persisted cart and bag, e.g. when the tab regains focus"""
    store.cart.reload()
    store.trial.reload()
    store.wishlist.reload()
    store.signals.emit(CART_UPDATED, store.cart)
    return cart_response(store, message="Cart reloaded")


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    store: Storefront = Depends(get_storefront),
):
    """Add an item to the cart"""
    product = store.products.get_product(request.slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if not product.offers_size(request.size):
        raise HTTPException(
            status_code=400,
            detail=f"Size {request.size} not available. Available: {', '.join(product.sizes)}",
        )

    store.cart.add_item(product, request.size, request.quantity)
    return cart_response(
        store,
        message=f"Added {request.quantity}x {product.name} ({request.size}) to cart",
    )


@router.put("/items/{key}", response_model=CartResponse)
async def update_cart_item(
    key: str,
    request: UpdateCartItemRequest,
    store: Storefront = Depends(get_storefront),
):
    """Update item quantity in cart"""
    if not store.cart.get_line(key):
        raise HTTPException(status_code=404, detail="Item not in cart")

    line = store.cart.update_quantity(key, request.quantity)
    return cart_response(store, message="Cart updated" if line else "Item removed")


@router.delete("/items/{key}", response_model=CartResponse)
async def remove_from_cart(key: str, store: Storefront = Depends(get_storefront)):
    """Remove an item from the cart"""
    removed = store.cart.remove_item(key)
    return cart_response(store, message="Item removed" if removed else "Item not in cart")


@router.post("/items/{key}/wishlist", response_model=CartResponse)
async def move_to_wishlist(key: str, store: Storefront = Depends(get_storefront)):
    """Move an item from the cart to the wishlist"""
    if not store.cart.move_to_wishlist(key):
        raise HTTPException(status_code=404, detail="Item not in cart")
    return cart_response(store, message="Moved to wishlist")


@router.delete("", response_model=CartResponse)
async def clear_cart(store: Storefront = Depends(get_storefront)):
    """Clear all items from cart"""
    store.cart.clear()
    return cart_response(store, message="Cart cleared")


@router.post("/coupon", response_model=CartResponse)
async def apply_coupon(
    request: ApplyCouponRequest,
    store: Storefront = Depends(get_storefront),
):
    """Apply a promotion code"""
    coupon = store.coupons.get_coupon(request.code)
    if not coupon:
        raise HTTPException(status_code=404, detail="Coupon not found")

    store.cart.apply_coupon(coupon)
    return cart_response(store, message=f"Coupon {coupon.code} applied")


@router.delete("/coupon", response_model=CartResponse)
async def remove_coupon(store: Storefront = Depends(get_storefront)):
    """Remove the applied promotion code"""
    removed = store.cart.remove_coupon()
    return cart_response(store, message="Coupon removed" if removed else "No coupon applied")


@wishlist_router.get("", response_model=WishlistResponse)
async def get_wishlist(store: Storefront = Depends(get_storefront)):
    """Get saved products"""
    return WishlistResponse(items=store.wishlist.items)


@wishlist_router.delete("/{slug}", response_model=WishlistResponse)
async def remove_from_wishlist(slug: str, store: Storefront = Depends(get_storefront)):
    """Remove a saved product"""
    if not store.wishlist.remove(slug):
        raise HTTPException(status_code=404, detail="Product not in wishlist")
    return WishlistResponse(items=store.wishlist.items, message="Removed from wishlist")
