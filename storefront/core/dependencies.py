"""
Store wiring for the API.

One storage backend, signal bus and set of stores per process. Routes
receive them through FastAPI dependencies so tests can swap them out.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .config import Settings, get_settings
from .events import SignalBus
from ..database.storage import SlotStorage, create_storage
from ..database.products import ProductDatabase
from ..database.coupons import CouponDatabase
from ..database.wishlists import WishlistStore
from ..database.carts import CartStore
from ..database.trials import HomeTrialStore
from ..services.badge import CartBadge


@dataclass
class Storefront:
    """Everything the routes read from or mutate"""
    settings: Settings
    signals: SignalBus
    products: ProductDatabase
    coupons: CouponDatabase
    wishlist: WishlistStore
    cart: CartStore
    trial: HomeTrialStore
    badge: CartBadge


def build_storefront(
    settings: Settings,
    storage: Optional[SlotStorage] = None,
) -> Storefront:
    """Create the stores, restoring each from its slot"""
    storage = storage or create_storage(settings.storage_dir)
    signals = SignalBus()
    wishlist = WishlistStore(storage)
    cart = CartStore(
        storage,
        signals=signals,
        wishlist=wishlist,
        free_shipping_threshold=settings.free_shipping_threshold,
        shipping_fee=settings.shipping_fee,
        tax_rate=settings.tax_rate,
    )
    trial = HomeTrialStore(
        storage,
        signals=signals,
        min_items=settings.trial_min_items,
        max_items=settings.trial_max_items,
    )
    return Storefront(
        settings=settings,
        signals=signals,
        products=ProductDatabase(),
        coupons=CouponDatabase(),
        wishlist=wishlist,
        cart=cart,
        trial=trial,
        badge=CartBadge(signals, initial_count=cart.total_item_count),
    )


@lru_cache()
def get_storefront() -> Storefront:
    """Get the process-wide storefront"""
    return build_storefront(get_settings())
