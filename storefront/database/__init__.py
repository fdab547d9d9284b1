# Database modules

from .storage import SlotStorage, MemorySlotStorage, FileSlotStorage, create_storage
from .products import ProductDatabase
from .coupons import CouponDatabase
from .wishlists import WishlistStore
from .carts import CartStore
from .trials import HomeTrialStore, is_valid_trial

__all__ = [
    "SlotStorage",
    "MemorySlotStorage",
    "FileSlotStorage",
    "create_storage",
    "ProductDatabase",
    "CouponDatabase",
    "WishlistStore",
    "CartStore",
    "HomeTrialStore",
    "is_valid_trial",
]
