# API Routes

from .products import router as products_router
from .cart import router as cart_router, wishlist_router
from .trial import router as trial_router
from .checkout import router as checkout_router

__all__ = [
    "products_router",
    "cart_router",
    "wishlist_router",
    "trial_router",
    "checkout_router",
]
