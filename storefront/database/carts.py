"""Cart storage for the storefront"""

import logging
from typing import Optional

from pydantic import TypeAdapter

from ..core.events import SignalBus, CART_UPDATED
from ..models.cart import CartLineItem, line_key
from ..models.coupon import Coupon
from ..models.product import Product
from ..services import pricing
from .storage import SlotStorage, CART_SLOT, COUPON_SLOT, load_slot, save_slot
from .wishlists import WishlistStore

logger = logging.getLogger(__name__)

_lines_adapter = TypeAdapter(list[CartLineItem])
_coupon_adapter = TypeAdapter(Optional[Coupon])


class CartStore:
    """
    The shopper's cart: one line per product and size.

    State is restored from storage on construction and written back after
    every mutation. Derived totals are computed on each read.
    """

    def __init__(
        self,
        storage: SlotStorage,
        signals: Optional[SignalBus] = None,
        wishlist: Optional[WishlistStore] = None,
        free_shipping_threshold: int = pricing.FREE_SHIPPING_THRESHOLD,
        shipping_fee: int = pricing.SHIPPING_FEE,
        tax_rate: float = pricing.TAX_RATE,
    ):
        self.storage = storage
        self.signals = signals or SignalBus()
        self.wishlist = wishlist
        self.free_shipping_threshold = free_shipping_threshold
        self.flat_shipping_fee = shipping_fee
        self.tax_rate = tax_rate

        self._lines: list[CartLineItem] = []
        self.coupon: Optional[Coupon] = None
        self.reload()

    def reload(self) -> None:
        """Restore lines and coupon from storage"""
        self._lines = load_slot(self.storage, CART_SLOT, _lines_adapter, [])
        self.coupon = load_slot(self.storage, COUPON_SLOT, _coupon_adapter, None)

    @property
    def lines(self) -> list[CartLineItem]:
        return list(self._lines)

    def get_line(self, key: str) -> Optional[CartLineItem]:
        return next((line for line in self._lines if line.key == key), None)

    def add_item(self, product: Product, size: str, quantity: int = 1) -> Optional[CartLineItem]:
        """
        Add a product in a size, merging with an existing line.

        The merged quantity follows update_quantity, so a total of zero or
        less removes the line. A non-positive quantity for a new line is
        ignored.
        """
        key = line_key(product.id, size)
        existing = self.get_line(key)

        if existing:
            return self.update_quantity(key, existing.quantity + quantity)

        if quantity <= 0:
            return None

        line = CartLineItem(
            product_id=product.id,
            name=product.name,
            brand=product.brand,
            image_url=product.image_url,
            slug=product.slug,
            size=size,
            unit_price=product.price,
            original_price=product.original_price,
            quantity=quantity,
            in_stock=product.in_stock,
        )
        self._lines = self._lines + [line]
        self._persist()
        return line

    def update_quantity(self, key: str, quantity: int) -> Optional[CartLineItem]:
        """Set a line's quantity; zero or less removes the line"""
        if quantity <= 0:
            self.remove_item(key)
            return None

        existing = self.get_line(key)
        if not existing:
            return None

        line = existing.model_copy(update={"quantity": quantity})
        self._lines = [line if item.key == key else item for item in self._lines]
        self._persist()
        return line

    def remove_item(self, key: str) -> bool:
        """Remove a line, returning False if it was not in the cart"""
        if not self.get_line(key):
            return False
        self._lines = [item for item in self._lines if item.key != key]
        self._persist()
        return True

    def move_to_wishlist(self, key: str) -> bool:
        """Take a line out of the cart and save its product for later"""
        line = self.get_line(key)
        if not line:
            return False

        if self.wishlist is not None:
            self.wishlist.add_from_line(line)
        return self.remove_item(key)

    def clear(self) -> None:
        """Empty the cart and drop any applied coupon"""
        self._lines = []
        self.coupon = None
        self._persist()

    def apply_coupon(self, coupon: Coupon) -> None:
        self.coupon = coupon
        self._persist()

    def remove_coupon(self) -> bool:
        if self.coupon is None:
            return False
        self.coupon = None
        self._persist()
        return True

    @property
    def subtotal(self) -> int:
        return pricing.subtotal(self._lines)

    @property
    def total_item_count(self) -> int:
        return pricing.item_count(self._lines)

    @property
    def savings(self) -> int:
        return pricing.savings(self._lines)

    @property
    def discount(self) -> int:
        return pricing.coupon_discount(self.subtotal, self.coupon)

    @property
    def shipping_fee(self) -> int:
        return pricing.shipping_fee(self.subtotal, self.free_shipping_threshold, self.flat_shipping_fee)

    @property
    def tax(self) -> float:
        return pricing.tax(self.subtotal, self.tax_rate)

    @property
    def total(self) -> float:
        return pricing.order_total(self.subtotal, self.discount, self.shipping_fee, self.tax)

    def _persist(self) -> None:
        """Write the cart to storage and announce the change"""
        saved = save_slot(self.storage, CART_SLOT, _lines_adapter, self._lines)
        saved = save_slot(self.storage, COUPON_SLOT, _coupon_adapter, self.coupon) and saved
        if saved:
            self.signals.emit(CART_UPDATED, self)
        else:
            logger.warning("Cart changed but could not be persisted")
