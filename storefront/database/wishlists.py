"""Wishlist storage for the storefront"""

from typing import Optional

from pydantic import TypeAdapter

from ..models.cart import CartLineItem, WishlistItem
from .storage import SlotStorage, WISHLIST_SLOT, load_slot, save_slot

_items_adapter = TypeAdapter(list[WishlistItem])


class WishlistStore:
    """Products saved for later, one entry per slug"""

    def __init__(self, storage: SlotStorage):
        self.storage = storage
        self._items: list[WishlistItem] = []
        self.reload()

    def reload(self) -> None:
        self._items = load_slot(self.storage, WISHLIST_SLOT, _items_adapter, [])

    @property
    def items(self) -> list[WishlistItem]:
        return list(self._items)

    def get_item(self, slug: str) -> Optional[WishlistItem]:
        return next((item for item in self._items if item.slug == slug), None)

    def add_from_line(self, line: CartLineItem) -> bool:
        """Save a cart line's product, returning False if already saved"""
        if self.get_item(line.slug):
            return False

        item = WishlistItem(
            product_id=line.product_id,
            name=line.name,
            brand=line.brand,
            price=line.unit_price,
            image_url=line.image_url,
            slug=line.slug,
        )
        self._items = self._items + [item]
        save_slot(self.storage, WISHLIST_SLOT, _items_adapter, self._items)
        return True

    def remove(self, slug: str) -> bool:
        if not self.get_item(slug):
            return False
        self._items = [item for item in self._items if item.slug != slug]
        save_slot(self.storage, WISHLIST_SLOT, _items_adapter, self._items)
        return True
