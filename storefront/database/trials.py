"""Home-trial bag storage for the storefront"""

import logging
from typing import Optional

from pydantic import TypeAdapter

from ..core.events import SignalBus, TRIAL_UPDATED
from ..models.product import Product
from ..models.trial import HomeTrialItem, TrialPhase
from .storage import SlotStorage, TRIAL_SLOT, load_slot, save_slot

logger = logging.getLogger(__name__)

MIN_TRIAL_ITEMS = 5
MAX_TRIAL_ITEMS = 10

_items_adapter = TypeAdapter(list[HomeTrialItem])


def is_valid_trial(
    item_count: int,
    min_items: int = MIN_TRIAL_ITEMS,
    max_items: int = MAX_TRIAL_ITEMS,
) -> bool:
    """A trial may proceed to checkout with 5 to 10 items"""
    return min_items <= item_count <= max_items


def trial_phase(
    item_count: int,
    min_items: int = MIN_TRIAL_ITEMS,
    max_items: int = MAX_TRIAL_ITEMS,
) -> TrialPhase:
    if item_count == 0:
        return TrialPhase.EMPTY
    if is_valid_trial(item_count, min_items, max_items):
        return TrialPhase.READY
    return TrialPhase.SELECTING


def selection_message(
    item_count: int,
    min_items: int = MIN_TRIAL_ITEMS,
    max_items: int = MAX_TRIAL_ITEMS,
) -> Optional[str]:
    """Feedback shown while the bag is outside the validity window"""
    if item_count < min_items:
        return f"Add {min_items - item_count} more item(s)"
    if item_count > max_items:
        return f"Remove {item_count - max_items} item(s)"
    return None


class HomeTrialStore:
    """
    Items selected for a try-before-buy delivery.

    The bag holds at most MAX_TRIAL_ITEMS entries, one per product and
    size. Additions that would break either rule are ignored; callers
    check the returned flag and tell the buyer.
    """

    def __init__(
        self,
        storage: SlotStorage,
        signals: Optional[SignalBus] = None,
        min_items: int = MIN_TRIAL_ITEMS,
        max_items: int = MAX_TRIAL_ITEMS,
    ):
        self.storage = storage
        self.signals = signals or SignalBus()
        self.min_items = min_items
        self.max_items = max_items
        self._items: list[HomeTrialItem] = []
        self.reload()

    def reload(self) -> None:
        """Restore the bag from storage"""
        self._items = load_slot(self.storage, TRIAL_SLOT, _items_adapter, [])

    @property
    def items(self) -> list[HomeTrialItem]:
        return list(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def is_valid_trial(self) -> bool:
        return is_valid_trial(self.item_count, self.min_items, self.max_items)

    @property
    def phase(self) -> TrialPhase:
        return trial_phase(self.item_count, self.min_items, self.max_items)

    @property
    def selection_message(self) -> Optional[str]:
        return selection_message(self.item_count, self.min_items, self.max_items)

    @property
    def is_full(self) -> bool:
        return self.item_count >= self.max_items

    def contains(self, product_id: str, size: str) -> bool:
        return any(
            item.product_id == product_id and item.size == size
            for item in self._items
        )

    def add_to_trial(self, product: Product, size: str) -> bool:
        """Add a product in a size, returning False if the bag refused it"""
        if self.is_full:
            logger.info(f"Home trial full, ignoring {product.id} ({size})")
            return False

        if self.contains(product.id, size):
            return False

        item = HomeTrialItem(
            product_id=product.id,
            name=product.name,
            brand=product.brand,
            image_url=product.image_url,
            slug=product.slug,
            price=product.price,
            size=size,
        )
        self._items = self._items + [item]
        self._persist()
        return True

    def remove_from_trial(self, product_id: str, size: str) -> bool:
        if not self.contains(product_id, size):
            return False
        self._items = [
            item for item in self._items
            if not (item.product_id == product_id and item.size == size)
        ]
        self._persist()
        return True

    def clear_trial(self) -> None:
        """Empty the bag once checkout has completed"""
        self._items = []
        self._persist()

    def _persist(self) -> None:
        if save_slot(self.storage, TRIAL_SLOT, _items_adapter, self._items):
            self.signals.emit(TRIAL_UPDATED, self)
        else:
            logger.warning("Home trial changed but could not be persisted")
