"""Header cart-count badge kept fresh by the cart "updated" signal"""

import logging

from ..core.events import SignalBus, CART_UPDATED

logger = logging.getLogger(__name__)


class CartBadge:
    """Item count shown in the site header, independent of the cart store"""

    def __init__(self, signals: SignalBus, initial_count: int = 0):
        self.count = initial_count
        self.refreshed = 0
        signals.connect(CART_UPDATED, self.refresh)

    def refresh(self, cart) -> None:
        self.count = cart.total_item_count
        self.refreshed += 1
        logger.debug(f"Cart badge refreshed: {self.count}")
