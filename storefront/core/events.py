"""Named "updated" signals broadcast after a store persists"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

CART_UPDATED = "ecommerce-cart-updated"
TRIAL_UPDATED = "home-trial-updated"

Handler = Callable[[Any], None]


class SignalBus:
    """
    Routes signals to the handlers connected to them.

    Handlers are called in connection order. A failing handler is logged
    and does not stop the others or the action that emitted the signal.
    """

    def __init__(self):
        self._handlers: dict[str, list[Handler]] = {}

    def connect(self, signal: str, handler: Handler) -> "SignalBus":
        """Connect a handler to a signal"""
        self._handlers.setdefault(signal, []).append(handler)
        return self

    def disconnect(self, signal: str, handler: Handler) -> bool:
        """Disconnect a handler, returning False if it was not connected"""
        handlers = self._handlers.get(signal, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def emit(self, signal: str, sender: Any = None) -> int:
        """Emit a signal, returning the number of handlers that succeeded"""
        delivered = 0
        for handler in list(self._handlers.get(signal, [])):
            try:
                handler(sender)
                delivered += 1
            except Exception:
                logger.exception(f"Handler for {signal} failed")
        return delivered
