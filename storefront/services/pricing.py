"""
Price normalization and cart arithmetic.

Every amount past the catalog boundary is a whole number of rupees.
Formatted strings such as "₹2,500" are converted once, on ingestion.
"""

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Optional

# Default cart policy
FREE_SHIPPING_THRESHOLD = 1999
SHIPPING_FEE = 99
TAX_RATE = 0.18

_NON_DIGITS = re.compile(r"[^\d]")
_FRACTION = re.compile(r"(?<=\d)\.")


def to_amount(price: Any) -> int:
    """
    Convert a price representation to a canonical integer amount.

    Numbers keep their integer part. Strings lose any fractional part,
    then every character that is not a digit. Anything that does not
    yield a number becomes 0 instead of raising.

    Examples:
        "₹2,500" -> 2500, 2500 -> 2500, "2500.00" -> 2500, "abc" -> 0
    """
    if isinstance(price, bool) or price is None:
        return 0

    if isinstance(price, int):
        return price

    if isinstance(price, (Real, Decimal)):
        try:
            if not math.isfinite(price):
                return 0
        except (TypeError, ValueError):
            return 0
        return int(price)

    if isinstance(price, str):
        fraction = _FRACTION.search(price)
        whole = price[: fraction.start()] if fraction else price
        digits = _NON_DIGITS.sub("", whole)
        return int(digits) if digits else 0

    return 0


def line_total(unit_price: int, quantity: int) -> int:
    return unit_price * quantity


def subtotal(lines: Iterable[Any]) -> int:
    """Sum of unit price x quantity"""
    return sum(line_total(line.unit_price, line.quantity) for line in lines)


def item_count(lines: Iterable[Any]) -> int:
    """Sum of quantities"""
    return sum(line.quantity for line in lines)


def savings(lines: Iterable[Any]) -> int:
    """Markdown savings for lines that carry an original price"""
    total = 0
    for line in lines:
        if line.original_price is None:
            continue
        total += max(0, line.original_price - line.unit_price) * line.quantity
    return total


def shipping_fee(amount: int, threshold: int, fee: int) -> int:
    """Flat fee below the free-shipping threshold; nothing to ship is free"""
    if amount <= 0 or amount >= threshold:
        return 0
    return fee


def tax(amount: int, rate: float) -> float:
    return round(amount * rate, 2)


def coupon_discount(amount: int, coupon: Optional[Any]) -> int:
    """
    Discount granted by a coupon, never more than the amount itself.

    A flat discount_amount wins over discount_percent when both are set.
    """
    if coupon is None or amount <= 0:
        return 0

    if coupon.discount_amount is not None:
        discount = coupon.discount_amount
    elif coupon.discount_percent is not None:
        discount = int(amount * coupon.discount_percent / 100)
    else:
        discount = 0

    return min(max(discount, 0), amount)


def order_total(amount: int, discount: int, shipping: int, tax_amount: float) -> float:
    return round(amount - discount + shipping + tax_amount, 2)
