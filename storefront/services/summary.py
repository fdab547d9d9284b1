"""
Order summary projections.

Everything here is a pure function of store contents and fee settings;
nothing is cached between calls.
"""

from typing import Iterable, Optional

from ..models.cart import CartLineItem
from ..models.coupon import Coupon
from ..models.summary import OrderSummary, TrialFeeSummary, BillingSummary
from ..models.trial import HomeTrialItem
from . import pricing


def build_order_summary(
    lines: Iterable[CartLineItem],
    trial_item_count: int = 0,
    coupon: Optional[Coupon] = None,
    free_shipping_threshold: int = pricing.FREE_SHIPPING_THRESHOLD,
    shipping_fee: int = pricing.SHIPPING_FEE,
    tax_rate: float = pricing.TAX_RATE,
) -> OrderSummary:
    """Cart totals plus the combined cart and home-trial item count"""
    lines = list(lines)
    subtotal = pricing.subtotal(lines)
    discount = pricing.coupon_discount(subtotal, coupon)
    shipping = pricing.shipping_fee(subtotal, free_shipping_threshold, shipping_fee)
    tax = pricing.tax(subtotal, tax_rate)

    return OrderSummary(
        subtotal=subtotal,
        discount=discount,
        shipping_fee=shipping,
        tax=tax,
        total=pricing.order_total(subtotal, discount, shipping, tax),
        savings=pricing.savings(lines),
        total_item_count=pricing.item_count(lines) + trial_item_count,
        coupon_code=coupon.code if coupon else None,
    )


def home_trial_fees(
    trial_item_count: int,
    service_fee: int,
    deposit_per_item: int,
    is_valid_trial: bool = False,
    selection_message: Optional[str] = None,
) -> TrialFeeSummary:
    """Service fee plus a refundable deposit for every item in the bag"""
    total_deposit = deposit_per_item * trial_item_count
    return TrialFeeSummary(
        item_count=trial_item_count,
        service_fee=service_fee,
        deposit_per_item=deposit_per_item,
        total_deposit=total_deposit,
        total_payable=service_fee + total_deposit,
        is_valid_trial=is_valid_trial,
        selection_message=selection_message,
    )


def kept_item_price(trial_items: list[HomeTrialItem], fallback: int) -> int:
    """
    Price of the item billed after the trial.

    Only the first item in the bag is billed; the buyer cannot yet pick
    which items they kept.
    """
    if not trial_items:
        return fallback
    return pricing.to_amount(trial_items[0].price)


def trial_billing(service_fee: int, kept_price: int, security_deposit: int) -> BillingSummary:
    """Final bill, never below zero even when the deposit exceeds the purchase"""
    return BillingSummary(
        service_fee=service_fee,
        kept_item_price=kept_price,
        security_deposit=security_deposit,
        total_due=max(0, service_fee + kept_price - security_deposit),
    )
