"""Checkout step routes for the home-trial flow"""

import asyncio
import logging
from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import CartResponse
from ..models.summary import (
    AddressGateResponse,
    BillingSummary,
    PaymentResponse,
    TrialFeeSummary,
)
from ..models.trial import TrialPhase
from ..core.dependencies import Storefront, get_storefront
from ..services.summary import home_trial_fees, kept_item_price, trial_billing
from .cart import cart_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


def billing_summary(store: Storefront) -> BillingSummary:
    settings = store.settings
    return trial_billing(
        service_fee=settings.trial_service_fee,
        kept_price=kept_item_price(store.trial.items, settings.default_kept_item_price),
        security_deposit=settings.trial_security_deposit,
    )


@router.get("/service-fees", response_model=TrialFeeSummary)
async def service_fees(store: Storefront = Depends(get_storefront)):
    """Fee breakdown for the current home-trial bag"""
    return home_trial_fees(
        trial_item_count=store.trial.item_count,
        service_fee=store.settings.trial_service_fee,
        deposit_per_item=store.settings.trial_deposit_per_item,
        is_valid_trial=store.trial.is_valid_trial,
        selection_message=store.trial.selection_message,
    )


@router.get("/address", response_model=AddressGateResponse)
async def address_gate(store: Storefront = Depends(get_storefront)):
    """
    Gate between the fee summary and address capture.

    Only a bag inside the validity window may continue.
    """
    if not store.trial.is_valid_trial:
        raise HTTPException(
            status_code=409,
            detail=(
                f"Please select between {store.trial.min_items} and "
                f"{store.trial.max_items} items for a Home Trial. "
                f"{store.trial.selection_message}"
            ),
        )
    return AddressGateResponse(allowed=True, item_count=store.trial.item_count)


@router.get("/billing", response_model=BillingSummary)
async def billing(store: Storefront = Depends(get_storefront)):
    """Final bill after the trial"""
    return billing_summary(store)


@router.post("/billing/pay", response_model=PaymentResponse)
async def pay(store: Storefront = Depends(get_storefront)):
    """
    Settle the final bill.

    Payment is simulated and always succeeds. The home-trial bag is
    cleared once, here, after the bill has been computed.
    """
    summary = billing_summary(store)

    delay = store.settings.payment_delay_seconds
    if delay > 0:
        await asyncio.sleep(delay)

    store.trial.clear_trial()
    logger.info(f"Home trial billed: ₹{summary.total_due}")

    return PaymentResponse(
        success=True,
        phase=TrialPhase.COMPLETED,
        billing=summary,
        message="Payment successful!",
    )


@router.post("/clear-all", response_model=CartResponse)
async def clear_all(store: Storefront = Depends(get_storefront)):
    """Empty both the cart and the home-trial bag"""
    store.cart.clear()
    store.trial.clear_trial()
    return cart_response(store, message="Cart and Home Trial bag cleared")
