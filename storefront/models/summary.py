"""Order summary models for cart and checkout views"""

from pydantic import BaseModel
from typing import Optional

from .trial import TrialPhase


class OrderSummary(BaseModel):
    """Totals shown beside the cart"""
    subtotal: int
    discount: int
    shipping_fee: int
    tax: float
    total: float
    savings: int
    total_item_count: int
    coupon_code: Optional[str] = None


class TrialFeeSummary(BaseModel):
    """Fees charged up front for a home trial"""
    item_count: int
    service_fee: int
    deposit_per_item: int
    total_deposit: int
    total_payable: int
    is_valid_trial: bool
    selection_message: Optional[str] = None


class BillingSummary(BaseModel):
    """Final bill once the trial is over"""
    service_fee: int
    kept_item_price: int
    security_deposit: int
    total_due: int


class AddressGateResponse(BaseModel):
    """Whether the buyer may move on to address capture"""
    allowed: bool
    item_count: int


class PaymentResponse(BaseModel):
    """Response from the final billing payment"""
    success: bool
    phase: TrialPhase
    billing: BillingSummary
    message: Optional[str] = None
