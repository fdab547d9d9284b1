"""Coupon models supplied by the promotions collaborator"""

from pydantic import BaseModel, Field
from typing import Optional


class Coupon(BaseModel):
    """A promotion code with a flat or percentage discount"""
    code: str
    description: str = ""
    discount_amount: Optional[int] = Field(default=None, ge=0)
    discount_percent: Optional[float] = Field(default=None, ge=0, le=100)


class ApplyCouponRequest(BaseModel):
    """Request to apply a coupon to the cart"""
    code: str = Field(min_length=1)
