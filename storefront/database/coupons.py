"""Mock promotions catalog"""

from typing import Optional
from ..models.coupon import Coupon

COUPONS: dict[str, Coupon] = {
    "WELCOME10": Coupon(
        code="WELCOME10",
        description="10% off your first order",
        discount_percent=10,
    ),
    "FESTIVE500": Coupon(
        code="FESTIVE500",
        description="Flat ₹500 off festive wear",
        discount_amount=500,
    ),
    "TRIAL250": Coupon(
        code="TRIAL250",
        description="₹250 off after a home trial",
        discount_amount=250,
    ),
}


class CouponDatabase:
    """In-memory coupon lookup, case-insensitive on code"""

    def __init__(self, coupons: Optional[dict[str, Coupon]] = None):
        self.coupons = {
            code.upper(): coupon
            for code, coupon in (coupons if coupons is not None else COUPONS).items()
        }

    def get_coupon(self, code: str) -> Optional[Coupon]:
        return self.coupons.get(code.strip().upper())
