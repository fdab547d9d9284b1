"""Tests for price normalization and cart arithmetic."""

from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace

import pytest

from storefront.models.coupon import Coupon
from storefront.services import pricing


def _line(unit_price: int, quantity: int, original_price=None):
    return SimpleNamespace(unit_price=unit_price, quantity=quantity, original_price=original_price)


class TestToAmount:
    @pytest.mark.parametrize(
        "price", ["₹2,500", 2500, "2500.00", 2500.0, "Rs. 2,500/-", Decimal("2500"), Decimal("2500.75")]
    )
    def test_formats_normalize_to_same_amount(self, price):
        assert pricing.to_amount(price) == 2500

    @pytest.mark.parametrize("price", ["", "abc", None, "₹", float("nan"), True, [], {}])
    def test_unparseable_input_is_zero(self, price):
        assert pricing.to_amount(price) == 0

    def test_is_idempotent(self):
        once = pricing.to_amount("₹18,500")
        assert pricing.to_amount(once) == once == 18500

    @pytest.mark.parametrize("price", [Decimal("NaN"), Decimal("Infinity"), float("inf")])
    def test_non_finite_numbers_are_zero(self, price):
        assert pricing.to_amount(price) == 0

    def test_other_real_numbers_truncate(self):
        assert pricing.to_amount(Fraction(5001, 2)) == 2500

    def test_fraction_is_dropped(self):
        assert pricing.to_amount("₹1,250.99") == 1250
        assert pricing.to_amount(1250.99) == 1250


class TestTotals:
    def test_subtotal_and_item_count(self):
        lines = [_line(2500, 3), _line(899, 2)]

        assert pricing.subtotal(lines) == 2500 * 3 + 899 * 2
        assert pricing.item_count(lines) == 5

    def test_empty_lines(self):
        assert pricing.subtotal([]) == 0
        assert pricing.item_count([]) == 0
        assert pricing.savings([]) == 0

    def test_savings_only_counts_tracked_original_price(self):
        lines = [_line(2500, 2, original_price=3000), _line(899, 1)]
        assert pricing.savings(lines) == 1000

    def test_savings_ignores_markups(self):
        assert pricing.savings([_line(2500, 1, original_price=2000)]) == 0

    def test_shipping_free_at_threshold(self):
        assert pricing.shipping_fee(1999, threshold=1999, fee=99) == 0
        assert pricing.shipping_fee(5000, threshold=1999, fee=99) == 0

    def test_shipping_charged_below_threshold(self):
        assert pricing.shipping_fee(1998, threshold=1999, fee=99) == 99

    def test_nothing_to_ship(self):
        assert pricing.shipping_fee(0, threshold=1999, fee=99) == 0

    def test_tax(self):
        assert pricing.tax(1000, 0.18) == pytest.approx(180.0)

    def test_order_total(self):
        assert pricing.order_total(1000, 100, 99, 180.0) == pytest.approx(1179.0)


class TestCouponDiscount:
    def test_flat_discount(self):
        coupon = Coupon(code="FLAT", discount_amount=500)
        assert pricing.coupon_discount(2500, coupon) == 500

    def test_percent_discount(self):
        coupon = Coupon(code="PCT", discount_percent=10)
        assert pricing.coupon_discount(2500, coupon) == 250

    def test_discount_capped_at_amount(self):
        coupon = Coupon(code="BIG", discount_amount=5000)
        assert pricing.coupon_discount(899, coupon) == 899

    def test_flat_wins_over_percent(self):
        coupon = Coupon(code="BOTH", discount_amount=100, discount_percent=50)
        assert pricing.coupon_discount(1000, coupon) == 100

    def test_no_coupon_or_empty_cart(self):
        assert pricing.coupon_discount(1000, None) == 0
        assert pricing.coupon_discount(0, Coupon(code="FLAT", discount_amount=500)) == 0
