"""
Checkout pricing: discount then tax, applied to a cart subtotal.

Order matters. Tax is charged on the discounted amount, so a 100.00 subtotal
with 10% off and 5% tax finalizes to 94.50 rather than 95.00.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

Number = Union[int, str, Decimal]

HUNDRED = Decimal("100")
CENTS = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    """Round to cents for display."""
    with localcontext() as ctx:
        # quantize fails once the result has more digits than the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CheckoutSummary:
    subtotal: Decimal
    discount_amount: Decimal
    discounted: Decimal
    tax_amount: Decimal
    total: Decimal


class Checkout:
    def __init__(self, discount: Number = 0, tax_rate: Number = 0):
        self.discount = Decimal(str(discount))
        self.tax_rate = Decimal(str(tax_rate))
        if not (0 <= self.discount <= 100):
            raise ValueError(f"discount must be between 0 and 100 (got {self.discount})")
        if self.tax_rate < 0:
            raise ValueError(f"tax_rate must not be negative (got {self.tax_rate})")

    def apply_discount(self, total: Decimal) -> Decimal:
        return total - (total * self.discount / HUNDRED)

    def apply_tax(self, total: Decimal) -> Decimal:
        return total + (total * self.tax_rate / HUNDRED)

    def finalize_total(self, total: Decimal) -> Decimal:
        """Apply the discount, then tax on the discounted amount."""
        return self.apply_tax(self.apply_discount(total))

    def breakdown(self, subtotal: Decimal) -> CheckoutSummary:
        discounted = self.apply_discount(subtotal)
        total = self.apply_tax(discounted)
        return CheckoutSummary(
            subtotal=subtotal,
            discount_amount=subtotal - discounted,
            discounted=discounted,
            tax_amount=total - discounted,
            total=total,
        )
