"""
Shopping cart: line items, totals, expiry and recommendations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Tuple

from cartsim.catalog.models import Product
from cartsim.errors import InvalidQuantityError
from cartsim.validation import MAX_QUANTITY

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_MINUTES = 30
DEFAULT_RECOMMENDATION_LIMIT = 3

Clock = Callable[[], datetime]


@dataclass
class CartItem:
    """A single line item in the shopping cart."""

    product: Product
    quantity: int

    def total_price(self) -> Decimal:
        return self.product.price * self.quantity


class Cart:
    """Shopping cart that keeps items in insertion order.

    At most one line exists per product id; adding a product that is already
    in the cart increases that line's quantity. The expiration time is fixed
    when the cart is created and is only consulted at checkout.
    """

    def __init__(self, expiration_minutes: int = DEFAULT_EXPIRATION_MINUTES, clock: Optional[Clock] = None):
        self._clock: Clock = clock or datetime.now
        self._items: List[CartItem] = []
        self.created_at = self._clock()
        self.expiration_time = self.created_at + timedelta(minutes=expiration_minutes)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Tuple[CartItem, ...]:
        return tuple(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def get_item(self, product_id: int) -> Optional[CartItem]:
        return next((i for i in self._items if i.product.id == product_id), None)

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """Add `quantity` of `product`, merging with an existing line if present."""
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        existing = self.get_item(product.id)
        current = existing.quantity if existing is not None else 0
        if current + quantity > MAX_QUANTITY:
            raise InvalidQuantityError(quantity, f"Quantity per item cannot exceed {MAX_QUANTITY}")

        if existing is not None:
            existing.quantity += quantity
            logger.debug("Cart: %s quantity now %d", product.name, existing.quantity)
            return existing

        item = CartItem(product=product, quantity=quantity)
        self._items.append(item)
        logger.debug("Cart: added %d x %s", quantity, product.name)
        return item

    def remove_item(self, product_id: int) -> int:
        """Remove every line for `product_id`. Returns how many lines were removed."""
        before = len(self._items)
        self._items = [i for i in self._items if i.product.id != product_id]
        removed = before - len(self._items)
        if removed:
            logger.debug("Cart: removed product %d", product_id)
        return removed

    def calculate_total(self) -> Decimal:
        return sum((i.total_price() for i in self._items), Decimal("0"))

    def is_expired(self) -> bool:
        return self._clock() > self.expiration_time

    def recommend_products(self, catalog: Iterable[Product], limit: int = DEFAULT_RECOMMENDATION_LIMIT) -> List[Product]:
        """First `limit` catalog products not already in the cart, in catalog order."""
        in_cart = {i.product.id for i in self._items}
        picks: List[Product] = []
        for product in catalog:
            if len(picks) >= limit:
                break
            if product.id not in in_cart:
                picks.append(product)
        return picks
