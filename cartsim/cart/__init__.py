"""
Cart and checkout logic.
"""
from .cart import Cart, CartItem
from .checkout import Checkout, CheckoutSummary, to_money

__all__ = [
    "Cart",
    "CartItem",
    "Checkout",
    "CheckoutSummary",
    "to_money",
]
