"""
Console front end for the cart simulator.
"""
from .session import ShoppingSession

__all__ = ["ShoppingSession"]
