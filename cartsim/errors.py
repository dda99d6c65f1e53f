"""
Exception types raised by the cart simulator.

The console only recovers from `CartSimError` subclasses; anything else is a
programming error and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


class CartSimError(Exception):
    """Base class for recoverable cart simulator errors."""


class InvalidQuantityError(CartSimError, ValueError):
    """Raised when a cart line quantity is below 1 or above the per-line limit."""

    def __init__(self, quantity: int, message: Optional[str] = None):
        self.quantity = quantity
        super().__init__(message or f"Quantity must be at least 1 (got {quantity})")


@dataclass
class InputValidationError(CartSimError):
    """Exception raised when console input cannot be parsed.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: optional top-level message.
    """

    field_errors: Dict[str, str] = field(default_factory=dict)
    message: str = "Invalid input"

    def __str__(self) -> str:  # pragma: no cover
        return self.message
