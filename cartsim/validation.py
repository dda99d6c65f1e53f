"""Parsing helpers for console input.

The session controller reads every id and quantity as raw text. These helpers
collect problems into an `errors` dict (field -> message) so a single prompt
can report what was wrong; `raise_if_errors` turns that into an
`InputValidationError` the controller recovers from.

With ``strict=True`` the helpers behave like a bare ``int()`` call and let
``ValueError`` escape, which ends the session on malformed input.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Dict, Optional

from cartsim.errors import InputValidationError

# Per-line quantity limit; keeps price x quantity well inside Decimal's default precision.
MAX_QUANTITY = 2**31 - 1

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")


def to_int(text: str) -> int:
    """Convert plain ASCII digits (optionally signed) to int; rejects `1_0`, `1e3` and the like."""
    if not _INT_RE.match(text):
        raise ValueError(f"invalid whole number: {text!r}")
    return int(text)


def to_decimal(text: str) -> Decimal:
    """Convert a plain decimal literal (no exponent, underscores or NaN) to Decimal."""
    if not _DECIMAL_RE.match(text):
        raise ValueError(f"invalid decimal number: {text!r}")
    return Decimal(text)


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def parse_int(
    raw: Any,
    field: str,
    errors: Dict[str, str],
    *,
    label: Optional[str] = None,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
    strict: bool = False,
) -> Optional[int]:
    """Parse a whole number typed at the console.

    Returns None (and records an error) when the value is missing, not a whole
    number or outside the given bounds.
    """
    name = label or field
    value = _strip(raw)
    if strict:
        val = to_int(value)
    else:
        if not value:
            add_error(errors, field, f"{name} is required")
            return None
        try:
            val = to_int(value)
        except ValueError:
            add_error(errors, field, f"{name} must be a whole number")
            return None
    if min_value is not None and val < min_value:
        add_error(errors, field, f"{name} must be at least {min_value}")
        return None
    if max_value is not None and val > max_value:
        add_error(errors, field, f"{name} must be at most {max_value}")
        return None
    return val


def parse_quantity(raw: Any, errors: Dict[str, str], *, strict: bool = False) -> Optional[int]:
    return parse_int(raw, "quantity", errors, label="Quantity", min_value=1, max_value=MAX_QUANTITY, strict=strict)


def raise_if_errors(errors: Dict[str, str], message: str = "Invalid input. Please try again.") -> None:
    if errors:
        raise InputValidationError(field_errors=dict(errors), message=message)
