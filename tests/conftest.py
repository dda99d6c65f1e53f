"""Pytest fixtures for catalog, cart and session tests."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from cartsim.catalog import Catalog, Category, Product


class FakeClock:
    """Controllable clock for expiry tests."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def electronics():
    return Category(id=1, name="Electronics")


@pytest.fixture
def books():
    return Category(id=2, name="Books")


@pytest.fixture
def catalog(electronics, books):
    """Five products across two categories, in a fixed catalog order."""
    products = [
        Product(1, "Mouse", Decimal("9.99"), "Wireless mouse", electronics),
        Product(2, "Cable", Decimal("5.00"), "USB-C cable", electronics),
        Product(3, "Novel", Decimal("12.50"), "Paperback", books),
        Product(4, "Charger", Decimal("24.50"), "65W charger", electronics),
        Product(5, "Atlas", Decimal("30.00"), "World atlas", books),
    ]
    return Catalog(categories=[electronics, books], products=products)
