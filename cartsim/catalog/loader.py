"""
Catalog loader for the flat category and product files.

Formats (comma-delimited, one record per line, no header row):
- category file: <integer id>,<name>
- product file:  <integer id>,<name>,<decimal price>,<description>,<integer category id>

A malformed line is skipped on its own; the rest of the file still loads.
Products whose category id matches no loaded category are dropped. An
unreadable file is logged and yields an empty list so the shop can still start
with whatever did load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from cartsim.validation import to_decimal, to_int

from .models import Catalog, Category, Product

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

CATEGORY_FIELDS = 2
PRODUCT_FIELDS = 5


def _read_records(path: PathLike, expected_fields: int) -> Iterator[Tuple[int, List[str]]]:
    """Yield (line number, stripped fields) for lines with the expected field count."""
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            parts = [p.strip() for p in line.rstrip("\r\n").split(",")]
            if len(parts) != expected_fields:
                logger.debug("%s:%d: expected %d fields, got %d; skipped", path, lineno, expected_fields, len(parts))
                continue
            yield lineno, parts


def load_categories(path: PathLike) -> List[Category]:
    """Load categories from a `<id>,<name>` file."""
    categories: List[Category] = []
    seen: set[int] = set()
    try:
        for lineno, (raw_id, name) in _read_records(path, CATEGORY_FIELDS):
            try:
                category_id = to_int(raw_id)
            except ValueError:
                logger.debug("%s:%d: category id %r is not an integer; skipped", path, lineno, raw_id)
                continue
            if category_id in seen:
                logger.warning("%s:%d: duplicate category id %d; keeping the first", path, lineno, category_id)
                continue
            seen.add(category_id)
            categories.append(Category(id=category_id, name=name))
    except OSError as e:
        logger.error("Error reading categories file: %s", e)

    logger.info("Loaded %d categories from %s", len(categories), path)
    return categories


def load_products(path: PathLike, categories: Iterable[Category]) -> List[Product]:
    """Load products from a `<id>,<name>,<price>,<description>,<category id>` file."""
    by_id: Dict[int, Category] = {}
    for c in categories:
        by_id.setdefault(c.id, c)

    products: List[Product] = []
    seen: set[int] = set()
    try:
        for lineno, (raw_id, name, raw_price, description, raw_category) in _read_records(path, PRODUCT_FIELDS):
            try:
                product_id = to_int(raw_id)
                price = to_decimal(raw_price)
                category_id = to_int(raw_category)
            except ValueError:
                logger.debug("%s:%d: unparsable product record; skipped", path, lineno)
                continue
            if price < 0:
                logger.debug("%s:%d: invalid price %s; skipped", path, lineno, raw_price)
                continue
            category = by_id.get(category_id)
            if category is None:
                logger.debug("%s:%d: unknown category id %d; skipped", path, lineno, category_id)
                continue
            if product_id in seen:
                logger.warning("%s:%d: duplicate product id %d; keeping the first", path, lineno, product_id)
                continue
            seen.add(product_id)
            products.append(Product(id=product_id, name=name, price=price, description=description, category=category))
    except OSError as e:
        logger.error("Error reading products file: %s", e)

    logger.info("Loaded %d products from %s", len(products), path)
    return products


def load_catalog(categories_path: PathLike, products_path: PathLike) -> Catalog:
    """Load both catalog files. Products are resolved against the loaded categories."""
    categories = load_categories(categories_path)
    products = load_products(products_path, categories)
    return Catalog(categories=categories, products=products)
