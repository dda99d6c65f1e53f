#!/usr/bin/env python3
"""
Run the interactive shopping cart simulator in the terminal.

- load categories and products from the flat catalog files
- open a cart (expires after the configured number of minutes)
- browse, add/remove items, view recommendations and check out

Usage (from repo root):
  python scripts/run_shop.py
  python scripts/run_shop.py --categories data/category.txt --products data/inventory.txt
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from cartsim.cart import Cart, Checkout
from cartsim.catalog import load_catalog
from cartsim.shell import ShoppingSession
from cartsim.utils.config_loader import load_shop_config, resolve_path

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="In-memory shopping cart simulator.")
    parser.add_argument("--config", type=Path, default=None, help="Path to shop_config.yml")
    parser.add_argument("--categories", type=str, default=None, help="Override the category file path")
    parser.add_argument("--products", type=str, default=None, help="Override the product file path")
    parser.add_argument(
        "--strict-input",
        action="store_true",
        help="Stop on a non-numeric product id or quantity instead of re-prompting",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    config_path = args.config
    if config_path is None and os.getenv("CARTSIM_CONFIG"):
        config_path = Path(os.environ["CARTSIM_CONFIG"])
    cfg = load_shop_config(config_path)

    categories_path = resolve_path(args.categories or os.getenv("CARTSIM_CATEGORIES_FILE") or cfg.catalog.categories_path)
    products_path = resolve_path(args.products or os.getenv("CARTSIM_PRODUCTS_FILE") or cfg.catalog.products_path)

    catalog = load_catalog(categories_path, products_path)
    if not catalog.products:
        logger.warning("Catalog is empty; check %s and %s", categories_path, products_path)

    session = ShoppingSession(
        catalog=catalog,
        cart=Cart(expiration_minutes=cfg.cart.expiration_minutes),
        checkout=Checkout(discount=cfg.checkout.discount, tax_rate=cfg.checkout.tax_rate),
        recommendation_limit=cfg.cart.recommendation_limit,
        strict_input=args.strict_input or cfg.session.strict_input,
    )
    session.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
