"""
Shop configuration loader (catalog files, cart expiry, checkout rates, session).
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


class CatalogConfig(BaseModel):
    categories_path: str = "data/category.txt"
    products_path: str = "data/inventory.txt"


class CartConfig(BaseModel):
    expiration_minutes: int = Field(default=30, ge=1)
    recommendation_limit: int = Field(default=3, ge=1)


class CheckoutConfig(BaseModel):
    discount: Decimal = Field(default=Decimal("10"), ge=0, le=100)
    tax_rate: Decimal = Field(default=Decimal("5"), ge=0)


class SessionConfig(BaseModel):
    strict_input: bool = False


class ShopConfig(BaseModel):
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    cart: CartConfig = Field(default_factory=CartConfig)
    checkout: CheckoutConfig = Field(default_factory=CheckoutConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)


def resolve_path(path: str, base: Path = PROJECT_ROOT) -> Path:
    """Resolve a configured path; relative paths are taken from the project root."""
    p = Path(path).expanduser()
    return p if p.is_absolute() else base / p


def load_shop_config(config_path: Optional[Path] = None) -> ShopConfig:
    """
    Load and validate shop configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/shop_config.yml

    Returns:
        Validated ShopConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = PROJECT_ROOT / "config" / "shop_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Shop config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = ShopConfig(**data)
        logger.info("Successfully loaded shop config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Shop config validation failed: %s", e)
        raise
