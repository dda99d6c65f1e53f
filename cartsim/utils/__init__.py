"""
Utility modules for the cart simulator
"""
from .config_loader import ShopConfig, load_shop_config, resolve_path

__all__ = [
    'ShopConfig',
    'load_shop_config',
    'resolve_path',
]
