"""
Product catalog: categories, products and the flat-file loader.

The catalog is loaded once at startup and treated as read-only afterwards;
carts hold references to its products but never change them.
"""
from .models import Catalog, Category, Product
from .loader import load_catalog, load_categories, load_products

__all__ = [
    "Catalog",
    "Category",
    "Product",
    "load_catalog",
    "load_categories",
    "load_products",
]
