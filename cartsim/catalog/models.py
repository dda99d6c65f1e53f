from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Catalog records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Category:
    id: int
    name: str


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: Decimal                       # unit price, never negative
    description: str
    category: Category


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Catalog:
    """Read-only set of categories and products loaded at startup.

    Both sequences keep file order; that order is what browsing and
    recommendations show. They are stored as tuples so the id indexes built
    here stay in step with them.
    """

    categories: Tuple[Category, ...] = ()
    products: Tuple[Product, ...] = ()
    _categories_by_id: Dict[int, Category] = field(init=False, repr=False, compare=False)
    _products_by_id: Dict[int, Product] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "products", tuple(self.products))
        categories_by_id: Dict[int, Category] = {}
        for c in self.categories:
            categories_by_id.setdefault(c.id, c)
        products_by_id: Dict[int, Product] = {}
        for p in self.products:
            products_by_id.setdefault(p.id, p)
        object.__setattr__(self, "_categories_by_id", categories_by_id)
        object.__setattr__(self, "_products_by_id", products_by_id)

    def __iter__(self):
        return iter(self.products)

    def __len__(self) -> int:
        return len(self.products)

    def get_category(self, category_id: int) -> Optional[Category]:
        return self._categories_by_id.get(category_id)

    def get_product(self, product_id: int) -> Optional[Product]:
        return self._products_by_id.get(product_id)

    def products_in_category(self, category_id: int) -> List[Product]:
        """Products belonging to a category, in catalog order."""
        return [p for p in self.products if p.category.id == category_id]
