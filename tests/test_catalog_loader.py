"""Tests for loading the flat category and product files."""

import dataclasses
import logging
from decimal import Decimal

import pytest

from cartsim.catalog import Category, load_catalog, load_categories, load_products


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_categories_skips_malformed_lines(tmp_path):
    path = write(tmp_path / "category.txt", "1,Electronics\nabc,Electronics\n2,Books,Extra\n3,Garden\n")
    categories = load_categories(path)
    assert [(c.id, c.name) for c in categories] == [(1, "Electronics"), (3, "Garden")]


def test_load_categories_ignores_blank_lines_and_whitespace(tmp_path):
    path = write(tmp_path / "category.txt", "\n 1 , Electronics \n\n2,Books\r\n")
    categories = load_categories(path)
    assert [(c.id, c.name) for c in categories] == [(1, "Electronics"), (2, "Books")]


def test_load_categories_duplicate_id_keeps_first(tmp_path, caplog):
    path = write(tmp_path / "category.txt", "1,Electronics\n1,Gadgets\n")
    with caplog.at_level(logging.WARNING):
        categories = load_categories(path)
    assert [c.name for c in categories] == ["Electronics"]
    assert "duplicate category id" in caplog.text


def test_missing_category_file_is_logged_not_raised(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        categories = load_categories(tmp_path / "nope.txt")
    assert categories == []
    assert "Error reading categories file" in caplog.text


def test_load_products_resolves_categories(tmp_path):
    electronics = Category(1, "Electronics")
    path = write(tmp_path / "inventory.txt", "10,Mouse,9.99,Wireless mouse,1\n")
    products = load_products(path, [electronics])
    assert len(products) == 1
    mouse = products[0]
    assert mouse.price == Decimal("9.99")
    assert mouse.category is electronics
    assert mouse.description == "Wireless mouse"


def test_load_products_skips_bad_lines(tmp_path):
    categories = [Category(1, "Electronics")]
    path = write(
        tmp_path / "inventory.txt",
        "\n".join(
            [
                "10,Mouse,9.99,Wireless mouse,1",
                "11,Cable,5.00,USB, braided,1",      # 6 fields
                "12,Charger,cheap,65W,1",            # bad price
                "13,Lamp,15.00,Desk lamp,9",         # unknown category
                "x,Hub,20.00,USB hub,1",             # bad id
                "14,Refund,-1.00,Negative,1",        # negative price
                "15,Keyboard,49.50,Mechanical,1",
            ]
        ),
    )
    products = load_products(path, categories)
    assert [p.id for p in products] == [10, 15]


def test_missing_product_file_is_logged_not_raised(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        products = load_products(tmp_path / "nope.txt", [Category(1, "Electronics")])
    assert products == []
    assert "Error reading products file" in caplog.text


def test_load_catalog_builds_lookups(tmp_path):
    cats = write(tmp_path / "category.txt", "1,Electronics\n2,Books\n")
    prods = write(tmp_path / "inventory.txt", "10,Mouse,9.99,Wireless,1\n20,Novel,12.00,Paperback,2\n11,Cable,5,USB-C,1\n")
    catalog = load_catalog(cats, prods)
    assert len(catalog) == 3
    assert catalog.get_product(20).name == "Novel"
    assert catalog.get_category(2).name == "Books"
    assert catalog.get_product(99) is None
    assert [p.id for p in catalog.products_in_category(1)] == [10, 11]


def test_load_catalog_products_without_categories(tmp_path):
    prods = write(tmp_path / "inventory.txt", "10,Mouse,9.99,Wireless,1\n")
    catalog = load_catalog(tmp_path / "missing.txt", prods)
    assert catalog.categories == ()
    assert catalog.products == ()


def test_bundled_sample_catalog_loads():
    from cartsim.utils.config_loader import PROJECT_ROOT

    catalog = load_catalog(PROJECT_ROOT / "data" / "category.txt", PROJECT_ROOT / "data" / "inventory.txt")
    assert len(catalog.categories) == 4
    assert len(catalog.products) == 9


def test_underscore_numbers_are_rejected(tmp_path):
    cats = write(tmp_path / "category.txt", "1_0,Garden\n1,Electronics\n")
    prods = write(
        tmp_path / "inventory.txt",
        "1_1,Spade,9.99,Steel spade,1\n12,Rake,1_0.00,Leaf rake,1\n13,Hose,15.00,Garden hose,1_0\n14,Mouse,9.99,Wireless,1\n",
    )
    catalog = load_catalog(cats, prods)
    assert [c.id for c in catalog.categories] == [1]
    assert [p.id for p in catalog.products] == [14]


def test_exponent_and_nan_prices_are_rejected(tmp_path):
    categories = [Category(1, "Electronics")]
    path = write(tmp_path / "inventory.txt", "10,Mouse,1e3,Wireless,1\n11,Cable,NaN,USB,1\n12,Hub,.50,USB hub,1\n")
    products = load_products(path, categories)
    assert [(p.id, p.price) for p in products] == [(12, Decimal("0.50"))]


def test_catalog_is_read_only(catalog):
    assert isinstance(catalog.categories, tuple)
    assert isinstance(catalog.products, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.products = ()
    with pytest.raises(AttributeError):
        catalog.products.append(catalog.products[0])
