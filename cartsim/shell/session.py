"""
Interactive shopping session - numbered text menu over catalog, cart and checkout.

The session owns the catalog it was given and the single cart for this run.
Input and output are injectable so the loop can be driven from tests.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from cartsim.cart import Cart, Checkout, to_money
from cartsim.catalog import Catalog
from cartsim.error_handler import ErrorHandler
from cartsim.errors import CartSimError
from cartsim.validation import parse_int, parse_quantity, raise_if_errors

logger = logging.getLogger(__name__)

MENU_TITLE = "--- Shopping Cart Menu ---"
MENU_OPTIONS = (
    "View Products by Category",
    "Add Product to Cart",
    "View Cart",
    "Remove Product from Cart",
    "Checkout",
    "View Product Recommendations",
    "Exit",
)

OPT_BROWSE, OPT_ADD, OPT_VIEW_CART, OPT_REMOVE, OPT_CHECKOUT, OPT_RECOMMEND, OPT_EXIT = range(1, 8)


def format_money(amount) -> str:
    return f"${to_money(amount)}"


def format_percent(rate) -> str:
    return f"{rate.normalize():f}%"


class ShoppingSession:
    def __init__(
        self,
        catalog: Catalog,
        cart: Cart,
        checkout: Checkout,
        *,
        recommendation_limit: int = 3,
        strict_input: bool = False,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.catalog = catalog
        self.cart = cart
        self.checkout = checkout
        self.recommendation_limit = recommendation_limit
        self.strict_input = strict_input
        self._input = input_func or input
        self._output = output_func or print
        self.error_handler = error_handler or ErrorHandler()
        self.actions: Dict[int, Callable[[], bool]] = {
            OPT_BROWSE: self.view_products_by_category,
            OPT_ADD: self.add_product_to_cart,
            OPT_VIEW_CART: self.view_cart,
            OPT_REMOVE: self.remove_product_from_cart,
            OPT_CHECKOUT: self.checkout_cart,
            OPT_RECOMMEND: self.view_recommendations,
            OPT_EXIT: self.exit,
        }

    def say(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    # ------------------------------------------------------------------ #
    # Loop
    # ------------------------------------------------------------------ #
    def show_menu(self) -> None:
        self.say(f"\n{MENU_TITLE}")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.say(f"{number}. {label}")

    def run(self) -> None:
        """Show the menu and dispatch choices until checkout, exit or end of input."""
        shopping = True
        while shopping:
            self.show_menu()
            try:
                raw = self.ask("Choose an option: ")
            except EOFError:
                self.say("\nThank you for shopping!")
                break

            errors: Dict[str, str] = {}
            choice = parse_int(raw, "option", errors, min_value=1, max_value=len(MENU_OPTIONS))
            if choice is None:
                logger.debug("Invalid menu option %r: %s", raw, errors)
                self.say("Invalid option. Please try again.")
                continue

            try:
                shopping = self.actions[choice]()
            except CartSimError as e:
                payload = self.error_handler.handle_exception(e, context={"option": choice})
                self.say(payload["message"])
            except EOFError:
                self.say("\nThank you for shopping!")
                break

    # ------------------------------------------------------------------ #
    # Menu actions (return False to end the session)
    # ------------------------------------------------------------------ #
    def view_products_by_category(self) -> bool:
        self.say("\nAvailable Categories:")
        for category in self.catalog.categories:
            self.say(f"{category.id}. {category.name}")

        errors: Dict[str, str] = {}
        category_id = parse_int(
            self.ask("\nEnter Category ID to view products: "),
            "category_id", errors, label="Category ID", strict=self.strict_input,
        )
        raise_if_errors(errors)

        category = self.catalog.get_category(category_id)
        if category is None:
            self.say("Invalid category ID.")
            return True

        self.say(f"\nProducts in {category.name}:")
        for product in self.catalog.products_in_category(category.id):
            self.say(f"{product.id}. {product.name} - {format_money(product.price)} ({product.description})")
        return True

    def add_product_to_cart(self) -> bool:
        errors: Dict[str, str] = {}
        product_id = parse_int(
            self.ask("\nEnter Product ID to add: "),
            "product_id", errors, label="Product ID", strict=self.strict_input,
        )
        quantity = parse_quantity(self.ask("Enter Quantity: "), errors, strict=self.strict_input)
        raise_if_errors(errors)

        product = self.catalog.get_product(product_id)
        if product is None:
            self.say("Invalid product ID.")
            return True

        self.cart.add_item(product, quantity)
        self.say(f"{quantity} {product.name}(s) added to your cart.")
        return True

    def view_cart(self) -> bool:
        if self.cart.is_empty():
            self.say("Your cart is empty.")
            return True

        self.say("Items in your cart:")
        for item in self.cart.items:
            self.say(
                f"{item.product.name} - {item.quantity} x {format_money(item.product.price)}"
                f" = {format_money(item.total_price())}"
            )
        return True

    def remove_product_from_cart(self) -> bool:
        errors: Dict[str, str] = {}
        product_id = parse_int(
            self.ask("\nEnter Product ID to remove: "),
            "product_id", errors, label="Product ID", strict=self.strict_input,
        )
        raise_if_errors(errors)

        if self.cart.remove_item(product_id):
            self.say("Item removed from your cart.")
        else:
            self.say("That product was not in your cart.")
        return True

    def checkout_cart(self) -> bool:
        if self.cart.is_expired():
            logger.info("Checkout refused: cart expired at %s", self.cart.expiration_time.isoformat())
            self.say("Your cart has expired.")
            return False

        summary = self.checkout.breakdown(self.cart.calculate_total())
        self.say(f"\nSubtotal: {format_money(summary.subtotal)}")
        self.say(f"Discount ({format_percent(self.checkout.discount)}): -{format_money(summary.discount_amount)}")
        self.say(f"Tax ({format_percent(self.checkout.tax_rate)}): {format_money(summary.tax_amount)}")
        self.say(f"Total after discount and tax: {format_money(summary.total)}")
        logger.info("Checked out %d line(s), total %s", len(self.cart), summary.total)
        return False

    def view_recommendations(self) -> bool:
        recommendations = self.cart.recommend_products(self.catalog, limit=self.recommendation_limit)
        self.say("\nProduct Recommendations:")
        for product in recommendations:
            self.say(f"{product.name} - {format_money(product.price)}")
        return True

    def exit(self) -> bool:
        self.say("Thank you for shopping!")
        return False
