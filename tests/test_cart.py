"""Tests for the cart and its ticket."""

from decimal import Decimal

import pytest

from cart_ticket.cart import Cart
from cart_ticket.models import InvalidArgumentError, ItemType


@pytest.fixture
def demo_cart():
    cart = Cart()
    cart.add_item("Apple", 0.99, 5, ItemType.NEW)
    cart.add_item("Banana", 20.00, 4, ItemType.SECOND_FREE)
    cart.add_item("A long piece of toilet paper", 17.20, 1, ItemType.SALE)
    cart.add_item("Nails", 2.00, 500, ItemType.REGULAR)
    return cart


def _rejected_field(cart: Cart, *args) -> str:
    with pytest.raises(InvalidArgumentError) as excinfo:
        cart.add_item(*args)
    assert len(cart) == 0
    return excinfo.value.field


class TestAddItem:
    """Tests for Cart.add_item validation."""

    def test_accepts_valid_item(self):
        cart = Cart()
        item = cart.add_item("Apple", 0.99, 5, ItemType.NEW)
        assert item.price == Decimal("0.99")
        assert cart.items == (item,)

    def test_title_length_limit(self):
        cart = Cart()
        assert _rejected_field(cart, "x" * 33, 1.0, 1, ItemType.NEW) == "title"
        cart.add_item("x" * 32, 1.0, 1, ItemType.NEW)
        assert len(cart) == 1

    @pytest.mark.parametrize("title", ["\u00a0", "\u3000", "\u00a0Tea\u00a0"])
    def test_unicode_spaces_count_as_title_content(self, title):
        cart = Cart()
        assert cart.add_item(title, 1.0, 1, ItemType.NEW).title == title

    @pytest.mark.parametrize("title", [None, "", "   ", "\t\n ", 42])
    def test_blank_or_missing_title(self, title):
        assert _rejected_field(Cart(), title, 1.0, 1, ItemType.NEW) == "title"

    def test_price_lower_bound(self):
        cart = Cart()
        assert _rejected_field(cart, "Apple", 0.009, 1, ItemType.NEW) == "price"
        cart.add_item("Apple", 0.01, 1, ItemType.NEW)
        assert cart.items[0].price == Decimal("0.01")

    @pytest.mark.parametrize("price", ["abc", None, float("nan"), True, -5])
    def test_non_numeric_or_negative_price(self, price):
        assert _rejected_field(Cart(), "Apple", price, 1, ItemType.NEW) == "price"

    def test_price_accepts_decimal_and_string(self):
        cart = Cart()
        cart.add_item("A", Decimal("1.10"), 1, ItemType.NEW)
        cart.add_item("B", "2.5", 1, ItemType.NEW)
        assert [item.price for item in cart.items] == [Decimal("1.10"), Decimal("2.5")]

    def test_quantity_lower_bound(self):
        cart = Cart()
        assert _rejected_field(cart, "Apple", 1.0, 0, ItemType.NEW) == "quantity"
        cart.add_item("Apple", 1.0, 1, ItemType.NEW)
        assert len(cart) == 1

    @pytest.mark.parametrize("quantity", [1.5, "3", True])
    def test_quantity_must_be_integer(self, quantity):
        assert _rejected_field(Cart(), "Apple", 1.0, quantity, ItemType.NEW) == "quantity"

    def test_unknown_type(self):
        assert _rejected_field(Cart(), "Apple", 1.0, 1, "SALE") == "type"
        assert _rejected_field(Cart(), "Apple", 1.0, 1, None) == "type"

    def test_validation_order(self):
        assert _rejected_field(Cart(), "", 0, 0, None) == "title"
        assert _rejected_field(Cart(), "Apple", 0, 0, None) == "price"
        assert _rejected_field(Cart(), "Apple", 1, 0, None) == "quantity"


class TestFormatTicket:
    """Tests for Cart.format_ticket."""

    def test_empty_cart(self):
        assert Cart().format_ticket() == "No items."

    def test_demo_ticket(self, demo_cart):
        expected = "\n".join(
            [
                f"# {'Item':<28} {'Price':>6} {'Quan.':>5} {'Discount':>8} {'Total':>7} ",
                "-" * 60,
                f"1 {'Apple':<28} {'$.99':>6} {'5':>5} {'-':>8} {'$4.95':>7} ",
                f"2 {'Banana':<28} {'$20.00':>6} {'4':>5} {'50%':>8} {'$40.00':>7} ",
                f"3 {'A long piece of toilet paper':<28} {'$17.20':>6} {'1':>5} {'70%':>8} {'$5.16':>7} ",
                f"4 {'Nails':<28} {'$2.00':>6} {'500':>5} {'50%':>8} {'$500.00':>7} ",
                "-" * 60,
                f"4 {'':<28} {'':>6} {'':>5} {'':>8} {'$550.11':>7} ",
            ]
        )
        assert demo_cart.format_ticket() == expected

    def test_priced_items_and_grand_total(self, demo_cart):
        assert [row.discount for row in demo_cart.priced_items()] == [0, 50, 70, 50]
        assert demo_cart.grand_total() == Decimal("550.11")

    def test_formatting_is_repeatable(self, demo_cart):
        assert demo_cart.format_ticket() == demo_cart.format_ticket()

    def test_rows_follow_insertion_order(self):
        cart = Cart()
        cart.add_item("Zebra", 1, 1, ItemType.REGULAR)
        cart.add_item("Ant", 1, 1, ItemType.REGULAR)
        lines = cart.format_ticket().split("\n")
        assert lines[2].startswith("1 Zebra")
        assert lines[3].startswith("2 Ant")

    def test_sub_dollar_total(self):
        cart = Cart()
        cart.add_item("Gum", "0.30", 2, ItemType.REGULAR)
        assert cart.format_ticket().split("\n")[-1].endswith("$.60 ")

    def test_huge_price_is_formatted(self):
        cart = Cart()
        cart.add_item("Yacht", "1e30", 1, ItemType.REGULAR)
        cart.add_item("Gum", "0.01", 1, ItemType.REGULAR)
        assert cart.grand_total() == Decimal("1000000000000000000000000000000.01")
        lines = cart.format_ticket().split("\n")
        assert lines[2].rstrip().endswith("$1" + "0" * 30 + ".00")
        assert lines[-1].rstrip().endswith("$1" + "0" * 30 + ".01")

    def test_huge_quantity_is_formatted(self):
        cart = Cart()
        cart.add_item("Bolt", "1.00", 10**27, ItemType.REGULAR)
        assert cart.format_ticket().split("\n")[-1].rstrip().endswith("$2" + "0" * 26 + ".00")
