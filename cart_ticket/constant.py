"""Editable static ticket layout and demo data."""

from __future__ import annotations

from cart_ticket.models import Align, ItemType

NO_ITEMS_MESSAGE = "No items."
DISCOUNT_PLACEHOLDER = "-"

TICKET_HEADER: tuple[str, ...] = ("#", "Item", "Price", "Quan.", "Discount", "Total")
TICKET_ALIGNMENTS: tuple[Align, ...] = (
    Align.RIGHT,
    Align.LEFT,
    Align.RIGHT,
    Align.RIGHT,
    Align.RIGHT,
    Align.RIGHT,
)

ITEM_TYPE_BADGES: dict[ItemType, str] = {
    ItemType.NEW: "N",
    ItemType.REGULAR: "R",
    ItemType.SECOND_FREE: "2",
    ItemType.SALE: "S",
}

# (title, price, quantity, type) rows used to seed the demo cart.
DEMO_ITEMS: list[tuple[str, str, int, ItemType]] = [
    ("Apple", "0.99", 5, ItemType.NEW),
    ("Banana", "20.00", 4, ItemType.SECOND_FREE),
    ("A long piece of toilet paper", "17.20", 1, ItemType.SALE),
    ("Nails", "2.00", 500, ItemType.REGULAR),
]
