"""Shopping cart that prices its items and formats the ticket."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from cart_ticket.config import MAX_TITLE_LENGTH, MIN_PRICE, MIN_QUANTITY
from cart_ticket.constant import NO_ITEMS_MESSAGE, TICKET_ALIGNMENTS, TICKET_HEADER
from cart_ticket.models import InvalidArgumentError, Item, ItemType, PricedItem
from cart_ticket.pricing import format_discount, format_money, price_item, sum_totals
from cart_ticket.table import format_table

logger = logging.getLogger(__name__)

# Space and control characters only; NBSP and other Unicode spaces count as content.
_TRIMMED_CHARS = "".join(chr(code) for code in range(0x21))


def _validated_title(title: object) -> str:
    if not isinstance(title, str) or not title.strip(_TRIMMED_CHARS):
        raise InvalidArgumentError("title", "must be a non-blank string")
    if len(title) > MAX_TITLE_LENGTH:
        raise InvalidArgumentError("title", f"must be at most {MAX_TITLE_LENGTH} characters")
    return title


def _validated_price(price: object) -> Decimal:
    if isinstance(price, bool):
        raise InvalidArgumentError("price", f"not a number: {price!r}")
    try:
        # str() keeps floats like 0.99 at their shortest decimal spelling.
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidArgumentError("price", f"not a number: {price!r}") from exc
    if not value.is_finite() or value < MIN_PRICE:
        raise InvalidArgumentError("price", f"must be at least {MIN_PRICE}")
    return value


def _validated_quantity(quantity: object) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidArgumentError("quantity", f"not an integer: {quantity!r}")
    if quantity < MIN_QUANTITY:
        raise InvalidArgumentError("quantity", f"must be at least {MIN_QUANTITY}")
    return quantity


class Cart:
    """Ordered, append-only collection of items with ticket formatting."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def add_item(self, title: str, price: Decimal | float | int | str, quantity: int, item_type: ItemType) -> Item:
        """
        Validate and append a new item.

        Checks run in order title, price, quantity, type. The first failure
        raises ``InvalidArgumentError`` and the cart is left untouched.
        """
        valid_title = _validated_title(title)
        valid_price = _validated_price(price)
        valid_quantity = _validated_quantity(quantity)
        if not isinstance(item_type, ItemType):
            raise InvalidArgumentError("type", f"unknown item type {item_type!r}")

        item = Item(title=valid_title, price=valid_price, quantity=valid_quantity, item_type=item_type)
        self._items.append(item)
        logger.debug("added item #%d %r x%d (%s)", len(self._items), item.title, item.quantity, item.item_type.value)
        return item

    def priced_items(self) -> list[PricedItem]:
        """Price every item in insertion order."""
        return [price_item(item) for item in self._items]

    def grand_total(self) -> Decimal:
        """Sum of unrounded item totals."""
        return sum_totals(priced.total for priced in self.priced_items())

    def format_ticket(self) -> str:
        """Render the ticket table, or ``"No items."`` for an empty cart."""
        if not self._items:
            return NO_ITEMS_MESSAGE

        priced = self.priced_items()
        total = sum_totals(row.total for row in priced)
        rows = [
            [
                str(idx),
                row.item.title,
                format_money(row.item.price),
                str(row.item.quantity),
                format_discount(row.discount),
                format_money(row.total),
            ]
            for idx, row in enumerate(priced, start=1)
        ]
        footer = [str(len(priced)), "", "", "", "", format_money(total)]
        logger.debug("formatting ticket rows=%d total=%s", len(rows), total)
        return format_table(rows, TICKET_HEADER, footer, TICKET_ALIGNMENTS)
