"""Domain models for cart-ticket."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ItemType(Enum):
    """Pricing category of a cart item."""

    NEW = "new"
    REGULAR = "regular"
    SECOND_FREE = "second_free"
    SALE = "sale"


class Align(Enum):
    """Horizontal alignment of a table cell."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class InvalidArgumentError(ValueError):
    """Raised when an input value is rejected; ``field`` names the argument."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Illegal {field}: {message}")
        self.field = field


@dataclass(frozen=True)
class Item:
    """A validated cart line as entered by the caller."""

    title: str
    price: Decimal
    quantity: int
    item_type: ItemType


@dataclass(frozen=True)
class PricedItem:
    """An item together with its computed discount and unrounded total."""

    item: Item
    discount: int
    total: Decimal
