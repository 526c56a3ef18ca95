"""Rich rendering helpers for items and tickets."""

from __future__ import annotations

from rich.text import Text

from cart_ticket.constant import ITEM_TYPE_BADGES
from cart_ticket.models import ItemType, PricedItem
from cart_ticket.pricing import format_discount, format_money


def badge_style(item_type: ItemType) -> str:
    """Return a consistent badge style for item type tags."""
    if item_type is ItemType.SALE:
        return "bold #ffffff on #b23a48"
    if item_type is ItemType.SECOND_FREE:
        return "bold #ffffff on #2f6db5"
    if item_type is ItemType.NEW:
        return "bold #0b1f0f on #5fbf72"
    return "bold #0b0b0b on #c8c8c8"


def badge_label(item_type: ItemType) -> str:
    return ITEM_TYPE_BADGES[item_type]


def format_item_label(priced: PricedItem) -> Text:
    """Render an item line with its colored type tag, quantity and discount."""
    item = priced.item
    text = Text()
    text.append(f" {badge_label(item.item_type)} ", style=badge_style(item.item_type))
    text.append(f" {item.title}")
    text.append(f" x{item.quantity}", style="dim")
    if priced.discount:
        text.append(f" {format_discount(priced.discount)}", style="bold #b23a48")
    text.append(f"  {format_money(priced.total)}")
    return text


def format_ticket_text(ticket: str) -> Text:
    """
    Style a formatted ticket for terminal display.

    The header and footer lines are bold and rule lines are dim. The plain
    text of the result is identical to ``ticket``.
    """
    lines = ticket.split("\n")
    text = Text()
    if len(lines) < 3:
        text.append(ticket)
        return text

    last = len(lines) - 1
    for idx, line in enumerate(lines):
        if idx > 0:
            text.append("\n")
        if idx in (0, last):
            text.append(line, style="bold")
        elif line and set(line) == {"-"}:
            text.append(line, style="dim")
        else:
            text.append(line)
    return text
