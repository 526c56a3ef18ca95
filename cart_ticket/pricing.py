"""Discount policy and money helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Iterable

from cart_ticket.config import DISCOUNT_STEP, MAX_DISCOUNT, SALE_DISCOUNT, SECOND_FREE_DISCOUNT
from cart_ticket.constant import DISCOUNT_PLACEHOLDER
from cart_ticket.models import InvalidArgumentError, Item, ItemType, PricedItem

_CENT = Decimal("0.01")
_HUNDRED = Decimal(100)


def _base_discount(item_type: ItemType, quantity: int) -> int:
    if item_type is ItemType.SECOND_FREE:
        return SECOND_FREE_DISCOUNT if quantity > 1 else 0
    if item_type is ItemType.SALE:
        return SALE_DISCOUNT
    return 0


def calculate_discount(item_type: ItemType, quantity: int) -> int:
    """
    Return the discount percentage (0-80) for ``quantity`` units of ``item_type``.

    NEW items never get a discount. Every other type gets one extra point per
    full ten units on top of its base rate, capped at ``MAX_DISCOUNT``.
    """
    if not isinstance(item_type, ItemType):
        raise InvalidArgumentError("type", f"unknown item type {item_type!r}")
    if item_type is ItemType.NEW:
        return 0

    discount = _base_discount(item_type, quantity)
    if discount >= MAX_DISCOUNT:
        return discount
    return min(discount + quantity // DISCOUNT_STEP, MAX_DISCOUNT)


def item_total(price: Decimal, quantity: int, discount: int) -> Decimal:
    """Exact, unrounded line total after discount."""
    with localcontext() as ctx:
        # Room for every coefficient digit; dividing by 100 only shifts the exponent.
        ctx.prec = max(ctx.prec, len(price.as_tuple().digits) + len(str(quantity)) + 3)
        return price * quantity * (_HUNDRED - discount) / _HUNDRED


def sum_totals(totals: Iterable[Decimal]) -> Decimal:
    """Exact sum of line totals, whatever their magnitude."""
    values = list(totals)
    if not values:
        return Decimal(0)
    with localcontext() as ctx:
        top = max(value.adjusted() for value in values)
        bottom = min(value.as_tuple().exponent for value in values)
        ctx.prec = max(ctx.prec, top - bottom + len(str(len(values))) + 2)
        return sum(values, Decimal(0))


def price_item(item: Item) -> PricedItem:
    """Compute discount and total for one item in a single step."""
    discount = calculate_discount(item.item_type, item.quantity)
    return PricedItem(item=item, discount=discount, total=item_total(item.price, item.quantity, discount))


def format_money(amount: Decimal) -> str:
    """Format as ``$123.45``; amounts below one drop the leading zero (``$.60``)."""
    with localcontext() as ctx:
        # Every integer digit plus two decimals must fit, or quantize() fails.
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        text = f"{amount.quantize(_CENT, rounding=ROUND_HALF_EVEN):.2f}"
    if text.startswith("0."):
        text = text[1:]
    return f"${text}"


def format_discount(discount: int) -> str:
    """Render a discount cell: a dash for none, otherwise ``<n>%``."""
    if discount == 0:
        return DISCOUNT_PLACEHOLDER
    return f"{discount}%"
