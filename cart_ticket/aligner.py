"""Fixed-width cell alignment."""

from __future__ import annotations

from cart_ticket.models import Align, InvalidArgumentError


def _padding(value_length: int, mode: Align, width: int) -> tuple[int, int]:
    total = width - value_length
    if mode is Align.LEFT:
        return (0, total)
    if mode is Align.RIGHT:
        return (total, 0)
    if mode is Align.CENTER:
        before = total // 2
        return (before, total - before)
    raise InvalidArgumentError("mode", f"unknown alignment {mode!r}")


def align(value: str, mode: Align, width: int) -> str:
    """
    Pad or truncate ``value`` to ``width`` characters and append one space.

    Values longer than ``width`` are cut to exactly ``width`` characters with
    no ellipsis. The trailing space separates adjacent columns.
    """
    width = max(0, width)
    if len(value) > width:
        value = value[:width]
    before, after = _padding(len(value), mode, width)
    return f"{' ' * before}{value}{' ' * after} "
