"""Column-aligned text table rendering."""

from __future__ import annotations

from typing import Sequence

from cart_ticket.aligner import align
from cart_ticket.models import Align, InvalidArgumentError

Row = Sequence[str]


def _check_column_count(name: str, cells: Sequence[object], columns: int) -> None:
    if len(cells) != columns:
        raise InvalidArgumentError(name, f"expected {columns} columns, got {len(cells)}")


def column_widths(rows: Sequence[Row], header: Row, footer: Row) -> list[int]:
    """Return the widest cell length per column across header, rows and footer."""
    widths = [0] * len(header)
    for cells in (header, footer, *rows):
        for idx, cell in enumerate(cells):
            widths[idx] = max(widths[idx], len(cell))
    return widths


def rule_length(widths: Sequence[int]) -> int:
    """Length of the horizontal rule: all widths plus one separator between columns."""
    return sum(widths) + len(widths) - 1


def _format_line(cells: Row, alignments: Sequence[Align], widths: Sequence[int]) -> str:
    return "".join(align(cell, mode, width) for cell, mode, width in zip(cells, alignments, widths))


def format_table(
    rows: Sequence[Row],
    header: Row,
    footer: Row,
    alignments: Sequence[Align],
) -> str:
    """
    Render header, rows and footer as a fixed-width text table.

    The header is followed by a rule line. A second rule separates the rows
    from the footer only when there is at least one row. The footer line has
    no trailing newline.
    """
    columns = len(header)
    _check_column_count("footer", footer, columns)
    _check_column_count("alignments", alignments, columns)
    for row in rows:
        _check_column_count("row", row, columns)

    widths = column_widths(rows, header, footer)
    rule = "-" * rule_length(widths)

    lines = [_format_line(header, alignments, widths), rule]
    lines.extend(_format_line(row, alignments, widths) for row in rows)
    if rows:
        lines.append(rule)
    lines.append(_format_line(footer, alignments, widths))
    return "\n".join(lines)
