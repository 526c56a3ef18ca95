"""Thermal printer output for formatted tickets."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from cart_ticket.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_MIN_FONT_SIZE,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)

logger = logging.getLogger(__name__)

_FONT_OVERRIDE_ENV = "CART_TICKET_PRINTER_FONT_PATH"
# Ticket columns only line up with a monospaced face.
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/noto/NotoSansMono-Regular.ttf",
)
_LINE_PADDING_PX = 4


def _font_candidates() -> list[str]:
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates = [env_override, PRINTER_FONT_PATH, *_LINUX_FONT_FALLBACKS]
    return list(dict.fromkeys(path for path in candidates if path))


def resolve_printer_font_path() -> str:
    """
    Return the first existing font file for ticket printing.

    Ticket columns are padded with spaces, so the face must be monospaced for
    them to line up on paper. CART_TICKET_PRINTER_FONT_PATH is tried first,
    then PRINTER_FONT_PATH, then common DejaVu/Liberation/Noto mono paths.
    """
    candidates = _font_candidates()
    for candidate in candidates:
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No monospaced printer font found. Set {_FONT_OVERRIDE_ENV} to a .ttf/.otf mono font. "
        f"Tried: {', '.join(candidates)}"
    )


def is_monospaced(font: object) -> bool:
    """True when narrow and wide glyphs advance by the same width."""
    return font.getlength("i") == font.getlength("W")


def check_printer_dependencies() -> tuple[bool, str]:
    """Report whether tickets can be printed: escpos importable and a mono font loadable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        font_path = resolve_printer_font_path()
        font = ImageFont.truetype(font_path, PRINTER_MIN_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    if not is_monospaced(font):
        return (False, f"Printer font is not monospaced: {font_path}")
    return (True, "Printer ready")


def _text_width(text: str, font: object) -> int:
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(probe).textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0]


def fit_font_size(lines: list[str], font_path: str) -> int:
    """Largest font size up to PRINTER_FONT_SIZE whose widest line fits the paper."""
    from PIL import ImageFont

    widest = max(lines, key=len, default="")
    max_width_px = PRINTER_WIDTH_PX - PRINTER_LEFT_INDENT_PX
    for size in range(PRINTER_FONT_SIZE, PRINTER_MIN_FONT_SIZE, -1):
        if _text_width(widest, ImageFont.truetype(font_path, size)) <= max_width_px:
            return size
    return PRINTER_MIN_FONT_SIZE


def render_line(text: str, font: object) -> object:
    """Render one ticket line onto a 1-bit canvas as wide as the paper."""
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(probe).textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(8, text_height + _LINE_PADDING_PX * 2)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def print_ticket(ticket: str, printer: object | None = None, font: object | None = None) -> None:
    """Print every ticket line as an image and cut the paper at the end."""
    if not ticket:
        return

    lines = ticket.split("\n")
    try:
        from PIL import ImageFont

        if printer is None:
            from escpos.printer import Usb
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    if font is None:
        font_path = resolve_printer_font_path()
        font = ImageFont.truetype(font_path, fit_font_size(lines, font_path))
    if printer is None:
        printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)

    logger.debug("printing ticket lines=%d", len(lines))
    for line in lines:
        printer.image(render_line(line, font))
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
