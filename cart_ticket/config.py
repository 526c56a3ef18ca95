"""Runtime configuration defaults for pricing, printing and logging."""

from __future__ import annotations

from decimal import Decimal

MAX_TITLE_LENGTH = 32
MIN_PRICE = Decimal("0.01")
MIN_QUANTITY = 1

SECOND_FREE_DISCOUNT = 50
SALE_DISCOUNT = 70
MAX_DISCOUNT = 80
# One extra percentage point per full step of units.
DISCOUNT_STEP = 10

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 22
PRINTER_MIN_FONT_SIZE = 10
PRINTER_FONT_PATH = "/System/Library/Fonts/Menlo.ttc"
PRINTER_LEFT_INDENT_PX = 4
PRINTER_TAIL_SPACER_PX = 70

LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "CART_TICKET_LOG_LEVEL"
DEBUG_LOG_PATH = "/tmp/cart-ticket-debug.log"
