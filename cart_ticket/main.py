"""Entry points: print the demo ticket or open it in the Textual viewer."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from cart_ticket.cart import Cart
from cart_ticket.config import LOG_LEVEL, LOG_LEVEL_ENV
from cart_ticket.constant import DEMO_ITEMS


def configure_logging(level: str | None = None) -> None:
    """Send library logs to stderr through rich so stdout stays the ticket."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def demo_cart() -> Cart:
    """Return a cart seeded with the demo items."""
    cart = Cart()
    for title, price, quantity, item_type in DEMO_ITEMS:
        cart.add_item(title, price, quantity, item_type)
    return cart


def main(console: Console | None = None) -> int:
    """Print the demo ticket to stdout."""
    configure_logging()
    console = console or Console()
    # Ticket text is plain; markup, emoji codes and highlighting would alter it.
    console.print(demo_cart().format_ticket(), markup=False, highlight=False, emoji=False, soft_wrap=True)
    return 0


def tui() -> None:
    """Run the Textual viewer on the demo cart."""
    from cart_ticket.ticket_app import TicketApp

    configure_logging()
    TicketApp(demo_cart()).run()


if __name__ == "__main__":
    raise SystemExit(main())
