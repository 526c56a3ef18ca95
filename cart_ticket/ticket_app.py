"""Textual viewer for a cart and its ticket."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Static

from cart_ticket.cart import Cart
from cart_ticket.config import DEBUG_LOG_PATH
from cart_ticket.printer import check_printer_dependencies, print_ticket
from cart_ticket.rendering import format_item_label, format_ticket_text


class TicketApp(App):
    """Show cart items next to the formatted ticket and send it to the printer."""

    TITLE = "Cart Ticket"
    SUB_TITLE = "Items / Ticket"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #items-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #ticket-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "print_ticket", "Print", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, cart: Cart, print_fn: Callable[[str], None] = print_ticket) -> None:
        super().__init__()
        self.cart = cart
        self.print_fn = print_fn
        self.system_status = ""
        self._debug_log_path = Path(DEBUG_LOG_PATH)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="items-pane"):
                yield Static("Items", classes="pane-title")
                yield Static("(no items yet)", id="items-list")
            with Vertical(id="ticket-pane"):
                yield Static("Ticket", classes="pane-title")
                yield Static(id="ticket")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        _, msg = check_printer_dependencies()
        self.system_status = msg
        self._log_debug(f"on_mount printer_status={msg!r}")
        self._refresh_all()

    def action_print_ticket(self) -> None:
        self._log_debug(f"print_enter rows={len(self.cart)}")
        if not len(self.cart):
            self.system_status = "Nothing to print"
            self._refresh_status()
            self._log_debug("print_blocked reason=no_rows")
            return

        ticket = self.cart.format_ticket()
        try:
            self.print_fn(ticket)
        except Exception as exc:
            self.system_status = f"Print failed: {exc}"
            self._refresh_status()
            self._log_debug(f"print_failed error={exc!r}")
            return

        self.system_status = "Printed"
        self._refresh_status()
        self._log_debug("print_done")

    def _refresh_all(self) -> None:
        self._refresh_items()
        self._refresh_ticket()
        self._refresh_status()

    def _refresh_items(self) -> None:
        items_widget = self.query_one("#items-list", Static)
        priced = self.cart.priced_items()
        if not priced:
            items_widget.update("(no items yet)")
            return

        lines = Text()
        for idx, row in enumerate(priced):
            if idx > 0:
                lines.append("\n")
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_item_label(row))
        items_widget.update(lines)

    def _refresh_ticket(self) -> None:
        self.query_one("#ticket", Static).update(format_ticket_text(self.cart.format_ticket()))

    def _refresh_status(self) -> None:
        status = self.system_status or "Ready"
        # Text, not str, so exception messages are never parsed as markup.
        self.query_one("#status-bar", Static).update(Text(f"Ctrl+S print. Ctrl+Q quit. {status}"))
