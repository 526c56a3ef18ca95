"""Tests for the demo entry points."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from cart_ticket import main as main_module


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_demo_cart_has_four_items():
    cart = main_module.demo_cart()
    assert [item.title for item in cart.items] == [
        "Apple",
        "Banana",
        "A long piece of toilet paper",
        "Nails",
    ]


def test_main_prints_ticket(restore_root_logger):
    buffer = io.StringIO()
    assert main_module.main(console=Console(file=buffer, width=200)) == 0
    expected = main_module.demo_cart().format_ticket()
    printed = [line.rstrip() for line in buffer.getvalue().splitlines()]
    assert printed == [line.rstrip() for line in expected.split("\n")]
    assert printed[-1].endswith("$550.11")


def test_configure_logging_uses_env_level(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CART_TICKET_LOG_LEVEL", "debug")
    main_module.configure_logging()
    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(handler, RichHandler) for handler in restore_root_logger.handlers)
