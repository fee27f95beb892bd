"""Root conftest — shared test configuration."""

import logging
import os

import pytest

from arrkit.config import get_settings

# Ensure a developer's shell environment does not leak into CLI defaults
for _name in list(os.environ):
    if _name.startswith("ARRKIT_"):
        del os.environ[_name]


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def detach_cli_handler():
    """CliRunner swaps stderr; drop the handler bound to it after each test."""
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "arrkit":
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
