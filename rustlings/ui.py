"""Coloured status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def use_emoji() -> bool:
    """Return True unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def _report(fancy: str, plain: str, message: str, style: str) -> None:
    symbol = fancy if use_emoji() else plain
    _console().print(Text.assemble((symbol, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a warning in red."""
    _report("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a success message in green."""
    _report("✅", "✓", message, "green")