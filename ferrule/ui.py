"""Coloured one-line status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False, markup=False)


def _announce(symbol: str, message: str, style: str) -> None:
    text = Text(f"{symbol} ", style=style)
    text.append(message, style=style)
    _console().print(text)


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _announce("✓" if no_emoji() else "✅", message, "green")