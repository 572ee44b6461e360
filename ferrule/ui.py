"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def emoji_enabled() -> bool:
    """Return False when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _emit(symbol: str, fallback: str, message: str, colour: str) -> str:
    prefix = symbol if emoji_enabled() else fallback
    _console().print(Text.assemble((prefix, colour), " ", (message, colour)))
    return f"{prefix} {message}"


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _emit("⚠️ ", "!", message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _emit("✅", "✓", message, "green")