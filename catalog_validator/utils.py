"""Shared console helpers for the catalog validator.

All user-facing output goes through one Rich console. Lines are printed with
``soft_wrap=True`` so reports are byte-identical regardless of terminal
width, and dynamic text is escaped so brackets in file names or parser
messages are never read as Rich markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()

PASS_MARKER = "✅"
FAIL_MARKER = "❌"
SCAN_MARKER = "🔍"


def print_line(message: str, style: str | None = None, target: Console | None = None) -> None:
    """Print a single unwrapped line, escaping any markup in *message*."""
    out = target or console
    text = escape(message)
    if style:
        text = f"[{style}]{text}[/{style}]"
    out.print(text, soft_wrap=True, highlight=False, emoji=False)


def print_success(message: str, target: Console | None = None) -> None:
    """Print a green success message."""
    print_line(message, "bold green", target)


def print_error(message: str, target: Console | None = None) -> None:
    """Print a red error message."""
    print_line(message, "bold red", target)


def print_warning(message: str, target: Console | None = None) -> None:
    """Print a yellow warning message."""
    print_line(message, "bold yellow", target)
