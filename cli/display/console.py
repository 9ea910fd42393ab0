"""Shared Rich console instance for diagnostic tables."""

from rich.console import Console

# Shared console instance used by the display renderers
console = Console()
