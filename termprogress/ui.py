"""Shared UI helpers for console output."""

from rich.console import Console

# Shared console instance for everything the CLI prints besides indicators.
console = Console()
