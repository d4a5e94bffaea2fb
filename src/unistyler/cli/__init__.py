"""Command-line interface for unistyler.

This module provides the CLI using Typer with rich output.

Commands:
- validate: Check pack files and report every issue
- style: Apply styles and decorators to text
- packs: List loaded packs, filtered by category or price
"""

from unistyler.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
