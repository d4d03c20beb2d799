"""Command-line interface for panelcut.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One command per template layout (lantern, cardboard)
- Quiet output mode
- Detailed error reporting
"""

from panelcut.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
