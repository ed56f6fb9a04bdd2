"""Command-line interface for mathglyph.

This module provides the CLI using Typer with rich output for inspecting
how symbols resolve and align.

Key features:
- Resolve a symbol under a mode, atom type and font overrides
- Load extra font metrics from a TTF/OTF file
- Validate the static symbol tables
"""

from mathglyph.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
