"""Rich console output helpers for the CLI.

This module renders resolution results and table summaries with the Rich
library.
"""

from collections.abc import Iterator
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mathglyph.domain import (
    BuildResult,
    FixedWidthElement,
    GlyphElement,
    OverlayElement,
    RowElement,
    StackElement,
)

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def codepoints(text: str) -> str:
    """Format the code points of a string, e.g. "U+002B"."""
    return " ".join(f"U+{ord(c):04X}" for c in text)


def iter_glyphs(element: Any) -> Iterator[GlyphElement]:
    """Yield the glyph descriptors of an element tree in drawing order."""
    if isinstance(element, GlyphElement):
        yield element
    elif isinstance(element, RowElement):
        for child in element.children:
            yield from iter_glyphs(child)
    elif isinstance(element, OverlayElement):
        yield from iter_glyphs(element.base)
        yield from iter_glyphs(element.over)
    elif isinstance(element, StackElement):
        yield from iter_glyphs(element.base)
        yield from iter_glyphs(element.decoration)
    elif isinstance(element, FixedWidthElement):
        yield from iter_glyphs(element.child)


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Mathglyph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _fmt(value: float | None) -> str:
    return "-" if value is None else f"{value:.5f}"


def print_result(symbol: str, result: BuildResult) -> None:
    """Print a resolution result with one row per drawn glyph.

    Args:
        symbol: Symbol that was resolved
        result: Build result from the resolver
    """
    line = Text("  ")
    line.append(symbol, style="bold")
    line.append(f" ({codepoints(symbol)}) {SYM_DOT} ")
    line.append(result.path.value, style="cyan")
    console.print(line)
    console.print(f"  italic {result.italic:.5f} {SYM_DOT} skew {result.skew:.5f}")

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("char")
    table.add_column("font")
    table.add_column("height", justify="right")
    table.add_column("depth", justify="right")
    table.add_column("offset", justify="right")
    table.add_column("reported", justify="right")
    table.add_column("italic pad", justify="right")

    for glyph in iter_glyphs(result.element):
        metrics = glyph.metrics
        table.add_row(
            f"{glyph.character} ({codepoints(glyph.character)})",
            glyph.font.font_name,
            _fmt(metrics.height if metrics else None),
            _fmt(metrics.depth if metrics else None),
            _fmt(glyph.vertical_offset),
            _fmt(glyph.reported_height),
            _fmt(glyph.italic_padding),
        )
    console.print(table)


def print_table_sizes(sizes: dict[str, int]) -> None:
    """Print the number of entries of each static table."""
    for name, size in sizes.items():
        console.print(f"  {name:<24} [green]{size:>5}[/green]")


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
