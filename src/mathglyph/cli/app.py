"""CLI application entry point for mathglyph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from mathglyph import __version__
from mathglyph.cli.output import (
    console,
    print_error,
    print_header,
    print_result,
    print_step,
    print_success,
    print_table_sizes,
)
from mathglyph.config import (
    AlignmentConfig,
    FontConfig,
    LoggingConfig,
    MathGlyphSettings,
    RenderConfig,
)
from mathglyph.core import FontMetricsTable, SymbolResolver
from mathglyph.domain import AtomType, FontShape, FontWeight, Mode, ResolutionPath
from mathglyph.exceptions import FontLoadError, SymbolTableError, UnknownSymbolOptionError
from mathglyph.io import FontMetricsReader
from mathglyph.tables import (
    COMPACTED_COMPOSITE_SYMBOLS,
    DECORATED_EQUAL_SYMBOLS,
    LIGATURES,
    NEGATED_OPERATOR_SYMBOLS,
    SYMBOL_RENDER_CONFIGS,
    validate_tables,
)
from mathglyph.utils import ResolutionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="mathglyph",
    help="Resolve math symbols into fonts, characters and math-axis offsets.",
    add_completion=False,
    no_args_is_help=True,
)

_ATOM_ALIASES = {
    **{atom.value: atom for atom in AtomType},
    **{atom.name.lower(): atom for atom in AtomType},
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Mathglyph[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_mode(value: str) -> Mode:
    """Parse a mode name ("math" or "text")."""
    try:
        return Mode(value.lower())
    except ValueError:
        raise UnknownSymbolOptionError("mode", value, [m.value for m in Mode]) from None


def parse_atom_type(value: str) -> AtomType:
    """Parse an atom type by short ("bin") or long ("binary") name."""
    atom = _ATOM_ALIASES.get(value.lower())
    if atom is None:
        raise UnknownSymbolOptionError("atom type", value, [a.value for a in AtomType])
    return atom


def parse_font(value: str) -> FontConfig:
    """Parse a font description such as "Main", "Math:italic" or "Main:bold:italic".

    Raises:
        UnknownSymbolOptionError: If a style part is not "bold" or "italic"
    """
    family, *styles = value.split(":")
    weight = FontWeight.NORMAL
    shape = FontShape.UPRIGHT
    for style in styles:
        if style.lower() == "bold":
            weight = FontWeight.BOLD
        elif style.lower() == "italic":
            shape = FontShape.ITALIC
        else:
            raise UnknownSymbolOptionError("font style", style, ["bold", "italic"])
    if not family:
        raise UnknownSymbolOptionError("font family", value, ["Main", "Math", "AMS", "Typewriter"])
    return FontConfig(family=family, weight=weight, shape=shape)


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Resolve math symbols into fonts, characters and math-axis offsets."""


@app.command()
def resolve(
    symbol: Annotated[
        str,
        typer.Argument(
            help="Symbol to resolve (a character, or a code point like U+2260)",
            show_default=False,
        ),
    ],
    mode: Annotated[
        str,
        typer.Option("--mode", "-m", help="Typesetting mode (math|text)"),
    ] = "math",
    atom: Annotated[
        str,
        typer.Option(
            "--atom",
            "-a",
            help="Atom type (ord|op|bin|rel|open|close|punct|inner|spacing)",
        ),
    ] = "ord",
    variant: Annotated[
        bool,
        typer.Option("--variant", help="Request the symbol's variant form"),
    ] = False,
    font: Annotated[
        str | None,
        typer.Option("--font", "-f", help="Per-call font override, e.g. Main:bold"),
    ] = None,
    math_font: Annotated[
        str | None,
        typer.Option("--math-font", help="Math-mode font override, e.g. Math:bold:italic"),
    ] = None,
    text_font: Annotated[
        str | None,
        typer.Option("--text-font", help="Text-mode font override, e.g. Typewriter"),
    ] = None,
    center_operators: Annotated[
        bool,
        typer.Option("--center-operators", "-c", help="Center short glyphs on the math axis"),
    ] = False,
    force_variable_baseline: Annotated[
        bool,
        typer.Option(
            "--force-variable-baseline",
            help="Keep ordinary atoms on the baseline",
        ),
    ] = False,
    font_size: Annotated[
        float,
        typer.Option("--font-size", "-s", help="Device units per em", min=0.01),
    ] = 1.0,
    metrics_file: Annotated[
        Path | None,
        typer.Option("--metrics-file", help="TTF/OTF file to measure"),
    ] = None,
    metrics_font: Annotated[
        str | None,
        typer.Option(
            "--metrics-font",
            help="Font name the measured metrics are registered under, e.g. Main-Regular",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the build result as JSON"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
) -> None:
    """Resolve a symbol and show its font, characters and vertical placement.

    Example:
        mathglyph resolve + --atom bin --center-operators
    """
    try:
        settings = MathGlyphSettings(
            alignment=AlignmentConfig(
                center_operators=center_operators,
                force_variable_baseline=force_variable_baseline,
            ),
            render=RenderConfig(
                font_size=font_size,
                math_font=parse_font(math_font) if math_font else None,
                text_font=parse_font(text_font) if text_font else None,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
        parsed_mode = parse_mode(mode)
        atom_type = parse_atom_type(atom)
        font_override = parse_font(font).to_options() if font else None
        target = _decode_symbol(symbol)
    except UnknownSymbolOptionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if (metrics_file is None) != (metrics_font is None):
        print_error("--metrics-file and --metrics-font must be used together")
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=as_json,
    )
    resolution_logger = ResolutionLogger(logger)

    resolver = SymbolResolver()
    if metrics_file is not None and metrics_font is not None:
        try:
            table = _load_metrics(metrics_file, metrics_font, resolution_logger)
        except FileNotFoundError:
            print_error(f"Font file not found: {metrics_file}")
            raise typer.Exit(code=1)
        except FontLoadError as e:
            print_error(str(e), details=e.reason)
            raise typer.Exit(code=1)
        resolver = SymbolResolver(metrics=table)

    result = resolver.resolve(
        target,
        variant,
        atom_type=atom_type,
        mode=parsed_mode,
        font_override=font_override,
        options=settings.to_render_options(),
    )
    resolution_logger.log_resolution(target, parsed_mode.value, atom_type.value, result)
    if result.path == ResolutionPath.UNSTYLED:
        resolution_logger.log_unstyled(target)

    if as_json:
        console.print_json(data=result.to_dict())
        return

    print_header(__version__)
    print_step(f"Resolved in {parsed_mode.value} mode as {atom_type.name.lower()}")
    print_result(target, result)


@app.command("check-tables")
def check_tables() -> None:
    """Validate the static symbol tables and print their sizes."""
    print_header(__version__)
    print_step("Checking symbol tables")
    try:
        validate_tables()
    except SymbolTableError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_table_sizes({
        "render configs": len(SYMBOL_RENDER_CONFIGS),
        "negated operators": len(NEGATED_OPERATOR_SYMBOLS),
        "compacted composites": len(COMPACTED_COMPOSITE_SYMBOLS),
        "decorated equals": len(DECORATED_EQUAL_SYMBOLS),
        "ligatures": len(LIGATURES),
    })
    print_success("Composite tables are disjoint")


def _is_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDFFF


def _decode_symbol(value: str) -> str:
    """Accept "U+XXXX" code point notation as well as literal symbols.

    Raises:
        UnknownSymbolOptionError: If the symbol contains a surrogate code
            point, which cannot be printed
    """
    symbol = value
    if value[:2].upper() == "U+" and len(value) > 2:
        try:
            symbol = chr(int(value[2:], 16))
        except (ValueError, OverflowError):
            symbol = value
    if any(_is_surrogate(char) for char in symbol):
        shown = "".join(f"U+{ord(c):04X}" if _is_surrogate(c) else c for c in value)
        raise UnknownSymbolOptionError(
            "symbol", shown, ["a character", "a code point outside U+D800-U+DFFF"]
        )
    return symbol


def _load_metrics(
    path: Path, font_name: str, resolution_logger: ResolutionLogger
) -> FontMetricsTable:
    reader = FontMetricsReader(path)
    reader.load()
    try:
        metrics = reader.extract()
    finally:
        reader.close()
    resolution_logger.log_metrics_font(font_name, path, len(metrics))
    return FontMetricsTable.builtin().with_font(font_name, metrics)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
