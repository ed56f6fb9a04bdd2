"""Default builders for composite symbols.

Each builder resolves its component characters through the resolver it is
given and combines the resulting elements with the resolver's element
factory:
- make_rlap_composite_symbol: negation slash overlaid on a base operator
- make_compacted_composite_symbol: two characters with a reduced gap
- make_decorated_equal_symbol: an equal sign with a small decoration above
"""

from dataclasses import replace
from typing import TYPE_CHECKING

from mathglyph.core.units import em_to_device
from mathglyph.domain import (
    AtomType,
    BuildResult,
    FontOptions,
    Mode,
    RenderOptions,
    ResolutionPath,
)
from mathglyph.tables import DECORATED_EQUAL_DECORATIONS

if TYPE_CHECKING:
    from mathglyph.core.resolver import SymbolResolver

# Advance width a colon is clamped to inside a compacted symbol (em)
COLON_WIDTH = 0.111

# Size of decorations relative to the equal sign
DECORATION_SCALE = 0.5

# Vertical gap between the equal sign and its decoration (em)
DECORATION_GAP = 0.1


def make_rlap_composite_symbol(
    resolver: "SymbolResolver",
    char1: str,
    char2: str,
    atom_type: AtomType,
    mode: Mode,
    options: RenderOptions,
) -> BuildResult:
    """Overlay char1 with zero width on top of char2."""
    res1 = resolver.resolve(char1, atom_type=atom_type, mode=mode, options=options)
    res2 = resolver.resolve(char2, atom_type=atom_type, mode=mode, options=options)
    return BuildResult(
        options=options,
        element=resolver.factory.overlay(res2.element, res1.element, options),
        italic=res2.italic,
        path=ResolutionPath.NEGATED_OPERATOR,
    )


def make_compacted_composite_symbol(
    resolver: "SymbolResolver",
    char1: str,
    char2: str,
    spacing: float,
    atom_type: AtomType,
    mode: Mode,
    options: RenderOptions,
) -> BuildResult:
    """Lay out char1 and char2 side by side separated by spacing (em).

    Colons are clamped to a narrow advance width so that the pair reads
    as one symbol.
    """
    factory = resolver.factory
    results = [
        resolver.resolve(char, atom_type=atom_type, mode=mode, options=options)
        for char in (char1, char2)
    ]
    elements = []
    for char, result in zip((char1, char2), results):
        element = result.element
        if char == ":":
            element = factory.fixed_width(element, em_to_device(COLON_WIDTH, options), options)
        elements.append(element)

    return BuildResult(
        options=options,
        element=factory.row(elements, [em_to_device(spacing, options)], options),
        italic=results[1].italic,
        path=ResolutionPath.COMPACTED_COMPOSITE,
    )


def make_decorated_equal_symbol(
    resolver: "SymbolResolver",
    symbol: str,
    atom_type: AtomType,
    mode: Mode,
    options: RenderOptions,
) -> BuildResult:
    """Draw an equal sign with the symbol's decoration stacked above it."""
    spec = DECORATED_EQUAL_DECORATIONS[symbol]
    factory = resolver.factory

    base = resolver.resolve("=", atom_type=atom_type, mode=mode, options=options)
    base_metrics = resolver.lookup("=", FontOptions(), Mode.MATH)
    base_height = base_metrics.height if base_metrics is not None else 0.0

    decoration_options = replace(options.scaled(DECORATION_SCALE), center_operators=False)
    decorations = [
        resolver.resolve(
            char,
            atom_type=AtomType.ORDINARY,
            mode=mode,
            font_override=spec.font,
            options=decoration_options,
        ).element
        for char in spec.characters
    ]
    decoration = factory.row(decorations, [0.0] * (len(decorations) - 1), options)

    return BuildResult(
        options=options,
        element=factory.stack(
            base.element,
            decoration,
            em_to_device(base_height + DECORATION_GAP, options),
            options,
        ),
        path=ResolutionPath.DECORATED_EQUAL,
    )
