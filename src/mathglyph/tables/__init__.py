"""Static lookup tables for symbol resolution.

All tables are built once at import and exposed as read-only mappings:

- SYMBOL_RENDER_CONFIGS: symbol -> SymbolRenderConfig
- NEGATED_OPERATOR_SYMBOLS: symbol -> (overlay character, base character)
- COMPACTED_COMPOSITE_SYMBOLS / _SPACINGS: symbol -> character pair / gap in em
- DECORATED_EQUAL_SYMBOLS / _DECORATIONS: symbols built from "=" plus a decoration
- LIGATURES: symbol -> expansion used under the fixed-width family
- FONT_METRICS_DATA: font name -> code point -> raw metrics

validate_tables() runs on import; a violation is a data defect and raises
SymbolTableError.
"""

from collections.abc import Mapping

from mathglyph.exceptions import SymbolTableError
from mathglyph.tables.composite import (
    COMPACTED_COMPOSITE_SYMBOL_SPACINGS,
    COMPACTED_COMPOSITE_SYMBOLS,
    DECORATED_EQUAL_DECORATIONS,
    DECORATED_EQUAL_SYMBOLS,
    NEGATED_OPERATOR_SYMBOLS,
    DecorationSpec,
)
from mathglyph.tables.font_metrics import FONT_METRICS_DATA
from mathglyph.tables.ligatures import FIXED_WIDTH_FAMILY, LIGATURES
from mathglyph.tables.symbols import SYMBOL_RENDER_CONFIGS, math_default


def validate_tables(
    negated: Mapping[str, tuple[str, str]] = NEGATED_OPERATOR_SYMBOLS,
    compacted: Mapping[str, tuple[str, str]] = COMPACTED_COMPOSITE_SYMBOLS,
    spacings: Mapping[str, float] = COMPACTED_COMPOSITE_SYMBOL_SPACINGS,
    decorated: Mapping[str, DecorationSpec] = DECORATED_EQUAL_DECORATIONS,
) -> None:
    """Check the invariants of the composite tables.

    Args:
        negated: Negated-operator table
        compacted: Compacted-composite table
        spacings: Gap of every compacted-composite symbol
        decorated: Decoration of every decorated-equal symbol

    Raises:
        SymbolTableError: If a symbol appears in more than one composite
            table, or a compacted symbol has no spacing
    """
    domains = {
        "negated_operator": set(negated),
        "compacted_composite": set(compacted),
        "decorated_equal": set(decorated),
    }
    names = list(domains)
    for i, first in enumerate(names):
        for second in names[i + 1:]:
            shared = domains[first] & domains[second]
            if shared:
                raise SymbolTableError(
                    f"{first}/{second}",
                    f"symbols in more than one composite table: {sorted(shared)}",
                )

    missing = set(compacted) - set(spacings)
    if missing:
        raise SymbolTableError(
            "compacted_composite", f"symbols without spacing: {sorted(missing)}"
        )

    for symbol, pair in {**negated, **compacted}.items():
        if len(pair) != 2:
            raise SymbolTableError("composite", f"'{symbol}' must map to two characters")


validate_tables()

__all__ = [
    "COMPACTED_COMPOSITE_SYMBOLS",
    "COMPACTED_COMPOSITE_SYMBOL_SPACINGS",
    "DECORATED_EQUAL_DECORATIONS",
    "DECORATED_EQUAL_SYMBOLS",
    "FIXED_WIDTH_FAMILY",
    "FONT_METRICS_DATA",
    "LIGATURES",
    "NEGATED_OPERATOR_SYMBOLS",
    "SYMBOL_RENDER_CONFIGS",
    "DecorationSpec",
    "math_default",
    "validate_tables",
]
