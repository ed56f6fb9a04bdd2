"""Core algorithms for mathglyph.

This module contains:

- Metrics lookup (built-in table, accented-letter and script fallbacks)
- The alignment engine (math-axis centering of short glyphs)
- The element factory seam and the default descriptor factory
- Composite symbol builders
- The symbol resolver

All services are:
- Stateless (safe to share between threads)
- Pure apart from calling into the element factory

Key functions:
- placement_offset: Vertical offset and reported height of a glyph
- get_character_metrics: Metrics of a character in a font
- make_char: Place a character and build its element
- make_base_symbol: Resolve a symbol with the default resolver

Key classes:
- SymbolResolver: Resolution pipeline
- FontMetricsTable: Immutable metrics table
- DescriptorFactory: Default element factory
"""

from mathglyph.core.alignment import (
    HEIGHT_THRESHOLD,
    NUMBER_DEPTH,
    NUMBER_HEIGHT,
    NUMBER_VISUAL_CENTER,
    Placement,
    calculate_alignment_offset,
    placement_offset,
    should_apply_centering,
)
from mathglyph.core.composite import (
    make_compacted_composite_symbol,
    make_decorated_equal_symbol,
    make_rlap_composite_symbol,
)
from mathglyph.core.factory import DescriptorFactory, ElementFactory, make_char
from mathglyph.core.metrics import (
    FontMetricsTable,
    MetricsLookup,
    get_character_metrics,
    lookup_char,
    supported_codepoint,
)
from mathglyph.core.resolver import (
    CompositeBuilders,
    SymbolResolver,
    has_preassigned_style,
    make_base_symbol,
)
from mathglyph.core.units import em_to_device

__all__ = [
    # Alignment
    "HEIGHT_THRESHOLD",
    "NUMBER_DEPTH",
    "NUMBER_HEIGHT",
    "NUMBER_VISUAL_CENTER",
    "Placement",
    "calculate_alignment_offset",
    "placement_offset",
    "should_apply_centering",
    # Composite builders
    "make_compacted_composite_symbol",
    "make_decorated_equal_symbol",
    "make_rlap_composite_symbol",
    # Factory
    "DescriptorFactory",
    "ElementFactory",
    "make_char",
    # Metrics
    "FontMetricsTable",
    "MetricsLookup",
    "get_character_metrics",
    "lookup_char",
    "supported_codepoint",
    # Resolver
    "CompositeBuilders",
    "SymbolResolver",
    "has_preassigned_style",
    "make_base_symbol",
    # Units
    "em_to_device",
]
