"""Domain models for mathglyph.

This module contains the value types shared by the symbol resolver and the
alignment engine. All models are:

- Immutable (frozen dataclasses and closed enums)
- Independent of any renderer or font file format

Key classes:
- Mode, AtomType: Closed enumerations driving resolution and alignment
- FontOptions: Font request with an ordered fallback list
- CharacterMetrics: Glyph metrics in em units
- SymbolRenderConfig: Static per-symbol render configuration
- RenderOptions: Per-call rendering context
- BuildResult: Resolver output
"""

from mathglyph.domain.element import (
    FixedWidthElement,
    GlyphElement,
    OverlayElement,
    RowElement,
    StackElement,
)
from mathglyph.domain.font import CharacterMetrics, FontOptions
from mathglyph.domain.options import RenderOptions
from mathglyph.domain.result import BuildResult
from mathglyph.domain.symbol import RenderConfig, SymbolRenderConfig
from mathglyph.domain.types import AtomType, FontShape, FontWeight, Mode, ResolutionPath

__all__: list[str] = [
    # Enums
    "AtomType",
    "FontShape",
    "FontWeight",
    "Mode",
    "ResolutionPath",
    # Core types
    "BuildResult",
    "CharacterMetrics",
    "FontOptions",
    "RenderConfig",
    "RenderOptions",
    "SymbolRenderConfig",
    # Elements
    "FixedWidthElement",
    "GlyphElement",
    "OverlayElement",
    "RowElement",
    "StackElement",
]
