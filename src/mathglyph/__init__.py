"""Mathglyph - Resolve math symbols into positioned glyph descriptions.

Mathglyph decides which font, substitute character and metrics a math
symbol should be drawn with, and how far a glyph must be shifted so that
operators and relations sit optically centered on the math axis while
numerals stay on the baseline.

Example:
    >>> from mathglyph import make_base_symbol, AtomType, Mode, RenderOptions
    >>> result = make_base_symbol("+", atom_type=AtomType.BINARY, mode=Mode.MATH,
    ...                           options=RenderOptions(center_operators=True))
    >>> result.element.vertical_offset > 0
    True
"""

from mathglyph.core.resolver import SymbolResolver, make_base_symbol
from mathglyph.domain import AtomType, BuildResult, FontOptions, Mode, RenderOptions

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "AtomType",
    "BuildResult",
    "FontOptions",
    "Mode",
    "RenderOptions",
    "SymbolResolver",
    "__author__",
    "__version__",
    "make_base_symbol",
]
