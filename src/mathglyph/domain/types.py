"""Closed enumerations shared by the resolver and the alignment engine.

This module defines:
- Mode: Typesetting context that requested a symbol
- AtomType: Semantic role of a symbol
- FontWeight / FontShape: Font style axes
- ResolutionPath: Which resolution rule produced a result
"""

from enum import Enum


class Mode(str, Enum):
    """Typesetting context."""

    MATH = "math"
    TEXT = "text"


class AtomType(str, Enum):
    """Semantic role of a rendered symbol.

    Drives spacing in the surrounding layout and, for this package,
    whether a glyph is centered on the math axis:
    - BINARY and RELATION are always eligible for centering
    - ORDINARY is eligible unless the caller forces the baseline
    - everything else keeps its natural baseline position
    """

    ORDINARY = "ord"
    OPERATOR = "op"
    BINARY = "bin"
    RELATION = "rel"
    OPENING = "open"
    CLOSING = "close"
    PUNCTUATION = "punct"
    INNER = "inner"
    SPACING = "spacing"


class FontWeight(str, Enum):
    """Font weight axis."""

    NORMAL = "normal"
    BOLD = "bold"


class FontShape(str, Enum):
    """Font shape axis."""

    UPRIGHT = "upright"
    ITALIC = "italic"


class ResolutionPath(str, Enum):
    """Rule of the fallback chain that produced a build result."""

    OVERRIDE_FONT = "override_font"
    LIGATURE = "ligature"
    DEFAULT_FONT = "default_font"
    NEGATED_OPERATOR = "negated_operator"
    COMPACTED_COMPOSITE = "compacted_composite"
    DECORATED_EQUAL = "decorated_equal"
    UNSTYLED = "unstyled"
