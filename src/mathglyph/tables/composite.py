"""Composite symbol tables.

Symbols without a single glyph are synthesized from two characters or from
an equal sign with a decoration. Each symbol belongs to at most one table.
"""

from dataclasses import dataclass
from types import MappingProxyType

from mathglyph.domain import FontOptions

# One math unit is 1/18 em.
MU = 1.0 / 18.0

# Combining long solidus overlay, drawn through the negated character.
NOT_SLASH = "\u0338"


@dataclass(frozen=True, slots=True)
class DecorationSpec:
    """Decoration drawn above an equal sign.

    Attributes:
        characters: Characters of the decoration, left to right
        font: Font override for word decorations (None uses the symbol tables)
    """

    characters: tuple[str, ...]
    font: FontOptions | None = None


# symbol -> (character overlaid with zero width, base character)
NEGATED_OPERATOR_SYMBOLS = MappingProxyType({
    "↚": (NOT_SLASH, "←"),  # nleftarrow
    "↛": (NOT_SLASH, "→"),  # nrightarrow
    "⇍": (NOT_SLASH, "⇐"),  # nLeftarrow
    "⇏": (NOT_SLASH, "⇒"),  # nRightarrow
    "∉": (NOT_SLASH, "∈"),  # notin
    "∌": (NOT_SLASH, "∋"),  # not ni
    "∤": (NOT_SLASH, "∣"),  # nmid
    "∦": (NOT_SLASH, "∥"),  # nparallel
    "≁": (NOT_SLASH, "∼"),  # nsim
    "≄": (NOT_SLASH, "≃"),  # not simeq
    "≇": (NOT_SLASH, "≅"),  # ncong
    "≉": (NOT_SLASH, "≈"),  # not approx
    "≠": (NOT_SLASH, "="),  # neq
    "≢": (NOT_SLASH, "≡"),  # not equiv
    "≮": (NOT_SLASH, "<"),  # nless
    "≯": (NOT_SLASH, ">"),  # ngtr
    "≰": (NOT_SLASH, "≤"),  # nleq
    "≱": (NOT_SLASH, "≥"),  # ngeq
})

# symbol -> (left character, right character), laid out with a reduced gap
COMPACTED_COMPOSITE_SYMBOLS = MappingProxyType({
    "∷": (":", ":"),  # dblcolon
    "∹": ("−", ":"),  # minuscolon
    "≔": (":", "="),  # coloneqq
    "≕": ("=", ":"),  # eqqcolon
    "⩴": ("∷", "="),  # Coloneqq
})

# symbol -> horizontal gap between the two characters, in em
COMPACTED_COMPOSITE_SYMBOL_SPACINGS = MappingProxyType({
    "∷": -0.9 * MU,
    "∹": -1.2 * MU,
    "≔": -1.2 * MU,
    "≕": -1.2 * MU,
    "⩴": -1.2 * MU,
})

_WORD_FONT = FontOptions()

# symbol -> decoration drawn above "="
DECORATED_EQUAL_DECORATIONS = MappingProxyType({
    "≙": DecorationSpec(("∧",)),  # estimates
    "≚": DecorationSpec(("∨",)),  # equiangular
    "≛": DecorationSpec(("⋆",)),  # stareq
    "≝": DecorationSpec(("d", "e", "f"), _WORD_FONT),  # eqdef
    "≞": DecorationSpec(("m",), _WORD_FONT),  # measeq
    "≟": DecorationSpec(("?",)),  # questeq
})

DECORATED_EQUAL_SYMBOLS = frozenset(DECORATED_EQUAL_DECORATIONS)
