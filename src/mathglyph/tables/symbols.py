"""Symbol render configuration table.

Maps a symbol to its default font and substitute character in math and
text mode, and optionally to a variant form. The table is built once at
import and exposed read-only.
"""

import re
from types import MappingProxyType

from mathglyph.domain import FontOptions, FontShape, FontWeight, RenderConfig, SymbolRenderConfig
from mathglyph.tables.composite import NOT_SLASH

MAIN = FontOptions()
MAIN_ITALIC = FontOptions(font_shape=FontShape.ITALIC)
MAIN_BOLD = FontOptions(font_weight=FontWeight.BOLD)
MATH_ITALIC = FontOptions("Math", font_shape=FontShape.ITALIC)
AMS = FontOptions("AMS")

_NUMBER_DIGIT_RE = re.compile(r"[0-9]")

# Ordinary letters drawn from the italic text font instead of the math font.
_MATHIT_LETTERS = frozenset({
    "ı",  # dotless i
    "ȷ",  # dotless j
    "£",  # pounds
})


def math_default(value: str) -> FontOptions:
    """Get the default italic font of a math ordinary symbol.

    Digits and a few letters missing from the math font use the italic
    text font; everything else uses the italic math font.

    Args:
        value: Symbol to look up

    Returns:
        Font options for the symbol
    """
    if _NUMBER_DIGIT_RE.match(value[0]) or value in _MATHIT_LETTERS:
        return MAIN_ITALIC
    return MATH_ITALIC


def _entry(
    math: FontOptions | None = None,
    text: FontOptions | None = None,
    *,
    replace: str | None = None,
    variant: SymbolRenderConfig | None = None,
) -> SymbolRenderConfig:
    return SymbolRenderConfig(
        math=RenderConfig(math, replace) if math else None,
        text=RenderConfig(text, replace) if text else None,
        variant_form=variant,
    )


_BINARY_OPERATORS = "+×÷±⋅∗⋆∧∨−"
_RELATIONS = "=<>≤≥≡≈∼≃≅→←⇒⇐∈∋∣∥"
_PUNCTUATION = "()[],.;:!?/"
_TEXT_ONLY = "–—“”‘’`'"

# Mathematical alphanumeric ranges: (first code point, replacement characters, font)
_MATH_ALPHANUMERIC_RANGES: tuple[tuple[int, str, FontOptions], ...] = (
    (0x1D400, "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", MAIN_BOLD),
    (0x1D434, "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", MATH_ITALIC),
    (0x1D7CE, "0123456789", MAIN_BOLD),
)

# Holes in the math italic block; the letters live in Letterlike Symbols.
_RESERVED_CODEPOINTS = frozenset({0x1D455})


def _build_symbol_render_configs() -> dict[str, SymbolRenderConfig]:
    configs: dict[str, SymbolRenderConfig] = {}

    for ch in "0123456789":
        configs[ch] = _entry(MAIN, MAIN)
    for ch in "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZıȷ£":
        configs[ch] = _entry(math_default(ch), MAIN)
    for cp in range(0x3B1, 0x3CA):
        if cp != 0x3C2:  # final sigma has no math form
            configs[chr(cp)] = _entry(MATH_ITALIC)

    for ch in _BINARY_OPERATORS + _RELATIONS:
        configs[ch] = _entry(MAIN)
    for ch in "+=<>" + _PUNCTUATION:
        configs[ch] = _entry(MAIN, MAIN)
    for ch in _TEXT_ONLY:
        configs[ch] = _entry(text=MAIN)

    # Hyphen is drawn as a minus sign in math mode.
    configs["-"] = SymbolRenderConfig(
        math=RenderConfig(MAIN, "−"),
        text=RenderConfig(MAIN),
    )

    configs[NOT_SLASH] = _entry(MAIN)
    configs["∃"] = _entry(MAIN)
    configs["∄"] = _entry(AMS)
    configs["∅"] = _entry(MAIN, variant=_entry(AMS))
    configs["≨"] = _entry(AMS, variant=_entry(AMS, replace="\ue00c"))
    configs["≩"] = _entry(AMS, variant=_entry(AMS, replace="\ue00d"))

    for first, letters, font in _MATH_ALPHANUMERIC_RANGES:
        for offset, letter in enumerate(letters):
            cp = first + offset
            if cp in _RESERVED_CODEPOINTS:
                continue
            configs[chr(cp)] = _entry(font, replace=letter)

    return configs


SYMBOL_RENDER_CONFIGS = MappingProxyType(_build_symbol_render_configs())
