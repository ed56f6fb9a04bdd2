"""Character metrics lookup.

The resolver consumes metrics through a single function shape,
``(character, font_name, mode) -> CharacterMetrics | None``. This module
provides the built-in table-backed implementation.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from mathglyph.domain import CharacterMetrics, FontOptions, Mode
from mathglyph.tables.font_metrics import (
    EXTRA_CHARACTER_MAP,
    FALLBACK_CODEPOINT,
    FONT_METRICS_DATA,
    SUPPORTED_SCRIPT_BLOCKS,
)

MetricsLookup = Callable[[str, str, Mode], CharacterMetrics | None]


def supported_codepoint(codepoint: int) -> bool:
    """Check if a code point belongs to a script measured with "M" metrics in text mode."""
    return any(start <= codepoint <= end for start, end in SUPPORTED_SCRIPT_BLOCKS)


class FontMetricsTable:
    """Read-only metrics table keyed by font name and code point.

    Instances are immutable; with_font() returns a new table that shares
    the existing fonts by reference.

    Example:
        table = FontMetricsTable.builtin()
        table.get_character_metrics("x", "Math-Italic", Mode.MATH)
    """

    def __init__(self, fonts: Mapping[str, Mapping[int, CharacterMetrics]]) -> None:
        self._fonts = MappingProxyType(
            {name: MappingProxyType(dict(glyphs)) for name, glyphs in fonts.items()}
        )

    @classmethod
    def builtin(cls) -> "FontMetricsTable":
        """Build the table of the fonts shipped with the symbol tables."""
        return cls({
            name: {cp: CharacterMetrics.from_tuple(values) for cp, values in glyphs.items()}
            for name, glyphs in FONT_METRICS_DATA.items()
        })

    @property
    def font_names(self) -> list[str]:
        """Get the names of all fonts in the table."""
        return sorted(self._fonts)

    def with_font(
        self, font_name: str, metrics: Mapping[int, CharacterMetrics]
    ) -> "FontMetricsTable":
        """Return a new table with a font added or replaced.

        Args:
            font_name: Font name, e.g. "Main-Regular"
            metrics: Code point -> metrics of the font

        Returns:
            New FontMetricsTable
        """
        fonts = dict(self._fonts)
        fonts[font_name] = metrics
        return FontMetricsTable(fonts)

    def get_character_metrics(
        self, character: str, font_name: str, mode: Mode
    ) -> CharacterMetrics | None:
        """Look up the metrics of a character.

        Accented Latin and Cyrillic letters are measured as their base letter.
        In text mode, characters of supported scripts missing from the font
        borrow the metrics of "M".

        Args:
            character: Character to measure (only the first one is used)
            font_name: Font name, e.g. "Main-Regular"
            mode: Typesetting mode

        Returns:
            Metrics, or None if the font or the character is unknown
        """
        if not character:
            return None
        glyphs = self._fonts.get(font_name)
        if glyphs is None:
            return None

        first = character[0]
        codepoint = ord(EXTRA_CHARACTER_MAP.get(first, first))
        metrics = glyphs.get(codepoint)
        if metrics is None and mode == Mode.TEXT and supported_codepoint(codepoint):
            metrics = glyphs.get(FALLBACK_CODEPOINT)
        return metrics

    __call__ = get_character_metrics


_BUILTIN_TABLE = FontMetricsTable.builtin()


def get_character_metrics(
    character: str, font_name: str, mode: Mode
) -> CharacterMetrics | None:
    """Look up metrics in the built-in table."""
    return _BUILTIN_TABLE.get_character_metrics(character, font_name, mode)


def lookup_char(
    char: str,
    font: FontOptions,
    mode: Mode,
    metrics: MetricsLookup = get_character_metrics,
) -> CharacterMetrics | None:
    """Look up a character's metrics under a font request."""
    return metrics(char, font.font_name, mode)
