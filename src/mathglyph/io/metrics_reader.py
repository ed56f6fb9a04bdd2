"""Font metrics reader for building metrics tables from font files.

This module provides the FontMetricsReader class, which loads a TTF/OTF
font with fontTools and measures the glyphs reachable through its
character map.
"""

from pathlib import Path

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont, TTLibError

from mathglyph.domain import CharacterMetrics
from mathglyph.exceptions import FontLoadError


class FontMetricsReader:
    """Loads a font file and extracts character metrics in em units.

    Italic correction and skew are not stored in font files and are
    reported as zero.

    Example:
        reader = FontMetricsReader(Path("Typewriter-Regular.ttf"))
        reader.load()
        table = FontMetricsTable.builtin().with_font("Typewriter-Regular", reader.extract())
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file is not a readable font
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError, AssertionError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return the font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def family_name(self) -> str | None:
        """Return the font's family name from the name table, if any.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "name" not in font:
            return None
        return font["name"].getBestFamilyName()  # type: ignore[attr-defined]

    def extract(self) -> dict[int, CharacterMetrics]:
        """Measure every glyph in the character map.

        Returns:
            Code point -> metrics in em units

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        upm = self.units_per_em
        glyph_set = font.getGlyphSet()
        hmtx = font["hmtx"]
        cmap = font.getBestCmap() or {}

        metrics: dict[int, CharacterMetrics] = {}
        for codepoint, glyph_name in cmap.items():
            pen = BoundsPen(glyph_set)
            glyph_set[glyph_name].draw(pen)
            advance_width = hmtx[glyph_name][0]  # type: ignore[index]

            if pen.bounds is None:
                depth, height = 0.0, 0.0
            else:
                _x_min, y_min, _x_max, y_max = pen.bounds
                depth, height = -y_min / upm, y_max / upm

            metrics[codepoint] = CharacterMetrics(
                depth=depth,
                height=height,
                width=advance_width / upm,
            )
        return metrics

    def close(self) -> None:
        """Close the font file."""
        if self._font is not None:
            self._font.close()
            self._font = None
