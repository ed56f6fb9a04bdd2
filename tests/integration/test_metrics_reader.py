"""Integration tests for measuring metrics from font files."""

from pathlib import Path

import pytest

from mathglyph.core import FontMetricsTable, SymbolResolver
from mathglyph.domain import AtomType, Mode, RenderOptions, ResolutionPath
from mathglyph.exceptions import FontLoadError
from mathglyph.io import FontMetricsReader


class TestFontMetricsReader:
    """Tests for FontMetricsReader against a generated font."""

    def test_not_loaded(self):
        """Test accessing the font before loading raises RuntimeError."""
        reader = FontMetricsReader(Path("Tiny-Regular.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.units_per_em
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.extract()

    def test_missing_file(self, tmp_path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontMetricsReader(tmp_path / "missing.ttf")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_not_a_font(self, garbage_font):
        """Test loading a non-font file raises FontLoadError."""
        reader = FontMetricsReader(garbage_font)
        with pytest.raises(FontLoadError) as exc_info:
            reader.load()
        assert exc_info.value.path == str(garbage_font)

    def test_header(self, tiny_font):
        """Test units per em and family name are read."""
        reader = FontMetricsReader(tiny_font)
        reader.load()
        try:
            assert reader.units_per_em == 1000
            assert reader.family_name == "Tiny"
        finally:
            reader.close()

    def test_extract(self, tiny_font):
        """Test glyph extents are converted to em units."""
        reader = FontMetricsReader(tiny_font)
        reader.load()
        metrics = reader.extract()
        reader.close()

        assert set(metrics) == {0x20, 0x2B, 0x3D, 0x78}
        plus = metrics[0x2B]
        assert plus.height == pytest.approx(0.583)
        assert plus.depth == pytest.approx(0.083)
        assert plus.width == pytest.approx(0.778)
        assert plus.italic == 0.0

        equal = metrics[0x3D]
        assert equal.depth == pytest.approx(-0.133)
        assert equal.height == pytest.approx(0.367)

    def test_empty_glyph(self, tiny_font):
        """Test a glyph without outlines has zero height and depth."""
        reader = FontMetricsReader(tiny_font)
        reader.load()
        space = reader.extract()[0x20]
        reader.close()
        assert (space.depth, space.height) == (0.0, 0.0)
        assert space.width == pytest.approx(0.25)

    def test_close_twice(self, tiny_font):
        """Test closing is idempotent."""
        reader = FontMetricsReader(tiny_font)
        reader.load()
        reader.close()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.units_per_em


class TestMeasuredResolution:
    """Tests for resolving symbols against measured metrics."""

    @pytest.fixture
    def resolver(self, tiny_font):
        reader = FontMetricsReader(tiny_font)
        reader.load()
        try:
            metrics = reader.extract()
        finally:
            reader.close()
        table = FontMetricsTable.builtin().with_font("Main-Regular", metrics)
        return SymbolResolver(metrics=table)

    def test_centered_operator(self, resolver):
        """Test a measured plus sign is centered on the math axis."""
        options = RenderOptions(center_operators=True)
        result = resolver.resolve("+", atom_type=AtomType.BINARY, mode=Mode.MATH, options=options)
        assert result.path == ResolutionPath.DEFAULT_FONT
        assert result.element.vertical_offset == pytest.approx(0.07222)
        assert result.element.reported_height == pytest.approx(0.64444)

    def test_glyph_missing_from_measured_font(self, resolver):
        """Test a character absent from the measured font has no metrics."""
        result = resolver.resolve(
            "(", atom_type=AtomType.OPENING, mode=Mode.MATH, options=RenderOptions()
        )
        assert result.path == ResolutionPath.DEFAULT_FONT
        assert result.element.metrics is None

    def test_other_fonts_kept(self, resolver):
        """Test fonts that were not replaced keep their built-in metrics."""
        result = resolver.resolve("x", atom_type=AtomType.ORDINARY, mode=Mode.MATH, options=RenderOptions())
        assert result.element.font.font_name == "Math-Italic"
        assert result.element.metrics.width == pytest.approx(0.57153)
