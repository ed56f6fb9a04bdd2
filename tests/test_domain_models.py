"""Tests for domain models to verify they work correctly."""

import pytest

from mathglyph.domain import (
    AtomType,
    BuildResult,
    CharacterMetrics,
    FontOptions,
    FontShape,
    FontWeight,
    GlyphElement,
    Mode,
    RenderConfig,
    RenderOptions,
    ResolutionPath,
    RowElement,
    SymbolRenderConfig,
)


class TestFontOptions:
    """Tests for FontOptions class."""

    def test_defaults(self) -> None:
        """Test default font is upright regular Main."""
        font = FontOptions()
        assert font.font_family == "Main"
        assert font.font_weight == FontWeight.NORMAL
        assert font.font_shape == FontShape.UPRIGHT
        assert font.fallback == ()

    @pytest.mark.parametrize(
        ("weight", "shape", "expected"),
        [
            (FontWeight.NORMAL, FontShape.UPRIGHT, "Math-Regular"),
            (FontWeight.BOLD, FontShape.UPRIGHT, "Math-Bold"),
            (FontWeight.NORMAL, FontShape.ITALIC, "Math-Italic"),
            (FontWeight.BOLD, FontShape.ITALIC, "Math-BoldItalic"),
        ],
    )
    def test_font_name(self, weight: FontWeight, shape: FontShape, expected: str) -> None:
        """Test font name combines family and style."""
        assert FontOptions("Math", weight, shape).font_name == expected

    def test_equality_ignores_fallback(self) -> None:
        """Test two fonts differing only in fallback are equal and hash alike."""
        plain = FontOptions("Math", FontWeight.BOLD, FontShape.ITALIC)
        with_fallback = FontOptions(
            "Math", FontWeight.BOLD, FontShape.ITALIC,
            fallback=(FontOptions(font_weight=FontWeight.BOLD),),
        )
        assert plain == with_fallback
        assert hash(plain) == hash(with_fallback)
        assert plain != FontOptions("Math")

    def test_immutable(self) -> None:
        """Test that font options are immutable."""
        font = FontOptions()
        with pytest.raises(AttributeError):
            font.font_family = "Math"  # type: ignore

    def test_to_dict(self) -> None:
        """Test serialization includes the fallback chain."""
        font = FontOptions("Math", fallback=(FontOptions(),))
        data = font.to_dict()
        assert data["family"] == "Math"
        assert data["fallback"][0]["family"] == "Main"


class TestCharacterMetrics:
    """Tests for CharacterMetrics class."""

    def test_from_tuple(self) -> None:
        """Test construction from the raw table layout."""
        metrics = CharacterMetrics.from_tuple((0.08333, 0.58333, 0.0, 0.0, 0.77778))
        assert metrics.depth == 0.08333
        assert metrics.height == 0.58333
        assert metrics.width == 0.77778

    def test_negative_depth_allowed(self) -> None:
        """Test relation glyphs may sit above the baseline."""
        metrics = CharacterMetrics(depth=-0.13313, height=0.36687)
        assert metrics.depth < 0


class TestSymbolRenderConfig:
    """Tests for SymbolRenderConfig mode selection."""

    def test_prefers_requested_mode(self) -> None:
        """Test the record of the requested mode wins."""
        math = RenderConfig(FontOptions("Math"))
        text = RenderConfig(FontOptions())
        config = SymbolRenderConfig(math=math, text=text)
        assert config.for_mode(Mode.MATH) is math
        assert config.for_mode(Mode.TEXT) is text

    def test_falls_back_to_other_mode(self) -> None:
        """Test a missing mode record falls back to the other one."""
        math = RenderConfig(FontOptions("Math"))
        text = RenderConfig(FontOptions())
        assert SymbolRenderConfig(math=math).for_mode(Mode.TEXT) is math
        assert SymbolRenderConfig(text=text).for_mode(Mode.MATH) is text

    def test_empty_config(self) -> None:
        """Test a config without records yields None."""
        assert SymbolRenderConfig().for_mode(Mode.MATH) is None


class TestRenderOptions:
    """Tests for RenderOptions snapshots."""

    def test_with_fonts_returns_copies(self) -> None:
        """Test font overrides produce new snapshots."""
        options = RenderOptions()
        bold = FontOptions(font_weight=FontWeight.BOLD)
        updated = options.with_math_font(bold).with_text_font(bold)
        assert updated.math_font_options == bold
        assert updated.text_font_options == bold
        assert options.math_font_options is None

    def test_scaled(self) -> None:
        """Test scaling multiplies the font size only."""
        options = RenderOptions(font_size=12.0, center_operators=True)
        half = options.scaled(0.5)
        assert half.font_size == 6.0
        assert half.center_operators is True


class TestBuildResult:
    """Tests for BuildResult serialization."""

    def test_to_dict_with_descriptor(self) -> None:
        """Test descriptors are serialized recursively."""
        glyph = GlyphElement(
            character="-",
            font=FontOptions("Typewriter"),
            metrics=None,
            vertical_offset=0.0,
            reported_height=None,
            depth=None,
            italic_padding=0.0,
            font_size=1.0,
            color="#000000",
            atom_type=AtomType.ORDINARY,
        )
        result = BuildResult(
            options=RenderOptions(),
            element=RowElement(children=(glyph, glyph), gaps=(0.0,)),
            path=ResolutionPath.LIGATURE,
        )
        data = result.to_dict()
        assert data["path"] == "ligature"
        assert data["element"]["kind"] == "row"
        assert data["element"]["children"][0]["font"] == "Typewriter-Regular"

    def test_to_dict_with_opaque_element(self) -> None:
        """Test foreign elements fall back to their repr."""
        result = BuildResult(options=RenderOptions(), element=("opaque",))
        assert result.to_dict()["element"] == "('opaque',)"
