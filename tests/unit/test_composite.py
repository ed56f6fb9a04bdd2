"""Tests for composite symbol builders."""

import pytest

from mathglyph.core.composite import (
    COLON_WIDTH,
    make_compacted_composite_symbol,
    make_rlap_composite_symbol,
)
from mathglyph.core.resolver import SymbolResolver
from mathglyph.domain import (
    AtomType,
    FixedWidthElement,
    GlyphElement,
    Mode,
    OverlayElement,
    RenderOptions,
    ResolutionPath,
    RowElement,
    StackElement,
)
from mathglyph.tables.composite import MU, NOT_SLASH


@pytest.fixture
def resolver() -> SymbolResolver:
    """Create a resolver with the built-in tables."""
    return SymbolResolver()


def resolve_relation(resolver: SymbolResolver, symbol: str, options: RenderOptions | None = None):
    return resolver.resolve(
        symbol, atom_type=AtomType.RELATION, mode=Mode.MATH, options=options or RenderOptions()
    )


class TestNegatedOperators:
    """Tests for negation slash overlays."""

    def test_not_equal(self, resolver: SymbolResolver) -> None:
        """Test the slash is drawn over the equal sign."""
        result = resolve_relation(resolver, "≠")
        element = result.element
        assert result.path == ResolutionPath.NEGATED_OPERATOR
        assert isinstance(element, OverlayElement)
        assert element.base.character == "="
        assert element.over.character == NOT_SLASH
        assert element.base.font.font_name == "Main-Regular"

    def test_negated_arrow(self, resolver: SymbolResolver) -> None:
        """Test arrows are negated the same way."""
        result = resolve_relation(resolver, "↛")
        assert result.element.base.character == "→"

    def test_reports_base_italic(self, resolver: SymbolResolver) -> None:
        """Test the overlay reports the italic correction of its base."""
        result = make_rlap_composite_symbol(
            resolver, NOT_SLASH, "f", AtomType.ORDINARY, Mode.MATH, RenderOptions()
        )
        assert result.italic == pytest.approx(0.10764)
        assert result.skew == 0.0


class TestCompactedComposites:
    """Tests for side-by-side composites."""

    def test_colon_equals(self, resolver: SymbolResolver) -> None:
        """Test colon-equals clamps the colon and tightens the gap."""
        result = resolve_relation(resolver, "≔")
        element = result.element
        assert result.path == ResolutionPath.COMPACTED_COMPOSITE
        assert isinstance(element, RowElement)
        colon, equal = element.children
        assert isinstance(colon, FixedWidthElement)
        assert colon.width == pytest.approx(COLON_WIDTH)
        assert colon.child.character == ":"
        assert isinstance(equal, GlyphElement)
        assert equal.character == "="
        assert element.gaps == (pytest.approx(-1.2 * MU),)

    def test_double_colon_spacing(self, resolver: SymbolResolver) -> None:
        """Test the proportion symbol uses the narrower gap."""
        result = resolve_relation(resolver, "∷")
        assert result.element.gaps == (pytest.approx(-0.9 * MU),)
        assert all(isinstance(child, FixedWidthElement) for child in result.element.children)

    def test_minus_colon(self, resolver: SymbolResolver) -> None:
        """Test the minus sign is not clamped."""
        result = resolve_relation(resolver, "∹")
        minus, colon = result.element.children
        assert isinstance(minus, GlyphElement)
        assert minus.character == "−"
        assert isinstance(colon, FixedWidthElement)

    def test_nested_composite(self, resolver: SymbolResolver) -> None:
        """Test a composite component is itself built through the resolver."""
        result = resolve_relation(resolver, "⩴")
        first, second = result.element.children
        assert isinstance(first, RowElement)
        assert len(first.children) == 2
        assert second.character == "="

    def test_device_units(self, resolver: SymbolResolver) -> None:
        """Test spacing and clamped width scale with the font size."""
        result = resolve_relation(resolver, "≔", RenderOptions(font_size=18.0))
        colon = result.element.children[0]
        assert colon.width == pytest.approx(COLON_WIDTH * 18.0)
        assert result.element.gaps == (pytest.approx(-1.2),)

    def test_reports_second_italic(self, resolver: SymbolResolver) -> None:
        """Test the row reports the italic correction of its last character."""
        result = make_compacted_composite_symbol(
            resolver, ":", "f", -MU, AtomType.ORDINARY, Mode.MATH, RenderOptions()
        )
        assert result.italic == pytest.approx(0.10764)


class TestDecoratedEquals:
    """Tests for equal signs with decorations."""

    def test_definition_equals(self, resolver: SymbolResolver) -> None:
        """Test 'def' is stacked above the equal sign in a smaller upright font."""
        result = resolve_relation(resolver, "≝", RenderOptions(font_size=10.0))
        element = result.element
        assert result.path == ResolutionPath.DECORATED_EQUAL
        assert isinstance(element, StackElement)
        assert element.base.character == "="
        assert element.shift == pytest.approx(4.6687)

        letters = element.decoration.children
        assert [g.character for g in letters] == ["d", "e", "f"]
        for glyph in letters:
            assert glyph.font.font_name == "Main-Regular"
            assert glyph.font_size == pytest.approx(5.0)

    def test_question_equals(self, resolver: SymbolResolver) -> None:
        """Test a decoration without an explicit font uses its default font."""
        result = resolve_relation(resolver, "≟")
        (mark,) = result.element.decoration.children
        assert mark.character == "?"
        assert mark.font.font_name == "Main-Regular"
        assert mark.metrics is not None

    def test_decoration_not_centered(self, resolver: SymbolResolver) -> None:
        """Test the decoration ignores operator centering."""
        options = RenderOptions(center_operators=True)
        result = resolve_relation(resolver, "≙", options)
        (wedge,) = result.element.decoration.children
        assert wedge.vertical_offset == 0.0
        assert result.element.base.vertical_offset != 0.0


class TestCompositeModes:
    """Tests for when composites are not synthesized."""

    @pytest.mark.parametrize("symbol", ["≠", "≔", "≝"])
    def test_text_mode(self, resolver: SymbolResolver, symbol: str) -> None:
        """Test composite symbols are drawn unstyled in text mode."""
        result = resolver.resolve(
            symbol, atom_type=AtomType.RELATION, mode=Mode.TEXT, options=RenderOptions()
        )
        assert result.path == ResolutionPath.UNSTYLED
        assert result.element.character == symbol
