"""Tests for math-axis alignment."""

import pytest

from mathglyph.core.alignment import (
    HEIGHT_THRESHOLD,
    NUMBER_HEIGHT,
    NUMBER_VISUAL_CENTER,
    calculate_alignment_offset,
    placement_offset,
    should_apply_centering,
)
from mathglyph.domain import AtomType, CharacterMetrics, RenderOptions

CENTERING = RenderOptions(center_operators=True)

PLUS = CharacterMetrics(depth=0.08333, height=0.58333)
EQUALS = CharacterMetrics(depth=-0.13313, height=0.36687)
DIGIT = CharacterMetrics(depth=0.0, height=0.64444)
VARIABLE_X = CharacterMetrics(depth=0.0, height=0.43056)


class TestConstants:
    """Tests for the reference constants."""

    def test_number_visual_center(self) -> None:
        """Test the math axis sits halfway up the digits."""
        assert NUMBER_VISUAL_CENTER == pytest.approx(0.32222, abs=1e-9)

    def test_height_threshold(self) -> None:
        """Test the threshold is 0.05 em below the digit height."""
        assert HEIGHT_THRESHOLD == pytest.approx(0.59444, abs=1e-9)

    def test_should_apply_centering(self) -> None:
        """Test only glyphs below the threshold are short."""
        assert should_apply_centering(0.58333)
        assert not should_apply_centering(NUMBER_HEIGHT)
        assert not should_apply_centering(HEIGHT_THRESHOLD)

    def test_calculate_alignment_offset(self) -> None:
        """Test the offset moves the glyph center onto the axis."""
        assert calculate_alignment_offset(0.58333, 0.08333) == pytest.approx(0.07222, abs=1e-9)


class TestPlacementOffset:
    """Tests for placement_offset decisions."""

    def test_operator_centered(self) -> None:
        """Test a binary operator is raised onto the math axis."""
        placement = placement_offset(PLUS, AtomType.BINARY, CENTERING)
        assert placement.vertical_offset == pytest.approx(0.07222, abs=1e-9)
        assert placement.reported_height == NUMBER_HEIGHT
        assert placement.is_centered

    def test_relation_with_negative_depth(self) -> None:
        """Test a relation sitting above the baseline gets the same offset."""
        placement = placement_offset(EQUALS, AtomType.RELATION, CENTERING)
        assert placement.vertical_offset == pytest.approx(0.07222, abs=1e-9)
        assert placement.reported_height == NUMBER_HEIGHT

    def test_centered_with_zero_offset(self) -> None:
        """Test a short glyph already on the axis is still reported as centered."""
        on_axis = CharacterMetrics(depth=-0.14444, height=0.5)
        placement = placement_offset(on_axis, AtomType.BINARY, CENTERING)
        assert placement.vertical_offset == pytest.approx(0.0, abs=1e-12)
        assert placement.reported_height == NUMBER_HEIGHT
        assert placement.is_centered

    @pytest.mark.parametrize("atom_type", list(AtomType))
    def test_numerals_never_centered(self, atom_type: AtomType) -> None:
        """Test tall glyphs stay on the baseline for every atom type."""
        placement = placement_offset(DIGIT, atom_type, CENTERING)
        assert placement.vertical_offset == 0.0
        assert placement.reported_height == DIGIT.height
        assert not placement.is_centered

    def test_variable_centered(self) -> None:
        """Test a standalone short variable is centered."""
        placement = placement_offset(VARIABLE_X, AtomType.ORDINARY, CENTERING)
        assert placement.vertical_offset == pytest.approx(0.32222 - 0.21528, abs=1e-9)
        assert placement.reported_height == NUMBER_HEIGHT

    def test_force_variable_baseline(self) -> None:
        """Test a variable next to a numeral keeps the baseline."""
        options = RenderOptions(center_operators=True, force_variable_baseline=True)
        placement = placement_offset(VARIABLE_X, AtomType.ORDINARY, options)
        assert placement.vertical_offset == 0.0
        assert placement.reported_height == VARIABLE_X.height

    def test_force_variable_baseline_keeps_operators_centered(self) -> None:
        """Test the baseline escape hatch does not affect operators."""
        options = RenderOptions(center_operators=True, force_variable_baseline=True)
        placement = placement_offset(PLUS, AtomType.BINARY, options)
        assert placement.vertical_offset == pytest.approx(0.07222, abs=1e-9)

    @pytest.mark.parametrize(
        "atom_type",
        [AtomType.OPERATOR, AtomType.OPENING, AtomType.CLOSING, AtomType.PUNCTUATION,
         AtomType.INNER, AtomType.SPACING],
    )
    def test_other_atom_types_not_centered(self, atom_type: AtomType) -> None:
        """Test short glyphs of other roles keep the baseline."""
        placement = placement_offset(PLUS, atom_type, CENTERING)
        assert placement.vertical_offset == 0.0
        assert placement.reported_height == PLUS.height

    def test_centering_disabled(self) -> None:
        """Test nothing moves when centering is off."""
        placement = placement_offset(PLUS, AtomType.BINARY, RenderOptions())
        assert placement.vertical_offset == 0.0
        assert placement.reported_height == PLUS.height

    def test_missing_metrics(self) -> None:
        """Test unknown metrics leave the height unset."""
        placement = placement_offset(None, AtomType.BINARY, CENTERING)
        assert placement.vertical_offset == 0.0
        assert placement.reported_height is None

    def test_missing_atom_type(self) -> None:
        """Test an unknown role keeps the natural height."""
        placement = placement_offset(PLUS, None, CENTERING)
        assert placement.vertical_offset == 0.0
        assert placement.reported_height == PLUS.height

    def test_idempotent(self) -> None:
        """Test identical inputs give bit-identical placements."""
        first = placement_offset(EQUALS, AtomType.RELATION, CENTERING)
        second = placement_offset(EQUALS, AtomType.RELATION, CENTERING)
        assert first == second
        assert first.vertical_offset.hex() == second.vertical_offset.hex()
