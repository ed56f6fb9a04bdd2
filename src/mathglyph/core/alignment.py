"""Vertical alignment of glyphs on the math axis.

Font metrics put every glyph on the baseline. Numerals are tall, so they
anchor the line; binary operators and relations read better when their
visual center matches the numerals' visual center (the math axis).

Characters that get centered:
- Binary operators: +, -, ×, ÷, ·, ± (AtomType.BINARY)
- Relations: =, <, >, ≤, ≥ (AtomType.RELATION)
- Short ordinary atoms (variables such as x, a), unless the caller forces
  them onto the baseline because they sit next to a numeral ("3x")

Characters that stay on the baseline:
- Numerals and anything at least as tall as the height threshold
- All other atom types

Reference metrics (Main-Regular / Math-Italic):
- Digits 0-9: height=0.64444, depth=0
- Plus: height=0.58333, depth=0.08333
- Equals: height=0.36687, depth=-0.13313
- Variable x: height=0.43056, depth=0
"""

from dataclasses import dataclass

from mathglyph.domain import AtomType, CharacterMetrics, RenderOptions

# Reference height of the digits in the primary text font (em)
NUMBER_HEIGHT = 0.64444

# Reference depth of the digits (em)
NUMBER_DEPTH = 0.0

# Distance from the baseline to the digits' visual center (em)
NUMBER_VISUAL_CENTER = (NUMBER_HEIGHT - NUMBER_DEPTH) / 2

# Glyphs shorter than this are eligible for centering (em)
HEIGHT_THRESHOLD = NUMBER_HEIGHT - 0.05

_OPERATOR_TYPES = frozenset({AtomType.BINARY, AtomType.RELATION})


@dataclass(frozen=True, slots=True)
class Placement:
    """Vertical placement of a glyph, in em.

    Attributes:
        vertical_offset: Upward shift; positive moves the glyph up
        reported_height: Height reported to the line box (None when unknown)
        is_centered: Glyph was placed on the math axis and reports the
            digits' height, even when its offset is zero
    """

    vertical_offset: float
    reported_height: float | None
    is_centered: bool = False


def should_apply_centering(height: float) -> bool:
    """Check if a glyph is short enough to be centered.

    Args:
        height: Glyph height in em

    Returns:
        True if the glyph is shorter than the height threshold
    """
    return height < HEIGHT_THRESHOLD


def calculate_alignment_offset(height: float, depth: float) -> float:
    """Calculate the shift aligning a glyph's visual center with the digits'.

    A glyph spanning -depth..height has its visual center at
    (height - depth) / 2 above the baseline.

    Args:
        height: Glyph height in em
        depth: Glyph depth in em

    Returns:
        Offset in em; positive shifts the glyph up
    """
    char_visual_center = (height - depth) / 2
    return NUMBER_VISUAL_CENTER - char_visual_center


def placement_offset(
    metrics: CharacterMetrics | None,
    atom_type: AtomType | None,
    options: RenderOptions,
) -> Placement:
    """Decide the vertical placement of a glyph.

    Args:
        metrics: Glyph metrics, if known
        atom_type: Semantic role of the glyph, if known
        options: Rendering context (center_operators, force_variable_baseline)

    Returns:
        Placement with the offset and the height to report to the line box
    """
    if not options.center_operators or metrics is None or atom_type is None:
        return Placement(0.0, metrics.height if metrics is not None else None)

    is_short = should_apply_centering(metrics.height)
    is_operator = atom_type in _OPERATOR_TYPES
    is_variable = atom_type == AtomType.ORDINARY and is_short
    should_center = is_short and (
        is_operator or (is_variable and not options.force_variable_baseline)
    )

    if should_center:
        # Report the digits' height so centered and uncentered glyphs share
        # one baseline reference in the line box.
        return Placement(
            calculate_alignment_offset(metrics.height, metrics.depth),
            NUMBER_HEIGHT,
            is_centered=True,
        )
    return Placement(0.0, metrics.height)
