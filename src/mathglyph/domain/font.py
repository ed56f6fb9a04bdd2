"""Font selection and character metrics.

This module defines the two value types the resolver passes around:
- FontOptions: A font family/weight/shape with an ordered fallback list
- CharacterMetrics: Per-glyph metrics in em units
"""

from dataclasses import dataclass, field
from typing import Any

from mathglyph.domain.types import FontShape, FontWeight


@dataclass(frozen=True, slots=True)
class FontOptions:
    """A font request.

    Two font options are equal when family, weight and shape match;
    the fallback list does not take part in equality or hashing.

    Attributes:
        font_family: Family name (e.g., "Main", "Math", "Typewriter")
        font_weight: Weight axis
        font_shape: Shape axis
        fallback: Fonts tried left-to-right when this one has no metrics
    """

    font_family: str = "Main"
    font_weight: FontWeight = FontWeight.NORMAL
    font_shape: FontShape = FontShape.UPRIGHT
    fallback: tuple["FontOptions", ...] = field(default=(), compare=False)

    @property
    def font_name(self) -> str:
        """Get the metrics table name, e.g. "Main-Regular" or "Math-BoldItalic"."""
        postfix = ""
        if self.font_weight == FontWeight.BOLD:
            postfix += "Bold"
        if self.font_shape == FontShape.ITALIC:
            postfix += "Italic"
        return f"{self.font_family}-{postfix or 'Regular'}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with family, weight, shape and fallback fields
        """
        return {
            "family": self.font_family,
            "weight": self.font_weight.value,
            "shape": self.font_shape.value,
            "fallback": [f.to_dict() for f in self.fallback],
        }


@dataclass(frozen=True, slots=True)
class CharacterMetrics:
    """Metrics of one glyph, relative to a 1 em font size.

    Height is measured upward from the baseline and depth downward.
    Relation glyphs may report a negative depth when they sit entirely
    above the baseline.

    Attributes:
        depth: Extent below the baseline
        height: Extent above the baseline
        italic: Italic correction
        skew: Skew used for accent placement
        width: Advance width
    """

    depth: float
    height: float
    italic: float = 0.0
    skew: float = 0.0
    width: float = 0.0

    @classmethod
    def from_tuple(cls, values: tuple[float, ...]) -> "CharacterMetrics":
        """Build from a (depth, height, italic, skew, width) tuple."""
        return cls(*values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "depth": self.depth,
            "height": self.height,
            "italic": self.italic,
            "skew": self.skew,
            "width": self.width,
        }
