"""Rendering context passed to every resolution call."""

from dataclasses import dataclass, replace

from mathglyph.domain.font import FontOptions


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable configuration snapshot for one resolution call.

    Attributes:
        math_font_options: Font override for math mode (e.g. \\mathbf)
        text_font_options: Font override for text mode (e.g. \\textbf)
        center_operators: Shift short operators and variables to the math axis
        force_variable_baseline: Keep ordinary atoms on the baseline even
            when they are short (a variable next to a numeral)
        color: Color handed to the element factory
        font_size: Device units per em
    """

    math_font_options: FontOptions | None = None
    text_font_options: FontOptions | None = None
    center_operators: bool = False
    force_variable_baseline: bool = False
    color: str = "#000000"
    font_size: float = 1.0

    def with_math_font(self, font: FontOptions | None) -> "RenderOptions":
        """Return a copy with a different math font override."""
        return replace(self, math_font_options=font)

    def with_text_font(self, font: FontOptions | None) -> "RenderOptions":
        """Return a copy with a different text font override."""
        return replace(self, text_font_options=font)

    def scaled(self, factor: float) -> "RenderOptions":
        """Return a copy whose font size is multiplied by factor."""
        return replace(self, font_size=self.font_size * factor)
