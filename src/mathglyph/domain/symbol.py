"""Per-symbol render configuration records."""

from dataclasses import dataclass

from mathglyph.domain.font import FontOptions
from mathglyph.domain.types import Mode


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """How a symbol is drawn in one mode.

    Attributes:
        default_font: Font used when no user font applies
        replace_char: Character actually drawn instead of the symbol, if any
    """

    default_font: FontOptions
    replace_char: str | None = None


@dataclass(frozen=True, slots=True)
class SymbolRenderConfig:
    """Render configuration of a symbol in math and text mode.

    Attributes:
        math: Math-mode record, if the symbol exists in math mode
        text: Text-mode record, if the symbol exists in text mode
        variant_form: Parallel configuration used when a stylistic
            variant is requested
    """

    math: RenderConfig | None = None
    text: RenderConfig | None = None
    variant_form: "SymbolRenderConfig | None" = None

    def for_mode(self, mode: Mode) -> RenderConfig | None:
        """Pick the record for a mode, falling back to the other mode."""
        if mode == Mode.MATH:
            return self.math or self.text
        return self.text or self.math
