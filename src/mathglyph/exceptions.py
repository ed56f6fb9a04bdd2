"""Exception hierarchy for Mathglyph.

Symbol resolution never raises: every missing lookup is routed through the
fallback chain. These exceptions cover defects in the static data, font
loading, and invalid user input at the application layer.
"""


class MathGlyphError(Exception):
    """Base exception for all Mathglyph errors."""

    pass


class SymbolTableError(MathGlyphError):
    """Static symbol tables violate an initialization invariant."""

    def __init__(self, table: str, reason: str) -> None:
        self.table = table
        self.reason = reason
        super().__init__(f"Invalid symbol table '{table}': {reason}")


class FontError(MathGlyphError):
    """Errors related to font files."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class UnknownSymbolOptionError(MathGlyphError):
    """A mode, atom type or font description could not be parsed."""

    def __init__(self, kind: str, value: str, choices: list[str]) -> None:
        self.kind = kind
        self.value = value
        self.choices = choices
        super().__init__(
            f"Unknown {kind} '{value}' (expected one of: {', '.join(choices)})"
        )
