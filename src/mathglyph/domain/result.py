"""Build result returned by the symbol resolver."""

from dataclasses import dataclass
from typing import Any

from mathglyph.domain.options import RenderOptions
from mathglyph.domain.types import ResolutionPath


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Output of a resolution call.

    Attributes:
        options: Options the symbol was resolved under, echoed back
        element: Opaque visual element produced by the element factory
        italic: Italic correction in device units
        skew: Skew in device units
        path: Resolution rule that produced this result
    """

    options: RenderOptions
    element: Any
    italic: float = 0.0
    skew: float = 0.0
    path: ResolutionPath = ResolutionPath.UNSTYLED

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for display.

        Returns:
            Dictionary with path, italic, skew and the element description
        """
        to_dict = getattr(self.element, "to_dict", None)
        return {
            "path": self.path.value,
            "italic": self.italic,
            "skew": self.skew,
            "element": to_dict() if callable(to_dict) else repr(self.element),
        }
