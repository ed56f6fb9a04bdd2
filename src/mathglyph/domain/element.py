"""Visual element descriptors produced by the default element factory.

The resolver treats elements as opaque values. These descriptors are what
the built-in DescriptorFactory hands back; a renderer can consume them or
supply its own factory instead.

All lengths are in device units.
"""

from dataclasses import dataclass
from typing import Any

from mathglyph.domain.font import CharacterMetrics, FontOptions
from mathglyph.domain.types import AtomType


@dataclass(frozen=True, slots=True)
class GlyphElement:
    """A single positioned character.

    Attributes:
        character: Character to draw
        font: Resolved font
        metrics: Metrics the glyph was placed with (None when unknown)
        vertical_offset: Upward shift toward the math axis
        reported_height: Height reported to the line box (None when unknown)
        depth: Depth reported to the line box (None when unknown)
        italic_padding: Trailing space appended for italic correction
        font_size: Device units per em
        color: Drawing color
        atom_type: Semantic role, if known
    """

    character: str
    font: FontOptions
    metrics: CharacterMetrics | None
    vertical_offset: float
    reported_height: float | None
    depth: float | None
    italic_padding: float
    font_size: float
    color: str
    atom_type: AtomType | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": "glyph",
            "character": self.character,
            "font": self.font.font_name,
            "metrics": self.metrics.to_dict() if self.metrics else None,
            "vertical_offset": self.vertical_offset,
            "reported_height": self.reported_height,
            "depth": self.depth,
            "italic_padding": self.italic_padding,
            "font_size": self.font_size,
            "color": self.color,
            "atom_type": self.atom_type.value if self.atom_type else None,
        }


@dataclass(frozen=True, slots=True)
class RowElement:
    """Children laid out left-to-right on a shared baseline.

    Attributes:
        children: Elements in drawing order
        gaps: Horizontal space inserted after each child but the last
    """

    children: tuple[Any, ...]
    gaps: tuple[float, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": "row",
            "children": [_element_dict(c) for c in self.children],
            "gaps": list(self.gaps),
        }


@dataclass(frozen=True, slots=True)
class OverlayElement:
    """An element drawn with zero width over another one.

    Attributes:
        base: Element that determines the advance width
        over: Element struck through the base
    """

    base: Any
    over: Any

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": "overlay",
            "base": _element_dict(self.base),
            "over": _element_dict(self.over),
        }


@dataclass(frozen=True, slots=True)
class StackElement:
    """A decoration centered above a base element.

    Attributes:
        base: Element on the baseline
        decoration: Element raised above the base
        shift: Distance from the baseline to the decoration's baseline
    """

    base: Any
    decoration: Any
    shift: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": "stack",
            "base": _element_dict(self.base),
            "decoration": _element_dict(self.decoration),
            "shift": self.shift,
        }


@dataclass(frozen=True, slots=True)
class FixedWidthElement:
    """An element whose advance width is forced, aligned at its start."""

    child: Any
    width: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": "fixed_width",
            "child": _element_dict(self.child),
            "width": self.width,
        }


def _element_dict(element: Any) -> Any:
    to_dict = getattr(element, "to_dict", None)
    return to_dict() if callable(to_dict) else repr(element)
