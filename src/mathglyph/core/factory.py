"""Visual element factory.

The resolver never draws anything itself. It decides font, character,
metrics and placement, then hands them to an ElementFactory. The default
DescriptorFactory returns plain descriptors from mathglyph.domain.element;
a renderer plugs in its own factory to build real drawable objects.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from mathglyph.core.alignment import placement_offset
from mathglyph.core.units import em_to_device
from mathglyph.domain import (
    AtomType,
    CharacterMetrics,
    FixedWidthElement,
    FontOptions,
    GlyphElement,
    OverlayElement,
    RenderOptions,
    RowElement,
    StackElement,
)


class ElementFactory(Protocol):
    """Builds visual elements from resolved glyph data. Lengths are in device units."""

    def glyph(self, spec: GlyphElement) -> Any:
        """Build a single positioned character."""
        ...

    def row(
        self, children: Sequence[Any], gaps: Sequence[float], options: RenderOptions
    ) -> Any:
        """Lay out children left-to-right on one baseline."""
        ...

    def overlay(self, base: Any, over: Any, options: RenderOptions) -> Any:
        """Draw over with zero width on top of base."""
        ...

    def stack(
        self, base: Any, decoration: Any, shift: float, options: RenderOptions
    ) -> Any:
        """Raise decoration by shift above base."""
        ...

    def fixed_width(self, child: Any, width: float, options: RenderOptions) -> Any:
        """Force the advance width of child, aligned at its start."""
        ...


class DescriptorFactory:
    """Element factory returning immutable descriptors."""

    def glyph(self, spec: GlyphElement) -> GlyphElement:
        return spec

    def row(
        self, children: Sequence[Any], gaps: Sequence[float], options: RenderOptions
    ) -> RowElement:
        return RowElement(children=tuple(children), gaps=tuple(gaps))

    def overlay(self, base: Any, over: Any, options: RenderOptions) -> OverlayElement:
        return OverlayElement(base=base, over=over)

    def stack(
        self, base: Any, decoration: Any, shift: float, options: RenderOptions
    ) -> StackElement:
        return StackElement(base=base, decoration=decoration, shift=shift)

    def fixed_width(
        self, child: Any, width: float, options: RenderOptions
    ) -> FixedWidthElement:
        return FixedWidthElement(child=child, width=width)


def make_char(
    character: str,
    font: FontOptions,
    metrics: CharacterMetrics | None,
    options: RenderOptions,
    *,
    factory: ElementFactory,
    need_italic: bool = False,
    atom_type: AtomType | None = None,
) -> Any:
    """Place a character and build its element.

    Runs the alignment engine, converts the placement to device units and
    appends italic correction as trailing padding when requested.

    Args:
        character: Character to draw
        font: Resolved font
        metrics: Metrics of the character under font, if known
        options: Rendering context
        factory: Element factory receiving the glyph description
        need_italic: Append metrics.italic as trailing space
        atom_type: Semantic role used for alignment

    Returns:
        Whatever the factory builds for the glyph
    """
    placement = placement_offset(metrics, atom_type, options)

    reported_height = None
    if placement.reported_height is not None:
        reported_height = em_to_device(placement.reported_height, options)

    italic_padding = 0.0
    if need_italic and metrics is not None:
        italic_padding = em_to_device(metrics.italic, options)

    return factory.glyph(
        GlyphElement(
            character=character,
            font=font,
            metrics=metrics,
            vertical_offset=em_to_device(placement.vertical_offset, options),
            reported_height=reported_height,
            depth=em_to_device(metrics.depth, options) if metrics is not None else None,
            italic_padding=italic_padding,
            font_size=em_to_device(1.0, options),
            color=options.color,
            atom_type=atom_type,
        )
    )
