"""Conversion from em units to device units."""

from mathglyph.domain import RenderOptions


def em_to_device(em: float, options: RenderOptions) -> float:
    """Convert a length in em to device units under the given options.

    Args:
        em: Length relative to the current font size
        options: Rendering context carrying the font size

    Returns:
        Length in device units
    """
    return em * options.font_size
