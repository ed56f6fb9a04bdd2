"""Shared fixtures for integration tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UNITS_PER_EM = 1000

# glyph name -> (code point, advance width, box as (x_min, y_min, x_max, y_max) or None)
TINY_GLYPHS = {
    "plus": (0x2B, 778, (56, -83, 722, 583)),
    "equal": (0x3D, 778, (56, 133, 722, 367)),
    "x": (0x78, 528, (29, 0, 500, 431)),
    "space": (0x20, 250, None),
}


def _box_glyph(box: tuple[int, int, int, int] | None):
    pen = TTGlyphPen(None)
    if box is not None:
        x_min, y_min, x_max, y_max = box
        pen.moveTo((x_min, y_min))
        pen.lineTo((x_min, y_max))
        pen.lineTo((x_max, y_max))
        pen.lineTo((x_max, y_min))
        pen.closePath()
    return pen.glyph()


def build_tiny_font(path: Path) -> Path:
    """Write a TrueType font whose glyphs are boxes with known extents."""
    glyph_order = [".notdef", *TINY_GLYPHS]
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({cp: name for name, (cp, _, _) in TINY_GLYPHS.items()})

    glyphs = {".notdef": _box_glyph((50, 0, 450, 700))}
    metrics = {".notdef": (500, 50)}
    for name, (_, advance, box) in TINY_GLYPHS.items():
        glyphs[name] = _box_glyph(box)
        metrics[name] = (advance, box[0] if box else 0)

    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Tiny", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def tiny_font(tmp_path: Path) -> Path:
    """Path to a freshly built tiny TrueType font."""
    return build_tiny_font(tmp_path / "Tiny-Regular.ttf")


@pytest.fixture
def garbage_font(tmp_path: Path) -> Path:
    """Path to a file that is not a font."""
    path = tmp_path / "garbage.ttf"
    path.write_bytes(b"definitely not a font file" * 8)
    return path
