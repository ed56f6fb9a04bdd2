"""Font file I/O for mathglyph.

This module reads font files using fonttools to build metrics tables that
can replace or extend the built-in ones.

Key classes:
- FontMetricsReader: Load a font and measure its mapped glyphs
"""

from mathglyph.io.metrics_reader import FontMetricsReader

__all__ = [
    "FontMetricsReader",
]
