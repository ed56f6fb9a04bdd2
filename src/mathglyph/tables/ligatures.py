"""Ligatures expanded under the fixed-width font."""

from types import MappingProxyType

# Font family whose missing ligature glyphs are spelled out character by character.
FIXED_WIDTH_FAMILY = "Typewriter"

LIGATURES = MappingProxyType({
    "–": "--",   # en dash
    "—": "---",  # em dash
    "“": "``",   # left double quote
    "”": "''",   # right double quote
})
