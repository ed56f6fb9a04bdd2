"""Built-in font metrics for the fonts the symbol tables refer to.

Values are (depth, height, italic, skew, width) in em units, keyed by font
name and code point. Only the glyphs the symbol tables can reach are listed.

Per-glyph KaTeX values are used for the Math-Italic letters, the Greek
letters and every glyph listed explicitly by code point. Latin letters and
digits of the other fonts are approximations built by _latin() and _digits()
from the font's x-height, ascender, cap height and a single width; their
italic correction and skew are one value per font. Load real
metrics with FontMetricsReader when exact letter metrics matter there.
"""

from types import MappingProxyType

_LOWER_ASCENDERS = frozenset("bdfhklt")
_LOWER_DESCENDERS = frozenset("gjpqy")

# Height of lowercase letters without ascenders or descenders.
X_HEIGHT = 0.43056


def _latin(
    x_height: float,
    ascender: float,
    cap_height: float,
    width: float,
    *,
    cap_width: float | None = None,
    italic: float = 0.0,
    skew: float = 0.0,
) -> dict[int, tuple[float, float, float, float, float]]:
    """Approximate Latin letter metrics for one font from its vertical extents.

    Every letter gets the same italic correction, skew and width; heights
    and depths only distinguish ascenders, descenders and capitals.
    """
    metrics = {}
    for ch in "abcdefghijklmnopqrstuvwxyz":
        height = ascender if ch in _LOWER_ASCENDERS else x_height
        depth = 0.19444 if ch in _LOWER_DESCENDERS else 0.0
        metrics[ord(ch)] = (depth, height, italic, skew, width)
    for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        metrics[ord(ch)] = (0.0, cap_height, italic, skew, cap_width or width * 1.5)
    return metrics


def _digits(height: float, width: float, italic: float = 0.0) -> dict[int, tuple[float, ...]]:
    return {cp: (0.0, height, italic, 0.0, width) for cp in range(0x30, 0x3A)}


_RELATION = (-0.13313, 0.36687, 0.0, 0.0, 0.77778)
_BINARY = (0.08333, 0.58333, 0.0, 0.0, 0.77778)
_ARROW = (-0.13313, 0.36687, 0.0, 0.0, 1.0)

_MAIN_REGULAR: dict[int, tuple[float, ...]] = {
    **_latin(X_HEIGHT, 0.69444, 0.68333, 0.5),
    **_digits(0.64444, 0.5),
    0x20: (0.0, 0.0, 0.0, 0.0, 0.25),
    0x21: (0.0, 0.69444, 0.0, 0.0, 0.27778),
    0x27: (0.0, 0.69444, 0.0, 0.0, 0.27778),
    0x28: (0.25, 0.75, 0.0, 0.0, 0.38889),
    0x29: (0.25, 0.75, 0.0, 0.0, 0.38889),
    0x2B: _BINARY,
    0x2C: (0.19444, 0.10556, 0.0, 0.0, 0.27778),
    0x2D: (0.0, X_HEIGHT, 0.0, 0.0, 0.33333),
    0x2E: (0.0, 0.10556, 0.0, 0.0, 0.27778),
    0x2F: (0.25, 0.75, 0.0, 0.0, 0.5),
    0x3A: (0.0, X_HEIGHT, 0.0, 0.0, 0.27778),
    0x3B: (0.19444, X_HEIGHT, 0.0, 0.0, 0.27778),
    0x3C: (0.0391, 0.5391, 0.0, 0.0, 0.77778),
    0x3D: _RELATION,
    0x3E: (0.0391, 0.5391, 0.0, 0.0, 0.77778),
    0x3F: (0.0, 0.69444, 0.0, 0.0, 0.47222),
    0x5B: (0.25, 0.75, 0.0, 0.0, 0.27778),
    0x5D: (0.25, 0.75, 0.0, 0.0, 0.27778),
    0x4D: (0.0, 0.68333, 0.0, 0.0, 0.91667),
    0x60: (0.0, 0.69444, 0.0, 0.0, 0.5),
    0x66: (0.0, 0.69444, 0.07778, 0.0, 0.30556),
    0xA3: (0.0, 0.69444, 0.0, 0.0, 0.76666),
    0xB1: _BINARY,
    0xD7: _BINARY,
    0xF7: _BINARY,
    0x131: (0.0, X_HEIGHT, 0.0, 0.0, 0.27778),
    0x237: (0.19444, X_HEIGHT, 0.0, 0.0, 0.30556),
    0x338: (0.19444, 0.69444, 0.0, 0.0, 0.0),
    0x2013: (0.0, X_HEIGHT, 0.02778, 0.0, 0.5),
    0x2014: (0.0, X_HEIGHT, 0.02778, 0.0, 1.0),
    0x2018: (0.0, 0.69444, 0.0, 0.0, 0.27778),
    0x2019: (0.0, 0.69444, 0.0, 0.0, 0.27778),
    0x201C: (0.0, 0.69444, 0.0, 0.0, 0.5),
    0x201D: (0.0, 0.69444, 0.0, 0.0, 0.5),
    0x2190: _ARROW,
    0x2192: _ARROW,
    0x21D0: _ARROW,
    0x21D2: _ARROW,
    0x2203: (0.0, 0.69444, 0.0, 0.0, 0.55556),
    0x2205: (0.05556, 0.75, 0.0, 0.0, 0.5),
    0x2208: (0.0391, 0.5391, 0.0, 0.0, 0.66667),
    0x220B: (0.0391, 0.5391, 0.0, 0.0, 0.66667),
    0x2212: _BINARY,
    0x2217: (-0.03472, 0.46528, 0.0, 0.0, 0.5),
    0x2223: (0.25, 0.75, 0.0, 0.0, 0.27778),
    0x2225: (0.25, 0.75, 0.0, 0.0, 0.5),
    0x2227: (0.0, 0.55556, 0.0, 0.0, 0.66667),
    0x2228: (0.0, 0.55556, 0.0, 0.0, 0.66667),
    0x223C: _RELATION,
    0x2243: (-0.03625, 0.46375, 0.0, 0.0, 0.77778),
    0x2245: (0.022, 0.589, 0.0, 0.0, 0.77778),
    0x2248: (-0.01688, 0.48312, 0.0, 0.0, 0.77778),
    0x2261: (-0.03625, 0.46375, 0.0, 0.0, 0.77778),
    0x2264: (0.13597, 0.63597, 0.0, 0.0, 0.77778),
    0x2265: (0.13597, 0.63597, 0.0, 0.0, 0.77778),
    0x22C5: (-0.25, 0.25, 0.0, 0.0, 0.27778),
    0x22C6: (-0.03472, 0.46528, 0.0, 0.0, 0.5),
}

_MAIN_ITALIC: dict[int, tuple[float, ...]] = {
    **_latin(X_HEIGHT, 0.69444, 0.68333, 0.51111, italic=0.07599),
    **_digits(0.64444, 0.51111, italic=0.13556),
    0x4D: (0.0, 0.68333, 0.09062, 0.0, 0.97),
    0xA3: (0.0, 0.69444, 0.0, 0.0, 0.76666),
    0x131: (0.0, X_HEIGHT, 0.07882, 0.0, 0.30556),
    0x237: (0.19444, X_HEIGHT, 0.03736, 0.0, 0.33222),
}

_MAIN_BOLD: dict[int, tuple[float, ...]] = {
    **_latin(0.44444, 0.69444, 0.68611, 0.575),
    **_digits(0.64444, 0.575),
    0x2B: (0.13333, 0.63333, 0.0, 0.0, 0.89444),
    0x3D: (-0.10889, 0.39111, 0.0, 0.0, 0.89444),
    0x41: (0.0, 0.68611, 0.0, 0.0, 0.86944),
    0x4D: (0.0, 0.68611, 0.0, 0.0, 1.09444),
    0x61: (0.0, 0.44444, 0.0, 0.0, 0.55902),
    0x78: (0.0, 0.44444, 0.0, 0.0, 0.60694),
}

_MATH_ITALIC: dict[int, tuple[float, ...]] = {
    0x41: (0.0, 0.68333, 0.0, 0.13889, 0.75),
    0x42: (0.0, 0.68333, 0.05017, 0.08334, 0.75851),
    0x43: (0.0, 0.68333, 0.07153, 0.08334, 0.71472),
    0x44: (0.0, 0.68333, 0.02778, 0.05556, 0.82792),
    0x45: (0.0, 0.68333, 0.05764, 0.08334, 0.7382),
    0x46: (0.0, 0.68333, 0.13889, 0.08334, 0.64306),
    0x47: (0.0, 0.68333, 0.0, 0.08334, 0.78625),
    0x48: (0.0, 0.68333, 0.08125, 0.05556, 0.83125),
    0x49: (0.0, 0.68333, 0.07847, 0.11111, 0.43958),
    0x4A: (0.0, 0.68333, 0.09618, 0.16667, 0.55451),
    0x4B: (0.0, 0.68333, 0.07153, 0.05556, 0.84931),
    0x4C: (0.0, 0.68333, 0.0, 0.02778, 0.68056),
    0x4D: (0.0, 0.68333, 0.10903, 0.08334, 0.97014),
    0x4E: (0.0, 0.68333, 0.10903, 0.08334, 0.80347),
    0x4F: (0.0, 0.68333, 0.02778, 0.08334, 0.76278),
    0x50: (0.0, 0.68333, 0.13889, 0.08334, 0.64201),
    0x51: (0.19444, 0.68333, 0.0, 0.08334, 0.79056),
    0x52: (0.0, 0.68333, 0.00773, 0.08334, 0.75929),
    0x53: (0.0, 0.68333, 0.05764, 0.08334, 0.6132),
    0x54: (0.0, 0.68333, 0.13889, 0.08334, 0.58438),
    0x55: (0.0, 0.68333, 0.10903, 0.02778, 0.68278),
    0x56: (0.0, 0.68333, 0.22222, 0.0, 0.58333),
    0x57: (0.0, 0.68333, 0.13889, 0.0, 0.94445),
    0x58: (0.0, 0.68333, 0.07847, 0.08334, 0.82847),
    0x59: (0.0, 0.68333, 0.22222, 0.0, 0.58056),
    0x5A: (0.0, 0.68333, 0.07153, 0.08334, 0.68264),
    0x61: (0.0, X_HEIGHT, 0.0, 0.0, 0.52859),
    0x62: (0.0, 0.69444, 0.0, 0.0, 0.42917),
    0x63: (0.0, X_HEIGHT, 0.0, 0.05556, 0.43276),
    0x64: (0.0, 0.69444, 0.0, 0.16667, 0.52049),
    0x65: (0.0, X_HEIGHT, 0.0, 0.05556, 0.46563),
    0x66: (0.19444, 0.69444, 0.10764, 0.16667, 0.48959),
    0x67: (0.19444, X_HEIGHT, 0.03588, 0.02778, 0.47697),
    0x68: (0.0, 0.69444, 0.0, 0.0, 0.57616),
    0x69: (0.0, 0.65952, 0.0, 0.0, 0.34451),
    0x6A: (0.19444, 0.65952, 0.05724, 0.0, 0.41181),
    0x6B: (0.0, 0.69444, 0.03148, 0.0, 0.5206),
    0x6C: (0.0, 0.69444, 0.01968, 0.08334, 0.29838),
    0x6D: (0.0, X_HEIGHT, 0.0, 0.0, 0.87801),
    0x6E: (0.0, X_HEIGHT, 0.0, 0.0, 0.60023),
    0x6F: (0.0, X_HEIGHT, 0.0, 0.05556, 0.48472),
    0x70: (0.19444, X_HEIGHT, 0.0, 0.08334, 0.50313),
    0x71: (0.19444, X_HEIGHT, 0.03588, 0.08334, 0.44641),
    0x72: (0.0, X_HEIGHT, 0.02778, 0.05556, 0.45116),
    0x73: (0.0, X_HEIGHT, 0.0, 0.05556, 0.46875),
    0x74: (0.0, 0.61508, 0.0, 0.08334, 0.36111),
    0x75: (0.0, X_HEIGHT, 0.0, 0.02778, 0.57246),
    0x76: (0.0, X_HEIGHT, 0.03588, 0.02778, 0.48472),
    0x77: (0.0, X_HEIGHT, 0.02691, 0.08334, 0.71592),
    0x78: (0.0, X_HEIGHT, 0.0, 0.02778, 0.57153),
    0x79: (0.19444, X_HEIGHT, 0.03588, 0.05556, 0.49028),
    0x7A: (0.0, X_HEIGHT, 0.04398, 0.05556, 0.46505),
    0x131: (0.0, X_HEIGHT, 0.0, 0.02778, 0.32246),
    0x237: (0.19444, X_HEIGHT, 0.0, 0.08334, 0.38381),
    0x3B1: (0.0, X_HEIGHT, 0.0037, 0.02778, 0.6397),
    0x3B2: (0.19444, 0.69444, 0.05278, 0.08334, 0.56563),
    0x3B3: (0.19444, X_HEIGHT, 0.05556, 0.0, 0.51773),
    0x3B4: (0.0, 0.69444, 0.03785, 0.05556, 0.44444),
    0x3B5: (0.0, X_HEIGHT, 0.0, 0.08334, 0.46632),
    0x3B6: (0.19444, 0.69444, 0.07378, 0.08334, 0.4375),
    0x3B7: (0.19444, X_HEIGHT, 0.03588, 0.05556, 0.49653),
    0x3B8: (0.0, 0.69444, 0.02778, 0.08334, 0.46944),
    0x3B9: (0.0, X_HEIGHT, 0.0, 0.05556, 0.35394),
    0x3BA: (0.0, X_HEIGHT, 0.0, 0.0, 0.57616),
    0x3BB: (0.0, 0.69444, 0.0, 0.0, 0.58334),
    0x3BC: (0.19444, X_HEIGHT, 0.0, 0.02778, 0.60255),
    0x3BD: (0.0, X_HEIGHT, 0.06366, 0.02778, 0.49398),
    0x3BE: (0.19444, 0.69444, 0.04601, 0.11111, 0.4375),
    0x3BF: (0.0, X_HEIGHT, 0.0, 0.05556, 0.48472),
    0x3C0: (0.0, X_HEIGHT, 0.03588, 0.0, 0.57003),
    0x3C1: (0.19444, X_HEIGHT, 0.0, 0.08334, 0.51702),
    0x3C3: (0.0, X_HEIGHT, 0.03588, 0.0, 0.57141),
    0x3C4: (0.0, X_HEIGHT, 0.1132, 0.02778, 0.43715),
    0x3C5: (0.0, X_HEIGHT, 0.03588, 0.02778, 0.54028),
    0x3C6: (0.19444, X_HEIGHT, 0.0, 0.08334, 0.65417),
    0x3C7: (0.19444, X_HEIGHT, 0.0, 0.05556, 0.62569),
    0x3C8: (0.19444, 0.69444, 0.03588, 0.11111, 0.65139),
    0x3C9: (0.0, X_HEIGHT, 0.03588, 0.0, 0.62245),
}

_MATH_BOLD_ITALIC: dict[int, tuple[float, ...]] = {
    0x41: (0.0, 0.68611, 0.0, 0.0, 0.86944),
    0x4D: (0.0, 0.68611, 0.11424, 0.0, 1.1132),
    0x61: (0.0, 0.44444, 0.0, 0.0, 0.63287),
    0x78: (0.0, 0.44444, 0.0, 0.0, 0.65903),
    0x79: (0.19444, 0.44444, 0.03704, 0.0, 0.59028),
    0x3B1: (0.0, 0.44444, 0.0, 0.0, 0.76064),
}

_TYPEWRITER_REGULAR: dict[int, tuple[float, ...]] = {
    **_latin(X_HEIGHT, 0.61111, 0.61111, 0.525, cap_width=0.525),
    **_digits(0.61111, 0.525),
    0x20: (0.0, 0.0, 0.0, 0.0, 0.525),
    0x27: (0.0, 0.61111, 0.0, 0.0, 0.525),
    0x2D: (-0.08556, 0.31444, 0.0, 0.0, 0.525),
    0x3A: (0.0, X_HEIGHT, 0.0, 0.0, 0.525),
    0x3D: (-0.09013, 0.40986, 0.0, 0.0, 0.525),
    0x4D: (0.0, 0.61111, 0.0, 0.0, 0.525),
    0x60: (0.0, 0.61111, 0.0, 0.0, 0.525),
}

_AMS_REGULAR: dict[int, tuple[float, ...]] = {
    0x4D: (0.0, 0.68889, 0.0, 0.0, 0.88889),
    0x2204: (0.0, 0.69224, 0.0, 0.0, 0.55556),
    0x2205: (0.08198, 0.58198, 0.0, 0.0, 0.77778),
    0x2268: (0.19667, 0.69667, 0.0, 0.0, 0.77778),
    0x2269: (0.19667, 0.69667, 0.0, 0.0, 0.77778),
    0xE00C: (0.19667, 0.69667, 0.0, 0.0, 0.77778),
    0xE00D: (0.19667, 0.69667, 0.0, 0.0, 0.77778),
}

FONT_METRICS_DATA = MappingProxyType({
    "Main-Regular": MappingProxyType(_MAIN_REGULAR),
    "Main-Italic": MappingProxyType(_MAIN_ITALIC),
    "Main-Bold": MappingProxyType(_MAIN_BOLD),
    "Math-Italic": MappingProxyType(_MATH_ITALIC),
    "Math-BoldItalic": MappingProxyType(_MATH_BOLD_ITALIC),
    "Typewriter-Regular": MappingProxyType(_TYPEWRITER_REGULAR),
    "AMS-Regular": MappingProxyType(_AMS_REGULAR),
})

# Accented Latin and Cyrillic letters measured with the metrics of a
# visually similar base character.
EXTRA_CHARACTER_MAP = MappingProxyType({
    "Å": "A", "Ç": "C", "Ð": "D", "Þ": "o", "å": "a", "ç": "c", "ð": "d", "þ": "o",
    "А": "A", "Б": "B", "В": "B", "Г": "F", "Д": "A", "Е": "E", "Ж": "K", "З": "3",
    "И": "N", "Й": "N", "К": "K", "Л": "N", "М": "M", "Н": "H", "О": "O", "П": "N",
    "Р": "P", "С": "C", "Т": "T", "У": "y", "Ф": "O", "Х": "X", "Ц": "U", "Ч": "h",
    "Ш": "W", "Щ": "W", "Ъ": "B", "Ы": "X", "Ь": "B", "Э": "3", "Ю": "X", "Я": "R",
    "а": "a", "б": "b", "в": "a", "г": "r", "д": "y", "е": "e", "ж": "m", "з": "e",
    "и": "n", "й": "n", "к": "n", "л": "n", "м": "m", "н": "n", "о": "o", "п": "n",
    "р": "p", "с": "c", "т": "o", "у": "y", "ф": "b", "х": "x", "ц": "n", "ч": "n",
    "ш": "w", "щ": "w", "ъ": "a", "ы": "m", "ь": "a", "э": "e", "ю": "m", "я": "r",
})

# Scripts whose characters borrow the metrics of "M" in text mode.
SUPPORTED_SCRIPT_BLOCKS: tuple[tuple[int, int], ...] = (
    (0x0100, 0x024F),  # Latin Extended-A/B
    (0x0300, 0x036F),  # combining diacritics
    (0x0400, 0x04FF),  # Cyrillic
    (0x0530, 0x058F),  # Armenian
    (0x0900, 0x109F),  # Brahmic
    (0x10A0, 0x10FF),  # Georgian
    (0x3000, 0x30FF),  # CJK symbols, Hiragana, Katakana
    (0x4E00, 0x9FAF),  # CJK ideograms
    (0xFF00, 0xFF60),  # fullwidth punctuation
    (0xAC00, 0xD7AF),  # Hangul
)

# Code point whose metrics stand in for supported-script characters.
FALLBACK_CODEPOINT = ord("M")
