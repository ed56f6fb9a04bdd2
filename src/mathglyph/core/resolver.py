"""Symbol resolution.

Resolves a symbol, requested in a mode with a semantic role, into a font,
a substituted character (or character sequence) and metrics, and builds
the element through the element factory.

Rules are tried in order; each returns a result or None:
1. Render config lookup (variant form, mode record, replacement character)
2. User font override, its fallback fonts, then fixed-width ligatures
3. Default font of the render config
4. Composite tables (negated, compacted, decorated equal), math mode only
5. The raw symbol in an unstyled font

Resolution never fails: absent metrics only move on to the next rule.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from mathglyph.core.composite import (
    make_compacted_composite_symbol,
    make_decorated_equal_symbol,
    make_rlap_composite_symbol,
)
from mathglyph.core.factory import DescriptorFactory, ElementFactory, make_char
from mathglyph.core.metrics import MetricsLookup, get_character_metrics, lookup_char
from mathglyph.core.units import em_to_device
from mathglyph.domain import (
    AtomType,
    BuildResult,
    CharacterMetrics,
    FontOptions,
    Mode,
    RenderConfig,
    RenderOptions,
    ResolutionPath,
    SymbolRenderConfig,
)
from mathglyph.tables import (
    COMPACTED_COMPOSITE_SYMBOL_SPACINGS,
    COMPACTED_COMPOSITE_SYMBOLS,
    DECORATED_EQUAL_SYMBOLS,
    FIXED_WIDTH_FAMILY,
    LIGATURES,
    NEGATED_OPERATOR_SYMBOLS,
    SYMBOL_RENDER_CONFIGS,
)

logger = logging.getLogger(__name__)

# Mathematical Alphanumeric Symbols (U+1D400-U+1D7FF). In UTF-16 these all
# start with the lead surrogate U+D835.
_MATH_ALPHANUMERIC_START = 0x1D400
_MATH_ALPHANUMERIC_END = 0x1D7FF
_MATH_ALPHANUMERIC_LEAD_SURROGATE = "\ud835"

_UNSTYLED = FontOptions()


def has_preassigned_style(symbol: str) -> bool:
    """Check if a symbol is a mathematical alphanumeric that ignores user fonts."""
    if not symbol:
        return False
    first = symbol[0]
    return (
        first == _MATH_ALPHANUMERIC_LEAD_SURROGATE
        or _MATH_ALPHANUMERIC_START <= ord(first) <= _MATH_ALPHANUMERIC_END
    )


@dataclass(frozen=True)
class CompositeBuilders:
    """Builders the resolver delegates composite symbols to.

    Attributes:
        negated: (resolver, overlay char, base char, atom type, mode, options)
        compacted: (resolver, char1, char2, spacing em, atom type, mode, options)
        decorated_equal: (resolver, symbol, atom type, mode, options)
    """

    negated: Callable[..., BuildResult] = make_rlap_composite_symbol
    compacted: Callable[..., BuildResult] = make_compacted_composite_symbol
    decorated_equal: Callable[..., BuildResult] = make_decorated_equal_symbol


class SymbolResolver:
    """Resolves symbols into build results.

    The resolver holds no mutable state: the tables are read-only and each
    call only allocates call-local data, so one instance can be shared
    between threads.

    Example:
        resolver = SymbolResolver()
        result = resolver.resolve(
            "x", atom_type=AtomType.ORDINARY, mode=Mode.MATH, options=RenderOptions()
        )
        result.element.font.font_name  # "Math-Italic"
    """

    def __init__(
        self,
        metrics: MetricsLookup = get_character_metrics,
        factory: ElementFactory | None = None,
        composites: CompositeBuilders | None = None,
        symbol_configs: Mapping[str, SymbolRenderConfig] = SYMBOL_RENDER_CONFIGS,
        ligatures: Mapping[str, str] = LIGATURES,
    ) -> None:
        """Initialize the resolver.

        Args:
            metrics: Metrics lookup (character, font name, mode) -> metrics
            factory: Element factory (default: DescriptorFactory)
            composites: Composite symbol builders (default: built-in builders)
            symbol_configs: Symbol render configuration table
            ligatures: Ligature table used under the fixed-width family
        """
        self._metrics = metrics
        self.factory: ElementFactory = factory or DescriptorFactory()
        self.composites = composites or CompositeBuilders()
        self._symbol_configs = symbol_configs
        self._ligatures = ligatures

    def lookup(self, char: str, font: FontOptions, mode: Mode) -> CharacterMetrics | None:
        """Look up a character's metrics under a font."""
        return lookup_char(char, font, mode, self._metrics)

    def resolve(
        self,
        symbol: str,
        variant_form: bool = False,
        *,
        atom_type: AtomType,
        mode: Mode,
        font_override: FontOptions | None = None,
        options: RenderOptions,
    ) -> BuildResult:
        """Resolve a symbol into a build result.

        Args:
            symbol: Symbol to draw
            variant_form: Use the symbol's variant form, if it has one
            atom_type: Semantic role of the symbol
            mode: Typesetting mode
            font_override: Explicit font for this call, ahead of the
                options' font overrides
            options: Rendering context

        Returns:
            Build result; never None
        """
        config = self._symbol_configs.get(symbol)
        if config is not None:
            if variant_form and config.variant_form is not None:
                config = config.variant_form
            render_config = config.for_mode(mode)
            char = symbol
            if render_config is not None and render_config.replace_char is not None:
                char = render_config.replace_char

            result = self._resolve_user_font(symbol, char, atom_type, mode, font_override, options)
            if result is not None:
                return result
            return self._resolve_default_font(char, render_config, atom_type, mode, options)

        if mode == Mode.MATH and not variant_form:
            result = self._resolve_composite(symbol, atom_type, mode, options)
            if result is not None:
                return result

        return self._resolve_unstyled(symbol, atom_type, mode, options)

    def _resolve_user_font(
        self,
        symbol: str,
        char: str,
        atom_type: AtomType,
        mode: Mode,
        font_override: FontOptions | None,
        options: RenderOptions,
    ) -> BuildResult | None:
        # Only ordinary atoms follow user fonts; mathematical alphanumerics
        # keep their own styling.
        if atom_type != AtomType.ORDINARY or has_preassigned_style(symbol):
            return None

        use_math_font = mode == Mode.MATH or options.math_font_options is not None
        font = font_override or (
            options.math_font_options if use_math_font else options.text_font_options
        )
        if font is None:
            return None

        metrics = self.lookup(char, font, mode)
        if metrics is None:
            for fallback in font.fallback:
                metrics = self.lookup(char, fallback, mode)
                if metrics is not None:
                    logger.debug(
                        "Using fallback font for %r: %s -> %s",
                        char, font.font_name, fallback.font_name,
                    )
                    font = fallback
                    break

        if metrics is not None:
            return BuildResult(
                options=options,
                element=make_char(
                    char, font, metrics, options,
                    factory=self.factory,
                    need_italic=mode == Mode.MATH,
                    atom_type=atom_type,
                ),
                italic=em_to_device(metrics.italic, options),
                skew=em_to_device(metrics.skew, options),
                path=ResolutionPath.OVERRIDE_FONT,
            )

        if symbol in self._ligatures and font.font_family == FIXED_WIDTH_FAMILY:
            return self._expand_ligature(symbol, font, atom_type, mode, options)

        logger.debug("No metrics for %r in %s, using default font", char, font.font_name)
        return None

    def _expand_ligature(
        self,
        symbol: str,
        font: FontOptions,
        atom_type: AtomType,
        mode: Mode,
        options: RenderOptions,
    ) -> BuildResult:
        expanded = self._ligatures[symbol]
        logger.debug("Expanding ligature %r to %r in %s", symbol, expanded, font.font_name)
        children = [
            make_char(
                char, font, self.lookup(char, font, mode), options,
                factory=self.factory,
                atom_type=atom_type,
            )
            for char in expanded
        ]
        return BuildResult(
            options=options,
            element=self.factory.row(children, [0.0] * (len(children) - 1), options),
            path=ResolutionPath.LIGATURE,
        )

    def _resolve_default_font(
        self,
        char: str,
        render_config: RenderConfig | None,
        atom_type: AtomType,
        mode: Mode,
        options: RenderOptions,
    ) -> BuildResult:
        default_font = render_config.default_font if render_config is not None else _UNSTYLED
        # Default fonts are measured with the math glyph set in either mode.
        metrics = self.lookup(char, default_font, Mode.MATH)
        return BuildResult(
            options=options,
            element=make_char(
                char, default_font, metrics, options,
                factory=self.factory,
                need_italic=mode == Mode.MATH,
                atom_type=atom_type,
            ),
            italic=em_to_device(metrics.italic, options) if metrics is not None else 0.0,
            skew=em_to_device(metrics.skew, options) if metrics is not None else 0.0,
            path=ResolutionPath.DEFAULT_FONT,
        )

    def _resolve_composite(
        self,
        symbol: str,
        atom_type: AtomType,
        mode: Mode,
        options: RenderOptions,
    ) -> BuildResult | None:
        if symbol in NEGATED_OPERATOR_SYMBOLS:
            char1, char2 = NEGATED_OPERATOR_SYMBOLS[symbol]
            logger.debug("Synthesizing %r by overlaying %r on %r", symbol, char1, char2)
            return self.composites.negated(self, char1, char2, atom_type, mode, options)
        if symbol in COMPACTED_COMPOSITE_SYMBOLS:
            char1, char2 = COMPACTED_COMPOSITE_SYMBOLS[symbol]
            spacing = COMPACTED_COMPOSITE_SYMBOL_SPACINGS[symbol]
            logger.debug("Synthesizing %r from %r and %r", symbol, char1, char2)
            return self.composites.compacted(
                self, char1, char2, spacing, atom_type, mode, options
            )
        if symbol in DECORATED_EQUAL_SYMBOLS:
            logger.debug("Synthesizing %r as a decorated equal sign", symbol)
            return self.composites.decorated_equal(self, symbol, atom_type, mode, options)
        return None

    def _resolve_unstyled(
        self,
        symbol: str,
        atom_type: AtomType,
        mode: Mode,
        options: RenderOptions,
    ) -> BuildResult:
        logger.debug("No render config for %r in %s mode, drawing unstyled", symbol, mode.value)
        return BuildResult(
            options=options,
            element=make_char(
                symbol, _UNSTYLED, None, options,
                factory=self.factory,
                need_italic=mode == Mode.MATH,
                atom_type=atom_type,
            ),
            path=ResolutionPath.UNSTYLED,
        )


_DEFAULT_RESOLVER = SymbolResolver()


def make_base_symbol(
    symbol: str,
    variant_form: bool = False,
    *,
    atom_type: AtomType,
    mode: Mode,
    font_override: FontOptions | None = None,
    options: RenderOptions,
) -> BuildResult:
    """Resolve a symbol with the built-in tables, metrics and descriptor factory."""
    return _DEFAULT_RESOLVER.resolve(
        symbol,
        variant_form,
        atom_type=atom_type,
        mode=mode,
        font_override=font_override,
        options=options,
    )
