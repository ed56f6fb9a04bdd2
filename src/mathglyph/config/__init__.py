"""Configuration management for mathglyph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Font request (family, weight, shape, fallback)
- AlignmentConfig: Math-axis centering settings
- RenderConfig: Rendering context settings
- LoggingConfig: Logging settings
- MathGlyphSettings: Main application settings
"""

from mathglyph.config.settings import (
    AlignmentConfig,
    FontConfig,
    LoggingConfig,
    MathGlyphSettings,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "AlignmentConfig",
    "FontConfig",
    "LoggingConfig",
    "MathGlyphSettings",
    "RenderConfig",
    "get_default_settings",
]
