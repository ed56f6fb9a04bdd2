"""Utility functions for mathglyph.

This module provides:

- Logging setup and configuration
- Resolution tracking helpers
"""

from mathglyph.utils.logging import (
    ResolutionLogger,
    ResolutionStats,
    configure_logging,
)

__all__ = [
    "ResolutionLogger",
    "ResolutionStats",
    "configure_logging",
]
