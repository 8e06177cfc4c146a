"""
themekit - Theme composition engine.

Resolves partial theme options into one immutable tree of design tokens.
"""

from themekit.components.theme import (
    Theme,
    ThemeOptions,
    ThemeResolvers,
    compose,
    default_resolvers,
)
from themekit.config import load_theme_options, parse_theme_options

__all__ = [
    "compose",
    "default_resolvers",
    "Theme",
    "ThemeOptions",
    "ThemeResolvers",
    "load_theme_options",
    "parse_theme_options",
]
