"""
Theme component - Compose palette, breakpoints, spacing, shape and component
tokens into one immutable theme.
"""

from .component import DEFAULT_THEME_NAME, compose, default_resolvers, run
from .models import (
    DARK_MODE,
    LIGHT_MODE,
    ComposeThemeInput,
    ComposeThemeOutput,
    Theme,
    ThemeOptions,
)
from .ports import (
    BreakpointsResolverPort,
    ComponentTokensResolverPort,
    PaletteResolverPort,
    ShapeResolverPort,
    SpacingResolverPort,
    ThemeResolvers,
)

__all__ = [
    # Component entry points
    "run",
    "compose",
    "default_resolvers",
    # Models
    "ThemeOptions",
    "Theme",
    "ComposeThemeInput",
    "ComposeThemeOutput",
    # Ports
    "PaletteResolverPort",
    "BreakpointsResolverPort",
    "SpacingResolverPort",
    "ShapeResolverPort",
    "ComponentTokensResolverPort",
    "ThemeResolvers",
    # Constants
    "DEFAULT_THEME_NAME",
    "DARK_MODE",
    "LIGHT_MODE",
]
