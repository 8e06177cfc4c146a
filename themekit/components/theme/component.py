"""
Theme component - Compose a fully resolved theme from partial options.

Each token category is resolved independently through its port; no
resolver sees another category's output. The composer adds no validation
and no error handling of its own: whatever a resolver raises reaches the
caller unchanged.
"""

from __future__ import annotations

import logging

from themekit.adapters.resolvers import (
    DefaultBreakpointsResolver,
    DefaultComponentTokensResolver,
    DefaultPaletteResolver,
    DefaultShapeResolver,
    DefaultSpacingResolver,
)

from .models import ComposeThemeInput, ComposeThemeOutput, Theme, ThemeOptions
from .ports import ThemeResolvers

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "Dark"


def default_resolvers() -> ThemeResolvers:
    """Resolvers backed by the bundled token components."""
    return ThemeResolvers(
        palette=DefaultPaletteResolver(),
        breakpoints=DefaultBreakpointsResolver(),
        spacing=DefaultSpacingResolver(),
        shape=DefaultShapeResolver(),
        components=DefaultComponentTokensResolver(),
    )


def compose(
    options: ThemeOptions | None = None,
    *,
    resolvers: ThemeResolvers | None = None,
) -> Theme:
    """
    Compose a theme.

    Args:
        options: Partial overrides. None is the same as ThemeOptions().
        resolvers: Sub-resolvers to delegate to. Uses default_resolvers()
            if None.

    Returns:
        A new, fully resolved Theme.
    """
    if options is None:
        options = ThemeOptions()
    if resolvers is None:
        resolvers = default_resolvers()

    # Per-field defaults; a fresh empty mapping per call
    name = options.name if options.name is not None else DEFAULT_THEME_NAME
    palette_input = options.palette_input if options.palette_input is not None else {}
    spacing_input = options.spacing_input if options.spacing_input is not None else {}
    shape_input = options.shape_input if options.shape_input is not None else {}

    palette = resolvers.palette.resolve(palette_input)
    breakpoints = resolvers.breakpoints.resolve()
    spacing = resolvers.spacing.resolve(spacing_input)
    shape = resolvers.shape.resolve(shape_input)
    components = resolvers.components.resolve()

    theme = Theme(
        name=name,
        palette=palette,
        breakpoints=breakpoints,
        spacing=spacing,
        shape=shape,
        components=components,
    )
    logger.debug("Composed theme %r (mode=%s)", theme.name, palette.mode)
    return theme


def run(
    inp: ComposeThemeInput,
    *,
    resolvers: ThemeResolvers | None = None,
) -> ComposeThemeOutput:
    """
    Main entry point for the theme component.

    Args:
        inp: Input carrying the theme options.
        resolvers: Optional sub-resolvers (defaults if None).

    Returns:
        ComposeThemeOutput with the composed theme.
    """
    return ComposeThemeOutput(theme=compose(inp.options, resolvers=resolvers))
