"""
Default sub-resolver adapters.

Implement the theme component's resolver ports on top of the bundled
palette, breakpoints, spacing, shape and component token components.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from themekit.components.breakpoints import Breakpoints, resolve_breakpoints
from themekit.components.component_tokens import ComponentTokens, resolve_component_tokens
from themekit.components.palette import Palette, resolve_palette
from themekit.components.shape import Shape, resolve_shape
from themekit.components.spacing import Spacing, resolve_spacing


class DefaultPaletteResolver:
    """Palette resolver backed by resolve_palette."""

    def resolve(self, palette_input: Mapping[str, Any]) -> Palette:
        return resolve_palette(palette_input)


class DefaultBreakpointsResolver:
    """Breakpoints resolver backed by resolve_breakpoints."""

    def resolve(self) -> Breakpoints:
        return resolve_breakpoints()


class DefaultSpacingResolver:
    """Spacing resolver backed by resolve_spacing."""

    def resolve(self, spacing_input: Mapping[str, Any]) -> Spacing:
        return resolve_spacing(spacing_input)


class DefaultShapeResolver:
    """Shape resolver backed by resolve_shape."""

    def resolve(self, shape_input: Mapping[str, Any]) -> Shape:
        return resolve_shape(shape_input)


class DefaultComponentTokensResolver:
    """Component tokens resolver backed by resolve_component_tokens."""

    def resolve(self) -> ComponentTokens:
        return resolve_component_tokens()
