"""
Theme component port definitions.

One port per token category. Resolvers that take input receive a mapping
they own for the duration of the call; they must not keep it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from themekit.components.breakpoints import Breakpoints
from themekit.components.component_tokens import ComponentTokens
from themekit.components.palette import Palette
from themekit.components.shape import Shape
from themekit.components.spacing import Spacing


class PaletteResolverPort(Protocol):
    """Turns a partial palette override into a palette with a `mode`."""

    def resolve(self, palette_input: Mapping[str, Any]) -> Palette:
        ...


class BreakpointsResolverPort(Protocol):
    """Produces the canonical breakpoint set. Takes no input."""

    def resolve(self) -> Breakpoints:
        ...


class SpacingResolverPort(Protocol):
    def resolve(self, spacing_input: Mapping[str, Any]) -> Spacing:
        ...


class ShapeResolverPort(Protocol):
    def resolve(self, shape_input: Mapping[str, Any]) -> Shape:
        ...


class ComponentTokensResolverPort(Protocol):
    """Produces component sizing tokens. Takes no input."""

    def resolve(self) -> ComponentTokens:
        ...


@dataclass(frozen=True)
class ThemeResolvers:
    """The five sub-resolvers a theme is composed from."""

    palette: PaletteResolverPort
    breakpoints: BreakpointsResolverPort
    spacing: SpacingResolverPort
    shape: ShapeResolverPort
    components: ComponentTokensResolverPort
