"""
Theme component input/output models.

Invariants:
- A Theme is fully resolved when constructed; nothing is computed lazily.
- is_dark / is_light are derived from palette.mode and cannot be passed in.
- Every nested token tree is a frozen dataclass, so a Theme is a value:
  it compares structurally and cannot be mutated in place.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from themekit.components.breakpoints import Breakpoints
from themekit.components.component_tokens import ComponentTokens
from themekit.components.palette import Palette
from themekit.components.shape import Shape
from themekit.components.spacing import Spacing

DARK_MODE = "dark"
LIGHT_MODE = "light"


@dataclass(frozen=True)
class ThemeOptions:
    """
    Partial theme overrides. Every field is optional.

    The *_input mappings are passed verbatim to the matching sub-resolver;
    None means "use that resolver's own defaults".
    """

    name: str | None = None
    palette_input: Mapping[str, Any] | None = None
    spacing_input: Mapping[str, Any] | None = None
    shape_input: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Theme:
    """Fully resolved, immutable design token tree."""

    name: str
    palette: Palette
    breakpoints: Breakpoints
    spacing: Spacing
    shape: Shape
    components: ComponentTokens
    is_dark: bool = field(init=False)
    is_light: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "is_dark", self.palette.mode == DARK_MODE)
        object.__setattr__(self, "is_light", self.palette.mode == LIGHT_MODE)


@dataclass(frozen=True)
class ComposeThemeInput:
    """Input for composing a theme."""

    options: ThemeOptions = field(default_factory=ThemeOptions)


@dataclass(frozen=True)
class ComposeThemeOutput:
    """Output from composing a theme."""

    theme: Theme
