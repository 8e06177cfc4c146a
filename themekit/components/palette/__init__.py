"""
Palette component - Color tokens for one light/dark mode.
"""

from .colors import (
    alpha,
    darken,
    emphasize,
    get_contrast_ratio,
    get_luminance,
    lighten,
    parse_color,
)
from .component import (
    DARK_BASE,
    DEFAULT_MODE,
    LIGHT_BASE,
    RICH_COLOR_NAMES,
    BasePalette,
    get_base_palette,
    resolve_palette,
)
from .models import (
    ActionColors,
    BackgroundColors,
    BorderColors,
    Palette,
    PaletteInput,
    PaletteInputError,
    RichColor,
    RichColorInput,
    TextColors,
)

__all__ = [
    # Component entry point
    "resolve_palette",
    # Models
    "Palette",
    "PaletteInput",
    "RichColor",
    "RichColorInput",
    "TextColors",
    "BackgroundColors",
    "BorderColors",
    "ActionColors",
    "BasePalette",
    # Exceptions
    "PaletteInputError",
    # Functions
    "get_base_palette",
    "parse_color",
    "get_luminance",
    "get_contrast_ratio",
    "darken",
    "lighten",
    "alpha",
    "emphasize",
    # Constants
    "DARK_BASE",
    "LIGHT_BASE",
    "DEFAULT_MODE",
    "RICH_COLOR_NAMES",
]
