"""
Config - Theme options documents.
"""

from .loader import (
    OPTIONS_PATH_ENV,
    ThemeOptionsError,
    load_theme_options,
    parse_theme_options,
)
from .models import ThemeOptionsDocument

__all__ = [
    "load_theme_options",
    "parse_theme_options",
    "ThemeOptionsDocument",
    "ThemeOptionsError",
    "OPTIONS_PATH_ENV",
]
