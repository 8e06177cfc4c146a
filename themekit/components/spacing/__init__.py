"""
Spacing component - Grid spacing scale.
"""

from .component import DEFAULT_GRID_SIZE, resolve_spacing
from .models import MAX_SPACING_ARGUMENTS, Spacing, SpacingArgument, SpacingInput

__all__ = [
    "resolve_spacing",
    "Spacing",
    "SpacingArgument",
    "SpacingInput",
    "DEFAULT_GRID_SIZE",
    "MAX_SPACING_ARGUMENTS",
]
