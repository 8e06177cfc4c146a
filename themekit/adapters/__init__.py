"""
Adapters - Port implementations for the theme component.
"""

from .resolvers import (
    DefaultBreakpointsResolver,
    DefaultComponentTokensResolver,
    DefaultPaletteResolver,
    DefaultShapeResolver,
    DefaultSpacingResolver,
)

__all__ = [
    "DefaultPaletteResolver",
    "DefaultBreakpointsResolver",
    "DefaultSpacingResolver",
    "DefaultShapeResolver",
    "DefaultComponentTokensResolver",
]
