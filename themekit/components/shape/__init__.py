"""
Shape component - Border radius tokens.
"""

from .component import DEFAULT_BORDER_RADIUS, resolve_shape
from .models import Shape, ShapeInput

__all__ = [
    "resolve_shape",
    "Shape",
    "ShapeInput",
    "DEFAULT_BORDER_RADIUS",
]
