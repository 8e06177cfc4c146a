"""
Shape component - Resolve corner radius tokens.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import Shape, ShapeInput

DEFAULT_BORDER_RADIUS = 2


def resolve_shape(shape_input: Mapping[str, Any] | None = None) -> Shape:
    """
    Resolve shape tokens from a partial override.

    Raises:
        pydantic.ValidationError: If the override has the wrong shape.
    """
    inp = ShapeInput.model_validate(dict(shape_input or {}))
    if inp.border_radius is None:
        return Shape(base_border_radius=DEFAULT_BORDER_RADIUS)
    return Shape(base_border_radius=inp.border_radius)
