"""
Spacing component - Resolve the spacing grid.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import Spacing, SpacingInput

DEFAULT_GRID_SIZE = 8


def resolve_spacing(spacing_input: Mapping[str, Any] | None = None) -> Spacing:
    """
    Resolve spacing from a partial override.

    Args:
        spacing_input: Mapping with an optional `gridSize` / `grid_size`.

    Returns:
        Spacing using the requested grid size, or DEFAULT_GRID_SIZE.

    Raises:
        pydantic.ValidationError: If the override has the wrong shape.
    """
    inp = SpacingInput.model_validate(dict(spacing_input or {}))
    grid_size = inp.grid_size if inp.grid_size is not None else DEFAULT_GRID_SIZE
    return Spacing(grid_size=grid_size)
