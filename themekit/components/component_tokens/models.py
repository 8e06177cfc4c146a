"""
Component tokens output models.

All sizes are in spacing grid units, so they scale with the theme's grid.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentHeights:
    sm: int
    md: int
    lg: int


@dataclass(frozen=True)
class PanelTokens:
    padding: int
    header_height: int


@dataclass(frozen=True)
class ComponentTokens:
    """Sizing tokens shared by UI components."""

    height: ComponentHeights
    panel: PanelTokens
