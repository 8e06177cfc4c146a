"""
Component tokens component - Palette-independent sizing tokens.
"""

from __future__ import annotations

from .models import ComponentHeights, ComponentTokens, PanelTokens


def resolve_component_tokens() -> ComponentTokens:
    """Build the default component tokens. Takes no input."""
    return ComponentTokens(
        height=ComponentHeights(sm=3, md=4, lg=6),
        panel=PanelTokens(padding=1, header_height=4),
    )
