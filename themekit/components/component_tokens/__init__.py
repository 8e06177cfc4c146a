"""
Component tokens component - Sizing tokens for UI components.
"""

from .component import resolve_component_tokens
from .models import ComponentHeights, ComponentTokens, PanelTokens

__all__ = [
    "resolve_component_tokens",
    "ComponentTokens",
    "ComponentHeights",
    "PanelTokens",
]
