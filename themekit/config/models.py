"""
Theme options document schema.

Checks the type shape of a theme options document (YAML or dict) before it
becomes ThemeOptions. Token values inside palette/spacing/shape are left to
the sub-resolvers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from themekit.components.theme import ThemeOptions


class ThemeOptionsDocument(BaseModel):
    """Top-level keys of a theme options document."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    palette: dict[str, Any] | None = None
    spacing: dict[str, Any] | None = None
    shape: dict[str, Any] | None = None

    def to_options(self) -> ThemeOptions:
        return ThemeOptions(
            name=self.name,
            palette_input=self.palette,
            spacing_input=self.spacing,
            shape_input=self.shape,
        )
