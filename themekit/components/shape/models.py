"""
Shape component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class ShapeInput(BaseModel):
    """Partial shape override."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    border_radius: int | float | None = Field(default=None, alias="borderRadius")


@dataclass(frozen=True)
class Shape:
    """Corner radius tokens derived from one base radius."""

    base_border_radius: int | float

    def border_radius(self, amount: int | float = 1) -> str:
        """Radius of `amount` base units, as a CSS length."""
        return f"{amount * self.base_border_radius:g}px"
