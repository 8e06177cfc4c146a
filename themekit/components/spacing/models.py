"""
Spacing component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

SpacingArgument = int | float | str

MAX_SPACING_ARGUMENTS = 4


class SpacingInput(BaseModel):
    """Partial spacing override."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    grid_size: int | None = Field(default=None, alias="gridSize")


@dataclass(frozen=True)
class Spacing:
    """
    Grid-based spacing scale.

    Calling the instance converts grid multiples to CSS lengths:
    spacing() -> "8px", spacing(2) -> "16px", spacing(1, "auto") -> "8px auto".
    """

    grid_size: int

    def __call__(self, *args: SpacingArgument) -> str:
        if len(args) > MAX_SPACING_ARGUMENTS:
            raise ValueError(
                f"Too many arguments provided, expected between 0 and "
                f"{MAX_SPACING_ARGUMENTS}, got {len(args)}"
            )
        if not args:
            args = (1,)
        return " ".join(self._transform(arg) for arg in args)

    def _transform(self, value: SpacingArgument) -> str:
        if isinstance(value, str):
            return value
        return f"{value * self.grid_size:g}px"
