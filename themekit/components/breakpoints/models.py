"""
Breakpoints component output models.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class BreakpointValues:
    """Minimum viewport width, in `Breakpoints.unit`, for each size key."""

    xs: int
    sm: int
    md: int
    lg: int
    xl: int
    xxl: int

    def get(self, key: str) -> int:
        if key not in self.keys():
            raise KeyError(f"Unknown breakpoint: {key!r}")
        value: int = getattr(self, key)
        return value

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class Breakpoints:
    """Canonical responsive breakpoints with media query helpers."""

    values: BreakpointValues
    keys: tuple[str, ...]
    unit: str
    step: int

    def _width(self, key: str | int) -> int:
        if isinstance(key, int):
            return key
        return self.values.get(key)

    def up(self, key: str | int) -> str:
        """Media query matching viewports at least as wide as `key`."""
        return f"@media (min-width:{self._width(key)}{self.unit})"

    def down(self, key: str | int) -> str:
        """Media query matching viewports narrower than `key`."""
        width = self._width(key) - self.step / 100
        return f"@media (max-width:{width:g}{self.unit})"
