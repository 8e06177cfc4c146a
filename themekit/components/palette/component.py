"""
Palette component - Resolve a partial palette override into a full palette.

Pure function over a dark and a light base palette. The base is dark when
no mode (or "dark") is requested and light otherwise; the resolved mode is
always the requested one, so an unrecognised mode keeps its own name.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

from .colors import alpha, darken, lighten
from .models import (
    ActionColors,
    BackgroundColors,
    BorderColors,
    Palette,
    PaletteInput,
    PaletteInputError,
    RichColor,
    RichColorInput,
    TextColors,
    select_contrast_text,
)

RICH_COLOR_NAMES = ("primary", "secondary", "info", "error", "success", "warning")

DEFAULT_MODE = "dark"
DEFAULT_CONTRAST_THRESHOLD = 3.0
DEFAULT_HOVER_FACTOR = 0.03


@dataclass(frozen=True)
class BasePalette:
    """Starting point for one mode, before overrides are applied."""

    mode: str
    rich_colors: Mapping[str, RichColorInput]
    text: TextColors
    background: BackgroundColors
    border: BorderColors
    action: ActionColors
    tonal_offset: float
    transparent_alpha: float


# --- Base Palettes ---


DARK_BASE = BasePalette(
    mode="dark",
    rich_colors=MappingProxyType(
        {
            "primary": RichColorInput(main="#3d71d9", text="#6e9fff"),
            "secondary": RichColorInput(main="#33363d", text="#ccccdc"),
            "info": RichColorInput(main="#3d71d9", text="#6e9fff"),
            "error": RichColorInput(main="#d10e5c", text="#ff5286"),
            "success": RichColorInput(main="#1a7f4b", text="#6ccf8e"),
            "warning": RichColorInput(main="#f5b73d", text="#f8d06b"),
        }
    ),
    text=TextColors(
        primary="#ccccdc",
        secondary="rgba(204, 204, 220, 0.65)",
        disabled="rgba(204, 204, 220, 0.6)",
        link="#6e9fff",
        max_contrast="#ffffff",
    ),
    background=BackgroundColors(canvas="#111217", primary="#181b1f", secondary="#22252b"),
    border=BorderColors(
        weak="rgba(204, 204, 220, 0.07)",
        medium="rgba(204, 204, 220, 0.15)",
        strong="rgba(204, 204, 220, 0.25)",
    ),
    action=ActionColors(
        hover="rgba(204, 204, 220, 0.16)",
        focus="rgba(204, 204, 220, 0.12)",
        selected="rgba(204, 204, 220, 0.12)",
        disabled_background="rgba(204, 204, 220, 0.04)",
        disabled_text="rgba(204, 204, 220, 0.6)",
        hover_opacity=0.08,
        disabled_opacity=0.38,
    ),
    tonal_offset=0.15,
    transparent_alpha=0.15,
)

LIGHT_BASE = BasePalette(
    mode="light",
    rich_colors=MappingProxyType(
        {
            "primary": RichColorInput(main="#3871dc", text="#1f62e0"),
            "secondary": RichColorInput(main="#e4e7e7", text="#24292e"),
            "info": RichColorInput(main="#3871dc", text="#1f62e0"),
            "error": RichColorInput(main="#e0226e", text="#cf0e5b"),
            "success": RichColorInput(main="#1b855e", text="#0a764e"),
            "warning": RichColorInput(main="#ff9900", text="#bd4b00"),
        }
    ),
    text=TextColors(
        primary="#24292e",
        secondary="rgba(36, 41, 46, 0.75)",
        disabled="rgba(36, 41, 46, 0.5)",
        link="#1f62e0",
        max_contrast="#000000",
    ),
    background=BackgroundColors(canvas="#f4f5f5", primary="#ffffff", secondary="#f4f5f5"),
    border=BorderColors(
        weak="rgba(36, 41, 46, 0.12)",
        medium="rgba(36, 41, 46, 0.3)",
        strong="rgba(36, 41, 46, 0.4)",
    ),
    action=ActionColors(
        hover="rgba(36, 41, 46, 0.12)",
        focus="rgba(36, 41, 46, 0.12)",
        selected="rgba(36, 41, 46, 0.08)",
        disabled_background="rgba(36, 41, 46, 0.04)",
        disabled_text="rgba(36, 41, 46, 0.5)",
        hover_opacity=0.08,
        disabled_opacity=0.38,
    ),
    tonal_offset=0.2,
    transparent_alpha=0.08,
)


def get_base_palette(mode: str) -> BasePalette:
    """Dark base for "dark", light base for anything else."""
    if mode == "dark":
        return DARK_BASE
    return LIGHT_BASE


# --- Rich Colors ---


def _complete_rich_color(
    name: str,
    color: RichColorInput,
    *,
    base: BasePalette,
    tonal_offset: float,
    contrast_threshold: float,
) -> RichColor:
    """Fill in every variant the override leaves out."""
    if not color.main:
        raise PaletteInputError(f"Missing main color for {name}")

    main = color.main
    text = color.text or main
    border = color.border or text

    shade = color.shade
    if shade is None:
        if base.mode == "light":
            shade = darken(main, tonal_offset)
        else:
            shade = lighten(main, tonal_offset)

    contrast_text = color.contrast_text or select_contrast_text(
        main,
        threshold=contrast_threshold,
        dark_text=DARK_BASE.text.max_contrast,
        light_text=LIGHT_BASE.text.max_contrast,
    )

    return RichColor(
        name=name,
        main=main,
        text=text,
        border=border,
        shade=shade,
        transparent=color.transparent or alpha(main, base.transparent_alpha),
        contrast_text=contrast_text,
    )


# --- Component Entry Point ---


def resolve_palette(palette_input: Mapping[str, Any] | None = None) -> Palette:
    """
    Resolve a palette from a partial override.

    Args:
        palette_input: Partial palette mapping (snake_case or camelCase keys).
            Rich colors given here replace the base color entirely and must
            carry `main`; text/background/border/action groups are merged
            field by field over the base.

    Returns:
        Fully resolved Palette.

    Raises:
        pydantic.ValidationError: If the override has the wrong shape.
        PaletteInputError: If a rich color override lacks `main`.
    """
    inp = PaletteInput.model_validate(dict(palette_input or {}))

    mode = inp.mode if inp.mode is not None else DEFAULT_MODE
    base = get_base_palette(mode)

    tonal_offset = inp.tonal_offset if inp.tonal_offset is not None else base.tonal_offset
    contrast_threshold = (
        inp.contrast_threshold
        if inp.contrast_threshold is not None
        else DEFAULT_CONTRAST_THRESHOLD
    )
    hover_factor = inp.hover_factor if inp.hover_factor is not None else DEFAULT_HOVER_FACTOR

    rich: dict[str, RichColor] = {}
    for name in RICH_COLOR_NAMES:
        override: RichColorInput | None = getattr(inp, name)
        rich[name] = _complete_rich_color(
            name,
            override if override is not None else base.rich_colors[name],
            base=base,
            tonal_offset=tonal_offset,
            contrast_threshold=contrast_threshold,
        )

    def merged(group: Any, override: Any) -> Any:
        if override is None:
            return group
        return replace(group, **override.model_dump(exclude_none=True))

    return Palette(
        mode=mode,
        primary=rich["primary"],
        secondary=rich["secondary"],
        info=rich["info"],
        error=rich["error"],
        success=rich["success"],
        warning=rich["warning"],
        text=merged(base.text, inp.text),
        background=merged(base.background, inp.background),
        border=merged(base.border, inp.border),
        action=merged(base.action, inp.action),
        contrast_threshold=contrast_threshold,
        hover_factor=hover_factor,
        tonal_offset=tonal_offset,
        contrast_text_dark=DARK_BASE.text.max_contrast,
        contrast_text_light=LIGHT_BASE.text.max_contrast,
    )
