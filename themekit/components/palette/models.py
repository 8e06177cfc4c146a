"""
Palette component input/output models.

Inputs are pydantic models so that override mappings are checked for type
shape; outputs are frozen dataclasses owned by the resolved theme.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from .colors import emphasize, get_contrast_ratio

PaletteMode = str
"""Light/dark classification; "dark" and "light" are the known modes."""


class PaletteInputError(ValueError):
    """Raised when a palette override cannot be completed."""


# --- Inputs ---


class _PaletteInputModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class RichColorInput(_PaletteInputModel):
    """Partial rich color override. `main` is required once a color is given."""

    main: str | None = None
    text: str | None = None
    border: str | None = None
    shade: str | None = None
    transparent: str | None = None
    contrast_text: str | None = Field(default=None, alias="contrastText")


class TextColorsInput(_PaletteInputModel):
    primary: str | None = None
    secondary: str | None = None
    disabled: str | None = None
    link: str | None = None
    max_contrast: str | None = Field(default=None, alias="maxContrast")


class BackgroundColorsInput(_PaletteInputModel):
    canvas: str | None = None
    primary: str | None = None
    secondary: str | None = None


class BorderColorsInput(_PaletteInputModel):
    weak: str | None = None
    medium: str | None = None
    strong: str | None = None


class ActionColorsInput(_PaletteInputModel):
    hover: str | None = None
    focus: str | None = None
    selected: str | None = None
    disabled_background: str | None = Field(default=None, alias="disabledBackground")
    disabled_text: str | None = Field(default=None, alias="disabledText")
    hover_opacity: float | None = Field(default=None, alias="hoverOpacity")
    disabled_opacity: float | None = Field(default=None, alias="disabledOpacity")


class PaletteInput(_PaletteInputModel):
    """Partial palette override accepted by resolve_palette."""

    mode: PaletteMode | None = None
    primary: RichColorInput | None = None
    secondary: RichColorInput | None = None
    info: RichColorInput | None = None
    error: RichColorInput | None = None
    success: RichColorInput | None = None
    warning: RichColorInput | None = None
    text: TextColorsInput | None = None
    background: BackgroundColorsInput | None = None
    border: BorderColorsInput | None = None
    action: ActionColorsInput | None = None
    contrast_threshold: float | None = Field(default=None, alias="contrastThreshold")
    hover_factor: float | None = Field(default=None, alias="hoverFactor")
    tonal_offset: float | None = Field(default=None, alias="tonalOffset")


# --- Outputs ---


def select_contrast_text(
    background: str,
    *,
    threshold: float,
    dark_text: str,
    light_text: str,
) -> str:
    """
    Choose between the dark and light palettes' max-contrast text colors.

    The dark palette's text wins whenever it reaches `threshold` against
    `background`.
    """
    if get_contrast_ratio(background, dark_text) >= threshold:
        return dark_text
    return light_text


@dataclass(frozen=True)
class RichColor:
    """A palette color with its derived variants."""

    name: str
    main: str
    text: str
    border: str
    shade: str
    transparent: str
    contrast_text: str


@dataclass(frozen=True)
class TextColors:
    primary: str
    secondary: str
    disabled: str
    link: str
    max_contrast: str


@dataclass(frozen=True)
class BackgroundColors:
    canvas: str
    primary: str
    secondary: str


@dataclass(frozen=True)
class BorderColors:
    weak: str
    medium: str
    strong: str


@dataclass(frozen=True)
class ActionColors:
    hover: str
    focus: str
    selected: str
    disabled_background: str
    disabled_text: str
    hover_opacity: float
    disabled_opacity: float


@dataclass(frozen=True)
class Palette:
    """
    Fully resolved color palette.

    `contrast_text_dark` and `contrast_text_light` are the max-contrast text
    colors of the dark and light base palettes; get_contrast_text picks
    between them.
    """

    mode: PaletteMode
    primary: RichColor
    secondary: RichColor
    info: RichColor
    error: RichColor
    success: RichColor
    warning: RichColor
    text: TextColors
    background: BackgroundColors
    border: BorderColors
    action: ActionColors
    contrast_threshold: float
    hover_factor: float
    tonal_offset: float
    contrast_text_dark: str
    contrast_text_light: str

    def get_contrast_text(self, background: str) -> str:
        """Pick the text color that reads best on `background`."""
        return select_contrast_text(
            background,
            threshold=self.contrast_threshold,
            dark_text=self.contrast_text_dark,
            light_text=self.contrast_text_light,
        )

    def get_hover_color(self, color: str) -> str:
        """Hover variant of `color`, shifted by hover_factor."""
        return emphasize(color, self.hover_factor)
