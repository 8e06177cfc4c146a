"""
Palette color math: pure functions over CSS color strings.

No I/O operations - all functions are pure and deterministic.

Supported input formats:
- Hex: #RGB, #RRGGBB
- Functional: rgb(r, g, b), rgba(r, g, b, a)

Opaque results are returned as #rrggbb, translucent ones as rgba(r, g, b, a).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
RGB_COLOR_PATTERN = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$"
)


@dataclass(frozen=True)
class RGBA:
    """Decomposed color channels (0-255) with alpha (0-1)."""

    r: int
    g: int
    b: int
    a: float = 1.0


def parse_color(color: str) -> RGBA:
    """
    Parse a CSS color string.

    Args:
        color: Color in hex or rgb()/rgba() notation

    Returns:
        RGBA channels

    Raises:
        ValueError: If the color format is not supported
    """
    value = color.strip()

    if HEX_COLOR_PATTERN.match(value):
        hex_color = value.lstrip("#")
        if len(hex_color) == 3:
            hex_color = "".join(c * 2 for c in hex_color)
        return RGBA(
            int(hex_color[0:2], 16),
            int(hex_color[2:4], 16),
            int(hex_color[4:6], 16),
        )

    match = RGB_COLOR_PATTERN.match(value)
    if match:
        r, g, b = (int(match.group(i)) for i in (1, 2, 3))
        if max(r, g, b) > 255:
            raise ValueError(f"Color channel out of range in: {color}")
        alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        return RGBA(r, g, b, _clamp(alpha))

    raise ValueError(
        f"Unsupported color format: {color}. Expected #RGB, #RRGGBB, rgb() or rgba()"
    )


def format_color(rgba: RGBA) -> str:
    """Render channels back to a CSS color string."""
    if rgba.a >= 1:
        return f"#{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}"
    return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {_format_alpha(rgba.a)})"


def _format_alpha(alpha: float) -> str:
    return f"{round(alpha, 3):g}"


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def get_luminance(color: str) -> float:
    """
    Calculate relative luminance per WCAG 2.1.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB values normalized and linearized.
    Alpha is ignored.
    """

    def linearize(c: int) -> float:
        c_srgb = c / 255
        if c_srgb <= 0.03928:
            return c_srgb / 12.92
        return float(((c_srgb + 0.055) / 1.055) ** 2.4)

    rgba = parse_color(color)
    return 0.2126 * linearize(rgba.r) + 0.7152 * linearize(rgba.g) + 0.0722 * linearize(rgba.b)


def get_contrast_ratio(foreground: str, background: str) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Returns:
        Contrast ratio (1.0 to 21.0)
    """
    l1 = get_luminance(foreground)
    l2 = get_luminance(background)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def darken(color: str, coefficient: float) -> str:
    """Darken a color. coefficient 0 leaves it unchanged, 1 yields black."""
    rgba = parse_color(color)
    factor = 1 - _clamp(coefficient)
    return format_color(
        RGBA(
            round(rgba.r * factor),
            round(rgba.g * factor),
            round(rgba.b * factor),
            rgba.a,
        )
    )


def lighten(color: str, coefficient: float) -> str:
    """Lighten a color. coefficient 0 leaves it unchanged, 1 yields white."""
    rgba = parse_color(color)
    factor = _clamp(coefficient)
    return format_color(
        RGBA(
            round(rgba.r + (255 - rgba.r) * factor),
            round(rgba.g + (255 - rgba.g) * factor),
            round(rgba.b + (255 - rgba.b) * factor),
            rgba.a,
        )
    )


def alpha(color: str, value: float) -> str:
    """Set the alpha channel of a color."""
    rgba = parse_color(color)
    return format_color(RGBA(rgba.r, rgba.g, rgba.b, _clamp(value)))


def emphasize(color: str, coefficient: float = 0.15) -> str:
    """Darken light colors and lighten dark ones."""
    if get_luminance(color) > 0.5:
        return darken(color, coefficient)
    return lighten(color, coefficient)
