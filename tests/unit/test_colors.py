"""
Palette color math tests.

Tests for color parsing, WCAG luminance/contrast and the tonal helpers
used to derive rich color variants.
"""

from __future__ import annotations

import pytest

from themekit.components.palette.colors import (
    RGBA,
    alpha,
    darken,
    emphasize,
    format_color,
    get_contrast_ratio,
    get_luminance,
    lighten,
    parse_color,
)


class TestParseColor:
    """Color string parsing."""

    def test_hex_6_digit(self) -> None:
        assert parse_color("#3D71D9") == RGBA(61, 113, 217)

    def test_hex_3_digit(self) -> None:
        assert parse_color("#abc") == RGBA(170, 187, 204)

    def test_rgb_function(self) -> None:
        assert parse_color("rgb(1, 2, 3)") == RGBA(1, 2, 3)

    def test_rgba_function(self) -> None:
        assert parse_color("rgba(204, 204, 220, 0.16)") == RGBA(204, 204, 220, 0.16)

    def test_surrounding_whitespace(self) -> None:
        assert parse_color("  #000  ") == RGBA(0, 0, 0)

    @pytest.mark.parametrize("value", ["red", "FFFFFF", "#FFFF", "#GGGGGG", "rgb(1, 2)"])
    def test_unsupported_format(self, value: str) -> None:
        with pytest.raises(ValueError, match="Unsupported color format"):
            parse_color(value)

    def test_channel_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_color("rgb(300, 0, 0)")


class TestFormatColor:
    def test_opaque_as_hex(self) -> None:
        assert format_color(RGBA(255, 0, 16)) == "#ff0010"

    def test_translucent_as_rgba(self) -> None:
        assert format_color(RGBA(1, 2, 3, 0.5)) == "rgba(1, 2, 3, 0.5)"


class TestContrast:
    """WCAG luminance and contrast ratio."""

    def test_luminance_extremes(self) -> None:
        assert get_luminance("#000000") == pytest.approx(0.0)
        assert get_luminance("#ffffff") == pytest.approx(1.0)

    def test_black_on_white_max_contrast(self) -> None:
        assert get_contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, rel=0.01)

    def test_contrast_is_symmetric(self) -> None:
        ratio1 = get_contrast_ratio("#3d71d9", "#ffffff")
        ratio2 = get_contrast_ratio("#ffffff", "#3d71d9")
        assert ratio1 == pytest.approx(ratio2)

    def test_same_color_min_contrast(self) -> None:
        assert get_contrast_ratio("#777777", "#777777") == pytest.approx(1.0)


class TestTonalHelpers:
    """darken / lighten / alpha / emphasize."""

    def test_darken(self) -> None:
        assert darken("#ffffff", 0.2) == "#cccccc"

    def test_darken_keeps_alpha(self) -> None:
        assert darken("rgba(255, 255, 255, 0.5)", 0.2) == "rgba(204, 204, 204, 0.5)"

    def test_lighten(self) -> None:
        assert lighten("#000000", 0.2) == "#333333"

    def test_coefficient_clamped(self) -> None:
        assert darken("#123456", 2) == "#000000"
        assert lighten("#123456", 2) == "#ffffff"

    def test_alpha(self) -> None:
        assert alpha("#fff", 0.5) == "rgba(255, 255, 255, 0.5)"

    def test_alpha_one_is_opaque(self) -> None:
        assert alpha("rgba(0, 0, 0, 0.3)", 1) == "#000000"

    def test_emphasize_dark_color_lightens(self) -> None:
        assert emphasize("#000000", 0.2) == "#333333"

    def test_emphasize_light_color_darkens(self) -> None:
        assert emphasize("#ffffff", 0.2) == "#cccccc"
