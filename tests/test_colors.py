import pytest

from chartkit import colors
from chartkit.colors import (
    ALTERNATE_COLOR_PALETTE,
    COLOR_BLUE,
    COLOR_TRANSPARENT,
    DEFAULT_ALTERNATE_COLORS,
    DEFAULT_COLOR_PALETTE,
    DEFAULT_COLORS,
    Color,
    get_alternate_color,
    get_default_color,
)


def test_theme_blue_channels():
    blue = get_default_color(0)
    assert (blue.r, blue.g, blue.b, blue.a) == (0, 116, 217, 255)
    assert DEFAULT_COLOR_PALETTE.series_color(0) == Color(0, 116, 217, 255)


def test_with_alpha_keeps_rgb():
    faded = COLOR_BLUE.with_alpha(64)
    assert faded.a == 64
    assert (faded.r, faded.g, faded.b) == (COLOR_BLUE.r, COLOR_BLUE.g, COLOR_BLUE.b)
    assert COLOR_BLUE.a == 255


def test_color_channel_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)
    with pytest.raises(ValueError):
        COLOR_BLUE.with_alpha(-1)


def test_default_color_first_is_blue():
    assert get_default_color(0) == COLOR_BLUE


@pytest.mark.parametrize("index", [0, 1, 4, 5, 12])
def test_default_color_wraps(index):
    assert get_default_color(index) == DEFAULT_COLORS[index % len(DEFAULT_COLORS)]
    assert get_default_color(index + len(DEFAULT_COLORS)) == get_default_color(index)


@pytest.mark.parametrize("index", [0, 3, 8, 9, 20])
def test_alternate_color_wraps(index):
    assert get_alternate_color(index) == DEFAULT_ALTERNATE_COLORS[
        index % len(DEFAULT_ALTERNATE_COLORS)
    ]


def test_negative_index_raises():
    with pytest.raises(IndexError):
        get_default_color(-1)
    with pytest.raises(IndexError):
        ALTERNATE_COLOR_PALETTE.series_color(-3)


def test_palettes_series_colors():
    for index in range(12):
        assert DEFAULT_COLOR_PALETTE.series_color(index) == get_default_color(index)
        assert ALTERNATE_COLOR_PALETTE.series_color(index) == get_alternate_color(index)


def test_palette_fixed_colors():
    black = Color(51, 51, 51, 255)
    white = Color(255, 255, 255, 255)
    assert DEFAULT_COLOR_PALETTE.text_color == black
    assert ALTERNATE_COLOR_PALETTE.axis_stroke_color == black
    assert DEFAULT_COLOR_PALETTE.canvas_color == white
    assert ALTERNATE_COLOR_PALETTE.series_color(0) == Color(106, 195, 203, 255)


def test_palette_reads_reassigned_defaults(monkeypatch):
    monkeypatch.setattr(colors, "DEFAULT_BACKGROUND_COLOR", COLOR_TRANSPARENT)
    monkeypatch.setattr(colors, "DEFAULT_CANVAS_COLOR", COLOR_TRANSPARENT)
    transparent = Color(1, 1, 1, 0)
    assert DEFAULT_COLOR_PALETTE.background_color == transparent
    assert ALTERNATE_COLOR_PALETTE.canvas_color == transparent
    assert DEFAULT_COLOR_PALETTE.series_color(0) == get_default_color(0)