"""Colors, the theme colors and the palettes that hand them out."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    def with_alpha(self, alpha):
        """Return a copy of the color with a different alpha channel."""
        return replace(self, a=alpha)


COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLUE = Color(0, 116, 217, 255)
COLOR_CYAN = Color(0, 217, 210, 255)
COLOR_GREEN = Color(0, 217, 101, 255)
COLOR_RED = Color(217, 0, 116, 255)
COLOR_ORANGE = Color(217, 101, 0, 255)
COLOR_YELLOW = Color(217, 210, 0, 255)
COLOR_BLACK = Color(51, 51, 51, 255)
COLOR_LIGHT_GRAY = Color(239, 239, 239, 255)

COLOR_ALTERNATE_BLUE = Color(106, 195, 203, 255)
COLOR_ALTERNATE_GREEN = Color(42, 190, 137, 255)
COLOR_ALTERNATE_GRAY = Color(110, 128, 139, 255)
COLOR_ALTERNATE_YELLOW = Color(240, 174, 90, 255)
COLOR_ALTERNATE_LIGHT_GRAY = Color(187, 190, 191, 255)

COLOR_TRANSPARENT = Color(1, 1, 1, 0)

DEFAULT_BACKGROUND_COLOR = COLOR_WHITE
DEFAULT_BACKGROUND_STROKE_COLOR = COLOR_WHITE
DEFAULT_CANVAS_COLOR = COLOR_WHITE
DEFAULT_CANVAS_STROKE_COLOR = COLOR_WHITE
DEFAULT_TEXT_COLOR = COLOR_BLACK
DEFAULT_AXIS_COLOR = COLOR_BLACK
DEFAULT_STROKE_COLOR = COLOR_LIGHT_GRAY
DEFAULT_FILL_COLOR = COLOR_BLUE
DEFAULT_ANNOTATION_FILL_COLOR = COLOR_WHITE
DEFAULT_GRID_LINE_COLOR = COLOR_LIGHT_GRAY

DEFAULT_COLORS = [
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_CYAN,
    COLOR_ORANGE,
]

DEFAULT_ALTERNATE_COLORS = [
    COLOR_ALTERNATE_BLUE,
    COLOR_ALTERNATE_GREEN,
    COLOR_ALTERNATE_GRAY,
    COLOR_ALTERNATE_YELLOW,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_CYAN,
    COLOR_ORANGE,
]


def _pick(colors, index):
    if index < 0:
        raise IndexError(f"color index must not be negative: {index}")
    return colors[index % len(colors)]


def get_default_color(index):
    """Return a default series color; the index wraps around the list."""
    return _pick(DEFAULT_COLORS, index)


def get_alternate_color(index):
    """Return an alternate series color; the index wraps around the list."""
    return _pick(DEFAULT_ALTERNATE_COLORS, index)


class ColorPalette:
    """The set of colors a chart draws with.

    The colors are read from the module defaults at the time they are asked
    for, so reassigning a default changes every palette that uses it.
    """

    @property
    def background_color(self):
        return DEFAULT_BACKGROUND_COLOR

    @property
    def background_stroke_color(self):
        return DEFAULT_BACKGROUND_STROKE_COLOR

    @property
    def canvas_color(self):
        return DEFAULT_CANVAS_COLOR

    @property
    def canvas_stroke_color(self):
        return DEFAULT_CANVAS_STROKE_COLOR

    @property
    def axis_stroke_color(self):
        return DEFAULT_AXIS_COLOR

    @property
    def text_color(self):
        return DEFAULT_TEXT_COLOR

    def series_color(self, index):
        """Return the color for the series at ``index``."""
        return get_default_color(index)


class DefaultColorPalette(ColorPalette):
    """The palette using the default series colors."""

    def series_color(self, index):
        return get_default_color(index)


class AlternateColorPalette(ColorPalette):
    """The palette using the alternate series colors."""

    def series_color(self, index):
        return get_alternate_color(index)


DEFAULT_COLOR_PALETTE = DefaultColorPalette()
ALTERNATE_COLOR_PALETTE = AlternateColorPalette()