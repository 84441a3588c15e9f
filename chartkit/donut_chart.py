"""The donut chart: its bounds, the circle's box and its slice values."""

from dataclasses import dataclass, field, replace

from chartkit.chart import ChartError
from chartkit.defaults import (
    DEFAULT_BACKGROUND_PADDING,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.geometry import Box


@dataclass
class DonutChart:
    """A chart drawing values as slices of a ring."""

    values: list = field(default_factory=list)
    title: str = ""
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    background_padding: Box = field(default_factory=Box)

    def _width(self):
        return self.width or DEFAULT_CHART_WIDTH

    def _height(self):
        # a donut chart is square unless told otherwise
        return self.height or DEFAULT_CHART_WIDTH

    def get_dpi(self, default=None):
        """The chart DPI, or ``default`` (then DEFAULT_DPI) when unset."""
        if self.dpi == 0:
            return DEFAULT_DPI if default is None else default
        return self.dpi

    def box(self):
        """The chart bounds inside the background padding."""
        padding = self.background_padding
        return Box(
            top=padding.get_top(DEFAULT_BACKGROUND_PADDING.top),
            left=padding.get_left(DEFAULT_BACKGROUND_PADDING.left),
            right=self._width() - padding.get_right(DEFAULT_BACKGROUND_PADDING.right),
            bottom=self._height()
            - padding.get_bottom(DEFAULT_BACKGROUND_PADDING.bottom),
        )

    def circle_adjusted_canvas_box(self, canvas_box):
        """The canvas fitted to a square for the ring to sit in."""
        diameter = min(canvas_box.width(), canvas_box.height())
        return canvas_box.fit(Box(right=diameter, bottom=diameter))

    def finalize_values(self):
        """The positive values as fractions of the total, in order."""
        if not self.values:
            raise ChartError("please provide at least one value")
        total = sum(float(v.value) for v in self.values)
        final = [
            replace(v, value=float(v.value) / total)
            for v in self.values
            if v.value > 0
        ]
        if not final:
            raise ChartError("donut chart must contain at least (1) non-zero value")
        return final

    def scaled_font_size(self):
        """The slice label font size scaled to the smaller dimension."""
        dimension = min(self._width(), self._height())
        if dimension >= 2048:
            return 48.0
        if dimension >= 1024:
            return 24.0
        if dimension > 512:
            return 18.0
        if dimension > 256:
            return 12.0
        return 10.0

    def title_font_size(self):
        """The title font size scaled to the smaller dimension."""
        dimension = min(self._width(), self._height())
        if dimension >= 2048:
            return 48.0
        if dimension >= 1024:
            return 24.0
        if dimension >= 512:
            return 18.0
        if dimension >= 256:
            return 12.0
        return 10.0