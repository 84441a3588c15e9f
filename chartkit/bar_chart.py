"""The bar chart: its bounds, value range and the placement of its bars."""

import math
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from chartkit.chart import ChartError
from chartkit.defaults import (
    DEFAULT_BAR_SPACING,
    DEFAULT_BAR_WIDTH,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.geometry import Box
from chartkit.ranges import ContinuousRange
from chartkit.series import float_value_formatter

_MAX_FLOAT = sys.float_info.max


def _tick_value(tick):
    if hasattr(tick, "value"):
        return float(tick.value)
    return float(tick[0])


@dataclass
class BarChart:
    """A chart drawing one bar per value.

    Ticks are given as ``(value, label)`` pairs or objects with a ``value``.
    """

    bars: list = field(default_factory=list)
    title: str = ""
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    bar_width: int = 0
    bar_spacing: int = 0
    background_padding: Box = field(default_factory=Box)

    y_axis_range: Optional[ContinuousRange] = None
    y_ticks: list = field(default_factory=list)
    y_value_formatter: Optional[Callable[[Any], str]] = None
    y_axis_hidden: bool = False
    x_axis_hidden: bool = False

    use_base_value: bool = False
    base_value: float = 0.0

    def _width(self):
        return self.width or DEFAULT_CHART_WIDTH

    def _height(self):
        return self.height or DEFAULT_CHART_HEIGHT

    def _dpi(self):
        return self.dpi or DEFAULT_DPI

    def _bar_width(self):
        return self.bar_width or DEFAULT_BAR_WIDTH

    def _bar_spacing(self):
        return self.bar_spacing or DEFAULT_BAR_SPACING

    def box(self):
        """The chart bounds inside the background padding."""
        padding = self.background_padding
        return Box(
            top=padding.get_top(20),
            left=padding.get_left(20),
            right=self._width() - padding.get_right(10),
            bottom=self._height() - padding.get_bottom(50),
        )

    def y_range(self):
        """The y range: the user range if set, else the ticks, else the bars.

        The chart's own range object is copied, never changed.
        """
        if self.y_axis_range is not None and not self.y_axis_range.is_zero():
            return replace(self.y_axis_range)

        rng = ContinuousRange()
        if self.y_ticks:
            values = [_tick_value(t) for t in self.y_ticks]
        else:
            values = [float(bar.value) for bar in self.bars]

        rng.min = min(values, default=_MAX_FLOAT)
        rng.max = max(values, default=-_MAX_FLOAT)
        return rng

    def has_axes(self):
        """True if the y-axis is shown."""
        return not self.y_axis_hidden

    def value_formatter(self):
        """The y-axis formatter, falling back to the float formatter."""
        return self.y_value_formatter or float_value_formatter

    def total_bar_width(self, bar_width, spacing):
        """The width taken by all bars with the given width and spacing."""
        return len(self.bars) * (bar_width + spacing)

    def effective_bar_spacing(self, canvas_box):
        """The spacing between bars, shrunk if the bars would not fit."""
        total = self.total_bar_width(self._bar_width(), self._bar_spacing())
        if total > canvas_box.width():
            remaining = canvas_box.width() - len(self.bars) * self._bar_width()
            if remaining > 0:
                return math.ceil(remaining / len(self.bars))
            return 0
        return self._bar_spacing()

    def effective_bar_width(self, canvas_box, spacing):
        """The bar width, shrunk if the bars would not fit with ``spacing``."""
        total = self.total_bar_width(self._bar_width(), spacing)
        if total > canvas_box.width():
            remaining = canvas_box.width() - len(self.bars) * spacing
            if remaining > 0:
                return math.ceil(remaining / len(self.bars))
            return 0
        return self._bar_width()

    def scaled_total_width(self, canvas_box):
        """The (bar width, spacing, total width) that fit ``canvas_box``."""
        spacing = self.effective_bar_spacing(canvas_box)
        width = self.effective_bar_width(canvas_box, spacing)
        return width, spacing, self.total_bar_width(width, spacing)

    def bar_boxes(self, canvas_box, y_range):
        """The box each bar is drawn in, in order.

        ``y_range`` should have its domain set to the canvas height.
        """
        if not self.bars:
            raise ChartError("please provide at least one bar")
        if y_range.delta() == 0:
            raise ChartError("invalid data range; cannot be zero")

        width, spacing, _ = self.scaled_total_width(canvas_box)
        half_spacing = spacing >> 1
        if self.use_base_value:
            bottom = canvas_box.bottom - y_range.translate(self.base_value)
        else:
            bottom = canvas_box.bottom

        boxes = []
        x_offset = canvas_box.left
        for bar in self.bars:
            left = x_offset + half_spacing
            boxes.append(
                Box(
                    top=canvas_box.bottom - y_range.translate(bar.value),
                    left=left,
                    right=left + width,
                    bottom=bottom,
                )
            )
            x_offset += width + spacing
        return boxes

    def title_font_size(self):
        """The title font size scaled to the smaller chart dimension."""
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