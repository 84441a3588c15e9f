"""The line chart: its bounds, value ranges and formatters."""

import math
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from chartkit.defaults import (
    DEFAULT_BACKGROUND_PADDING,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.geometry import Box
from chartkit.ranges import ContinuousRange
from chartkit.series import YAxisType

_MAX_FLOAT = sys.float_info.max
_STARTING_DELTA_BOUND = 1e9


class ChartError(ValueError):
    """Raised when a chart's ranges cannot be drawn."""


def _round_to_for_delta(delta):
    cursor = _STARTING_DELTA_BOUND
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.0
        cursor /= 10.0
    return 0.0


def _round_down(value, round_to):
    if round_to == 0:
        return math.nan
    quotient = value / round_to
    if not math.isfinite(quotient):
        return quotient * round_to
    return math.floor(quotient) * round_to


def _round_up(value, round_to):
    if round_to == 0:
        return math.nan
    quotient = value / round_to
    if not math.isfinite(quotient):
        return quotient * round_to
    return math.ceil(quotient) * round_to


def _tick_value(tick):
    if hasattr(tick, "value"):
        return float(tick.value)
    return float(tick[0])


def _tick_bounds(ticks):
    low, high = _MAX_FLOAT, -_MAX_FLOAT
    for tick in ticks:
        value = _tick_value(tick)
        low = min(low, value)
        high = max(high, value)
    return low, high


def _round_out(rng):
    round_to = _round_to_for_delta(rng.delta())
    rng.min, rng.max = _round_down(rng.min, round_to), _round_up(rng.max, round_to)


def _series_axis(series):
    return getattr(series, "y_axis", YAxisType.PRIMARY)


@dataclass
class Chart:
    """A chart of one or more series against an x-axis and two y-axes.

    Ticks are given as ``(value, label)`` pairs or objects with a ``value``.
    """

    series: list = field(default_factory=list)
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    background_padding: Box = field(default_factory=Box)

    x_range: Optional[ContinuousRange] = None
    y_range: Optional[ContinuousRange] = None
    y_secondary_range: Optional[ContinuousRange] = None

    x_ticks: list = field(default_factory=list)
    y_ticks: list = field(default_factory=list)
    y_secondary_ticks: list = field(default_factory=list)

    x_value_formatter: Optional[Callable[[Any], str]] = None
    y_value_formatter: Optional[Callable[[Any], str]] = None
    y_secondary_value_formatter: Optional[Callable[[Any], str]] = None

    x_axis_hidden: bool = False
    y_axis_hidden: bool = False
    y_secondary_axis_hidden: bool = False

    def _width(self):
        return self.width or DEFAULT_CHART_WIDTH

    def _height(self):
        return self.height or DEFAULT_CHART_HEIGHT

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

    def _visible_series(self):
        return (s for s in self.series if not getattr(s, "hidden", False))

    def _scan_series(self):
        min_x, max_x = _MAX_FLOAT, -_MAX_FLOAT
        min_y, max_y = _MAX_FLOAT, -_MAX_FLOAT
        min_ya, max_ya = _MAX_FLOAT, -_MAX_FLOAT
        mapped_to_secondary = False

        for series in self._visible_series():
            axis = _series_axis(series)
            if callable(getattr(series, "bounded_values", None)):
                points = (
                    series.bounded_values(index) for index in range(len(series))
                )
            elif callable(getattr(series, "values", None)) and hasattr(
                series, "__len__"
            ):
                points = (series.values(index) for index in range(len(series)))
            else:
                continue

            for x, *ys in points:
                min_x = min(min_x, x)
                max_x = max(max_x, x)
                if axis == YAxisType.PRIMARY:
                    min_y = min(min_y, *ys)
                    max_y = max(max_y, *ys)
                elif axis == YAxisType.SECONDARY:
                    min_ya = min(min_ya, *ys)
                    max_ya = max(max_ya, *ys)
                    mapped_to_secondary = True

        return (min_x, max_x), (min_y, max_y), (min_ya, max_ya), mapped_to_secondary

    def ranges(self):
        """The (x, y, secondary y) ranges, from ticks, user ranges or the data.

        The chart's own range objects are copied, never changed.
        """
        (min_x, max_x), (min_y, max_y), (min_ya, max_ya), secondary = (
            self._scan_series()
        )

        def start(rng):
            return ContinuousRange() if rng is None else replace(rng)

        xr = start(self.x_range)
        yr = start(self.y_range)
        yra = start(self.y_secondary_range)

        if self.x_ticks:
            xr.min, xr.max = _tick_bounds(self.x_ticks)
        elif xr.is_zero():
            xr.min, xr.max = min_x, max_x

        if self.y_ticks:
            yr.min, yr.max = _tick_bounds(self.y_ticks)
        elif yr.is_zero():
            yr.min, yr.max = min_y, max_y
            if not self.y_axis_hidden:
                _round_out(yr)

        if self.y_secondary_ticks:
            # the bounds come from the primary axis ticks, as they always have
            yra.min, yra.max = _tick_bounds(self.y_ticks)
        elif secondary and yra.is_zero():
            yra.min, yra.max = min_ya, max_ya
            if not self.y_secondary_axis_hidden:
                _round_out(yra)

        return xr, yr, yra

    def check_ranges(self, xr, yr, yra):
        """Raise ChartError if any range cannot be drawn."""
        x_delta = xr.delta()
        if math.isinf(x_delta):
            raise ChartError("infinite x-range delta")
        if math.isnan(x_delta):
            raise ChartError("nan x-range delta")
        if x_delta == 0:
            raise ChartError("zero x-range delta; there needs to be at least (2) values")

        y_delta = yr.delta()
        if math.isinf(y_delta):
            raise ChartError("infinite y-range delta")
        if math.isnan(y_delta):
            raise ChartError("nan y-range delta")

        if self.has_secondary_series():
            ya_delta = yra.delta()
            if math.isinf(ya_delta):
                raise ChartError("infinite secondary y-range delta")
            if math.isnan(ya_delta):
                raise ChartError("nan secondary y-range delta")

    def has_axes(self):
        """True if any axis is shown."""
        return not (
            self.x_axis_hidden and self.y_axis_hidden and self.y_secondary_axis_hidden
        )

    def has_secondary_series(self):
        """True if any series is drawn against the secondary y-axis."""
        return any(_series_axis(s) == YAxisType.SECONDARY for s in self.series)

    def validate_series(self):
        """Validate every series, raising the first error found."""
        for series in self.series:
            series.validate()

    def value_formatters(self):
        """The (x, y, secondary y) formatters; any may be None."""
        x = y = ya = None
        for series in self.series:
            provider = getattr(series, "value_formatters", None)
            if not callable(provider):
                continue
            sx, sy = provider()
            axis = _series_axis(series)
            if axis == YAxisType.PRIMARY:
                x, y = sx, sy
            elif axis == YAxisType.SECONDARY:
                x, ya = sx, sy
        if self.x_value_formatter is not None:
            x = self.x_value_formatter
        if self.y_value_formatter is not None:
            y = self.y_value_formatter
        if self.y_secondary_value_formatter is not None:
            ya = self.y_secondary_value_formatter
        return x, y, ya