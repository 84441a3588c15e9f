"""Data series: plain lines, concatenations, bollinger bands and annotations."""

import enum
import math
import numbers
import statistics
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from chartkit.defaults import DEFAULT_FLOAT_FORMAT

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16
DEFAULT_BOLLINGER_K = 2.0


class SeriesError(ValueError):
    """Raised when a series is not set up well enough to be drawn."""


class TickPosition(enum.IntEnum):
    """Where tick labels are drawn relative to their ticks."""

    UNSET = 0
    BETWEEN_TICKS = 1
    UNDER_TICK = 2


class YAxisType(enum.IntEnum):
    """Which y-axis a series is drawn against."""

    PRIMARY = 0
    SECONDARY = 1


class Array(tuple):
    """An immutable sequence of floats."""

    def __new__(cls, values=()):
        return super().__new__(cls, (float(v) for v in values))


@dataclass
class Value:
    """A single labelled value, as used by bar and donut charts."""

    value: float = 0.0
    label: str = ""
    style: Any = None


@dataclass
class Value2:
    """A labelled x, y point, as used by annotations."""

    x_value: float = 0.0
    y_value: float = 0.0
    label: str = ""
    style: Any = None


def float_value_formatter(value):
    """Format a number with two decimals; anything else formats as ''."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return ""
    return DEFAULT_FLOAT_FORMAT % float(value)


def _provides_values(series):
    return callable(getattr(series, "values", None)) and hasattr(series, "__len__")


@dataclass
class AnnotationSeries:
    """A series of labels placed at points on the chart."""

    name: str = ""
    style: Any = None
    y_axis: YAxisType = YAxisType.PRIMARY
    annotations: list = field(default_factory=list)
    hidden: bool = False

    def validate(self):
        """Raise SeriesError unless there is at least one annotation."""
        if not self.annotations:
            raise SeriesError(
                "annotation series requires annotations to be set and not empty"
            )


@dataclass
class ContinuousSeries:
    """A line through paired x and y values."""

    name: str = ""
    style: Any = None
    y_axis: YAxisType = YAxisType.PRIMARY
    x_value_formatter: Optional[Callable[[Any], str]] = None
    y_value_formatter: Optional[Callable[[Any], str]] = None
    x_values: list = field(default_factory=list)
    y_values: list = field(default_factory=list)
    hidden: bool = False

    def __len__(self):
        return len(self.x_values)

    def values(self, index):
        """The (x, y) pair at ``index``."""
        return self.x_values[index], self.y_values[index]

    def first_values(self):
        return self.x_values[0], self.y_values[0]

    def last_values(self):
        return self.x_values[-1], self.y_values[-1]

    def value_formatters(self):
        """The (x, y) formatters, falling back to the float formatter."""
        return (
            self.x_value_formatter or float_value_formatter,
            self.y_value_formatter or float_value_formatter,
        )

    def validate(self):
        """Raise SeriesError unless both value lists are set and equally long."""
        if not self.x_values:
            raise SeriesError("continuous series; must have xvalues set")
        if not self.y_values:
            raise SeriesError("continuous series; must have yvalues set")
        if len(self.x_values) != len(self.y_values):
            raise SeriesError(
                "continuous series; must have same length xvalues as yvalues"
            )


@dataclass
class ConcatSeries:
    """The values of several series read one after the other."""

    series: list = field(default_factory=list)

    def _providers(self):
        return (s for s in self.series if _provides_values(s))

    def __len__(self):
        return sum(len(s) for s in self._providers())

    def values(self, index):
        """The (x, y) pair at ``index`` across all the inner series."""
        if index < 0:
            raise IndexError(f"index out of range: {index}")
        cursor = 0
        for inner in self._providers():
            length = len(inner)
            if index < cursor + length:
                return inner.values(index - cursor)
            cursor += length
        raise IndexError(f"index out of range: {index}")

    def validate(self):
        """Validate every inner series, raising the first error found."""
        for inner in self.series:
            inner.validate()


@dataclass
class BollingerBandsSeries:
    """Bands at k standard deviations above and below a moving average."""

    name: str = ""
    style: Any = None
    y_axis: YAxisType = YAxisType.PRIMARY
    period: int = DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD
    k: float = DEFAULT_BOLLINGER_K
    inner_series: Any = None
    hidden: bool = False
    _window: Optional[deque] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def _period(self):
        return self.period or DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD

    @property
    def _k(self):
        return self.k or DEFAULT_BOLLINGER_K

    def _inner(self):
        if self.inner_series is None:
            raise SeriesError("bollinger bands series requires InnerSeries to be set")
        return self.inner_series

    def __len__(self):
        return len(self._inner())

    def _bands(self, window):
        average = statistics.fmean(window)
        deviation = statistics.pstdev(window) if len(window) > 1 else 0.0
        spread = self._k * deviation
        return average + spread, average - spread

    def bounded_values(self, index):
        """The (x, upper, lower) values at ``index``.

        The window of recent values is kept between calls and restarted at
        index 0, so the values are meant to be read in order.
        """
        inner = self._inner()
        if self._window is None or index == 0:
            self._window = deque(maxlen=self._period)
        x, y = inner.values(index)
        self._window.append(y)
        upper, lower = self._bands(self._window)
        return x, upper, lower

    def bounded_last_values(self):
        """The (x, upper, lower) values over the last full window."""
        inner = self._inner()
        length = len(inner)
        start = max(length - self._period, 0)
        window = []
        x = 0.0
        for index in range(start, length):
            x, y = inner.values(index)
            window.append(y)
        if not window:
            return 0.0, math.nan, math.nan
        upper, lower = self._bands(window)
        return x, upper, lower

    def validate(self):
        """Raise SeriesError unless an inner series is set."""
        self._inner()


def bounded_last_values_annotation_series(inner_series, value_formatter=None):
    """An annotation series labelling the last upper and lower values."""
    x, upper, lower = inner_series.bounded_last_values()

    if value_formatter is None:
        formatters = getattr(inner_series, "value_formatters", None)
        if callable(formatters):
            _, value_formatter = formatters()
        else:
            value_formatter = float_value_formatter

    name = ""
    style = None
    hidden = False
    if hasattr(inner_series, "name") and callable(getattr(inner_series, "validate", None)):
        name = f"{inner_series.name} - Last Values"
        style = getattr(inner_series, "style", None)
        hidden = getattr(inner_series, "hidden", False)

    return AnnotationSeries(
        name=name,
        style=style,
        hidden=hidden,
        annotations=[
            Value2(x_value=x, y_value=upper, label=value_formatter(upper)),
            Value2(x_value=x, y_value=lower, label=value_formatter(lower)),
        ],
    )