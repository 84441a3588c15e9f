# chartkit

chartkit works out the layout of a chart. It covers the canvas boxes, the value ranges, the series data, and the geometry of bars and donut slices. The result is the set of numbers a renderer needs to draw the chart.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install ".[test]"
```

## Boxes and ranges

```python
from chartkit.geometry import Box
from chartkit.ranges import ContinuousRange

canvas = Box(top=5, left=5, right=95, bottom=95)
print(canvas.width(), canvas.height(), canvas.center())  # 90 90 (50, 50)

r = ContinuousRange(min=1.0, max=8.0, domain=1000)
print(r.translate(5.0))  # 572
```

Combining boxes:

- `Box.grow` returns the smallest box that holds both boxes.
- `Box.constrain` returns the part of one box that lies inside another.
- `Box.fit` keeps another box's aspect ratio and fits it inside this box.
- `Box.outer_constrain` shrinks a box by however far a second box sticks out of a set of bounds.

Other geometry:

- `Box.corners` returns a `BoxCorners`. `BoxCorners.rotate` rotates its four corners about their center.
- `Point.distance_to` gives the distance between two points.
- `BOX_ZERO` is a box whose zero edges are deliberate. `Box.get_top` and the other edge getters return that zero instead of the default they are given.

`ContinuousRange.translate` raises `ValueError` when the range has zero width. If `descending` is set, it counts from the far end of the domain.

## Series

The series types are in `chartkit.series`.

```python
from chartkit.series import ContinuousSeries, ConcatSeries, BollingerBandsSeries

line = ContinuousSeries(name="Values", x_values=[1.0, 2.0, 3.0], y_values=[2.0, 4.0, 3.0])
line.validate()
print(line.last_values())  # (3.0, 3.0)

both = ConcatSeries(series=[line, line])
print(len(both), both.values(4))  # 6 (2.0, 4.0)

bands = BollingerBandsSeries(inner_series=line, period=2)
print(bands.bounded_last_values())  # (x, upper, lower)
```

- `ContinuousSeries` holds paired x and y values. It has `first_values`, `last_values` and `value_formatters`. When no formatter is set, `value_formatters` falls back to `float_value_formatter`.
- `ConcatSeries` reads several series one after the other. `values` raises `IndexError` past the end.
- `BollingerBandsSeries` places bands `k` standard deviations above and below a moving average over `period` values. The defaults are 2.0 and 16. `bounded_values` is meant to be read in index order. Reading index 0 starts a new window.
- `AnnotationSeries` holds labelled points (`Value2`).
- `bounded_last_values_annotation_series` builds an annotation series for the last upper and lower band values.
- `Value` is a labelled value, `Array` is an immutable tuple of floats, and `YAxisType` and `TickPosition` are enums.

Each `validate` method raises `SeriesError` when a series cannot be used.

## Charts

```python
from chartkit.chart import Chart
from chartkit.series import ContinuousSeries

chart = Chart(series=[ContinuousSeries(x_values=[1.0, 2.0], y_values=[3.1, 3.14])])
xr, yr, yra = chart.ranges()
chart.check_ranges(xr, yr, yra)
print(chart.box())  # box(5,5,1019,395)
```

How `Chart.ranges` picks each range:

- If the axis has ticks, the range comes from the ticks. Ticks are `(value, label)` pairs or objects with a `value`.
- Otherwise a user range is used if one is set.
- Otherwise the range comes from the visible series.
- A y range taken from the data is rounded outward while its axis is shown.
- The chart's own range objects are copied, never changed.

`Chart.check_ranges` raises `ChartError` when a range cannot be drawn. A range is rejected when:

- its width is infinite, or
- its width is NaN, or
- it is the x range and its width is zero.

`Chart.value_formatters`, `Chart.has_axes`, `Chart.has_secondary_series` and `Chart.validate_series` report on the chart's series and axes.

`BarChart` is in `chartkit.bar_chart`.

- `y_range` gives the chart's value range.
- `effective_bar_spacing` and `effective_bar_width` shrink the bars and gaps so the bars fit the canvas. `scaled_total_width` returns the resulting width, spacing and total.
- `bar_boxes` returns the box for each bar, measured from the bottom of the canvas or from `base_value`. It raises `ChartError` when there are no bars or the range has zero width.

`DonutChart` is in `chartkit.donut_chart`.

- `finalize_values` drops values that are not positive and turns the rest into fractions of the total. It raises `ChartError` if nothing is left.
- `circle_adjusted_canvas_box` fits the canvas to a square.

Both chart classes give font sizes scaled to the chart size.

Colors, palettes and the layout defaults:

- `chartkit.colors` has the theme colors and the two palettes, `DEFAULT_COLOR_PALETTE` and `ALTERNATE_COLOR_PALETTE`. A palette reads the module's default colors when it is asked for them.
- `chartkit.defaults` has the default chart size, paddings, bar sizes and formats.

## What it does not do

chartkit draws nothing:

- There is no renderer and no PNG or SVG output.
- It does not load fonts or measure text.
- It does not generate axis ticks or grid lines.
- It has no command-line tool.

It computes the boxes, ranges and values that a drawing layer would use.

## Running the tests

```
pytest
```