import math

import pytest

from chartkit.chart import ChartError
from chartkit.defaults import DEFAULT_DPI
from chartkit.donut_chart import DonutChart
from chartkit.geometry import Box
from chartkit.series import Value


def test_finalize_values_sum_to_one():
    pie = DonutChart(
        values=[
            Value(value=10, label="Blue"),
            Value(value=9, label="Green"),
            Value(value=8, label="Gray"),
            Value(value=7, label="Orange"),
            Value(value=6, label="HEANG"),
            Value(value=5, label="??"),
            Value(value=2, label="!!"),
        ]
    )
    final = pie.finalize_values()
    assert len(final) == 7
    assert math.isclose(sum(v.value for v in final), 1.0)
    assert [v.label for v in final] == ["Blue", "Green", "Gray", "Orange", "HEANG", "??", "!!"]
    assert math.isclose(final[0].value, 10 / 47)


def test_finalize_values_drops_zero_values():
    pie = DonutChart(
        values=[
            Value(value=5, label="Blue"),
            Value(value=5, label="Green"),
            Value(value=0, label="Gray"),
        ]
    )
    final = pie.finalize_values()
    assert [v.label for v in final] == ["Blue", "Green"]
    assert [v.value for v in final] == [0.5, 0.5]


def test_finalize_values_all_zero_raises():
    pie = DonutChart(
        values=[
            Value(value=0, label="Blue"),
            Value(value=0, label="Green"),
            Value(value=0, label="Gray"),
        ]
    )
    with pytest.raises(ChartError):
        pie.finalize_values()


def test_finalize_values_empty_raises():
    with pytest.raises(ChartError):
        DonutChart().finalize_values()


def test_finalize_values_leaves_input_unchanged():
    values = [Value(value=5, label="Blue"), Value(value=15, label="Green")]
    DonutChart(values=values).finalize_values()
    assert [v.value for v in values] == [5, 15]


def test_get_dpi():
    assert DonutChart().get_dpi() == DEFAULT_DPI
    assert DonutChart().get_dpi(192) == 192
    assert DonutChart(dpi=128).get_dpi() == 128
    assert DonutChart(dpi=128).get_dpi(192) == 128


def test_default_box_is_square():
    assert DonutChart().box() == Box(top=5, left=5, right=1019, bottom=1019)


def test_box_with_padding():
    pie = DonutChart(width=200, height=100, background_padding=Box(top=10, left=11, right=12, bottom=13))
    assert pie.box() == Box(top=10, left=11, right=188, bottom=87)


def test_circle_adjusted_square_canvas():
    pie = DonutChart()
    canvas = pie.box()
    assert pie.circle_adjusted_canvas_box(canvas) == Box(top=5, left=5, right=1019, bottom=1019)


@pytest.mark.parametrize(
    "size, expected",
    [(2048, 48), (1024, 24), (1023, 18), (512, 12), (300, 12), (256, 10), (100, 10)],
)
def test_scaled_font_size(size, expected):
    assert DonutChart(width=size, height=size).scaled_font_size() == expected


@pytest.mark.parametrize(
    "size, expected",
    [(2048, 48), (1024, 24), (512, 18), (256, 12), (255, 10)],
)
def test_title_font_size(size, expected):
    assert DonutChart(width=size, height=size).title_font_size() == expected