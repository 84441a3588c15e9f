import math

import pytest

from chartkit.ranges import ContinuousRange


def _range_over(values, domain):
    return ContinuousRange(min=min(values), max=max(values), domain=domain)


def test_range_translate():
    values = [1.0, 2.0, 2.5, 2.7, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    r = _range_over(values, 1000)
    assert r.translate(1.0) == 0
    assert r.translate(8.0) == 1000
    assert r.translate(5.0) == 572


def test_range_translate_descending():
    r = ContinuousRange(min=1.0, max=8.0, domain=1000, descending=True)
    assert r.translate(1.0) == 1000
    assert r.translate(8.0) == 0


def test_range_translate_zero_delta_raises():
    with pytest.raises(ValueError):
        ContinuousRange(min=3.0, max=3.0, domain=100).translate(3.0)


def test_range_delta():
    assert ContinuousRange(min=-2.0, max=5.0).delta() == 7.0


def test_range_is_zero():
    assert ContinuousRange().is_zero()
    assert ContinuousRange(min=math.nan, max=math.nan).is_zero()
    assert not ContinuousRange(max=1.0).is_zero()
    assert not ContinuousRange(domain=10).is_zero()


def test_range_string():
    assert str(ContinuousRange()) == "ContinuousRange [empty]"
    assert str(ContinuousRange(min=1.0, max=2.5, domain=100)) == (
        "ContinuousRange [1.00,2.50] => 100"
    )