import pytest

from kaptisto.mathops import add, div, mul, sub


def test_add():
    assert add(2, 3) == 5
    assert add(-1, -1) == -2


def test_mul():
    assert mul(2, 3) == 6
    assert mul(-1, 5) == -5


def test_sub():
    assert sub(5, 3) == 2
    assert sub(3, 5) == -2


@pytest.mark.parametrize(
    "x, y, expected",
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (0, 5, 0)],
)
def test_div_truncates_toward_zero(x, y, expected):
    assert div(x, y) == expected


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        div(1, 0)