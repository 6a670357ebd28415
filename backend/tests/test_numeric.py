import math
import pytest

from core.exceptions import InvalidInputError
from core.numeric import require_non_negative, require_number, round_to


@pytest.mark.parametrize(
    "value,decimals,expected",
    [
        (2.005, 2, 2.01),  # stored as 2.00499999...
        (1.005, 2, 1.01),
        (14.0625, 2, 14.06),
        (468.75, 2, 468.75),
        (0.12345, 4, 0.1235),
        (0.192, 3, 0.192),
        (110.5, 0, 111.0),
        (2.4999, 0, 2.0),
        (0.0, 2, 0.0),
    ],
)
def test_round_to_boundaries(value, decimals, expected):
    assert round_to(value, decimals) == expected


def test_round_to_is_symmetric_for_negatives():
    assert round_to(-2.005, 2) == -2.01
    assert round_to(-0.5, 0) == -1.0


@pytest.mark.parametrize("bad", [-1, -0.001, math.nan, math.inf, "5", None, True])
def test_require_non_negative_rejects(bad):
    with pytest.raises(InvalidInputError):
        require_non_negative(bad, "distance_km")


def test_require_non_negative_accepts_ints_and_zero():
    assert require_non_negative(0, "x") == 0.0
    assert require_non_negative(12, "x") == 12.0


def test_require_number_allows_negatives_but_not_nan():
    assert require_number(-3.5, "x") == -3.5
    with pytest.raises(InvalidInputError):
        require_number(math.nan, "x")
    with pytest.raises(InvalidInputError):
        require_number("1", "x")


@pytest.mark.parametrize("bad", [math.inf, -math.inf])
def test_require_number_rejects_infinity(bad):
    with pytest.raises(InvalidInputError):
        require_number(bad, "baseline")


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_round_to_rejects_non_finite(bad):
    with pytest.raises(InvalidInputError):
        round_to(bad, 2)


def test_round_to_rejects_values_that_overflow_when_scaled():
    with pytest.raises(InvalidInputError):
        round_to(1.7e308, 2)
