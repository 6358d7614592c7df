"""Unit tests for rounding modes."""

import pytest

from bigmath import BigDecimal, BigInteger, RoundingMode
from bigmath.exceptions import RoundingNecessaryError
from bigmath.rounding import should_increment

INPUTS = ["5.5", "2.5", "1.6", "1.1", "1.0", "-1.0", "-1.1", "-1.6", "-2.5", "-5.5"]

# Expected result of rounding each input to scale 0.
TABLE = {
    RoundingMode.UP: ["6", "3", "2", "2", "1", "-1", "-2", "-2", "-3", "-6"],
    RoundingMode.DOWN: ["5", "2", "1", "1", "1", "-1", "-1", "-1", "-2", "-5"],
    RoundingMode.CEILING: ["6", "3", "2", "2", "1", "-1", "-1", "-1", "-2", "-5"],
    RoundingMode.FLOOR: ["5", "2", "1", "1", "1", "-1", "-2", "-2", "-3", "-6"],
    RoundingMode.HALF_UP: ["6", "3", "2", "1", "1", "-1", "-1", "-2", "-3", "-6"],
    RoundingMode.HALF_DOWN: ["5", "2", "2", "1", "1", "-1", "-1", "-2", "-2", "-5"],
    RoundingMode.HALF_CEILING: ["6", "3", "2", "1", "1", "-1", "-1", "-2", "-2", "-5"],
    RoundingMode.HALF_FLOOR: ["5", "2", "2", "1", "1", "-1", "-1", "-2", "-3", "-6"],
    RoundingMode.HALF_EVEN: ["6", "2", "2", "1", "1", "-1", "-1", "-2", "-2", "-6"],
}

CASES = [
    (mode, value, expected)
    for mode, results in TABLE.items()
    for value, expected in zip(INPUTS, results)
]


class TestRoundingTable:
    """Rounding a decimal to scale 0 with every mode."""

    @pytest.mark.parametrize(("mode", "value", "expected"), CASES)
    def test_to_scale(self, calculator, mode, value, expected):
        assert str(BigDecimal(value).to_scale(0, mode)) == expected

    @pytest.mark.parametrize("value", ["1.0", "-1.0"])
    def test_unnecessary_exact(self, calculator, value):
        assert BigDecimal(value).to_scale(0, RoundingMode.UNNECESSARY).is_equal_to(value)

    @pytest.mark.parametrize("value", ["5.5", "1.1", "-1.6"])
    def test_unnecessary_inexact(self, calculator, value):
        with pytest.raises(RoundingNecessaryError):
            BigDecimal(value).to_scale(0, RoundingMode.UNNECESSARY)

    def test_every_mode_is_covered(self):
        assert set(TABLE) | {RoundingMode.UNNECESSARY} == set(RoundingMode)


class TestDivisionVectors:
    """Rounding applied by integer and decimal division."""

    @pytest.mark.parametrize(
        ("a", "b", "mode", "expected"),
        [
            (7, 2, RoundingMode.HALF_UP, "4"),
            (7, 2, RoundingMode.HALF_DOWN, "3"),
            (5, 2, RoundingMode.HALF_EVEN, "2"),
            (-5, 2, RoundingMode.HALF_EVEN, "-2"),
        ],
    )
    def test_decimal_divide(self, calculator, a, b, mode, expected):
        assert str(BigDecimal(a).divided_by(b, 0, mode)) == expected

    @pytest.mark.parametrize(
        ("a", "b", "mode", "expected"),
        [
            (7, 2, RoundingMode.HALF_UP, "4"),
            (7, 2, RoundingMode.HALF_DOWN, "3"),
            (5, 2, RoundingMode.HALF_EVEN, "2"),
            (-5, 2, RoundingMode.HALF_EVEN, "-2"),
        ],
    )
    def test_integer_divide(self, calculator, a, b, mode, expected):
        assert str(BigInteger(a).divided_by(b, mode)) == expected


class TestShouldIncrement:
    """Tests for the rounding decision function."""

    def test_unnecessary_raises(self):
        with pytest.raises(RoundingNecessaryError):
            should_increment(RoundingMode.UNNECESSARY, True, -1, False)

    def test_up_and_down_ignore_the_fraction(self):
        for half in (-1, 0, 1):
            assert should_increment(RoundingMode.UP, True, half, False)
            assert not should_increment(RoundingMode.DOWN, False, half, True)

    def test_half_even_uses_parity_on_ties(self):
        assert should_increment(RoundingMode.HALF_EVEN, True, 0, True)
        assert not should_increment(RoundingMode.HALF_EVEN, True, 0, False)
        assert should_increment(RoundingMode.HALF_EVEN, True, 1, False)
        assert not should_increment(RoundingMode.HALF_EVEN, True, -1, True)

    def test_directed_modes_use_the_sign(self):
        assert should_increment(RoundingMode.CEILING, True, -1, False)
        assert not should_increment(RoundingMode.CEILING, False, 1, False)
        assert should_increment(RoundingMode.FLOOR, False, -1, False)
        assert not should_increment(RoundingMode.FLOOR, True, 1, False)
