"""Arbitrary-precision signed decimal number with a fixed scale."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from bigmath.big_integer import BigInteger
from bigmath.big_number import BigNumber, NumberLike
from bigmath.calculator import get_calculator
from bigmath.exceptions import (
    DivisionByZeroError,
    NegativeSquareRootError,
    SquareRootRoundingError,
)
from bigmath.rounding import RoundingMode
from bigmath.validators import validate_exponent, validate_scale

if TYPE_CHECKING:
    from bigmath.big_rational import BigRational


class BigDecimal(BigNumber):
    """
    An unscaled integer value and a non-negative scale: ``value * 10 ** -scale``.

    The scale is part of the state: ``1.0`` and ``1.00`` are different
    values that compare and hash equal.

    Example:
        >>> BigDecimal("1.10").plus("2.5")
        BigDecimal('3.60')
        >>> BigDecimal(1).divided_by(3, 5, RoundingMode.HALF_UP)
        BigDecimal('0.33333')
    """

    __slots__ = ("_value", "_scale")

    _rank = 1

    _value: str
    _scale: int

    def __new__(cls, value: NumberLike = 0) -> BigDecimal:
        return cls.of(value)

    @classmethod
    def _new(cls, value: str, scale: int = 0) -> BigDecimal:
        """Wrap a canonical unscaled value and a scale without validation."""
        self = object.__new__(BigDecimal)
        self._value = value
        self._scale = scale
        return self

    @classmethod
    def _from(cls, number: BigNumber) -> BigDecimal:
        return number.to_big_decimal()

    @classmethod
    def of_unscaled_value(cls, value: NumberLike, scale: int = 0) -> BigDecimal:
        """
        Create from an unscaled integer value and a scale.

        A negative scale multiplies the value by ``10 ** -scale``.

        Example:
            >>> BigDecimal.of_unscaled_value(123, 2)
            BigDecimal('1.23')
        """
        unscaled = str(BigInteger.of(value))

        if scale < 0:
            if unscaled != "0":
                unscaled += "0" * -scale
            scale = 0

        return cls._new(unscaled, scale)

    @classmethod
    def zero(cls) -> BigDecimal:
        return ZERO

    @classmethod
    def one(cls) -> BigDecimal:
        return ONE

    @classmethod
    def ten(cls) -> BigDecimal:
        return TEN

    # -- arithmetic -------------------------------------------------------

    def plus(self, that: NumberLike) -> BigDecimal:
        """Add; the result has the larger of the two scales."""
        that = BigDecimal.of(that)

        if that._value == "0" and that._scale <= self._scale:
            return self

        if self._value == "0" and self._scale <= that._scale:
            return that

        a, b = _scale_values(self, that)

        return BigDecimal._new(get_calculator().add(a, b), max(self._scale, that._scale))

    def minus(self, that: NumberLike) -> BigDecimal:
        """Subtract; the result has the larger of the two scales."""
        that = BigDecimal.of(that)

        if that._value == "0" and that._scale <= self._scale:
            return self

        a, b = _scale_values(self, that)

        return BigDecimal._new(get_calculator().sub(a, b), max(self._scale, that._scale))

    def multiplied_by(self, that: NumberLike) -> BigDecimal:
        """Multiply; the result scale is the sum of the two scales."""
        that = BigDecimal.of(that)

        if that._value == "1" and that._scale == 0:
            return self

        if self._value == "1" and self._scale == 0:
            return that

        value = get_calculator().mul(self._value, that._value)

        return BigDecimal._new(value, self._scale + that._scale)

    def divided_by(
        self,
        that: NumberLike,
        scale: int | None = None,
        rounding_mode: RoundingMode = RoundingMode.UNNECESSARY,
    ) -> BigDecimal:
        """
        Divide to the given scale, rounding with the given mode.

        Args:
            that: The divisor
            scale: Scale of the result, defaults to the scale of this number
            rounding_mode: Applied when the quotient does not fit the scale

        Raises:
            DivisionByZeroError: If that is zero
            NegativeScaleError: If scale is negative
            RoundingNecessaryError: If rounding_mode is UNNECESSARY and the
                quotient does not fit the scale
        """
        that = BigDecimal.of(that)

        if that.is_zero():
            raise DivisionByZeroError()

        if scale is None:
            scale = self._scale
        else:
            validate_scale(scale)

        if that._value == "1" and that._scale == 0 and scale == self._scale:
            return self

        p = self._value_with_min_scale(that._scale + scale)
        q = that._value_with_min_scale(self._scale - scale)

        return BigDecimal._new(get_calculator().div_round(p, q, rounding_mode), scale)

    def exactly_divided_by(self, that: NumberLike) -> BigDecimal:
        """
        Divide, using the smallest scale that represents the quotient exactly.

        Raises:
            DivisionByZeroError: If that is zero
            RoundingNecessaryError: If the quotient has no finite decimal
                expansion
        """
        that = BigDecimal.of(that)

        if that._value == "0":
            raise DivisionByZeroError()

        _, b = _scale_values(self, that)

        d = b.rstrip("0")
        scale = len(b) - len(d)

        calculator = get_calculator()

        # 1/d terminates only when d is of the form 2**x * 5**y.
        for prime in (5, 2):
            while int(d[-1]) % prime == 0:
                d = calculator.div_q(d, str(prime))
                scale += 1

        return self.divided_by(that, scale).strip_trailing_zeros()

    def clamp(self, min: NumberLike, max: NumberLike) -> BigDecimal:
        """Limit this number to the range [min, max]."""
        if self.is_less_than(min):
            return BigDecimal.of(min)
        if self.is_greater_than(max):
            return BigDecimal.of(max)
        return self

    def round(self, scale: int, rounding_mode: RoundingMode = RoundingMode.HALF_UP) -> BigDecimal:
        """
        Reduce the scale to at most ``scale`` digits, rounding if necessary.

        Unlike to_scale(), a number whose scale is already small enough is
        returned unchanged.
        """
        validate_scale(scale)

        if scale >= self._scale:
            return self

        return self.divided_by(ONE, scale, rounding_mode)

    def power(self, exponent: int) -> BigDecimal:
        """
        Raise to a non-negative integer power; the result scale is ``scale * exponent``.

        Raises:
            ExponentOutOfRangeError: If exponent is not in [0, MAX_POWER]
        """
        if exponent == 0:
            return ONE

        if exponent == 1:
            return self

        validate_exponent(exponent)

        return BigDecimal._new(
            get_calculator().pow(self._value, exponent), self._scale * exponent
        )

    def quotient(self, that: NumberLike) -> BigDecimal:
        """Quotient of the division, truncated to scale 0."""
        that = BigDecimal.of(that)

        if that.is_zero():
            raise DivisionByZeroError()

        p = self._value_with_min_scale(that._scale)
        q = that._value_with_min_scale(self._scale)

        return BigDecimal._new(get_calculator().div_q(p, q), 0)

    def remainder(self, that: NumberLike) -> BigDecimal:
        """Remainder of the truncated division; has the larger of the two scales."""
        that = BigDecimal.of(that)

        if that.is_zero():
            raise DivisionByZeroError()

        p = self._value_with_min_scale(that._scale)
        q = that._value_with_min_scale(self._scale)

        remainder = get_calculator().div_r(p, q)

        return BigDecimal._new(remainder, max(self._scale, that._scale))

    def quotient_and_remainder(self, that: NumberLike) -> tuple[BigDecimal, BigDecimal]:
        that = BigDecimal.of(that)

        if that.is_zero():
            raise DivisionByZeroError()

        p = self._value_with_min_scale(that._scale)
        q = that._value_with_min_scale(self._scale)

        quotient, remainder = get_calculator().div_qr(p, q)

        return (
            BigDecimal._new(quotient, 0),
            BigDecimal._new(remainder, max(self._scale, that._scale)),
        )

    def sqrt(self, scale: int, rounding_mode: RoundingMode = RoundingMode.DOWN) -> BigDecimal:
        """
        Square root to the given scale.

        The root is computed with one extra digit, then rounded to the
        requested scale.

        Raises:
            NegativeScaleError: If scale is negative
            NegativeSquareRootError: If this number is negative
            SquareRootRoundingError: If rounding_mode is UNNECESSARY and the
                root is not exact at the requested scale
        """
        validate_scale(scale)

        if self._value == "0":
            return BigDecimal._new("0", scale)

        if self._value[0] == "-":
            raise NegativeSquareRootError(self)

        extra_scale = scale + 1

        # Unscaled value of this number at scale 2 * extra_scale, truncated.
        value = self._value
        add_digits = 2 * extra_scale - self._scale

        if add_digits > 0:
            value += "0" * add_digits
        elif add_digits < 0:
            value = value[:add_digits] or "0"

        sqrt_value = get_calculator().sqrt(value)
        root = BigDecimal._new(sqrt_value, extra_scale)

        exact = root.multiplied_by(root).is_equal_to(self)

        if rounding_mode is RoundingMode.UNNECESSARY:
            if not exact or sqrt_value[-1] != "0":
                raise SquareRootRoundingError(self)
            return root.to_scale(scale, RoundingMode.DOWN)

        if not exact:
            # The exact root lies strictly between root and the next value at
            # extra_scale; a trailing 1 makes the discarded fraction non-zero.
            root = root.plus(BigDecimal._new("1", extra_scale + 1))

        return root.to_scale(scale, rounding_mode)

    def with_point_moved_left(self, n: int) -> BigDecimal:
        """Divide by ``10 ** n``, increasing the scale."""
        if n == 0:
            return self

        if n < 0:
            return self.with_point_moved_right(-n)

        return BigDecimal._new(self._value, self._scale + n)

    def with_point_moved_right(self, n: int) -> BigDecimal:
        """Multiply by ``10 ** n``, decreasing the scale down to 0."""
        if n == 0:
            return self

        if n < 0:
            return self.with_point_moved_left(-n)

        value = self._value
        scale = self._scale - n

        if scale < 0:
            if value != "0":
                value += "0" * -scale
            scale = 0

        return BigDecimal._new(value, scale)

    def strip_trailing_zeros(self) -> BigDecimal:
        """Remove trailing zeros of the fractional part, down to scale 0."""
        if self._scale == 0:
            return self

        trimmed = self._value.rstrip("0")

        if trimmed == "":
            return ZERO

        trimmable = len(self._value) - len(trimmed)

        if trimmable == 0:
            return self

        trimmable = min(trimmable, self._scale)

        return BigDecimal._new(self._value[:-trimmable], self._scale - trimmable)

    def abs(self) -> BigDecimal:
        return self.negated() if self.is_negative() else self

    def negated(self) -> BigDecimal:
        return BigDecimal._new(get_calculator().neg(self._value), self._scale)

    def _true_divide(self, that: BigNumber) -> BigDecimal:
        return self.exactly_divided_by(that)

    # -- inspection -------------------------------------------------------

    @property
    def unscaled_value(self) -> BigInteger:
        return BigInteger._new(self._value)

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def precision(self) -> int:
        """Number of digits in the unscaled value; 0 for zero."""
        if self._value == "0":
            return 0

        length = len(self._value)

        return length - 1 if self._value[0] == "-" else length

    def integral_part(self) -> str:
        """
        Digits before the decimal point, with the sign.

        ``-0.5`` gives ``"-0"``.
        """
        if self._scale == 0:
            return self._value

        return self._unscaled_value_with_leading_zeros()[: -self._scale]

    def fractional_part(self) -> str:
        """Digits after the decimal point, ``scale`` characters long."""
        if self._scale == 0:
            return ""

        return self._unscaled_value_with_leading_zeros()[-self._scale :]

    def has_non_zero_fractional_part(self) -> bool:
        return self.fractional_part() != "0" * self._scale

    # -- comparison and conversion ----------------------------------------

    def compare_to(self, that: NumberLike) -> int:
        that = BigNumber.of(that)

        if isinstance(that, BigInteger):
            that = that.to_big_decimal()

        if isinstance(that, BigDecimal):
            a, b = _scale_values(self, that)
            return get_calculator().cmp(a, b)

        return -that.compare_to(self)

    @property
    def sign(self) -> int:
        if self._value == "0":
            return 0
        return -1 if self._value[0] == "-" else 1

    def to_big_integer(self) -> BigInteger:
        """
        Convert to BigInteger.

        Raises:
            RoundingNecessaryError: If the fractional part is not zero
        """
        zero_scale = self if self._scale == 0 else self.divided_by(1, 0)
        return BigInteger._new(zero_scale._value)

    def to_big_decimal(self) -> BigDecimal:
        return self

    def to_big_rational(self) -> BigRational:
        """Convert to BigRational, with denominator ``10 ** scale`` (not reduced)."""
        from bigmath.big_rational import BigRational

        numerator = BigInteger._new(self._value)
        denominator = BigInteger._new("1" + "0" * self._scale)

        return BigRational._new(numerator, denominator)

    def to_scale(
        self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigDecimal:
        if scale == self._scale:
            return self

        return self.divided_by(ONE, scale, rounding_mode)

    def to_float(self) -> float:
        return float(str(self))

    def to_decimal(self) -> Decimal:
        """Convert exactly to a ``decimal.Decimal`` with the same scale."""
        return Decimal(str(self))

    # -- Python protocols -------------------------------------------------

    def __str__(self) -> str:
        if self._scale == 0:
            return self._value

        value = self._unscaled_value_with_leading_zeros()

        return value[: -self._scale] + "." + value[-self._scale :]

    def __int__(self) -> int:
        return int(self.to_scale(0, RoundingMode.DOWN)._value)

    def __hash__(self) -> int:
        return hash(self.to_decimal())

    def __reduce__(self) -> tuple[Any, ...]:
        return (BigDecimal, (str(self),))

    def __copy__(self) -> BigDecimal:
        return self

    def __deepcopy__(self, memo: Any) -> BigDecimal:
        return self

    # -- helpers ----------------------------------------------------------

    def _value_with_min_scale(self, scale: int) -> str:
        """Unscaled value of this number at ``scale``, if that is larger than its own."""
        if self._value != "0" and scale > self._scale:
            return self._value + "0" * (scale - self._scale)
        return self._value

    def _unscaled_value_with_leading_zeros(self) -> str:
        """Unscaled value padded to at least ``scale + 1`` digits."""
        target_length = self._scale + 1
        negative = self._value[0] == "-"
        digits = self._value[1:] if negative else self._value

        if len(digits) >= target_length:
            return self._value

        digits = digits.rjust(target_length, "0")

        return "-" + digits if negative else digits


def _scale_values(x: BigDecimal, y: BigDecimal) -> tuple[str, str]:
    """Unscaled values of x and y at the larger of their scales."""
    a = x._value
    b = y._value

    if b != "0" and x._scale > y._scale:
        b += "0" * (x._scale - y._scale)
    elif a != "0" and x._scale < y._scale:
        a += "0" * (y._scale - x._scale)

    return a, b


ZERO = BigDecimal._new("0", 0)
ONE = BigDecimal._new("1", 0)
TEN = BigDecimal._new("10", 0)
