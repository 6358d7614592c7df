"""Arbitrary-precision rational number."""

from __future__ import annotations

from fractions import Fraction
from typing import Any

from bigmath import big_integer
from bigmath.big_decimal import BigDecimal
from bigmath.big_integer import BigInteger
from bigmath.big_number import BigNumber, NumberLike
from bigmath.exceptions import (
    DenominatorMustNotBeZeroError,
    DivisionByZeroError,
    RationalToIntegerError,
)
from bigmath.rounding import RoundingMode
from bigmath.validators import validate_exponent


class BigRational(BigNumber):
    """
    A fraction of two BigIntegers with a strictly positive denominator.

    Results are not reduced to lowest terms; call simplified() to reduce.

    Example:
        >>> BigRational.nd(1, 2).plus(BigRational.nd(1, 3))
        BigRational('5/6')
        >>> BigRational.nd(2, 4).plus(BigRational.nd(1, 4))
        BigRational('12/16')
    """

    __slots__ = ("_numerator", "_denominator")

    _rank = 2

    _numerator: BigInteger
    _denominator: BigInteger

    def __new__(cls, numerator: NumberLike = 0, denominator: NumberLike | None = None) -> BigRational:
        if denominator is None:
            return cls.of(numerator)
        return cls.nd(numerator, denominator)

    @classmethod
    def _new(cls, numerator: BigInteger, denominator: BigInteger) -> BigRational:
        """Wrap a numerator and a positive denominator without validation."""
        self = object.__new__(BigRational)
        self._numerator = numerator
        self._denominator = denominator
        return self

    @classmethod
    def _from(cls, number: BigNumber) -> BigRational:
        return number.to_big_rational()

    @classmethod
    def nd(cls, numerator: NumberLike, denominator: NumberLike) -> BigRational:
        """
        Create from a numerator and a denominator of any sign.

        Raises:
            DenominatorMustNotBeZeroError: If the denominator is zero
            RoundingNecessaryError: If either part is not an integer
        """
        num = BigInteger.of(numerator)
        den = BigInteger.of(denominator)

        if den.is_zero():
            raise DenominatorMustNotBeZeroError()

        if den.is_negative():
            num = num.negated()
            den = den.negated()

        return cls._new(num, den)

    @classmethod
    def zero(cls) -> BigRational:
        return ZERO

    @classmethod
    def one(cls) -> BigRational:
        return ONE

    @classmethod
    def ten(cls) -> BigRational:
        return TEN

    @property
    def numerator(self) -> BigInteger:
        return self._numerator

    @property
    def denominator(self) -> BigInteger:
        return self._denominator

    # -- arithmetic -------------------------------------------------------

    def plus(self, that: NumberLike) -> BigRational:
        that = BigRational.of(that)

        numerator = self._numerator.multiplied_by(that._denominator).plus(
            that._numerator.multiplied_by(self._denominator)
        )
        denominator = self._denominator.multiplied_by(that._denominator)

        return BigRational._new(numerator, denominator)

    def minus(self, that: NumberLike) -> BigRational:
        that = BigRational.of(that)

        numerator = self._numerator.multiplied_by(that._denominator).minus(
            that._numerator.multiplied_by(self._denominator)
        )
        denominator = self._denominator.multiplied_by(that._denominator)

        return BigRational._new(numerator, denominator)

    def multiplied_by(self, that: NumberLike) -> BigRational:
        that = BigRational.of(that)

        numerator = self._numerator.multiplied_by(that._numerator)
        denominator = self._denominator.multiplied_by(that._denominator)

        return BigRational._new(numerator, denominator)

    def divided_by(self, that: NumberLike) -> BigRational:
        """
        Exact division.

        Raises:
            DivisionByZeroError: If that is zero
        """
        that = BigRational.of(that)

        if that.is_zero():
            raise DivisionByZeroError()

        numerator = self._numerator.multiplied_by(that._denominator)
        denominator = self._denominator.multiplied_by(that._numerator)

        return BigRational.nd(numerator, denominator)

    def power(self, exponent: int) -> BigRational:
        """
        Raise to an integer power; a negative exponent raises the reciprocal.

        Raises:
            ExponentOutOfRangeError: If ``abs(exponent)`` exceeds MAX_POWER
            DivisionByZeroError: If this number is zero and exponent is negative
        """
        if exponent == 0:
            return ONE

        if exponent == 1:
            return self

        if exponent < 0:
            validate_exponent(-exponent)
            return self.reciprocal().power(-exponent)

        validate_exponent(exponent)

        return BigRational._new(
            self._numerator.power(exponent), self._denominator.power(exponent)
        )

    def reciprocal(self) -> BigRational:
        """
        Raises:
            DivisionByZeroError: If this number is zero
        """
        return BigRational.nd(self._denominator, self._numerator)

    def clamp(self, min: NumberLike, max: NumberLike) -> BigRational:
        """Limit this number to the range [min, max]."""
        if self.is_less_than(min):
            return BigRational.of(min)
        if self.is_greater_than(max):
            return BigRational.of(max)
        return self

    def abs(self) -> BigRational:
        return self.negated() if self.is_negative() else self

    def negated(self) -> BigRational:
        return BigRational._new(self._numerator.negated(), self._denominator)

    def simplified(self) -> BigRational:
        """Reduce to lowest terms."""
        gcd = self._numerator.gcd(self._denominator)

        if gcd.is_one():
            return self

        return BigRational._new(self._numerator.quotient(gcd), self._denominator.quotient(gcd))

    def integral_part(self) -> BigInteger:
        """Quotient of the numerator by the denominator, truncated towards zero."""
        return self._numerator.quotient(self._denominator)

    def fractional_part(self) -> BigRational:
        """This number minus its integral part; has the sign of this number."""
        return BigRational._new(self._numerator.remainder(self._denominator), self._denominator)

    def _true_divide(self, that: BigNumber) -> BigRational:
        return self.divided_by(that)

    # -- comparison and conversion ----------------------------------------

    def compare_to(self, that: NumberLike) -> int:
        that = BigRational.of(that)

        a = self._numerator.multiplied_by(that._denominator)
        b = that._numerator.multiplied_by(self._denominator)

        return a.compare_to(b)

    @property
    def sign(self) -> int:
        return self._numerator.sign

    def to_big_integer(self) -> BigInteger:
        """
        Raises:
            RationalToIntegerError: If this number is not an integer
        """
        simplified = self.simplified()

        if not simplified._denominator.is_one():
            raise RationalToIntegerError(self)

        return simplified._numerator

    def to_big_decimal(self) -> BigDecimal:
        """
        Raises:
            RoundingNecessaryError: If this number has no finite decimal expansion
        """
        return self._numerator.to_big_decimal().exactly_divided_by(self._denominator)

    def to_big_rational(self) -> BigRational:
        return self

    def to_scale(
        self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigDecimal:
        return self._numerator.to_big_decimal().divided_by(self._denominator, scale, rounding_mode)

    def to_float(self) -> float:
        return float(self.to_fraction())

    def to_fraction(self) -> Fraction:
        """Convert to a ``fractions.Fraction``, which is always reduced."""
        return Fraction(int(self._numerator), int(self._denominator))

    # -- Python protocols -------------------------------------------------

    def __str__(self) -> str:
        numerator = str(self._numerator)

        if self._denominator.is_one():
            return numerator

        return f"{numerator}/{self._denominator}"

    def __int__(self) -> int:
        return int(self.integral_part())

    def __hash__(self) -> int:
        return hash(self.to_fraction())

    def __reduce__(self) -> tuple[Any, ...]:
        return (BigRational, (str(self),))

    def __copy__(self) -> BigRational:
        return self

    def __deepcopy__(self, memo: Any) -> BigRational:
        return self


ZERO = BigRational._new(big_integer.ZERO, big_integer.ONE)
ONE = BigRational._new(big_integer.ONE, big_integer.ONE)
TEN = BigRational._new(big_integer.TEN, big_integer.ONE)
