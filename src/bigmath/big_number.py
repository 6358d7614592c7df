"""Common base class of the numeric types, and the parser dispatching to them.

``BigNumber.of()`` turns a native or textual value into the concrete type it
represents. The concrete types form a closed hierarchy ordered by width,
BigInteger < BigDecimal < BigRational: any value of a narrower type can be
represented without loss by a wider one. Cross-type helpers (``widen``,
``minimum_of``, ``maximum_of``, ``sum``) only look at that order.
"""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, TypeVar, Union

from bigmath.exceptions import (
    DenominatorMustNotBeZeroError,
    ExponentTooLargeError,
    InvalidNumberFormatError,
    NoValuesProvidedError,
)
from bigmath.rounding import RoundingMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bigmath.big_decimal import BigDecimal
    from bigmath.big_integer import BigInteger
    from bigmath.big_rational import BigRational

N = TypeVar("N", bound="BigNumber")

NumberLike = Union["BigNumber", int, float, str, Decimal, Fraction]

_PARSE_NUMERICAL = re.compile(
    r"(?P<sign>[-+])?"
    r"(?P<integral>[0-9]+)?"
    r"(?P<point>\.)?"
    r"(?P<fractional>[0-9]+)?"
    r"(?:[eE](?P<exponent>[-+]?[0-9]+))?"
)

_PARSE_RATIONAL = re.compile(
    r"(?P<sign>[-+])?"
    r"(?P<numerator>[0-9]+)"
    r"/"
    r"(?P<denominator>[0-9]+)"
)

# Native integer range used by to_int().
INT_MIN = -sys.maxsize - 1
INT_MAX = sys.maxsize

# Types that compare and hash consistently with the numeric types.
_COMPARABLE = (int, Decimal, Fraction)


class BigNumber(ABC):
    """
    Base class for BigInteger, BigDecimal and BigRational.

    Instances are immutable: every operation returns a new value.
    """

    __slots__ = ()

    #: Position in the widening order BigInteger < BigDecimal < BigRational.
    _rank = -1

    # -- construction and dispatch ----------------------------------------

    @classmethod
    def of(cls: type[N], value: NumberLike) -> N:
        """
        Create a number from a BigNumber, int, float, str, Decimal or Fraction.

        Called on BigNumber, returns the type the value represents. Called on
        a concrete class, converts the value to that class.

        Raises:
            NumberFormatError: If a string is not a valid number
            DenominatorMustNotBeZeroError: If a fraction string has a zero
                denominator
            RoundingNecessaryError: If the value cannot be converted to the
                requested class without loss
        """
        if isinstance(value, cls):
            return value

        number = _parse(value)

        if cls is BigNumber:
            return number  # type: ignore[return-value]

        return cls._from(number)

    @classmethod
    def of_nullable(cls: type[N], value: NumberLike | None) -> N | None:
        """Same as of(), but passes None through."""
        if value is None:
            return None
        return cls.of(value)

    @classmethod
    @abstractmethod
    def _from(cls: type[N], number: BigNumber) -> N:
        """Convert any BigNumber to this class."""

    @classmethod
    def min(cls: type[N], *values: NumberLike) -> N:
        """
        Return the minimum of the values, converted to the calling class.

        Raises:
            NoValuesProvidedError: If no values are given
        """
        result = None

        for value in values:
            number = cls.of(value)
            if result is None or number.is_less_than(result):
                result = number

        if result is None:
            raise NoValuesProvidedError(f"{cls.__name__}.min")

        return result

    @classmethod
    def max(cls: type[N], *values: NumberLike) -> N:
        """
        Return the maximum of the values, converted to the calling class.

        Raises:
            NoValuesProvidedError: If no values are given
        """
        result = None

        for value in values:
            number = cls.of(value)
            if result is None or number.is_greater_than(result):
                result = number

        if result is None:
            raise NoValuesProvidedError(f"{cls.__name__}.max")

        return result

    @classmethod
    def sum(cls: type[N], *values: NumberLike) -> N:
        """
        Add the values.

        Called on BigNumber, the result has the widest type of the values.
        Called on a concrete class, every value is converted to it first.

        Raises:
            NoValuesProvidedError: If no values are given
        """
        if not values:
            raise NoValuesProvidedError(f"{cls.__name__}.sum")

        total = cls.of(values[0])

        for value in values[1:]:
            total = _add(total, cls.of(value))

        return total

    @staticmethod
    def minimum_of(*values: NumberLike) -> BigNumber:
        """
        Return the minimum of the values as the widest type among them.

        Mixing types never raises RoundingNecessaryError, unlike min().
        """
        numbers = _convert_all(values, "minimum_of")

        result = numbers[0]
        for number in numbers[1:]:
            if number.is_less_than(result):
                result = number

        return widest_type(numbers)._from(result)

    @staticmethod
    def maximum_of(*values: NumberLike) -> BigNumber:
        """Return the maximum of the values as the widest type among them."""
        numbers = _convert_all(values, "maximum_of")

        result = numbers[0]
        for number in numbers[1:]:
            if number.is_greater_than(result):
                result = number

        return widest_type(numbers)._from(result)

    @staticmethod
    def widen(*values: NumberLike) -> list[BigNumber]:
        """Convert all values to the widest type among them."""
        numbers = _convert_all(values, "widen")
        target = widest_type(numbers)
        return [target._from(number) for number in numbers]

    # -- comparison -------------------------------------------------------

    @abstractmethod
    def compare_to(self, that: NumberLike) -> int:
        """Compare to another number, returning -1, 0 or 1."""

    def is_equal_to(self, that: NumberLike) -> bool:
        return self.compare_to(that) == 0

    def is_less_than(self, that: NumberLike) -> bool:
        return self.compare_to(that) < 0

    def is_less_than_or_equal_to(self, that: NumberLike) -> bool:
        return self.compare_to(that) <= 0

    def is_greater_than(self, that: NumberLike) -> bool:
        return self.compare_to(that) > 0

    def is_greater_than_or_equal_to(self, that: NumberLike) -> bool:
        return self.compare_to(that) >= 0

    @property
    @abstractmethod
    def sign(self) -> int:
        """-1, 0 or 1."""

    def is_zero(self) -> bool:
        return self.sign == 0

    def is_one(self) -> bool:
        return self.is_equal_to(1)

    def is_negative(self) -> bool:
        return self.sign < 0

    def is_negative_or_zero(self) -> bool:
        return self.sign <= 0

    def is_positive(self) -> bool:
        return self.sign > 0

    def is_positive_or_zero(self) -> bool:
        return self.sign >= 0

    # -- conversion -------------------------------------------------------

    @abstractmethod
    def to_big_integer(self) -> BigInteger:
        """Convert exactly to BigInteger, or raise RoundingNecessaryError."""

    @abstractmethod
    def to_big_decimal(self) -> BigDecimal:
        """Convert exactly to BigDecimal, or raise RoundingNecessaryError."""

    @abstractmethod
    def to_big_rational(self) -> BigRational:
        """Convert to BigRational; never fails."""

    @abstractmethod
    def to_scale(
        self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigDecimal:
        """Convert to a BigDecimal with the given scale."""

    def to_int(self) -> int:
        """
        Convert exactly to a native integer within the 64-bit signed range.

        Raises:
            RoundingNecessaryError: If the number is not integral
            IntegerOverflowError: If the value does not fit
        """
        return self.to_big_integer().to_int()

    @abstractmethod
    def to_float(self) -> float:
        """Convert to the nearest float; may lose precision."""

    @abstractmethod
    def __str__(self) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self.sign != 0

    # -- Python protocols -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (BigNumber, *_COMPARABLE)):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (BigNumber, *_COMPARABLE)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, (BigNumber, *_COMPARABLE)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, (BigNumber, *_COMPARABLE)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, (BigNumber, *_COMPARABLE)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self.to_big_rational().to_fraction())

    def __add__(self, other: Any) -> BigNumber:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return operands[0].plus(operands[1])

    def __radd__(self, other: Any) -> BigNumber:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return operands[0].plus(operands[1])

    def __sub__(self, other: Any) -> BigNumber:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return operands[0].minus(operands[1])

    def __rsub__(self, other: Any) -> BigNumber:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return operands[0].minus(operands[1])

    def __mul__(self, other: Any) -> BigNumber:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return operands[0].multiplied_by(operands[1])

    def __rmul__(self, other: Any) -> BigNumber:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return operands[0].multiplied_by(operands[1])

    def __truediv__(self, other: Any) -> BigNumber:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return operands[0]._true_divide(operands[1])

    def __rtruediv__(self, other: Any) -> BigNumber:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return operands[0]._true_divide(operands[1])

    def __floordiv__(self, other: Any) -> BigInteger:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return _floor_divide(*operands)

    def __rfloordiv__(self, other: Any) -> BigInteger:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return _floor_divide(*operands)

    def __mod__(self, other: Any) -> BigNumber:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return _floor_divmod(*operands)[1]

    def __rmod__(self, other: Any) -> BigNumber:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return _floor_divmod(*operands)[1]

    def __divmod__(self, other: Any) -> tuple[BigInteger, BigNumber]:
        operands = _coerce(self, other)
        if operands is None:
            return NotImplemented
        return _floor_divmod(*operands)

    def __rdivmod__(self, other: Any) -> tuple[BigInteger, BigNumber]:
        operands = _coerce(other, self)
        if operands is None:
            return NotImplemented
        return _floor_divmod(*operands)

    def __pow__(self, exponent: int) -> BigNumber:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self) -> BigNumber:
        return self.negated()

    def __pos__(self) -> BigNumber:
        return self

    def __abs__(self) -> BigNumber:
        return self.abs()

    # Implemented by every concrete class.

    @abstractmethod
    def plus(self, that: NumberLike) -> BigNumber: ...

    @abstractmethod
    def minus(self, that: NumberLike) -> BigNumber: ...

    @abstractmethod
    def multiplied_by(self, that: NumberLike) -> BigNumber: ...

    @abstractmethod
    def power(self, exponent: int) -> BigNumber: ...

    @abstractmethod
    def negated(self) -> BigNumber: ...

    @abstractmethod
    def abs(self) -> BigNumber: ...

    @abstractmethod
    def _true_divide(self, that: BigNumber) -> BigNumber:
        """Exact division used by the ``/`` operator; both operands share a type."""


def widest_type(numbers: Iterable[BigNumber]) -> type[BigNumber]:
    """Return the widest concrete type among the numbers."""
    return max((type(number) for number in numbers), key=lambda kind: kind._rank)


def _convert_all(values: tuple[NumberLike, ...], method: str) -> list[BigNumber]:
    if not values:
        raise NoValuesProvidedError(f"BigNumber.{method}")
    return [BigNumber.of(value) for value in values]


def _add(a: BigNumber, b: BigNumber) -> BigNumber:
    """Add two numbers, keeping the wider of their types."""
    if b._rank > a._rank:
        return b.plus(a)
    return a.plus(b)


def _coerce(a: Any, b: Any) -> tuple[BigNumber, BigNumber] | None:
    """Convert operator operands to their widest common type."""
    try:
        left = BigNumber.of(a)
        right = BigNumber.of(b)
    except TypeError:
        return None

    target = widest_type((left, right))
    return target._from(left), target._from(right)


def _floor_divide(a: BigNumber, b: BigNumber) -> BigInteger:
    """Largest integer q such that q <= a / b."""
    quotient = a.to_big_rational().divided_by(b)
    return quotient.numerator.divided_by(quotient.denominator, RoundingMode.FLOOR)


def _floor_divmod(a: BigNumber, b: BigNumber) -> tuple[BigInteger, BigNumber]:
    """Floor quotient and the remainder a - b * q, which has the sign of b."""
    quotient = _floor_divide(a, b)
    return quotient, a.minus(b.multiplied_by(quotient))


def _clean_up(sign: str | None, number: str) -> str:
    """Strip leading zeros and apply the sign, producing a canonical string."""
    number = number.lstrip("0")

    if number == "":
        return "0"

    return "-" + number if sign == "-" else number


def _parse_exponent(exponent: str) -> int:
    value = int(exponent)
    if value > INT_MAX or value < -INT_MAX:
        raise ExponentTooLargeError(exponent)
    return value


def _parse(value: Any) -> BigNumber:
    """Turn a native or textual value into the BigNumber it represents."""
    from bigmath.big_decimal import BigDecimal
    from bigmath.big_integer import BigInteger
    from bigmath.big_rational import BigRational

    if isinstance(value, BigNumber):
        return value

    if isinstance(value, int):
        return BigInteger._new(str(int(value)))

    if isinstance(value, Fraction):
        return BigRational._new(
            BigInteger._new(str(value.numerator)),
            BigInteger._new(str(value.denominator)),
        )

    if isinstance(value, float):
        value = repr(value)
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberFormatError(value)
        value = str(value)
    elif not isinstance(value, str):
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if "/" in value:
        match = _PARSE_RATIONAL.fullmatch(value)

        if match is None:
            raise InvalidNumberFormatError(value)

        numerator = _clean_up(match["sign"], match["numerator"])
        denominator = _clean_up(None, match["denominator"])

        if denominator == "0":
            raise DenominatorMustNotBeZeroError()

        return BigRational._new(BigInteger._new(numerator), BigInteger._new(denominator))

    match = _PARSE_NUMERICAL.fullmatch(value)

    if match is None:
        raise InvalidNumberFormatError(value)

    sign = match["sign"]
    integral = match["integral"]
    point = match["point"]
    fractional = match["fractional"]
    exponent = match["exponent"]

    if integral is None and fractional is None:
        raise InvalidNumberFormatError(value)

    if integral is None:
        integral = "0"

    if point is None and exponent is None:
        return BigInteger._new(_clean_up(sign, integral))

    if fractional is None:
        fractional = ""

    unscaled_value = _clean_up(sign, integral + fractional)
    scale = len(fractional) - (0 if exponent is None else _parse_exponent(exponent))

    if scale < 0:
        if unscaled_value != "0":
            unscaled_value += "0" * -scale
        scale = 0

    return BigDecimal._new(unscaled_value, scale)
