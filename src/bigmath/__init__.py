"""
Arbitrary-precision integers, decimals and rationals.

Values are immutable and never silently lose precision: any operation that
would discard digits requires an explicit RoundingMode.

Arithmetic runs on a pluggable Calculator engine, selected once per process
from the ``BIGMATH_CALCULATOR`` environment variable (``auto``, ``gmp``,
``mpdecimal`` or ``native``).
"""

from bigmath.big_decimal import BigDecimal
from bigmath.big_integer import BigInteger
from bigmath.big_number import BigNumber
from bigmath.big_rational import BigRational
from bigmath.calculator import (
    Calculator,
    MpDecimalCalculator,
    NativeCalculator,
    get_calculator,
    set_calculator,
)
from bigmath.config import Settings
from bigmath.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
    MathError,
    NegativeNumberError,
    NumberFormatError,
    RoundingNecessaryError,
)
from bigmath.rounding import RoundingMode

__all__ = [
    "BigDecimal",
    "BigInteger",
    "BigNumber",
    "BigRational",
    "Calculator",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "MathError",
    "MpDecimalCalculator",
    "NativeCalculator",
    "NegativeNumberError",
    "NumberFormatError",
    "RoundingMode",
    "RoundingNecessaryError",
    "Settings",
    "get_calculator",
    "set_calculator",
]

__version__ = "0.1.0"
