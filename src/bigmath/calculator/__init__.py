"""Arithmetic engines operating on canonical digit strings."""

from bigmath.calculator.base import ALPHABET, MAX_POWER, Calculator
from bigmath.calculator.mpdecimal import MpDecimalCalculator
from bigmath.calculator.native import NativeCalculator
from bigmath.calculator.registry import (
    create_calculator,
    get_calculator,
    gmp_available,
    set_calculator,
)

__all__ = [
    "ALPHABET",
    "MAX_POWER",
    "Calculator",
    "MpDecimalCalculator",
    "NativeCalculator",
    "create_calculator",
    "get_calculator",
    "gmp_available",
    "set_calculator",
]
