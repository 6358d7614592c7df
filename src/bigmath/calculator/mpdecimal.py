"""Calculator backed by the decimal module (libmpdec).

Integer arithmetic runs in a context with maximum precision and the
``Inexact`` and ``Rounded`` signals trapped, so any result that would be
silently rounded raises instead.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

from bigmath.calculator.base import Calculator
from bigmath.exceptions import DivisionByZeroError

_EXACT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[
        decimal.InvalidOperation,
        decimal.DivisionByZero,
        decimal.Overflow,
        decimal.Inexact,
        decimal.Rounded,
    ],
)

_ONE = Decimal(1)


def _str(value: Decimal) -> str:
    """Format an integral Decimal as a canonical digit string."""
    result = format(value, "f")
    return "0" if result == "-0" else result


class MpDecimalCalculator(Calculator):
    """Calculator performing primitive arithmetic with ``decimal.Decimal``."""

    name = "mpdecimal"

    def add(self, a: str, b: str) -> str:
        with decimal.localcontext(_EXACT):
            return _str(Decimal(a) + Decimal(b))

    def sub(self, a: str, b: str) -> str:
        with decimal.localcontext(_EXACT):
            return _str(Decimal(a) - Decimal(b))

    def mul(self, a: str, b: str) -> str:
        with decimal.localcontext(_EXACT):
            return _str(Decimal(a) * Decimal(b))

    def div_q(self, a: str, b: str) -> str:
        if b == "0":
            raise DivisionByZeroError()
        with decimal.localcontext(_EXACT) as ctx:
            return _str(ctx.divide_int(Decimal(a), Decimal(b)))

    def div_r(self, a: str, b: str) -> str:
        if b == "0":
            raise DivisionByZeroError()
        with decimal.localcontext(_EXACT) as ctx:
            return _str(ctx.remainder(Decimal(a), Decimal(b)))

    def div_qr(self, a: str, b: str) -> tuple[str, str]:
        if b == "0":
            raise DivisionByZeroError()
        with decimal.localcontext(_EXACT) as ctx:
            q, r = ctx.divmod(Decimal(a), Decimal(b))
            return _str(q), _str(r)

    def pow(self, a: str, e: int) -> str:
        # 0 ** 0 is an invalid operation for the decimal module.
        if e == 0:
            return "1"
        with decimal.localcontext(_EXACT) as ctx:
            return _str(ctx.power(Decimal(a), e))

    def mod_pow(self, base: str, exp: str, mod: str) -> str:
        if mod == "1":
            return "0"
        if exp == "0":
            return "1"
        with decimal.localcontext(_EXACT) as ctx:
            return _str(ctx.power(Decimal(base), Decimal(exp), Decimal(mod)))

    def sqrt(self, n: str) -> str:
        if n == "0":
            return "0"

        value = Decimal(n)

        # Enough digits for the integral part of the root plus one.
        approximate = decimal.Context(prec=len(n) // 2 + 2, Emax=decimal.MAX_EMAX)
        with decimal.localcontext(approximate) as ctx:
            root = ctx.sqrt(value).to_integral_value(rounding=decimal.ROUND_FLOOR)

        with decimal.localcontext(_EXACT):
            # sqrt() rounds half-even, so the approximation may be one too high.
            while root * root > value:
                root -= _ONE
            while (root + _ONE) * (root + _ONE) <= value:
                root += _ONE

            return _str(root)
