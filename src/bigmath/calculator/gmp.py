"""Calculator backed by GMP through gmpy2."""

from __future__ import annotations

import gmpy2
from gmpy2 import mpz

from bigmath.calculator.base import Calculator
from bigmath.exceptions import DivisionByZeroError

# Bases that gmpy2 formats with a radix prefix through digits().
_FORMAT_SPECS = {2: "b", 8: "o", 16: "x"}


class GmpCalculator(Calculator):
    """Calculator delegating every operation to ``gmpy2.mpz``."""

    name = "gmp"

    def add(self, a: str, b: str) -> str:
        return str(mpz(a) + mpz(b))

    def sub(self, a: str, b: str) -> str:
        return str(mpz(a) - mpz(b))

    def mul(self, a: str, b: str) -> str:
        return str(mpz(a) * mpz(b))

    def div_q(self, a: str, b: str) -> str:
        if b == "0":
            raise DivisionByZeroError()
        return str(gmpy2.t_div(mpz(a), mpz(b)))

    def div_r(self, a: str, b: str) -> str:
        if b == "0":
            raise DivisionByZeroError()
        return str(gmpy2.t_mod(mpz(a), mpz(b)))

    def div_qr(self, a: str, b: str) -> tuple[str, str]:
        if b == "0":
            raise DivisionByZeroError()
        q, r = gmpy2.t_divmod(mpz(a), mpz(b))
        return str(q), str(r)

    def pow(self, a: str, e: int) -> str:
        return str(mpz(a) ** e)

    def mod_pow(self, base: str, exp: str, mod: str) -> str:
        return str(gmpy2.powmod(mpz(base), mpz(exp), mpz(mod)))

    def mod_inverse(self, x: str, m: str) -> str | None:
        if m == "1":
            return "0"
        try:
            return str(gmpy2.invert(mpz(x), mpz(m)))
        except ZeroDivisionError:
            return None

    def gcd(self, a: str, b: str) -> str:
        return str(gmpy2.gcd(mpz(a), mpz(b)))

    def sqrt(self, n: str) -> str:
        return str(gmpy2.isqrt(mpz(n)))

    def and_(self, a: str, b: str) -> str:
        return str(mpz(a) & mpz(b))

    def or_(self, a: str, b: str) -> str:
        return str(mpz(a) | mpz(b))

    def xor(self, a: str, b: str) -> str:
        return str(mpz(a) ^ mpz(b))

    def from_base(self, number: str, base: int) -> str:
        return str(mpz(number.lower(), base))

    def to_base(self, number: str, base: int) -> str:
        spec = _FORMAT_SPECS.get(base)
        if spec is not None:
            return format(mpz(number), spec)
        return mpz(number).digits(base)
