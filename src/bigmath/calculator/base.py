"""Abstract calculator performing arithmetic on canonical digit strings.

A canonical digit string is a string of ASCII digits with an optional
leading ``-``, no leading zeros, and ``"0"`` never signed. Every method
receives canonical strings and returns canonical strings.

Subclasses implement the primitive arithmetic; this class provides the
algorithms built on top of it (rounding division, gcd, modular inverse,
bitwise operations and base conversion), which subclasses may override
with library-backed versions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bigmath.rounding import RoundingMode, should_increment
from bigmath.validators import MAX_POWER

# Digits of bases 2 to 36, in order.
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

__all__ = ["ALPHABET", "MAX_POWER", "Calculator"]


class Calculator(ABC):
    """
    Arithmetic engine on canonical digit strings.

    Preconditions documented on each method are enforced by the numeric
    types, not here, with one exception: division by zero raises
    ``DivisionByZeroError``.
    """

    #: Short engine name, as accepted by ``BIGMATH_CALCULATOR``.
    name = "abstract"

    # -- sign helpers -----------------------------------------------------

    def abs(self, n: str) -> str:
        """Absolute value of n."""
        return n[1:] if n[0] == "-" else n

    def neg(self, n: str) -> str:
        """Negation of n."""
        if n == "0":
            return n
        if n[0] == "-":
            return n[1:]
        return "-" + n

    def cmp(self, a: str, b: str) -> int:
        """Compare a and b, returning -1, 0 or 1."""
        a_neg, b_neg, a_dig, b_dig = self.init(a, b)

        if a_neg and not b_neg:
            return -1
        if b_neg and not a_neg:
            return 1

        a_len = len(a_dig)
        b_len = len(b_dig)

        if a_len < b_len:
            result = -1
        elif a_len > b_len:
            result = 1
        else:
            result = (a_dig > b_dig) - (a_dig < b_dig)

        return -result if a_neg else result

    def init(self, a: str, b: str) -> tuple[bool, bool, str, str]:
        """Split two numbers into their signs and magnitudes."""
        a_neg = a[0] == "-"
        b_neg = b[0] == "-"
        return a_neg, b_neg, a[1:] if a_neg else a, b[1:] if b_neg else b

    # -- primitive arithmetic ---------------------------------------------

    @abstractmethod
    def add(self, a: str, b: str) -> str:
        """Return a + b."""

    @abstractmethod
    def sub(self, a: str, b: str) -> str:
        """Return a - b."""

    @abstractmethod
    def mul(self, a: str, b: str) -> str:
        """Return a * b."""

    @abstractmethod
    def div_q(self, a: str, b: str) -> str:
        """Return the quotient of a / b, truncated towards zero."""

    @abstractmethod
    def div_r(self, a: str, b: str) -> str:
        """Return the remainder of a / b, with the sign of the dividend."""

    @abstractmethod
    def div_qr(self, a: str, b: str) -> tuple[str, str]:
        """Return the quotient and remainder of a / b."""

    @abstractmethod
    def pow(self, a: str, e: int) -> str:
        """Return a ** e, for 0 <= e <= MAX_POWER."""

    @abstractmethod
    def mod_pow(self, base: str, exp: str, mod: str) -> str:
        """Return base ** exp mod mod; base and exp >= 0, mod > 0."""

    @abstractmethod
    def sqrt(self, n: str) -> str:
        """Return the largest x such that x * x <= n, for n >= 0."""

    # -- derived arithmetic -----------------------------------------------

    def mod(self, a: str, b: str) -> str:
        """Return a mod b; the result has the sign of b."""
        return self.div_r(self.add(self.div_r(a, b), b), b)

    def div_round(self, a: str, b: str, rounding_mode: RoundingMode) -> str:
        """
        Divide a by b, rounding the quotient with the given mode.

        Raises:
            RoundingNecessaryError: If rounding_mode is UNNECESSARY and the
                division is not exact
        """
        quotient, remainder = self.div_qr(a, b)

        if remainder == "0":
            return quotient

        positive = (a[0] == "-") == (b[0] == "-")
        half = self.cmp(self.abs(self.mul(remainder, "2")), self.abs(b))
        odd = quotient[-1] in "13579"

        if should_increment(rounding_mode, positive, half, odd):
            return self.add(quotient, "1" if positive else "-1")

        return quotient

    def gcd(self, a: str, b: str) -> str:
        """Greatest common divisor, always non-negative; gcd(0, 0) is 0."""
        while b != "0":
            a, b = b, self.div_r(a, b)
        return self.abs(a)

    def mod_inverse(self, x: str, m: str) -> str | None:
        """
        Return y such that x * y == 1 mod m, for m > 0.

        Returns None when x and m are not coprime.
        """
        if m == "1":
            return "0"

        value = x
        if x[0] == "-" or self.cmp(x, m) >= 0:
            value = self.mod(x, m)

        g, coefficient = self._gcd_extended(value, m)

        if g != "1":
            return None

        return self.mod(coefficient, m)

    def _gcd_extended(self, a: str, b: str) -> tuple[str, str]:
        """Return (gcd(a, b), x) such that a * x == gcd mod b."""
        old_r, r = a, b
        old_s, s = "1", "0"

        while r != "0":
            q = self.div_q(old_r, r)
            old_r, r = r, self.sub(old_r, self.mul(q, r))
            old_s, s = s, self.sub(old_s, self.mul(q, s))

        return old_r, old_s

    # -- bitwise operations -----------------------------------------------

    def and_(self, a: str, b: str) -> str:
        """Bitwise AND with two's complement semantics."""
        return self._bitwise("and", a, b)

    def or_(self, a: str, b: str) -> str:
        """Bitwise OR with two's complement semantics."""
        return self._bitwise("or", a, b)

    def xor(self, a: str, b: str) -> str:
        """Bitwise XOR with two's complement semantics."""
        return self._bitwise("xor", a, b)

    def _bitwise(self, operator: str, a: str, b: str) -> str:
        a_neg, b_neg, a_dig, b_dig = self.init(a, b)

        a_bin = self._to_binary(a_dig)
        b_bin = self._to_binary(b_dig)

        width = max(len(a_bin), len(b_bin))
        a_bin = a_bin.rjust(width, b"\x00")
        b_bin = b_bin.rjust(width, b"\x00")

        if a_neg:
            a_bin = self._twos_complement(a_bin)
        if b_neg:
            b_bin = self._twos_complement(b_bin)

        if operator == "and":
            value = bytes(x & y for x, y in zip(a_bin, b_bin))
            negative = a_neg and b_neg
        elif operator == "or":
            value = bytes(x | y for x, y in zip(a_bin, b_bin))
            negative = a_neg or b_neg
        else:
            value = bytes(x ^ y for x, y in zip(a_bin, b_bin))
            negative = a_neg != b_neg

        if negative:
            value = self._twos_complement(value)

        result = self._to_decimal(value)

        return self.neg(result) if negative else result

    @staticmethod
    def _twos_complement(data: bytes) -> bytes:
        result = bytearray(byte ^ 0xFF for byte in data)

        for i in range(len(result) - 1, -1, -1):
            if result[i] != 0xFF:
                result[i] += 1
                break
            result[i] = 0x00
            if i == 0:
                result.insert(0, 0x01)

        return bytes(result)

    def _to_binary(self, number: str) -> bytes:
        """Convert a non-negative number to big-endian bytes; 0 gives b''."""
        result = bytearray()

        while number != "0":
            number, remainder = self.div_qr(number, "256")
            result.append(int(remainder))

        result.reverse()
        return bytes(result)

    def _to_decimal(self, data: bytes) -> str:
        """Convert big-endian bytes to a non-negative number."""
        result = "0"
        power = "1"

        for i in range(len(data) - 1, -1, -1):
            byte = data[i]
            if byte != 0:
                result = self.add(result, self.mul(str(byte), power))
            if i != 0:
                power = self.mul(power, "256")

        return result

    # -- base conversion --------------------------------------------------

    def from_base(self, number: str, base: int) -> str:
        """
        Parse a non-negative, case-insensitive number in base 2 to 36.

        The digits must have been validated against the base.
        """
        return self.from_arbitrary_base(number.lower(), ALPHABET[:base])

    def to_base(self, number: str, base: int) -> str:
        """Format a number in base 2 to 36, lowercase, with its sign."""
        negative = number[0] == "-"

        if negative:
            number = number[1:]

        number = self.to_arbitrary_base(number, ALPHABET[:base])

        return "-" + number if negative else number

    def from_arbitrary_base(self, number: str, alphabet: str) -> str:
        """
        Parse a non-negative number written with a custom alphabet.

        The characters must have been validated against the alphabet.
        """
        number = number.lstrip(alphabet[0])

        if number == "":
            return "0"

        if number == alphabet[1]:
            return "1"

        indexes = {char: str(index) for index, char in enumerate(alphabet)}
        base = str(len(alphabet))
        result = "0"
        power = "1"

        for i in range(len(number) - 1, -1, -1):
            index = indexes[number[i]]

            if index != "0":
                result = self.add(result, power if index == "1" else self.mul(power, index))

            if i != 0:
                power = self.mul(power, base)

        return result

    def to_arbitrary_base(self, number: str, alphabet: str) -> str:
        """Format a non-negative number with a custom alphabet."""
        if number == "0":
            return alphabet[0]

        base = str(len(alphabet))
        digits = []

        while number != "0":
            number, remainder = self.div_qr(number, base)
            digits.append(alphabet[int(remainder)])

        return "".join(reversed(digits))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
