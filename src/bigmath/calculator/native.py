"""Pure block-arithmetic calculator.

Operates on digit strings in blocks small enough that no intermediate
result exceeds a native machine word (``sys.maxsize``). This is the
reference engine: it needs no third-party library.
"""

from __future__ import annotations

import sys

from bigmath.calculator.base import Calculator
from bigmath.exceptions import DivisionByZeroError, InvalidArgumentError


def _safe_digits(max_int: int = sys.maxsize) -> int:
    """Number of decimal digits that always fit a word, one kept for carry."""
    return len(str(max_int)) - 1


class NativeCalculator(Calculator):
    """
    Calculator implementing long arithmetic on digit strings.

    Addition and subtraction work on blocks of ``max_digits`` digits.
    Multiplication uses blocks of half that size so that a block product
    plus carry still fits a word.
    """

    name = "native"

    def __init__(self, max_digits: int | None = None) -> None:
        if max_digits is None:
            max_digits = _safe_digits()
        if max_digits < 2:
            raise InvalidArgumentError("Blocks must hold at least 2 digits", max_digits)
        self.max_digits = max_digits

    def _is_small(self, n: str) -> bool:
        """Whether n has at most max_digits digits."""
        return len(n) - (n[0] == "-") <= self.max_digits

    # -- public arithmetic ------------------------------------------------

    def add(self, a: str, b: str) -> str:
        if self._is_small(a) and self._is_small(b):
            return str(int(a) + int(b))

        if a == "0":
            return b

        if b == "0":
            return a

        a_neg, b_neg, a_dig, b_dig = self.init(a, b)

        result = self._do_add(a_dig, b_dig) if a_neg == b_neg else self._do_sub(a_dig, b_dig)

        if a_neg:
            result = self.neg(result)

        return result

    def sub(self, a: str, b: str) -> str:
        return self.add(a, self.neg(b))

    def mul(self, a: str, b: str) -> str:
        a_neg, b_neg, a_dig, b_dig = self.init(a, b)

        if len(a_dig) + len(b_dig) <= self.max_digits:
            return str(int(a) * int(b))

        if a == "0" or b == "0":
            return "0"

        if a == "1":
            return b

        if b == "1":
            return a

        if a == "-1":
            return self.neg(b)

        if b == "-1":
            return self.neg(a)

        result = self._do_mul(a_dig, b_dig)

        if a_neg != b_neg:
            result = self.neg(result)

        return result

    def div_q(self, a: str, b: str) -> str:
        return self.div_qr(a, b)[0]

    def div_r(self, a: str, b: str) -> str:
        return self.div_qr(a, b)[1]

    def div_qr(self, a: str, b: str) -> tuple[str, str]:
        if b == "0":
            raise DivisionByZeroError()

        if a == "0":
            return "0", "0"

        if a == b:
            return "1", "0"

        if b == "1":
            return a, "0"

        if b == "-1":
            return self.neg(a), "0"

        a_neg, b_neg, a_dig, b_dig = self.init(a, b)

        if self._is_small(a_dig) and self._is_small(b_dig):
            q, r = divmod(int(a_dig), int(b_dig))
            q_str = str(q)
            r_str = str(r)
        else:
            q_str, r_str = self._do_div(a_dig, b_dig)

        if a_neg != b_neg:
            q_str = self.neg(q_str)

        if a_neg:
            r_str = self.neg(r_str)

        return q_str, r_str

    def pow(self, a: str, e: int) -> str:
        if e == 0:
            return "1"

        if e == 1:
            return a

        odd = e % 2
        result = self.pow(self.mul(a, a), e // 2)

        if odd:
            result = self.mul(result, a)

        return result

    def mod_pow(self, base: str, exp: str, mod: str) -> str:
        # The loop below would return 1 for an exponent of 0.
        if mod == "1":
            return "0"

        x = self.div_r(base, mod)
        result = "1"

        while exp != "0":
            if exp[-1] in "13579":
                result = self.div_r(self.mul(result, x), mod)
            exp = self.div_q(exp, "2")
            x = self.div_r(self.mul(x, x), mod)

        return result

    def sqrt(self, n: str) -> str:
        if n == "0":
            return "0"

        x = "9" * (len(n) // 2 or 1)
        decreased = False

        while True:
            nx = self.div_q(self.add(x, self.div_q(n, x)), "2")

            # Truncation makes the sequence oscillate by one around the root.
            if x == nx or (decreased and self.cmp(nx, x) > 0):
                break

            decreased = self.cmp(nx, x) < 0
            x = nx

        return x

    # -- block arithmetic on magnitudes -----------------------------------

    def _do_add(self, a: str, b: str) -> str:
        a, b, length = self._pad(a, b)

        blocks = []
        carry = 0
        end = length

        while end > 0:
            start = max(end - self.max_digits, 0)
            block_length = end - start

            total = str(int(a[start:end]) + int(b[start:end]) + carry)

            if len(total) > block_length:
                total = total[1:]
                carry = 1
            else:
                total = total.zfill(block_length)
                carry = 0

            blocks.append(total)
            end = start

        if carry:
            blocks.append("1")

        return "".join(reversed(blocks))

    def _do_sub(self, a: str, b: str) -> str:
        """Return a - b for magnitudes a and b; the result may be negative."""
        if a == b:
            return "0"

        invert = self._do_cmp(a, b) < 0

        if invert:
            a, b = b, a

        a, b, length = self._pad(a, b)

        complement = 10**self.max_digits
        blocks = []
        carry = 0
        end = length

        while end > 0:
            start = max(end - self.max_digits, 0)
            block_length = end - start

            diff = int(a[start:end]) - int(b[start:end]) - carry

            if diff < 0:
                diff += complement
                carry = 1
            else:
                carry = 0

            blocks.append(str(diff).zfill(block_length))
            end = start

        # a > b, so nothing is left to borrow.
        assert carry == 0

        result = "".join(reversed(blocks)).lstrip("0")

        return self.neg(result) if invert else result

    def _do_mul(self, a: str, b: str) -> str:
        x = len(a)
        y = len(b)

        max_digits = self.max_digits // 2
        complement = 10**max_digits

        result = "0"
        i_end = x

        while i_end > 0:
            i_start = max(i_end - max_digits, 0)
            block_a = int(a[i_start:i_end])

            line = []
            carry = 0
            j_end = y

            while j_end > 0:
                j_start = max(j_end - max_digits, 0)
                block_b = int(b[j_start:j_end])

                product = block_a * block_b + carry
                value = product % complement
                carry = (product - value) // complement

                line.append(str(value).zfill(max_digits))
                j_end = j_start

            if carry:
                line.append(str(carry))

            row = "".join(reversed(line)).lstrip("0")

            if row:
                result = self.add(result, row + "0" * (x - i_end))

            i_end = i_start

        return result

    def _do_div(self, a: str, b: str) -> tuple[str, str]:
        """Divide magnitude a by non-zero magnitude b."""
        if self._do_cmp(a, b) < 0:
            return "0", a

        x = len(a)
        y = len(b)

        # The remainder of each step stays below (b - 1) * 10 + 9.
        if y < self.max_digits:
            nb = int(b)
            r = int(a[: y - 1]) if y > 1 else 0
            digits = []

            for i in range(y - 1, x):
                n = r * 10 + int(a[i])
                digits.append(str(n // nb))
                r = n % nb

            return "".join(digits).lstrip("0") or "0", str(r)

        q = "0"
        r = a
        z = y  # focus length, always y or y + 1

        while True:
            focus = a[:z]

            if self._do_cmp(focus, b) < 0:
                if z == x:
                    break
                z += 1

            zeros = "0" * (x - z)

            q = self.add(q, "1" + zeros)
            a = self.sub(a, b + zeros)

            r = a

            if r == "0":
                break

            x = len(a)

            if x < y:
                break

            z = y

        return q, r

    @staticmethod
    def _do_cmp(a: str, b: str) -> int:
        """Compare two magnitudes."""
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1
        return (a > b) - (a < b)

    @staticmethod
    def _pad(a: str, b: str) -> tuple[str, str, int]:
        """Left-pad the shorter magnitude with zeros."""
        length = max(len(a), len(b))
        return a.zfill(length), b.zfill(length), length

    def __repr__(self) -> str:
        return f"NativeCalculator(max_digits={self.max_digits})"
