"""Arbitrary-precision signed integer."""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING, Any

from bigmath.big_number import INT_MAX, INT_MIN, BigNumber, NumberLike
from bigmath.calculator import ALPHABET, get_calculator
from bigmath.exceptions import (
    CharNotInAlphabetError,
    DivisionByZeroError,
    EmptyByteStringError,
    EmptyNumberError,
    EvenRootOfNegativeError,
    IntegerOverflowError,
    InvalidArgumentError,
    InvalidCharacterInBaseError,
    MinGreaterThanMaxError,
    ModInverseNotFoundError,
    ModulusMustNotBeZeroError,
    NegativeArbitraryBaseError,
    NegativeByteConversionError,
    NegativeModulusError,
    NegativeOperandError,
    NegativePrimeSearchError,
    NegativeSquareRootError,
)
from bigmath.rounding import RoundingMode
from bigmath.validators import (
    validate_alphabet,
    validate_base,
    validate_bit_count,
    validate_bit_index,
    validate_exponent,
    validate_root,
    validate_rounds,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from bigmath.big_decimal import BigDecimal
    from bigmath.big_rational import BigRational

    RandomBytes = Callable[[int], bytes]

_SMALL_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97)

# Miller-Rabin witnesses that are deterministic below 3.3 * 10**24.
_DETERMINISTIC_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


class BigInteger(BigNumber):
    """
    An arbitrary-size integer.

    All methods accepting a number also accept anything ``BigNumber.of()``
    accepts, and raise RoundingNecessaryError if it is not integral.

    Example:
        >>> BigInteger("123456789012345678901234567890").multiplied_by(2)
        BigInteger('246913578024691357802469135780')
    """

    __slots__ = ("_value",)

    _rank = 0

    _value: str

    def __new__(cls, value: NumberLike = 0) -> BigInteger:
        return cls.of(value)

    @classmethod
    def _new(cls, value: str) -> BigInteger:
        """Wrap a canonical digit string without validation."""
        self = object.__new__(BigInteger)
        self._value = value
        return self

    @classmethod
    def _from(cls, number: BigNumber) -> BigInteger:
        return number.to_big_integer()

    # -- factories --------------------------------------------------------

    @classmethod
    def from_base(cls, number: str, base: int) -> BigInteger:
        """
        Parse a number in the given base, case-insensitively.

        An optional leading ``-`` or ``+`` sign is accepted.

        Raises:
            EmptyNumberError: If the number has no digits
            BaseOutOfRangeError: If base is not in [2, 36]
            InvalidCharacterInBaseError: If a digit is not valid in the base
        """
        if number == "":
            raise EmptyNumberError()

        validate_base(base)

        sign = ""
        if number[0] == "-":
            sign = "-"
            number = number[1:]
        elif number[0] == "+":
            number = number[1:]

        if number == "":
            raise EmptyNumberError()

        number = number.lstrip("0")

        if number == "":
            return ZERO

        if number == "1":
            return cls._new(sign + "1")

        digits = ALPHABET[:base]
        valid = set(digits + digits.upper())

        for char in number:
            if char not in valid:
                raise InvalidCharacterInBaseError(char, base)

        if base == 10:
            return cls._new(sign + number)

        return cls._new(sign + get_calculator().from_base(number, base))

    @classmethod
    def from_arbitrary_base(cls, number: str, alphabet: str) -> BigInteger:
        """
        Parse a non-negative number written with a custom alphabet.

        The first character of the alphabet is the zero digit. The parse is
        case-sensitive and no sign is accepted.

        Raises:
            EmptyNumberError: If the number is empty
            AlphabetTooShortError: If the alphabet has fewer than 2 characters
            CharNotInAlphabetError: If a character is not in the alphabet
        """
        if number == "":
            raise EmptyNumberError()

        validate_alphabet(alphabet)

        for char in number:
            if char not in alphabet:
                raise CharNotInAlphabetError(char)

        return cls._new(get_calculator().from_arbitrary_base(number, alphabet))

    @classmethod
    def from_bytes(cls, data: bytes, signed: bool = True) -> BigInteger:
        """
        Decode big-endian bytes.

        With ``signed``, the bytes are read as two's complement.

        Raises:
            EmptyByteStringError: If data is empty
        """
        if not data:
            raise EmptyByteStringError()

        twos_complement = signed and data[0] >= 0x80

        if twos_complement:
            data = bytes(byte ^ 0xFF for byte in data)

        number = cls.from_base(data.hex(), 16)

        if twos_complement:
            return number.plus(1).negated()

        return number

    @classmethod
    def random_bits(cls, num_bits: int, random_bytes: RandomBytes | None = None) -> BigInteger:
        """
        Generate a uniformly random number in ``[0, 2**num_bits - 1]``.

        Args:
            num_bits: Number of random bits
            random_bytes: Source of random bytes, defaults to ``secrets.token_bytes``

        Raises:
            NegativeBitCountError: If num_bits is negative
        """
        validate_bit_count(num_bits)

        if num_bits == 0:
            return ZERO

        if random_bytes is None:
            random_bytes = secrets.token_bytes

        byte_length = (num_bits - 1) // 8 + 1
        bitmask = 0xFF >> (byte_length * 8 - num_bits)

        data = random_bytes(byte_length)
        data = bytes([data[0] & bitmask]) + data[1:]

        return cls.from_bytes(data, signed=False)

    @classmethod
    def random_range(
        cls, min: NumberLike, max: NumberLike, random_bytes: RandomBytes | None = None
    ) -> BigInteger:
        """
        Generate a uniformly random number in ``[min, max]``.

        Raises:
            MinGreaterThanMaxError: If min is greater than max
        """
        low = cls.of(min)
        high = cls.of(max)

        if low.is_greater_than(high):
            raise MinGreaterThanMaxError(low, high)

        if low.is_equal_to(high):
            return low

        diff = high.minus(low)
        bit_length = diff.bit_length()

        # Each draw succeeds with probability at least 1/2.
        while True:
            candidate = cls.random_bits(bit_length, random_bytes)
            if not candidate.is_greater_than(diff):
                return candidate.plus(low)

    @classmethod
    def random_prime(
        cls, num_bits: int, certainty: int = 25, random_bytes: RandomBytes | None = None
    ) -> BigInteger:
        """
        Generate a random probable prime of exactly num_bits bits.

        Raises:
            InvalidArgumentError: If num_bits is less than 2
            MinimumRoundsError: If certainty is less than 1
        """
        if num_bits < 2:
            raise InvalidArgumentError("The number of bits must be at least 2", num_bits)

        validate_rounds(certainty)

        if num_bits == 2:
            return TWO if cls.random_bits(1, random_bytes).is_zero() else THREE

        while True:
            candidate = cls.random_bits(num_bits, random_bytes)
            candidate = candidate.with_bit_set(num_bits - 1).with_bit_set(0)

            if candidate.is_prime(certainty):
                return candidate

    @classmethod
    def zero(cls) -> BigInteger:
        return ZERO

    @classmethod
    def one(cls) -> BigInteger:
        return ONE

    @classmethod
    def ten(cls) -> BigInteger:
        return TEN

    @classmethod
    def gcd_multiple(cls, a: NumberLike, *n: NumberLike) -> BigInteger:
        """Greatest common divisor of all the given numbers."""
        result = cls.of(a)

        for value in n:
            result = result.gcd(value)
            if result.is_one():
                return result

        return result

    @classmethod
    def lcm_multiple(cls, a: NumberLike, *n: NumberLike) -> BigInteger:
        """Least common multiple of all the given numbers."""
        result = cls.of(a)

        for value in n:
            result = result.lcm(value)
            if result.is_zero():
                return result

        return result

    # -- arithmetic -------------------------------------------------------

    def plus(self, that: NumberLike) -> BigInteger:
        that = BigInteger.of(that)

        if that._value == "0":
            return self

        if self._value == "0":
            return that

        return BigInteger._new(get_calculator().add(self._value, that._value))

    def minus(self, that: NumberLike) -> BigInteger:
        that = BigInteger.of(that)

        if that._value == "0":
            return self

        return BigInteger._new(get_calculator().sub(self._value, that._value))

    def multiplied_by(self, that: NumberLike) -> BigInteger:
        that = BigInteger.of(that)

        if that._value == "1":
            return self

        if self._value == "1":
            return that

        return BigInteger._new(get_calculator().mul(self._value, that._value))

    def divided_by(
        self, that: NumberLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigInteger:
        """
        Divide, rounding the result with the given mode.

        Raises:
            DivisionByZeroError: If that is zero
            RoundingNecessaryError: If rounding_mode is UNNECESSARY and the
                division is not exact
        """
        that = BigInteger.of(that)

        if that._value == "1":
            return self

        if that._value == "0":
            raise DivisionByZeroError()

        return BigInteger._new(get_calculator().div_round(self._value, that._value, rounding_mode))

    def quotient(self, that: NumberLike) -> BigInteger:
        """Quotient of the division, truncated towards zero."""
        that = BigInteger.of(that)

        if that._value == "1":
            return self

        if that._value == "0":
            raise DivisionByZeroError()

        return BigInteger._new(get_calculator().div_q(self._value, that._value))

    def remainder(self, that: NumberLike) -> BigInteger:
        """Remainder of the truncated division; has the sign of this number."""
        that = BigInteger.of(that)

        if that._value == "1":
            return ZERO

        if that._value == "0":
            raise DivisionByZeroError()

        return BigInteger._new(get_calculator().div_r(self._value, that._value))

    def quotient_and_remainder(self, that: NumberLike) -> tuple[BigInteger, BigInteger]:
        that = BigInteger.of(that)

        if that._value == "0":
            raise DivisionByZeroError()

        quotient, remainder = get_calculator().div_qr(self._value, that._value)

        return BigInteger._new(quotient), BigInteger._new(remainder)

    def floor_quotient(self, that: NumberLike) -> BigInteger:
        """Quotient of the division, rounded towards negative infinity."""
        return self.divided_by(that, RoundingMode.FLOOR)

    def floor_remainder(self, that: NumberLike) -> BigInteger:
        """Remainder of the floored division; has the sign of the divisor."""
        that = BigInteger.of(that)

        if that._value == "0":
            raise DivisionByZeroError()

        return BigInteger._new(get_calculator().mod(self._value, that._value))

    def mod(self, that: NumberLike) -> BigInteger:
        """
        Modulo operation; the result has the sign of the modulus.

        Raises:
            ModulusMustNotBeZeroError: If that is zero
        """
        that = BigInteger.of(that)

        if that._value == "0":
            raise ModulusMustNotBeZeroError()

        return BigInteger._new(get_calculator().mod(self._value, that._value))

    def mod_inverse(self, modulus: NumberLike) -> BigInteger:
        """
        Return x such that ``self * x == 1 (mod modulus)``, in ``[0, modulus)``.

        Raises:
            ModulusMustNotBeZeroError: If the modulus is zero
            NegativeModulusError: If the modulus is negative
            ModInverseNotFoundError: If this number and the modulus are not coprime
        """
        m = BigInteger.of(modulus)

        if m._value == "0":
            raise ModulusMustNotBeZeroError()

        if m.is_negative():
            raise NegativeModulusError(m)

        if m._value == "1":
            return ZERO

        value = get_calculator().mod_inverse(self._value, m._value)

        if value is None:
            raise ModInverseNotFoundError(self, m)

        return BigInteger._new(value)

    def mod_pow(self, exponent: NumberLike, modulus: NumberLike) -> BigInteger:
        """
        Return ``self ** exponent mod modulus``.

        Raises:
            NegativeOperandError: If any operand is negative
            ModulusMustNotBeZeroError: If the modulus is zero
        """
        exp = BigInteger.of(exponent)
        mod = BigInteger.of(modulus)

        if self.is_negative() or exp.is_negative() or mod.is_negative():
            raise NegativeOperandError("Modular exponentiation")

        if mod.is_zero():
            raise ModulusMustNotBeZeroError()

        return BigInteger._new(get_calculator().mod_pow(self._value, exp._value, mod._value))

    def clamp(self, min: NumberLike, max: NumberLike) -> BigInteger:
        """Limit this number to the range [min, max]."""
        if self.is_less_than(min):
            return BigInteger.of(min)
        if self.is_greater_than(max):
            return BigInteger.of(max)
        return self

    def power(self, exponent: int) -> BigInteger:
        """
        Raise to a non-negative integer power.

        Raises:
            ExponentOutOfRangeError: If exponent is not in [0, MAX_POWER]
        """
        if exponent == 0:
            return ONE

        if exponent == 1:
            return self

        validate_exponent(exponent)

        return BigInteger._new(get_calculator().pow(self._value, exponent))

    def factorial(self) -> BigInteger:
        if self.is_negative():
            raise NegativeOperandError("Factorial", self)

        result = ONE
        current = TWO

        while current.is_less_than_or_equal_to(self):
            result = result.multiplied_by(current)
            current = current.plus(1)

        return result

    def double_factorial(self) -> BigInteger:
        """Product of every other integer down to 1 or 2; (-1)!! is 1."""
        if self._value == "-1":
            return ONE

        if self.is_negative():
            raise NegativeOperandError("Double factorial", self)

        result = ONE
        current = self

        while current.is_greater_than(1):
            result = result.multiplied_by(current)
            current = current.minus(2)

        return result

    def binomial(self, k: int) -> BigInteger:
        """
        Number of ways to choose k items among n = this number.

        Returns 0 when k is negative or greater than n.

        Raises:
            NegativeOperandError: If this number is negative
        """
        if self.is_negative():
            raise NegativeOperandError("Binomial coefficient", self)

        if k < 0 or self.is_less_than(k):
            return ZERO

        # C(n, k) == C(n, n - k)
        complement = self.minus(k)
        if complement.is_less_than(k):
            k = complement.to_int()

        result = ONE
        for i in range(k):
            result = result.multiplied_by(self.minus(i)).quotient(i + 1)

        return result

    def permutations(self, k: int) -> BigInteger:
        """
        Number of ordered arrangements of k items among n = this number.

        Raises:
            NegativeOperandError: If this number is negative
        """
        if self.is_negative():
            raise NegativeOperandError("Permutations", self)

        if k < 0 or self.is_less_than(k):
            return ZERO

        result = ONE
        for i in range(k):
            result = result.multiplied_by(self.minus(i))

        return result

    def gcd(self, that: NumberLike) -> BigInteger:
        """Greatest common divisor, always non-negative."""
        that = BigInteger.of(that)

        if that._value == "0" and self._value[0] != "-":
            return self

        if self._value == "0" and that._value[0] != "-":
            return that

        return BigInteger._new(get_calculator().gcd(self._value, that._value))

    def lcm(self, that: NumberLike) -> BigInteger:
        """Least common multiple, always non-negative; 0 if either is 0."""
        that = BigInteger.of(that)

        if self._value == "0" or that._value == "0":
            return ZERO

        product = self.abs().multiplied_by(that.abs())

        return product.quotient(self.gcd(that))

    def sqrt(self) -> BigInteger:
        """
        Largest integer whose square does not exceed this number.

        Raises:
            NegativeSquareRootError: If this number is negative
        """
        if self._value[0] == "-":
            raise NegativeSquareRootError(self)

        return BigInteger._new(get_calculator().sqrt(self._value))

    def nth_root(self, n: int) -> BigInteger:
        """
        Integer n-th root, truncated towards zero.

        Raises:
            NonPositiveRootError: If n is less than 1
            EvenRootOfNegativeError: If n is even and this number is negative
        """
        validate_root(n)

        if n == 1:
            return self

        if n == 2:
            return self.sqrt()

        negative = self._value[0] == "-"

        if negative and n % 2 == 0:
            raise EvenRootOfNegativeError(n)

        a = self.abs()

        if a._value in ("0", "1"):
            return self

        n_big = BigInteger._new(str(n))
        n_minus_one = BigInteger._new(str(n - 1))

        # Newton's method, starting above the root: 2 ** ceil(bits / n).
        x = TWO.power(-(-a.bit_length() // n))
        decreased = False

        while True:
            nx = n_minus_one.multiplied_by(x).plus(a.quotient(x.power(n - 1))).quotient(n_big)

            if x.is_equal_to(nx) or (decreased and nx.is_greater_than(x)):
                break

            decreased = nx.is_less_than(x)
            x = nx

        return x.negated() if negative else x

    def is_prime(self, rounds: int = 25) -> bool:
        """
        Probabilistic primality test (Miller-Rabin).

        Deterministic for numbers of at most 64 bits; otherwise a composite
        passes with probability at most ``4 ** -rounds``.

        Raises:
            MinimumRoundsError: If rounds is less than 1
        """
        validate_rounds(rounds)

        if self.is_negative_or_zero() or self._value == "1":
            return False

        if self._value in ("2", "3"):
            return True

        if self.is_even():
            return False

        for prime in _SMALL_PRIMES:
            if self.is_equal_to(prime):
                return True
            if self.remainder(prime).is_zero():
                return False

        # n - 1 == 2 ** s * d with d odd
        n_minus_one = self.minus(1)
        d = n_minus_one
        s = 0

        while d.is_even():
            d = d.quotient(2)
            s += 1

        if self.bit_length() <= 64:
            witnesses = [BigInteger.of(w) for w in _DETERMINISTIC_WITNESSES]
        else:
            witnesses = [BigInteger.random_range(2, n_minus_one.minus(1)) for _ in range(rounds)]

        for a in witnesses:
            if a.is_greater_than_or_equal_to(n_minus_one):
                continue

            x = a.mod_pow(d, self)

            if x.is_one() or x.is_equal_to(n_minus_one):
                continue

            composite = True
            for _ in range(1, s):
                x = x.mod_pow(2, self)
                if x.is_equal_to(n_minus_one):
                    composite = False
                    break
                if x.is_one():
                    return False

            if composite:
                return False

        return True

    def next_prime(self, rounds: int = 25) -> BigInteger:
        """
        Smallest probable prime strictly greater than this number.

        Raises:
            NegativePrimeSearchError: If this number is negative
        """
        if self.is_negative():
            raise NegativePrimeSearchError(self)

        candidate = TWO if self.is_less_than(2) else self.plus(1)

        if candidate.is_greater_than(2) and candidate.is_even():
            candidate = candidate.plus(1)

        while not candidate.is_prime(rounds):
            candidate = THREE if candidate._value == "2" else candidate.plus(2)

        return candidate

    def jacobi(self, n: NumberLike) -> int:
        """
        Jacobi symbol (self / n): -1, 0 or 1.

        Raises:
            InvalidArgumentError: If n is not a positive odd integer
        """
        n = BigInteger.of(n)

        if n.is_negative_or_zero() or n.is_even():
            raise InvalidArgumentError(
                "The Jacobi symbol is only defined for positive odd integers", n
            )

        if n.is_one():
            return 1

        a = self.mod(n)
        result = 1

        while not a.is_zero():
            while a.is_even():
                a = a.quotient(2)
                if n.mod(8).to_int() in (3, 5):
                    result = -result

            a, n = n, a

            if a.mod(4).to_int() == 3 and n.mod(4).to_int() == 3:
                result = -result

            a = a.mod(n)

        return result if n.is_one() else 0

    def legendre(self, p: NumberLike) -> int:
        """Legendre symbol (self / p) for an odd prime p."""
        return self.jacobi(p)

    def abs(self) -> BigInteger:
        return self.negated() if self.is_negative() else self

    def negated(self) -> BigInteger:
        return BigInteger._new(get_calculator().neg(self._value))

    def _true_divide(self, that: BigNumber) -> BigRational:
        from bigmath.big_rational import BigRational

        return BigRational.nd(self, that)

    # -- bitwise operations -----------------------------------------------

    def and_(self, that: NumberLike) -> BigInteger:
        """Bitwise AND, treating negative numbers as two's complement."""
        that = BigInteger.of(that)
        return BigInteger._new(get_calculator().and_(self._value, that._value))

    def or_(self, that: NumberLike) -> BigInteger:
        """Bitwise OR, treating negative numbers as two's complement."""
        that = BigInteger.of(that)
        return BigInteger._new(get_calculator().or_(self._value, that._value))

    def xor(self, that: NumberLike) -> BigInteger:
        """Bitwise XOR, treating negative numbers as two's complement."""
        that = BigInteger.of(that)
        return BigInteger._new(get_calculator().xor(self._value, that._value))

    def not_(self) -> BigInteger:
        """Bitwise NOT: ``-self - 1``."""
        return self.negated().minus(1)

    def shifted_left(self, distance: int) -> BigInteger:
        """Multiply by ``2 ** distance``; a negative distance shifts right."""
        if distance == 0:
            return self

        if distance < 0:
            return self.shifted_right(-distance)

        return self.multiplied_by(TWO.power(distance))

    def shifted_right(self, distance: int) -> BigInteger:
        """Arithmetic shift: divide by ``2 ** distance``, rounding to negative infinity."""
        if distance == 0:
            return self

        if distance < 0:
            return self.shifted_left(-distance)

        operand = TWO.power(distance)

        if self.is_positive_or_zero():
            return self.quotient(operand)

        return self.divided_by(operand, RoundingMode.UP)

    def bit_length(self) -> int:
        """
        Number of bits in the minimal two's complement representation,
        excluding the sign bit.
        """
        if self._value == "0":
            return 0

        if self.is_negative():
            return self.abs().minus(1).bit_length()

        return len(self.to_base(2))

    def bit_count(self) -> int:
        """Number of set bits in the magnitude of this number."""
        if self._value == "0":
            return 0

        return self.abs().to_base(2).count("1")

    def lowest_set_bit(self) -> int:
        """Index of the rightmost set bit, or -1 for zero."""
        if self._value == "0":
            return -1

        binary = self.abs().to_base(2)

        return len(binary) - len(binary.rstrip("0"))

    def is_one(self) -> bool:
        return self._value == "1"

    def is_even(self) -> bool:
        return self._value[-1] in "02468"

    def is_odd(self) -> bool:
        return self._value[-1] in "13579"

    def test_bit(self, n: int) -> bool:
        """
        Whether bit n is set, in two's complement.

        Raises:
            NegativeBitIndexError: If n is negative
        """
        validate_bit_index(n)
        return self.shifted_right(n).is_odd()

    def with_bit_set(self, n: int) -> BigInteger:
        if self.test_bit(n):
            return self
        return self.or_(ONE.shifted_left(n))

    def with_bit_cleared(self, n: int) -> BigInteger:
        if not self.test_bit(n):
            return self
        return self.xor(ONE.shifted_left(n))

    def with_bit_flipped(self, n: int) -> BigInteger:
        validate_bit_index(n)
        return self.xor(ONE.shifted_left(n))

    # -- comparison and conversion ----------------------------------------

    def compare_to(self, that: NumberLike) -> int:
        that = BigNumber.of(that)

        if isinstance(that, BigInteger):
            return get_calculator().cmp(self._value, that._value)

        return -that.compare_to(self)

    @property
    def sign(self) -> int:
        if self._value == "0":
            return 0
        return -1 if self._value[0] == "-" else 1

    def to_big_integer(self) -> BigInteger:
        return self

    def to_big_decimal(self) -> BigDecimal:
        from bigmath.big_decimal import BigDecimal

        return BigDecimal._new(self._value, 0)

    def to_big_rational(self) -> BigRational:
        from bigmath.big_rational import BigRational

        return BigRational._new(self, ONE)

    def to_scale(
        self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY
    ) -> BigDecimal:
        return self.to_big_decimal().to_scale(scale, rounding_mode)

    def to_int(self) -> int:
        """
        Convert to a native integer in the 64-bit signed range.

        Raises:
            IntegerOverflowError: If the value does not fit
        """
        value = int(self._value)

        if value < INT_MIN or value > INT_MAX:
            raise IntegerOverflowError(self, INT_MIN, INT_MAX)

        return value

    def to_float(self) -> float:
        return float(self._value)

    def to_base(self, base: int) -> str:
        """
        Format in the given base, lowercase, with a leading ``-`` if negative.

        Raises:
            BaseOutOfRangeError: If base is not in [2, 36]
        """
        if base == 10:
            return self._value

        validate_base(base)

        return get_calculator().to_base(self._value, base)

    def to_arbitrary_base(self, alphabet: str) -> str:
        """
        Format with a custom alphabet; the first character is the zero digit.

        Raises:
            AlphabetTooShortError: If the alphabet has fewer than 2 characters
            NegativeArbitraryBaseError: If this number is negative
        """
        validate_alphabet(alphabet)

        if self._value[0] == "-":
            raise NegativeArbitraryBaseError(self)

        return get_calculator().to_arbitrary_base(self._value, alphabet)

    def to_bytes(self, signed: bool = True) -> bytes:
        """
        Encode as big-endian bytes, using as few bytes as possible.

        With ``signed``, the encoding is two's complement with room for the
        sign bit; otherwise it is the magnitude.

        Raises:
            NegativeByteConversionError: If not signed and this number is negative
        """
        negative = self.is_negative()

        if not signed and negative:
            raise NegativeByteConversionError(self)

        hex_value = self.abs().to_base(16)

        if len(hex_value) % 2 != 0:
            hex_value = "0" + hex_value

        if signed:
            if negative:
                width = len(hex_value)
                inverted = bytes(byte ^ 0xFF for byte in bytes.fromhex(hex_value))
                hex_value = BigInteger.from_base(inverted.hex(), 16).plus(1).to_base(16)
                hex_value = hex_value.rjust(width, "0")

                if hex_value[0] < "8":
                    hex_value = "ff" + hex_value
            elif hex_value[0] >= "8":
                hex_value = "00" + hex_value

        return bytes.fromhex(hex_value)

    # -- Python protocols -------------------------------------------------

    def __str__(self) -> str:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __index__(self) -> int:
        return int(self._value)

    def __hash__(self) -> int:
        return hash(int(self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (BigInteger, (self._value,))

    def __copy__(self) -> BigInteger:
        return self

    def __deepcopy__(self, memo: Any) -> BigInteger:
        return self

    def __and__(self, other: Any) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.and_(other)

    __rand__ = __and__

    def __or__(self, other: Any) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.or_(other)

    __ror__ = __or__

    def __xor__(self, other: Any) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.xor(other)

    __rxor__ = __xor__

    def __invert__(self) -> BigInteger:
        return self.not_()

    def __lshift__(self, distance: int) -> BigInteger:
        if not isinstance(distance, int):
            return NotImplemented
        if distance < 0:
            raise ValueError("negative shift count")
        return self.shifted_left(distance)

    def __rshift__(self, distance: int) -> BigInteger:
        if not isinstance(distance, int):
            return NotImplemented
        if distance < 0:
            raise ValueError("negative shift count")
        return self.shifted_right(distance)


ZERO = BigInteger._new("0")
ONE = BigInteger._new("1")
TWO = BigInteger._new("2")
THREE = BigInteger._new("3")
TEN = BigInteger._new("10")
