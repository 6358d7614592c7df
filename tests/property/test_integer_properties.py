"""
Property-based tests for BigInteger.

Results are checked against Python's own unbounded ints, on every engine.
"""

import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from bigmath import BigInteger, RoundingMode

big_ints = st.integers(min_value=-(10**60), max_value=10**60)
small_ints = st.integers(min_value=-(10**6), max_value=10**6)
non_zero_ints = big_ints.filter(lambda x: x != 0)
natural_ints = st.integers(min_value=0, max_value=10**60)
bases = st.integers(min_value=2, max_value=36)
alphabets = st.lists(
    st.sampled_from("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    min_size=2,
    max_size=20,
    unique=True,
).map("".join)


@pytest.mark.property
class TestArithmeticParity:
    """Arithmetic matches Python ints."""

    @given(a=big_ints, b=big_ints)
    def test_plus_minus_times(self, calculator, a: int, b: int):
        x = BigInteger(a)
        assert str(x.plus(b)) == str(a + b)
        assert str(x.minus(b)) == str(a - b)
        assert str(x.multiplied_by(b)) == str(a * b)

    @given(a=big_ints, b=non_zero_ints)
    def test_division_identity(self, calculator, a: int, b: int):
        """a == q * b + r, with |r| < |b| and r carrying the sign of a."""
        q, r = BigInteger(a).quotient_and_remainder(b)
        assert q.multiplied_by(b).plus(r) == a
        assert r.abs() < abs(b)
        assert r.is_zero() or r.sign == (1 if a > 0 else -1)

    @given(a=big_ints, b=non_zero_ints)
    def test_floor_division(self, calculator, a: int, b: int):
        x = BigInteger(a)
        assert x.floor_quotient(b) == a // b
        assert x.floor_remainder(b) == a % b
        assert x.mod(b) == a % b

    @given(a=big_ints, b=non_zero_ints, mode=st.sampled_from(list(RoundingMode)))
    def test_rounded_division_is_within_one(self, calculator, a: int, b: int, mode: RoundingMode):
        assume(mode is not RoundingMode.UNNECESSARY or a % b == 0)
        q = BigInteger(a).divided_by(b, mode)
        assert a // b <= int(q) <= -(-a // b)

    @given(a=big_ints, e=st.integers(min_value=0, max_value=20))
    def test_power(self, calculator, a: int, e: int):
        assert BigInteger(a).power(e) == a**e

    @given(a=natural_ints)
    def test_sqrt(self, calculator, a: int):
        assert BigInteger(a).sqrt() == math.isqrt(a)

    @given(a=natural_ints, n=st.integers(min_value=1, max_value=12))
    def test_nth_root_bounds(self, calculator, a: int, n: int):
        root = int(BigInteger(a).nth_root(n))
        assert root**n <= a < (root + 1) ** n

    @given(a=big_ints, b=big_ints)
    def test_gcd_lcm(self, calculator, a: int, b: int):
        assert BigInteger(a).gcd(b) == math.gcd(a, b)
        assert BigInteger(a).lcm(b) == math.lcm(a, b)

    @given(
        a=st.integers(min_value=0, max_value=10**30),
        e=st.integers(min_value=0, max_value=10**4),
        m=st.integers(min_value=1, max_value=10**20),
    )
    def test_mod_pow(self, calculator, a: int, e: int, m: int):
        assert BigInteger(a).mod_pow(e, m) == pow(a, e, m)

    @given(a=big_ints, m=st.integers(min_value=2, max_value=10**20))
    def test_mod_inverse(self, calculator, a: int, m: int):
        assume(math.gcd(a, m) == 1)
        assert BigInteger(a).mod_inverse(m) == pow(a, -1, m)


@pytest.mark.property
class TestBitParity:
    """Bitwise operations match Python's two's complement semantics."""

    @given(a=big_ints, b=big_ints)
    def test_logic(self, calculator, a: int, b: int):
        x = BigInteger(a)
        assert x.and_(b) == a & b
        assert x.or_(b) == a | b
        assert x.xor(b) == a ^ b
        assert x.not_() == ~a

    @given(a=big_ints, n=st.integers(min_value=0, max_value=200))
    def test_shifts(self, calculator, a: int, n: int):
        assert BigInteger(a).shifted_left(n) == a << n
        assert BigInteger(a).shifted_right(n) == a >> n

    @given(a=big_ints, n=st.integers(min_value=0, max_value=200))
    def test_single_bits(self, calculator, a: int, n: int):
        x = BigInteger(a)
        assert x.test_bit(n) == bool((a >> n) & 1)
        assert x.with_bit_set(n) == a | (1 << n)
        assert x.with_bit_cleared(n) == a & ~(1 << n)
        assert x.with_bit_flipped(n) == a ^ (1 << n)

    @given(a=big_ints)
    def test_bit_length(self, calculator, a: int):
        expected = a.bit_length() if a >= 0 else (~a).bit_length()
        assert BigInteger(a).bit_length() == expected


@pytest.mark.property
class TestRoundTrips:
    """Encodings decode to the value they were produced from."""

    @given(a=big_ints, base=bases)
    def test_base(self, calculator, a: int, base: int):
        encoded = BigInteger(a).to_base(base)
        assert BigInteger.from_base(encoded, base) == a
        assert int(encoded, base) == a

    @given(a=natural_ints, alphabet=alphabets)
    def test_arbitrary_base(self, calculator, a: int, alphabet: str):
        encoded = BigInteger(a).to_arbitrary_base(alphabet)
        assert BigInteger.from_arbitrary_base(encoded, alphabet) == a

    @given(a=big_ints)
    def test_signed_bytes(self, calculator, a: int):
        data = BigInteger(a).to_bytes()
        assert BigInteger.from_bytes(data) == a
        assert int.from_bytes(data, "big", signed=True) == a

    @given(a=natural_ints)
    def test_unsigned_bytes(self, calculator, a: int):
        data = BigInteger(a).to_bytes(signed=False)
        assert BigInteger.from_bytes(data, signed=False) == a
        assert len(data) == max(1, (a.bit_length() + 7) // 8)

    @given(data=st.binary(min_size=1, max_size=40))
    def test_bytes_decode(self, calculator, data: bytes):
        assert BigInteger.from_bytes(data) == int.from_bytes(data, "big", signed=True)
        assert BigInteger.from_bytes(data, signed=False) == int.from_bytes(data, "big")

    @given(a=big_ints)
    def test_string(self, calculator, a: int):
        assert str(BigInteger(str(BigInteger(a)))) == str(a)


@pytest.mark.property
class TestRandom:
    """Random generation stays in range for any byte source."""

    @given(seed=st.binary(min_size=1, max_size=16), bits=st.integers(min_value=0, max_value=100))
    def test_random_bits(self, calculator, fixed_bytes, seed: bytes, bits: int):
        assert 0 <= BigInteger.random_bits(bits, fixed_bytes(seed)) < 2**bits

    @given(low=big_ints, span=st.integers(min_value=0, max_value=10**30))
    def test_random_range(self, calculator, low: int, span: int):
        number = BigInteger.random_range(low, low + span)
        assert low <= number <= low + span


class BigIntegerStateMachine(RuleBasedStateMachine):
    """
    Stateful testing for BigInteger using Hypothesis state machines.

    Applies random sequences of operations to a BigInteger and to a plain
    int, and checks they never diverge.
    """

    def __init__(self) -> None:
        super().__init__()
        self.value = BigInteger.zero()
        self.model = 0

    @invariant()
    def matches_model(self) -> None:
        assert str(self.value) == str(self.model)

    @invariant()
    def sign_matches_model(self) -> None:
        assert self.value.sign == (self.model > 0) - (self.model < 0)

    @rule(n=big_ints)
    def add(self, n: int) -> None:
        self.value = self.value.plus(n)
        self.model += n

    @rule(n=big_ints)
    def subtract(self, n: int) -> None:
        self.value = self.value.minus(n)
        self.model -= n

    @rule(n=small_ints)
    def multiply(self, n: int) -> None:
        self.value = self.value.multiplied_by(n)
        self.model *= n

    @rule(n=small_ints.filter(lambda x: x != 0))
    def floor_divide(self, n: int) -> None:
        self.value = self.value // n
        self.model //= n

    @rule(n=small_ints.filter(lambda x: x != 0))
    def modulo(self, n: int) -> None:
        self.value = self.value % n
        self.model %= n

    @rule(n=st.integers(min_value=0, max_value=64))
    def shift_left(self, n: int) -> None:
        self.value = self.value << n
        self.model <<= n

    @rule(n=st.integers(min_value=0, max_value=64))
    def shift_right(self, n: int) -> None:
        self.value = self.value >> n
        self.model >>= n

    @rule(n=big_ints)
    def xor(self, n: int) -> None:
        self.value = self.value ^ n
        self.model ^= n

    @rule()
    def negate(self) -> None:
        self.value = -self.value
        self.model = -self.model


# Run the state machine as a pytest test
TestBigIntegerStateMachine = pytest.mark.property(BigIntegerStateMachine.TestCase)
