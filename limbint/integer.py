"""
Arbitrary-precision signed integers over fixed-radix limbs.

An Integer is a (radix, sign, limbs) triple: limbs is the big-endian
magnitude in radix ``radix``.  Every operation derives its result from the
unsigned magnitude primitives of the active backend, and always returns a
new value in the receiver's radix.  Operands in another radix are converted
to the receiver's radix first.

Division floors: ``a.divmod(b)`` returns (q, r) with a == q*b + r, q the
floor of a/b and r either zero or signed like b.

The ``i``-prefixed methods compute the pure result and ``move`` it into the
receiver.  Do not use them on a value that is shared with other code or
stored in a set or dict.
"""

from enum import IntEnum
from typing import List, NamedTuple, Sequence, Tuple

from .errors import (
    DivisionByZero, InvalidDigit, RangeViolation, UnsupportedInputType,
)
from .limits import (
    DEFAULT_DISPLAY_BASE, MAX_BASE, MAX_EXPONENT, MAX_NUMBER, MIN_NUMBER,
)
from .magnitude import get_backend


class Sign(IntEnum):
    """Sign flag of an Integer.  Combine two flags with ``^``."""
    NONNEGATIVE = 0
    NEGATIVE = 1

    def flip(self) -> "Sign":
        return Sign(self ^ 1)

    def combine(self, other: "Sign") -> "Sign":
        return Sign(self ^ other)


class ExtendedGcd(NamedTuple):
    """Result of Integer.egcd: gcd = x*a + y*b and u*a + v*b = 0."""
    gcd: "Integer"
    x: "Integer"
    y: "Integer"
    u: "Integer"
    v: "Integer"


def _is_native_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Integer:
    """Signed integer stored as a sign flag and big-endian radix limbs."""

    __slots__ = ("_radix", "_sign", "_limbs")

    def __init__(self, radix: int, sign: Sign, limbs: Sequence[int]):
        self._radix = radix
        self._limbs = tuple(limbs)
        # Zero is never tagged negative.
        if get_backend().is_zero(self._limbs):
            self._sign = Sign.NONNEGATIVE
        else:
            self._sign = Sign(sign)

    @classmethod
    def from_number(cls, number: int) -> "Integer":
        """Build an Integer in MAX_BASE from a native int."""
        if not _is_native_int(number):
            raise UnsupportedInputType(
                f"Integer.from_number expects an int, got {type(number).__name__}"
            )
        sign = Sign.NEGATIVE if number < 0 else Sign.NONNEGATIVE
        return cls(MAX_BASE, sign, get_backend().build(MAX_BASE, abs(number)))

    # -- fields -------------------------------------------------------------

    @property
    def radix(self) -> int:
        return self._radix

    @property
    def limbs(self) -> Tuple[int, ...]:
        return self._limbs

    def move(self, other: "Integer") -> "Integer":
        """Overwrite other with this value and return other.

        Limbs are an immutable tuple, so other shares no mutable storage
        with this value afterwards.
        """
        other._radix = self._radix
        other._sign = self._sign
        other._limbs = self._limbs
        return other

    def clone(self) -> "Integer":
        return Integer(self._radix, self._sign, self._limbs)

    def _limbs_in_radix(self, radix: int) -> Sequence[int]:
        if self._radix == radix:
            return self._limbs
        return get_backend().convert(self._radix, radix, self._limbs)

    # -- addition / subtraction ---------------------------------------------

    def add(self, other: "Integer") -> "Integer":
        if self._sign != other._sign:
            if other._sign is Sign.NEGATIVE:
                return self.sub(other.opposite())
            return self.opposite().sub(other).opposite()

        r = self._radix
        b = other._limbs_in_radix(r)
        c = get_backend().add(r, self._limbs, b)
        return Integer(r, self._sign, c)

    def iadd(self, other: "Integer") -> "Integer":
        return self.add(other).move(self)

    def addn(self, number: int) -> "Integer":
        return self.add(Integer.from_number(number))

    def iaddn(self, number: int) -> "Integer":
        return self.addn(number).move(self)

    def sub(self, other: "Integer") -> "Integer":
        if self._sign != other._sign:
            if other._sign is Sign.NEGATIVE:
                return self.add(other.opposite())
            return self.opposite().add(other).opposite()

        # subtract() needs |minuend| >= |subtrahend|
        backend = get_backend()
        r = self._radix
        a = backend.trim(self._limbs)
        b = backend.trim(other._limbs_in_radix(r))

        if not a:
            return Integer(r, other._sign.flip(), b or [0])
        if not b:
            return self.clone()

        if backend.compare(a, b) < 0:
            c = backend.subtract(r, b, a)
            return Integer(r, self._sign.flip(), c)

        c = backend.subtract(r, a, b)
        return Integer(r, self._sign, c)

    def isub(self, other: "Integer") -> "Integer":
        return self.sub(other).move(self)

    def subn(self, number: int) -> "Integer":
        return self.sub(Integer.from_number(number))

    def isubn(self, number: int) -> "Integer":
        return self.subn(number).move(self)

    # -- multiplication / power ---------------------------------------------

    def mul(self, other: "Integer") -> "Integer":
        r = self._radix
        b = other._limbs_in_radix(r)
        c = get_backend().multiply(r, self._limbs, b)
        return Integer(r, self._sign.combine(other._sign), c)

    def imul(self, other: "Integer") -> "Integer":
        return self.mul(other).move(self)

    def muln(self, number: int) -> "Integer":
        return self.mul(Integer.from_number(number))

    def imuln(self, number: int) -> "Integer":
        return self.muln(number).move(self)

    def pown(self, x: int) -> "Integer":
        """Raise to the native power x, 0 <= x <= 2**53."""
        if not _is_native_int(x):
            raise UnsupportedInputType(
                f"Integer.pown expects an int exponent, got {type(x).__name__}"
            )
        if x < 0 or x > MAX_EXPONENT:
            raise RangeViolation(
                f"Exponent must be in [0, {MAX_EXPONENT}]. Got {x}"
            )
        negative = self._sign is Sign.NEGATIVE and x & 1
        sign = Sign.NEGATIVE if negative else Sign.NONNEGATIVE
        c = get_backend().power(self._radix, self._limbs, x)
        return Integer(self._radix, sign, c)

    def ipown(self, x: int) -> "Integer":
        return self.pown(x).move(self)

    def pow(self, other: "Integer") -> "Integer":
        return self.pown(other.value_of())

    def ipow(self, other: "Integer") -> "Integer":
        return self.pow(other).move(self)

    def square(self) -> "Integer":
        return self.pown(2)

    def isquare(self) -> "Integer":
        return self.square().move(self)

    # -- division -----------------------------------------------------------

    def divmod(self, other: "Integer") -> Tuple["Integer", "Integer"]:
        """Floor division with a remainder signed like the divisor."""
        if other.iszero():
            raise DivisionByZero("Integer division by zero")

        backend = get_backend()
        r = self._radix

        # The division primitive wants a trimmed dividend.
        dividend = backend.trim(self._limbs)
        if not dividend:
            return Integer(r, Sign.NONNEGATIVE, [0]), Integer(r, Sign.NONNEGATIVE, [0])

        divisor = other._limbs_in_radix(r)
        q, rem = backend.divide(r, dividend, divisor)
        q = list(q)

        quotient_sign = self._sign.combine(other._sign)
        remainder = Integer(r, Sign.NONNEGATIVE, rem)

        self_negative = self._sign is Sign.NEGATIVE
        other_negative = other._sign is Sign.NEGATIVE

        if (self_negative or other_negative) and not backend.is_zero(rem):
            if other_negative:
                if self_negative:
                    remainder = remainder.opposite()
                else:
                    backend.increment(r, q)
                    remainder = remainder.add(other)
            else:
                backend.increment(r, q)
                remainder = remainder.opposite().add(other)

        return Integer(r, quotient_sign, q), remainder

    def idivmod(self, other: "Integer") -> Tuple["Integer", "Integer"]:
        q, rem = self.divmod(other)
        return q, rem.move(self)

    def divmodn(self, number: int) -> Tuple["Integer", "Integer"]:
        return self.divmod(Integer.from_number(number))

    def idivmodn(self, number: int) -> Tuple["Integer", "Integer"]:
        q, rem = self.divmodn(number)
        return q, rem.move(self)

    def div(self, other: "Integer") -> "Integer":
        return self.divmod(other)[0]

    def idiv(self, other: "Integer") -> "Integer":
        return self.div(other).move(self)

    def divn(self, number: int) -> "Integer":
        return self.div(Integer.from_number(number))

    def idivn(self, number: int) -> "Integer":
        return self.divn(number).move(self)

    def mod(self, other: "Integer") -> "Integer":
        return self.divmod(other)[1]

    def imod(self, other: "Integer") -> "Integer":
        return self.mod(other).move(self)

    def modn(self, number: int) -> "Integer":
        return self.mod(Integer.from_number(number))

    def imodn(self, number: int) -> "Integer":
        return self.modn(number).move(self)

    def divround(self, other: "Integer") -> "Integer":
        """Quotient whose magnitude is bumped when r >= ceil(other / 2)."""
        q, rem = self.divmod(other)
        half = other.divn(2).addn(0 if other.iseven() else 1)
        if rem.ge(half):
            limbs = list(q._limbs)
            get_backend().increment(q._radix, limbs)
            q = Integer(q._radix, q._sign, limbs)
        return q

    def divides(self, other: "Integer") -> bool:
        return other.mod(self).iszero()

    def divide_knowing_divisible_by(self, other: "Integer") -> "Integer":
        return self.div(other)

    # -- gcd ----------------------------------------------------------------

    def gcd(self, other: "Integer") -> "Integer":
        r = self._radix
        b = other._limbs_in_radix(r)
        g = get_backend().euclidean_gcd(r, self._limbs, b)
        return Integer(r, Sign.NONNEGATIVE, g or [0])

    def egcd(self, other: "Integer") -> ExtendedGcd:
        """Extended gcd: gcd = x*self + y*other, u*self + v*other = 0.

        The unsigned primitive alternates cofactor signs with the step
        count; each signed cofactor is that parity XOR the operand's sign.
        """
        r = self._radix
        b = other._limbs_in_radix(r)
        g, s0, t0, s1, t1, steps = get_backend().extended_euclidean_gcd(
            r, self._limbs, b,
        )
        odd = Sign(steps & 1)
        even = odd.flip()

        def cofactor(limbs: List[int], sign: Sign) -> "Integer":
            if not limbs:
                return Integer(r, Sign.NONNEGATIVE, [0])
            return Integer(r, sign, limbs)

        return ExtendedGcd(
            gcd=Integer(r, Sign.NONNEGATIVE, g or [0]),
            x=cofactor(s0, self._sign.combine(odd)),
            y=cofactor(t0, other._sign.combine(even)),
            u=cofactor(s1, self._sign.combine(even)),
            v=cofactor(t1, other._sign.combine(odd)),
        )

    # -- sign ---------------------------------------------------------------

    def opposite(self) -> "Integer":
        return Integer(self._radix, self._sign.flip(), self._limbs)

    def negate(self) -> "Integer":
        return self.opposite().move(self)

    def abs(self) -> "Integer":
        if self._sign is Sign.NEGATIVE:
            return self.opposite()
        return self.clone()

    def iabs(self) -> "Integer":
        return self.abs().move(self)

    def sign(self) -> int:
        if self.iszero():
            return 0
        return -1 if self._sign is Sign.NEGATIVE else 1

    # -- predicates ---------------------------------------------------------

    def iszero(self) -> bool:
        return get_backend().is_zero(self._limbs)

    def isnonzero(self) -> bool:
        return not self.iszero()

    def isone(self) -> bool:
        if self._sign is Sign.NEGATIVE:
            return False
        return get_backend().equal(self._limbs, [1])

    def isnegative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def isnonnegative(self) -> bool:
        return not self.isnegative()

    def ispositive(self) -> bool:
        return self.sign() > 0

    def isnonpositive(self) -> bool:
        return not self.ispositive()

    def parity(self) -> "Integer":
        # TODO: read the last limb directly when the radix is even
        return self.modn(2)

    def iseven(self) -> bool:
        return self.parity().iszero()

    def isodd(self) -> bool:
        return not self.iseven()

    # -- comparison ---------------------------------------------------------

    def cmp(self, other: "Integer") -> int:
        if self.iszero():
            if other.iszero():
                return 0
            return 1 if other._sign is Sign.NEGATIVE else -1

        if self._sign != other._sign:
            return -1 if self._sign is Sign.NEGATIVE else 1

        backend = get_backend()
        a = self._limbs
        b = other._limbs_in_radix(self._radix)
        if self._sign is Sign.NONNEGATIVE:
            return backend.compare(a, b)
        return backend.compare(b, a)

    def cmpn(self, number: int) -> int:
        return self.cmp(Integer.from_number(number))

    def eq(self, other: "Integer") -> bool:
        return self.cmp(other) == 0

    def eqn(self, number: int) -> bool:
        return self.cmpn(number) == 0

    def ne(self, other: "Integer") -> bool:
        return self.cmp(other) != 0

    def nen(self, number: int) -> bool:
        return self.cmpn(number) != 0

    def lt(self, other: "Integer") -> bool:
        return self.cmp(other) < 0

    def ltn(self, number: int) -> bool:
        return self.cmpn(number) < 0

    def le(self, other: "Integer") -> bool:
        return self.cmp(other) <= 0

    def len_(self, number: int) -> bool:
        return self.cmpn(number) <= 0

    def gt(self, other: "Integer") -> bool:
        return self.cmp(other) > 0

    def gtn(self, number: int) -> bool:
        return self.cmpn(number) > 0

    def ge(self, other: "Integer") -> bool:
        return self.cmp(other) >= 0

    def gen(self, number: int) -> bool:
        return self.cmpn(number) >= 0

    # -- conversion ---------------------------------------------------------

    def to_string(self, base: int = DEFAULT_DISPLAY_BASE) -> str:
        if self.iszero():
            return "0"
        digits = get_backend().stringify(self._radix, base, self._limbs)
        return "-" + digits if self._sign is Sign.NEGATIVE else digits

    def bin(self) -> str:
        return self.to_string(2)

    def oct(self) -> str:
        return self.to_string(8)

    def hex(self) -> str:
        return self.to_string(16)

    def to_json(self) -> str:
        return self.hex()

    def digits(self, base: int = DEFAULT_DISPLAY_BASE) -> List[int]:
        """Magnitude digits in base, least significant first."""
        if not _is_native_int(base) or base < 2:
            raise InvalidDigit(f"digit base must be an int >= 2, got {base!r}")
        big_endian = get_backend().convert(self._radix, base, self._limbs)
        return big_endian[::-1]

    def bits(self) -> List[int]:
        return self.digits(2)

    def value_of(self) -> int:
        """Native int, only inside [MIN_NUMBER, MAX_NUMBER]."""
        if self.gtn(MAX_NUMBER):
            raise RangeViolation(
                f"Cannot call value_of on Integer larger than {MAX_NUMBER}. "
                f"Got {self.to_string()}"
            )
        if self.ltn(MIN_NUMBER):
            raise RangeViolation(
                f"Cannot call value_of on Integer smaller than {MIN_NUMBER}. "
                f"Got {self.to_string()}"
            )

        value = 0
        for limb in get_backend().convert(self._radix, MAX_BASE, self._limbs):
            value = value * MAX_BASE + limb
        return -value if self._sign is Sign.NEGATIVE else value

    def to_number(self) -> int:
        return self.value_of()

    def to_sympy(self):
        """Convert to sympy.Integer (requires the sympy extra)."""
        try:
            import sympy
        except ImportError:
            raise ImportError("sympy is required for to_sympy()") from None
        return sympy.Integer(int(self))

    # -- Python protocols ---------------------------------------------------

    def __int__(self) -> int:
        # Exact and unbounded, unlike value_of.
        value = 0
        for limb in self._limbs:
            value = value * self._radix + limb
        return -value if self._sign is Sign.NEGATIVE else value

    def __bool__(self) -> bool:
        return self.isnonzero()

    def __hash__(self) -> int:
        return hash(int(self))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Integer({self.to_string()}, radix={self._radix})"

    def __neg__(self) -> "Integer":
        return self.opposite()

    def __pos__(self) -> "Integer":
        return self.clone()

    def __abs__(self) -> "Integer":
        return self.abs()

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other).opposite()

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __floordiv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rfloordiv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __mod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.mod(other)

    def __rmod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.mod(self)

    def __divmod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)

    def __rdivmod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)

    def __pow__(self, exponent):
        if isinstance(exponent, Integer):
            return self.pow(exponent)
        if _is_native_int(exponent):
            return self.pown(exponent)
        return NotImplemented

    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.eq(other)

    def __ne__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.ne(other)

    def __lt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.lt(other)

    def __le__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.le(other)

    def __gt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.ge(other)


def _coerce(value):
    """Integer operand for a Python operator, or None if unsupported."""
    if isinstance(value, Integer):
        return value
    if _is_native_int(value):
        return Integer.from_number(value)
    return None
