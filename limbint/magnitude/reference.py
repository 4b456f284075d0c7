"""
Pure-Python magnitude reference implementations.

Unsigned, big-endian, fixed-radix limb arithmetic. These serve as ground
truth for correctness testing; faster backends must agree with them
(up to leading zeros).

All operations are exact (integer arithmetic, no floating-point). Inputs
are never mutated, except by increment().
"""

from typing import List, Sequence, Tuple

from ..errors import InvalidDigit

Limbs = List[int]

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_TEXT_BASE = len(DIGITS)


# ---------------------------------------------------------------------------
# Buffer utilities
# ---------------------------------------------------------------------------

def zeros(n: int) -> Limbs:
    """Allocate n zero limbs."""
    return [0] * n


def _leading_zeros(a: Sequence[int]) -> int:
    i = 0
    n = len(a)
    while i < n and a[i] == 0:
        i += 1
    return i


def trim(a: Sequence[int]) -> Limbs:
    """Copy of a without leading zeros.  Zero trims to the empty list."""
    return list(a[_leading_zeros(a):])


def build(r: int, number: int) -> Limbs:
    """Digits of a non-negative native int in radix r."""
    if number < 0:
        raise ValueError(f"build expects a non-negative number, got {number}")
    data = []
    q = number
    while q >= r:
        q, d = divmod(q, r)
        data.append(d)
    data.append(q)
    data.reverse()
    return data


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def is_zero(a: Sequence[int]) -> bool:
    return _leading_zeros(a) == len(a)


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Three-way compare of two magnitudes, ignoring leading zeros."""
    ai = _leading_zeros(a)
    bi = _leading_zeros(b)
    la = len(a) - ai
    lb = len(b) - bi
    if la != lb:
        return -1 if la < lb else 1
    for k in range(la):
        x = a[ai + k]
        y = b[bi + k]
        if x != y:
            return -1 if x < y else 1
    return 0


def equal(a: Sequence[int], b: Sequence[int]) -> bool:
    return compare(a, b) == 0


# ---------------------------------------------------------------------------
# Addition / subtraction
# ---------------------------------------------------------------------------

def add(r: int, a: Sequence[int], b: Sequence[int]) -> Limbs:
    """a + b.  Result has max(len(a), len(b)) + 1 limbs."""
    n = max(len(a), len(b)) + 1
    c = zeros(n)
    i = len(a) - 1
    j = len(b) - 1
    carry = 0
    for k in range(n - 1, -1, -1):
        s = carry
        if i >= 0:
            s += a[i]
            i -= 1
        if j >= 0:
            s += b[j]
            j -= 1
        if s >= r:
            c[k] = s - r
            carry = 1
        else:
            c[k] = s
            carry = 0
    return c


def subtract(r: int, a: Sequence[int], b: Sequence[int]) -> Limbs:
    """a - b.  Requires a >= b.  Result has len(a) limbs."""
    if compare(a, b) < 0:
        raise ValueError("subtract requires minuend >= subtrahend")
    c = zeros(len(a))
    j = len(b) - 1
    borrow = 0
    for i in range(len(a) - 1, -1, -1):
        d = a[i] - borrow
        if j >= 0:
            d -= b[j]
            j -= 1
        if d < 0:
            d += r
            borrow = 1
        else:
            borrow = 0
        c[i] = d
    return c


def increment(r: int, a: List[int]) -> None:
    """a += 1 in place.  Prepends a limb on carry-out."""
    i = len(a) - 1
    while i >= 0:
        if a[i] + 1 < r:
            a[i] += 1
            return
        a[i] = 0
        i -= 1
    a.insert(0, 1)


# ---------------------------------------------------------------------------
# Multiplication / division / power
# ---------------------------------------------------------------------------

def multiply(r: int, a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Schoolbook a * b.  Result has len(a) + len(b) limbs."""
    lb = len(b)
    c = zeros(len(a) + lb)
    for i in range(len(a) - 1, -1, -1):
        x = a[i]
        if x == 0:
            continue
        carry = 0
        for j in range(lb - 1, -1, -1):
            t = c[i + j + 1] + x * b[j] + carry
            c[i + j + 1] = t % r
            carry = t // r
        c[i] = carry
    return c


def _mul_digit(r: int, a: Sequence[int], d: int) -> Limbs:
    c = zeros(len(a) + 1)
    carry = 0
    for i in range(len(a) - 1, -1, -1):
        t = a[i] * d + carry
        c[i + 1] = t % r
        carry = t // r
    c[0] = carry
    return c


def divide(r: int, a: Sequence[int], b: Sequence[int]) -> Tuple[Limbs, Limbs]:
    """Long division of a by b.

    Returns:
        (quotient, remainder): quotient has len(a) limbs, remainder is
        trimmed (empty when zero).

    Raises:
        ZeroDivisionError if b is zero.
    """
    d = trim(b)
    if not d:
        raise ZeroDivisionError("magnitude division by zero")

    q = zeros(len(a))
    rem: Limbs = []
    lead = d[0]

    for i, digit in enumerate(a):
        # rem := rem * r + digit
        if rem or digit:
            rem.append(digit)
        if compare(rem, d) < 0:
            continue

        # rem < d * r here, so the quotient digit lies in [1, r).
        # Bound it from the leading limbs, then binary search.
        top = rem[0] if len(rem) == len(d) else rem[0] * r + rem[1]
        lo = max(1, top // (lead + 1))
        hi = min(r - 1, top // lead)
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if compare(_mul_digit(r, d, mid), rem) <= 0:
                lo = mid
            else:
                hi = mid - 1

        q[i] = lo
        rem = trim(subtract(r, rem, _mul_digit(r, d, lo)))

    return q, rem


def power(r: int, a: Sequence[int], x: int) -> Limbs:
    """a ** x by square-and-multiply.  0 ** 0 == 1."""
    if x < 0:
        raise ValueError(f"power expects a non-negative exponent, got {x}")
    result: Limbs = [1]
    base = trim(a)
    while x:
        if x & 1:
            result = trim(multiply(r, result, base))
        x >>= 1
        if x:
            base = trim(multiply(r, base, base))
    return result or [0]


# ---------------------------------------------------------------------------
# Radix conversion and text
# ---------------------------------------------------------------------------

def convert(f: int, t: int, a: Sequence[int]) -> Limbs:
    """Re-express a radix-f magnitude in radix t (minimal, at least one limb)."""
    if f < 2 or t < 2:
        raise ValueError(f"convert expects radices >= 2, got {f} and {t}")
    if f == t:
        return trim(a) or [0]

    acc: Limbs = []  # little-endian while accumulating
    for digit in a:
        carry = digit
        for k in range(len(acc)):
            v = acc[k] * f + carry
            acc[k] = v % t
            carry = v // t
        while carry:
            carry, d = divmod(carry, t)
            acc.append(d)

    acc.reverse()
    return acc or [0]


def _check_text_base(base: int) -> None:
    if not 2 <= base <= MAX_TEXT_BASE:
        raise InvalidDigit(
            f"text base must be in [2, {MAX_TEXT_BASE}], got {base}"
        )


def stringify(f: int, t: int, a: Sequence[int]) -> str:
    """Render a radix-f magnitude as radix-t digit text."""
    _check_text_base(t)
    return "".join(DIGITS[d] for d in convert(f, t, a))


def parse(tb: int, t: int, text: str) -> Limbs:
    """Parse radix-tb digit text into radix-t limbs (case-insensitive)."""
    _check_text_base(tb)
    digits = []
    for ch in text:
        v = DIGITS.find(ch.lower()) if len(ch.lower()) == 1 else -1
        if v < 0 or v >= tb:
            raise InvalidDigit(f"invalid digit {ch!r} for base {tb} in {text!r}")
        digits.append(v)
    return convert(tb, t, digits)


# ---------------------------------------------------------------------------
# Euclidean algorithms
# ---------------------------------------------------------------------------

def euclidean_gcd(r: int, a: Sequence[int], b: Sequence[int]) -> Limbs:
    """gcd(a, b), trimmed (empty when both are zero)."""
    x = trim(a)
    y = trim(b)
    while y:
        x, y = y, divide(r, x, y)[1]
    return x


def extended_euclidean_gcd(
    r: int, a: Sequence[int], b: Sequence[int],
) -> Tuple[Limbs, Limbs, Limbs, Limbs, Limbs, int]:
    """Unsigned extended Euclidean algorithm.

    Runs r_{i+1} = r_{i-1} - q_i * r_i from (r_0, r_1) = (a, b) and tracks
    the Bezout cofactors by magnitude only.  Their signs alternate, so with
    k = steps (number of divisions performed):

        gcd = (-1)**k * s0 * a + (-1)**(k+1) * t0 * b
        0   = (-1)**(k+1) * s1 * a + (-1)**k * t1 * b

    Returns:
        (gcd, s0, t0, s1, t1, steps), magnitudes trimmed (empty when zero).
    """
    r0, r1 = trim(a), trim(b)
    s0: Limbs = [1]
    s1: Limbs = []
    t0: Limbs = []
    t1: Limbs = [1]
    steps = 0

    while r1:
        q, rem = divide(r, r0, r1)
        q = trim(q)
        r0, r1 = r1, rem
        s0, s1 = s1, trim(add(r, s0, multiply(r, q, s1)))
        t0, t1 = t1, trim(add(r, t0, multiply(r, q, t1)))
        steps += 1

    return r0, s0, t0, s1, t1, steps
