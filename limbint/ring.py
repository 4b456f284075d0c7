"""
IntegerRing: factory for Integers in one fixed representation radix.

Usage:
    ring = IntegerRing("ZZ", 2**16)
    a = ring.from_string("-ff", 16)
    b = ring.from_int(255)
    assert a.add(b).iszero()
"""

from .errors import AmbiguousParseRequest, EmptyInput, UnsupportedInputType
from .integer import Integer, Sign, _is_native_int
from .limits import DEFAULT_REPRESENTATION_BASE
from .magnitude import get_backend


class IntegerRing:
    """Parses native ints and digit text into Integers of a fixed radix.

    Stateless apart from its name and radix; safe to share.
    """

    def __init__(self, name: str, radix: int):
        if not _is_native_int(radix) or radix < 2:
            raise ValueError(f"IntegerRing radix must be an int >= 2, got {radix!r}")
        self.name = name
        self.radix = radix

    def from_value(self, value, base=None, sign: Sign = Sign.NONNEGATIVE) -> Integer:
        """Dispatch on the type of value: native int or digit text."""
        if _is_native_int(value):
            if base is not None:
                raise AmbiguousParseRequest(
                    "IntegerRing.from_value: using the base parameter does not "
                    "make sense when parsing a native int."
                )
            return self.from_int(value, sign)
        if isinstance(value, str):
            return self.from_string(value, 10 if base is None else base, sign)
        raise UnsupportedInputType(
            f"IntegerRing.from_value cannot handle {type(value).__name__}"
        )

    def from_int(self, number: int, sign: Sign = Sign.NONNEGATIVE) -> Integer:
        """Integer equal to number, negated once more if sign is NEGATIVE.

        Equivalent to from_string(str(number), 10, sign) without the
        interpreter's limit on int-to-str conversion.
        """
        if not _is_native_int(number):
            raise UnsupportedInputType(
                f"IntegerRing.from_int expects an int, got {type(number).__name__}"
            )
        sign = Sign(sign)
        if number < 0:
            sign = sign.flip()
        limbs = get_backend().build(self.radix, abs(number))
        return Integer(self.radix, sign, limbs)

    def from_string(self, text: str, base: int = 10,
                    sign: Sign = Sign.NONNEGATIVE) -> Integer:
        """Parse base-``base`` digit text with optional leading '-' / '+'."""
        if not isinstance(text, str):
            raise UnsupportedInputType(
                f"IntegerRing.from_string expects str, got {type(text).__name__}"
            )
        sign = Sign(sign)

        # Each '-' flips the sign, each '+' keeps it.
        i = 0
        while i < len(text) and text[i] in "+-":
            if text[i] == "-":
                sign = sign.flip()
            i += 1
        digits = text[i:]

        if not digits:
            raise EmptyInput(f"IntegerRing.from_string cannot parse {text!r}.")

        limbs = get_backend().parse(base, self.radix, digits)
        return Integer(self.radix, sign, limbs)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"IntegerRing({self.name!r}, radix={self.radix})"

    # -- call-throughs ------------------------------------------------------

    @staticmethod
    def add(first: Integer, second: Integer) -> Integer:
        return first.add(second)

    @staticmethod
    def sub(first: Integer, second: Integer) -> Integer:
        return first.sub(second)

    @staticmethod
    def mul(first: Integer, second: Integer) -> Integer:
        return first.mul(second)

    @staticmethod
    def pow(first: Integer, second: Integer) -> Integer:
        return first.pow(second)

    @staticmethod
    def div(first: Integer, second: Integer) -> Integer:
        return first.div(second)

    @staticmethod
    def mod(first: Integer, second: Integer) -> Integer:
        return first.mod(second)


ZZ = IntegerRing("ZZ", DEFAULT_REPRESENTATION_BASE)
