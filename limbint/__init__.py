"""
limbint: arbitrary-precision signed integers over fixed-radix limbs.

Sign/magnitude layer on top of unsigned big-endian limb primitives:
  Integer(radix, sign, limbs)      value type, floor division,
                                   remainder signed like the divisor
  IntegerRing(name, radix)         parses ints and digit text
  ZZ                               default ring in DEFAULT_REPRESENTATION_BASE

The magnitude primitives are swappable (see limbint.magnitude and the
LIMBINT_BACKEND environment variable).
"""

__version__ = "0.3.0"

from .errors import (
    LimbintError, DivisionByZero, UnsupportedInputType,
    AmbiguousParseRequest, EmptyInput, RangeViolation, InvalidDigit,
)
from .limits import (
    MAX_NUMBER, MIN_NUMBER, MAX_BASE, MAX_EXPONENT,
    DEFAULT_DISPLAY_BASE, DEFAULT_REPRESENTATION_BASE,
)
from .config import MagnitudeConfig
from .magnitude import MagnitudeBackend, NumpyBackend, get_backend, set_backend
from .integer import Integer, Sign, ExtendedGcd
from .ring import IntegerRing, ZZ

__all__ = [
    "LimbintError", "DivisionByZero", "UnsupportedInputType",
    "AmbiguousParseRequest", "EmptyInput", "RangeViolation", "InvalidDigit",
    "MAX_NUMBER", "MIN_NUMBER", "MAX_BASE", "MAX_EXPONENT",
    "DEFAULT_DISPLAY_BASE", "DEFAULT_REPRESENTATION_BASE",
    "MagnitudeConfig",
    "MagnitudeBackend", "NumpyBackend", "get_backend", "set_backend",
    "Integer", "Sign", "ExtendedGcd",
    "IntegerRing", "ZZ",
]
