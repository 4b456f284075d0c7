"""
Error types raised by limbint.

Every error derives from LimbintError and from the closest builtin
exception, so callers may catch either one.
"""


class LimbintError(Exception):
    """Base class for all limbint errors."""


class DivisionByZero(LimbintError, ZeroDivisionError):
    """Divisor magnitude is zero."""


class UnsupportedInputType(LimbintError, TypeError):
    """A factory received a value that is neither a native int nor text."""


class AmbiguousParseRequest(LimbintError, ValueError):
    """An explicit base was given together with a native int."""


class EmptyInput(LimbintError, ValueError):
    """Text to parse is empty, possibly after stripping sign prefixes."""


class RangeViolation(LimbintError, ValueError):
    """A magnitude lies outside the native safe-integer window."""


class InvalidDigit(LimbintError, ValueError):
    """Text contains a character that is not a digit of the text base,
    or the text base itself is unsupported."""
