"""
Magnitude primitives for limbint.

Unsigned, big-endian, fixed-radix limb arithmetic:
1. Pure Python reference implementations (always available)
2. Swappable backends (reference, numpy) selected from MagnitudeConfig
"""

import logging
from typing import Union

from .reference import (
    DIGITS, MAX_TEXT_BASE,
    zeros, trim, build,
    is_zero, compare, equal,
    add, subtract, increment, multiply, divide, power,
    convert, stringify, parse,
    euclidean_gcd, extended_euclidean_gcd,
)
from .backends import (
    MagnitudeBackend, NumpyBackend, BACKENDS,
    create_backend, convolution_is_exact,
)
from ..config import MagnitudeConfig

logger = logging.getLogger(__name__)

_active = None


def get_backend() -> MagnitudeBackend:
    """Return the process-wide backend, creating it from the environment once."""
    global _active
    if _active is None:
        config = MagnitudeConfig.from_env()
        _active = create_backend(config)
        logger.debug("magnitude backend selected: %r", _active)
    return _active


def set_backend(backend: Union[MagnitudeBackend, str, None]) -> MagnitudeBackend:
    """Install a backend instance, or one built by name.

    None resets to lazy selection from the environment.
    """
    global _active
    if backend is None:
        _active = None
        return get_backend()
    if isinstance(backend, str):
        backend = create_backend(MagnitudeConfig(backend=backend))
    _active = backend
    logger.debug("magnitude backend installed: %r", _active)
    return _active


__all__ = [
    "DIGITS", "MAX_TEXT_BASE",
    "zeros", "trim", "build",
    "is_zero", "compare", "equal",
    "add", "subtract", "increment", "multiply", "divide", "power",
    "convert", "stringify", "parse",
    "euclidean_gcd", "extended_euclidean_gcd",
    "MagnitudeBackend", "NumpyBackend", "BACKENDS",
    "create_backend", "convolution_is_exact",
    "MagnitudeConfig", "get_backend", "set_backend",
]
