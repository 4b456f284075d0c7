"""
Swappable magnitude backends.

A backend bundles the magnitude primitives behind one object so that the
signed layer never depends on a particular algorithm.  MagnitudeBackend
delegates everything to the pure-Python reference; NumpyBackend replaces
multiplication by a vectorised convolution where int64 cannot overflow.
"""

import logging
import warnings
from typing import Dict, List, Sequence, Tuple, Type

import numpy as np

from . import reference
from ..config import MagnitudeConfig

logger = logging.getLogger(__name__)

_INT64_LIMIT = 1 << 63


class MagnitudeBackend:
    """Reference backend: every primitive delegates to reference.py."""

    name = "reference"

    def __init__(self, config: MagnitudeConfig = None):
        self.config = config or MagnitudeConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # -- utilities ----------------------------------------------------------

    def zeros(self, n: int) -> List[int]:
        return reference.zeros(n)

    def trim(self, a: Sequence[int]) -> List[int]:
        return reference.trim(a)

    def build(self, r: int, number: int) -> List[int]:
        return reference.build(r, number)

    # -- comparison ---------------------------------------------------------

    def is_zero(self, a: Sequence[int]) -> bool:
        return reference.is_zero(a)

    def compare(self, a: Sequence[int], b: Sequence[int]) -> int:
        return reference.compare(a, b)

    def equal(self, a: Sequence[int], b: Sequence[int]) -> bool:
        return reference.equal(a, b)

    # -- arithmetic ---------------------------------------------------------

    def add(self, r: int, a: Sequence[int], b: Sequence[int]) -> List[int]:
        return reference.add(r, a, b)

    def subtract(self, r: int, a: Sequence[int], b: Sequence[int]) -> List[int]:
        return reference.subtract(r, a, b)

    def multiply(self, r: int, a: Sequence[int], b: Sequence[int]) -> List[int]:
        return reference.multiply(r, a, b)

    def divide(self, r: int, a: Sequence[int],
               b: Sequence[int]) -> Tuple[List[int], List[int]]:
        return reference.divide(r, a, b)

    def power(self, r: int, a: Sequence[int], x: int) -> List[int]:
        return reference.power(r, a, x)

    def increment(self, r: int, a: List[int]) -> None:
        reference.increment(r, a)

    # -- radix / text -------------------------------------------------------

    def convert(self, f: int, t: int, a: Sequence[int]) -> List[int]:
        return reference.convert(f, t, a)

    def stringify(self, f: int, t: int, a: Sequence[int]) -> str:
        return reference.stringify(f, t, a)

    def parse(self, tb: int, t: int, text: str) -> List[int]:
        return reference.parse(tb, t, text)

    # -- Euclid -------------------------------------------------------------

    def euclidean_gcd(self, r: int, a: Sequence[int],
                      b: Sequence[int]) -> List[int]:
        return reference.euclidean_gcd(r, a, b)

    def extended_euclidean_gcd(self, r: int, a: Sequence[int], b: Sequence[int]):
        return reference.extended_euclidean_gcd(r, a, b)


def convolution_is_exact(r: int, n: int) -> bool:
    """True if n products of radix-r digits can be summed in int64."""
    return n * (r - 1) ** 2 < _INT64_LIMIT


class NumpyBackend(MagnitudeBackend):
    """Reference backend with numpy-vectorised multiplication.

    A digit product sum of the shorter operand's length must fit in int64;
    otherwise (or below config.numpy_min_limbs) the reference path runs.
    """

    name = "numpy"

    def __init__(self, config: MagnitudeConfig = None):
        super().__init__(config)
        self._warned_radices = set()

    def multiply(self, r: int, a: Sequence[int], b: Sequence[int]) -> List[int]:
        n = min(len(a), len(b))
        # np.convolve rejects empty operands.
        if n == 0 or n < self.config.numpy_min_limbs:
            return reference.multiply(r, a, b)

        if not convolution_is_exact(r, n):
            if not convolution_is_exact(r, 1) and r not in self._warned_radices:
                self._warned_radices.add(r)
                warnings.warn(
                    f"radix {r} is too large for int64 convolution; "
                    "numpy backend falls back to the reference multiply.",
                    RuntimeWarning,
                )
            logger.debug("numpy multiply fallback: radix=%d, limbs=%d", r, n)
            return reference.multiply(r, a, b)

        conv = np.convolve(
            np.asarray(a, dtype=np.int64), np.asarray(b, dtype=np.int64),
        )

        # conv[k] weighs r**(len(a) + len(b) - 2 - k); c[k + 1] has the same weight.
        c = reference.zeros(len(a) + len(b))
        carry = 0
        for k in range(len(conv) - 1, -1, -1):
            v = int(conv[k]) + carry
            c[k + 1] = v % r
            carry = v // r
        c[0] = carry
        return c


BACKENDS: Dict[str, Type[MagnitudeBackend]] = {
    MagnitudeBackend.name: MagnitudeBackend,
    NumpyBackend.name: NumpyBackend,
}


def create_backend(config: MagnitudeConfig = None) -> MagnitudeBackend:
    """Instantiate the backend named by config.backend."""
    config = config or MagnitudeConfig()
    try:
        cls = BACKENDS[config.backend]
    except KeyError:
        raise ValueError(
            f"Unknown magnitude backend: {config.backend!r}. "
            f"Available: {sorted(BACKENDS)}"
        ) from None
    return cls(config)
