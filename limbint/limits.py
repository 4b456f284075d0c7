"""
Numeric limits and default bases.

MAX_NUMBER is the largest native integer magnitude that ``value_of``
accepts. It matches the IEEE-754 safe-integer window (2**53 - 1) so that
values exported through ``value_of`` survive a round trip through a double.
"""

import math
from typing import Final

MAX_NUMBER: Final[int] = 2**53 - 1
MIN_NUMBER: Final[int] = -MAX_NUMBER

# Largest radix whose two-limb values still fit in MAX_NUMBER.
MAX_BASE: Final[int] = math.isqrt(MAX_NUMBER)

# Largest exponent accepted by Integer.pown.
MAX_EXPONENT: Final[int] = 2**53

DEFAULT_DISPLAY_BASE: Final[int] = 10
DEFAULT_REPRESENTATION_BASE: Final[int] = MAX_BASE
