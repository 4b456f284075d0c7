"""
Runtime configuration for the magnitude backend.

Values come from environment variables so that a deployment can switch
backends without code changes:

  LIMBINT_BACKEND          reference | numpy   (default: reference)
  LIMBINT_NUMPY_MIN_LIMBS  shortest operand the numpy backend vectorises
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_BACKEND = "LIMBINT_BACKEND"
ENV_NUMPY_MIN_LIMBS = "LIMBINT_NUMPY_MIN_LIMBS"


@dataclass
class MagnitudeConfig:
    """Configuration for magnitude primitive dispatch."""
    backend: str = "reference"      # Registered backend name
    numpy_min_limbs: int = 16       # Below this, convolution overhead dominates

    def __post_init__(self):
        if self.numpy_min_limbs < 1:
            raise ValueError(
                f"numpy_min_limbs must be >= 1, got {self.numpy_min_limbs}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MagnitudeConfig":
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs = {}

        backend = env.get(ENV_BACKEND, "").strip().lower()
        if backend:
            kwargs["backend"] = backend

        raw = env.get(ENV_NUMPY_MIN_LIMBS, "").strip()
        if raw:
            try:
                kwargs["numpy_min_limbs"] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_NUMPY_MIN_LIMBS} must be an integer, got {raw!r}"
                ) from None

        return cls(**kwargs)
