"""Configuration dataclasses for vector math behaviour."""

import enum
import os
from dataclasses import dataclass

FAST_MATH_ENV_VAR = "VOXMATH_FAST_MATH"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


class NormalizeMode(enum.Enum):
    """Algorithm used by `normalize`."""

    ACCURATE = "accurate"
    """Divide by the exact length: one square root and N divisions."""

    FAST = "fast"
    """Multiply by an approximate reciprocal square root of the squared length."""


@dataclass(frozen=True)
class VectorMathConfig:
    """Configuration for a set of vector operations."""

    normalize_mode: NormalizeMode = NormalizeMode.ACCURATE
    """Normalization algorithm, fixed for every call made through this config."""

    @classmethod
    def from_env(cls) -> "VectorMathConfig":
        """Resolve the configuration once from the process environment."""
        fast = os.environ.get(FAST_MATH_ENV_VAR, "").strip().lower() in _TRUTHY
        return cls(normalize_mode=NormalizeMode.FAST if fast else NormalizeMode.ACCURATE)
