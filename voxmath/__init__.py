"""Voxmath - JAX-based vector math for 2, 3 and 4 component vectors."""

from voxmath.core.config import NormalizeMode, VectorMathConfig
from voxmath.core.diagnostics import AssertionFailure, assert_finite, check
from voxmath.core.ops import VectorOps
from voxmath.core.primitives import (
    EPS,
    FLOAT_DTYPE,
    INT_DTYPE,
    FloatVector,
    Vector,
    Vector2,
    Vector3,
    Vector4,
)
from voxmath.core.scalar import fast_inverse_sqrt
from voxmath.core.vector import (
    abs,
    acos,
    asin,
    atan,
    ceil,
    clamp,
    component,
    cos,
    cross,
    degrees,
    dot,
    exp,
    exp2,
    floor,
    fract,
    length,
    length_squared,
    log,
    log2,
    map_components,
    max,
    min,
    mod,
    normalize,
    radians,
    round,
    sign,
    sin,
    sqrt,
    tan,
    trunc,
    vec2,
    vec3,
    vec4,
)
from voxmath.logging_config import setup_logging

__all__ = [
    # Configuration
    "NormalizeMode",
    "VectorMathConfig",
    "VectorOps",
    # Diagnostics
    "AssertionFailure",
    "assert_finite",
    "check",
    "setup_logging",
    # Types and constants
    "EPS",
    "FLOAT_DTYPE",
    "INT_DTYPE",
    "FloatVector",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    # Construction
    "vec2",
    "vec3",
    "vec4",
    "component",
    # Algebra
    "dot",
    "length_squared",
    "length",
    "cross",
    "normalize",
    "fast_inverse_sqrt",
    # Elementwise
    "map_components",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "abs",
    "floor",
    "ceil",
    "trunc",
    "round",
    "fract",
    "sign",
    "radians",
    "degrees",
    "sqrt",
    "exp",
    "exp2",
    "log",
    "log2",
    # Combinators
    "mod",
    "min",
    "max",
    "clamp",
]
