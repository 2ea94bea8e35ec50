"""
Vector math operations on 2, 3 and 4 component vectors.

Vectors are (N,) arrays, components ordered [x, y, z, w]. Every function is
pure and jit-compiled; compilation specialises on arity and component dtype,
and the dtype-category checks run while tracing, before anything executes.
Numeric edge cases (zero length, out-of-domain inputs) are not guarded and
propagate as Inf/NaN.
"""

from functools import partial
from typing import Callable

import jax
import jax.numpy as jnp

from . import scalar
from .config import NormalizeMode
from .primitives import (
    COMPONENT_NAMES,
    FLOAT_DTYPE,
    ArrayLike,
    FloatScalar,
    FloatVector,
    FloatVector3,
    Scalar,
    Vector,
    Vector2,
    Vector3,
    Vector4,
    as_scalar,
    as_vector,
    require_arity,
    require_floating,
    require_same_arity,
)

ScalarFn = Callable[[Scalar], Scalar]


def vec2(x: ArrayLike, y: ArrayLike, dtype=FLOAT_DTYPE) -> Vector2:
    """Build a 2-component vector [x, y]."""
    return jnp.array([x, y], dtype=dtype)


def vec3(x: ArrayLike, y: ArrayLike, z: ArrayLike, dtype=FLOAT_DTYPE) -> Vector3:
    """Build a 3-component vector [x, y, z]."""
    return jnp.array([x, y, z], dtype=dtype)


def vec4(x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike, dtype=FLOAT_DTYPE) -> Vector4:
    """Build a 4-component vector [x, y, z, w]."""
    return jnp.array([x, y, z, w], dtype=dtype)


def component(v: Vector, name: str) -> Scalar:
    """
    Read a component by name.

    Parameters
    ----------
    v : Vector
        Input vector.
    name : str
        One of "x", "y", "z", "w".

    Returns
    -------
    Scalar
        The named component.

    Raises
    ------
    KeyError
        If `name` is not a component name.
    ValueError
        If the vector has no such component (e.g. "w" of a 3-vector).
    """
    v = as_vector(v)
    if name not in COMPONENT_NAMES:
        raise KeyError(f"Unknown component {name!r}, expected one of {COMPONENT_NAMES}")
    index = COMPONENT_NAMES.index(name)
    if index >= v.shape[0]:
        raise ValueError(f"A {v.shape[0]}-component vector has no {name!r} component")
    return v[index]


def _sum_of_products(v1: Vector, v2: Vector) -> Scalar:
    # Left-to-right x, y, z, w accumulation
    total = v1[0] * v2[0]
    for i in range(1, v1.shape[0]):
        total = total + v1[i] * v2[i]
    return total


@jax.jit
def dot(v1: FloatVector, v2: FloatVector) -> FloatScalar:
    """
    Compute the dot product of two vectors.

    Parameters
    ----------
    v1 : FloatVector
        First vector, 2 to 4 floating-point components.
    v2 : FloatVector
        Second vector, same arity as `v1`.

    Returns
    -------
    FloatScalar
        Sum of pairwise component products.

    Raises
    ------
    TypeError
        If either vector has a non floating-point component type.
    ValueError
        If the arities differ.
    """
    v1, v2 = as_vector(v1, "v1"), as_vector(v2, "v2")
    require_floating(v1, "dot")
    require_floating(v2, "dot")
    require_same_arity(v1, v2, "dot")
    return _sum_of_products(v1, v2)


@jax.jit
def length_squared(v: Vector) -> Scalar:
    """
    Squared length of a vector.

    Defined for any numeric component type, since no square root or
    division is involved. Prefer it over `length` when comparing magnitudes.
    """
    v = as_vector(v)
    return _sum_of_products(v, v)


@jax.jit
def length(v: FloatVector) -> FloatScalar:
    """Euclidean length, exactly sqrt(length_squared(v))."""
    v = as_vector(v)
    require_floating(v, "length")
    return jnp.sqrt(length_squared(v))


@jax.jit
def cross(v1: FloatVector3, v2: FloatVector3) -> FloatVector3:
    """
    Compute the cross product of two 3D vectors.

    Parameters
    ----------
    v1 : (3,) FloatVector3
        First vector.
    v2 : (3,) FloatVector3
        Second vector.

    Returns
    -------
    (3,) FloatVector3
        v1 x v2, perpendicular to both inputs (right-handed).

    Raises
    ------
    TypeError
        If either vector has a non floating-point component type.
    ValueError
        If either vector does not have exactly 3 components.
    """
    v1, v2 = as_vector(v1, "v1"), as_vector(v2, "v2")
    require_floating(v1, "cross")
    require_floating(v2, "cross")
    require_arity(v1, 3, "cross")
    require_arity(v2, 3, "cross")

    x1, y1, z1 = v1[0], v1[1], v1[2]
    x2, y2, z2 = v2[0], v2[1], v2[2]
    return jnp.stack(
        [
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        ]
    )


@partial(jax.jit, static_argnames=("mode",))
def normalize(v: FloatVector, mode: NormalizeMode = NormalizeMode.ACCURATE) -> FloatVector:
    """
    Scale a vector to unit length.

    Parameters
    ----------
    v : FloatVector
        Non-zero vector with floating-point components.
    mode : NormalizeMode
        ACCURATE divides by the exact length. FAST multiplies by an
        approximate reciprocal square root of the squared length. Static:
        each mode compiles to its own specialisation.

    Returns
    -------
    FloatVector
        Unit vector in the direction of `v`.

    Notes
    -----
    The zero vector is not handled. ACCURATE mode returns NaN components
    (0 / 0), FAST mode returns whatever the approximation yields.
    """
    v = as_vector(v)
    require_floating(v, "normalize")
    if NormalizeMode(mode) is NormalizeMode.FAST:
        return v * scalar.fast_inverse_sqrt(length_squared(v))
    return v / length(v)


def map_components(v: Vector, scalar_fn: ScalarFn) -> Vector:
    """
    Apply a scalar function to each component independently.

    Parameters
    ----------
    v : Vector
        Input vector.
    scalar_fn : Callable
        Single-argument function of one component.

    Returns
    -------
    Vector
        Same-arity vector with result[i] == scalar_fn(v[i]).
    """
    v = as_vector(v)
    return jnp.stack([scalar_fn(v[i]) for i in range(v.shape[0])])


def _componentwise(name: str, scalar_fn: ScalarFn, summary: str):
    def apply(v: Vector) -> Vector:
        return map_components(v, scalar_fn)

    apply.__name__ = name
    apply.__qualname__ = name
    apply.__doc__ = f"{summary}, applied to each component."
    return jax.jit(apply)


# Trigonometry
sin = _componentwise("sin", jnp.sin, "Sine")
cos = _componentwise("cos", jnp.cos, "Cosine")
tan = _componentwise("tan", jnp.tan, "Tangent")
asin = _componentwise("asin", jnp.arcsin, "Inverse sine, NaN outside [-1, 1]")
acos = _componentwise("acos", jnp.arccos, "Inverse cosine, NaN outside [-1, 1]")
atan = _componentwise("atan", jnp.arctan, "Inverse tangent")
radians = _componentwise("radians", scalar.radians, "Degrees to radians")
degrees = _componentwise("degrees", scalar.degrees, "Radians to degrees")

# Rounding and sign
abs = _componentwise("abs", jnp.abs, "Absolute value")
floor = _componentwise("floor", jnp.floor, "Round toward negative infinity")
ceil = _componentwise("ceil", jnp.ceil, "Round toward positive infinity")
trunc = _componentwise("trunc", jnp.trunc, "Round toward zero")
round = _componentwise("round", scalar.round, "Round to nearest, halfway cases away from zero")
fract = _componentwise("fract", scalar.fract, "Fractional part x - floor(x)")
sign = _componentwise("sign", scalar.sign, "Sign (-1, 0 or +1)")

# Powers and logarithms
sqrt = _componentwise("sqrt", jnp.sqrt, "Square root, NaN for negative input")
exp = _componentwise("exp", jnp.exp, "Natural exponential")
exp2 = _componentwise("exp2", jnp.exp2, "Base-2 exponential")
log = _componentwise("log", jnp.log, "Natural logarithm, NaN for negative input")
log2 = _componentwise("log2", jnp.log2, "Base-2 logarithm, NaN for negative input")


@jax.jit
def mod(v: Vector, divisor: ArrayLike) -> Vector:
    """
    Componentwise floored modulo by a single scalar divisor.

    Parameters
    ----------
    v : Vector
        Input vector.
    divisor : Scalar
        Divisor shared by every component.

    Returns
    -------
    Vector
        result[i] == v[i] mod divisor, with the sign of the divisor.
    """
    v = as_vector(v)
    divisor = as_scalar(divisor, "divisor")
    return map_components(v, lambda c: scalar.mod(c, divisor))


@jax.jit
def min(v1: Vector, v2: Vector) -> Vector:
    """Componentwise minimum of two vectors of equal arity."""
    v1, v2 = as_vector(v1, "v1"), as_vector(v2, "v2")
    require_same_arity(v1, v2, "min")
    return jnp.stack([jnp.minimum(v1[i], v2[i]) for i in range(v1.shape[0])])


@jax.jit
def max(v1: Vector, v2: Vector) -> Vector:
    """Componentwise maximum of two vectors of equal arity."""
    v1, v2 = as_vector(v1, "v1"), as_vector(v2, "v2")
    require_same_arity(v1, v2, "max")
    return jnp.stack([jnp.maximum(v1[i], v2[i]) for i in range(v1.shape[0])])


@jax.jit
def clamp(v: Vector, min_val: ArrayLike, max_val: ArrayLike) -> Vector:
    """
    Constrain every component to [min_val, max_val].

    Parameters
    ----------
    v : Vector
        Input vector.
    min_val : Scalar
        Lower bound shared by every component.
    max_val : Scalar
        Upper bound shared by every component.

    Returns
    -------
    Vector
        result[i] == min(max(v[i], min_val), max_val).
    """
    v = as_vector(v)
    min_val = as_scalar(min_val, "min_val")
    max_val = as_scalar(max_val, "max_val")
    return map_components(v, lambda c: scalar.clamp(c, min_val, max_val))
