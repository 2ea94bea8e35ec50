"""
Primitives module for shared vector aliases, numerical constants, and dtype checks.

Dtype and shape are static under `jax.jit`, so every check here runs while
tracing and never inside compiled code.
"""

import jax.numpy as jnp
from jaxtyping import Array, ArrayLike, Float, Num

# Project precision settings
FLOAT_DTYPE = jnp.float32
INT_DTYPE = jnp.int32
EPS = 1e-8

# Supported arities
ARITIES = (2, 3, 4)
COMPONENT_NAMES = ("x", "y", "z", "w")

# Project type aliases
Scalar = Num[Array, ""]
FloatScalar = Float[Array, ""]
Vector = Num[Array, "N"]
Vector2 = Num[Array, "2"]
Vector3 = Num[Array, "3"]
Vector4 = Num[Array, "4"]
FloatVector = Float[Array, "N"]
FloatVector3 = Float[Array, "3"]
Array = Array
ArrayLike = ArrayLike


def is_numeric(dtype) -> bool:
    """Whether a dtype is a valid component type (integer or real floating)."""
    return jnp.issubdtype(dtype, jnp.integer) or jnp.issubdtype(dtype, jnp.floating)


def is_floating(dtype) -> bool:
    """Whether a dtype is an IEEE-754 floating-point type."""
    return jnp.issubdtype(dtype, jnp.floating)


def as_vector(v: ArrayLike, name: str = "v") -> Vector:
    """
    Convert input to a vector and check its arity and component type.

    Parameters
    ----------
    v : ArrayLike
        Candidate vector of shape (N,), N in {2, 3, 4}.
    name : str
        Argument name used in error messages.

    Returns
    -------
    Vector
        Input as a JAX array.

    Raises
    ------
    ValueError
        If the shape is not (2,), (3,) or (4,).
    TypeError
        If the dtype is not an integer or real floating type.
    """
    v = jnp.asarray(v)
    if v.ndim != 1 or v.shape[0] not in ARITIES:
        raise ValueError(f"{name} must have shape (2,), (3,) or (4,), got {v.shape}")
    if not is_numeric(v.dtype):
        raise TypeError(f"{name} must have a numeric component type, got {v.dtype}")
    return v


def require_floating(v: Vector, operation: str) -> None:
    """Reject non floating-point component types for `operation`."""
    if not is_floating(v.dtype):
        raise TypeError(f"{operation} only accepts floating-point inputs, got {v.dtype}")


def require_same_arity(v1: Vector, v2: Vector, operation: str) -> None:
    """Reject vectors of different arity for `operation`."""
    if v1.shape != v2.shape:
        raise ValueError(f"{operation} requires vectors of equal arity, got {v1.shape} and {v2.shape}")


def require_arity(v: Vector, arity: int, operation: str) -> None:
    """Reject vectors whose arity is not exactly `arity`."""
    if v.shape[0] != arity:
        raise ValueError(f"{operation} is only defined for {arity}-component vectors, got {v.shape}")


def as_scalar(s: ArrayLike, name: str) -> Scalar:
    """Convert input to a 0-d array, rejecting anything with a shape."""
    s = jnp.asarray(s)
    if s.ndim != 0:
        raise ValueError(f"{name} must be a scalar, got shape {s.shape}")
    if not is_numeric(s.dtype):
        raise TypeError(f"{name} must be numeric, got {s.dtype}")
    return s
