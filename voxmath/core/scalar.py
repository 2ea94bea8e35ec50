"""
Scalar math functions applied per component by the vector library.

Each function follows standard single-scalar semantics: IEEE-754 for floating
inputs, so out-of-domain arguments produce NaN rather than raising.
"""

import jax
import jax.numpy as jnp

from .primitives import FLOAT_DTYPE, ArrayLike, Scalar

# Magic constants for the bit-level reciprocal square root approximation,
# keyed by the float dtype they apply to.
_FAST_INVERSE_SQRT_MAGIC = {
    jnp.dtype(jnp.float32): (jnp.int32, 0x5F3759DF),
    jnp.dtype(jnp.float64): (jnp.int64, 0x5FE6EB50C7B537A9),
}


def fract(x: ArrayLike) -> Scalar:
    """Fractional part, x - floor(x), always in [0, 1) for finite x."""
    return x - jnp.floor(x)


def sign(x: ArrayLike) -> Scalar:
    """-1, 0 or +1 depending on the sign of x."""
    return jnp.sign(x)


def round(x: ArrayLike) -> Scalar:
    """
    Round to nearest integer value, halfway cases away from zero.

    Notes
    -----
    Unlike `jnp.round`, which rounds halfway cases to even, round(2.5) == 3.
    Integer inputs are returned unchanged. The fractional part x - trunc(x)
    is exact, so values just below a half and large odd integers round
    correctly.
    """
    x = jnp.asarray(x)
    if jnp.issubdtype(x.dtype, jnp.integer):
        return x
    truncated = jnp.trunc(x)
    return jnp.where(jnp.abs(x - truncated) >= 0.5, truncated + jnp.sign(x), truncated)


def radians(x: ArrayLike) -> Scalar:
    """Convert degrees to radians."""
    return jnp.deg2rad(x)


def degrees(x: ArrayLike) -> Scalar:
    """Convert radians to degrees."""
    return jnp.rad2deg(x)


def mod(x: ArrayLike, y: ArrayLike) -> Scalar:
    """Floored modulo, the result takes the sign of the divisor."""
    return jnp.mod(x, y)


def clamp(x: ArrayLike, min_val: ArrayLike, max_val: ArrayLike) -> Scalar:
    """Constrain x to [min_val, max_val], as min(max(x, min_val), max_val)."""
    return jnp.minimum(jnp.maximum(x, min_val), max_val)


def fast_inverse_sqrt(x: ArrayLike) -> Scalar:
    """
    Approximate 1 / sqrt(x) with the bit-level estimate and one Newton step.

    Parameters
    ----------
    x : ArrayLike
        Positive floating-point value(s).

    Returns
    -------
    Scalar
        Approximate reciprocal square root, same dtype as x.

    Notes
    -----
    Relative error is below 0.2% for positive normal inputs. Floating dtypes
    other than float32 and float64 are evaluated in float32 and cast back.
    Zero, negative, Inf and NaN inputs give implementation-defined results.
    """
    x = jnp.asarray(x)
    if not jnp.issubdtype(x.dtype, jnp.floating):
        x = x.astype(FLOAT_DTYPE)

    if x.dtype not in _FAST_INVERSE_SQRT_MAGIC:
        return fast_inverse_sqrt(x.astype(jnp.float32)).astype(x.dtype)

    int_dtype, magic = _FAST_INVERSE_SQRT_MAGIC[x.dtype]

    # Initial estimate from the exponent bits
    i = jax.lax.bitcast_convert_type(x, int_dtype)
    i = jnp.asarray(magic, dtype=int_dtype) - jnp.right_shift(i, 1)
    y = jax.lax.bitcast_convert_type(i, x.dtype)

    # One Newton-Raphson refinement
    half_x = 0.5 * x
    return y * (1.5 - half_x * y * y)
