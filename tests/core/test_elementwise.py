"""Tests for the elementwise vector functions."""

import jax
import jax.numpy as jnp

from voxmath.core import vector
from voxmath.core.primitives import EPS, FLOAT_DTYPE, INT_DTYPE
from voxmath.core.vector import vec2, vec3, vec4

# Function name -> (reference scalar function, sample input inside its domain)
ELEMENTWISE = {
    "sin": (jnp.sin, vec4(0.0, 0.5, -1.0, 3.0)),
    "cos": (jnp.cos, vec4(0.0, 0.5, -1.0, 3.0)),
    "tan": (jnp.tan, vec3(0.0, 0.5, -1.0)),
    "asin": (jnp.arcsin, vec3(0.0, 0.5, -1.0)),
    "acos": (jnp.arccos, vec3(0.0, 0.5, -1.0)),
    "atan": (jnp.arctan, vec4(0.0, 0.5, -1.0, 100.0)),
    "abs": (jnp.abs, vec3(-2.5, 0.0, 3.0)),
    "floor": (jnp.floor, vec4(-1.5, -0.5, 0.5, 1.5)),
    "ceil": (jnp.ceil, vec4(-1.5, -0.5, 0.5, 1.5)),
    "trunc": (jnp.trunc, vec4(-1.5, -0.5, 0.5, 1.5)),
    "radians": (jnp.deg2rad, vec3(0.0, 90.0, 180.0)),
    "degrees": (jnp.rad2deg, vec3(0.0, jnp.pi / 2, jnp.pi)),
    "sqrt": (jnp.sqrt, vec3(0.0, 4.0, 2.0)),
    "exp": (jnp.exp, vec2(0.0, 1.0)),
    "exp2": (jnp.exp2, vec3(0.0, 3.0, -1.0)),
    "log": (jnp.log, vec2(1.0, 10.0)),
    "log2": (jnp.log2, vec3(1.0, 8.0, 0.5)),
}


def test_elementwise_matches_scalar(jit_mode: str) -> None:
    """Test result[i] == scalar_fn(v[i]) for every generated function."""
    for name, (reference, v) in ELEMENTWISE.items():
        fn = getattr(vector, name)
        result = fn(v)
        expected = jnp.array([reference(c) for c in v], dtype=FLOAT_DTYPE)
        assert result.shape == v.shape, name
        assert jnp.allclose(result, expected, atol=1e-6), name


def test_elementwise_metadata() -> None:
    """Test generated functions keep a name and docstring."""
    for name in ELEMENTWISE:
        fn = getattr(vector, name)
        assert fn.__name__ == name
        assert "each component" in fn.__doc__


def test_rounding(jit_mode: str) -> None:
    """Test round, fract and sign."""
    # Standard case 1 - round halfway cases away from zero
    result_1 = vector.round(vec4(-2.5, -0.4, 0.5, 2.5))
    assert jnp.array_equal(result_1, vec4(-3.0, 0.0, 1.0, 3.0))

    # Standard case 2 - fract is always non-negative
    result_2 = vector.fract(vec3(1.25, -1.25, 3.0))
    assert jnp.allclose(result_2, vec3(0.25, 0.75, 0.0), atol=EPS)

    # Standard case 3 - sign
    result_3 = vector.sign(vec3(-3.0, 0.0, 2.0))
    assert jnp.array_equal(result_3, vec3(-1.0, 0.0, 1.0))

    # Edge case 1 - integer abs keeps integer dtype
    result_4 = vector.abs(jnp.array([-3, 4], dtype=INT_DTYPE))
    assert jnp.array_equal(result_4, jnp.array([3, 4]))
    assert result_4.dtype == INT_DTYPE

    # Edge case 2 - round is exact just below a half and for large odd integers
    result_5 = vector.round(vec3(8388609.0, 0.49999997, -8388609.0))
    assert jnp.array_equal(result_5, vec3(8388609.0, 0.0, -8388609.0))

    # Edge case 3 - round keeps integer vectors unchanged
    ints = jnp.array([1, 2, 3], dtype=INT_DTYPE)
    result_6 = vector.round(ints)
    assert result_6.dtype == INT_DTYPE
    assert jnp.array_equal(result_6, ints)


def test_domain_errors_propagate_nan(jit_mode: str) -> None:
    """Test out-of-domain inputs produce NaN instead of raising."""
    outside = vec2(2.0, 0.5)

    for fn in (vector.acos, vector.asin):
        result = fn(outside)
        assert jnp.isnan(result[0])
        assert not jnp.isnan(result[1])

    negative = vec3(-1.0, 1.0, 4.0)
    for fn in (vector.sqrt, vector.log, vector.log2):
        result = fn(negative)
        assert jnp.isnan(result[0])
        assert jnp.all(jnp.isfinite(result[1:]))

    # log(0) is -inf, not an error
    assert jnp.isneginf(vector.log(vec2(0.0, 1.0))[0])


def test_elementwise_independent(jit_mode: str) -> None:
    """Test that changing one component changes only that output component."""
    v = vec4(0.1, 0.2, 0.3, 0.4)
    w = vec4(0.1, 0.9, 0.3, 0.4)
    for name in ("sin", "exp", "sqrt", "floor"):
        fn = getattr(vector, name)
        a, b = fn(v), fn(w)
        assert jnp.array_equal(a[jnp.array([0, 2, 3])], b[jnp.array([0, 2, 3])]), name

    # Test with vmap
    vectors = jnp.array([[0.0, jnp.pi / 2], [jnp.pi, -jnp.pi / 2]], dtype=FLOAT_DTYPE)
    vmap_results = jax.vmap(vector.sin)(vectors)
    expected_vmap = jnp.array([[0.0, 1.0], [0.0, -1.0]], dtype=FLOAT_DTYPE)
    assert jnp.allclose(vmap_results, expected_vmap, atol=1e-6)
