"""Test configuration for voxmath tests."""

import jax
import pytest


def pytest_generate_tests(metafunc):
    """Run each test with JIT enabled and disabled."""
    if "jit_mode" in metafunc.fixturenames:
        metafunc.parametrize("jit_mode", ["no_jit", "jit"], indirect=True)


@pytest.fixture
def jit_mode(request):
    """Set JAX JIT compilation mode for the duration of a test."""
    previous = jax.config.jax_disable_jit
    jax.config.update("jax_disable_jit", request.param == "no_jit")
    yield request.param
    jax.config.update("jax_disable_jit", previous)
