import jax.numpy as jnp
import pytest

from celestjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that exercise other precisions (e.g. test_config.py) change the
    dtype themselves; this fixture restores the default for everything else.
    """
    set_dtype(jnp.float64)
