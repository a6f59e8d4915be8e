"""Argument shape validation shared by the public routines.

Shapes are static under ``jax.jit``, so these checks run at trace time and
never enter the compiled program.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax.config import get_dtype
from celestjax.errors import InvalidShapeError

MATRIX_SHAPE = (3, 3)
VECTOR_SHAPE = (3,)
PV_SHAPE = (2, 3)


def as_shaped(value: ArrayLike, shape: tuple[int, ...], name: str) -> Array:
    """Convert *value* to an array of the configured dtype with a fixed shape.

    Args:
        value: Array-like input.
        shape: Required shape.
        name: Argument name used in the error message.

    Returns:
        The input as a ``jax.Array`` of ``get_dtype()``.

    Raises:
        InvalidShapeError: If the shape of *value* is not *shape*.
    """
    actual = jnp.shape(value)
    if actual != shape:
        raise InvalidShapeError(name, shape, actual)
    return jnp.asarray(value, dtype=get_dtype())


def as_matrix(value: ArrayLike, name: str = "r") -> Array:
    return as_shaped(value, MATRIX_SHAPE, name)


def as_vector(value: ArrayLike, name: str = "p") -> Array:
    return as_shaped(value, VECTOR_SHAPE, name)


def as_pv(value: ArrayLike, name: str = "pv") -> Array:
    return as_shaped(value, PV_SHAPE, name)
