"""Rotation-matrix primitives.

Elementary rotations and the handful of matrix operations the frame
pipeline is built from.  Matrices are ``(3, 3)`` arrays in row-major order
and act on column vectors, ``v_out = R @ v_in``.  NumPy and JAX both store
row-major, so no transposition happens anywhere in celestjax.

The elementary rotations follow the SOFA/ERFA sign convention: a positive
angle rotates the *coordinate frame* anticlockwise as seen looking towards
the origin from the positive axis, so ``Rz(a) @ [1, 0, 0]`` has a negative
y-component for small positive ``a``.

``rotate_x``/``rotate_y``/``rotate_z`` are the functional counterparts of
the SOFA ``iauRx``/``iauRy``/``iauRz`` routines: rather than modifying the
matrix in place they return ``R_axis(angle) @ r``, i.e. the new rotation is
applied after the one already represented by ``r``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax._checks import as_matrix, as_vector
from celestjax.config import get_dtype, get_orthogonality_tolerance


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Angle of rotation of the coordinate frame.
        use_degrees (bool): Interpret ``angle`` as degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    if use_degrees:
        angle = jnp.deg2rad(angle)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[ one, zero, zero],
                      [zero,   +c,   +s],
                      [zero,   -s,   +c]])


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle (ArrayLike): Angle of rotation of the coordinate frame.
        use_degrees (bool): Interpret ``angle`` as degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    if use_degrees:
        angle = jnp.deg2rad(angle)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[  +c, zero,   -s],
                      [zero,  one, zero],
                      [  +s, zero,   +c]])


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Angle of rotation of the coordinate frame.
        use_degrees (bool): Interpret ``angle`` as degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    if use_degrees:
        angle = jnp.deg2rad(angle)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[  +c,   +s, zero],
                      [  -s,   +c, zero],
                      [zero, zero,  one]])


def identity() -> Array:
    """Return the 3x3 identity matrix in the configured dtype."""
    return jnp.eye(3, dtype=get_dtype())


def rotate_x(r: ArrayLike, phi: ArrayLike) -> Array:
    """Apply a further rotation about the x-axis to a rotation matrix.

    Args:
        r: Rotation matrix, shape ``(3, 3)``.
        phi: Angle [rad].

    Returns:
        ``Rx(phi) @ r``.

    Raises:
        InvalidShapeError: If ``r`` is not ``(3, 3)``.
    """
    r = as_matrix(r, "r")
    return Rx(phi) @ r


def rotate_y(r: ArrayLike, theta: ArrayLike) -> Array:
    """Apply a further rotation about the y-axis to a rotation matrix.

    Args:
        r: Rotation matrix, shape ``(3, 3)``.
        theta: Angle [rad].

    Returns:
        ``Ry(theta) @ r``.

    Raises:
        InvalidShapeError: If ``r`` is not ``(3, 3)``.
    """
    r = as_matrix(r, "r")
    return Ry(theta) @ r


def rotate_z(r: ArrayLike, psi: ArrayLike) -> Array:
    """Apply a further rotation about the z-axis to a rotation matrix.

    Args:
        r: Rotation matrix, shape ``(3, 3)``.
        psi: Angle [rad].

    Returns:
        ``Rz(psi) @ r``.

    Raises:
        InvalidShapeError: If ``r`` is not ``(3, 3)``.
    """
    r = as_matrix(r, "r")
    return Rz(psi) @ r


def multiply(a: ArrayLike, b: ArrayLike) -> Array:
    """Product of two rotation matrices, ``a @ b``.

    ``b`` is applied to a vector first.

    Raises:
        InvalidShapeError: If either argument is not ``(3, 3)``.
    """
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    return a @ b


def transpose(r: ArrayLike) -> Array:
    """Transpose (inverse) of a rotation matrix."""
    r = as_matrix(r, "r")
    return r.T


def rotate_vector(r: ArrayLike, p: ArrayLike) -> Array:
    """Rotate a p-vector, ``r @ p``.

    Args:
        r: Rotation matrix, shape ``(3, 3)``.
        p: Vector, shape ``(3,)``.

    Returns:
        Rotated vector, shape ``(3,)``.
    """
    r = as_matrix(r, "r")
    p = as_vector(p, "p")
    return r @ p


def rotate_vector_transpose(r: ArrayLike, p: ArrayLike) -> Array:
    """Rotate a p-vector by the inverse of a rotation matrix, ``r.T @ p``.

    Args:
        r: Rotation matrix, shape ``(3, 3)``.
        p: Vector, shape ``(3,)``.

    Returns:
        Rotated vector, shape ``(3,)``.
    """
    r = as_matrix(r, "r")
    p = as_vector(p, "p")
    return r.T @ p


def is_rotation_matrix(r: ArrayLike) -> Array:
    """Check that ``r`` is a proper rotation: ``r @ r.T == I`` and ``det(r) == 1``.

    Comparisons use :func:`~celestjax.config.get_orthogonality_tolerance`,
    so the check adapts to the configured float dtype.

    Args:
        r: Candidate matrix, shape ``(3, 3)``.

    Returns:
        Boolean scalar array.

    Raises:
        InvalidShapeError: If ``r`` is not ``(3, 3)``.
    """
    r = as_matrix(r, "r")
    eps = get_orthogonality_tolerance()
    orthogonal = jnp.all(jnp.abs(r @ r.T - jnp.eye(3, dtype=r.dtype)) < eps)
    return orthogonal & (jnp.abs(jnp.linalg.det(r) - 1.0) < eps)
