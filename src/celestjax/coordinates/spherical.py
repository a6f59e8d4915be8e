"""Cartesian and spherical representations of direction and position.

Converts between p-vectors ``[x, y, z]``, spherical coordinates
``(theta, phi)`` / ``(theta, phi, r)``, and pv-vectors (position and
velocity stacked as a ``(2, 3)`` array).

``theta`` is the longitude-like angle measured in the x-y plane from the
x-axis towards the y-axis, and ``phi`` is the latitude-like angle above the
x-y plane, both in *rad*.  All conversions are closed form.

Singularities are resolved without raising:

- a null vector maps to ``theta = phi = 0``;
- a vector along the z-axis maps to ``theta = 0``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax._checks import as_pv, as_vector
from celestjax.config import get_dtype


def c2s(p: ArrayLike) -> tuple[Array, Array]:
    """P-vector to spherical coordinates.

    Only the direction of ``p`` is used; it may have any magnitude.

    Args:
        p: Vector ``[x, y, z]``.

    Returns:
        tuple[jax.Array, jax.Array]: ``(theta, phi)`` in *rad*.  ``theta`` is
            in ``(-pi, pi]`` and ``phi`` in ``[-pi/2, pi/2]``.

    Raises:
        InvalidShapeError: If ``p`` is not shape ``(3,)``.

    Example:
        >>> from celestjax.coordinates import c2s
        >>> theta, phi = c2s([0.0, 0.0, 5.0])
        >>> float(theta), round(float(phi), 6)
        (0.0, 1.570796)
    """
    p = as_vector(p, "p")

    x = p[0]
    y = p[1]
    z = p[2]
    d2 = x * x + y * y

    # Substitute a benign argument where the angle is undefined so that
    # gradients through the unused branch stay finite.
    pole = d2 == 0.0
    theta = jnp.where(pole, 0.0, jnp.arctan2(y, jnp.where(pole, 1.0, x)))
    rho = jnp.where(pole, 0.0, jnp.sqrt(jnp.where(pole, 1.0, d2)))
    equator = z == 0.0
    phi = jnp.where(equator, 0.0, jnp.arctan2(jnp.where(equator, 1.0, z), rho))

    return theta, phi


def s2c(theta: ArrayLike, phi: ArrayLike) -> Array:
    """Spherical coordinates to a unit p-vector.

    Args:
        theta: Longitude angle [rad].
        phi: Latitude angle [rad].

    Returns:
        jax.Array: Unit vector ``[x, y, z]``.
    """
    theta = jnp.asarray(theta, dtype=get_dtype())
    phi = jnp.asarray(phi, dtype=get_dtype())

    cp = jnp.cos(phi)
    return jnp.array([jnp.cos(theta) * cp, jnp.sin(theta) * cp, jnp.sin(phi)])


def p2s(p: ArrayLike) -> tuple[Array, Array, Array]:
    """P-vector to spherical polar coordinates.

    Args:
        p: Vector ``[x, y, z]``.

    Returns:
        tuple[jax.Array, jax.Array, jax.Array]: ``(theta, phi, r)`` with the
            angles in *rad* and ``r`` the modulus of ``p``.
    """
    p = as_vector(p, "p")
    theta, phi = c2s(p)
    r = jnp.sqrt(jnp.sum(p * p))
    return theta, phi, r


def s2p(theta: ArrayLike, phi: ArrayLike, r: ArrayLike) -> Array:
    """Spherical polar coordinates to a p-vector.

    Args:
        theta: Longitude angle [rad].
        phi: Latitude angle [rad].
        r: Radial distance.

    Returns:
        jax.Array: Vector ``[x, y, z]``.
    """
    return jnp.asarray(r, dtype=get_dtype()) * s2c(theta, phi)


def p2pv(p: ArrayLike) -> Array:
    """Extend a p-vector to a pv-vector by appending a zero velocity.

    Args:
        p: Position ``[x, y, z]``.

    Returns:
        jax.Array: pv-vector of shape ``(2, 3)``; row 0 is ``p``, row 1 zeros.
    """
    p = as_vector(p, "p")
    return jnp.stack([p, jnp.zeros_like(p)])


def pv2p(pv: ArrayLike) -> Array:
    """Discard the velocity component of a pv-vector.

    Args:
        pv: pv-vector of shape ``(2, 3)``.

    Returns:
        jax.Array: Position ``[x, y, z]``.
    """
    pv = as_pv(pv, "pv")
    return pv[0]
