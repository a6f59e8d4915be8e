"""Celestial-to-intermediate matrix (GCRS -> CIRS).

The first stage of the CIO-based celestial-to-terrestrial transformation:

    [TRS] = RPOM @ Rz(ERA) @ RC2I @ [CRS]

RC2I rotates the Geocentric Celestial Reference System onto the Celestial
Intermediate Reference System, whose pole is the CIP and whose origin of
right ascension is the CIO.  It can be built from any of three equivalent
inputs:

- the CIP coordinates ``(x, y)`` and the CIO locator ``s``
  (:func:`c2ixys`);
- ``(x, y)`` alone, with ``s`` evaluated at the date (:func:`c2ixy`);
- a bias-precession-nutation matrix, whose bottom row is the CIP
  (:func:`c2ibpn`).

The model facades :func:`c2i00a`, :func:`c2i00b` and :func:`c2i06a` obtain
the inputs from :mod:`celestjax.evaluators`.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax._checks import as_matrix
from celestjax.config import get_dtype
from celestjax.evaluators import pnm00a, pnm00b, pnm06a, s00, s06
from celestjax.models import PrecessionNutationModel
from celestjax.rotations import Ry, Rz


def bpn2xy(rbpn: ArrayLike) -> tuple[Array, Array]:
    """Extract CIP X, Y coordinates from a bias-precession-nutation matrix.

    Args:
        rbpn: 3x3 bias-precession-nutation matrix.

    Returns:
        Tuple of (x, y) CIP coordinates.

    Raises:
        InvalidShapeError: If ``rbpn`` is not ``(3, 3)``.
    """
    rbpn = as_matrix(rbpn, "rbpn")
    return rbpn[2, 0], rbpn[2, 1]


def c2ixys(x: ArrayLike, y: ArrayLike, s: ArrayLike) -> Array:
    """Form the celestial-to-intermediate matrix given CIP X, Y and CIO locator s.

    Uses ``Rz(-(e+s)) @ Ry(d) @ Rz(e)`` where ``e = atan2(y, x)`` is the
    longitude of the CIP and ``d = arctan(sqrt((x^2 + y^2) / (1 - x^2 - y^2)))``
    its polar distance.  At the pole (``x = y = 0``) ``e`` and ``d`` are taken
    as zero and derivatives through them vanish.

    Args:
        x: CIP x coordinate.
        y: CIP y coordinate.
        s: CIO locator [rad].

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    dtype = get_dtype()
    x = jnp.asarray(x, dtype=dtype)
    y = jnp.asarray(y, dtype=dtype)

    r2 = x * x + y * y
    pole = r2 == 0.0
    e = jnp.where(pole, 0.0, jnp.arctan2(y, jnp.where(pole, 1.0, x)))
    d = jnp.where(pole, 0.0, jnp.arctan(jnp.sqrt(jnp.where(pole, 1.0, r2 / (1.0 - r2)))))

    return Rz(-(e + s)) @ Ry(d) @ Rz(e)


def c2ixy(date1: ArrayLike, date2: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """Form the celestial-to-intermediate matrix for a date when the CIP X, Y
    coordinates are known.  IAU 2000.

    The CIO locator s is evaluated at the date with the IAU 2000A-compatible
    series, so the date is needed even though X, Y are given.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP x coordinate.
        y: CIP y coordinate.

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    return c2ixys(x, y, s00(date1, date2, x, y))


def c2ibpn(date1: ArrayLike, date2: ArrayLike, rbpn: ArrayLike) -> Array:
    """Form the celestial-to-intermediate matrix for a date given the
    bias-precession-nutation matrix.  IAU 2000.

    Only the CIP (bottom row of ``rbpn``) is used.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        rbpn: 3x3 celestial-to-true matrix.

    Returns:
        3x3 celestial-to-intermediate matrix.

    Raises:
        InvalidShapeError: If ``rbpn`` is not ``(3, 3)``.
    """
    x, y = bpn2xy(rbpn)
    return c2ixy(date1, date2, x, y)


def c2i00a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Celestial-to-intermediate matrix, IAU 2000A precession-nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    return c2ibpn(date1, date2, pnm00a(date1, date2))


def c2i00b(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Celestial-to-intermediate matrix, IAU 2000B precession-nutation.

    Faster than :func:`c2i00a` but about 1 mas less accurate.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    return c2ibpn(date1, date2, pnm00b(date1, date2))


def c2i06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Celestial-to-intermediate matrix, IAU 2006 precession and IAU 2000A
    nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    x, y = bpn2xy(pnm06a(date1, date2))
    return c2ixys(x, y, s06(date1, date2, x, y))


_C2I = {
    PrecessionNutationModel.IAU2000A: c2i00a,
    PrecessionNutationModel.IAU2000B: c2i00b,
    PrecessionNutationModel.IAU2006A: c2i06a,
}


def celestial_to_intermediate(
    date1: ArrayLike,
    date2: ArrayLike,
    model: PrecessionNutationModel = PrecessionNutationModel.IAU2006A,
) -> Array:
    """Celestial-to-intermediate matrix for the selected model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        model: Precession-nutation model. Default: IAU 2006/2000A.

    Returns:
        3x3 celestial-to-intermediate matrix.

    Examples:
        ```python
        from celestjax.frames import celestial_to_intermediate
        from celestjax.models import PrecessionNutationModel
        rc2i = celestial_to_intermediate(2400000.5, 53736.0, PrecessionNutationModel.IAU2000B)
        rc2i.shape
        ```
    """
    return _C2I[PrecessionNutationModel(model)](date1, date2)


# ---------------------------------------------------------------------------
# Equation of the origins
# ---------------------------------------------------------------------------


def eors(rnpm: ArrayLike, s: ArrayLike) -> Array:
    """Equation of the origins, given the classical NPB matrix and s.

    The equation of the origins is the distance between the true equinox
    and the CIO, measured along the CIP equator, i.e. ``ERA - GST``.

    Args:
        rnpm: 3x3 classical nutation x precession x bias matrix.
        s: CIO locator [rad].

    Returns:
        Equation of the origins [rad].

    Raises:
        InvalidShapeError: If ``rnpm`` is not ``(3, 3)``.

    References:

        1. Wallace, P. & Capitaine, N., 2006, *Astron. Astrophys.* 459, 981.
    """
    rnpm = as_matrix(rnpm, "rnpm")
    s = jnp.asarray(s, dtype=get_dtype())

    # CIO direction in the true equator and equinox of date
    x = rnpm[2, 0]
    ax = x / (1.0 + rnpm[2, 2])
    xs = 1.0 - ax * x
    ys = -ax * rnpm[2, 1]
    zs = -x
    p = rnpm[0, 0] * xs + rnpm[0, 1] * ys + rnpm[0, 2] * zs
    q = rnpm[1, 0] * xs + rnpm[1, 1] * ys + rnpm[1, 2] * zs

    degenerate = (p == 0.0) & (q == 0.0)
    return jnp.where(degenerate, s, s - jnp.arctan2(q, jnp.where(degenerate, 1.0, p)))


def eo06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the origins, IAU 2006 precession and IAU 2000A nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the origins [rad].
    """
    r = pnm06a(date1, date2)
    x, y = bpn2xy(r)
    return eors(r, s06(date1, date2, x, y))
