"""Earth Rotation Angle and Greenwich sidereal time.

Two measures of the Earth's rotation about the CIP:

- the **Earth Rotation Angle** (ERA), a linear function of UT1 used by the
  CIO-based transformation;
- **Greenwich Sidereal Time** (GMST, and GST = GMST + equation of the
  equinoxes), the equinox-based measure used with classical
  bias-precession-nutation matrices.  The IAU 2006 GST is formed from the
  ERA and the equation of the origins instead.

All angles are in radians; ERA and sidereal times are normalised to
``[0, 2pi)``.  ERA and GMST are closed-form polynomials evaluated in JAX;
the equation of the equinoxes needs nutation and its complementary terms,
which come from :mod:`celestjax.evaluators`.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax.config import get_dtype
from celestjax.constants import D2PI, DAS2R, DJ00, DJC
from celestjax.evaluators import eect00, nut00a, nut00b, obl80, pnm06a, pr00, s06


def anp(a: ArrayLike) -> Array:
    """Normalize angle into the range ``0 <= a < 2pi``.

    Args:
        a: Angle [rad].

    Returns:
        Angle in range ``[0, 2pi)``.
    """
    w = jnp.fmod(a, D2PI)
    return jnp.where(w < 0.0, w + D2PI, w)


def anpm(a: ArrayLike) -> Array:
    """Normalize angle into the range ``-pi <= a < pi``.

    Args:
        a: Angle [rad].

    Returns:
        Angle in range ``[-pi, pi)``.
    """
    w = jnp.fmod(a, D2PI)
    return jnp.where(jnp.abs(w) >= jnp.pi, w - jnp.copysign(D2PI, a), w)


def _centuries(date1: Array, date2: Array) -> Array:
    """Julian centuries since J2000.0 from a two-part date."""
    return ((date1 - DJ00) + date2) / DJC


# ---------------------------------------------------------------------------
# Earth Rotation Angle
# ---------------------------------------------------------------------------


def era00(dj1: ArrayLike, dj2: ArrayLike) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    The fractional days of the two date parts are taken separately, so the
    result keeps full precision whatever the split.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Earth Rotation Angle in radians, ``[0, 2pi)``.

    References:

        1. IERS Conventions (2003), Chapter 5, eq. 14.
    """
    dtype = get_dtype()
    dj1 = jnp.asarray(dj1, dtype=dtype)
    dj2 = jnp.asarray(dj2, dtype=dtype)

    # Smaller part first to preserve precision in the day count
    d1 = jnp.minimum(dj1, dj2)
    d2 = jnp.maximum(dj1, dj2)
    t = d1 + (d2 - DJ00)

    # Fractional part of T (days)
    f = jnp.fmod(d1, 1.0) + jnp.fmod(d2, 1.0)

    return anp(D2PI * (f + 0.7790572732640 + 0.00273781191135448 * t))


# ---------------------------------------------------------------------------
# Greenwich Mean Sidereal Time
# ---------------------------------------------------------------------------


def gmst00(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich Mean Sidereal Time, consistent with IAU 2000 resolutions.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        GMST in radians, ``[0, 2pi)``.
    """
    dtype = get_dtype()
    t = _centuries(jnp.asarray(tta, dtype=dtype), jnp.asarray(ttb, dtype=dtype))

    poly = (
        0.014506
        + (4612.15739966 + (1.39667721 + (-0.00009344 + (0.00001882) * t) * t) * t) * t
    ) * DAS2R

    return anp(era00(uta, utb) + poly)


def gmst06(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich Mean Sidereal Time, consistent with IAU 2006 precession.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        GMST in radians, ``[0, 2pi)``.
    """
    dtype = get_dtype()
    t = _centuries(jnp.asarray(tta, dtype=dtype), jnp.asarray(ttb, dtype=dtype))

    poly = (
        0.014506
        + (
            4612.156534
            + (1.3915817 + (-0.00000044 + (-0.000029956 + (-0.0000000368) * t) * t) * t) * t
        )
        * t
    ) * DAS2R

    return anp(era00(uta, utb) + poly)


# ---------------------------------------------------------------------------
# Equation of the equinoxes
# ---------------------------------------------------------------------------


def ee00(date1: ArrayLike, date2: ArrayLike, epsa: ArrayLike, dpsi: ArrayLike) -> Array:
    """Equation of the equinoxes, compatible with IAU 2000 resolutions,
    given the nutation in longitude and the mean obliquity.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        epsa: Mean obliquity [rad].
        dpsi: Nutation in longitude [rad].

    Returns:
        Equation of the equinoxes [rad].
    """
    dtype = get_dtype()
    epsa = jnp.asarray(epsa, dtype=dtype)
    dpsi = jnp.asarray(dpsi, dtype=dtype)

    # Equation of the equinoxes plus the complementary terms
    return dpsi * jnp.cos(epsa) + eect00(date1, date2)


def ee00a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000A nutation.

    The mean obliquity is the IAU 1980 value corrected for the IAU 2000
    precession rate.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes [rad].
    """
    _dpsipr, depspr = pr00(date1, date2)
    epsa = obl80(date1, date2) + depspr
    dpsi, _deps = nut00a(date1, date2)
    return ee00(date1, date2, epsa, dpsi)


def ee00b(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000B nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes [rad].
    """
    _dpsipr, depspr = pr00(date1, date2)
    epsa = obl80(date1, date2) + depspr
    dpsi, _deps = nut00b(date1, date2)
    return ee00(date1, date2, epsa, dpsi)


# ---------------------------------------------------------------------------
# Greenwich Apparent Sidereal Time
# ---------------------------------------------------------------------------


def gst00a(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich Apparent Sidereal Time, IAU 2000A.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        GST in radians, ``[0, 2pi)``.
    """
    return anp(gmst00(uta, utb, tta, ttb) + ee00a(tta, ttb))


def gst00b(uta: ArrayLike, utb: ArrayLike) -> Array:
    """Greenwich Apparent Sidereal Time, IAU 2000B.

    UT1 stands in for TT in the precession and nutation terms, which costs
    well under 1 mas over the present era.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).

    Returns:
        GST in radians, ``[0, 2pi)``.
    """
    return anp(gmst00(uta, utb, uta, utb) + ee00b(uta, utb))


def gst06(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike, rnpb: ArrayLike) -> Array:
    """Greenwich Apparent Sidereal Time given the NPB matrix, IAU 2006.

    GST is the Earth Rotation Angle less the equation of the origins, with
    the origins located from ``rnpb`` and the IAU 2006 CIO locator.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        rnpb: 3x3 nutation x precession x bias matrix.

    Returns:
        GST in radians, ``[0, 2pi)``.

    Raises:
        InvalidShapeError: If ``rnpb`` is not ``(3, 3)``.
    """
    from celestjax.frames.intermediate import bpn2xy, eors

    x, y = bpn2xy(rnpb)
    return anp(era00(uta, utb) - eors(rnpb, s06(tta, ttb, x, y)))


def gst06a(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich Apparent Sidereal Time, IAU 2006 precession and IAU 2000A
    nutation.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        GST in radians, ``[0, 2pi)``.
    """
    return gst06(uta, utb, tta, ttb, pnm06a(tta, ttb))


def ee06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2006 precession and IAU 2000A nutation.

    Formed as ``GST - GMST`` with both evaluated at UT1 = 0, where the
    Earth Rotation Angle cancels.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes [rad], ``[-pi, pi)``.
    """
    gst = gst06a(0.0, 0.0, date1, date2)
    gmst = gmst06(0.0, 0.0, date1, date2)
    return anpm(gst - gmst)
