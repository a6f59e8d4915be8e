"""Celestial-to-terrestrial matrix (GCRS -> ITRS).

Assembles the full rotation from celestial to terrestrial coordinates,
``[TRS] = RC2T @ [CRS]``, by either of two equivalent routes:

- **CIO based** (IAU 2000/2006 preferred):
  ``RC2T = RPOM @ Rz(ERA) @ RC2I``
- **Equinox based** (classical, for GST-referred ephemerides and catalogues):
  ``RC2T = RPOM @ Rz(GST) @ RBPN``

:func:`c2tcio` and :func:`c2teqx` assemble precomputed components.  They are
the routines to call repeatedly when only the Earth's rotation changes, for
example during a tracking pass::

    rc2i = c2i06a(tta, ttb)                 # once
    rpom = pom00(xp, yp, sp00(tta, ttb))    # once
    for uta, utb in epochs:
        rc2t = c2tcio(rc2i, era00(uta, utb), rpom)

The facades :func:`c2t00a`, :func:`c2t00b`, :func:`c2t06a`, :func:`c2tpe`
and :func:`c2txy` go straight from dates and pole coordinates to RC2T.  All
routines are pure and work under ``jax.jit`` and ``jax.vmap``.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from celestjax._checks import as_matrix
from celestjax.earth_rotation import ee00, era00, gmst00
from celestjax.evaluators import pn00
from celestjax.frames.intermediate import c2i00a, c2i00b, c2i06a, c2ixy
from celestjax.frames.polar_motion import pom00, sp00
from celestjax.models import PrecessionNutationModel
from celestjax.rotations import Rz


def _assemble(rpom: Array, angle: ArrayLike, r: Array) -> Array:
    return rpom @ (Rz(angle) @ r)


# ---------------------------------------------------------------------------
# Assemblers
# ---------------------------------------------------------------------------


def c2tcio(rc2i: ArrayLike, era: ArrayLike, rpom: ArrayLike) -> Array:
    """Assemble the celestial-to-terrestrial matrix from CIO-based components.

    ``RC2T = rpom @ Rz(era) @ rc2i``

    Args:
        rc2i: 3x3 celestial-to-intermediate matrix.
        era: Earth Rotation Angle [rad].
        rpom: 3x3 polar motion matrix.

    Returns:
        3x3 celestial-to-terrestrial matrix.

    Raises:
        InvalidShapeError: If ``rc2i`` or ``rpom`` is not ``(3, 3)``.
    """
    rc2i = as_matrix(rc2i, "rc2i")
    rpom = as_matrix(rpom, "rpom")
    return _assemble(rpom, era, rc2i)


def c2teqx(rbpn: ArrayLike, gst: ArrayLike, rpom: ArrayLike) -> Array:
    """Assemble the celestial-to-terrestrial matrix from equinox-based components.

    ``RC2T = rpom @ Rz(gst) @ rbpn``

    Args:
        rbpn: 3x3 celestial-to-true (bias-precession-nutation) matrix.
        gst: Greenwich (apparent) Sidereal Time [rad].
        rpom: 3x3 polar motion matrix.

    Returns:
        3x3 celestial-to-terrestrial matrix.

    Raises:
        InvalidShapeError: If ``rbpn`` or ``rpom`` is not ``(3, 3)``.
    """
    rbpn = as_matrix(rbpn, "rbpn")
    rpom = as_matrix(rpom, "rpom")
    return _assemble(rpom, gst, rbpn)


# ---------------------------------------------------------------------------
# Model facades
# ---------------------------------------------------------------------------


def c2t00a(
    tta: ArrayLike,
    ttb: ArrayLike,
    uta: ArrayLike,
    utb: ArrayLike,
    xp: ArrayLike,
    yp: ArrayLike,
) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2000A nutation model.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Polar motion x-coordinate [rad].
        yp: Polar motion y-coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2i00a(tta, ttb)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2tcio(rc2i, era, rpom)


def c2t00b(
    tta: ArrayLike,
    ttb: ArrayLike,
    uta: ArrayLike,
    utb: ArrayLike,
    xp: ArrayLike,
    yp: ArrayLike,
) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2000B nutation model.

    About 1 mas less accurate than :func:`c2t00a`.  The TIO locator s' is
    neglected, consistent with that accuracy.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Polar motion x-coordinate [rad].
        yp: Polar motion y-coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2i00b(tta, ttb)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, 0.0)
    return c2tcio(rc2i, era, rpom)


def c2t06a(
    tta: ArrayLike,
    ttb: ArrayLike,
    uta: ArrayLike,
    utb: ArrayLike,
    xp: ArrayLike,
    yp: ArrayLike,
) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2006 precession and IAU 2000A
    nutation models.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Polar motion x-coordinate [rad].
        yp: Polar motion y-coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.

    Examples:
        ```python
        from celestjax.frames import c2t06a
        rc2t = c2t06a(2400000.5, 53736.0, 2400000.5, 53736.0, 2.55060238e-7, 1.860359247e-6)
        rc2t.shape
        ```
    """
    rc2i = c2i06a(tta, ttb)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2tcio(rc2i, era, rpom)


def c2tpe(
    tta: ArrayLike,
    ttb: ArrayLike,
    uta: ArrayLike,
    utb: ArrayLike,
    dpsi: ArrayLike,
    deps: ArrayLike,
    xp: ArrayLike,
    yp: ArrayLike,
) -> Array:
    """Celestial-to-terrestrial matrix given the nutation.  IAU 2000.

    Equinox-based: the caller supplies the nutation components, from which
    the bias-precession-nutation matrix and the equation of the equinoxes
    are formed.  GST is GMST (IAU 2000) plus the equation of the equinoxes.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude [rad].
        deps: Nutation in obliquity [rad].
        xp: Polar motion x-coordinate [rad].
        yp: Polar motion y-coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    epsa, rbpn = pn00(tta, ttb, dpsi, deps)
    gmst = gmst00(uta, utb, tta, ttb)
    ee = ee00(tta, ttb, epsa, dpsi)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2teqx(rbpn, gmst + ee, rpom)


def c2txy(
    tta: ArrayLike,
    ttb: ArrayLike,
    uta: ArrayLike,
    utb: ArrayLike,
    x: ArrayLike,
    y: ArrayLike,
    xp: ArrayLike,
    yp: ArrayLike,
) -> Array:
    """Celestial-to-terrestrial matrix given the CIP coordinates.  IAU 2000.

    CIO-based: the caller supplies the CIP ``(x, y)``, e.g. from an IERS
    series with the celestial pole offsets already applied.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        x: CIP x coordinate.
        y: CIP y coordinate.
        xp: Polar motion x-coordinate [rad].
        yp: Polar motion y-coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2ixy(tta, ttb, x, y)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2tcio(rc2i, era, rpom)


_C2T = {
    PrecessionNutationModel.IAU2000A: c2t00a,
    PrecessionNutationModel.IAU2000B: c2t00b,
    PrecessionNutationModel.IAU2006A: c2t06a,
}


def celestial_to_terrestrial(
    tta: ArrayLike,
    ttb: ArrayLike,
    uta: ArrayLike,
    utb: ArrayLike,
    xp: ArrayLike,
    yp: ArrayLike,
    model: PrecessionNutationModel = PrecessionNutationModel.IAU2006A,
) -> Array:
    """Celestial-to-terrestrial matrix for the selected model.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Polar motion x-coordinate [rad].
        yp: Polar motion y-coordinate [rad].
        model: Precession-nutation model. Default: IAU 2006/2000A.

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    return _C2T[PrecessionNutationModel(model)](tta, ttb, uta, utb, xp, yp)
