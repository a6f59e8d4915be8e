"""Polar motion: TIRS -> ITRS.

The polar motion matrix carries the Terrestrial Intermediate Reference
System onto the International Terrestrial Reference System.  It is built
from the pole coordinates ``(xp, yp)`` published by the IERS and the TIO
locator s', which positions the Terrestrial Intermediate Origin on the
equator of the CIP.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax.config import get_dtype
from celestjax.constants import DAS2R, DJ00, DJC
from celestjax.rotations import Rx, Ry, Rz


def sp00(date1: ArrayLike, date2: ArrayLike) -> Array:
    """TIO locator s', positioning the Terrestrial Intermediate Origin.

    Only the secular drift is modelled, ``s' = -47 uas * t`` with t in
    Julian centuries of TT since J2000.0.  The periodic terms are below
    1 uas.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        TIO locator s' in radians.
    """
    dtype = get_dtype()
    date1 = jnp.asarray(date1, dtype=dtype)
    date2 = jnp.asarray(date2, dtype=dtype)

    t = ((date1 - DJ00) + date2) / DJC
    return -47e-6 * t * DAS2R


def pom00(xp: ArrayLike, yp: ArrayLike, sp: ArrayLike) -> Array:
    """Form the polar motion matrix (TIRS -> ITRS).

    The matrix is ``Rx(-yp) @ Ry(-xp) @ Rz(sp)``.

    Args:
        xp: Polar motion x-component (radians, positive towards Greenwich).
        yp: Polar motion y-component (radians, positive towards 90W).
        sp: TIO locator s' (radians).

    Returns:
        3x3 polar motion matrix.
    """
    return Rx(-jnp.asarray(yp)) @ Ry(-jnp.asarray(xp)) @ Rz(sp)
