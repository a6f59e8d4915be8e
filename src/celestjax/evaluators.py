"""Precession-nutation series evaluators.

The IAU 2000A/2000B nutation series, the IAU 2006 Fukushima-Williams
bias-precession-nutation matrix, the CIO locator series and the complementary
terms of the equation of the equinoxes are long tabulated series.  celestjax
does not re-derive them; it evaluates them with the ERFA C library through
`pyerfa <https://pypi.org/project/pyerfa/>`_ and composes the results.

Each evaluator is staged into JAX with :func:`jax.pure_callback`, so the
frame routines built on top of them work inside ``jax.jit`` and
``jax.vmap``.  ERFA always computes in double precision: arguments are
staged as float64 whatever the configured dtype, and only the results are
cast to :func:`~celestjax.config.get_dtype`.

Both parts of every two-part Julian Date are handed to ERFA separately, so
no resolution is lost by summing them on the way in.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import erfa
import jax
import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from celestjax.config import get_dtype
from celestjax.models import PrecessionNutationModel

logger = logging.getLogger(__name__)

_SCALAR: tuple[int, ...] = ()
_MATRIX: tuple[int, ...] = (3, 3)


def _evaluate(fn: Callable, shapes: tuple[tuple[int, ...], ...], *args: ArrayLike):
    """Evaluate an ERFA routine as a JAX pure callback.

    Args:
        fn: ERFA routine taking float64 NumPy arguments.
        shapes: Shape of each value returned by ``fn`` (per unbatched call).
        *args: Scalar arguments.

    Returns:
        A single ``jax.Array`` if ``shapes`` has one entry, else a tuple.
    """
    dtype = get_dtype()
    result_shapes = tuple(jax.ShapeDtypeStruct(shape, dtype) for shape in shapes)

    def _host(*host_args):
        out = fn(*(np.asarray(a, dtype=np.float64) for a in host_args))
        if len(shapes) == 1:
            out = (out,)
        return tuple(np.asarray(o, dtype=dtype) for o in out)

    logger.debug("Staging ERFA evaluator %s", fn.__name__)
    args = [jnp.asarray(a, dtype=jnp.float64) for a in args]
    result = jax.pure_callback(_host, result_shapes, *args, vmap_method="sequential")

    if len(shapes) == 1:
        return result[0]
    return result


# ---------------------------------------------------------------------------
# Nutation
# ---------------------------------------------------------------------------


def nut00a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000A model (MHB2000 luni-solar and planetary).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    return _evaluate(erfa.nut00a, (_SCALAR, _SCALAR), date1, date2)


def nut00b(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000B model (truncated 77-term luni-solar series).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    return _evaluate(erfa.nut00b, (_SCALAR, _SCALAR), date1, date2)


def nut06a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2006/2000A (IAU 2000A with the P03 adjustments).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    return _evaluate(erfa.nut06a, (_SCALAR, _SCALAR), date1, date2)


def pr00(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Precession-rate part of the IAU 2000 precession-nutation models.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsipr, depspr) corrections in longitude and obliquity
        [radians].
    """
    return _evaluate(erfa.pr00, (_SCALAR, _SCALAR), date1, date2)


def obl80(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 1980 model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.
    """
    return _evaluate(erfa.obl80, (_SCALAR,), date1, date2)


def eect00(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Complementary terms of the equation of the equinoxes, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Complementary terms in radians.
    """
    return _evaluate(erfa.eect00, (_SCALAR,), date1, date2)


# ---------------------------------------------------------------------------
# Bias-precession-nutation matrices
# ---------------------------------------------------------------------------


def pn00(date1: ArrayLike, date2: ArrayLike, dpsi: ArrayLike, deps: ArrayLike) -> tuple[Array, Array]:
    """IAU 2000 bias-precession-nutation matrix from given nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude [radians].
        deps: Nutation in obliquity [radians].

    Returns:
        Tuple ``(epsa, rbpn)``: mean obliquity of date corrected for the
        IAU 2000 precession rates [radians], and the 3x3 GCRS-to-true matrix.
    """

    def _pn00(d1, d2, dp, de):
        epsa, _rb, _rp, _rbp, _rn, rbpn = erfa.pn00(d1, d2, dp, de)
        return epsa, rbpn

    _pn00.__name__ = "pn00"
    return _evaluate(_pn00, (_SCALAR, _MATRIX), date1, date2, dpsi, deps)


def pnm00a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Bias-precession-nutation matrix, IAU 2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 GCRS-to-true matrix.
    """
    return _evaluate(erfa.pnm00a, (_MATRIX,), date1, date2)


def pnm00b(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Bias-precession-nutation matrix, IAU 2000B.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 GCRS-to-true matrix.
    """
    return _evaluate(erfa.pnm00b, (_MATRIX,), date1, date2)


def pnm06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Bias-precession-nutation matrix, IAU 2006/2000A.

    Formed from the Fukushima-Williams precession angles with the
    IAU 2006/2000A nutation added.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 GCRS-to-true matrix.
    """
    return _evaluate(erfa.pnm06a, (_MATRIX,), date1, date2)


_BPN_MATRIX = {
    PrecessionNutationModel.IAU2000A: pnm00a,
    PrecessionNutationModel.IAU2000B: pnm00b,
    PrecessionNutationModel.IAU2006A: pnm06a,
}


def bpn_matrix(
    date1: ArrayLike,
    date2: ArrayLike,
    model: PrecessionNutationModel = PrecessionNutationModel.IAU2006A,
) -> Array:
    """Bias-precession-nutation matrix for the selected model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        model: Precession-nutation model. Default: IAU 2006/2000A.

    Returns:
        3x3 GCRS-to-true matrix.
    """
    model = PrecessionNutationModel(model)
    logger.debug("Resolved BPN evaluator for %s", model.name)
    return _BPN_MATRIX[model](date1, date2)


# ---------------------------------------------------------------------------
# CIO locator
# ---------------------------------------------------------------------------


def s00(date1: ArrayLike, date2: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """CIO locator s, compatible with IAU 2000A precession-nutation.

    The underlying series is for ``s + XY/2``; the returned value is s
    itself.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP x coordinate.
        y: CIP y coordinate.

    Returns:
        CIO locator s in radians.
    """
    return _evaluate(erfa.s00, (_SCALAR,), date1, date2, x, y)


def s06(date1: ArrayLike, date2: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """CIO locator s, compatible with IAU 2006/2000A precession-nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP x coordinate.
        y: CIP y coordinate.

    Returns:
        CIO locator s in radians.
    """
    return _evaluate(erfa.s06, (_SCALAR,), date1, date2, x, y)
