"""Calendar and epoch conversions feeding two-part Julian Dates.

Every routine in celestjax takes dates as two-part Julian Dates
``(date1, date2)`` whose sum is the JD.  The split is arbitrary; these
helpers produce the conventional ``(2400000.5, MJD)`` split.

:func:`cal2jd` validates its arguments and raises, so it runs on the host
with plain Python integers and is not JAX-traceable.  The epoch conversions
are ordinary array arithmetic and work under ``jax.jit``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import D1900, DJ00, DJM0, DJM00, DJM1900, DJY, DTY
from .errors import BadDayError, BadMonthError, BadYearError

# Earliest year accepted by cal2jd. The algorithm itself is valid from
# -4800 March 1.
_IYMIN = -4799

_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def cal2jd(year: int, month: int, day: int) -> tuple[float, float]:
    """Convert a Gregorian calendar date to a two-part Julian Date.

    The conversion is from the proleptic Gregorian calendar; no account is
    taken of the historical adoption dates, and years are numbered
    astronomically (year 0 is 1 BC).

    Args:
        year (int): Year, -4799 or later.
        month (int): Month, 1..12.
        day (int): Day of month.

    Returns:
        tuple[float, float]: ``(djm0, djm)`` where ``djm0`` is always
            ``2400000.5`` and ``djm`` is the Modified Julian Date at 0 hrs.

    Raises:
        BadYearError: If ``year`` is before -4799.
        BadMonthError: If ``month`` is not in 1..12.
        BadDayError: If ``day`` is not valid for the month.

    Examples:
        ```python
        from celestjax.time import cal2jd
        cal2jd(2003, 6, 1)
        # (2400000.5, 52791.0)
        ```

    References:

        1. P. K. Seidelmann (ed.), *Explanatory Supplement to the Astronomical
           Almanac*, University Science Books, 1992, Section 12.92 (p. 604).
    """
    year = int(year)
    month = int(month)
    day = int(day)

    if year < _IYMIN:
        raise BadYearError(f"bad year: {year} (must be {_IYMIN} or later)")

    if month < 1 or month > 12:
        raise BadMonthError(f"bad month: {month} (must be 1..12)")

    n_days = _MONTH_LENGTHS[month - 1] + int(month == 2 and _is_leap_year(year))
    if day < 1 or day > n_days:
        raise BadDayError(f"bad day: {day} (month {month} of {year} has {n_days} days)")

    # January and February count as months 13 and 14 of the previous year.
    # All integer divisions below have non-negative operands for year >= -4799.
    my = -1 if month <= 2 else 0
    iypmy = year + my
    djm = (
        (1461 * (iypmy + 4800)) // 4
        + (367 * (month - 2 - 12 * my)) // 12
        - (3 * ((iypmy + 4900) // 100)) // 4
        + day
        - 2432076
    )

    return DJM0, float(djm)


def epj(dj1: ArrayLike, dj2: ArrayLike) -> jax.Array:
    """Convert a two-part Julian Date to a Julian epoch.

    Args:
        dj1 (ArrayLike): Julian Date, part 1.
        dj2 (ArrayLike): Julian Date, part 2.

    Returns:
        Julian epoch, e.g. ``2000.0`` at J2000.0.
    """
    dj1 = jnp.asarray(dj1, dtype=get_dtype())
    dj2 = jnp.asarray(dj2, dtype=get_dtype())
    return 2000.0 + ((dj1 - DJ00) + dj2) / DJY


def epj2jd(epj: ArrayLike) -> tuple[float, jax.Array]:
    """Convert a Julian epoch to a two-part Julian Date.

    Args:
        epj (ArrayLike): Julian epoch, e.g. ``1996.8``.

    Returns:
        tuple: ``(djm0, djm)`` with ``djm0 = 2400000.5`` and ``djm`` the MJD.
    """
    epj = jnp.asarray(epj, dtype=get_dtype())
    return DJM0, DJM00 + (epj - 2000.0) * DJY


def epb(dj1: ArrayLike, dj2: ArrayLike) -> jax.Array:
    """Convert a two-part Julian Date to a Besselian epoch.

    Args:
        dj1 (ArrayLike): Julian Date, part 1.
        dj2 (ArrayLike): Julian Date, part 2.

    Returns:
        Besselian epoch, e.g. ``1950.0`` at B1950.0.
    """
    dj1 = jnp.asarray(dj1, dtype=get_dtype())
    dj2 = jnp.asarray(dj2, dtype=get_dtype())
    return 1900.0 + ((dj1 - DJ00) + (dj2 + D1900)) / DTY


def epb2jd(epb: ArrayLike) -> tuple[float, jax.Array]:
    """Convert a Besselian epoch to a two-part Julian Date.

    Args:
        epb (ArrayLike): Besselian epoch, e.g. ``1957.3``.

    Returns:
        tuple: ``(djm0, djm)`` with ``djm0 = 2400000.5`` and ``djm`` the MJD.
    """
    epb = jnp.asarray(epb, dtype=get_dtype())
    return DJM0, DJM1900 + (epb - 1900.0) * DTY
