"""Celestial-to-terrestrial frame transformations.

This sub-module provides the rotation matrices that carry vectors from the
Geocentric Celestial Reference System to the International Terrestrial
Reference System:

- **Intermediate frame** (GCRS -> CIRS): the celestial-to-intermediate matrix
  from a BPN matrix, from CIP ``(x, y)``, or from a precession-nutation model.
- **Polar motion** (TIRS -> ITRS): TIO locator and polar motion matrix.
- **Terrestrial frame** (GCRS -> ITRS): CIO-based and equinox-based
  assemblers, and model facades going straight from dates to the matrix.
"""

from .intermediate import (
    bpn2xy,
    c2i00a,
    c2i00b,
    c2i06a,
    c2ibpn,
    c2ixy,
    c2ixys,
    celestial_to_intermediate,
    eo06a,
    eors,
)
from .polar_motion import (
    pom00,
    sp00,
)
from .terrestrial import (
    c2t00a,
    c2t00b,
    c2t06a,
    c2tcio,
    c2teqx,
    c2tpe,
    c2txy,
    celestial_to_terrestrial,
)

__all__ = [
    # GCRS -> CIRS
    "bpn2xy",
    "c2ixys",
    "c2ixy",
    "c2ibpn",
    "c2i00a",
    "c2i00b",
    "c2i06a",
    "celestial_to_intermediate",
    # Equation of the origins
    "eors",
    "eo06a",
    # TIRS -> ITRS
    "sp00",
    "pom00",
    # GCRS -> ITRS assemblers
    "c2tcio",
    "c2teqx",
    # GCRS -> ITRS facades
    "c2t00a",
    "c2t00b",
    "c2t06a",
    "c2tpe",
    "c2txy",
    "celestial_to_terrestrial",
]
