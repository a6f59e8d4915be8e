"""Coordinate representations.

Conversions between Cartesian p-vectors, spherical angles, and
position/velocity (pv) pairs:

- :func:`c2s` / :func:`s2c`: direction <-> ``(theta, phi)``
- :func:`p2s` / :func:`s2p`: position <-> ``(theta, phi, r)``
- :func:`p2pv` / :func:`pv2p`: position <-> pv-vector with zero velocity
"""

from .spherical import (
    c2s,
    p2pv,
    p2s,
    pv2p,
    s2c,
    s2p,
)

__all__ = [
    "c2s",
    "s2c",
    "p2s",
    "s2p",
    "p2pv",
    "pv2p",
]
