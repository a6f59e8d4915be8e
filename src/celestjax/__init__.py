"""
celestjax computes celestial-to-terrestrial reference frame transformations
(IAU 2000A, 2000B and 2006/2000A) in JAX.
"""

from .config import set_dtype, get_dtype

from .constants import (
    DEG2RAD,
    RAD2DEG,
    DAS2R,
    DR2AS,
    D2PI,
    DJ00,
    DJM0,
    DJM00,
    DJC,
    DJY,
)

from .errors import (
    CelestjaxError,
    InvalidShapeError,
    CalendarError,
    BadYearError,
    BadMonthError,
    BadDayError,
)

from .models import PrecessionNutationModel

from .rotations import (
    Rx,
    Ry,
    Rz,
    identity,
    rotate_x,
    rotate_y,
    rotate_z,
    multiply,
    transpose,
    rotate_vector,
    rotate_vector_transpose,
    is_rotation_matrix,
)

from .coordinates import (
    c2s,
    s2c,
    p2s,
    s2p,
    p2pv,
    pv2p,
)

from .time import (
    cal2jd,
    epb,
    epb2jd,
    epj,
    epj2jd,
)

from .earth_rotation import (
    anp,
    anpm,
    era00,
    gmst00,
    gmst06,
    ee00,
    ee00a,
    ee00b,
    gst00a,
    gst00b,
    gst06,
    gst06a,
    ee06a,
)

from .frames import (
    bpn2xy,
    c2ixys,
    c2ixy,
    c2ibpn,
    c2i00a,
    c2i00b,
    c2i06a,
    celestial_to_intermediate,
    eors,
    eo06a,
    sp00,
    pom00,
    c2tcio,
    c2teqx,
    c2t00a,
    c2t00b,
    c2t06a,
    c2tpe,
    c2txy,
    celestial_to_terrestrial,
)
