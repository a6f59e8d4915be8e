"""Precession-nutation model selection.

The top-level facades accept a :class:`PrecessionNutationModel` and resolve
it to a concrete routine through a fixed lookup table.  The model is a
Python value resolved at trace time, never a traced array.
"""

from __future__ import annotations

import enum


class PrecessionNutationModel(enum.Enum):
    """Precession-nutation model fidelity.

    Attributes:
        IAU2000A: IAU 2000 precession with the full IAU 2000A nutation series
            (1365 terms). Highest accuracy of the 2000 models.
        IAU2000B: IAU 2000 precession with the truncated IAU 2000B nutation
            series (77 terms). About 1 mas less accurate, much faster.
        IAU2006A: IAU 2006 precession with IAU 2000A nutation (P03-adjusted).
            The current IAU standard.
    """

    IAU2000A = "iau2000a"
    IAU2000B = "iau2000b"
    IAU2006A = "iau2006a"
