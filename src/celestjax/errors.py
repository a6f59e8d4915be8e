"""Exception types raised by celestjax.

The numerical routines have no runtime failure path: malformed numbers
propagate as NaN/Inf.  Only two conditions are signalled:

- :class:`InvalidShapeError`: a matrix or vector argument of the wrong
  shape, rejected before any computation.
- :class:`CalendarError` and its subclasses: an out-of-range Gregorian
  calendar date passed to :func:`celestjax.time.cal2jd`.

All of them derive from :class:`ValueError`, so callers that already catch
``ValueError`` keep working.
"""

from __future__ import annotations


class CelestjaxError(Exception):
    """Base class for all celestjax errors."""


class InvalidShapeError(CelestjaxError, ValueError):
    """An array argument does not have the shape the routine requires.

    Attributes:
        name: Name of the offending argument.
        expected: Required shape.
        actual: Shape that was supplied.
    """

    def __init__(self, name: str, expected: tuple[int, ...], actual: tuple[int, ...]) -> None:
        self.name = name
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(f"{name} must have shape {self.expected}, got {self.actual}")


class CalendarError(CelestjaxError, ValueError):
    """A Gregorian calendar date is outside the supported range."""


class BadYearError(CalendarError):
    """Year is before -4799."""


class BadMonthError(CalendarError):
    """Month is outside 1..12."""


class BadDayError(CalendarError):
    """Day is outside the valid range for the month."""
