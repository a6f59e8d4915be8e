"""
The `constants` module defines the mathematical and time constants used by the
fundamental-astrometry routines.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
DAS2R = 4.848136811095359935899141e-6

"""
Constant to convert radians to arcseconds. Units: *as/rad*
"""
DR2AS = 206264.8062470963551564734

"""
Full circle. Units: *rad*
"""
D2PI = 6.283185307179586476925287

"""
Arcseconds in a full circle. Units: *as*
"""
TURNAS = 1296000.0

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
DJ00 = 2451545.0

"""
Modified Julian Date zero-point, i.e. the Julian Date of MJD 0. Units: *days*
"""
DJM0 = 2400000.5

"""
Modified Julian Date of the J2000.0 epoch. Units: *days*
"""
DJM00 = 51544.5

"""
Days per Julian century. Units: *days*
"""
DJC = 36525.0

"""
Days per Julian year. Units: *days*
"""
DJY = 365.25

"""
Days per tropical year (Besselian epochs). Units: *days*
"""
DTY = 365.242198781

"""
Offset of Besselian epoch B1900.0 from J2000.0, as a Julian Date difference. Units: *days*
"""
D1900 = 36524.68648

"""
Modified Julian Date of Besselian epoch B1900.0. Units: *days*
"""
DJM1900 = 15019.81352
