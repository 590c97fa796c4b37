#!/usr/bin/env python
#
# Angle normalization and great circle geometry on a sphere.
# All angles are in decimal degrees.
#

import math

from sacformat.core import sac_h

PROG_VERSION = '2026.292'


def degrees_to_radians(degrees):
    return degrees * sac_h.RAD_PER_DEG


def radians_to_degrees(radians):
    return radians * sac_h.DEG_PER_RAD


def limit_360(degrees):
    """
    Reduce an angle by whole turns, then make it non negative.
    """
    result = degrees
    while result > sac_h.CIRCLE_DEG:
        result -= sac_h.CIRCLE_DEG
    while result < -sac_h.CIRCLE_DEG:
        result += sac_h.CIRCLE_DEG
    if result < 0.0:
        result += sac_h.CIRCLE_DEG
    return result


def limit_180(degrees):
    """
    Longitude range, (-180, 180]
    """
    if -180.0 < degrees <= 180.0:
        return degrees
    result = limit_360(degrees)
    if result > 180.0:
        result -= sac_h.CIRCLE_DEG
    return result


def limit_90(degrees):
    """
    Latitude range, [-90, 90]. Angles past a pole are reflected back.
    """
    if -90.0 <= degrees <= 90.0:
        return degrees
    result = limit_180(degrees)
    if result > 90.0:
        result = 180.0 - result
    elif result < -90.0:
        result = -180.0 - result
    return result


def gcarc(lat1, lon1, lat2, lon2):
    """
    Great circle arc between two points, spherical law of cosines.
    :returns: arc in degrees
    """
    phi1 = degrees_to_radians(lat1)
    phi2 = degrees_to_radians(lat2)
    dlambda = degrees_to_radians(lon2 - lon1)
    cos_arc = (math.sin(phi1) * math.sin(phi2) +
               math.cos(phi1) * math.cos(phi2) * math.cos(dlambda))
    # Rounding can push the cosine just outside [-1, 1]
    cos_arc = max(-1.0, min(1.0, cos_arc))
    return radians_to_degrees(math.acos(cos_arc))


great_circle_distance = gcarc


def azimuth(lat1, lon1, lat2, lon2):
    """
    Forward azimuth from point 1 towards point 2, clockwise from north.
    :returns: degrees in [0, 360]
    """
    phi1 = degrees_to_radians(lat1)
    phi2 = degrees_to_radians(lat2)
    dlambda = degrees_to_radians(lon2 - lon1)
    numerator = math.sin(dlambda) * math.cos(phi2)
    denominator = (math.cos(phi1) * math.sin(phi2) -
                   math.sin(phi1) * math.cos(phi2) * math.cos(dlambda))
    return limit_360(radians_to_degrees(math.atan2(numerator, denominator)))
