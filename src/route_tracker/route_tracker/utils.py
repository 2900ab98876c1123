"""Planar geometry helpers used by the tracker and the heading controller.

All positions are ``(east, north)`` in meters and all bearings are nautical
degrees: ``0`` is north, clockwise positive.
"""

from typing import NamedTuple
from typing import cast
import numpy as np

from route_tracker.waypoint import Position


class BearingAndDistance(NamedTuple):
    heading: float
    distance: float


def wrap_degrees(angle: float) -> float:
    """Wraps an angle into the interval (-180, 180] degrees.

    Non-finite input is passed through as ``nan``.
    """
    wrapped = angle % 360
    if wrapped > 180:
        wrapped -= 360
    return cast(float, wrapped)


def bearing(start: Position, end: Position) -> float:
    """Returns the bearing from the start location to the end location.

    Args:
        start: The start location
        end: The end location

    Returns:
        float: The bearing from the start location to the end location, ranged from 0 to 360 degrees
    """
    delta_east = end.east - start.east
    delta_north = end.north - start.north

    angle_rad = np.arctan2(delta_east, delta_north)
    angle_deg = np.degrees(angle_rad)
    bearing_deg = angle_deg % 360

    return float(bearing_deg)


def bearing_and_distance(start: Position, end: Position) -> BearingAndDistance:
    """Returns the bearing and the Euclidean distance from start to end."""
    return BearingAndDistance(bearing(start, end), start.distance(end))


def angular_distance(angle1: float, angle2: float) -> float:
    """Calculate the angular distance between two angles.

    Args:
        angle1: First angle in degrees
        angle2: Second angle in degrees

    Returns:
        float: The angular distance in degrees, in [0, 180]
    """
    return abs(wrap_degrees(angle2 - angle1))


def is_zero_length_leg(start: Position, end: Position) -> bool:
    """True if both ends of a leg are at the same spot, so the leg has no direction."""
    return start.east == end.east and start.north == end.north


def _cross(point: Position, line_a: Position, line_b: Position) -> float:
    # z component of (a - b) x (p - b); positive when p lies left of the direction b -> a
    dx = line_a.east - line_b.east  # pylint: disable=invalid-name
    dy = line_a.north - line_b.north  # pylint: disable=invalid-name
    return dx * (point.north - line_b.north) - dy * (point.east - line_b.east)


def side_of_line(point: Position, line_a: Position, line_b: Position) -> int:
    """Returns on which side of the directed line ``line_b -> line_a`` the point lies.

    The route calls this with ``line_a`` the current waypoint and ``line_b`` the
    previous one, so the line points along the leg.

    Args:
        point: The point to classify
        line_a: The end of the line (the waypoint being steered to)
        line_b: The start of the line

    Returns:
        int: ``+1`` for the starboard (right-hand) side or a point on the line, ``-1`` for port
    """
    return -1 if _cross(point, line_a, line_b) > 0 else 1


def perpendicular_distance(point: Position, line_a: Position, line_b: Position) -> float:
    """Calculate the orthogonal distance from a point to the infinite line through two points.

    If both line points coincide the distance to that point is returned.

    Args:
        point: The point to measure distance from
        line_a: A point of the line
        line_b: Another point of the line

    Returns:
        float: The orthogonal distance in meters, always >= 0
    """
    length = line_a.distance(line_b)
    if length == 0:
        return point.distance(line_a)
    return abs(_cross(point, line_a, line_b)) / length
