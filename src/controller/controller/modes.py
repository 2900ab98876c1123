"""Classifies the wind/leg geometry into a sailing regime."""

from enum import Enum

from route_tracker.utils import angular_distance
from route_tracker.utils import bearing
from route_tracker.utils import is_zero_length_leg
from route_tracker.waypoint import Position


RUNNING_THRESHOLD = 125.0
REACHING_THRESHOLD = 55.0


class NavigationMode(str, Enum):
    """Sailing regime for a leg.

    RUNNING: wind from behind, the boat gybes down the leg.
    REACHING: wind from the side, the boat sails straight to the waypoint.
    BEATING: wind from ahead, the boat tacks up the leg.
    """

    RUNNING = "running"
    REACHING = "reaching"
    BEATING = "beating"


def classify(
    previous: Position,
    current: Position,
    true_wind_direction: float,
    running_threshold: float = RUNNING_THRESHOLD,
    reaching_threshold: float = REACHING_THRESHOLD,
) -> NavigationMode:
    """Returns the sailing regime for the leg from ``previous`` to ``current``.

    Args:
        previous: Start of the leg
        current: The waypoint the leg leads to
        true_wind_direction: Direction the true wind comes from, in degrees
        running_threshold: Smallest wind/leg angle that counts as running
        reaching_threshold: Smallest wind/leg angle that counts as reaching

    Returns:
        NavigationMode: The regime, lower bounds are inclusive. A leg of zero length (``previous``
        at the same spot as ``current``, e.g. the first leg of a closed course) has no heading and
        is sailed as a reach, straight at the waypoint.
    """
    if is_zero_length_leg(previous, current):
        return NavigationMode.REACHING

    leg_heading = bearing(previous, current)
    diff_angle = angular_distance(leg_heading, true_wind_direction)

    if diff_angle >= running_threshold:
        return NavigationMode.RUNNING
    if diff_angle >= reaching_threshold:
        return NavigationMode.REACHING
    return NavigationMode.BEATING
