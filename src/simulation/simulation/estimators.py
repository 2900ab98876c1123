"""
Environment estimators for a simulated boat.

Empirical fits of the roll and the speed of the boat as a function of the apparent wind. They
are not a physical model, only enough to move a simulated boat in a plausible way.

Unit conventions:
    Angles in DEGREES, speeds in m/s, time in seconds
"""

import numpy as np


ROLL_COEFFICIENT = -8.365469590752099
SPEED_SLOPE = -1.113
SPEED_OFFSET = 0.0151


def estimate_roll(dt: float, apparent_wind_speed: float, apparent_wind_heading: float, roll: float) -> float:
    """
    Estimate the roll of the boat.

    Args:
        dt: Time step in seconds (not used, kept for interface consistency).
        apparent_wind_speed: Apparent wind speed in m/s.
        apparent_wind_heading: Apparent wind heading relative to the boat in degrees.
        roll: Current roll in degrees (not used).

    Returns:
        Estimated roll in degrees.
    """
    return float(ROLL_COEFFICIENT * apparent_wind_speed * np.sin(np.radians(apparent_wind_heading)))


def estimate_speed(dt: float, apparent_wind_speed: float, apparent_wind_heading: float, roll: float) -> float:
    """
    Estimate the speed of the boat through the water.

    Fastest with the wind abeam, zero with the wind straight ahead or straight behind. Heeling
    reduces the speed.

    Args:
        dt: Time step in seconds (not used, kept for interface consistency).
        apparent_wind_speed: Apparent wind speed in m/s.
        apparent_wind_heading: Apparent wind heading relative to the boat in degrees.
        roll: Current roll in degrees.

    Returns:
        Estimated speed in m/s, never negative.
    """
    return float(abs(
        np.sin(np.radians(apparent_wind_heading))
        * (SPEED_SLOPE * apparent_wind_speed + SPEED_OFFSET)
        * np.cos(np.radians(roll))
    ))
