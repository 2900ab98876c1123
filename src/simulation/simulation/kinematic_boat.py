"""
Kinematic sailboat used to exercise the pilot without a physics engine.

The boat turns at a rate proportional to the rudder and moves along its heading at the speed
given by the estimators. There are no forces, no inertia and no leeway.
"""

from dataclasses import dataclass

import numpy as np

from controller.utils import BoatTelemetry
from route_tracker.utils import wrap_degrees
from route_tracker.waypoint import Position
from simulation.estimators import estimate_roll
from simulation.estimators import estimate_speed


@dataclass
class Wind:
    """Wind conditions."""
    direction: float  # Wind coming FROM this direction (degrees, 0 = North)
    speed: float  # m/s


@dataclass
class ApparentWind:
    """Wind as felt on the moving boat."""
    heading: float  # relative to the boat, degrees in (-180, 180], positive over port
    speed: float  # m/s


def get_wind_vector(wind: Wind) -> np.ndarray:
    """Get wind velocity vector ``[east, north]`` (direction wind is blowing TO, not FROM)."""
    direction = np.radians(wind.direction)
    return np.array([
        -wind.speed * np.sin(direction),
        -wind.speed * np.cos(direction),
    ])


@dataclass
class KinematicBoat:
    """Current state of the simulated boat."""
    position: Position
    heading: float = 0.0  # degrees, 0 = North
    speed: float = 0.0  # m/s
    roll: float = 0.0  # degrees
    max_turn_rate: float = 30.0  # degrees per second at full rudder

    def velocity(self) -> np.ndarray:
        heading = np.radians(self.heading)
        return np.array([self.speed * np.sin(heading), self.speed * np.cos(heading)])

    def apparent_wind(self, wind: Wind) -> ApparentWind:
        """Apparent wind (true wind minus boat velocity) relative to the boat heading."""
        apparent = get_wind_vector(wind) - self.velocity()
        speed = float(np.linalg.norm(apparent))
        # direction the apparent wind comes FROM
        from_direction = np.degrees(np.arctan2(-apparent[0], -apparent[1]))
        return ApparentWind(heading=wrap_degrees(self.heading - from_direction), speed=speed)

    def step(self, rudder: float, wind: Wind, dt: float) -> None:
        """Advance the boat by ``dt`` seconds with the given rudder command in [-1, 1]."""
        self.heading = (self.heading + rudder * self.max_turn_rate * dt) % 360

        apparent = self.apparent_wind(wind)
        self.roll = estimate_roll(dt, apparent.speed, apparent.heading, self.roll)
        self.speed = estimate_speed(dt, apparent.speed, apparent.heading, self.roll)
        self.position, _ = self.position.translate(self.heading, self.speed * dt)

    def telemetry(self, wind: Wind) -> BoatTelemetry:
        apparent = self.apparent_wind(wind)
        return BoatTelemetry(
            boat_east=self.position.east,
            boat_north=self.position.north,
            heading=self.heading,
            apparent_wind_heading=apparent.heading,
            true_wind_direction=wind.direction,
            apparent_wind_speed=apparent.speed,
            true_wind_speed=wind.speed,
            roll=self.roll,
            speed=self.speed,
        )
