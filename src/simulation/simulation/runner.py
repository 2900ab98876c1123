"""Runs a pilot against the kinematic boat, headless."""

import argparse
from dataclasses import dataclass
from dataclasses import field
import logging

from controller.config import load_mission
from controller.modes import NavigationMode
from controller.pilot import Pilot
from route_tracker.exceptions import MissionConfigError
from route_tracker.waypoint import Position
from simulation.kinematic_boat import KinematicBoat
from simulation.kinematic_boat import Wind


_logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Track of one simulation run, one entry per step."""
    positions: list[Position] = field(default_factory=list)
    headings: list[float] = field(default_factory=list)
    rudders: list[float] = field(default_factory=list)
    modes: list[NavigationMode | None] = field(default_factory=list)
    waypoint_indices: list[int] = field(default_factory=list)
    completed: bool = False

    @property
    def steps(self) -> int:
        return len(self.rudders)


def run_simulation(
    pilot: Pilot,
    boat: KinematicBoat,
    wind: Wind,
    dt: float = 0.1,
    max_steps: int = 10000,
    logger=None,
) -> SimulationResult:
    """
    Step the pilot and the boat until the route is completed or ``max_steps`` is reached.

    Args:
        pilot: The pilot steering the boat.
        boat: The simulated boat, updated in place.
        wind: Constant true wind.
        dt: Time step in seconds.
        max_steps: Upper bound on the number of steps.

    Returns:
        The recorded track.
    """
    logger = logger or _logger
    result = SimulationResult()

    for step in range(max_steps):
        command = pilot.step(boat.telemetry(wind))

        result.positions.append(boat.position)
        result.headings.append(boat.heading)
        result.rudders.append(command.rudder)
        result.modes.append(pilot.mode)
        result.waypoint_indices.append(pilot.tracker.index)

        if pilot.completed:
            logger.info(f"Route completed after {step} steps ({step * dt:.1f} s)")
            result.completed = True
            break

        boat.step(command.rudder, wind, dt)
    else:
        logger.warning(f"Route not completed after {max_steps} steps, stopped at waypoint {pilot.tracker.index}")

    return result


def main(args=None):
    """Entry point of the ``sailing_simulation`` command."""
    parser = argparse.ArgumentParser(description='Sail a mission with the kinematic boat.')
    parser.add_argument('mission', help='YAML mission file')
    parser.add_argument('--east', type=float, default=0.0, help='Boat start east (m)')
    parser.add_argument('--north', type=float, default=0.0, help='Boat start north (m)')
    parser.add_argument('--heading', type=float, default=0.0, help='Boat start heading (deg)')
    parser.add_argument('--wind-direction', type=float, default=0.0, help='Wind FROM direction (deg)')
    parser.add_argument('--wind-speed', type=float, default=4.0, help='Wind speed (m/s)')
    parser.add_argument('--dt', type=float, default=0.1, help='Time step (s)')
    parser.add_argument('--max-steps', type=int, default=20000)
    parser.add_argument('--log-level', default='INFO')
    options = parser.parse_args(args)

    logging.basicConfig(level=options.log_level.upper(), format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        mission = load_mission(options.mission)
    except MissionConfigError as e:
        _logger.error(str(e))
        return 1

    pilot = Pilot.from_mission(mission)
    boat = KinematicBoat(Position(options.east, options.north), heading=options.heading)
    wind = Wind(direction=options.wind_direction, speed=options.wind_speed)

    result = run_simulation(pilot, boat, wind, dt=options.dt, max_steps=options.max_steps)
    _logger.info(
        f"Sailed {result.steps} steps, reached waypoint {pilot.tracker.index} of {len(pilot.tracker.waypoints)}, "
        f"completed={result.completed}"
    )
    return 0 if result.completed else 2


if __name__ == '__main__':
    raise SystemExit(main())
