#!/usr/bin/env python3
"""
Script to sail a route with the pilot and the kinematic boat and plot the track.

Adjust the constants below to set:
- Boat starting position and heading
- Wind conditions
- Route waypoints
"""

import logging

import matplotlib.pyplot as plt
import numpy as np

from controller.config import PilotConfig
from controller.modes import NavigationMode
from controller.pilot import Pilot
from route_tracker.waypoint import Position
from route_tracker.waypoint import WayPoint
from simulation.kinematic_boat import KinematicBoat
from simulation.kinematic_boat import Wind
from simulation.runner import run_simulation

# =============================================================================
# CONFIGURATION - Adjust these values as needed
# =============================================================================

# Boat starting position (meters) and heading (degrees)
BOAT_EAST = -10.0
BOAT_NORTH = -10.0
BOAT_HEADING = 90.0

# Wind settings
WIND_ANGLE = 0.1   # degrees [0, 360), 0 = from North, 90 = from East
WIND_SPEED = 4.0    # m/s

# Route waypoints as list of (east, north, radius) tuples (meters)
WAYPOINTS = [
    (-10.0, -10.0, 5.0),
    (60.0, -10.0, 5.0),
    (60.0, 60.0, 5.0),
    (-10.0, 60.0, 5.0),
    (-10.0, -10.0, 5.0),
]

ADVANCE_STRATEGY = "sequential"
TIME_STEP = 0.1  # seconds
MAX_STEPS = 20000
OUTPUT_FILE = "simulation_track.png"

MODE_COLORS = {
    NavigationMode.RUNNING: "tab:green",
    NavigationMode.REACHING: "tab:blue",
    NavigationMode.BEATING: "tab:red",
    None: "gray",
}

# =============================================================================
# END CONFIGURATION
# =============================================================================


def plot_track(result, waypoints: list[WayPoint], file_name: str) -> None:
    track = np.array([position.to_numpy() for position in result.positions])

    plt.figure(figsize=(8, 8))
    plt.subplot(2, 1, 1)
    for mode, color in MODE_COLORS.items():
        mask = np.array([m == mode for m in result.modes])
        if mask.any():
            label = mode.value if mode is not None else "unset"
            plt.scatter(track[mask, 0], track[mask, 1], s=1, c=color, label=label)

    for waypoint in waypoints:
        plt.gca().add_patch(plt.Circle((waypoint.east, waypoint.north), waypoint.radius, fill=False))
    plt.plot([w.east for w in waypoints], [w.north for w in waypoints], "k--", alpha=0.4)

    plt.axis("equal")
    plt.legend()
    plt.title(f"Track, wind from {WIND_ANGLE}° @ {WIND_SPEED} m/s")
    plt.xlabel("East (m)")
    plt.ylabel("North (m)")

    plt.subplot(2, 1, 2)
    plt.plot(result.rudders)
    plt.title("Rudder Commands Over Time")
    plt.xlabel("Time Step")
    plt.ylabel("Rudder [-1, 1]")

    plt.tight_layout()
    plt.savefig(file_name)
    plt.close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Sailing Pilot Simulation")
    print("=" * 60)
    print(f"Boat position: ({BOAT_EAST}, {BOAT_NORTH}), heading {BOAT_HEADING}°")
    print(f"Wind: {WIND_ANGLE} deg @ {WIND_SPEED} m/s")
    print(f"Waypoints: {WAYPOINTS}")
    print("=" * 60)

    waypoints = [WayPoint(east, north, radius) for east, north, radius in WAYPOINTS]
    pilot = Pilot(waypoints, PilotConfig(advance_strategy=ADVANCE_STRATEGY))
    boat = KinematicBoat(Position(BOAT_EAST, BOAT_NORTH), heading=BOAT_HEADING)
    wind = Wind(direction=WIND_ANGLE, speed=WIND_SPEED)

    result = run_simulation(pilot, boat, wind, dt=TIME_STEP, max_steps=MAX_STEPS)

    print(f"\nSteps: {result.steps}, completed: {result.completed}")
    plot_track(result, waypoints, OUTPUT_FILE)
    print(f"Track written to {OUTPUT_FILE}")


if __name__ == "__main__":
    main()
