"""Tests for the Pilot class."""

import unittest
from unittest.mock import Mock
from unittest.mock import patch

from controller.config import PilotConfig
from controller.config import parse_mission
from controller.heading_strategy import TackMemory
from controller.modes import NavigationMode
from controller.pilot import Pilot
from controller.utils import BoatTelemetry
from controller.utils import PilotCommand
from route_tracker.tracker import AdvanceStrategy
from route_tracker.waypoint import WayPoint


def telemetry(east, north, heading=0.0, apparent_wind_heading=0.0, true_wind_direction=180.0):
    return BoatTelemetry(
        boat_east=east,
        boat_north=north,
        heading=heading,
        apparent_wind_heading=apparent_wind_heading,
        true_wind_direction=true_wind_direction,
    )


class TestPilot(unittest.TestCase):
    """Tests for the Pilot class."""

    def setUp(self):
        self.waypoints = [
            WayPoint.from_coordinates(east=0.0, north=0.0, radius=5.0),
            WayPoint.from_coordinates(east=0.0, north=100.0, radius=5.0),
            WayPoint.from_coordinates(east=100.0, north=100.0, radius=5.0),
        ]
        self.logger = Mock()
        self.pilot = Pilot(self.waypoints, logger=self.logger)

    def test_initialization(self):
        self.assertEqual(self.pilot.tracker.index, 0)
        self.assertIsNone(self.pilot.mode)
        self.assertFalse(self.pilot.completed)
        self.assertEqual(self.pilot.config, PilotConfig())

    def test_running_start(self):
        """Boat on the first waypoint, leg heading north, wind from the south, apparent wind ahead."""
        command = self.pilot.step(telemetry(0.0, 0.0, apparent_wind_heading=0.0, true_wind_direction=180.0))

        self.assertTrue(self.waypoints[0].achieved)
        self.assertEqual(self.pilot.tracker.index, 1)
        self.assertEqual(self.pilot.mode, NavigationMode.RUNNING)
        self.assertEqual(self.pilot.leg_state.tack_memory.running, 1)
        self.assertIsNone(self.pilot.leg_state.tack_memory.beating)
        # wrap(1 * 145 - 0) = 145 -> turn rate clipped to 90 -> sin(90) = 1
        self.assertAlmostEqual(command.rudder, 1.0)
        self.assertEqual(command.sail, 0.0)
        self.assertEqual(command.action, "move")

    def test_mode_is_kept_for_the_whole_leg(self):
        self.pilot.step(telemetry(0.0, 0.0, true_wind_direction=180.0))
        self.assertEqual(self.pilot.mode, NavigationMode.RUNNING)

        # wind veers to dead ahead, the leg is still sailed as a run
        with patch("controller.pilot.classify") as mock_classify:
            self.pilot.step(telemetry(0.0, 10.0, true_wind_direction=0.0))
            mock_classify.assert_not_called()
        self.assertEqual(self.pilot.mode, NavigationMode.RUNNING)

    def test_leg_change_resets_leg_state(self):
        self.pilot.step(telemetry(0.0, 0.0, true_wind_direction=180.0))
        self.pilot.step(telemetry(-5.0, 50.0, true_wind_direction=180.0))
        self.assertEqual(self.pilot.leg_state.tack_memory.running, -1)

        # arrive at the second waypoint, next leg heads east with the wind from the south
        command = self.pilot.step(telemetry(0.0, 98.0, heading=0.0, true_wind_direction=180.0))

        self.assertEqual(self.pilot.tracker.index, 2)
        self.assertEqual(self.pilot.mode, NavigationMode.REACHING)
        self.assertIsNone(self.pilot.leg_state.tack_memory.running)
        self.assertIsNone(self.pilot.leg_state.tack_memory.beating)
        # bearing to (100, 100) is almost 90 degrees to starboard
        self.assertAlmostEqual(command.rudder, 1.0)

    def test_beating_leg(self):
        pilot = Pilot([WayPoint(0.0, 0.0, 10.0), WayPoint(0.0, 100.0, 10.0)])
        pilot.step(telemetry(0.0, 0.0, true_wind_direction=0.0))
        self.assertEqual(pilot.mode, NavigationMode.BEATING)

        # starboard of the line and outside the band -> tack to port side of the wind
        command = pilot.step(telemetry(5.0, 40.0, apparent_wind_heading=-45.0, true_wind_direction=0.0))
        self.assertEqual(pilot.leg_state.tack_memory.beating, -1)
        self.assertAlmostEqual(command.rudder, 0.0)

    def test_completion(self):
        pilot = Pilot([WayPoint(0.0, 0.0, 5.0)], logger=self.logger)
        command = pilot.step(telemetry(1.0, 1.0))

        self.assertTrue(pilot.completed)
        self.assertEqual(command, PilotCommand(rudder=0.0, sail=0.0))
        self.logger.info.assert_called()

        # every further tick is neutral
        self.assertEqual(pilot.step(telemetry(50.0, 50.0)).rudder, 0.0)

    def test_completion_after_last_leg(self):
        self.pilot.step(telemetry(0.0, 0.0))
        self.pilot.step(telemetry(0.0, 99.0))
        self.assertFalse(self.pilot.completed)
        command = self.pilot.step(telemetry(99.0, 100.0))
        self.assertTrue(self.pilot.completed)
        self.assertEqual(command.rudder, 0.0)
        self.assertTrue(all(waypoint.achieved for waypoint in self.waypoints))

    def test_incomplete_telemetry_is_rejected(self):
        with self.assertRaises(ValueError):
            self.pilot.step(BoatTelemetry(boat_east=0.0, boat_north=0.0))

    def test_sail_is_passed_through(self):
        pilot = Pilot(self.waypoints, PilotConfig(sail=0.3))
        self.assertEqual(pilot.step(telemetry(0.0, 50.0)).sail, 0.3)

    def test_nearest_strategy_from_config(self):
        pilot = Pilot(self.waypoints, PilotConfig(advance_strategy="nearest"))
        self.assertEqual(pilot.tracker.strategy, AdvanceStrategy.NEAREST)

    def test_nearest_advance_resets_leg_state(self):
        waypoints = [
            WayPoint(0.0, 0.0, 60.0),
            WayPoint(100.0, 0.0, 5.0),
            WayPoint(0.0, 60.0, 5.0),
        ]
        pilot = Pilot(waypoints, PilotConfig(advance_strategy="nearest"), logger=self.logger)

        # leg from the last waypoint down to the first one, wind from the north
        pilot.step(telemetry(0.0, 70.0, true_wind_direction=0.0))
        self.assertEqual(pilot.mode, NavigationMode.RUNNING)
        self.assertEqual(pilot.leg_state.tack_memory.running, 1)

        # inside the first waypoint, the third one is the closest
        command = pilot.step(telemetry(0.0, 50.0, true_wind_direction=0.0))

        self.assertEqual(pilot.tracker.index, 2)
        self.assertTrue(waypoints[0].achieved)
        self.assertFalse(waypoints[2].achieved)
        self.assertFalse(pilot.completed)
        self.assertEqual(pilot.mode, NavigationMode.REACHING)
        self.assertIsNone(pilot.leg_state.tack_memory.running)
        self.assertAlmostEqual(command.rudder, 0.0)

    def test_closed_course_first_leg(self):
        """Start and finish share a spot, so the first leg has no length."""
        pilot = Pilot([WayPoint(0.0, 0.0, 5.0), WayPoint(0.0, 100.0, 5.0), WayPoint(0.0, 0.0, 5.0)])

        command = pilot.step(telemetry(40.0, 0.0, heading=0.0, apparent_wind_heading=0.0, true_wind_direction=0.0))

        self.assertEqual(pilot.tracker.index, 0)
        self.assertEqual(pilot.mode, NavigationMode.REACHING)
        self.assertEqual(pilot.leg_state.tack_memory, TackMemory())
        # waypoint due west: 270 degrees to starboard, saturated
        self.assertAlmostEqual(command.rudder, 1.0)

        command = pilot.step(telemetry(30.0, 0.0, heading=250.0, apparent_wind_heading=-100.0, true_wind_direction=0.0))
        # 20 degrees to starboard -> sin(40)
        self.assertAlmostEqual(command.rudder, 0.6427876, places=6)

    def test_config_reaches_the_strategies(self):
        pilot = Pilot(self.waypoints, PilotConfig(optimal_running_angle=150.0, hysteresis_factor=0.5))
        running = pilot.strategies[NavigationMode.RUNNING]
        self.assertEqual(running.optimal_apparent_wind_angle, 150.0)
        self.assertEqual(running.hysteresis_factor, 0.5)

    def test_nan_propagates_to_rudder(self):
        pilot = Pilot(self.waypoints)
        pilot.step(telemetry(0.0, 0.0))
        command = pilot.step(telemetry(0.0, 10.0, apparent_wind_heading=float("nan")))
        self.assertNotEqual(command.rudder, command.rudder)

    def test_from_mission(self):
        mission = parse_mission({
            "waypoints": [
                {"east": 0.0, "north": 0.0, "radius": 5.0},
                {"east": 0.0, "north": 100.0, "radius": 5.0},
            ],
            "pilot": {"sail": 0.5},
        })
        first = Pilot.from_mission(mission)
        second = Pilot.from_mission(mission)

        first.step(telemetry(0.0, 0.0))
        self.assertEqual(first.tracker.index, 1)
        self.assertEqual(first.config.sail, 0.5)

        # pilots share nothing
        self.assertEqual(second.tracker.index, 0)
        self.assertFalse(second.tracker.waypoints[0].achieved)
        self.assertIsNone(second.mode)


if __name__ == "__main__":
    unittest.main()
