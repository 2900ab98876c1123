"""The control loop: one call per telemetry tick, one rudder command back."""

from __future__ import annotations

import logging

from controller.config import MissionConfig
from controller.config import PilotConfig
from controller.heading_strategy import BeatingStrategy
from controller.heading_strategy import HeadingContext
from controller.heading_strategy import HeadingStrategy
from controller.heading_strategy import LegState
from controller.heading_strategy import ReachingStrategy
from controller.heading_strategy import RunningStrategy
from controller.modes import NavigationMode
from controller.modes import classify
from controller.rudder import RudderMapper
from controller.utils import BoatTelemetry
from controller.utils import PilotCommand
from route_tracker.exceptions import IndexExhaustedError
from route_tracker.tracker import WaypointTracker
from route_tracker.waypoint import WayPoint


_logger = logging.getLogger(__name__)


class Pilot:
    """Steers one boat along a route.

    Each tick runs ``status -> [advance] -> classify (if unset) -> heading strategy -> rudder``
    to completion. The pilot owns the tracker and the leg state (cached regime and tack memory);
    nothing is shared between pilots, so several boats can be simulated in one process.

    Args:
        waypoints (list[WayPoint]): The route in navigation order.
        config (PilotConfig): Pilot parameters, defaults are used if omitted.
        logger: Optional logger, the module logger is used otherwise.
    """

    def __init__(self, waypoints: list[WayPoint], config: PilotConfig | None = None, logger=None) -> None:
        self.config = config or PilotConfig()
        self.logger = logger or _logger
        self.tracker = WaypointTracker(waypoints, strategy=self.config.advance_strategy, logger=self.logger)
        self.leg_state = LegState()
        self.rudder_mapper = RudderMapper(
            turn_rate_gain=self.config.turn_rate_gain,
            max_turn_rate=self.config.max_turn_rate,
        )
        self.strategies: dict[NavigationMode, HeadingStrategy] = {
            NavigationMode.RUNNING: RunningStrategy(
                self.config.optimal_running_angle, self.config.hysteresis_factor, self.logger
            ),
            NavigationMode.REACHING: ReachingStrategy(self.logger),
            NavigationMode.BEATING: BeatingStrategy(
                self.config.optimal_beating_angle, self.config.hysteresis_factor, self.logger
            ),
        }

    @classmethod
    def from_mission(cls, mission: MissionConfig, logger=None) -> Pilot:
        return cls(mission.route(), mission.pilot, logger=logger)

    @property
    def completed(self) -> bool:
        return self.tracker.completed

    @property
    def mode(self) -> NavigationMode | None:
        return self.leg_state.mode

    def neutral_command(self) -> PilotCommand:
        return PilotCommand(rudder=0.0, sail=self.config.sail)

    def step(self, telemetry: BoatTelemetry) -> PilotCommand:
        """Computes the command for one tick.

        Raises:
            ValueError: If the telemetry misses a reading the pilot needs.
        """
        if not telemetry.is_complete():
            raise ValueError("Telemetry is incomplete, cannot compute a command.")

        if self.tracker.completed:
            return self.neutral_command()

        position = telemetry.position
        status = self.tracker.status(position)

        # 1. Check if we have reached the waypoint, if yes, move on and start a fresh leg
        if status.achieved:
            try:
                status = self.tracker.advance(position)
            except IndexExhaustedError:
                self.logger.info("Reached final waypoint. Mission is completed.")
                return self.neutral_command()
            self.leg_state.reset()

        if self.leg_state.mode is None:
            self.leg_state.mode = classify(
                self.tracker.previous,
                self.tracker.current,
                telemetry.true_wind_direction,
                running_threshold=self.config.running_threshold,
                reaching_threshold=self.config.reaching_threshold,
            )
            self.logger.info(f"Leg to waypoint {self.tracker.index} sailed as {self.leg_state.mode.value}")

        # 2. Calculate the rudder
        context = HeadingContext(
            position=position,
            leg_status=status,
            current=self.tracker.current,
            previous=self.tracker.previous,
            boat_heading=telemetry.heading,
            apparent_wind_heading=telemetry.apparent_wind_heading,
        )
        strategy = self.strategies[self.leg_state.mode]
        desired_heading = strategy.desired_heading(context, self.leg_state.tack_memory)
        rudder = self.rudder_mapper.compute_action(desired_heading)

        return PilotCommand(rudder=rudder, sail=self.config.sail)
