"""Tracks the progress of the boat along an ordered list of waypoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

from route_tracker.exceptions import EmptyRouteError
from route_tracker.exceptions import IndexExhaustedError
from route_tracker.utils import bearing_and_distance
from route_tracker.waypoint import Position
from route_tracker.waypoint import WayPoint


_logger = logging.getLogger(__name__)


class TrackerState(Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AdvanceStrategy(str, Enum):
    """How the next waypoint is chosen once the current one is reached."""

    SEQUENTIAL = "sequential"
    NEAREST = "nearest"


@dataclass(frozen=True)
class LegStatus:
    """Distance and bearing from a position to the current waypoint."""

    distance: float
    heading: float
    achieved: bool
    radius: float


class WaypointTracker:
    """Keeps the current waypoint of a route and reports the progress towards it.

    The route is never reordered. The only things that change are the ``achieved`` flags of the
    waypoints and the index of the current waypoint, both only when a leg is completed.

    Args:
        waypoints (list[WayPoint]): The route in navigation order. Must not be empty.
        strategy (AdvanceStrategy): Strategy used by :meth:`advance`.
        logger: Optional logger, the module logger is used otherwise.

    Raises:
        EmptyRouteError: If ``waypoints`` is empty.
    """

    def __init__(
        self,
        waypoints: list[WayPoint],
        strategy: AdvanceStrategy | str = AdvanceStrategy.SEQUENTIAL,
        logger=None,
    ) -> None:
        if len(waypoints) == 0:
            raise EmptyRouteError("A route needs at least one waypoint.")

        self.waypoints: list[WayPoint] = list(waypoints)
        self.strategy = AdvanceStrategy(strategy)
        self.logger = logger or _logger
        self._index = 0
        self._state = TrackerState.IN_PROGRESS

    @property
    def index(self) -> int:
        """Index of the current waypoint."""
        return self._index

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def completed(self) -> bool:
        return self._state is TrackerState.COMPLETED

    @property
    def is_last(self) -> bool:
        return self._index == len(self.waypoints) - 1

    @property
    def current(self) -> WayPoint:
        """Returns the waypoint that the boat is currently navigating to."""
        return self.waypoints[self._index]

    @property
    def previous(self) -> WayPoint:
        """Returns the waypoint the current leg starts from.

        The route is treated as cyclic here, so on the first waypoint this is the last one.
        """
        return self.waypoints[self._index - 1]

    def status(self, position: Position) -> LegStatus:
        """Returns the distance and heading from ``position`` to the current waypoint."""
        current = self.current
        heading, distance = bearing_and_distance(position, current)
        return LegStatus(
            distance=distance,
            heading=heading,
            achieved=distance < current.radius,
            radius=current.radius,
        )

    def advance(self, position: Position) -> LegStatus:
        """Moves to the next waypoint with the configured strategy."""
        if self.strategy is AdvanceStrategy.NEAREST:
            return self.advance_nearest(position)
        return self.advance_sequential(position)

    def advance_sequential(self, position: Position) -> LegStatus:
        """Marks the current waypoint as achieved and moves to the next one in route order.

        Raises:
            IndexExhaustedError: If the current waypoint is the last one. The tracker is then
                completed and stays on the last waypoint.
        """
        if self.completed:
            raise IndexExhaustedError("Route is already completed.")

        self.current.achieved = True
        if self.is_last:
            self._state = TrackerState.COMPLETED
            self.logger.info(f"Reached final waypoint {self._index}. Route is completed.")
            raise IndexExhaustedError(f"No waypoint after index {self._index}.")

        self._index += 1
        self.logger.info(f"Advancing to waypoint {self._index}: {self.current}")
        return self.status(position)

    def advance_nearest(self, position: Position) -> LegStatus:
        """Marks the current waypoint as achieved and moves to the waypoint closest to ``position``.

        All waypoints are considered, including the achieved ones. Ties go to the lowest index.
        """
        if self.completed:
            raise IndexExhaustedError("Route is already completed.")

        self.current.achieved = True
        distances = [waypoint.distance(position) for waypoint in self.waypoints]
        self._index = min(range(len(distances)), key=distances.__getitem__)
        self.logger.info(f"Advancing to nearest waypoint {self._index}: {self.current}")
        return self.status(position)
