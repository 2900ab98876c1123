"""This module contains the per-regime heading strategies and the tack memory they share."""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from dataclasses import field
import logging

from controller.modes import NavigationMode
from route_tracker.exceptions import NavigationError
from route_tracker.tracker import LegStatus
from route_tracker.utils import is_zero_length_leg
from route_tracker.utils import perpendicular_distance
from route_tracker.utils import side_of_line
from route_tracker.utils import wrap_degrees
from route_tracker.waypoint import Position
from route_tracker.waypoint import WayPoint


_logger = logging.getLogger(__name__)

OPTIMAL_RUNNING_ANGLE = 145.0
OPTIMAL_BEATING_ANGLE = 45.0
HYSTERESIS_FACTOR = 0.2


class UnsetTackMemoryError(NavigationError):
    """Raised when a tacking heading is requested before a tack side was chosen."""


@dataclass
class TackMemory:
    """The side of the leg line each tacking regime is steering towards.

    Each value is ``+1``, ``-1`` or ``None`` while no side has been chosen on the current leg.
    """

    running: int | None = None
    beating: int | None = None

    def reset(self) -> None:
        self.running = None
        self.beating = None


@dataclass
class LegState:
    """State that lives for one leg of the route: the cached regime and the tack memory.

    Owned by the pilot, one per boat. Reset whenever the current waypoint changes.
    """

    mode: NavigationMode | None = None
    tack_memory: TackMemory = field(default_factory=TackMemory)

    def reset(self) -> None:
        self.mode = None
        self.tack_memory.reset()


@dataclass(frozen=True)
class HeadingContext:
    """Everything a strategy needs to know about the current tick."""

    position: Position
    leg_status: LegStatus
    current: WayPoint
    previous: WayPoint
    boat_heading: float
    apparent_wind_heading: float


def optimal_relative_heading(tack: int | None, optimal_angle: float, apparent_wind_heading: float) -> float:
    """Relative heading that puts the apparent wind at ``tack * optimal_angle``.

    Raises:
        UnsetTackMemoryError: If no tack side is known.
    """
    if tack is None:
        raise UnsetTackMemoryError("Tack side is unset, cannot compute a tacking heading.")
    return wrap_degrees(tack * optimal_angle - apparent_wind_heading)


class HeadingStrategy(ABC):
    """Computes the heading change, relative to the boat, for one sailing regime."""

    mode: NavigationMode

    def __init__(self, logger=None) -> None:
        self.logger = logger or _logger

    @abstractmethod
    def desired_heading(self, context: HeadingContext, memory: TackMemory) -> float:  # pragma: no cover
        """Returns the desired relative heading in degrees, clockwise positive."""
        pass


class ReachingStrategy(HeadingStrategy):
    """Steers straight at the current waypoint."""

    mode = NavigationMode.REACHING

    def desired_heading(self, context: HeadingContext, memory: TackMemory) -> float:
        return context.leg_status.heading - context.boat_heading


class TackingStrategy(HeadingStrategy):
    """Zig-zags along the leg line, holding the apparent wind at a fixed angle.

    The side to steer towards is remembered in the tack memory. It only changes once the boat
    is at least ``hysteresis_factor * radius`` away from the leg line, so the boat does not
    keep switching tacks while it is sailing close to the line.

    Args:
        optimal_apparent_wind_angle: Apparent wind angle to hold, in degrees.
        hysteresis_factor: Band around the leg line, as a fraction of the waypoint radius.
        logger: Optional logger.
    """

    # +1 if the memory follows the side of the line, -1 if it takes the opposite side
    side_sign: int
    memory_field: str

    def __init__(self, optimal_apparent_wind_angle: float, hysteresis_factor: float = HYSTERESIS_FACTOR,
                 logger=None) -> None:
        super().__init__(logger)
        self.optimal_apparent_wind_angle = optimal_apparent_wind_angle
        self.hysteresis_factor = hysteresis_factor

    def update_tack(self, context: HeadingContext, memory: TackMemory) -> int:
        """Updates the tack memory for this regime and returns the side to steer towards."""
        side = side_of_line(context.position, context.current, context.previous)
        band = self.hysteresis_factor * context.current.radius
        distance_to_line = perpendicular_distance(context.position, context.current, context.previous)

        tack = getattr(memory, self.memory_field)
        # an unset memory always takes the side of the line, even inside the band
        if tack is None or distance_to_line >= band:
            new_tack = self.side_sign * side
            if tack is not None and new_tack != tack:
                self.logger.info(
                    f"Switching {self.mode.value} tack to {new_tack:+d}, {distance_to_line:.1f} m off the leg line"
                )
            tack = new_tack
            setattr(memory, self.memory_field, tack)
        return tack

    def desired_heading(self, context: HeadingContext, memory: TackMemory) -> float:
        # a zero-length leg has no line to tack along, head straight for the waypoint
        if is_zero_length_leg(context.previous, context.current):
            return context.leg_status.heading - context.boat_heading

        tack = self.update_tack(context, memory)
        return optimal_relative_heading(tack, self.optimal_apparent_wind_angle, context.apparent_wind_heading)


class RunningStrategy(TackingStrategy):
    """Gybes down a leg with the wind from behind."""

    mode = NavigationMode.RUNNING
    side_sign = 1
    memory_field = "running"

    def __init__(self, optimal_apparent_wind_angle: float = OPTIMAL_RUNNING_ANGLE,
                 hysteresis_factor: float = HYSTERESIS_FACTOR, logger=None) -> None:
        super().__init__(optimal_apparent_wind_angle, hysteresis_factor, logger)


class BeatingStrategy(TackingStrategy):
    """Tacks up a leg with the wind from ahead."""

    mode = NavigationMode.BEATING
    side_sign = -1
    memory_field = "beating"

    def __init__(self, optimal_apparent_wind_angle: float = OPTIMAL_BEATING_ANGLE,
                 hysteresis_factor: float = HYSTERESIS_FACTOR, logger=None) -> None:
        super().__init__(optimal_apparent_wind_angle, hysteresis_factor, logger)
