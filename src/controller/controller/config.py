"""Mission files: the route to sail and the pilot parameters."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
import yaml

from controller.heading_strategy import HYSTERESIS_FACTOR
from controller.heading_strategy import OPTIMAL_BEATING_ANGLE
from controller.heading_strategy import OPTIMAL_RUNNING_ANGLE
from controller.modes import REACHING_THRESHOLD
from controller.modes import RUNNING_THRESHOLD
from route_tracker.exceptions import MissionConfigError
from route_tracker.tracker import AdvanceStrategy
from route_tracker.waypoint import WayPoint


class WaypointConfig(BaseModel):
    """One waypoint record of a mission file."""

    east: float
    north: float
    radius: float
    type: str | None = None
    name: str | None = None

    @field_validator('radius')
    def validate_radius(cls, v):
        if not v > 0.0:
            raise ValueError('radius must be positive')
        return v

    def to_waypoint(self) -> WayPoint:
        return WayPoint(self.east, self.north, self.radius, type=self.type, name=self.name)


class PilotConfig(BaseModel):
    """
    Tuning parameters of the pilot. Angles are in DEGREES.

    Attributes:
        advance_strategy: How the next waypoint is picked once one is reached
        running_threshold: Smallest wind/leg angle sailed as a run
        reaching_threshold: Smallest wind/leg angle sailed as a reach
        optimal_running_angle: Apparent wind angle held while running
        optimal_beating_angle: Apparent wind angle held while beating
        hysteresis_factor: Tack hysteresis band as a fraction of the waypoint radius
        turn_rate_gain: Proportional gain from heading error to turn rate
        max_turn_rate: Turn rate saturation
        sail: Constant sail command passed through to the boat
    """

    advance_strategy: AdvanceStrategy = AdvanceStrategy.SEQUENTIAL
    running_threshold: float = RUNNING_THRESHOLD
    reaching_threshold: float = REACHING_THRESHOLD
    optimal_running_angle: float = OPTIMAL_RUNNING_ANGLE
    optimal_beating_angle: float = OPTIMAL_BEATING_ANGLE
    hysteresis_factor: float = Field(default=HYSTERESIS_FACTOR, ge=0.0)
    turn_rate_gain: float = 2.0
    max_turn_rate: float = Field(default=90.0, gt=0.0, le=90.0)
    sail: float = 0.0

    @field_validator('reaching_threshold')
    def validate_thresholds(cls, v, info):
        running = info.data.get('running_threshold')
        if running is not None and v > running:
            raise ValueError('reaching_threshold must not exceed running_threshold')
        return v


class MissionConfig(BaseModel):
    """A mission: the route in navigation order and the pilot parameters."""

    waypoints: list[WaypointConfig]
    pilot: PilotConfig = Field(default_factory=PilotConfig)

    @field_validator('waypoints')
    def validate_waypoints(cls, v):
        if len(v) == 0:
            raise ValueError('a mission needs at least one waypoint')
        return v

    def route(self) -> list[WayPoint]:
        """Builds fresh waypoints, so every pilot gets its own achieved flags."""
        return [waypoint.to_waypoint() for waypoint in self.waypoints]


def parse_mission(data: dict) -> MissionConfig:
    """Validates a mission given as plain data.

    Raises:
        MissionConfigError: If the data does not describe a valid mission.
    """
    try:
        return MissionConfig.model_validate(data)
    except ValidationError as e:
        raise MissionConfigError(f"Invalid mission: {e}") from e


def load_mission(path: str | Path) -> MissionConfig:
    """Reads and validates a YAML mission file.

    Raises:
        MissionConfigError: If the file cannot be read, is not valid YAML or not a valid mission.
    """
    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise MissionConfigError(f"Could not read mission file {path}: {e}") from e

    if not isinstance(data, dict):
        raise MissionConfigError(f"Mission file {path} must contain a mapping.")
    return parse_mission(data)
