from dataclasses import dataclass
from typing import ClassVar
from pydantic import BaseModel, field_validator

from route_tracker.waypoint import Position


class BoatTelemetry(BaseModel):
    """
    One tick of boat and environment readings. All angles are in DEGREES.

    Attributes:
        boat_east, boat_north: Position in meters (world frame)
        heading: Boat attitude heading in degrees, 0 = North, 90 = East
        apparent_wind_heading: Apparent wind relative to the boat in degrees (-180, 180],
            ``heading - apparent wind direction``, positive when the wind comes over port
        true_wind_direction: Direction the true wind comes FROM in degrees, 0 = North
        apparent_wind_speed: Apparent wind speed in m/s (optional)
        true_wind_speed: True wind speed in m/s (optional)
        roll: Roll angle in degrees (optional)
        speed: Boat speed over ground in m/s (optional)
    """

    boat_east: float | None = None                # meters
    boat_north: float | None = None               # meters
    heading: float | None = None                  # degrees
    apparent_wind_heading: float | None = None    # degrees, relative to boat
    true_wind_direction: float | None = None      # degrees
    apparent_wind_speed: float | None = None      # m/s
    true_wind_speed: float | None = None          # m/s
    roll: float | None = None                     # degrees
    speed: float | None = None                    # m/s

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        'boat_east', 'boat_north', 'heading', 'apparent_wind_heading', 'true_wind_direction',
    )

    def is_complete(self) -> bool:
        """True if every reading the pilot needs is present."""
        for key in self.REQUIRED_FIELDS:
            if getattr(self, key) is None:
                return False
        return True

    @property
    def position(self) -> Position:
        return Position(self.boat_east, self.boat_north)

    @field_validator('apparent_wind_speed', 'true_wind_speed', 'speed')
    def validate_speed(cls, v):
        if v is not None and v < 0.0:
            raise ValueError('speeds must be non-negative')
        return v


@dataclass(frozen=True)
class PilotCommand:
    """
    Command sent back to the boat for one tick.

    Attributes:
        rudder: Rudder actuation in [-1, 1], positive turns to starboard
        sail: Sail actuation, passed through unchanged
        action: Command kind, always ``"move"`` for steering commands
    """

    rudder: float
    sail: float = 0.0
    action: str = 'move'

    def to_dict(self) -> dict:
        return {'action': self.action, 'servoRudder': self.rudder, 'servoSail': self.sail}
