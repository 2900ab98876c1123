"""Positions and waypoints that make up a route."""

from __future__ import annotations

import numpy as np
from typing import cast
from shapely.geometry import Point
from shapely.affinity import translate as shapely_translate


class Position:
    """A planar location in meters (``east``, ``north``)."""

    def __init__(self, east: float, north: float) -> None:
        self._east = float(east)
        self._north = float(north)

    @property
    def east(self) -> float:
        return self._east

    @property
    def north(self) -> float:
        return self._north

    def distance(self, other: Position) -> float:
        """Computes the Euclidean distance to another position.

        Args:
            other: The other position (or waypoint)

        Returns:
            The Euclidean distance in meters
        """
        return cast(float, np.linalg.norm(self.to_numpy() - other.to_numpy()))

    def translate(self, direction: float, distance: float) -> tuple[Position, np.ndarray]:
        """Translates this location.

        Args:
            direction: The direction angle in degrees (``0`` is north, clockwise)
            distance: The distance to translate in meters

        Returns:
            The translated position and the translation vector ``(x_offset, y_offset)`` in meters
        """
        x_offset = distance * np.sin(np.radians(direction))
        y_offset = distance * np.cos(np.radians(direction))

        translated = shapely_translate(Point(self.east, self.north), xoff=x_offset, yoff=y_offset)
        return Position(translated.x, translated.y), np.array([x_offset, y_offset])

    def to_numpy(self) -> np.ndarray:
        return np.array([self.east, self.north])

    def __eq__(self, value):
        return type(value) is Position and self.east == value.east and self.north == value.north

    def __hash__(self):
        return hash((self.east, self.north))

    def __str__(self) -> str:
        return f"Position({self.east}, {self.north})"

    __repr__ = __str__


class WayPoint(Position):
    """A route waypoint: a position with an arrival radius and a leg type.

    Only the ``achieved`` flag changes after a route is loaded, and only the
    tracker sets it.
    """

    def __init__(
        self,
        east: float,
        north: float,
        radius: float,
        type: str | None = None,  # pylint: disable=redefined-builtin
        achieved: bool = False,
        name: str | None = None,
    ) -> None:
        super().__init__(east, north)
        if radius <= 0:
            raise ValueError("Waypoint radius must be positive.")
        self.radius = float(radius)
        self.type = type
        self.achieved = achieved
        self.name = name

    @classmethod
    def from_coordinates(
        cls,
        east: float,
        north: float,
        radius: float,
        type: str | None = None,  # pylint: disable=redefined-builtin
        name: str | None = None,
    ) -> WayPoint:
        return cls(east, north, radius, type=type, name=name)

    def __eq__(self, value):
        return (
            isinstance(value, WayPoint) and \
                self.east == value.east and \
                self.north == value.north and \
                self.radius == value.radius and \
                self.type == value.type and \
                self.name == value.name
        )

    def __hash__(self):
        return hash((self.east, self.north, self.radius, self.type, self.name))

    def __str__(self) -> str:
        return f"WayPoint(({self.east}, {self.north}), r={self.radius}, achieved={self.achieved})"

    __repr__ = __str__
