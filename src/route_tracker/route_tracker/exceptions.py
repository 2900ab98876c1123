"""Exceptions raised while following a route."""


class NavigationError(Exception):
    """Base class for route following errors."""


class EmptyRouteError(NavigationError, ValueError):
    """Raised when a route without any waypoint is loaded."""


class IndexExhaustedError(NavigationError):
    """Raised when a sequential advance is requested past the last waypoint."""


class MissionConfigError(NavigationError):
    """Raised when a mission file cannot be read or does not validate."""
