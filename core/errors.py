"""Domain-specific errors for Workout Map.

None of these are fatal: input errors are absorbed by the controller, and
geolocation errors only disable the map-driven workflow for the session.
"""


class WorkoutMapError(Exception):
    """Base exception for all Workout Map errors."""

    pass


class InputInvalid(WorkoutMapError, ValueError):
    """Raised when a form submission carries non-finite or non-positive values."""

    pass


class GeolocationUnavailable(WorkoutMapError):
    """Raised when the position provider fails or permission is denied."""

    pass


class MalformedPosition(GeolocationUnavailable):
    """Raised when a position arrives but its coordinates are unusable."""

    pass
