"""Error types raised by the activity geometry engine.

Every error subclasses ValueError so callers that already guard against bad
input with ``except ValueError`` keep working.
"""


class MalformedPolylineError(ValueError):
    """Raised when an encoded polyline is truncated or contains invalid characters."""


class StreamLengthMismatchError(ValueError):
    """Raised when activity streams that must be index-aligned differ in length."""


class InvalidParameterError(ValueError):
    """Raised when a caller passes an out-of-range threshold, size or index."""


class InvalidColorError(ValueError):
    """Raised when a color string cannot be parsed for opacity changes."""


__all__ = [
    "MalformedPolylineError",
    "StreamLengthMismatchError",
    "InvalidParameterError",
    "InvalidColorError",
]
